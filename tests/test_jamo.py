import pytest

from hangul_tools.domain.jamo import Choseong, Jongseong, Jungseong


def test_values_follow_index():
    assert Choseong(0).compatibility_value == "ㄱ"
    assert Choseong(0).conjoining_value == "\u1100"
    assert Jungseong(19).compatibility_value == "ㅢ"
    assert Jungseong(19).conjoining_value == "\u1174"
    assert Jongseong(4).compatibility_value == "ㄴ"
    assert Jongseong(4).conjoining_value == "\u11ab"


@pytest.mark.parametrize("factory,index", [
    (Choseong, -1), (Choseong, 19),
    (Jungseong, -1), (Jungseong, 21),
    (Jongseong, 0), (Jongseong, 28),
])
def test_out_of_range_index_raises(factory, index):
    with pytest.raises(ValueError):
        factory(index)


def test_from_conjoining():
    assert Choseong.from_conjoining("\u1112") == Choseong(18)
    assert Jungseong.from_conjoining("\u1161") == Jungseong(0)
    assert Jongseong.from_conjoining("\u11ab") == Jongseong(4)
    assert Choseong.from_conjoining("ㄱ") is None
    assert Jungseong.from_conjoining("\u1100") is None
    assert Jongseong.from_conjoining("\u11a7") is None


def test_compound_final_letters():
    lg = Jongseong(9)
    assert lg.compatibility_value == "ㄺ"
    assert lg.is_compound
    assert lg.letters() == ("ㄹ", "ㄱ")

    # double consonants are single letters
    ss = Jongseong(20)
    assert ss.compatibility_value == "ㅆ"
    assert not ss.is_compound
    assert ss.letters() == ("ㅆ",)


def test_compound_vowel_letters():
    wa = Jungseong(9)
    assert wa.compatibility_value == "ㅘ"
    assert wa.is_compound
    assert wa.letters() == ("ㅗ", "ㅏ")
    assert Jungseong(0).letters() == ("ㅏ",)
