import pytest

from dskit.sstring import MAX_LENGTH, SString, get_next

S1 = "acabaabaabcacaabc"
S2 = "abaabcac"


def test_construct_and_str():
    s = SString(S1)
    assert str(s) == S1
    assert len(s) == len(S1)


def test_too_long_rejected():
    with pytest.raises(ValueError):
        SString("x" * (MAX_LENGTH + 1))


def test_substring_matches_slice():
    assert SString(S1).substring(3, 5) == S1[2:7]


@pytest.mark.parametrize("pos,length", [(0, 1), (18, 0), (3, -1), (15, 4)])
def test_substring_out_of_range(pos, length):
    with pytest.raises(IndexError):
        SString(S1).substring(pos, length)


@pytest.mark.parametrize(
    "text,pattern",
    [(S1, S2), (S1, "cac"), (S1, "zzz"), ("aaaab", "aab"), ("abcabd", "abd"), ("a", "a")],
)
def test_index_and_kmp_agree_with_find(text, pattern):
    s = SString(text)
    expected = text.find(pattern) + 1
    assert s.index(pattern) == expected
    assert s.index_kmp(pattern) == expected


def test_index_finds_pattern_at_reported_position():
    s = SString(S1)
    pos = s.index(S2)
    assert s.substring(pos, len(S2)) == S2


def test_index_from_later_position():
    s = SString(S1)
    first = s.index("cac")
    second = s.index("cac", first + 1)
    assert second == S1.find("cac", first) + 1
    assert s.index_kmp("cac", first + 1) == second


def test_index_position_outside_string_is_zero():
    s = SString("abc")
    assert s.index("a", 0) == 0
    assert s.index("a", 4) == 0
    assert s.index_kmp("a", 4) == 0


def test_get_next_textbook_pattern():
    assert get_next(S2) == [0, 1, 1, 2, 2, 3, 1, 2]


def test_get_next_first_value_zero_and_length():
    values = get_next("aaaa")
    assert len(values) == 4
    assert values[0] == 0
    assert all(v < i + 1 for i, v in enumerate(values))


def test_replace_matches_str_replace():
    s = SString(S1)
    count = s.replace("cac", "ded")
    assert str(s) == S1.replace("cac", "ded")
    assert count == S1.count("cac")


def test_replace_empty_pattern_rejected():
    with pytest.raises(ValueError):
        SString("abc").replace("", "x")


@pytest.mark.parametrize("a,b", [(S1, S2), (S2, S1), ("ab", "abc"), ("abc", "abc"), ("b", "a")])
def test_compare_sign(a, b):
    result = SString(a).compare(b)
    assert (result > 0) == (a > b)
    assert (result == 0) == (a == b)
    assert (result < 0) == (a < b)


def test_insert_full():
    s = SString("ad")
    assert s.insert(2, "bc") is True
    assert s == "abcd"


def test_insert_truncates():
    s = SString("a" * MAX_LENGTH)
    assert s.insert(1, "b") is False
    assert len(s) == MAX_LENGTH
    assert str(s).startswith("b")


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        SString("abc").insert(5, "x")


def test_delete_and_errors():
    s = SString("abcdef")
    s.delete(2, 3)
    assert s == "aef"
    with pytest.raises(IndexError):
        s.delete(0, 1)
    with pytest.raises(IndexError):
        s.delete(2, 5)


def test_concat():
    assert SString(S1).concat(S2) == S1 + S2
    long = SString("x" * 200).concat("y" * 100)
    assert len(long) == MAX_LENGTH


def test_clear_and_empty():
    s = SString("abc")
    assert not s.is_empty()
    s.clear()
    assert s.is_empty()
    assert len(s) == 0