import pytest

from algodrills.search import find_first, main


def test_empty_needle_found_at_start():
    assert find_first("abc", "") == 0


def test_needle_longer_than_haystack():
    assert find_first("ab", "abc") == -1


def test_not_found():
    assert find_first("11pfhspp", "zz") == -1


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("aaab", "ab"), ("mississippi", "issip"), ("xyz", "z"), ("ab", "ab")],
)
def test_result_is_first_match(haystack, needle):
    index = find_first(haystack, needle)
    assert index >= 0
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_main_output(capsys):
    assert main(["hello", "ll"]) == 0
    out = capsys.readouterr().out
    assert out == f"First occurence of the needle is at {find_first('hello', 'll')}\n"