import pytest

from algodrills.linkedlist import (
    ListNode,
    add_two_numbers,
    from_values,
    main,
    remove_duplicates,
)


def _as_int(head):
    digits = list(head) if head is not None else []
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", [[1], [9, 5, 5], [0, 0, 7, 3]])
def test_from_values_round_trip(values):
    assert list(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_iter_follows_links():
    head = ListNode(4, ListNode(2))
    assert list(head) == [4, 2]


def test_add_source_example():
    result = add_two_numbers(from_values([9, 5, 5]), from_values([5, 5]))
    assert list(result) == [4, 1, 6]


def test_add_final_carry_adds_digit():
    result = add_two_numbers(from_values([9, 9]), from_values([1]))
    assert list(result) == [0, 0, 1]


@pytest.mark.parametrize(
    "a, b",
    [([2, 4, 3], [5, 6, 4]), ([0], [0]), ([9, 9, 9, 9], [9]), ([1], [9, 9, 9])],
)
def test_add_matches_integer_sum(a, b):
    result = add_two_numbers(from_values(a), from_values(b))
    assert _as_int(result) == _as_int(from_values(a)) + _as_int(from_values(b))
    assert all(0 <= d <= 9 for d in result)


def test_add_is_symmetric():
    a, b = [3, 8, 1], [7, 7]
    left = add_two_numbers(from_values(a), from_values(b))
    right = add_two_numbers(from_values(b), from_values(a))
    assert list(left) == list(right)


def test_add_with_one_empty_list():
    assert list(add_two_numbers(None, from_values([5, 6]))) == [5, 6]


def test_add_both_empty():
    assert add_two_numbers(None, None) is None


def test_remove_duplicates_source_example():
    assert list(remove_duplicates(from_values([1, 1, 2, 3, 3]))) == [1, 2, 3]


def test_remove_duplicates_only_adjacent():
    assert list(remove_duplicates(from_values([1, 2, 1]))) == [1, 2, 1]


def test_remove_duplicates_keeps_head():
    head = from_values([4, 4, 4])
    result = remove_duplicates(head)
    assert result is head
    assert list(result) == [4]


def test_remove_duplicates_sorted_gives_unique():
    values = [0, 0, 1, 2, 2, 2, 5, 8, 8]
    assert list(remove_duplicates(from_values(values))) == sorted(set(values))


def test_remove_duplicates_empty():
    assert remove_duplicates(None) is None


def test_main_prints_both_operations(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("after operation :") == 2
    assert "Before operation :" in out