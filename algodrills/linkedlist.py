"""Singly linked lists of digits: addition and removal of repeated values."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _values(head: ListNode | None) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_duplicates(head: ListNode | None) -> ListNode | None:
    """Unlink nodes whose value repeats the one before them, in place."""
    if head is None:
        return None
    distinct = head
    node = head.next
    while node is not None:
        if node.val != distinct.val:
            distinct.next = node
            distinct = node
        node = node.next
    distinct.next = None
    return head


def _format(head: ListNode | None) -> str:
    return " ".join(str(value) for value in _values(head))


def main(argv: list[str] | None = None) -> int:
    """Show both list operations on sample lists."""
    parser = argparse.ArgumentParser(description="Linked list drills.")
    parser.parse_args(argv)

    l1 = from_values([9, 5, 5])
    l2 = from_values([5, 5])
    print(_format(l1))
    print(_format(l2))
    print("after operation :")
    print(_format(add_two_numbers(l1, l2)))

    head = from_values([1, 1, 2, 3, 3])
    print("Before operation :")
    print(_format(head))
    print("after operation :")
    print(_format(remove_duplicates(head)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())