"""Singly linked lists and puzzles over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values``; an empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a linked list as a Python list."""
    return list(head) if head is not None else []


def delete_node(node: ListNode) -> None:
    """Remove ``node``'s value from its list without access to the head.

    Values after the node shift one place forward and the last node is
    dropped. A tail node cannot be removed this way and is left as it is.
    """
    previous: ListNode | None = None
    current = node
    while current.next is not None:
        following = current.next
        current.val, following.val = following.val, current.val
        previous = current
        current = following
    if previous is not None:
        previous.next = None


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the new head.

    Raises ValueError unless 1 <= n <= length of the list.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    lead = head
    for _ in range(n):
        if lead is None:
            raise ValueError("n is larger than the list")
        lead = lead.next
    if lead is None:
        return head.next

    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    removed = trail.next
    trail.next = removed.next
    removed.next = None
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return its new head."""
    reversed_head: ListNode | None = None
    while head is not None:
        following = head.next
        head.next = reversed_head
        reversed_head = head
        head = following
    return reversed_head