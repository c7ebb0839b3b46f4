"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    sentinel = ListNode()
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _iter_nodes(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself (tortoise and hare)."""
    if head is None or head.next is None:
        return False
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return False
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return True


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a: Optional[ListNode] = head_a
    b: Optional[ListNode] = head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_list_iterative(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place with a single pass and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists into one new sorted list; inputs are left untouched.

    Equal values are taken from the earlier list first.
    """
    streams = [(node.val for node in _iter_nodes(head)) for head in lists]
    return from_values(heapq.merge(*streams))