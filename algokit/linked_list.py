"""Singly linked lists and the classic problems on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MODULUS = 1_000_000_007


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        for node in _nodes(self):
            yield node.val


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; None when there are none."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def decimal_value(head: ListNode | None) -> int:
    """Read the list's values as the binary digits of a number, most significant first."""
    result = 0
    for node in _nodes(head):
        result = result * 2 + node.val
    return result


def intersection_node(head_a: ListNode | None, head_b: ListNode | None) -> ListNode | None:
    """The first node the two lists share, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    first, second = head_a, head_b
    while first is not second:
        first = head_b if first is None else first.next
        second = head_a if second is None else second.next
    return first


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """The middle node; the second of the two middles for an even length."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def multiply_lists(first: ListNode | None, second: ListNode | None) -> int:
    """Product of the two numbers whose decimal digits the lists hold, modulo 10**9 + 7."""

    def number(head: ListNode | None) -> int:
        result = 0
        for node in _nodes(head):
            result = (result * 10 + node.val) % MODULUS
        return result

    return number(first) * number(second) % MODULUS


def is_palindrome(head: ListNode | None) -> bool:
    """Whether the list reads the same forwards and backwards."""
    values = list(head) if head is not None else []
    return values == values[::-1]


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated neighbours from a sorted list in place."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding ``val``; return the new head."""
    while head is not None and head.val == val:
        head = head.next
    node = head
    while node is not None and node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def segregate(head: ListNode | None) -> ListNode | None:
    """Relink a list of 0s, 1s and 2s so the 0s come first, then 1s, then 2s."""
    if head is None or head.next is None:
        return head
    heads = [ListNode(-1), ListNode(-1), ListNode(-1)]
    tails = list(heads)
    for node in list(_nodes(head)):
        bucket = node.val if node.val in (0, 1) else 2
        tails[bucket].next = node
        tails[bucket] = node
    tails[2].next = None
    tails[1].next = heads[2].next
    tails[0].next = heads[1].next
    return heads[0].next