"""Singly linked list nodes and the classic list manipulations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode(-1)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head):
    while head is not None:
        yield head
        head = head.next


def to_values(head) -> list[int]:
    """Return the values of an acyclic list from ``head`` onwards."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the reversed sum."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end and return the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def _reverse_segment(head: Optional[ListNode]) -> Optional[ListNode]:
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def _kth_node(node: Optional[ListNode], k: int) -> Optional[ListNode]:
    steps = k - 1
    while node is not None and steps > 0:
        steps -= 1
        node = node.next
    return node


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in groups of ``k``; a short final group is left as is."""
    node = head
    prev_tail = None
    while node is not None:
        kth = _kth_node(node, k)
        if kth is None:
            if prev_tail is not None:
                prev_tail.next = node
            break
        following = kth.next
        kth.next = None
        _reverse_segment(node)
        if node is head:
            head = kth
        else:
            prev_tail.next = kth
        prev_tail = node
        node = following
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places."""
    if head is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    tail.next = head
    new_tail = _kth_node(head, length - k)
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes also carry a random pointer."""
    copies: dict[Optional[RandomNode], Optional[RandomNode]] = {None: None}
    for node in _nodes(head):
        copies[node] = RandomNode(node.val)
    for node in _nodes(head):
        copy = copies[node]
        copy.next = copies[node.next]
        copy.random = copies[node.random]
    return copies[head]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def _merge(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.val < right.val:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _middle_for_split(head: ListNode) -> ListNode:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in ascending order by merge sort."""
    if head is None or head.next is None:
        return head
    middle = _middle_for_split(head)
    right = middle.next
    middle.next = None
    return _merge(sort_list(head), sort_list(right))


def get_intersection_node(head_a: Optional[ListNode], head_b: Optional[ListNode]) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next
        b = b.next
        if a is b:
            return a
        if a is None:
            a = head_b
        if b is None:
            b = head_a
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    return _reverse_segment(head)


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = _reverse_segment(slow)
    try:
        return all(
            left.val == right.val for left, right in zip(_nodes(head), _nodes(second))
        )
    finally:
        _reverse_segment(second)


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's place."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions."""
    if head is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = odd.next.next
        even.next = even.next.next
        odd = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the middle node (index len // 2) and return the head."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head