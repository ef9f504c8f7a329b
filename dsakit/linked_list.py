"""Singly linked lists: a list container and algorithms on chains of nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["ListNode"] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list that keeps both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = ListNode(value, self.head)
        if self.tail is None:
            self.tail = self.head
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if self.head is None:
            self.tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None or self.tail is None:
            raise IndexError("pop from an empty list")
        node = self.tail
        if self.head is self.tail:
            self.head = self.tail = None
        else:
            previous = self.head
            while previous.next is not self.tail:
                previous = previous.next
            previous.next = None
            self.tail = previous
        self._size -= 1
        return node.value

    def _node_at(self, position: int) -> ListNode:
        for index, node in enumerate(_walk(self.head)):
            if index == position:
                return node
        raise IndexError("invalid position")

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError("invalid position")
        if position == 0:
            self.push_front(value)
        elif position == self._size:
            self.push_back(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = ListNode(value, previous.next)
            self._size += 1

    def index(self, key: Any) -> int:
        """Return the index of the first node holding ``key``."""
        for index, value in enumerate(self):
            if value == key:
                return index
        raise ValueError(f"{key!r} is not in the list")

    def __contains__(self, key: Any) -> bool:
        return any(value == key for value in self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head, self.tail = reverse_list(self.head), self.head

    def remove_nth_from_end(self, n: int) -> Any:
        """Remove and return the ``n``-th value counted from the end (1 is the last)."""
        if not 1 <= n <= self._size:
            raise IndexError("position from the end is out of range")
        position = self._size - n
        if position == 0:
            return self.pop_front()
        previous = self._node_at(position - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        if target is self.tail:
            self.tail = previous
        target.next = None
        self._size -= 1
        return target.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self.head))

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a chain of nodes holding ``values`` and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list:
    """Return the values of an acyclic chain starting at ``head``."""
    return [node.value for node in _walk(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the chain starting at ``head`` loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_cycle(head: Optional[ListNode]) -> bool:
    """Break the loop in the chain, if any; return whether one was removed."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False
    assert fast is not None
    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next  # type: ignore[assignment]
        fast.next = None
    else:
        previous = fast
        while slow is not fast:
            slow = slow.next  # type: ignore[union-attr]
            previous = fast
            fast = fast.next  # type: ignore[assignment]
        previous.next = None
    return True


def split_at_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Cut the chain before its middle node and return the second half's head."""
    slow = fast = head
    previous: Optional[ListNode] = None
    while fast is not None and fast.next is not None:
        previous = slow
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    if previous is not None:
        previous.next = None
    return slow


def merge_sorted(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new sorted chain holding the values of two sorted chains."""
    dummy = ListNode(None)
    tail = dummy
    while left is not None and right is not None:
        if left.value <= right.value:
            tail.next = ListNode(left.value)
            left = left.next
        else:
            tail.next = ListNode(right.value)
            right = right.next
        tail = tail.next
    for rest in (left, right):
        for node in _walk(rest):
            tail.next = ListNode(node.value)
            tail = tail.next
    return dummy.next


def merge_sort(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the head of a sorted chain holding the values of ``head``."""
    if head is None or head.next is None:
        return head
    right_head = split_at_middle(head)
    return merge_sorted(merge_sort(head), merge_sort(right_head))


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the chain in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def zigzag(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reorder ``a1 a2 ... an`` into ``a1 an a2 an-1 ...`` in place."""
    if head is None or head.next is None:
        return head
    right = reverse_list(split_at_middle(head))
    left: Optional[ListNode] = head
    tail: Optional[ListNode] = None
    while left is not None and right is not None:
        next_left, next_right = left.next, right.next
        left.next = right
        right.next = next_left
        tail = right
        left, right = next_left, next_right
    if right is not None and tail is not None:
        tail.next = right
    return head