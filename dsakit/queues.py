"""Queues, a stack built from queues, and queue-based algorithms."""

from __future__ import annotations

from collections import Counter, deque
from typing import Any, Deque, List, Optional

from dsakit.linked_list import ListNode


class LinkedQueue:
    """A FIFO queue kept as a singly linked chain of nodes."""

    def __init__(self) -> None:
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """A FIFO queue built from two stacks; pushing costs O(n)."""

    def __init__(self) -> None:
        self._main: List[Any] = []
        self._spare: List[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main.pop()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main[-1]

    def __len__(self) -> int:
        return len(self._main)


class TwoQueueStack:
    """A LIFO stack built from two queues; pushing costs O(n)."""

    def __init__(self) -> None:
        self._main: Deque[Any] = deque()
        self._spare: Deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main.popleft()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


def first_non_repeating(text: str) -> List[Optional[str]]:
    """For each prefix of ``text``, its first character seen once so far, or None."""
    counts: Counter = Counter()
    waiting: Deque[str] = deque()
    result: List[Optional[str]] = []
    for ch in text:
        counts[ch] += 1
        waiting.append(ch)
        while waiting and counts[waiting[0]] > 1:
            waiting.popleft()
        result.append(waiting[0] if waiting else None)
    return result


def reverse_queue(queue: Deque[Any]) -> None:
    """Reverse ``queue`` in place through a stack."""
    stack = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())


def interleave(queue: Deque[Any]) -> None:
    """Interleave the first half of ``queue`` with its second half, in place."""
    half = len(queue) // 2
    first = deque(queue.popleft() for _ in range(half))
    while first:
        queue.append(first.popleft())
        queue.append(queue.popleft())


def reverse_first_k(queue: Deque[Any], k: int) -> None:
    """Reverse the first ``k`` items of ``queue`` in place, keeping the rest in order."""
    if not 0 <= k <= len(queue):
        raise ValueError("k must be between 0 and the length of the queue")
    stack = [queue.popleft() for _ in range(k)]
    while stack:
        queue.append(stack.pop())
    queue.rotate(-(len(queue) - k))