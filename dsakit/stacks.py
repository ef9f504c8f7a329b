"""Stacks and stack-based algorithms."""

from __future__ import annotations

from typing import Generic, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional["_Node[T]"]) -> None:
        self.value = value
        self.next = next_node


class LinkedStack(Generic[T]):
    """A stack kept as a singly linked chain of nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self._head is None:
            raise IndexError("peek at an empty stack")
        return self._head.value

    def __len__(self) -> int:
        return self._size


def push_at_bottom(stack: MutableSequence[T], value: T) -> None:
    """Place ``value`` beneath everything in ``stack`` (top is the list's end)."""
    if not stack:
        stack.append(value)
        return
    top = stack.pop()
    push_at_bottom(stack, value)
    stack.append(top)


def reverse_stack(stack: MutableSequence[T]) -> None:
    """Reverse ``stack`` in place using only pushes and pops."""
    if not stack:
        return
    top = stack.pop()
    reverse_stack(stack)
    push_at_bottom(stack, top)


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing and popping its characters."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))


def stock_span(prices: Sequence[int]) -> List[int]:
    """For each day, count the consecutive days up to it with price not above it."""
    spans: List[int] = []
    stack: List[int] = []
    for day, price in enumerate(prices):
        while stack and price >= prices[stack[-1]]:
            stack.pop()
        spans.append(day - stack[-1] if stack else day + 1)
        stack.append(day)
    return spans


def max_histogram_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside the histogram."""
    n = len(heights)
    smaller_left: List[int] = []
    stack: List[int] = []
    for i, height in enumerate(heights):
        while stack and height <= heights[stack[-1]]:
            stack.pop()
        smaller_left.append(stack[-1] if stack else -1)
        stack.append(i)

    smaller_right = [n] * n
    stack = []
    for i in reversed(range(n)):
        while stack and heights[i] <= heights[stack[-1]]:
            stack.pop()
        smaller_right[i] = stack[-1] if stack else n
        stack.append(i)

    return max(
        (
            height * (right - left - 1)
            for height, left, right in zip(heights, smaller_left, smaller_right)
        ),
        default=0,
    )


def next_greater(values: Sequence[int]) -> List[int]:
    """For each value, return the next strictly greater value to its right, or -1."""
    result = [-1] * len(values)
    stack: List[int] = []
    for i in reversed(range(len(values))):
        current = values[i]
        while stack and current >= stack[-1]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(current)
    return result


_OPENING = "([{"
_MATCHING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(text: str) -> bool:
    """Tell whether ``text`` is a correctly nested string of brackets."""
    stack: List[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
        elif stack and _MATCHING.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def has_duplicate_parentheses(text: str) -> bool:
    """Tell whether a balanced expression wraps something in redundant parentheses."""
    stack: List[str] = []
    for ch in text:
        if ch != ")":
            stack.append(ch)
            continue
        if not stack:
            raise ValueError("unbalanced parentheses")
        if stack[-1] == "(":
            return True
        while stack and stack[-1] != "(":
            stack.pop()
        if not stack:
            raise ValueError("unbalanced parentheses")
        stack.pop()
    return False