from collections import deque

import pytest

from dsakit.queues import (
    LinkedQueue,
    TwoQueueStack,
    TwoStackQueue,
    first_non_repeating,
    interleave,
    reverse_first_k,
    reverse_queue,
)


def _drain(container):
    out = []
    while len(container):
        out.append(container.pop())
    return out


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
def test_queue_is_fifo(cls):
    q = cls()
    for value in (4, 3, 2, 1):
        q.push(value)
    assert len(q) == 4
    assert q.front() == 4
    assert _drain(q) == [4, 3, 2, 1]


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
def test_queue_empty_raises(cls):
    q = cls()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
def test_queue_reusable_after_emptying(cls):
    q = cls()
    q.push(1)
    assert q.pop() == 1
    q.push(2)
    q.push(3)
    assert q.front() == 2
    assert _drain(q) == [2, 3]


def test_two_queue_stack_is_lifo():
    s = TwoQueueStack()
    for value in (1, 2, 3):
        s.push(value)
    assert s.top() == 3
    assert _drain(s) == [3, 2, 1]


def test_two_queue_stack_empty_raises():
    s = TwoQueueStack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()


def test_first_non_repeating_example():
    assert first_non_repeating("aabccxb") == ["a", None, "b", "b", "b", "b", "x"]


def test_first_non_repeating_invariant():
    text = "abcabdcfe"
    result = first_non_repeating(text)
    assert len(result) == len(text)
    for i, ch in enumerate(result):
        if ch is not None:
            assert text[: i + 1].count(ch) == 1


def test_reverse_queue():
    q = deque([1, 2, 3, 4, 5])
    reverse_queue(q)
    assert list(q) == [5, 4, 3, 2, 1]
    reverse_queue(q)
    assert list(q) == [1, 2, 3, 4, 5]


def test_interleave_even():
    q = deque(range(1, 11))
    interleave(q)
    assert list(q) == [1, 6, 2, 7, 3, 8, 4, 9, 5, 10]


def test_interleave_halves_invariant():
    values = list("abcdefgh")
    q = deque(values)
    interleave(q)
    result = list(q)
    assert result[0::2] == values[:4]
    assert result[1::2] == values[4:]


@pytest.mark.parametrize("k", [0, 3, 8, 9])
def test_reverse_first_k(k):
    values = list(range(1, 10))
    q = deque(values)
    reverse_first_k(q, k)
    result = list(q)
    assert result[:k] == values[:k][::-1]
    assert result[k:] == values[k:]


@pytest.mark.parametrize("k", [-1, 4])
def test_reverse_first_k_invalid(k):
    with pytest.raises(ValueError):
        reverse_first_k(deque([1, 2, 3]), k)