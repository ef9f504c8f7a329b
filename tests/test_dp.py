import random

import pytest

from dsakit.dp import (
    fibonacci,
    fibonacci_sequence,
    rob_constant_space,
    rob_memoized,
    rob_tabulated,
)


def test_fibonacci_sequence_of_six():
    assert fibonacci_sequence(6) == [0, 1, 1, 2, 3, 5, 8]


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 40))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_sequence_consistent_with_fibonacci():
    sequence = fibonacci_sequence(25)
    assert len(sequence) == 26
    assert [fibonacci(i) for i in range(26)] == sequence


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_rob_example():
    assert rob_memoized([1, 2, 3, 1]) == 4
    assert rob_tabulated([1, 2, 3, 1]) == 4
    assert rob_constant_space([1, 2, 3, 1]) == 4


def test_rob_single_and_empty():
    assert rob_memoized([7]) == 7
    assert rob_tabulated([7]) == 7
    assert rob_constant_space([7]) == 7
    assert rob_memoized([]) == 0
    assert rob_tabulated([]) == 0
    assert rob_constant_space([]) == 0


def test_rob_two_elements_takes_larger():
    assert rob_memoized([3, 9]) == 9
    assert rob_tabulated([3, 9]) == 9
    assert rob_constant_space([3, 9]) == 9
    assert rob_memoized([9, 3]) == 9
    assert rob_tabulated([9, 3]) == 9
    assert rob_constant_space([9, 3]) == 9


def test_rob_implementations_agree():
    rng = random.Random(1234)
    for _ in range(200):
        nums = [rng.randint(0, 50) for _ in range(rng.randint(1, 30))]
        memo = rob_memoized(nums)
        assert rob_tabulated(nums) == memo
        assert rob_constant_space(nums) == memo
        assert max(nums) <= memo <= sum(nums)