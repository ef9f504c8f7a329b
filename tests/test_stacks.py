import pytest

from dsakit.stacks import (
    LinkedStack,
    has_duplicate_parentheses,
    is_valid_parentheses,
    max_histogram_area,
    next_greater,
    push_at_bottom,
    reverse_stack,
    reverse_string,
    stock_span,
)


def test_linked_stack_is_lifo():
    stack = LinkedStack()
    for value in (3, 2, 1):
        stack.push(value)
    assert len(stack) == 3
    assert stack.peek() == 1
    assert [stack.pop() for _ in range(3)] == [1, 2, 3]
    assert len(stack) == 0


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_push_at_bottom():
    stack = [10, 20, 30]
    push_at_bottom(stack, 40)
    assert stack == [40, 10, 20, 30]


def test_push_at_bottom_empty():
    stack = []
    push_at_bottom(stack, 5)
    assert stack == [5]


@pytest.mark.parametrize("values", [[3, 2, 1], [], [7], [1, 2, 3, 4, 5]])
def test_reverse_stack(values):
    stack = list(values)
    reverse_stack(stack)
    assert stack == values[::-1]


def test_reverse_string():
    assert reverse_string("abcd") == "dcba"
    assert reverse_string("") == ""
    assert reverse_string(reverse_string("stack")) == "stack"


def test_stock_span_increasing_prices_span_everything():
    prices = [1, 2, 3, 4, 5]
    assert stock_span(prices) == [day + 1 for day in range(len(prices))]


def test_stock_span_decreasing_prices():
    assert stock_span([5, 4, 3]) == [1, 1, 1]


def test_histogram_example():
    assert max_histogram_area([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_single_bar_and_empty():
    assert max_histogram_area([7]) == 7
    assert max_histogram_area([]) == 0


def test_histogram_at_least_tallest_bar():
    heights = [4, 1, 9, 2, 3]
    assert max_histogram_area(heights) >= max(heights)


def test_next_greater_example():
    assert next_greater([6, 8, 0, 1, 3]) == [8, -1, 1, 3, -1]


def test_next_greater_decreasing_and_equal():
    assert next_greater([5, 4, 3]) == [-1, -1, -1]
    assert next_greater([2, 2]) == [-1, -1]
    assert next_greater([]) == []


@pytest.mark.parametrize(
    "text, expected",
    [("{[()]}", True), ("[{(]})", False), ("", True), ("((", False), (")", False)],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


@pytest.mark.parametrize(
    "text, expected", [("((a)+(b))", False), ("((a)+((b))", True), ("(a)", False)]
)
def test_has_duplicate_parentheses(text, expected):
    assert has_duplicate_parentheses(text) is expected


def test_has_duplicate_parentheses_unbalanced():
    with pytest.raises(ValueError):
        has_duplicate_parentheses("a+b)")