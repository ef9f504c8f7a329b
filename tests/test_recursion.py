import math

import pytest

from dsakit.recursion import (
    Move,
    binary_search,
    binary_strings,
    count_same_end_substrings,
    find_all_occurrences,
    friends_pairing,
    power,
    remove_duplicates,
    tiling_ways,
    tower_of_hanoi,
)


@pytest.mark.parametrize("x,n", [(2, 10), (3, 0), (5, 7), (-2, 5), (7, 1)])
def test_power_matches_builtin(x, n):
    assert power(x, n) == pow(x, n)


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_tiling_base_cases():
    assert tiling_ways(0) == 1
    assert tiling_ways(1) == 1


@pytest.mark.parametrize("n", range(2, 15))
def test_tiling_recurrence(n):
    assert tiling_ways(n) == tiling_ways(n - 1) + tiling_ways(n - 2)


def test_tiling_rejects_negative():
    with pytest.raises(ValueError):
        tiling_ways(-1)


def test_binary_search_finds_every_element():
    items = [1, 2, 3, 4, 5, 6, 7]
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


def test_binary_search_missing_key():
    assert binary_search([1, 2, 3, 4, 5, 6, 7], 10) == -1
    assert binary_search([], 3) == -1


def test_binary_strings_of_three():
    assert binary_strings(3) == ["000", "001", "010", "100", "101"]


@pytest.mark.parametrize("n", range(0, 8))
def test_binary_strings_invariants(n):
    result = binary_strings(n)
    assert all(len(s) == n and "11" not in s for s in result)
    assert len(set(result)) == len(result)
    assert result == sorted(result)


def test_binary_strings_rejects_negative():
    with pytest.raises(ValueError):
        binary_strings(-2)


def test_count_substrings_distinct_characters():
    assert count_same_end_substrings("abcdef") == 6
    assert count_same_end_substrings("") == 0


def test_count_substrings_grows_with_repetition():
    text = "abacsdcs"
    assert count_same_end_substrings(text) > len(set(text))
    assert count_same_end_substrings(text + "a") > count_same_end_substrings(text)


def test_find_all_occurrences():
    items = [3, 2, 4, 5, 6, 2, 4, 7, 2, 2, 4, 4]
    found = find_all_occurrences(items, 4)
    assert all(items[i] == 4 for i in found)
    assert len(found) == items.count(4)
    assert found == sorted(found)
    assert find_all_occurrences(items, 99) == []


def test_friends_pairing_values():
    assert friends_pairing(1) == 1
    assert friends_pairing(2) == 2
    assert friends_pairing(5) == 26


def test_friends_pairing_rejects_zero():
    with pytest.raises(ValueError):
        friends_pairing(0)


def test_remove_duplicates_example():
    assert remove_duplicates("appnacollege") == "apncoleg"


def test_remove_duplicates_invariants():
    text = "mississippi"
    result = remove_duplicates(text)
    assert len(set(result)) == len(result)
    assert set(result) == set(text)
    assert [text.index(ch) for ch in result] == sorted(text.index(ch) for ch in result)


def test_hanoi_single_disk():
    assert tower_of_hanoi(1, "A", "B", "C") == [Move(1, "A", "C")]


@pytest.mark.parametrize("n", range(1, 8))
def test_hanoi_moves_are_legal(n):
    moves = tower_of_hanoi(n, "A", "B", "C")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.destination] or pegs[move.destination][-1] > disk
        pegs[move.destination].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_hanoi_move_text():
    assert str(tower_of_hanoi(1, "A", "B", "C")[0]) == "transfer disk 1 from A to C"


def test_hanoi_rejects_zero_disks():
    with pytest.raises(ValueError):
        tower_of_hanoi(0, "A", "B", "C")


def test_tiling_and_pairing_are_finite_for_large_inputs():
    assert tiling_ways(90) > 0
    assert math.log10(friends_pairing(30)) > 10