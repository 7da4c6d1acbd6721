from collections import Counter
from itertools import combinations
from math import prod

import pytest

from algopuzzles.arrays import (
    can_complete_circuit,
    contains_duplicate,
    flipgame,
    h_index,
    is_monotonic,
    max_product,
    max_profit,
    move_zeroes,
    pivot_index,
    remove_duplicates,
    trap,
    two_sum,
)

PRICE_CASES = [[7, 1, 5, 3, 6, 4], [7, 6, 4, 3, 1], [2, 4, 1], [3, 3, 5, 0, 0, 3, 1, 4]]


@pytest.mark.parametrize("prices", [[], [5]])
def test_max_profit_too_short(prices):
    assert max_profit(prices) == 0


def test_max_profit_decreasing_is_zero():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_increasing():
    prices = [1, 3, 4, 8, 11]
    assert max_profit(prices) == prices[-1] - prices[0]


@pytest.mark.parametrize("prices", PRICE_CASES)
def test_max_profit_is_best_pair(prices):
    result = max_profit(prices)
    gains = [b - a for a, b in combinations(prices, 2)]
    assert all(result >= gain for gain in gains)
    assert result == 0 or result in gains


def test_flipgame_example():
    assert flipgame([1, 2, 4, 4, 7], [1, 3, 4, 1, 3]) == 2


def test_flipgame_all_excluded():
    assert flipgame([1, 2], [1, 2]) == 0


def test_flipgame_result_is_allowed():
    fronts, backs = [5, 3, 8, 3], [3, 9, 8, 3]
    result = flipgame(fronts, backs)
    assert result in fronts + backs
    assert all(not (f == b == result) for f, b in zip(fronts, backs))
    assert result == min(v for v in fronts + backs if v not in {8, 3})


def test_flipgame_length_mismatch():
    with pytest.raises(ValueError):
        flipgame([1, 2], [1])


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([1, 2, 3, 4])
    assert not contains_duplicate([])


def test_pivot_index_example():
    assert pivot_index([1, 7, 3, 6, 5, 6]) == 3


@pytest.mark.parametrize("nums", [[2, 1, -1], [0, 0, 0], [-1, -1, 0, 1, 1, 0], [4]])
def test_pivot_index_balances(nums):
    index = pivot_index(nums)
    assert index >= 0
    assert sum(nums[:index]) == sum(nums[index + 1:])
    assert all(sum(nums[:i]) != sum(nums[i + 1:]) for i in range(index))


@pytest.mark.parametrize("nums", [[], [1, 2, 3]])
def test_pivot_index_none(nums):
    assert pivot_index(nums) == -1


def test_can_complete_circuit_example():
    assert can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3


def test_can_complete_circuit_impossible():
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_can_complete_circuit_start_works():
    gas, cost = [5, 1, 2, 3, 4], [4, 4, 1, 5, 1]
    start = can_complete_circuit(gas, cost)
    assert start >= 0
    tank = 0
    for step in range(len(gas)):
        station = (start + step) % len(gas)
        tank += gas[station] - cost[station]
        assert tank >= 0


def test_can_complete_circuit_length_mismatch():
    with pytest.raises(ValueError):
        can_complete_circuit([1, 2], [1])


@pytest.mark.parametrize("citations", [[3, 0, 6, 1, 5], [1, 3, 1], [100], [10, 10, 10]])
def test_h_index_definition(citations):
    h = h_index(citations)
    assert sum(1 for c in citations if c >= h) >= h
    assert sum(1 for c in citations if c >= h + 1) < h + 1


def test_h_index_nothing_cited():
    assert h_index([]) == 0
    assert h_index([0, 0]) == 0


def test_h_index_leaves_input_alone():
    citations = [100, 50]
    h_index(citations)
    assert citations == [100, 50]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 3], True),
        ([6, 5, 4, 4], True),
        ([1, 3, 2], False),
        ([1, 2, 4, 5], True),
        ([1, 1, 1], True),
        ([1, 2, 1], False),
        ([5], True),
    ],
)
def test_is_monotonic(values, expected):
    assert is_monotonic(values) is expected


def test_is_monotonic_empty():
    with pytest.raises(ValueError):
        is_monotonic([])


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    original = list(nums)
    assert move_zeroes(nums) is None
    non_zero = [v for v in original if v != 0]
    assert nums[: len(non_zero)] == non_zero
    assert nums[len(non_zero):] == [0] * original.count(0)


def test_move_zeroes_keeps_same_list():
    nums = [0, 0, 4]
    alias = nums
    move_zeroes(nums)
    assert alias[-1] == 0 and alias[0] == 4


def test_remove_duplicates_sorted():
    nums = [0, 0, 1, 1, 1, 1, 2, 3, 3]
    original = list(nums)
    k = remove_duplicates(nums)
    counts = Counter(original)
    assert k == sum(min(c, 2) for c in counts.values())
    assert Counter(nums[:k]) == Counter({v: min(c, 2) for v, c in counts.items()})
    assert nums[:k] == sorted(nums[:k])


def test_remove_duplicates_counts_adjacent_runs_only():
    nums = [1, 2, 1]
    assert remove_duplicates(nums) == len(nums)
    assert nums == [1, 2, 1]


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0
    assert nums == []


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, -2, -3, -4, -5], -8)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([], 3) == []
    assert two_sum([1, 2], 10) == []


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@pytest.mark.parametrize("height", [[], [4], [1, 2, 3, 4], [4, 3, 2, 1], [2, 5, 2]])
def test_trap_holds_nothing(height):
    assert trap(height) == 0


@pytest.mark.parametrize("wall", [1, 3, 8])
def test_trap_single_basin(wall):
    assert trap([wall, 0, wall]) == wall


def test_trap_is_mirror_invariant():
    height = [4, 2, 0, 3, 2, 5]
    assert trap(height) == trap(height[::-1])


def test_max_product_single():
    assert max_product([-4]) == -4


def test_max_product_all_positive():
    nums = [2, 3, 1, 4]
    assert max_product(nums) == prod(nums)


@pytest.mark.parametrize("nums", [[2, 3, -2, 4], [-2, 0, -1], [-2, 3, -4], [0, 2], [-1, -3, -10, 0, 60]])
def test_max_product_is_best_run(nums):
    result = max_product(nums)
    runs = [prod(nums[i:j]) for i in range(len(nums)) for j in range(i + 1, len(nums) + 1)]
    assert result in runs
    assert all(result >= value for value in runs)


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])