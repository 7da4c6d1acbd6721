"""Puzzles over lists of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, islice


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, at least 0."""
    if len(prices) <= 1:
        return 0
    lowest = prices[0]
    best = prices[1] - lowest
    for previous, price in zip(prices[1:], prices[2:]):
        lowest = min(lowest, previous)
        best = max(best, price - lowest)
    return max(best, 0)


def flipgame(fronts: Sequence[int], backs: Sequence[int]) -> int:
    """Return the smallest card number not shown on both sides of any card.

    Returns 0 if every number is excluded. Raises ValueError if the two
    sequences differ in length.
    """
    if len(fronts) != len(backs):
        raise ValueError("fronts and backs must have the same length")
    excluded = {front for front, back in zip(fronts, backs) if front == back}
    candidates = (set(fronts) | set(backs)) - excluded
    return min(candidates, default=0)


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def pivot_index(nums: Sequence[int]) -> int:
    """Return the first index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which a full circuit can be driven, or -1.

    Raises ValueError if ``gas`` and ``cost`` differ in length.
    """
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    deficit = 0
    tank = 0
    start = 0
    for station, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        if tank < 0:
            deficit += tank
            tank = 0
            start = station + 1
    return start if deficit + tank >= 0 else -1


def h_index(citations: Iterable[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    ranked = sorted(citations, reverse=True)
    return sum(1 for rank, count in enumerate(ranked) if count > rank)


def is_monotonic(values: Sequence[int]) -> bool:
    """Return True if ``values`` never increases or never decreases.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("values must not be empty")
    direction = (values[-1] > values[0]) - (values[-1] < values[0])
    steps = zip(values, values[1:])
    if direction == 0:
        return all(a == b for a, b in steps)
    return all((b - a) * direction >= 0 for a, b in steps)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def remove_duplicates(nums: list[int]) -> int:
    """Keep at most two of each run of equal adjacent values, in place.

    The kept values fill the front of ``nums``; their count is returned and
    the rest of the list is left as it was.
    """
    kept = [value for _, run in groupby(nums) for value in islice(run, 2)]
    nums[: len(kept)] = kept
    return len(kept)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]``, i < j, of two values adding up to ``target``.

    The earliest index of a repeated value is used. Returns an empty list if
    there is no such pair.
    """
    first_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = target - value
        if other in first_index:
            return [first_index[other], index]
        first_index.setdefault(value, index)
    return []


def trap(height: Sequence[int]) -> int:
    """Return how much rain water is held between bars of the given heights."""
    if not height:
        return 0
    left, right = 0, len(height) - 1
    left_max, right_max = height[left], height[right]
    total = 0
    while right > left + 1:
        if left_max < right_max:
            left += 1
            if height[left] > left_max:
                left_max = height[left]
            else:
                total += left_max - height[left]
        else:
            right -= 1
            if height[right] > right_max:
                right_max = height[right]
            else:
                total += right_max - height[right]
    return total


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    low = high = best = nums[0]
    for value in nums[1:]:
        candidates = (value, value * low, value * high)
        low, high = min(candidates), max(candidates)
        best = max(best, high)
    return best