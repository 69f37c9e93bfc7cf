"""Array problems: stock profits, pair sums, majorities, subarrays, water and products."""

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations
from math import inf, prod
from operator import mul


def _require(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name}() arg is an empty sequence")


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale, at least 0."""
    _require(prices, "max_profit")
    best_buy = prices[0]
    profit = 0
    for price in prices[1:]:
        profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit


def max_profit_prefix(prices: Sequence[int]) -> int:
    """Same as :func:`max_profit`, using the running minimum of earlier prices.

    An empty sequence gives 0.
    """
    cheapest_before = accumulate(prices, min, initial=inf)
    return max(0, max((p - c for p, c in zip(prices, cheapest_before)), default=0))


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair (i, j), i < j, whose values add to ``target``."""
    return next(
        ((i, j) for i, j in combinations(range(len(nums)), 2) if nums[i] + nums[j] == target),
        None,
    )


def pair_sum_sorted(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a pair adding to ``target`` with two pointers over ascending ``nums``."""
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def majority_element(nums: Sequence[int]) -> int | None:
    """Return the value occurring more than half the time, or None."""
    half = len(nums) // 2
    return next((value for value in nums if nums.count(value) > half), None)


def majority_element_moore(nums: Sequence[int]) -> int:
    """Return the majority candidate by Moore's voting; correct when a majority exists."""
    _require(nums, "majority_element_moore")
    votes = 0
    candidate = nums[0]
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def max_subarray_sum_brute(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run, summing every run."""
    _require(nums, "max_subarray_sum_brute")
    n = len(nums)
    return max(sum(nums[i : j + 1]) for i in range(n) for j in range(i, n))


def max_subarray_sum_cumulative(nums: Sequence[int]) -> int:
    """Return the largest contiguous sum using running totals from each start."""
    _require(nums, "max_subarray_sum_cumulative")
    return max(
        total for start in range(len(nums)) for total in accumulate(nums[start:])
    )


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest contiguous sum with Kadane's algorithm."""
    _require(nums, "max_subarray_sum")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def max_water_area(heights: Sequence[int]) -> int:
    """Return the most water held between two lines of the given heights."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        area = min(heights[left], heights[right]) * (right - left)
        best = max(best, area)
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def product_except_self_brute(nums: Sequence[int]) -> list[int]:
    """For each position, multiply every other element."""
    return [
        prod(value for j, value in enumerate(nums) if j != i) for i in range(len(nums))
    ]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, multiply every other element using prefix and suffix products."""
    if not nums:
        return []
    prefix = accumulate(nums[:-1], mul, initial=1)
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [p * s for p, s in zip(prefix, suffix)]


def trapped_water(heights: Sequence[int]) -> int:
    """Return the units of rain water held between bars of the given heights."""
    if not heights:
        return 0
    left = accumulate(heights[:-1], max, initial=-inf)
    right = list(accumulate(reversed(heights[1:]), max, initial=-inf))[::-1]
    return sum(max(0, min(l, r) - h) for l, r, h in zip(left, right, heights))


def reverse_array(items: Iterable[int]) -> list[int]:
    """Return a new list with the elements of ``items`` in reverse order."""
    return list(reversed(list(items)))