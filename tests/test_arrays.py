import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import (
    majority_element,
    majority_element_moore,
    max_profit,
    max_profit_prefix,
    max_subarray_sum,
    max_subarray_sum_brute,
    max_subarray_sum_cumulative,
    max_water_area,
    pair_sum,
    pair_sum_sorted,
    product_except_self,
    product_except_self_brute,
    reverse_array,
    trapped_water,
)

small_ints = st.lists(st.integers(-20, 20), min_size=1, max_size=12)
prices_lists = st.lists(st.integers(0, 1000), min_size=1, max_size=15)
heights_lists = st.lists(st.integers(0, 50), max_size=15)


def test_max_profit_example():
    assert max_profit([5, 7, 3, 8, 1, 12, 4]) == 11


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit_prefix([9, 7, 4, 1]) == 0


def test_max_profit_empty():
    with pytest.raises(ValueError):
        max_profit([])
    assert max_profit_prefix([]) == 0


@given(prices_lists)
def test_profit_implementations_agree(prices):
    profit = max_profit(prices)
    assert profit == max_profit_prefix(prices)
    assert profit >= 0
    if profit:
        assert any(
            prices[j] - prices[i] == profit
            for i in range(len(prices))
            for j in range(i + 1, len(prices))
        )


def test_pair_sum_example():
    nums = [2, 7, 11, 14]
    i, j = pair_sum(nums, 18)
    assert i < j
    assert nums[i] + nums[j] == 18


def test_pair_sum_first_pair_wins():
    assert pair_sum([1, 3, 2, 2], 4) == (0, 1)


def test_pair_sum_missing():
    assert pair_sum([1, 2, 3], 100) is None
    assert pair_sum_sorted([1, 2, 3], 100) is None


@given(st.lists(st.integers(-50, 50), min_size=2, max_size=12), st.data())
def test_pair_sum_sorted_finds_pair(values, data):
    nums = sorted(values)
    i, j = data.draw(st.tuples(st.integers(0, len(nums) - 2), st.integers(1, len(nums) - 1)))
    if i >= j:
        i, j = j - 1, j
    target = nums[i] + nums[j]
    found = pair_sum_sorted(nums, target)
    assert found[0] < found[1]
    assert nums[found[0]] + nums[found[1]] == target
    brute = pair_sum(nums, target)
    assert nums[brute[0]] + nums[brute[1]] == target


def test_majority_example():
    nums = [4, 2, 2, 2, 4]
    result = majority_element(nums)
    assert nums.count(result) > len(nums) // 2
    assert majority_element_moore(nums) == result


def test_majority_moore_example():
    nums = [3, 1, 3, 1, 1]
    assert majority_element_moore(nums) == majority_element(nums)


def test_majority_absent():
    assert majority_element([1, 2, 3, 4]) is None


def test_majority_moore_empty():
    with pytest.raises(ValueError):
        majority_element_moore([])


@given(st.integers(0, 5), st.lists(st.integers(0, 5), max_size=6), st.randoms())
def test_moore_finds_true_majority(value, others, rnd):
    nums = [value] * (len(others) + 1) + others
    rnd.shuffle(nums)
    assert majority_element_moore(nums) == value
    assert majority_element(nums) == value


def test_max_subarray_example():
    assert max_subarray_sum([-2, 1, 3, 4, -1]) == 8


@given(small_ints)
def test_subarray_implementations_agree(nums):
    best = max_subarray_sum(nums)
    assert max_subarray_sum_brute(nums) == best
    assert max_subarray_sum_cumulative(nums) == best
    assert best >= max(nums)


@given(st.lists(st.integers(-20, -1), min_size=1, max_size=10))
def test_all_negative_takes_largest(nums):
    assert max_subarray_sum(nums) == max(nums)


@given(st.lists(st.integers(0, 20), min_size=1, max_size=10))
def test_all_non_negative_takes_everything(nums):
    assert max_subarray_sum(nums) == sum(nums)


@pytest.mark.parametrize(
    "func", [max_subarray_sum, max_subarray_sum_brute, max_subarray_sum_cumulative]
)
def test_max_subarray_empty(func):
    with pytest.raises(ValueError):
        func([])


def test_max_water_documented_example():
    assert max_water_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_water_too_few_lines():
    assert max_water_area([]) == 0
    assert max_water_area([5]) == 0


@given(heights_lists)
def test_max_water_bounds(heights):
    area = max_water_area(heights)
    assert area == max_water_area(heights[::-1])
    if len(heights) >= 2:
        assert area >= min(heights[0], heights[-1]) * (len(heights) - 1)
        assert area <= max(heights) * (len(heights) - 1)


def test_product_documented_example():
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]
    assert product_except_self_brute([1, 2, 3, 4]) == [24, 12, 8, 6]


def test_product_empty():
    assert product_except_self([]) == []
    assert product_except_self_brute([]) == []


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=8))
def test_product_implementations_agree(nums):
    assert product_except_self(nums) == product_except_self_brute(nums)


@given(st.lists(st.integers(1, 9), min_size=1, max_size=8))
def test_product_times_self_is_total(nums):
    total = 1
    for value in nums:
        total *= value
    assert all(p * v == total for p, v in zip(product_except_self(nums), nums))


def test_trapped_water_example():
    assert trapped_water([4, 2, 0, 6, 3, 2, 5]) == 11


def test_trapped_water_basin():
    assert trapped_water([6, 0, 6]) == 6


def test_trapped_water_empty():
    assert trapped_water([]) == 0


@given(heights_lists)
def test_trapped_water_invariants(heights):
    water = trapped_water(heights)
    assert water >= 0
    assert water == trapped_water(heights[::-1])
    assert trapped_water(sorted(heights)) == 0


@given(st.lists(st.integers()))
def test_reverse_array_round_trip(items):
    reversed_items = reverse_array(items)
    assert reverse_array(reversed_items) == items
    assert reversed_items == items[::-1]


def test_reverse_array_leaves_input():
    items = [4, 6, 2, 7, 5, 9, 12]
    assert reverse_array(items) == [12, 9, 5, 7, 2, 6, 4]
    assert items == [4, 6, 2, 7, 5, 9, 12]