"""Classic comparison and counting sorts; each returns a new sorted list."""

from collections import Counter
from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs, stopping early when sorted."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front on each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the already sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        prev = i - 1
        while prev >= 0 and result[prev] > current:
            result[prev + 1] = result[prev]
            prev -= 1
        result[prev + 1] = current
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences between the minimum and maximum."""
    values = list(items)
    if not values:
        return []
    counts = Counter(values)
    return [
        value
        for value in range(min(values), max(values) + 1)
        for _ in range(counts[value])
    ]


def _check_012(values: list[int]) -> None:
    for value in values:
        if value not in (0, 1, 2):
            raise ValueError(f"only 0, 1 and 2 may be sorted, got {value!r}")


def dutch_national_flag(items: Iterable[int]) -> list[int]:
    """Sort a list of 0s, 1s and 2s in one pass with three pointers."""
    result = list(items)
    _check_012(result)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[high], result[mid] = result[mid], result[high]
            high -= 1
    return result


def sort_012(items: Iterable[int]) -> list[int]:
    """Sort a list of 0s, 1s and 2s by counting each value."""
    values = list(items)
    _check_012(values)
    counts = Counter(values)
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]