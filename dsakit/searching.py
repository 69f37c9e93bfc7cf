"""Searches over sequences; each returns an index, or None when nothing is found."""

from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in ascending ``items``, or None."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] < target:
            lo = mid + 1
        elif items[mid] > target:
            hi = mid - 1
        else:
            return mid
    return None


def binary_search_recursive(items: Sequence[int], target: int) -> int | None:
    """Recursive form of :func:`binary_search`."""

    def search(lo: int, hi: int) -> int | None:
        if lo > hi:
            return None
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            return search(mid + 1, hi)
        return search(lo, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[int], target: int) -> int | None:
    """Return the first index holding ``target``, or None."""
    return next((i for i, value in enumerate(items) if value == target), None)


def search_rotated(items: Sequence[int], target: int) -> int | None:
    """Return the index of ``target`` in a rotated ascending sequence, or None."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[lo] <= items[mid]:
            if items[lo] <= target < items[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif items[mid] < target <= items[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def peak_index(items: Sequence[int]) -> int | None:
    """Return the index of an interior element larger than both neighbours, or None."""
    lo, hi = 1, len(items) - 2
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid - 1] < items[mid] > items[mid + 1]:
            return mid
        if items[mid - 1] < items[mid]:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def single_element(items: Sequence[int]) -> int | None:
    """Return the one value that is not paired in a sorted sequence, or None.

    Raises ValueError for an empty sequence.
    """
    n = len(items)
    if n == 0:
        raise ValueError("single_element() arg is an empty sequence")
    if n == 1 or items[0] != items[1]:
        return items[0]
    if items[-1] != items[-2]:
        return items[-1]
    for prev, value, nxt in zip(items, items[1:], items[2:]):
        if prev != value != nxt:
            return value
    return None