"""Binary searches over an answer: spacing animals and splitting work into groups."""

from collections.abc import Iterable, Sequence


def _can_place(positions: Sequence[int], count: int, gap: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            if placed == count:
                return True
            last = position
    return False


def max_min_distance(positions: Iterable[int], count: int) -> int:
    """Return the largest minimum gap at which ``count`` animals fit in the stalls.

    Stalls are given by ``positions`` in any order. The result is 0 when the
    animals cannot be spaced, including when ``count`` is below 2.
    """
    stalls = sorted(positions)
    if not stalls:
        raise ValueError("at least one stall position is required")
    lo, hi = 0, stalls[-1]
    best = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if _can_place(stalls, count, mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def _fits(weights: Sequence[int], groups: int, limit: int) -> bool:
    used = 1
    load = 0
    for weight in weights:
        if weight > limit:
            return False
        if load + weight <= limit:
            load += weight
        else:
            used += 1
            load = weight
    return used <= groups


def _min_largest_group(weights: Iterable[int], groups: int) -> int:
    if groups < 1:
        raise ValueError(f"at least one group is required, got {groups}")
    items = list(weights)
    lo, hi = 0, sum(items)
    best = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if _fits(items, groups, mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def min_max_pages(pages: Iterable[int], students: int) -> int:
    """Return the smallest page load such that consecutive books go to ``students`` readers."""
    return _min_largest_group(pages, students)


def min_paint_time(boards: Iterable[int], painters: int) -> int:
    """Return the least time for ``painters`` to paint consecutive runs of ``boards``."""
    return _min_largest_group(boards, painters)