"""Binary-search-on-the-answer problems: cows in stalls, book allocation, painters."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def _lowest_true(low: int, high: int, predicate: Callable[[int], bool]) -> int | None:
    """Smallest value in [low, high] satisfying a monotone predicate."""
    answer = None
    while high >= low:
        mid = low + (high - low) // 2
        if predicate(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _highest_true(low: int, high: int, predicate: Callable[[int], bool]) -> int | None:
    """Largest value in [low, high] satisfying a monotone predicate."""
    answer = None
    while high >= low:
        mid = low + (high - low) // 2
        if predicate(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _fits(sizes: Sequence[int], workers: int, limit: int) -> bool:
    """Whether contiguous runs of ``sizes`` fit ``workers`` groups of at most ``limit``."""
    groups = 1
    load = 0
    for size in sizes:
        if size > limit:
            return False
        if load + size > limit:
            groups += 1
            load = size
        else:
            load += size
    return groups <= workers


def can_place_cows(stalls: Sequence[int], cows: int, distance: int) -> bool:
    """Whether ``cows`` fit in the ascending ``stalls`` at least ``distance`` apart."""
    if not stalls:
        raise ValueError("at least one stall is required")
    placed = 1
    last = stalls[0]
    for position in stalls:
        if position - last >= distance:
            placed += 1
            last = position
        if placed == cows:
            return True
    return False


def largest_min_distance(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance at which ``cows`` can be placed in ``stalls``."""
    if not stalls:
        raise ValueError("at least one stall is required")
    ordered = sorted(stalls)
    answer = _highest_true(
        0, ordered[-1] - ordered[0], lambda gap: can_place_cows(ordered, cows, gap)
    )
    if answer is None:
        raise ValueError(f"{cows} cows cannot be placed in {len(ordered)} stalls")
    return answer


def can_allocate(pages: Sequence[int], students: int, limit: int) -> bool:
    """Whether the books fit ``students`` readers with no one reading over ``limit`` pages."""
    return _fits(pages, students, limit)


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Minimum over allocations of the largest page count any student reads."""
    if students > len(pages):
        raise ValueError(f"{students} students cannot share {len(pages)} books")
    answer = _lowest_true(0, sum(pages), lambda limit: can_allocate(pages, students, limit))
    if answer is None:
        raise ValueError(f"books cannot be allocated to {students} students")
    return answer


def can_paint(boards: Sequence[int], painters: int, limit: int) -> bool:
    """Whether ``painters`` can paint all boards, each working at most ``limit``."""
    return _fits(boards, painters, limit)


def paint_partition(boards: Sequence[int], painters: int) -> int:
    """Minimum time for ``painters`` to paint contiguous runs of ``boards``."""
    answer = _lowest_true(
        max(boards, default=0), sum(boards), lambda limit: can_paint(boards, painters, limit)
    )
    if answer is None:
        raise ValueError(f"boards cannot be painted by {painters} painters")
    return answer