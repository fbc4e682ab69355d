"""Elementary comparison sorts and descending-order helpers."""

from __future__ import annotations

from collections.abc import Iterable
from operator import itemgetter
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, sorted by bubble sort."""
    result = list(items)
    n = len(result)
    swapped = False
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:  # type: ignore[operator]
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, sorted by insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        prev = i - 1
        while prev >= 0 and result[prev] > current:  # type: ignore[operator]
            result[prev + 1] = result[prev]
            prev -= 1
        result[prev + 1] = current
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, sorted by selection sort."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def sort_descending(items: Iterable[T]) -> list[T]:
    """Return the items in descending order."""
    return sorted(items, reverse=True)


def by_second_descending(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Return the pairs ordered by their second element, largest first."""
    return sorted(pairs, key=itemgetter(1), reverse=True)