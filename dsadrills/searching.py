"""Linear and binary search over integer sequences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in the ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while high >= low:
        mid = low + (high - low) // 2
        if target > items[mid]:
            low = mid + 1
        elif target < items[mid]:
            high = mid - 1
        else:
            return mid
    return None


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Index of the first element equal to ``target``, or None if absent."""
    return next((index for index, item in enumerate(items) if item == target), None)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an array and a target from standard input and report where it is."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-search",
        description="Search for a number in an array read from standard input.",
    )
    parser.add_argument(
        "--linear",
        action="store_true",
        help="scan the array as entered instead of sorting it and bisecting",
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the number of elements in the array: ", end="")
        count = _next_int(tokens)
        if count < 0:
            raise ValueError(f"array size must not be negative: {count}")
        values = []
        for number in range(1, count + 1):
            print(f"Enter the element {number}: ", end="")
            values.append(_next_int(tokens))
        if not args.linear:
            values.sort()
        print("Enter the element to be searched: ", end="")
        target = _next_int(tokens)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    search = linear_search if args.linear else binary_search
    result = search(values, target)
    if result is None:
        print("Element not found")
    else:
        print(f"Element found at index: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())