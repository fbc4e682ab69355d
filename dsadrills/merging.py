"""Merging of two sorted integer sequences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_END = object()


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    When two elements compare equal, the one from ``second`` is taken first.
    """
    merged: list[T] = []
    left, right = iter(first), iter(second)
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if a < b:  # type: ignore[operator]
            merged.append(a)  # type: ignore[arg-type]
            a = next(left, _END)
        else:
            merged.append(b)  # type: ignore[arg-type]
            b = next(right, _END)
    if a is not _END:
        merged.append(a)  # type: ignore[arg-type]
        merged.extend(left)
    if b is not _END:
        merged.append(b)  # type: ignore[arg-type]
        merged.extend(right)
    return merged


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return int(token)


def _read_array(tokens: Iterator[str], size_prompt: str, items_prompt: str) -> list[int]:
    print(size_prompt)
    size = _next_int(tokens)
    if size < 0:
        raise ValueError(f"array size must not be negative: {size}")
    print(items_prompt, end="")
    values = []
    for number in range(1, size + 1):
        print(f"Enter the element {number}: ", end="")
        values.append(_next_int(tokens))
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read two sorted arrays from standard input and print their merge."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-merge",
        description="Merge two sorted arrays read from standard input.",
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        first = _read_array(
            tokens,
            "Enter the size of the first array: ",
            "Enter elements of the first array (sorted): ",
        )
        second = _read_array(
            tokens,
            "Enter the size of the second array: ",
            "Enter elements of the second array: \n",
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    merged = merge_sorted(first, second)
    print("Merged Array: " + "".join(f"{value} " for value in merged))
    return 0


if __name__ == "__main__":
    sys.exit(main())