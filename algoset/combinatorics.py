"""Enumerations: palindrome partitions, balanced parentheses, combination sums."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Sequence


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces.

    Partitions are listed with shorter leading pieces first; an empty
    string has one partition, the empty one.
    """

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                for rest in split(end):
                    yield [piece, *rest]

    return list(split(0))


@lru_cache(maxsize=None)
def _balanced(n: int) -> tuple[str, ...]:
    if n == 0:
        return ("",)
    return tuple(
        f"({inside}){outside}"
        for split in range(n)
        for inside in _balanced(split)
        for outside in _balanced(n - 1 - split)
    )


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses.

    Strings are grouped by the size of the part inside the first pair,
    smallest first. ``n`` of 0 gives ``[""]``; a negative ``n`` gives ``[]``.
    """
    if n < 0:
        return []
    return list(_balanced(n))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset of candidates (each usable many times) summing to ``target``.

    Each combination is in non-increasing order, and combinations are listed
    with larger leading values first. Raises ValueError for a candidate below 1.
    """
    if any(value < 1 for value in candidates):
        raise ValueError("candidates must be positive")
    pool = sorted(candidates, reverse=True)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        for index, value in enumerate(pool[start:], start):
            if value <= remaining:
                chosen.append(value)
                search(index, remaining - value)
                chosen.pop()

    search(0, target)
    return found