"""String puzzles: Roman numerals, happy strings, runs, anagrams and decoding."""

from __future__ import annotations

from collections import defaultdict
from itertools import groupby
from math import isqrt
from typing import Iterable, Sequence

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_FIVE = {"I": "V", "X": "L", "C": "D"}
_ROMAN_TEN = {"I": "X", "X": "C", "C": "M"}

# For each letter, the two letters that may follow it, in alphabetical order.
_HAPPY_NEXT = {"a": "bc", "b": "ac", "c": "ab"}


def _check_roman_digits(s: str) -> None:
    invalid = sorted(set(s) - _ROMAN_VALUES.keys())
    if invalid:
        raise ValueError(f"invalid Roman numeral digit {invalid[0]!r}")


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral, reading from the right.

    A digit smaller than the one after it is subtracted. Raises ValueError
    for an empty string or a character that is not a Roman digit.
    """
    if not s:
        raise ValueError("empty Roman numeral")
    _check_roman_digits(s)
    total = 0
    following = 0
    for digit in reversed(s):
        value = _ROMAN_VALUES[digit]
        total += -value if value < following else value
        following = value
    return total


def roman_to_int_grouped(s: str) -> int:
    """Return the value of a Roman numeral, reading groups from the left.

    Runs of I, X or C and the subtractive pairs (IV, IX, XL, XC, CD, CM)
    are read as one group. An empty string is worth 0; a character that is
    not a Roman digit raises ValueError.
    """
    _check_roman_digits(s)
    total = 0
    i = 0
    while i < len(s):
        digit = s[i]
        unit = _ROMAN_VALUES[digit]
        if digit in _ROMAN_FIVE:
            following = s[i + 1 : i + 2]
            if following == digit:
                run = 3 if s[i + 2 : i + 3] == digit else 2
                total += run * unit
                i += run
            elif following == _ROMAN_FIVE[digit]:
                total += 4 * unit
                i += 2
            elif following == _ROMAN_TEN[digit]:
                total += 9 * unit
                i += 2
            else:
                total += unit
                i += 1
        else:
            total += unit
            i += 1
    return total


def get_happy_string(n: int, k: int) -> str:
    """Return the k-th (1-based) happy string of length ``n`` in sorted order.

    A happy string uses only 'a', 'b' and 'c' and never repeats a letter
    twice in a row. Returns "" when there are fewer than ``k`` such strings;
    raises ValueError when ``n`` or ``k`` is below 1.
    """
    if n < 1:
        raise ValueError("length must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    width = n - 1
    lead, choices = divmod(k - 1, 1 << width)
    if lead > 2:
        return ""
    letters = ["abc"[lead]]
    for shift in reversed(range(width)):
        bit = choices >> shift & 1
        letters.append(_HAPPY_NEXT[letters[-1]][bit])
    return "".join(letters)


def dest_city(paths: Iterable[Sequence[str]]) -> str:
    """Return the first destination that is never a departure, or ""."""
    routes = [(path[0], path[1]) for path in paths]
    departures = {source for source, _ in routes}
    return next((target for _, target in routes if target not in departures), "")


def max_power(s: str) -> int:
    """Return the length of the longest run of one repeated character.

    Raises ValueError for an empty string.
    """
    if not s:
        raise ValueError("max_power() of an empty string")
    return max(sum(1 for _ in run) for _, run in groupby(s))


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups appear in the order their first word appears, and words keep
    their input order within a group.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def check_perfect_number(num: int) -> bool:
    """Tell whether ``num`` equals the sum of its proper divisors."""
    if num < 2:
        return False
    total = 1
    for divisor in range(2, isqrt(num) + 1):
        if num % divisor == 0:
            total += divisor
            if divisor * divisor < num:
                total += num // divisor
    return total == num


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def detect_capital_use(word: str) -> bool:
    """Tell whether capitals are used rightly: all capitals, none, or only the first.

    Only the ASCII letters A to Z count as capitals.
    """
    if _is_upper(word[:1] or " ") and _is_upper(word[1:2] or " "):
        return all(_is_upper(ch) for ch in word[2:])
    return not any(_is_upper(ch) for ch in word[1:])


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into as many parts as possible with no letter in two parts.

    Returns the part sizes; each part is grown until it holds the last
    occurrence of every letter in it.
    """
    sizes: list[int] = []
    left = 0
    while left < len(s):
        right = left
        i = left
        while i <= right:
            right = max(right, s.rfind(s[i]))
            i += 1
        sizes.append(right - left + 1)
        left = right + 1
    return sizes


def partition_labels_greedy(s: str) -> list[int]:
    """Same as :func:`partition_labels`, using precomputed last positions."""
    last = {ch: index for index, ch in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for index, ch in enumerate(s):
        end = max(end, last[ch])
        if index == end:
            sizes.append(end - start + 1)
            start = index + 1
    return sizes


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into ``text`` repeated k times.

    Digits not followed by '[' are kept as text. Raises ValueError for a
    '[' with no count before it or for unbalanced brackets.
    """
    stack: list[tuple[list[str], int]] = []
    current: list[str] = []
    digits = ""
    for ch in s:
        if "0" <= ch <= "9":
            digits += ch
        elif ch == "[":
            if not digits:
                raise ValueError("'[' without a repeat count")
            stack.append((current, int(digits)))
            current = []
            digits = ""
        else:
            current.append(digits)
            digits = ""
            if ch == "]":
                if not stack:
                    raise ValueError("unmatched ']'")
                outer, repeat = stack.pop()
                outer.append("".join(current) * repeat)
                current = outer
            else:
                current.append(ch)
    if stack:
        raise ValueError("unclosed '['")
    current.append(digits)
    return "".join(current)