"""Puzzles over strings and character sequences."""

from __future__ import annotations

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for position, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = position
        best = max(best, position - start + 1)
    return best


def min_add_to_make_valid(s: str) -> int:
    """Return how many parentheses must be added to balance ``s``.

    Characters other than parentheses are ignored.
    """
    unmatched_close = 0
    open_count = 0
    for char in s:
        if char == "(":
            open_count += 1
        elif char == ")":
            if open_count:
                open_count -= 1
            else:
                unmatched_close += 1
    return unmatched_close + open_count


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; an empty string gives -1.

    Raises ValueError for a character that is not a Roman digit.
    """
    if not s:
        return -1
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman digit: {exc.args[0]!r}") from None

    total = 0
    skip = False
    for current, following in zip(values, values[1:] + [0]):
        if skip:
            skip = False
            continue
        if current >= following:
            total += current
        else:
            total += following - current
            skip = True
    return total


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for 1..n."""
    words = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            words.append("FizzBuzz")
        elif i % 3 == 0:
            words.append("Fizz")
        elif i % 5 == 0:
            words.append("Buzz")
        else:
            words.append(str(i))
    return words


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()