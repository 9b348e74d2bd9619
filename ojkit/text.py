"""Puzzles over strings and numbers written as text."""

from __future__ import annotations

import re
from collections import Counter
from itertools import pairwise
from typing import Iterator, Mapping, Sequence

_REGION = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789.,:;-?! '()$%&\""
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_TRAILING_NUMBER = re.compile(r"([0-8]|[0-9]?9+)?\Z")
_UNITS = (
    ("year", 31536000),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def _stoi(text: str) -> int:
    """Parse the integer at the start of text, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group(1))


def _atoi(text: str) -> int:
    """Like _stoi, but yield 0 when there is no integer."""
    try:
        return _stoi(text)
    except ValueError:
        return 0


class Kata:
    """A reversible cipher over a fixed 77-character region."""

    region = _REGION
    _index = {char: i for i, char in enumerate(_REGION)}

    def _check(self, text: str) -> None:
        bad = set(text) - self._index.keys()
        if bad:
            raise ValueError(f"characters outside the region: {''.join(sorted(bad))!r}")

    @staticmethod
    def _swap_odd(text: str) -> str:
        return "".join(c.swapcase() if i % 2 else c for i, c in enumerate(text))

    def _mirror(self, char: str) -> str:
        return self.region[len(self.region) - 1 - self._index[char]]

    def encrypt(self, text: str) -> str:
        """Encrypt text; raise ValueError on characters outside the region."""
        if not text:
            return text
        self._check(text)
        swapped = self._swap_odd(text)
        size = len(self.region)
        rest = (
            self.region[(self._index[a] - self._index[b]) % size]
            for a, b in pairwise(swapped)
        )
        return self._mirror(swapped[0]) + "".join(rest)

    def decrypt(self, encrypted_text: str) -> str:
        """Undo encrypt; raise ValueError on characters outside the region."""
        if not encrypted_text:
            return encrypted_text
        self._check(encrypted_text)
        size = len(self.region)
        plain = [self._mirror(encrypted_text[0])]
        for char in encrypted_text[1:]:
            plain.append(self.region[(self._index[plain[-1]] - self._index[char]) % size])
        return self._swap_odd("".join(plain))


def format_duration(seconds: int) -> str:
    """Describe a number of seconds in years, days, hours, minutes and seconds."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    if seconds == 0:
        return "now"
    parts = []
    for name, size in _UNITS:
        count, seconds = divmod(seconds, size)
        if count:
            parts.append(f"{count} {name}{'s' if count > 1 else ''}")
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + " and " + parts[-1]


def increment_string(s: str) -> str:
    """Increment the number ending s, keeping its width, or append 1."""
    digits = _TRAILING_NUMBER.search(s).group(0)
    if not digits:
        return s + "1"
    return s[: -len(digits)] + str(int(digits) + 1).zfill(len(digits))


def scramble(s1: str, s2: str) -> bool:
    """Tell whether the letters of s1 can be rearranged to form s2."""
    return not (Counter(s2) - Counter(s1))


def next_bigger(n: int) -> int:
    """Return the next larger number with the same digits, or -1."""
    digits = list(str(n))
    pivot = max(
        (i for i, (a, b) in enumerate(pairwise(digits)) if b > a), default=None
    )
    if pivot is None:
        return -1
    pivot_digit = digits[pivot]
    right = digits[pivot + 1:]
    candidates = [c for c in right if c > pivot_digit]
    if not candidates:
        return -1
    replacement = min(candidates)
    right.remove(replacement)
    right.append(pivot_digit)
    right.sort()
    try:
        result = _stoi("".join(digits[:pivot] + [replacement] + right))
    except ValueError:
        return -1
    return -1 if result < n else result


def _rat_tokens(town: str, start: int) -> Iterator[tuple[int, str]]:
    """Walk the town, stepping over a whole rat at a time."""
    i = start
    while i < len(town):
        char = town[i]
        yield i, char
        i += 2 if char in "O~" else 1


def count_deaf_rats(town: str) -> int:
    """Count the rats that face away from the Pied Piper."""
    count = 0
    for piper, char in _rat_tokens(town, 0):
        if char == "P":
            break
        if char == "O":
            count += 1
    else:
        raise ValueError("the town has no piper")
    count += sum(1 for _, char in _rat_tokens(town, piper + 1) if char == "~")
    return count


def remove_duplicate_ids(obj: Mapping[str, Sequence[str]]) -> dict[str, list[str]]:
    """Keep each character only under the highest id that holds it."""
    seen: set[str] = set()
    cleaned: dict[str, list[str]] = {}
    for key in sorted(obj, key=_atoi, reverse=True):
        kept = []
        for char in obj[key]:
            if char not in seen:
                seen.add(char)
                kept.append(char)
        cleaned[key] = kept
    return dict(sorted(cleaned.items()))


def duplicate_encoder(word: str) -> str:
    """Write '(' for characters seen once and ')' for repeated ones, ignoring case."""
    lowered = [c.lower() for c in word]
    counts = Counter(lowered)
    return "".join("(" if counts[c] == 1 else ")" for c in lowered)


def _quantity(book: str) -> int:
    _, space, rest = book.partition(" ")
    return _stoi(rest) if space else 0


def stock_summary(articles: Sequence[str], categories: Sequence[str]) -> str:
    """Total the stock of each category, named by a book code's first letter."""
    if not articles or not categories:
        return ""
    wanted = set(categories)
    totals: Counter[str] = Counter()
    for book in articles:
        category = book[:1]
        quantity = _quantity(book)
        if category in wanted:
            totals[category] += quantity
    return " - ".join(f"({category} : {totals[category]})" for category in categories)


def whitespace_number(n: int) -> str:
    """Write n in the Whitespace language: sign, binary digits, newline."""
    bits = format(abs(n), "b").lstrip("0")
    sign = "\t" if n < 0 else " "
    return sign + bits.translate(str.maketrans("01", " \t")) + "\n"


def ip_to_int32(ip: str) -> int:
    """Convert a dotted IPv4 address to a 32-bit unsigned integer."""
    octets = ip.split(".")
    if octets[-1] == "":
        octets.pop()
    result = 0
    for octet in octets:
        result = result * 256 + _stoi(octet)
    return result & 0xFFFFFFFF


def uint32_to_ip(ip: int) -> str:
    """Convert a 32-bit unsigned integer to a dotted IPv4 address."""
    return ".".join(str(octet) for octet in (ip & 0xFFFFFFFF).to_bytes(4, "big"))