"""Online-judge problems: one function per problem, working on parsed input."""

from __future__ import annotations

import math
import re
from collections import Counter, defaultdict
from typing import Iterable, Optional, Sequence

NOT_IN_DREAM = "Not in a dream"
UNKNOWN_WORD = "eh"
GRANTED = "GRANTED"
DENIED = "DENIED"
IGNORED = "IGNORED"

_DELIMITERS = re.compile(r'[ ,.:;!?"()\n\t]+')
_FOLDED, _FIST, _PALM_DOWN = range(3)


def count_non_decreasing_pairs(numbers: Sequence[int]) -> int:
    """Count pairs of positions i < j with numbers[i] <= numbers[j]."""
    return sum(
        1
        for index, current in enumerate(numbers)
        for earlier in numbers[:index]
        if current >= earlier
    )


def beiju_text(line: str) -> str:
    """Replay typing where '[' is Home, ']' is End and '<' is Backspace."""
    out: list[str] = []
    cursor = 0
    for char in line:
        if char == "<":
            if cursor:
                cursor -= 1
                del out[cursor]
        elif char == "[":
            cursor = 0
        elif char == "]":
            cursor = len(out)
        else:
            out.insert(cursor, char)
            cursor += 1
    return "".join(out)


def hand_game(steps: int, players: int) -> int:
    """Play the counting-out hand game and return the winning player."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    if players < 1:
        raise ValueError("there must be at least one player")
    hands = [[_FOLDED, player] for player in range(1, players + 1)]
    index = 0
    while len(hands) > 1:
        index = (index + steps - 1) % len(hands)
        hand = hands[index]
        if hand[0] == _FOLDED:
            hand[0] = _FIST
            hands.insert(index, [_FIST, hand[1]])
        elif hand[0] == _FIST:
            hand[0] = _PALM_DOWN
            index += 1
        else:
            del hands[index]
    return hands[0][1]


def _dream_name(command: str) -> str:
    _, space, rest = command.partition(" ")
    return rest.replace(" ", "") if space else ""


def dream_stack(commands: Iterable[str]) -> list[str]:
    """Run Sleep/Kick/Test commands and return what each Test reports."""
    stack: list[str] = []
    reports: list[str] = []
    for command in commands:
        if command == "Kick":
            if stack:
                stack.pop()
        elif command == "Test":
            reports.append(stack[-1] if stack else NOT_IN_DREAM)
        else:
            stack.append(_dream_name(command))
    return reports


def text_entropy(words: Iterable[str]) -> tuple[int, float, float]:
    """Return the word count, entropy and relative entropy (percent) of a text."""
    counts = Counter(
        piece
        for word in words
        for piece in _DELIMITERS.split(word.lower())
        if piece
    )
    total = sum(counts.values())
    if not total:
        raise ValueError("the text holds no words")
    log_total = math.log10(total)
    entropy = sum(n * (log_total - math.log10(n)) for n in counts.values()) / total
    relative = 100.0 * entropy / log_total if log_total else math.nan
    return total, entropy, relative


def translate(entries: Iterable[tuple[str, str]], words: Iterable[str]) -> list[str]:
    """Look each foreign word up in (english, foreign) entries."""
    dictionary = {foreign: english for english, foreign in entries}
    return [dictionary.get(word, UNKNOWN_WORD) for word in words]


def distinct_words(lines: Iterable[str]) -> list[str]:
    """Collect the distinct lower-case words, joining words hyphenated across lines."""
    words: set[str] = set()
    current: list[str] = []
    for line in lines:
        if not line:
            continue
        for char in line:
            if char == "-" or (char.isascii() and char.isalpha()):
                current.append(char.lower())
            else:
                words.add("".join(current))
                current.clear()
        if current:
            if current[-1] != "-":
                words.add("".join(current))
                current.clear()
            else:
                current.pop()
    words.discard("")
    return sorted(words)


def count_concatenations(prefixes: Iterable[str], suffixes: Iterable[str]) -> int:
    """Count the distinct strings formed by a prefix followed by a suffix."""
    prefixes = list(prefixes)
    return len({prefix + suffix for suffix in suffixes for prefix in prefixes})


def best_tracks(capacity: int, tracks: Sequence[int]) -> tuple[list[int], int]:
    """Choose tracks filling the capacity as fully as possible, first found wins."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best_total = -1
    best: tuple[int, ...] = ()

    def choose(total: int, chosen: tuple[int, ...], position: int) -> None:
        nonlocal best_total, best
        if total > capacity:
            return
        if total > best_total:
            best_total, best = total, chosen
        if position >= len(tracks):
            return
        choose(total + tracks[position], chosen + (position,), position + 1)
        choose(total, chosen, position + 1)

    choose(0, (), 0)
    return [tracks[index] for index in best], best_total


def anagram_deletions(first: Iterable, second: Iterable) -> int:
    """Count the items to delete from both so that they hold the same multiset."""
    a, b = Counter(first), Counter(second)
    return sum((a - b).values()) + sum((b - a).values())


class LockManager:
    """Grant shared and exclusive locks, blocking transactions that are refused."""

    def __init__(self) -> None:
        self._blocked: set[int] = set()
        self._exclusive: dict[int, int] = {}
        self._shared: defaultdict[int, set[int]] = defaultdict(set)

    def _deny(self, transaction: int) -> str:
        self._blocked.add(transaction)
        return DENIED

    def request(self, command: str, transaction: int, item: int) -> Optional[str]:
        """Handle an 'S' or 'X' request; other commands get no answer (None)."""
        if transaction in self._blocked:
            return IGNORED
        if command == "S":
            owner = self._exclusive.get(item)
            if owner is None:
                self._shared[item].add(transaction)
                return GRANTED
            if owner != transaction:
                return self._deny(transaction)
            return GRANTED
        if command == "X":
            if self._exclusive.get(item, transaction) != transaction:
                return self._deny(transaction)
            if any(holder != transaction for holder in self._shared.get(item, ())):
                return self._deny(transaction)
            self._exclusive.setdefault(item, transaction)
            return GRANTED
        return None