"""Command line front end: read a judge problem's input and print its answers."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Iterator, Optional

from ojkit.judge import (
    LockManager,
    anagram_deletions,
    beiju_text,
    best_tracks,
    count_concatenations,
    count_non_decreasing_pairs,
    distinct_words,
    dream_stack,
    hand_game,
    text_entropy,
    translate,
)

_END_OF_TEXT = "****END_OF_TEXT****"
_END_OF_INPUT = "****END_OF_INPUT****"


class _Scanner:
    """Reads whitespace-separated words and whole lines from one text."""

    _WORD_PATTERN = re.compile(r"\S+")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> Optional[str]:
        match = self._WORD_PATTERN.search(self._text, self._pos)
        if match is None:
            self._pos = len(self._text)
            return None
        self._pos = match.end()
        return match.group()

    def integer(self) -> int:
        word = self.word()
        if word is None:
            raise ValueError("unexpected end of input")
        return int(word)

    def skip_char(self) -> None:
        self._pos = min(self._pos + 1, len(self._text))

    def line(self) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end == -1:
            line, self._pos = self._text[self._pos:], len(self._text)
        else:
            line, self._pos = self._text[self._pos:end], end + 1
        return line


def _pairs(scanner: _Scanner) -> Iterator[str]:
    for _ in range(scanner.integer()):
        size = scanner.integer()
        numbers = [scanner.integer() for _ in range(size)]
        yield str(count_non_decreasing_pairs(numbers))


def _beiju(scanner: _Scanner) -> Iterator[str]:
    cases = scanner.integer()
    scanner.skip_char()
    for _ in range(cases):
        yield beiju_text(scanner.line() or "")


def _hands(scanner: _Scanner) -> Iterator[str]:
    steps = scanner.integer()
    players = scanner.integer()
    yield str(hand_game(steps, players))


def _dreams(scanner: _Scanner) -> Iterator[str]:
    count = scanner.integer()
    scanner.skip_char()
    yield from dream_stack([scanner.line() or "" for _ in range(count)])


def _entropy(scanner: _Scanner) -> Iterator[str]:
    while (word := scanner.word()) is not None and word != _END_OF_INPUT:
        words = [word]
        while (word := scanner.word()) is not None and word != _END_OF_TEXT:
            words.append(word)
        count, entropy, relative = text_entropy(words)
        yield f"{count} {entropy:.1f} {relative:.0f}"


def _locks(scanner: _Scanner) -> Iterator[str]:
    first = scanner.line()
    if first is None:
        return
    fields = first.split()
    if not fields:
        raise ValueError("missing number of test cases")
    for case in range(int(fields[0])):
        if case:
            yield ""
        manager = LockManager()
        while (line := scanner.line()) is not None and not line.startswith("#"):
            if not line:
                continue
            numbers = line[2:].split()
            if len(numbers) < 2:
                raise ValueError(f"malformed request: {line!r}")
            verdict = manager.request(line[0], int(numbers[0]), int(numbers[1]))
            if verdict is not None:
                yield verdict


def _dictionary(scanner: _Scanner) -> Iterator[str]:
    entries = []
    while line := scanner.line():
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"malformed dictionary entry: {line!r}")
        entries.append((fields[0], fields[1]))
    yield from translate(entries, iter(scanner.word, None))


def _words(scanner: _Scanner) -> Iterator[str]:
    yield from distinct_words(iter(scanner.line, None))


def _concat(scanner: _Scanner) -> Iterator[str]:
    for case in range(1, scanner.integer() + 1):
        prefix_count = scanner.integer()
        suffix_count = scanner.integer()
        scanner.line()
        prefixes = [scanner.line() or "" for _ in range(prefix_count)]
        suffixes = [scanner.line() or "" for _ in range(suffix_count)]
        yield f"Case {case}: {count_concatenations(prefixes, suffixes)}"


def _tracks(scanner: _Scanner) -> Iterator[str]:
    while (word := scanner.word()) is not None:
        capacity = int(word)
        count = scanner.integer()
        tracks = [scanner.integer() for _ in range(count)]
        chosen, total = best_tracks(capacity, tracks)
        yield "".join(f"{track} " for track in chosen) + f"sum:{total}"


def _anagrams(scanner: _Scanner) -> Iterator[str]:
    if scanner.word() is None:
        return
    while (first_size := scanner.word()) is not None:
        second_size = scanner.word()
        if second_size is None:
            break
        first = [scanner.integer() for _ in range(int(first_size))]
        second = [scanner.integer() for _ in range(int(second_size))]
        yield str(anagram_deletions(first, second))


_SOLVERS: dict[str, Callable[[_Scanner], Iterator[str]]] = {
    "pairs": _pairs,
    "beiju": _beiju,
    "hands": _hands,
    "dreams": _dreams,
    "entropy": _entropy,
    "locks": _locks,
    "dictionary": _dictionary,
    "words": _words,
    "concat": _concat,
    "tracks": _tracks,
    "anagrams": _anagrams,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output."""
    solver = _SOLVERS.get(problem)
    if solver is None:
        raise ValueError(f"unknown problem: {problem!r}")
    return "".join(f"{line}\n" for line in solver(_Scanner(text)))


def main(argv: Optional[list[str]] = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="ojkit", description="Solve an online-judge problem read from stdin."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"ojkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())