"""Puzzles over lists, matrices and binary trees."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Optional, Sequence


@dataclass
class PeaksResult:
    """Positions and values of the peaks found in a sequence."""

    pos: list[int] = field(default_factory=list)
    peaks: list[int] = field(default_factory=list)


@dataclass
class Node:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair summing to target, or []."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def matrix_addition(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Add two matrices of the same shape element by element."""
    return [
        [x + y for x, y in zip(row_a, row_b, strict=True)]
        for row_a, row_b in zip(a, b, strict=True)
    ]


def real_numbers(n: int) -> int:
    """Count the numbers in 1..n divisible by none of 2, 3 and 5."""
    return n - (n // 2 + n // 3 + n // 5 + n // 30) + (n // 6 + n // 10 + n // 15)


def solve(arr: Sequence[int]) -> int:
    """Return the first element whose negation is absent, or 0."""
    present = set(arr)
    return next((value for value in arr if -value not in present), 0)


def tidy_number(n: int) -> bool:
    """Tell whether the digits of n never decrease from left to right."""
    return all(a <= b for a, b in pairwise(str(n)))


def move_zeroes(arr: Sequence[int]) -> list[int]:
    """Move every zero to the end, keeping the order of the others."""
    non_zero = [value for value in arr if value != 0]
    return non_zero + [0] * (len(arr) - len(non_zero))


def snail(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Read a matrix clockwise from the outside in."""
    rows = [list(row) for row in matrix]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        for row in rows:
            if row:
                result.append(row.pop())
        rows = [row[::-1] for row in reversed(rows)]
    return result


def pick_peaks(arr: Sequence[int]) -> PeaksResult:
    """Find local maxima, taking the start of a plateau as its position."""
    result = PeaksResult()
    position: Optional[int] = None
    for index, (previous, current) in enumerate(pairwise(arr), start=1):
        if current > previous:
            position = index
        elif current < previous and position is not None:
            result.pos.append(position)
            result.peaks.append(arr[position])
            position = None
    return result


def josephus_survivor(n: int, k: int) -> int:
    """Remove every k-th entry of 0..n in a circle and return the survivor."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    people = list(range(n + 1))
    index = 0
    while len(people) > 1:
        index = (index + k - 1) % len(people)
        del people[index]
    return people[0]


def queue_time(customers: Sequence[int], n: int) -> int:
    """Total time for a queue served by n tills, each taking the next customer."""
    if n < 1:
        raise ValueError("there must be at least one till")
    tills = [0] * n
    for duration in customers:
        heapq.heapreplace(tills, tills[0] + duration)
    return max(tills)


def delete_nth(arr: Sequence[int], n: int) -> list[int]:
    """Keep at most n occurrences of each element, preserving order."""
    counts: Counter[int] = Counter()
    result = []
    for element in arr:
        if counts[element] < n:
            result.append(element)
            counts[element] += 1
    return result


def sum_tree_values(root: Optional[Node]) -> int:
    """Sum the values of every node in the tree."""
    if root is None:
        return 0
    return root.value + sum_tree_values(root.left) + sum_tree_values(root.right)