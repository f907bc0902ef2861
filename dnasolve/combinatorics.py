"""Counting problems: rabbit populations, Mendelian odds and permutations."""

from __future__ import annotations

from collections.abc import Iterator

MAX_PERMUTATION_SIZE = 7


def rabbit_population(n: int, k: int) -> int:
    """Rabbit pairs after ``n`` months when each adult pair bears ``k`` pairs a month."""
    older, newer = 1, 1
    for _ in range(2, n):
        older, newer = newer, newer + k * older
    return newer


def mortal_rabbits(n: int, m: int) -> int:
    """Rabbit pairs after ``n`` months when every rabbit lives ``m`` months."""
    if n + 1 < 1:
        return 0
    # births[j] is the number of pairs born in month j; months before 1 have none.
    births = [0] * (n + 2)
    births[1] = 1
    for month in range(2, n + 2):
        births[month] = sum(
            births[month - age] for age in range(2, m + 1) if month - age >= 1
        )
    return sum(births[month] for month in (n, n + 1) if month >= 1)


def dominant_probability(k: int, m: int, n: int) -> float:
    """Probability that two random mates give a dominant-phenotype child.

    ``k`` organisms are homozygous dominant, ``m`` heterozygous and ``n``
    homozygous recessive.
    """
    total = k + m + n
    if total < 2:
        raise ValueError("at least two organisms are needed")
    recessive = m * m + 4 * n * n + 4 * m * n - (4 * n - m)
    pairs = 4 * total * (total - 1)
    return 1 - recessive / pairs


def heap_permutations(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every permutation of 1..n in the order Heap's algorithm produces."""
    if not 1 <= n <= MAX_PERMUTATION_SIZE:
        raise ValueError(f"n must be between 1 and {MAX_PERMUTATION_SIZE}")
    items = list(range(1, n + 1))

    def permute(k: int) -> Iterator[tuple[int, ...]]:
        if k == 1:
            yield tuple(items)
            return
        for i in range(k - 1):
            yield from permute(k - 1)
            j = i if k % 2 == 0 else 0
            items[j], items[k - 1] = items[k - 1], items[j]
        yield from permute(k - 1)

    return permute(n)