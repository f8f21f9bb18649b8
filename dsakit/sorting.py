"""Comparison and counting sorts that order values from largest to smallest."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "selection_sort", "insertion_sort", "counting_sort"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in descending order, sorted by repeated adjacent swaps."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] < items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in descending order, placing the largest left first."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        greatest = i
        for j in range(i + 1, n):
            if items[greatest] < items[j]:
                greatest = j
        items[i], items[greatest] = items[greatest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in descending order, inserting each into a sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        prev = i - 1
        while prev >= 0 and items[prev] < current:
            items[prev + 1] = items[prev]
            prev -= 1
        items[prev + 1] = current
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return integers in descending order by counting how often each occurs."""
    items = list(values)
    if not items:
        return []
    counts = Counter(items)
    ordered: list[int] = []
    for value in range(max(items), min(items) - 1, -1):
        ordered.extend([value] * counts[value])
    return ordered