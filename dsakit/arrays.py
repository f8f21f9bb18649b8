"""Classic one-dimensional array problems."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence

__all__ = [
    "has_duplicate",
    "max_profit",
    "max_subarray_sum",
    "subarray_sums",
    "max_subarray_sum_brute",
    "max_subarray_product",
    "pair_sum",
]


def _require_items(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} needs at least one element")


def has_duplicate(nums: Sequence[Hashable]) -> bool:
    """Return True if any value appears more than once."""
    return len(set(nums)) != len(nums)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell.

    The result is never negative: when no sale gains anything, it is 0.
    """
    best = 0
    cheapest: int | None = None
    for price in prices:
        if cheapest is not None:
            best = max(best, price - cheapest)
            cheapest = min(cheapest, price)
        else:
            cheapest = price
    return best


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    _require_items(arr, "max_subarray_sum")
    best = arr[0]
    current = 0
    for value in arr:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def subarray_sums(arr: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(start, end, total)`` for every contiguous run, end inclusive.

    Runs are produced by start index, then by end index.
    """
    for start in range(len(arr)):
        total = 0
        for end, value in enumerate(arr[start:], start):
            total += value
            yield start, end, total


def max_subarray_sum_brute(arr: Sequence[int]) -> int:
    """Return the largest contiguous-run sum by checking every run."""
    _require_items(arr, "max_subarray_sum_brute")
    return max(total for _, _, total in subarray_sums(arr))


def max_subarray_product(nums: Sequence[int]) -> int:
    """Return a running maximum product of contiguous values.

    The running product restarts after any point where it drops to zero
    or below, and the largest product seen on the way is returned.
    """
    _require_items(nums, "max_subarray_product")
    best = nums[0]
    current = 1
    for value in nums:
        current *= value
        best = max(best, current)
        if current <= 0:
            current = 1
    return best


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two indices in an ascending sequence whose values add to target.

    Returns ``(i, j)`` with ``i < j``, or None when no such pair exists.
    """
    start, end = 0, len(nums) - 1
    while start < end:
        total = nums[start] + nums[end]
        if total == target:
            return start, end
        if total > target:
            end -= 1
        else:
            start += 1
    return None