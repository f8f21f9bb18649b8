"""Number conversions, factorials, binomial coefficients and primality."""

from __future__ import annotations

from math import isqrt, prod

__all__ = [
    "bin_to_dec",
    "dec_to_bin",
    "factorial",
    "binomial",
    "is_prime",
    "primes_up_to",
]


def bin_to_dec(binary: int | str) -> int:
    """Return the value of a binary number written with the digits 0 and 1.

    The number may be given as a string of digits or as an integer whose
    decimal digits are the bits, e.g. ``1010``.
    """
    digits = str(binary).strip()
    if not digits or any(ch not in "01" for ch in digits):
        raise ValueError(f"not a binary number: {binary!r}")
    value = 0
    for ch in digits:
        value = value * 2 + (ch == "1")
    return value


def dec_to_bin(value: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value == 0:
        return "0"
    bits = []
    while value > 0:
        value, rem = divmod(value, 2)
        bits.append(str(rem))
    return "".join(reversed(bits))


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n ({n})")
    return prod(range(1, n + 1))


def binomial(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r) computed from factorials."""
    if n < 0 or r < 0 or r > n:
        raise ValueError(f"binomial coefficient needs 0 <= r <= n, got n={n}, r={r}")
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_prime(n: int) -> bool:
    """Return True if n is prime, testing divisors up to its square root."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def primes_up_to(limit: int) -> list[int]:
    """Return every prime from 2 to limit inclusive, in ascending order."""
    return [n for n in range(2, limit + 1) if is_prime(n)]