"""Small numeric routines: body-mass index, quadratics, primes and digit lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Union

__all__ = [
    "bmi_category",
    "solve_quadratic",
    "primes_below",
    "divisor_count",
    "add_two_numbers",
    "nearly_equal",
]

Root = Union[float, complex]

DEFAULT_EPS = 0.0000001


def bmi_category(height_cm: float, weight_kg: float) -> str:
    """Classify the body-mass index of a person of the given height and weight.

    Returns one of "Underweight", "Normal", "Overweight" or "Obese".
    """
    if height_cm <= 0:
        raise ValueError(f"height must be positive, got {height_cm}")
    height_m = height_cm / 100.0
    bmi = weight_kg / (height_m * height_m)
    if 18.5 <= bmi <= 23.9:
        return "Normal"
    if bmi < 18.5:
        return "Underweight"
    if bmi <= 27.9:
        return "Overweight"
    return "Obese"


def solve_quadratic(a: float, b: float, c: float) -> tuple[Root, Root]:
    """Return the two roots of ``a*x**2 + b*x + c``, smaller real part first.

    Real roots are floats; a negative discriminant gives a conjugate pair of
    complex roots, the one with the negative imaginary part first. A zero
    ``a`` is not a quadratic and raises ValueError.
    """
    if a == 0:
        raise ValueError("Not quadratic equation")
    d = b * b - 4 * a * c
    if d == 0:
        x = -b / (2 * a)
        return x, x
    if d > 0:
        root = math.sqrt(d)
        return (-b - root) / (2 * a), (-b + root) / (2 * a)
    real = -b / (2 * a) if b != 0 else 0.0
    imag = math.sqrt(-d) / (2 * a)
    return complex(real, -imag), complex(real, imag)


def primes_below(limit: int) -> list[int]:
    """Return every prime smaller than ``limit``, by the sieve of Eratosthenes."""
    if limit <= 2:
        return []
    composite = bytearray(limit)
    for i in range(2, math.isqrt(limit - 1) + 1):
        if not composite[i]:
            composite[i * i :: i] = b"\x01" * len(range(i * i, limit, i))
    return [n for n in range(2, limit) if not composite[n]]


def divisor_count(n: int) -> int:
    """Return how many positive divisors ``n`` has."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    count = 1
    for p in primes_below(math.isqrt(n) + 1):
        if p * p > n:
            break
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        count *= exponent + 1
    if n > 1:
        count *= 2
    return count


def add_two_numbers(digits1: Sequence[int], digits2: Sequence[int]) -> list[int]:
    """Add two numbers stored as decimal digits, least significant digit first."""
    result: list[int] = []
    carry = 0
    for i in range(max(len(digits1), len(digits2))):
        a = digits1[i] if i < len(digits1) else 0
        b = digits2[i] if i < len(digits2) else 0
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def nearly_equal(x: float, y: float, eps: float = DEFAULT_EPS) -> bool:
    """Return True when ``x`` and ``y`` differ by less than ``eps``."""
    return abs(x - y) < eps