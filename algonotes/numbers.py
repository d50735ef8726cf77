"""Integer and floating-point arithmetic problems."""

from __future__ import annotations

from math import isqrt

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
MOD = 10**9 + 7


def divide(dividend: int, divisor: int) -> int:
    """Divide, truncating toward zero, with the result clamped to 32-bit signed range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return max(INT_MIN, min(INT_MAX, quotient))


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    exponent = n
    if exponent < 0:
        x = 1 / x
        exponent = -exponent
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= x
            exponent -= 1
        else:
            x *= x
            exponent //= 2
    return result


def count_primes(n: int) -> int:
    """Count the primes strictly less than ``n``."""
    if n < 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def count_good_numbers(n: int) -> int:
    """Count digit strings of length ``n`` with even digits at even indices and primes at odd ones, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    even_positions = (n + 1) // 2
    odd_positions = n // 2
    return pow(5, even_positions, MOD) * pow(4, odd_positions, MOD) % MOD


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits must flip to turn ``start`` into ``goal``."""
    if start < 0 or goal < 0:
        raise ValueError("start and goal must not be negative")
    return bin(start ^ goal).count("1")