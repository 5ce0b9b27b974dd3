"""
Prime sieve and sorted-sequence membership.

Everything downstream (the Hankel model, the prime-pair finder) only ever
asks "is this number in the witness sequence?", so the sieve hands back a
plain sorted list and membership is a binary search over it.
"""

from bisect import bisect_left
from math import isqrt


def primes_upto(bound: int) -> list:
    """Sieve of Eratosthenes: all primes <= bound, ascending."""
    if bound < 0:
        raise ValueError(f"bound must be non-negative, got {bound}")
    if bound < 2:
        return []
    is_prime = bytearray([1]) * (bound + 1)
    is_prime[0:2] = b"\x00\x00"
    for i in range(2, isqrt(bound) + 1):
        if is_prime[i]:
            start = i * i
            is_prime[start::i] = bytes((bound - start) // i + 1)
    return [i for i, flag in enumerate(is_prime) if flag]


def is_member(sequence, value: int) -> bool:
    """Binary-search membership test. `sequence` must be sorted ascending."""
    i = bisect_left(sequence, value)
    return i < len(sequence) and sequence[i] == value
