"""
Find the two primes the closed-form path needs.

For half-order h we want p1 < p2 <= 2h with

    p1 + 2h prime,   p2 + 2h prime,   gcd((p2 - p1)/2, h) = 1.

Together with p1 + 2h and p2 + 2h that is four primes, hence "quadruplet".
p1 = 1 is allowed as a stand-in prime: every step that would land on the
sum p1 = 1 instead lands on 2h + 1.
"""

from bisect import bisect_left
from math import gcd
from typing import Optional

from ..core.sieve import primes_upto, is_member


def find_prime_pair(half_size: int, primes: Optional[list] = None) -> Optional[tuple]:
    """
    First (p1, p2) in lexicographic order, or None.

    `primes` must contain every prime up to 4 * half_size; it is sieved
    when omitted.
    """
    if half_size < 2:
        raise ValueError(f"half_size must be at least 2, got {half_size}")
    if primes is None:
        primes = primes_upto(4 * half_size)
    n2 = 2 * half_size

    # 2h is even (and > 2), so this splits the primes into < 2h and > 2h
    split = bisect_left(primes, n2)
    small = primes[:split]
    large = primes[split:]

    for index, p1 in enumerate([1] + small):
        if not is_member(large, p1 + n2):
            continue
        # small[index:] is everything after p1 (all of `small` when p1 == 1)
        for p2 in small[index:]:
            if gcd((p2 - p1) // 2, half_size) != 1:
                continue
            if is_member(large, p2 + n2):
                return (p1, p2)
    return None


find_prime_quadruplet = find_prime_pair
