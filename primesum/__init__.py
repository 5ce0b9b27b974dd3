"""
primesum: Hamiltonian cycles in prime-sum graphs.

The prime-sum graph of order n has vertices 1..n and an edge i -- j when
i + j is prime. The conjecture explored here is that it has a Hamiltonian
cycle for every even n >= 2. Two ways to check it:

    - backtracking search, warm-started from the cycle of the previous order
    - a closed-form cycle built from two primes p1, p2 with p1 + n and
      p2 + n also prime (no search at all)

Usage:
    python -m primesum --max 2000
    python -m primesum --max 20000 --threads 8 --divisor 4
    python -m primesum --max 100000 --fast
    python -m primesum --show 10
"""

from .core.sieve import primes_upto, is_member
from .core.hankel import Hankel
from .core.search import extend_cycle
from .construct.path import HamiltonianPath, hamiltonian_path_from_primes
from .construct.quadruplet import find_prime_pair, find_prime_quadruplet
from .driver import (
    STRATEGIES, Strategy, DriverConfig, RangeReport, RunSummary,
    grow_cycles, check_half_orders, run,
)
from .errors import (
    SearchError, ExhaustedSearch, InvalidCycleDetected, NoPrimePairFound,
    ConfigurationError,
)

__all__ = [
    "primes_upto", "is_member",
    "Hankel", "extend_cycle",
    "HamiltonianPath", "hamiltonian_path_from_primes",
    "find_prime_pair", "find_prime_quadruplet",
    "STRATEGIES", "Strategy", "DriverConfig", "RangeReport", "RunSummary",
    "grow_cycles", "check_half_orders", "run",
    "SearchError", "ExhaustedSearch", "InvalidCycleDetected", "NoPrimePairFound",
    "ConfigurationError",
]
