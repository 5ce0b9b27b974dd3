from .path import HamiltonianPath, hamiltonian_path_from_primes
from .quadruplet import find_prime_pair, find_prime_quadruplet

__all__ = [
    "HamiltonianPath", "hamiltonian_path_from_primes",
    "find_prime_pair", "find_prime_quadruplet",
]
