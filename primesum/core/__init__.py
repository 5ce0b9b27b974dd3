from .sieve import primes_upto, is_member
from .hankel import Hankel
from .search import extend_cycle

__all__ = [
    "primes_upto", "is_member",
    "Hankel",
    "extend_cycle",
]
