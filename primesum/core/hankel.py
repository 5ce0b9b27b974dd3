"""
The Hankel adjacency model.

A Hankel matrix is constant along every anti-diagonal, so entry (i, j)
depends only on i + j. For an n x n matrix that means 2n - 1 stored values
(the first row plus the last column) describe the whole thing.

The prime-sum graph of order n has vertices 1..n and an edge i -- j exactly
when i + j is prime, so its adjacency matrix is a Hankel matrix:

    0 1 0 1 0 1
    1 0 1 0 1 0
    0 1 0 1 0 0         prime_sum_matrix(6)
    1 0 1 0 0 0         diagonals = [0,1,0,1,0,1,0,0,0,1,0]
    0 1 0 0 0 1
    1 0 0 0 1 0

Convention (1-based): diagonals[k] == 1  iff  k + 2 is in the witness
sequence, where k = row + col - 2.
"""

from dataclasses import dataclass
from typing import Optional

from .sieve import primes_upto, is_member
from .search import extend_cycle


@dataclass
class Hankel:
    """n x n symmetric 0/1 matrix stored as its 2n - 1 anti-diagonal bits."""
    diagonals: bytearray
    size: int

    @classmethod
    def from_sequence(cls, n: int, sequence) -> "Hankel":
        """
        Build the order-n matrix from any sorted witness sequence.

        Every slot is looked up, so a 2 in the sequence gives vertex 1 a
        self-loop.
        """
        _check_order(n)
        diagonals = bytearray(2 * n - 1)
        for k in range(2 * n - 1):
            if is_member(sequence, k + 2):
                diagonals[k] = 1
        return cls(diagonals, n)

    @classmethod
    def prime_sum_matrix(cls, n: int, primes: Optional[list] = None) -> "Hankel":
        """
        Build the prime-sum graph of order n.

        Only odd sums are looked up (the sole even prime, 2, would be the
        self-loop on vertex 1), so even slots stay 0. `primes` must reach
        2n - 1; it is sieved when omitted.
        """
        _check_order(n)
        if primes is None:
            primes = primes_upto(2 * n - 1)
        diagonals = bytearray(2 * n - 1)
        for k in range(1, 2 * n - 1, 2):
            if is_member(primes, k + 2):
                diagonals[k] = 1
        return cls(diagonals, n)

    # --- Lookups ---

    def get(self, row: int, col: int) -> int:
        """Entry at (row, col), 1-based."""
        return self._at(row + col - 2)

    def get_0_based(self, row: int, col: int) -> int:
        """Entry at (row, col), 0-based."""
        return self._at(row + col)

    def _at(self, k: int) -> int:
        if k < 0 or k >= len(self.diagonals):
            raise IndexError(
                f"anti-diagonal {k} outside 0..{len(self.diagonals) - 1} "
                f"for order {self.size}"
            )
        return self.diagonals[k]

    def row(self, r: int) -> list:
        """Dense 1-based row r."""
        return [self.get(r, c) for c in range(1, self.size + 1)]

    def rows(self) -> list:
        return [self.row(r) for r in range(1, self.size + 1)]

    @property
    def parity_bipartite(self) -> bool:
        """True if only odd sums are edges: vertices alternate odd/even on any walk."""
        return not any(self.diagonals[0::2])

    # --- Paths and cycles ---

    def valid_path(self, path) -> bool:
        """Is every consecutive pair in `path` adjacent?"""
        for a, b in zip(path, path[1:]):
            if not self.get(a, b):
                return False
        return True

    def valid_cycle(self, cycle) -> bool:
        """A valid path whose last vertex is also adjacent to its first."""
        if not cycle:
            return False
        return self.valid_path(cycle) and self.get(cycle[0], cycle[-1]) != 0

    def vertex_degrees(self) -> list:
        """
        Degree of every vertex, recomputed on each call.

        The degree of vertex i is the sum of diagonals[i-1 : i-1+n]. The
        first window is summed directly; each later window adds the entry
        that enters on the right and drops the one that leaves on the left:

            diagonals = [0,1,0,1,0,1,0,0,0,1,0], n = 6
            vertex 1: 0+1+0+1+0+1 = 3
            vertex 2: 1+0+1+0+1+0 = 3
            vertex 3: 0+1+0+1+0+0 = 2
            ...
        """
        n = self.size
        d = self.diagonals
        window = sum(d[:n])
        degrees = [window]
        for i in range(n, len(d)):
            window += d[i] - d[i - n]
            degrees.append(window)
        return degrees

    # --- Search ---

    def extend_cycle(self, path: list, pos: int) -> bool:
        """Backtrack `path[pos:]` into a Hamiltonian cycle; see core.search."""
        return extend_cycle(self, path, pos)

    def is_hamiltonian(self) -> Optional[list]:
        """A Hamiltonian cycle starting at vertex 1, or None."""
        path = [0] * self.size
        path[0] = 1
        if self.extend_cycle(path, 1):
            return path
        return None


def _check_order(n: int):
    if n < 1:
        raise ValueError(f"graph order must be at least 1, got {n}")
