"""
Closed-form Hamiltonian path through the prime-sum graph of order 2h.

Name the odd vertices x_j = 2j - 1 and the even ones y_k = 2h - 2(k - 1),
for j, k in 1..h. Given primes p1 < p2 with p1 + 2h and p2 + 2h also prime,
write d1 = (p1 - 1)/2 and d2 = (p2 - 1)/2. Then

    x_j -- y_k  is an edge when  j - k = d1 (mod h)    (sum is p1 or p1 + 2h)
    y_k -- x_j  is an edge when  j - k = d2 (mod h)    (sum is p2 or p2 + 2h)

Alternating the two rules walks 1 -> y -> x -> y -> ... and the walk covers
all 2h vertices before coming back to 1 exactly when gcd(d2 - d1, h) = 1.
No search, no backtracking: O(h) total.
"""


class HamiltonianPath:
    """
    Iterator over the path, starting at vertex 1.

    Stops just before it would return to 1; since that last step is an edge
    too, the 2h vertices it yields also close into a cycle.
    """

    def __init__(self, prime1: int, prime2: int, half_size: int):
        if half_size < 1:
            raise ValueError(f"half_size must be at least 1, got {half_size}")
        for p in (prime1, prime2):
            if p < 1 or p % 2 == 0:
                raise ValueError(f"expected 1 or an odd prime, got {p}")
        self.difference1 = (prime1 - 1) // 2
        self.difference2 = (prime2 - 1) // 2
        self.half_size = half_size
        self.current = 0
        self.exhausted = False

    def x_j(self, j: int) -> int:
        return 2 * j - 1

    def y_k(self, k: int) -> int:
        return 2 * self.half_size - 2 * (k - 1)

    def j_from_x_j(self, x_j: int) -> int:
        return (x_j + 1) // 2

    def k_from_y_k(self, y_k: int) -> int:
        return self.half_size - y_k // 2 + 1

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self.exhausted:
            raise StopIteration
        h = self.half_size
        if self.current == 0:
            self.current = 1
            return 1
        if self.current % 2 == 1:
            j = self.j_from_x_j(self.current)
            k = (j + h - self.difference1) % h or h
            nxt = self.y_k(k)
        else:
            k = self.k_from_y_k(self.current)
            j = (k + self.difference2) % h or h
            nxt = self.x_j(j)
        if nxt == 1:
            self.exhausted = True
            raise StopIteration
        self.current = nxt
        return nxt

    def __length_hint__(self) -> int:
        return 2 * self.half_size


def hamiltonian_path_from_primes(prime1: int, prime2: int, half_size: int) -> HamiltonianPath:
    """The closed-form path for (p1, p2, h); lazy, single-use."""
    return HamiltonianPath(prime1, prime2, half_size)
