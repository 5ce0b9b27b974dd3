"""
Backtracking search for a Hamiltonian cycle in a prime-sum graph.

Two structural facts drive the pruning:

    1. Every edge joins an odd vertex to an even one (odd sums only), and
       path[0] is 1, so slot d holds an odd vertex when d is even and an
       even vertex when d is odd. Only that parity is ever tried at d.

    2. Candidates are tried largest first. When the driver grows a cycle
       from order n to n + 2m it keeps the prefix found for order n, which
       is made of small vertices; the new large vertices are the ones that
       need placing near the end.

The search keeps its own frame stack (one resume candidate per depth)
instead of recursing, so depth is bounded by the graph order and not by the
interpreter's recursion limit.
"""


def extend_cycle(matrix, path: list, pos: int) -> bool:
    """
    Fill path[pos:] so that path becomes a Hamiltonian cycle of `matrix`.

    path[:pos] is left untouched. Returns True with the cycle in `path`, or
    False with every slot from `pos` on reset to 0. Whatever was in
    path[pos:] on entry is discarded.

    Assumes `matrix` is parity-bipartite (see Hankel.parity_bipartite).
    """
    size = matrix.size
    if len(path) != size:
        raise ValueError(f"path has length {len(path)}, graph has order {size}")
    if not 1 <= pos <= size:
        raise ValueError(f"cursor {pos} outside 1..{size}")

    d = matrix.diagonals
    # placed[p][v]: vertex v sits in some slot of parity p below the cursor
    placed = (bytearray(size + 1), bytearray(size + 1))
    for slot in range(pos):
        v = path[slot]
        if not 1 <= v <= size:
            raise ValueError(f"path[{slot}] = {v} is not a vertex of order {size}")
        placed[slot % 2][v] = 1
    path[pos:] = [0] * (size - pos)

    depth = pos
    candidate = size - (depth + 1) % 2
    resume = []

    while True:
        if depth == size:
            # Adjacent to the start? d[a + b - 2] is get(a, b).
            if d[path[0] + path[size - 1] - 2]:
                return True
        else:
            prev = path[depth - 1] - 2
            used = placed[depth % 2]
            while candidate > 1:
                if d[prev + candidate] and not used[candidate]:
                    break
                candidate -= 2
            if candidate > 1:
                path[depth] = candidate
                used[candidate] = 1
                resume.append(candidate - 2)
                depth += 1
                candidate = size - (depth + 1) % 2
                continue

        # Dead end: step back one slot.
        if depth == pos:
            return False
        depth -= 1
        placed[depth % 2][path[depth]] = 0
        path[depth] = 0
        candidate = resume.pop()
