"""
Visualization and reporting utilities.
"""

from .core.hankel import Hankel


def format_matrix(matrix: Hankel) -> str:
    """The dense adjacency matrix, one comma-separated row per line."""
    return "\n".join(", ".join(str(v) for v in row) for row in matrix.rows())


def print_matrix(matrix: Hankel):
    print(format_matrix(matrix))


def print_cycle(matrix: Hankel, cycle):
    """Print a cycle with the sum on each edge, closing edge included."""
    if not cycle:
        print("No Hamiltonian cycle found.")
        return
    print(f"\n{'='*60}")
    print(f"Hamiltonian cycle, order {matrix.size}")
    print(f"{'='*60}")
    print("  " + " ".join(str(v) for v in cycle))
    sums = [a + b for a, b in zip(cycle, cycle[1:] + cycle[:1])]
    print("  edge sums: " + " ".join(str(s) for s in sums))
    status = "valid" if matrix.valid_cycle(cycle) else "INVALID"
    print(f"  {status}")


def print_reports(reports):
    """One line per worker range."""
    print(f"\n{'='*60}")
    print("Ranges:")
    print(f"{'='*60}")
    for r in reports:
        if r.ok:
            span = f"{r.first_size}..{r.last_size}" if r.sizes_checked else "(empty)"
            print(f"  worker {r.worker}: {span}  {r.sizes_checked} sizes  "
                  f"{r.elapsed_sec:.3f}s")
        else:
            print(f"  worker {r.worker}: FAILED at size {r.failed_size} "
                  f"after {r.sizes_checked} sizes: {r.error}")


def print_summary(summary):
    print(f"\n{'='*60}")
    if summary.ok:
        print(f"All workers done: {summary.sizes_checked} sizes verified, "
              f"total time: {summary.elapsed_sec:.3f}s")
    else:
        failed = ", ".join(str(r.failed_size) for r in summary.failures)
        print(f"Failed sizes: {failed} "
              f"({summary.sizes_checked} verified, {summary.elapsed_sec:.3f}s)")
    print(f"{'='*60}")
