"""
Error taxonomy.

Inside the search, "no cycle extends this prefix" is a plain False; the
driver decides whether that is worth retrying. Once it is not, it becomes
one of these, always naming the graph order so the failure can be checked
by hand.
"""


class SearchError(Exception):
    """A graph order for which the claim could not be verified."""

    def __init__(self, size: int, message: str = ""):
        # Both args go to Exception so the error pickles across processes.
        super().__init__(size, message)
        self.size = size
        self.message = message or f"search failed for size {size}"

    def __str__(self):
        return self.message


class ExhaustedSearch(SearchError):
    """No Hamiltonian cycle found, even restarting from the first vertex."""

    def __init__(self, size: int, message: str = ""):
        super().__init__(size, message or f"Did not find Hamiltonian cycle for size {size}.")


class InvalidCycleDetected(SearchError):
    """The search claimed success but the result is not a Hamiltonian cycle."""

    def __init__(self, size: int, message: str = ""):
        super().__init__(size, message or f"Generated invalid cycle for size {size}.")


class NoPrimePairFound(SearchError):
    """No (p1, p2) exists for this half-order; `size` is the graph order 2h."""

    def __init__(self, size: int, message: str = ""):
        super().__init__(
            size,
            message or f"No prime pair for half-order {size // 2} (size {size}).",
        )


class ConfigurationError(ValueError):
    """Invalid combination of run parameters; raised before any search starts."""
