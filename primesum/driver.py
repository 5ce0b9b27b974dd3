"""
The search driver: sweep graph orders, find a cycle for each, fan out.

One driver, three strategies (see STRATEGIES):

    cold_restart   backtrack every order from scratch
    warm_start     keep the cycle of order n and rebuild only its tail for
                   order n + increment; fall back to an earlier cursor
    closed_form    no search: find the prime pair for each half-order and,
                   if asked, generate and check the closed-form cycle

Only even orders are checked. Odd orders can't have a Hamiltonian cycle
(every edge joins odd to even), and dropping one vertex from a cycle of
order n leaves a Hamiltonian path of order n - 1.

Workers: in search mode worker t of m owns the orders start + 2t + k*2m,
so each grows its own cycle. In closed-form mode the half-orders are cut
into contiguous chunks. The sieve is computed once before any worker starts
and handed over read-only through the pool initializer.
"""

from dataclasses import dataclass, field, replace
from multiprocessing import get_context
from time import perf_counter
from typing import Optional

from .core.sieve import primes_upto
from .core.hankel import Hankel
from .construct.path import hamiltonian_path_from_primes
from .construct.quadruplet import find_prime_pair
from .errors import (
    SearchError, ExhaustedSearch, InvalidCycleDetected, NoPrimePairFound,
    ConfigurationError,
)


STRATEGIES = {
    "cold_restart": {
        "searches":    True,
        "description": "Backtrack every order from vertex 1",
    },
    "warm_start": {
        "searches":    True,
        "description": "Reuse the previous cycle, rebuild only its tail",
    },
    "closed_form": {
        "searches":    False,
        "description": "Build the cycle from a prime pair, no search",
    },
}


@dataclass(frozen=True)
class Strategy:
    """
    Which pipeline to run.

    divisor only matters for warm_start: when rebuilding the tail fails,
    retry from cursor n // divisor (0 means from vertex 1). Any other
    strategy rejects a non-zero divisor.
    """
    name: str = "warm_start"
    divisor: int = 0

    def __post_init__(self):
        if self.name not in STRATEGIES:
            raise ConfigurationError(
                f"unknown strategy {self.name!r}; choose from {', '.join(STRATEGIES)}"
            )
        if self.divisor < 0:
            raise ConfigurationError(f"divisor must be non-negative, got {self.divisor}")
        if self.divisor and self.name != "warm_start":
            raise ConfigurationError(
                f"divisor {self.divisor} has no effect with strategy {self.name!r}"
            )

    @classmethod
    def cold_restart(cls):
        return cls("cold_restart")

    @classmethod
    def warm_start(cls, divisor: int = 0):
        return cls("warm_start", divisor)

    @classmethod
    def closed_form(cls):
        return cls("closed_form")

    @property
    def searches(self) -> bool:
        return STRATEGIES[self.name]["searches"]


@dataclass
class RangeReport:
    """What one worker verified before finishing or giving up."""
    worker: int
    first_size: int
    sizes_checked: int = 0
    last_size: int = 0
    failed_size: Optional[int] = None
    error: Optional[SearchError] = None
    elapsed_sec: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def record(self, size: int):
        self.sizes_checked += 1
        self.last_size = size

    def fail(self, error: SearchError):
        self.failed_size = error.size
        self.error = error


@dataclass
class DriverConfig:
    """
    Run parameters.

    maximum:  largest graph order to check (inclusive)
    start:    first order; defaults to max(2 * workers, 12)
    workers:  parallel worker processes
    strict:   stop everything at the first failure; otherwise keep the
              other ranges going and report
    verify:   closed_form only: generate and check each cycle, not just
              the prime pair
    """
    maximum: int
    start: Optional[int] = None
    workers: int = 1
    strategy: Strategy = field(default_factory=Strategy)
    strict: bool = True
    verify: bool = True
    verbose: bool = True

    @property
    def increment(self) -> int:
        return 2 * self.workers

    def validate(self) -> "DriverConfig":
        """
        Check the parameters and return a copy with the default start filled
        in. The config itself is left untouched.
        """
        if self.workers < 1:
            raise ConfigurationError(f"need at least one worker, got {self.workers}")
        if self.start is None:
            return replace(self, start=max(2 * self.workers, 12)).validate()
        if self.start < 2:
            raise ConfigurationError(f"the start should be at least 2, got {self.start}")
        if self.start % 2 != 0:
            raise ConfigurationError(f"the start should be even, got {self.start}")
        if self.start < 2 * self.workers:
            raise ConfigurationError(
                f"the number of workers ({self.workers}) must be at most "
                f"start/2 ({self.start // 2})"
            )
        if self.maximum < self.start:
            raise ConfigurationError(
                f"maximum ({self.maximum}) is below the start ({self.start})"
            )
        return replace(self)


@dataclass
class RunSummary:
    reports: list
    elapsed_sec: float

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.reports)

    @property
    def failures(self) -> list:
        return [r for r in self.reports if not r.ok]

    @property
    def sizes_checked(self) -> int:
        return sum(r.sizes_checked for r in self.reports)


# ============================================================
# Per-range work
# ============================================================

def is_permutation(path, size: int) -> bool:
    return len(path) == size and sorted(path) == list(range(1, size + 1))


def check_cycle(matrix: Hankel, path: list):
    """Re-derive validity from the adjacency model; never trust the search."""
    if not (is_permutation(path, matrix.size) and matrix.valid_cycle(path)):
        raise InvalidCycleDetected(matrix.size)


def grow_cycles(
    maximum: int,
    start: int,
    increment: int,
    offset: int,
    strategy: Strategy,
    primes: list,
    worker: int = 0,
    verbose: bool = True,
) -> RangeReport:
    """
    Find a cycle for every order start + offset, + increment, ... <= maximum.

    Stops at the first order that fails and records it in the report;
    SearchError never escapes.
    """
    report = RangeReport(worker=worker, first_size=start + offset)
    t0 = perf_counter()
    try:
        if strategy.name == "cold_restart":
            _cold_restart(report, maximum, increment, primes, verbose)
        else:
            _warm_start(report, maximum, increment, strategy.divisor, primes, verbose)
    except SearchError as e:
        report.fail(e)
        if verbose:
            print(f"  [worker {worker}] FAILED: {e}")
    report.elapsed_sec = perf_counter() - t0
    return report


def _cold_restart(report, maximum, increment, primes, verbose):
    for size in range(report.first_size, maximum + 1, increment):
        matrix = Hankel.prime_sum_matrix(size, primes)
        path = matrix.is_hamiltonian()
        if path is None:
            raise ExhaustedSearch(size)
        check_cycle(matrix, path)
        report.record(size)
        if verbose:
            print(f"  [worker {report.worker}] size {size}: cycle found")


def _warm_start(report, maximum, increment, divisor, primes, verbose):
    size = report.first_size
    if size > maximum:
        return
    # How much of the old cycle's tail gets rebuilt.
    decrement = max(6, increment)

    path = Hankel.prime_sum_matrix(size, primes).is_hamiltonian()
    if path is None:
        raise ExhaustedSearch(size, f"No Hamiltonian cycle found for the starting size {size}.")

    while size <= maximum:
        matrix = Hankel.prime_sum_matrix(size, primes)
        cursor = max(1, size - decrement)
        if not matrix.extend_cycle(path, cursor):
            retry = max(1, size // divisor) if divisor else 1
            # A retry at or past the failed cursor can only fail again.
            if retry >= cursor or not matrix.extend_cycle(path, retry):
                raise ExhaustedSearch(size)
            if verbose:
                print(f"  [worker {report.worker}] size {size}: restarted from {retry}")
        check_cycle(matrix, path)
        report.record(size)
        if verbose:
            print(f"  [worker {report.worker}] size {size}: cycle found")
        size += increment
        path.extend([0] * increment)


def check_half_orders(
    first: int,
    last: int,
    primes: list,
    verify: bool = True,
    worker: int = 0,
    verbose: bool = True,
) -> RangeReport:
    """
    Closed-form check of every half-order in first..last (inclusive).

    `primes` must reach 4 * last. Like grow_cycles, the first failure ends
    the range and lands in the report.
    """
    report = RangeReport(worker=worker, first_size=2 * first)
    t0 = perf_counter()
    try:
        for h in range(first, last + 1):
            size = 2 * h
            pair = find_prime_pair(h, primes)
            if pair is None:
                raise NoPrimePairFound(size)
            if verify:
                cycle = list(hamiltonian_path_from_primes(pair[0], pair[1], h))
                check_cycle(Hankel.prime_sum_matrix(size, primes), cycle)
            report.record(size)
            if verbose:
                print(f"  [worker {worker}] size {size}: primes {pair}")
    except SearchError as e:
        report.fail(e)
        if verbose:
            print(f"  [worker {worker}] FAILED: {e}")
    report.elapsed_sec = perf_counter() - t0
    return report


# ============================================================
# Fan-out
# ============================================================

# Set once per worker process by _init_worker; never written afterwards.
_PRIMES: Optional[list] = None


def _init_worker(primes: list) -> None:
    global _PRIMES
    _PRIMES = primes


def _search_task(args) -> RangeReport:
    worker, maximum, start, increment, strategy, verbose = args
    return grow_cycles(maximum, start, increment, 2 * worker, strategy,
                       _PRIMES, worker=worker, verbose=verbose)


def _closed_form_task(args) -> RangeReport:
    worker, first, last, verify, verbose = args
    return check_half_orders(first, last, _PRIMES, verify=verify,
                             worker=worker, verbose=verbose)


def half_order_chunks(first: int, last: int, pieces: int) -> list:
    """Split first..last (inclusive) into at most `pieces` contiguous ranges."""
    count = last - first + 1
    if count <= 0:
        return []
    width = -(-count // pieces)
    return [(a, min(a + width - 1, last)) for a in range(first, last + 1, width)]


def make_tasks(config: DriverConfig):
    """The (task function, task args) list for a validated config."""
    if config.strategy.searches:
        tasks = [
            (t, config.maximum, config.start, config.increment,
             config.strategy, config.verbose)
            for t in range(config.workers)
        ]
        return _search_task, tasks
    # The closed form needs h >= 2; order 2 is the lone edge 1 -- 2.
    first = max(2, config.start // 2)
    chunks = half_order_chunks(first, config.maximum // 2, config.workers * 8)
    tasks = [
        (i, a, b, config.verify, config.verbose)
        for i, (a, b) in enumerate(chunks)
    ]
    return _closed_form_task, tasks


def run(config: DriverConfig) -> RunSummary:
    """
    Validate `config`, sieve once, and run every range.

    In strict mode the first failed range raises its SearchError here;
    leaving the pool terminates the workers still running.
    """
    config = config.validate()
    t0 = perf_counter()
    if config.verbose:
        print("Calculating primes")
    primes = primes_upto(2 * config.maximum)
    if config.verbose:
        print(f"Finished calculating {len(primes)} primes in {perf_counter() - t0:.3f}s")

    task_fn, tasks = make_tasks(config)
    reports = []

    def collect(report: RangeReport):
        reports.append(report)
        if not report.ok and config.strict:
            raise report.error

    if config.workers == 1:
        _init_worker(primes)
        for task in tasks:
            collect(task_fn(task))
    else:
        ctx = get_context()
        with ctx.Pool(
            processes=config.workers,
            initializer=_init_worker,
            initargs=(primes,),
        ) as pool:
            for report in pool.imap_unordered(task_fn, tasks, chunksize=1):
                collect(report)

    reports.sort(key=lambda r: (r.first_size, r.worker))
    return RunSummary(reports=reports, elapsed_sec=perf_counter() - t0)
