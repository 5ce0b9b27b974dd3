"""
CLI entry point. Run as: python -m primesum --max <n>
"""

import argparse
import sys

from .core.hankel import Hankel
from .driver import DriverConfig, Strategy, STRATEGIES, run
from .errors import SearchError, ConfigurationError
from .visualization import print_matrix, print_cycle, print_reports, print_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primesum",
        description="Search for Hamiltonian cycles in prime-sum graphs",
    )
    parser.add_argument("-m", "--max", type=int, default=None,
                        help="Maximum graph order to search")
    parser.add_argument("-s", "--start", type=int, default=None,
                        help="Graph order to start at (even; default max(2*threads, 12))")
    parser.add_argument("-n", "--threads", type=int, default=1, dest="workers",
                        help="Number of worker processes")
    parser.add_argument("-d", "--divisor", type=int, default=0,
                        help="warm_start only: on a failed tail, retry from n/divisor (0: from vertex 1)")
    parser.add_argument("-f", "--fast", action="store_true",
                        help="Closed-form construction from prime pairs, no search")
    parser.add_argument("--strategy", choices=list(STRATEGIES.keys()), default=None,
                        help="Search strategy (default warm_start; --fast means closed_form)")
    parser.add_argument("--lenient", action="store_true",
                        help="Keep other ranges running after a failure")
    parser.add_argument("--no-verify", action="store_true",
                        help="closed_form: only find the prime pairs")
    parser.add_argument("--show", type=int, default=None, metavar="N",
                        help="Print the adjacency matrix and a cycle of order N, then exit")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    return parser


def config_from_args(args) -> DriverConfig:
    name = args.strategy or ("closed_form" if args.fast else "warm_start")
    if args.fast and name != "closed_form":
        raise ConfigurationError("--fast conflicts with --strategy " + name)
    if args.max is None:
        raise ConfigurationError("--max is required")
    return DriverConfig(
        maximum=args.max,
        start=args.start,
        workers=args.workers,
        strategy=Strategy(name, args.divisor),
        strict=not args.lenient,
        verify=not args.no_verify,
        verbose=not args.quiet,
    ).validate()


def show(order: int):
    matrix = Hankel.prime_sum_matrix(order)
    print_matrix(matrix)
    print(f"degrees: {matrix.vertex_degrees()}")
    print_cycle(matrix, matrix.is_hamiltonian())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.show is not None:
        if args.show < 1:
            print("--show needs an order of at least 1", file=sys.stderr)
            return 2
        show(args.show)
        return 0

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if config.verbose:
        print(f"Strategy: {config.strategy.name} "
              f"({STRATEGIES[config.strategy.name]['description']})")
        print(f"Orders {config.start}..{config.maximum}, {config.workers} worker(s)")

    try:
        summary = run(config)
    except SearchError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130

    if config.verbose:
        print_reports(summary.reports)
    print_summary(summary)
    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
