"""Run one of the timing demos from the command line.

    python -m parallel_primer blackscholes --n 1000000 --workers 4
    python -m parallel_primer pi --n 10000000 --backend process
    python -m parallel_primer walk --walkers 64 --steps 100000
"""

from __future__ import annotations

import argparse

from .benchmark import run_blackscholes, run_pi, run_walks
from .types import Backend


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="parallel_primer")
    ap.add_argument("--workers", type=int, default=None, help="default: one per CPU")
    ap.add_argument(
        "--backend", choices=[b.value for b in Backend], default=None
    )
    ap.add_argument("--seed", type=int, default=None)
    sub = ap.add_subparsers(dest="demo", required=True)

    bs = sub.add_parser("blackscholes", help="put kernel, serial vs. chunked")
    bs.add_argument("--n", type=int, default=1_000_000, help="number of options")

    pi = sub.add_parser("pi", help="Monte Carlo pi, one stream vs. partitioned")
    pi.add_argument("--n", type=int, default=10_000_000, help="number of trials")

    walk = sub.add_parser("walk", help="independent random walkers")
    walk.add_argument("--walkers", type=int, default=64)
    walk.add_argument("--steps", type=int, default=100_000)
    return ap


def main(argv: list[str] | None = None) -> None:
    args = _parser().parse_args(argv)

    if args.demo == "blackscholes":
        report, cs_serial, cs_parallel = run_blackscholes(
            args.n,
            n_workers=args.workers,
            backend=args.backend or Backend.THREAD,
        )
        print(report.summary())
        print(f"  checksum serial={cs_serial:.6f} parallel={cs_parallel:.6f}")
    elif args.demo == "pi":
        report = run_pi(
            args.n,
            n_workers=args.workers,
            backend=args.backend or Backend.PROCESS,
            seed=args.seed,
        )
        print(report.summary())
        print(
            f"  pi serial={report.serial.value:.6f} parallel={report.parallel.value:.6f}"
        )
    else:
        report = run_walks(
            args.walkers,
            args.steps,
            n_workers=args.workers,
            backend=args.backend or Backend.PROCESS,
            seed=args.seed,
        )
        print(report.summary())


if __name__ == "__main__":
    main()
