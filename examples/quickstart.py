from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from parallel_primer import (
        blackscholes,
        blackscholes_parallel,
        checksum,
        estimate_pi,
        estimate_pi_parallel,
        norm_cdf,
        random_walk,
    )

    print("Phi(0), Phi(1.96):", norm_cdf(0.0), norm_cdf(1.96))

    strikes = [40.0, 42.0, 44.0]
    serial = blackscholes(42.0, strikes, 0.5, 0.2, 0.5)
    parallel = blackscholes_parallel(42.0, strikes, 0.5, 0.2, 0.5, n_workers=2)
    print("puts (serial):  ", serial)
    print("puts (parallel):", parallel)
    print("checksum:", checksum(serial))

    print("pi ~", estimate_pi(1_000_000, seed=0))
    print("pi ~", estimate_pi_parallel(1_000_000, n_workers=2, seed=0), "(2 workers)")

    print("walk:", random_walk(10, seed=0))
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
