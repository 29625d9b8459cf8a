"""A strike vector partitioned across worker processes, priced chunk by chunk.

    PYTHONPATH=src python examples/distributed_array.py
"""

from __future__ import annotations


def main() -> None:
    import numpy as np

    from parallel_primer import (
        DistributedArray,
        WorkerPool,
        blackscholes,
        blackscholes_distributed,
        checksum,
    )

    strikes = 40.0 + np.arange(1_000_000, dtype=np.float64) / 1_000_000
    d = DistributedArray.from_array(strikes, n_workers=4)
    print(d)
    for p in d.partitions:
        print(f"  worker {p.index}: [{p.start}, {p.stop})")
    print("owner of index 600000:", d.owner(600_000))

    with WorkerPool(4) as pool:
        puts = blackscholes_distributed(42.0, d, 0.5, 0.2, 0.5, pool=pool)

    gathered = puts.gather()
    print("checksum distributed:", checksum(gathered))
    print("checksum serial:     ", checksum(blackscholes(42.0, strikes, 0.5, 0.2, 0.5)))


if __name__ == "__main__":
    main()
