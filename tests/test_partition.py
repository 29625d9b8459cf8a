import pytest

from parallel_primer.parallel.partition import partition_range, split_evenly
from parallel_primer.types import Partition


@pytest.mark.parametrize("n", [0, 1, 2, 7, 10, 101])
@pytest.mark.parametrize("k", [1, 2, 3, 8])
def test_partitions_cover_range_disjointly(n, k):
    parts = partition_range(n, k)

    assert len(parts) == k
    assert [p.index for p in parts] == list(range(k))
    assert parts[0].start == 0
    assert parts[-1].stop == n
    for a, b in zip(parts, parts[1:]):
        assert a.stop == b.start

    sizes = [len(p) for p in parts]
    assert sum(sizes) == n
    assert max(sizes) - min(sizes) <= 1


def test_remainder_goes_to_leading_partitions():
    assert split_evenly(10, 3) == [4, 3, 3]
    assert split_evenly(2, 4) == [1, 1, 0, 0]
    assert split_evenly(0, 2) == [0, 0]


def test_partition_helpers():
    p = Partition(index=1, start=3, stop=6)
    assert len(p) == 3
    assert p.slice == slice(3, 6)
    assert 3 in p and 5 in p
    assert 6 not in p and 2 not in p


@pytest.mark.parametrize("total, k", [(-1, 2), (5, 0), (5, -3)])
def test_invalid_arguments(total, k):
    with pytest.raises(ValueError):
        split_evenly(total, k)
    with pytest.raises(ValueError):
        partition_range(total, k)
