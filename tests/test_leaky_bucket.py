import pytest

from netlab.leaky_bucket import Tick, main, simulate

EXAMPLE = [(1, 5), (2, 6), (3, 8), (4, 6)]


def test_worked_example():
    ticks = simulate(EXAMPLE, 12, 2)
    assert [tick.time for tick in ticks] == list(range(1, 10))
    assert [tick.sent for tick in ticks] == [2, 2, 2, 2, 2, 2, 2, 2, 1]
    assert [tick.in_bucket for tick in ticks] == [3, 7, 5, 9, 7, 5, 3, 1, 0]
    assert ticks[2].dropped == 8
    assert [tick.inserted for tick in ticks[:4]] == [5, 6, 0, 6]


def test_bytes_are_conserved():
    ticks = simulate(EXAMPLE, 12, 2)
    inserted = sum(tick.inserted for tick in ticks)
    dropped = sum(tick.dropped for tick in ticks)
    assert sum(tick.sent for tick in ticks) == inserted
    assert inserted + dropped == sum(size for _, size in EXAMPLE)
    assert ticks[-1].in_bucket == 0


def test_rate_and_capacity_respected():
    arrivals = [(1, 4), (3, 9), (4, 1), (7, 3)]
    ticks = simulate(arrivals, 10, 3)
    for tick in ticks:
        assert tick.sent <= 3
        assert 0 <= tick.in_bucket <= 10
    assert ticks[-1].time >= arrivals[-1][0]


def test_oversized_packet_dropped():
    assert simulate([(1, 10)], 5, 1) == [Tick(1, dropped=10)]


def test_no_arrivals_gives_no_ticks():
    assert simulate([], 5, 1) == []


@pytest.mark.parametrize(
    "arrivals, bucket_size, rate",
    [
        ([(1, 5)], 10, 0),
        ([(1, 5)], -1, 2),
        ([(2, 5), (2, 3)], 10, 2),
        ([(3, 5), (1, 3)], 10, 2),
        ([(0, 5)], 10, 2),
        ([(1, -5)], 10, 2),
    ],
)
def test_invalid_input_rejected(arrivals, bucket_size, rate):
    with pytest.raises(ValueError):
        simulate(arrivals, bucket_size, rate)


def test_main_prints_example(capsys):
    argv = ["1:5", "2:6", "3:8", "4:6", "--bucket-size", "12", "--rate", "2"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Time 3\nDropped 8 bytes\nSent 2 bytes\nIn bucket: 5\n" in out
    assert out.endswith("Time 9\nSent 1 bytes\nIn bucket: 0\n")


def test_main_rejects_bad_pair():
    with pytest.raises(SystemExit) as info:
        main(["15", "--bucket-size", "12", "--rate", "2"])
    assert info.value.code == 2