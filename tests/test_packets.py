import random

import pytest

from netlab.packets import Packet, main, reassemble, shuffle_packets, split_message

MESSAGE = "A computer network is a set of devices connected through links"


def test_split_matches_worked_example():
    packets = split_message(MESSAGE)
    assert len(packets) == 21
    assert packets[0] == Packet(1, "A c")
    assert packets[1] == Packet(2, "omp")


def test_split_sequence_numbers_are_consecutive():
    packets = split_message(MESSAGE)
    assert [p.seq for p in packets] == list(range(1, len(packets) + 1))


def test_split_preserves_text():
    packets = split_message(MESSAGE)
    assert "".join(p.data for p in packets) == MESSAGE
    assert all(1 <= len(p.data) <= 3 for p in packets)


@pytest.mark.parametrize("size", [1, 2, 5, 100])
def test_split_respects_size(size):
    packets = split_message(MESSAGE, size)
    assert all(len(p.data) <= size for p in packets[:-1])
    assert all(len(p.data) == size for p in packets[:-1])
    assert "".join(p.data for p in packets) == MESSAGE


def test_split_empty_message():
    assert split_message("") == []


@pytest.mark.parametrize("size", [0, -3])
def test_split_rejects_bad_size(size):
    with pytest.raises(ValueError):
        split_message(MESSAGE, size)


def test_shuffle_is_permutation():
    packets = split_message(MESSAGE)
    shuffled = shuffle_packets(packets, random.Random(7))
    assert sorted(shuffled, key=lambda p: p.seq) == packets
    assert len(shuffled) == len(packets)


def test_shuffle_does_not_modify_input():
    packets = split_message(MESSAGE)
    original = list(packets)
    shuffle_packets(packets, random.Random(1))
    assert packets == original


def test_shuffle_is_reproducible_with_seed():
    packets = split_message(MESSAGE)
    first = shuffle_packets(packets, random.Random(42))
    second = shuffle_packets(packets, random.Random(42))
    assert first == second


@pytest.mark.parametrize("seed", range(5))
def test_reassemble_after_shuffle(seed):
    packets = split_message(MESSAGE)
    assert reassemble(shuffle_packets(packets, random.Random(seed))) == MESSAGE


def test_reassemble_empty():
    assert reassemble([]) == ""


def test_main_prints_reconstructed_message(capsys):
    assert main(["--seed", "3", *MESSAGE.split(" ")]) == 0
    out = capsys.readouterr().out
    assert f"Reconstructed Message: {MESSAGE}" in out
    assert "1:A c" in out
    assert "Packets in order: " + " ".join(str(i) for i in range(1, 22)) in out


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--size", "0", "hello"])