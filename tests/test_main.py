"""Tests for the command line driver"""

import re

import pytest

from main import build_parser, main, timed_count


def test_defaults():
    args = build_parser().parse_args([])
    assert (args.size, args.min_length) == (3, 4)
    assert not args.naive
    assert not args.by_length


def test_timed_count():
    count, duration = timed_count(2, 1)
    assert count == 64
    assert duration >= 0


def test_prints_count_and_duration(capsys):
    assert main(["3", "4"]) == 0
    output = capsys.readouterr().out
    assert re.fullmatch(r"389112 \(\d+ ms\)\n", output)


def test_naive(capsys):
    assert main(["2", "1", "--naive"]) == 0
    assert capsys.readouterr().out.startswith("64 (")


def test_by_length(capsys):
    assert main(["2", "1", "--by-length"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("64 (")
    assert "Total" in output
    assert "65" in output


def test_negative_size_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-1"])
    assert excinfo.value.code == 2


def test_overflow_propagates(monkeypatch):
    import patterns.counting

    monkeypatch.setattr(patterns.counting, "INT64_MAX", 10)
    with pytest.raises(OverflowError):
        main(["2", "1"])
