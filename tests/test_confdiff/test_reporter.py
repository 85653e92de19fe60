#!/usr/bin/env python3

import pytest

from confdiff.differ import KeyDiffResult, ValueDiffResult, ValueDifference
from confdiff.errors import FileNotFound, FormatMismatch, UnknownError
from confdiff.reporter import Reporter, enumerate_keys, missing_keys_heading


@pytest.fixture
def reporter():
    return Reporter("a.env", "b.env", color=False)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([], "No missing key in config file"),
        (["A"], "This key is missing from"),
        (["A", "B"], "These keys are missing from"),
    ],
)
def test_missing_keys_heading(keys, expected):
    assert missing_keys_heading(keys) == expected


def test_enumerate_keys():
    assert enumerate_keys(["FOO", "db.host"]) == "1. FOO\n2. db.host"
    assert enumerate_keys([]) == ""


def test_key_differences(reporter, capsys):
    reporter.key_differences(KeyDiffResult(("BAZ",), ("BAR", "QUX")))
    out = capsys.readouterr().out
    assert "This key is missing from a.env:" in out
    assert "1. BAZ" in out
    assert "These keys are missing from b.env:" in out
    assert "1. BAR\n2. QUX" in out
    assert "\x1b[" not in out


def test_key_differences__none(reporter, capsys):
    reporter.key_differences(KeyDiffResult())
    out = capsys.readouterr().out
    assert out.count("No missing key in config file") == 2


def test_value_differences(reporter, capsys):
    result = ValueDiffResult(
        {"FOO": ValueDifference("1", "2"), "BAR": ValueDifference("x", "y")}
    )
    reporter.value_differences(result)
    out = capsys.readouterr().out
    assert "Differences found between files:" in out
    assert "1. FOO" in out
    assert "\ta.env: 1" in out
    assert "\tb.env: 2" in out
    assert "2. BAR" in out
    assert len(result) == 2


def test_value_differences__none(reporter, capsys):
    reporter.value_differences(ValueDiffResult())
    out = capsys.readouterr().out
    assert "No value differences found between the two files." in out


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([], "No undefined keys found."),
        (["A", "B"], "Keys without a value in at least one file:\n\n1. A\n2. B"),
    ],
)
def test_undefined_keys(reporter, capsys, keys, expected):
    reporter.undefined_keys(keys)
    assert expected in capsys.readouterr().out


def test_empty_files(reporter, capsys):
    reporter.both_empty()
    reporter.file_empty("b.env")
    out = capsys.readouterr().out
    assert "Both config files are empty." in out
    assert "file b.env is empty." in out


@pytest.mark.parametrize(
    "error, expected",
    [
        (
            FileNotFound("/tmp/x.env"),
            "Something went wrong: [FileNotFound: File Not Found - File: /tmp/x.env]",
        ),
        (
            FormatMismatch(),
            "Something went wrong: [FormatMismatch: Cannot compare dissimilar files]",
        ),
        (
            UnknownError(ValueError("boom")),
            "An unknown error occurred: [ValueError('boom')]",
        ),
    ],
)
def test_error(reporter, capsys, error, expected):
    reporter.error(error)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert expected in captured.err


def test_colors(capsys):
    Reporter("a.env", "b.env", color=True).both_empty()
    assert "\x1b[32m" in capsys.readouterr().out
