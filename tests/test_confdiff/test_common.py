#!/usr/bin/env python3

from unittest import mock
import os

import pytest

from confdiff.common import get_envvar, get_envvar_as_bool, no_default, setup_logging

TEST_ENV = {
    "LOG_LEVEL": "debug",
    "NO_COLOR": "1",
    "NO_COLOR_OFF": "false",
    "EMPTY": "",
}


@mock.patch.dict(os.environ, TEST_ENV, clear=True)
@pytest.mark.parametrize(
    "name, default, expected",
    [
        ("LOG_LEVEL", no_default, "debug"),
        ("LOG_LEVEL", "INFO", "debug"),
        ("EMPTY", "INFO", ""),
        ("NOT_SET", "INFO", "INFO"),
        ("NOT_SET", None, None),
    ],
)
def test_get_envvar(name, default, expected):
    assert get_envvar(name, default) == expected


@mock.patch.dict(os.environ, TEST_ENV, clear=True)
def test_get_envvar__missing():
    with pytest.raises(EnvironmentError, match="Missing environment variable 'NOT_SET'"):
        get_envvar("NOT_SET")


@mock.patch.dict(os.environ, TEST_ENV, clear=True)
@pytest.mark.parametrize(
    "name, empty_is_False, expected",
    [
        ("NOT_SET", True, False),
        ("NO_COLOR", True, True),
        ("NO_COLOR_OFF", True, False),
        ("EMPTY", False, True),
        ("EMPTY", True, False),
    ],
)
def test_get_envvar_as_bool(name, empty_is_False, expected):
    assert get_envvar_as_bool(name, empty_is_False=empty_is_False) is expected


def test_setup_logging__accepts_lowercase_level():
    with mock.patch("logging.basicConfig") as basic_config:
        setup_logging("debug")
    assert basic_config.call_args.kwargs["level"] == "DEBUG"
