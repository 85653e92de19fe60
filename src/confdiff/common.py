#!/usr/bin/env python3
from __future__ import annotations

import logging
import os
from typing import Any

no_default = type("no_default", (), {})

LOG_FORMAT = "[%(asctime)s] %(levelname)-6s %(name)s: %(message)s"


def get_envvar(name, default: Any = no_default):
    val = os.environ.get(name)
    if val is None:
        if default is no_default:
            raise EnvironmentError(f"Missing environment variable {name!r}.")
        return default
    return val


def get_envvar_as_bool(
    name, false_list=("no", "false", "0", "null", "none"), empty_is_False: bool = False
) -> bool:
    """
    Return True if an environment variable is set and its value
    is not in the false_list.
    Return False if an environment variable is unset or if its value
    is in the false_list.

    If 'empty_is_False' is True:
        Same logic as above, but an empty string is considered False

    The false_list is not case-sensitive. (faLsE == FALSE = false)
    """
    val = os.environ.get(name, None)
    if val is None:
        return False
    if val == "":
        return not empty_is_False
    return val.lower() not in false_list


def setup_logging(log_level="INFO"):
    """
    Setup logging.

    Log records go to stderr, so they never mix with the
    comparison report on stdout.
    """
    logging.basicConfig(
        level=str(log_level).upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
