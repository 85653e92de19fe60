#!/usr/bin/env python3

import logging
import sys

import click

from confdiff.common import get_envvar, get_envvar_as_bool, setup_logging
from confdiff.compare import ConfigCompare
from confdiff.errors import CompareError
from confdiff.reporter import Reporter

logger = logging.getLogger("compare-config-files")


@click.command(name="compare")
@click.help_option("--help", "-h")
@click.argument("file1")
@click.argument("file2")
@click.option("--keys", is_flag=True, help="compares and prints only missing keys")
@click.option("--values", is_flag=True, help="compares and prints only differing values")
@click.option(
    "--show-undefined",
    is_flag=True,
    help="with --values, also list keys without a value in either file",
)
def main(file1: str, file2: str, keys: bool, values: bool, show_undefined: bool):
    """
    Compare .env or .yaml configuration files for differences.

    Parameters:
        file1 (str): path to the first config file
        file2 (str): path to the second config file

    Both files must be of the same kind: two .env files, or two
    .yaml/.yml files. With --keys the keys missing in either file
    are listed, with --values the keys whose values differ. --keys
    wins if both are given, and is the default if none is given.

    The script exits with code 1 if the files could not be compared.
    """
    setup_logging(get_envvar("LOG_LEVEL", "INFO"))
    color = False if get_envvar_as_bool("NO_COLOR", empty_is_False=True) else None
    reporter = Reporter(file1, file2, color=color)

    try:
        ConfigCompare(
            file1,
            file2,
            keys=keys,
            values=values,
            show_undefined=show_undefined,
            reporter=reporter,
        ).compare()
    except CompareError as e:
        logger.debug("comparison failed", exc_info=e)
        reporter.error(e)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
