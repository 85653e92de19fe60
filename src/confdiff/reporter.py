#!/usr/bin/env python3
from __future__ import annotations

from typing import Sequence

import click

from confdiff.differ import KeyDiffResult, ValueDiffResult
from confdiff.errors import CompareError, UnknownError


def enumerate_keys(keys: Sequence[str]) -> str:
    return "\n".join(f"{i}. {key}" for i, key in enumerate(keys, start=1))


def missing_keys_heading(keys: Sequence[str]) -> str:
    if len(keys) == 0:
        return "No missing key in config file"
    return "This key is missing from" if len(keys) == 1 else "These keys are missing from"


class Reporter:
    """
    Print comparison results for humans.

    `color=None` lets click decide (colors only on a terminal),
    `False` never emits ANSI codes.
    """

    def __init__(self, first_label: str, second_label: str, color: bool | None = None):
        self.first_label = first_label
        self.second_label = second_label
        self.color = color

    def _echo(self, message: str = "", err: bool = False, **style):
        click.secho(message, err=err, color=self.color, **style)

    def both_empty(self):
        self._echo("Both config files are empty.", fg="green")

    def file_empty(self, label: str):
        self._echo(f"file {label} is empty.", fg="green")

    def key_differences(self, result: KeyDiffResult):
        for label, keys in (
            (self.first_label, result.missing_in_first),
            (self.second_label, result.missing_in_second),
        ):
            self._echo(f"\n{missing_keys_heading(keys)} {label}:\n", fg="yellow")
            if keys:
                self._echo(enumerate_keys(keys), fg="green")

    def value_differences(self, result: ValueDiffResult):
        if result.is_empty:
            self._echo("\nNo value differences found between the two files.\n", fg="green")
            return

        self._echo("\nDifferences found between files:\n", fg="yellow")
        for i, (key, (first, second)) in enumerate(result.items(), start=1):
            self._echo(f"{i}. {key}", fg="green")
            self._value_line(self.first_label, first, "bright_magenta")
            self._value_line(self.second_label, second, "white")
            self._echo()

    def _value_line(self, label: str, value: str, fg: str):
        line = "\t{}: {}".format(
            click.style(label, fg="bright_blue"), click.style(value, fg=fg)
        )
        click.echo(line, color=self.color)

    def undefined_keys(self, keys: Sequence[str]):
        if not keys:
            self._echo("No undefined keys found.\n", fg="green")
            return
        self._echo("Keys without a value in at least one file:\n", fg="yellow")
        self._echo(enumerate_keys(keys), fg="green")

    def error(self, error: Exception):
        if isinstance(error, CompareError) and not isinstance(error, UnknownError):
            msg = f"Something went wrong: [{error.get_message()}]"
        else:
            original = getattr(error, "original", error)
            msg = f"An unknown error occurred: [{original!r}]"
        self._echo(msg, err=True, fg="red")
