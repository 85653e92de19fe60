#!/usr/bin/env python3
from __future__ import annotations

import enum
import logging

from confdiff.differ import compare_keys, compare_values, undefined_keys
from confdiff.errors import CompareError, UnknownError
from confdiff.parser import parse_file
from confdiff.reporter import Reporter
from confdiff.validator import validate

logger = logging.getLogger("compare")


class CompareOutcome(enum.Enum):
    BOTH_EMPTY = "both_empty"
    FIRST_EMPTY = "first_empty"
    SECOND_EMPTY = "second_empty"
    KEYS_COMPARED = "keys_compared"
    VALUES_COMPARED = "values_compared"


class ConfigCompare:
    """
    Compare two config files (.env or .yaml/.yml) and report the differences.

    Only one mode runs per comparison. `keys` takes precedence
    over `values`, and without any mode the keys are compared.
    """

    def __init__(
        self,
        first: str,
        second: str,
        keys: bool = False,
        values: bool = False,
        show_undefined: bool = False,
        reporter: Reporter | None = None,
    ):
        self.first = first
        self.second = second
        self.keys = keys
        self.values = values
        self.show_undefined = show_undefined
        self.reporter = reporter or Reporter(first, second)

    def compare(self) -> CompareOutcome:
        """
        Run the comparison and print the result.

        Raises
        ------
        CompareError
            On any failure. Errors that are no `CompareError` are
            wrapped in an `UnknownError`. Nothing is printed after a
            failure.
        """
        try:
            return self._compare()
        except CompareError:
            raise
        except Exception as e:
            raise UnknownError(e) from e

    def _compare(self) -> CompareOutcome:
        path_a, path_b, fmt = validate(self.first, self.second)
        doc_a = parse_file(path_a, fmt)
        doc_b = parse_file(path_b, fmt)

        if doc_a.is_empty and doc_b.is_empty:
            self.reporter.both_empty()
            return CompareOutcome.BOTH_EMPTY
        if doc_a.is_empty:
            self.reporter.file_empty(self.first)
            return CompareOutcome.FIRST_EMPTY
        if doc_b.is_empty:
            self.reporter.file_empty(self.second)
            return CompareOutcome.SECOND_EMPTY

        if self.keys or not self.values:
            logger.debug("comparing keys")
            self.reporter.key_differences(compare_keys(doc_a.keys(), doc_b.keys()))
            return CompareOutcome.KEYS_COMPARED

        logger.debug("comparing values")
        self.reporter.value_differences(compare_values(doc_a, doc_b))
        if self.show_undefined:
            self.reporter.undefined_keys(undefined_keys(doc_a, doc_b))
        return CompareOutcome.VALUES_COMPARED
