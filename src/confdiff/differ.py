#!/usr/bin/env python3
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple

from confdiff.document import ConfigDocument

logger = logging.getLogger("differ")


@dataclass(frozen=True)
class KeyDiffResult:
    missing_in_first: tuple[str, ...] = ()
    missing_in_second: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.missing_in_first or self.missing_in_second)


class ValueDifference(NamedTuple):
    first: str
    second: str


@dataclass(frozen=True)
class ValueDiffResult:
    differences: Mapping[str, ValueDifference] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "differences", MappingProxyType(dict(self.differences))
        )

    def __len__(self) -> int:
        return len(self.differences)

    def __contains__(self, key) -> bool:
        return key in self.differences

    def __getitem__(self, key: str) -> ValueDifference:
        return self.differences[key]

    def items(self):
        return self.differences.items()

    @property
    def is_empty(self) -> bool:
        return len(self.differences) == 0


def _union(keys_a: Iterable[str], keys_b: Iterable[str]) -> list[str]:
    # all keys of the first, then the new ones of the second
    return list(dict.fromkeys([*keys_a, *keys_b]))


def compare_keys(keys_a: Iterable[str], keys_b: Iterable[str]) -> KeyDiffResult:
    """
    Compare two collections of keys.

    Both result sequences keep the order of the input they
    were taken from.
    """
    keys_a, keys_b = list(keys_a), list(keys_b)
    set_a, set_b = set(keys_a), set(keys_b)
    result = KeyDiffResult(
        missing_in_first=tuple(k for k in keys_b if k not in set_a),
        missing_in_second=tuple(k for k in keys_a if k not in set_b),
    )
    logger.debug(
        f"{len(result.missing_in_first)} keys missing in first, "
        f"{len(result.missing_in_second)} keys missing in second"
    )
    return result


def compare_values(doc_a: ConfigDocument, doc_b: ConfigDocument) -> ValueDiffResult:
    """
    Collect the keys that have a value in both documents,
    but the values differ.

    Keys that are missing or undefined in one of the documents
    are no value difference and are not part of the result.
    """
    differences = {}
    for key in _union(doc_a.keys(), doc_b.keys()):
        value_a, value_b = doc_a.get(key), doc_b.get(key)
        if value_a is not None and value_b is not None and value_a != value_b:
            differences[key] = ValueDifference(value_a, value_b)
    logger.debug(f"{len(differences)} value differences found")
    return ValueDiffResult(differences)


def undefined_keys(doc_a: ConfigDocument, doc_b: ConfigDocument) -> list[str]:
    """Keys without a value in at least one of the documents."""
    return [
        key
        for key in _union(doc_a.keys(), doc_b.keys())
        if doc_a.get(key) is None or doc_b.get(key) is None
    ]
