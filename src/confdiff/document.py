#!/usr/bin/env python3
from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

FlatValueT = str | None
FlatMapT = Mapping[str, FlatValueT]


class ConfigFormat(enum.StrEnum):
    Dotenv = "dotenv"
    Yaml = "yaml"


EXTENSION_FORMATS: dict[str, ConfigFormat] = {
    ".env": ConfigFormat.Dotenv,
    ".yaml": ConfigFormat.Yaml,
    ".yml": ConfigFormat.Yaml,
}


def file_extension(path: str | os.PathLike) -> str:
    """Return the extension of `path` including the leading dot.

    A dotfile without a further suffix is its own extension, so
    a file named `.env` is recognized as a dotenv file, while
    `.env.local` has the extension `.local`.
    """
    name = os.path.basename(os.fspath(path))
    _, ext = os.path.splitext(name)
    if not ext and name.startswith(".") and name.count(".") == 1:
        return name
    return ext


@dataclass(frozen=True)
class ConfigDocument:
    """A parsed config file, flattened to `key -> value`.

    A value of None means the key is declared without a value.
    """

    path: str
    format: ConfigFormat
    values: FlatMapT = field(default_factory=dict)

    def __post_init__(self):
        # freeze a private copy, so later changes to the
        # passed dict are not visible here
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def keys(self) -> list[str]:
        return list(self.values.keys())

    def get(self, key: str) -> FlatValueT:
        return self.values.get(key)

    @property
    def is_empty(self) -> bool:
        return len(self.values) == 0

    def __len__(self) -> int:
        return len(self.values)
