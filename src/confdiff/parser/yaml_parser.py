from __future__ import annotations

import datetime
from typing import Any

import yaml

from confdiff.document import ConfigFormat, FlatValueT
from confdiff.errors import ParseError
from confdiff.parser.abc_parser import AbcParser

SEPARATOR = "."


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def flatten(
    obj: dict | list, parent_key: str = "", sep: str = SEPARATOR
) -> dict[str, FlatValueT]:
    """
    Flatten a nested document to a single level mapping.

    Nested keys are joined by `sep`. Sequences are flattened
    by their index, e.g. `{"a": [{"b": 1}]}` -> `{"a.0.b": "1"}`.
    Null leaves keep their key with the value None. Empty
    mappings and sequences produce no key at all, so a document
    made only of empty containers flattens to an empty mapping.

    Raises
    ------
    ValueError
        If two leaves end up under the same flattened key, e.g.
        `{"a": {"b": 1}, "a.b": 2}` or the keys `1` and `'1'`.
    """
    result: dict[str, FlatValueT] = {}
    items = obj.items() if isinstance(obj, dict) else enumerate(obj)
    for key, value in items:
        new_key = f"{parent_key}{sep}{stringify(key)}" if parent_key else stringify(key)
        if isinstance(value, (dict, list)):
            flat = flatten(value, new_key, sep)
        elif value is None:
            flat = {new_key: None}
        else:
            flat = {new_key: stringify(value)}
        for k in flat:
            if k in result:
                raise ValueError(f"duplicate flattened key {k!r}")
        result.update(flat)
    return result


class YamlParser(AbcParser):
    """
    Parse a yaml document and flatten it to dotted keys.

    A file that only holds empty mappings or sequences, like
    `services: {}`, has no keys and counts as empty.
    """

    format = ConfigFormat.Yaml

    def do_parse(self, rawdata: str, path: str) -> dict[str, FlatValueT]:
        try:
            data = yaml.safe_load(rawdata)
        except yaml.YAMLError as e:
            raise ParseError(path, str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ParseError(
                path, f"expected a mapping at top level, got {type(data).__name__}"
            )
        try:
            return flatten(data)
        except ValueError as e:
            raise ParseError(path, str(e)) from e
