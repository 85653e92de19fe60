from __future__ import annotations

from confdiff.document import ConfigDocument, ConfigFormat
from confdiff.parser.abc_parser import AbcParser
from confdiff.parser.dotenv_parser import DotenvParser
from confdiff.parser.yaml_parser import YamlParser, flatten

_parser_map = {
    ConfigFormat.Dotenv: DotenvParser,
    ConfigFormat.Yaml: YamlParser,
}


def get_parser(fmt: ConfigFormat | str) -> DotenvParser | YamlParser:
    """Get initialized parser by format name."""
    klass = _parser_map.get(fmt)
    if klass is None:
        raise NotImplementedError(f"parser for format {fmt!r} not known")
    return klass()


def parse_file(path: str, fmt: ConfigFormat | str) -> ConfigDocument:
    return get_parser(fmt).parse(path)


__all__ = [
    "AbcParser",
    "DotenvParser",
    "YamlParser",
    "flatten",
    "get_parser",
    "parse_file",
]
