from __future__ import annotations

from io import StringIO

from dotenv import dotenv_values

from confdiff.document import ConfigFormat, FlatValueT
from confdiff.parser.abc_parser import AbcParser


class DotenvParser(AbcParser):
    """
    Parse `KEY=VALUE` lines.

    Blank lines and comments are ignored, quoted values are
    unquoted and a key without `=` has the value None. Lines
    python-dotenv cannot parse are skipped with a warning.
    References like `${OTHER}` are kept literally.
    """

    format = ConfigFormat.Dotenv

    def do_parse(self, rawdata: str, path: str) -> dict[str, FlatValueT]:
        return dict(dotenv_values(stream=StringIO(rawdata), interpolate=False))
