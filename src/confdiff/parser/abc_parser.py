from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from confdiff.document import ConfigDocument, ConfigFormat, FlatValueT
from confdiff.errors import ParseError


class AbcParser(ABC):
    format: ConfigFormat

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__qualname__)

    @abstractmethod
    def do_parse(self, rawdata: str, path: str) -> dict[str, FlatValueT]:
        raise NotImplementedError

    def read(self, path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ParseError(path, f"file is not valid UTF-8 ({e.reason})") from e

    def parse(self, path: str) -> ConfigDocument:
        """Read the file at `path` and return it as flat document."""
        self.logger.debug(f"parsing {path!r} as {self.format}")
        values = self.do_parse(self.read(path), path)
        self.logger.debug(f"found {len(values)} keys in {path!r}")
        return ConfigDocument(path=path, format=self.format, values=values)
