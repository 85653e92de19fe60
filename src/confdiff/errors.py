#!/usr/bin/env python3
from __future__ import annotations


class CompareError(RuntimeError):
    """Comparing two config files failed."""

    message = "Comparison failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def context(self) -> str:
        return ""

    def get_message(self) -> str:
        msg = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            msg += f" - {self.context}"
        return msg


class FileNotFound(CompareError):
    """One of the given config files does not exist."""

    message = "File Not Found"

    def __init__(self, path: str, message: str | None = None):
        super().__init__(message)
        self.path = str(path)

    @property
    def context(self) -> str:
        return f"File: {self.path}"


class UnsupportedFileType(CompareError):
    """The file extension is not one of .env, .yaml or .yml"""

    message = "Unsupported File type"

    def __init__(self, extension: str, message: str | None = None):
        super().__init__(message)
        self.extension = extension

    @property
    def context(self) -> str:
        return f"Type: {self.extension or '<none>'}"


class FormatMismatch(CompareError):
    """
    The two files belong to different format families,
    e.g. a dotenv file and a yaml file.
    """

    message = "Cannot compare dissimilar files"


class ParseError(CompareError):
    """The file content is not valid for its declared format."""

    message = "Could not parse file"

    def __init__(self, path: str, reason: str | None = None):
        super().__init__(f"{self.message}: {reason}" if reason else None)
        self.path = str(path)

    @property
    def context(self) -> str:
        return f"File: {self.path}"


class UnknownError(CompareError):
    """
    Any other failure while comparing.
    The original exception is available as `__cause__`.
    """

    message = "Unknown error"

    def __init__(self, original: BaseException):
        super().__init__(f"{type(original).__name__}: {original}")
        self.original = original
