#!/usr/bin/env python3
from __future__ import annotations

import logging
import os

from confdiff.document import EXTENSION_FORMATS, ConfigFormat, file_extension
from confdiff.errors import FileNotFound, FormatMismatch, UnsupportedFileType

logger = logging.getLogger("validator")


def resolve_path(path: str | os.PathLike) -> str:
    """Resolve `path` relative to the current working directory."""
    return os.path.abspath(os.path.join(os.getcwd(), os.fspath(path)))


def get_format(path: str | os.PathLike) -> ConfigFormat:
    ext = file_extension(path)
    fmt = EXTENSION_FORMATS.get(ext)
    if fmt is None:
        raise UnsupportedFileType(ext)
    return fmt


def validate(path_a, path_b) -> tuple[str, str, ConfigFormat]:
    """
    Check that both files exist, have a supported extension
    and belong to the same format family.

    Nothing is read from the files here.

    Returns
    -------
    The resolved paths of both files and their common format.

    Raises
    ------
    FileNotFound, UnsupportedFileType, FormatMismatch
    """
    resolved_a = resolve_path(path_a)
    resolved_b = resolve_path(path_b)

    for resolved in (resolved_a, resolved_b):
        if not os.path.isfile(resolved):
            raise FileNotFound(resolved)

    fmt_a = get_format(resolved_a)
    fmt_b = get_format(resolved_b)
    if fmt_a is not fmt_b:
        raise FormatMismatch()

    logger.debug(f"validated {resolved_a!r} and {resolved_b!r} as {fmt_a}")
    return resolved_a, resolved_b, fmt_a
