"""Filetype information."""

from __future__ import annotations

from typing import ClassVar


class FileExtensions:

    WHEEL_EXTENSION: ClassVar[str] = ".whl"

    @staticmethod
    def strip_wheel_extension(name: str) -> str | None:
        """Return `name` without its wheel extension, or None if it has none."""
        # NB: the extension is matched case-sensitively, as PEP 427 spells it.
        if name.endswith(FileExtensions.WHEEL_EXTENSION):
            return name[: -len(FileExtensions.WHEEL_EXTENSION)]
        return None
