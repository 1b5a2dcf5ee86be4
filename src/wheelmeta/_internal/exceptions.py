"""Exceptions used throughout package.

All of these are terminal: they describe structurally invalid input, never a
transient condition, so nothing here is meant to be retried.
"""

from __future__ import annotations


class WheelMetaError(Exception):
    """The base wheelmeta error."""


class InvalidVersion(WheelMetaError, ValueError):
    """A version string does not conform to PEP 440."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid version: {version!r}")


# Wheel filenames


class InvalidWheelFilename(WheelMetaError, ValueError):
    """Invalid wheel filename."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid wheel filename ({reason}): {filename!r}")


class MissingExtension(InvalidWheelFilename):
    def __init__(self, filename: str, extension: str) -> None:
        self.extension = extension
        super().__init__(filename, f"extension must be {extension!r}")


class MalformedFilename(InvalidWheelFilename):
    """The filename does not split into the expected hyphen-separated fields."""


class InvalidDistributionName(MalformedFilename):
    def __init__(self, filename: str, name: str) -> None:
        self.name = name
        super().__init__(filename, f"invalid project name {name!r}")


class InvalidFilenameVersion(InvalidWheelFilename):
    def __init__(self, filename: str, version: str) -> None:
        self.version = version
        super().__init__(filename, f"invalid version {version!r}")


class InvalidBuildTag(InvalidWheelFilename):
    def __init__(self, filename: str, build_tag: str) -> None:
        self.build_tag = build_tag
        super().__init__(filename, f"invalid build number {build_tag!r}")


class EmptyTagSegment(InvalidWheelFilename):
    def __init__(self, filename: str, segment: str) -> None:
        self.segment = segment
        super().__init__(filename, f"empty compatibility tag in {segment!r}")


class MalformedTag(WheelMetaError, ValueError):
    """A compatibility tag is not of the form ``{python}-{abi}-{platform}``.

    Raised when expanding a standalone tag string, such as a ``Tag`` value
    from a WHEEL file, rather than a whole filename.
    """

    def __init__(self, tag: str, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"Invalid compatibility tag ({reason}): {tag!r}")


# WHEEL metadata files


class InvalidWheelMetadata(WheelMetaError, ValueError):
    """Invalid contents of a ``.dist-info/WHEEL`` file."""


class MalformedLine(InvalidWheelMetadata):
    def __init__(self, line_no: int, line: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"WHEEL line {line_no} is not 'Key: value': {line!r}")


class MissingField(InvalidWheelMetadata):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"WHEEL is missing required field {name!r}")


class DuplicateField(InvalidWheelMetadata):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"WHEEL field {name!r} may only appear once")


class InvalidWheelVersion(InvalidWheelMetadata):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"WHEEL has an invalid Wheel-Version: {version!r}")


class InvalidBoolean(InvalidWheelMetadata):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"WHEEL Root-Is-Purelib must be 'true' or 'false', not {value!r}"
        )
