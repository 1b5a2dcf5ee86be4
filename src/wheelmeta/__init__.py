"""Read the identity of a wheel from its filename and its ``WHEEL`` file."""

from __future__ import annotations

from wheelmeta._internal.exceptions import (
    DuplicateField,
    EmptyTagSegment,
    InvalidBoolean,
    InvalidBuildTag,
    InvalidDistributionName,
    InvalidFilenameVersion,
    InvalidVersion,
    InvalidWheelFilename,
    InvalidWheelMetadata,
    InvalidWheelVersion,
    MalformedFilename,
    MalformedLine,
    MalformedTag,
    MissingExtension,
    MissingField,
    WheelMetaError,
)
from wheelmeta._internal.models.wheel import WheelFilename
from wheelmeta._internal.models.wheel_file import Cardinality, WheelMetadata
from wheelmeta._internal.utils.filename_parsing import expand_compressed_tag
from wheelmeta._internal.utils.version import Version

__version__ = "0.1.0"

__all__ = [
    "Cardinality",
    "DuplicateField",
    "EmptyTagSegment",
    "InvalidBoolean",
    "InvalidBuildTag",
    "InvalidDistributionName",
    "InvalidFilenameVersion",
    "InvalidVersion",
    "InvalidWheelFilename",
    "InvalidWheelMetadata",
    "InvalidWheelVersion",
    "MalformedFilename",
    "MalformedLine",
    "MalformedTag",
    "MissingExtension",
    "MissingField",
    "Version",
    "WheelFilename",
    "WheelMetaError",
    "WheelMetadata",
    "expand_compressed_tag",
]
