from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterable
from typing import Optional

from packaging.tags import Tag
from packaging.utils import NormalizedName, canonicalize_name

from wheelmeta._internal.exceptions import (
    EmptyTagSegment,
    InvalidBuildTag,
    InvalidDistributionName,
    InvalidFilenameVersion,
    InvalidVersion,
    MalformedFilename,
    MalformedTag,
    MissingExtension,
)

from .filetypes import FileExtensions
from .version import Version

logger = logging.getLogger(__name__)

BuildTag = Optional[tuple[int, str]]

# See PEP 427 for the rules on escaping the project name.
_name_regex = re.compile(r"[\w\d._]+", re.UNICODE)

# PEP 427: The build number must start with a digit.
_build_tag_regex = re.compile(r"([0-9]+)([A-Za-z0-9._]*)")


def _empty_tag_field(fields: Iterable[str]) -> str | None:
    """Return the first dot-compressed field holding an empty tag, if any."""
    for field in fields:
        if not all(field.split(".")):
            return field
    return None


def expand_tags(pythons: str, abis: str, platforms: str) -> tuple[Tag, ...]:
    """Expand three dot-compressed tag fields into every tag they stand for.

    Python tags vary slowest and platform tags fastest, so
    ``expand_tags("py2.py3", "none", "any")`` is ``(py2-none-any,
    py3-none-any)``. Repeated alternatives within a field (compared
    case-insensitively, as :class:`Tag` lower-cases) are collapsed.
    """
    return tuple(
        Tag(interpreter, abi, platform)
        for interpreter, abi, platform in itertools.product(
            _alternatives(pythons), _alternatives(abis), _alternatives(platforms)
        )
    )


def _alternatives(field: str) -> tuple[str, ...]:
    return tuple(dict.fromkeys(tag.lower() for tag in field.split(".")))


def expand_compressed_tag(tag: str) -> tuple[Tag, ...]:
    """Expand a single ``{python}-{abi}-{platform}`` string, e.g. a WHEEL ``Tag``.

    :raises MalformedTag: if ``tag`` does not have exactly three parts, or any
        of them holds an empty tag.
    """
    fields = tag.split("-")
    if len(fields) != 3:
        raise MalformedTag(tag, f"expected 3 '-'-separated parts, got {len(fields)}")
    if (empty := _empty_tag_field(fields)) is not None:
        raise MalformedTag(tag, f"empty tag in {empty!r}")
    return expand_tags(*fields)


def parse_build_tag(filename: str, build_part: str) -> tuple[int, str]:
    build_match = _build_tag_regex.fullmatch(build_part)
    if build_match is None:
        raise InvalidBuildTag(filename, build_part)
    return int(build_match.group(1)), build_match.group(2)


def parse_wheel_filename(
    filename: str,
) -> tuple[NormalizedName, Version, BuildTag, tuple[Tag, ...]]:
    """Split a wheel filename into its name, version, build tag and tags.

    The grammar is ``{name}-{version}(-{build})?-{python}-{abi}-{platform}.whl``,
    where each of the last three fields may hold several ``.``-separated tags.

    :raises InvalidWheelFilename: on the first field found to be invalid.
    """
    stem = FileExtensions.strip_wheel_extension(filename)
    if stem is None:
        raise MissingExtension(filename, FileExtensions.WHEEL_EXTENSION)

    parts = stem.split("-")
    if len(parts) not in (5, 6):
        raise MalformedFilename(
            filename, f"expected 5 or 6 '-'-separated parts, got {len(parts)}"
        )

    name_part = parts[0]
    if "__" in name_part or _name_regex.fullmatch(name_part) is None:
        raise InvalidDistributionName(filename, name_part)
    name = canonicalize_name(name_part)

    try:
        version = Version.parse(parts[1])
    except InvalidVersion as e:
        raise InvalidFilenameVersion(filename, parts[1]) from e

    build: BuildTag = None
    if len(parts) == 6:
        build = parse_build_tag(filename, parts[2])

    tag_fields = parts[-3:]
    if (empty := _empty_tag_field(tag_fields)) is not None:
        raise EmptyTagSegment(filename, empty)
    tags = expand_tags(*tag_fields)

    logger.debug("parsed wheel filename %r into %d tag(s)", filename, len(tags))
    return (name, version, build, tags)
