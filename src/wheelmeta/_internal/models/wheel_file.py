"""The ``{name}-{version}.dist-info/WHEEL`` metadata file.

Its body is a series of ``Key: value`` lines. Keys are case-insensitive,
``Tag`` may repeat, every other known key is a singleton, and unknown keys are
skipped so that newer wheels still parse.
"""

from __future__ import annotations

import enum
import itertools
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from packaging.tags import Tag

from wheelmeta._internal.exceptions import (
    DuplicateField,
    InvalidBoolean,
    InvalidVersion,
    InvalidWheelVersion,
    MalformedLine,
    MissingField,
)
from wheelmeta._internal.utils.filename_parsing import expand_compressed_tag
from wheelmeta._internal.utils.version import Version

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class Cardinality(enum.Enum):
    ExactlyOne = enum.auto()
    AtMostOne = enum.auto()
    ZeroOrMore = enum.auto()

    def check(self, name: str, count: int) -> None:
        if count == 0 and self == type(self).ExactlyOne:
            raise MissingField(name)
        if count > 1 and self != type(self).ZeroOrMore:
            raise DuplicateField(name)


# Recognized keys, lower-cased, in the order they are validated and written.
WHEEL_FIELDS: dict[str, Cardinality] = {
    "wheel-version": Cardinality.ExactlyOne,
    "generator": Cardinality.AtMostOne,
    "root-is-purelib": Cardinality.ExactlyOne,
    "tag": Cardinality.ZeroOrMore,
    "build": Cardinality.AtMostOne,
}

# Only newlines end a line; other characters str.splitlines() honours, such as
# form feeds or U+2028, may appear inside a value.
_line_break = re.compile(r"\r\n|\r|\n")


def _collect_fields(body: str) -> dict[str, list[str]]:
    fields: dict[str, list[str]] = {name: [] for name in WHEEL_FIELDS}
    # A UTF-8 BOM left by the decoder is not part of the first key.
    body = body.removeprefix("\ufeff")
    for line_no, line in enumerate(_line_break.split(body), start=1):
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        if not sep:
            raise MalformedLine(line_no, line)
        key = key.strip().lower()
        if key not in fields:
            logger.debug("ignoring unrecognized WHEEL key %r on line %d", key, line_no)
            continue
        fields[key].append(value.strip())
    return fields


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise InvalidBoolean(value)


@dataclass(frozen=True)
class WheelMetadata:
    wheel_version: Version
    generator: str | None
    root_is_purelib: bool
    tags: tuple[str, ...]
    build: str | None

    @classmethod
    def parse(cls, body: str) -> Self:
        """Parse the decoded text of a WHEEL file.

        :raises: wheelmeta.InvalidWheelMetadata: on the first malformed line,
            missing or repeated field, or unparseable value.
        """
        fields = _collect_fields(body)
        for name, cardinality in WHEEL_FIELDS.items():
            cardinality.check(name, len(fields[name]))

        (raw_version,) = fields["wheel-version"]
        try:
            wheel_version = Version.parse(raw_version)
        except InvalidVersion as e:
            raise InvalidWheelVersion(raw_version) from e

        (raw_purelib,) = fields["root-is-purelib"]

        return cls(
            wheel_version=wheel_version,
            generator=next(iter(fields["generator"]), None),
            root_is_purelib=_parse_bool(raw_purelib),
            tags=tuple(fields["tag"]),
            build=next(iter(fields["build"]), None),
        )

    def expanded_tags(self) -> tuple[Tag, ...]:
        """Expand each ``Tag`` value, in file order, into the tags it names.

        A value may itself use dotted alternatives (``py2.py3-none-any``);
        :meth:`parse` keeps the raw strings and leaves that expansion to here.

        :raises: wheelmeta.MalformedTag: if a value is not a valid tag.
        """
        return tuple(
            itertools.chain.from_iterable(map(expand_compressed_tag, self.tags))
        )

    def to_text(self) -> str:
        lines = [f"Wheel-Version: {self.wheel_version}"]
        if self.generator is not None:
            lines.append(f"Generator: {self.generator}")
        lines.append(f"Root-Is-Purelib: {'true' if self.root_is_purelib else 'false'}")
        lines.extend(f"Tag: {tag}" for tag in self.tags)
        if self.build is not None:
            lines.append(f"Build: {self.build}")
        return "\n".join(lines) + "\n"
