"""Represents a wheel file and provides access to the various parts of the
name that have meaning.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from packaging.tags import Tag
from packaging.utils import NormalizedName

from wheelmeta._internal.utils.filename_parsing import BuildTag, parse_wheel_filename
from wheelmeta._internal.utils.filetypes import FileExtensions
from wheelmeta._internal.utils.version import Version

if TYPE_CHECKING:
    from typing_extensions import Self


@dataclass(frozen=True)
class WheelFilename:
    distribution: NormalizedName
    version: Version
    build_tag: BuildTag
    compatibility_tags: tuple[Tag, ...]

    def __post_init__(self) -> None:
        if not self.compatibility_tags:
            raise ValueError("a wheel always carries at least one tag")

    @classmethod
    def parse(cls, filename: str) -> Self:
        """Parse a bare wheel filename (no directory component).

        The specification of wheel filenames is at
        https://packaging.python.org/en/latest/specifications/binary-distribution-format/.

        :raises: wheelmeta.InvalidWheelFilename: if the name does not conform.
        """
        name, version, build_tag, tags = parse_wheel_filename(filename)
        return cls(
            distribution=name,
            version=version,
            build_tag=build_tag,
            compatibility_tags=tags,
        )

    @functools.cached_property
    def tag_set(self) -> frozenset[Tag]:
        return frozenset(self.compatibility_tags)

    @functools.cached_property
    def sorted_tag_strings(self) -> tuple[str, ...]:
        """Return the wheel's tags as a sorted tuple of strings."""
        return tuple(sorted(map(str, self.tag_set)))

    # The expanded tags are a full cross product, so each field's alternatives
    # can be recovered in their original order from the first-seen values.

    @functools.cached_property
    def python_tags(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(t.interpreter for t in self.compatibility_tags))

    @functools.cached_property
    def abi_tags(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(t.abi for t in self.compatibility_tags))

    @functools.cached_property
    def platform_tags(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(t.platform for t in self.compatibility_tags))

    def to_filename(self) -> str:
        parts = [self.distribution.replace("-", "_"), str(self.version)]
        if self.build_tag is not None:
            number, label = self.build_tag
            parts.append(f"{number}{label}")
        parts.extend(
            ".".join(tags)
            for tags in (self.python_tags, self.abi_tags, self.platform_tags)
        )
        return "-".join(parts) + FileExtensions.WHEEL_EXTENSION

    def __str__(self) -> str:
        return self.to_filename()
