"""A PEP 440 version token shared by the filename and WHEEL parsers."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Union

from packaging.version import VERSION_PATTERN

from wheelmeta._internal.exceptions import InvalidVersion

from .comparisons import Infinity, InfinityType, NegativeInfinity, NegativeInfinityType

if TYPE_CHECKING:
    from typing_extensions import Self


LetterVersion = tuple[str, int]
LocalVersion = tuple[Union[int, str], ...]

_CmpLocal = Union[
    NegativeInfinityType, tuple[tuple[Union[int, NegativeInfinityType], str], ...]
]


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    epoch: int
    release: tuple[int, ...]
    pre: LetterVersion | None = None
    post: LetterVersion | None = None
    dev: LetterVersion | None = None
    local: LocalVersion | None = None

    def __post_init__(self) -> None:
        assert len(self.release) > 0

    _regex: ClassVar[re.Pattern[str]] = re.compile(
        r"^\s*" + VERSION_PATTERN + r"\s*$",
        flags=re.VERBOSE | re.IGNORECASE,
    )

    # Alternate spellings, mapped to the spelling used in normalized output.
    _letter_alternates: ClassVar[dict[str, str]] = {
        "alpha": "a",
        "beta": "b",
        "c": "rc",
        "pre": "rc",
        "preview": "rc",
        "rev": "post",
        "r": "post",
    }

    _local_separators: ClassVar[re.Pattern[str]] = re.compile(r"[\._-]")

    @classmethod
    def parse(cls, version: str) -> Self:
        """Parse a version string into a normalized representation.

        :raises InvalidVersion: if ``version`` does not conform to PEP 440.
        """
        return _cached_parse(cls, version)

    @classmethod
    def _from_match(cls, g: dict[str, str | None]) -> Self:
        release = g["release"]
        assert release is not None
        return cls(
            epoch=int(g["epoch"] or 0),
            release=tuple(int(part) for part in release.split(".")),
            pre=cls._letter_version(g["pre_l"], g["pre_n"]),
            post=cls._letter_version(g["post_l"], g["post_n1"] or g["post_n2"]),
            dev=cls._letter_version(g["dev_l"], g["dev_n"]),
            local=cls._local_version(g["local"]),
        )

    @classmethod
    def _letter_version(
        cls, letter: str | None, number: str | None
    ) -> LetterVersion | None:
        if letter:
            # A pre-release without a numeral has an implicit 0.
            letter = letter.lower()
            return cls._letter_alternates.get(letter, letter), int(number or 0)
        if number:
            # A bare number is the implicit post release syntax (e.g. 1.0-1).
            return "post", int(number)
        return None

    @classmethod
    def _local_version(cls, local: str | None) -> LocalVersion | None:
        """
        Takes a string like abc.1.twelve and turns it into ("abc", 1, "twelve").
        """
        if local is None:
            return None
        return tuple(
            int(part) if part.isdigit() else part.lower()
            for part in cls._local_separators.split(local)
        )

    # Accessors.

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) >= 2 else 0

    @property
    def micro(self) -> int:
        return self.release[2] if len(self.release) >= 3 else 0

    @property
    def is_prerelease(self) -> bool:
        return self.dev is not None or self.pre is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @functools.cached_property
    def public(self) -> Version:
        if self.local is None:
            return self
        return type(self)(self.epoch, self.release, self.pre, self.post, self.dev)

    @functools.cached_property
    def base_version(self) -> Version:
        return type(self)(self.epoch, self.release)

    # Formatting.

    @functools.cached_property
    def _str(self) -> str:
        parts = []
        if self.epoch != 0:
            parts.append(f"{self.epoch}!")
        parts.append(".".join(map(str, self.release)))
        if self.pre is not None:
            parts.append("".join(map(str, self.pre)))
        if self.post is not None:
            parts.append(f".post{self.post[1]}")
        if self.dev is not None:
            parts.append(f".dev{self.dev[1]}")
        if self.local is not None:
            parts.append("+" + ".".join(map(str, self.local)))
        return "".join(parts)

    def __str__(self) -> str:
        return self._str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.parse('{self}')"

    # Ordering.

    @functools.cached_property
    def _key(
        self,
    ) -> tuple[
        int,
        tuple[int, ...],
        InfinityType | NegativeInfinityType | LetterVersion,
        NegativeInfinityType | LetterVersion,
        InfinityType | LetterVersion,
        _CmpLocal,
    ]:
        # Trailing zeros don't affect ordering: 1.0 == 1.0.0.
        release = self.release
        while len(release) > 1 and release[-1] == 0:
            release = release[:-1]

        # 1.0.dev0 must sort before 1.0a0, so a bare dev release borrows the
        # pre-release slot. Otherwise a final release sorts after its
        # pre-releases.
        pre: InfinityType | NegativeInfinityType | LetterVersion
        if self.pre is None and self.post is None and self.dev is not None:
            pre = NegativeInfinity
        elif self.pre is None:
            pre = Infinity
        else:
            pre = self.pre

        post = NegativeInfinity if self.post is None else self.post
        dev = Infinity if self.dev is None else self.dev

        # Alphanumeric local segments sort before numeric ones, and a version
        # without a local segment sorts before one with.
        local: _CmpLocal
        if self.local is None:
            local = NegativeInfinity
        else:
            local = tuple(
                (i, "") if isinstance(i, int) else (NegativeInfinity, i)
                for i in self.local
            )

        return (self.epoch, release, pre, post, dev, local)

    def __hash__(self) -> int:
        return hash(self._key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key < other._key


@functools.cache
def _cached_parse(cls: type[Version], version: str) -> Version:
    m = cls._regex.match(version)
    if not m:
        raise InvalidVersion(version)
    return cls._from_match(m.groupdict())
