from __future__ import annotations

import logging

import pytest
from packaging.tags import Tag

from wheelmeta import (
    Cardinality,
    DuplicateField,
    InvalidBoolean,
    InvalidVersion,
    InvalidWheelMetadata,
    InvalidWheelVersion,
    MalformedLine,
    MalformedTag,
    MissingField,
    Version,
    WheelMetadata,
)

from tests.lib.wheel_file import SIMPLE_WHEEL_LINES, make_wheel_body, without_key


def test_parse_simple() -> None:
    metadata = WheelMetadata.parse(make_wheel_body(*SIMPLE_WHEEL_LINES))
    assert metadata == WheelMetadata(
        wheel_version=Version.parse("1.0"),
        generator="bdist_wheel 1.0",
        root_is_purelib=True,
        tags=("py2-none-any", "py3-none-any"),
        build="1",
    )


def test_parse_minimal() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body(
            "Wheel-Version: 1.0",
            "Root-Is-Purelib: false",
            "Tag: cp311-cp311-manylinux_2_17_x86_64",
            "Tag: cp311-cp311-musllinux_1_1_x86_64",
        )
    )
    assert metadata.tags == (
        "cp311-cp311-manylinux_2_17_x86_64",
        "cp311-cp311-musllinux_1_1_x86_64",
    )
    assert metadata.root_is_purelib is False
    assert metadata.generator is None
    assert metadata.build is None


def test_no_tags() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body("Wheel-Version: 1.0", "Root-Is-Purelib: true")
    )
    assert metadata.tags == ()


def test_keys_are_case_insensitive() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body(
            "wheel-version: 1.0",
            "GENERATOR: flit 3.9.0",
            "root-is-PURELIB:   TRUE  ",
            "tAg: py3-none-any",
            "build:7",
        )
    )
    assert metadata.wheel_version == Version.parse("1.0")
    assert metadata.generator == "flit 3.9.0"
    assert metadata.root_is_purelib is True
    assert metadata.tags == ("py3-none-any",)
    assert metadata.build == "7"


def test_blank_lines_and_line_endings() -> None:
    body = "\r\n".join(
        ["", "Wheel-Version: 1.0", "   ", "Root-Is-Purelib: False", "\t", "", ""]
    )
    metadata = WheelMetadata.parse(body)
    assert metadata.root_is_purelib is False


def test_unknown_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    metadata = WheelMetadata.parse(
        make_wheel_body(*SIMPLE_WHEEL_LINES, "Some-Future-Field: anything: at all")
    )
    assert metadata.tags == ("py2-none-any", "py3-none-any")
    assert "some-future-field" in caplog.text


@pytest.mark.parametrize(
    "separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"]
)
def test_only_newlines_end_a_line(separator: str) -> None:
    body = make_wheel_body(
        "Wheel-Version: 1.0",
        f"Generator: tool{separator}1.0",
        "Root-Is-Purelib: true",
        "not a field",
    )
    with pytest.raises(MalformedLine) as exc_info:
        WheelMetadata.parse(body)
    assert exc_info.value.line_no == 4

    metadata = WheelMetadata.parse(
        make_wheel_body(*without_key("Generator"), f"Generator: tool{separator}1.0")
    )
    assert metadata.generator == f"tool{separator}1.0"


def test_old_mac_line_endings() -> None:
    metadata = WheelMetadata.parse("Wheel-Version: 1.0\rRoot-Is-Purelib: true\r")
    assert metadata.root_is_purelib is True


def test_leading_byte_order_mark() -> None:
    metadata = WheelMetadata.parse("\ufeff" + make_wheel_body(*SIMPLE_WHEEL_LINES))
    assert metadata.wheel_version == Version.parse("1.0")


def test_value_may_contain_colon() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body(
            "Wheel-Version: 1.0",
            "Generator: custom: builder 1.0",
            "Root-Is-Purelib: true",
        )
    )
    assert metadata.generator == "custom: builder 1.0"


@pytest.mark.parametrize(
    "key, name",
    [
        ("Wheel-Version", "wheel-version"),
        ("Root-Is-Purelib", "root-is-purelib"),
    ],
)
def test_missing_field(key: str, name: str) -> None:
    with pytest.raises(MissingField) as exc_info:
        WheelMetadata.parse(make_wheel_body(*without_key(key)))
    assert exc_info.value.name == name


@pytest.mark.parametrize(
    "line, name",
    [
        ("Wheel-Version: 2.0", "wheel-version"),
        ("Generator: bdist_wheel 2.0", "generator"),
        ("root-is-purelib: true", "root-is-purelib"),
        ("Build: 2", "build"),
    ],
)
def test_duplicate_field(line: str, name: str) -> None:
    with pytest.raises(DuplicateField) as exc_info:
        WheelMetadata.parse(make_wheel_body(*SIMPLE_WHEEL_LINES, line))
    assert exc_info.value.name == name


def test_fields_are_checked_in_order() -> None:
    body = make_wheel_body("Generator: a", "Generator: b", "Root-Is-Purelib: true")
    with pytest.raises(MissingField) as exc_info:
        WheelMetadata.parse(body)
    assert exc_info.value.name == "wheel-version"


def test_malformed_line() -> None:
    body = make_wheel_body("Wheel-Version: 1.0", "", "not a field", "Tag: py3-none-any")
    with pytest.raises(MalformedLine) as exc_info:
        WheelMetadata.parse(body)
    assert exc_info.value.line_no == 3
    assert exc_info.value.line == "not a field"
    assert "line 3" in str(exc_info.value)


@pytest.mark.parametrize("value", ["one", "", "1.0.0.dev0-"])
def test_invalid_wheel_version(value: str) -> None:
    body = make_wheel_body(f"Wheel-Version: {value}", "Root-Is-Purelib: true")
    with pytest.raises(InvalidWheelVersion) as exc_info:
        WheelMetadata.parse(body)
    assert exc_info.value.version == value
    assert isinstance(exc_info.value.__cause__, InvalidVersion)


@pytest.mark.parametrize("value", ["yes", "1", "", "truthy"])
def test_invalid_boolean(value: str) -> None:
    body = make_wheel_body("Wheel-Version: 1.0", f"Root-Is-Purelib: {value}")
    with pytest.raises(InvalidBoolean) as exc_info:
        WheelMetadata.parse(body)
    assert exc_info.value.value == value


def test_errors_share_a_base() -> None:
    with pytest.raises(InvalidWheelMetadata):
        WheelMetadata.parse("")
    with pytest.raises(ValueError):
        WheelMetadata.parse("garbage")


def test_expanded_tags() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body(
            "Wheel-Version: 1.0",
            "Root-Is-Purelib: true",
            "Tag: py2.py3-none-any",
            "Tag: cp311-abi3-win32",
        )
    )
    assert metadata.tags == ("py2.py3-none-any", "cp311-abi3-win32")
    assert metadata.expanded_tags() == (
        Tag("py2", "none", "any"),
        Tag("py3", "none", "any"),
        Tag("cp311", "abi3", "win32"),
    )


def test_expanded_tags_malformed() -> None:
    metadata = WheelMetadata.parse(
        make_wheel_body("Wheel-Version: 1.0", "Root-Is-Purelib: true", "Tag: py3")
    )
    assert metadata.tags == ("py3",)
    with pytest.raises(MalformedTag):
        metadata.expanded_tags()


def test_to_text_round_trip() -> None:
    metadata = WheelMetadata.parse(make_wheel_body(*SIMPLE_WHEEL_LINES))
    assert metadata.to_text() == make_wheel_body(*SIMPLE_WHEEL_LINES)
    assert WheelMetadata.parse(metadata.to_text()) == metadata


def test_to_text_omits_absent_fields() -> None:
    metadata = WheelMetadata(
        wheel_version=Version.parse("1.0"),
        generator=None,
        root_is_purelib=False,
        tags=(),
        build=None,
    )
    assert metadata.to_text() == "Wheel-Version: 1.0\nRoot-Is-Purelib: false\n"


@pytest.mark.parametrize(
    "cardinality, count, error",
    [
        (Cardinality.ExactlyOne, 0, MissingField),
        (Cardinality.ExactlyOne, 1, None),
        (Cardinality.ExactlyOne, 2, DuplicateField),
        (Cardinality.AtMostOne, 0, None),
        (Cardinality.AtMostOne, 1, None),
        (Cardinality.AtMostOne, 2, DuplicateField),
        (Cardinality.ZeroOrMore, 0, None),
        (Cardinality.ZeroOrMore, 5, None),
    ],
)
def test_cardinality_check(
    cardinality: Cardinality, count: int, error: type[Exception] | None
) -> None:
    if error is None:
        cardinality.check("field", count)
    else:
        with pytest.raises(error):
            cardinality.check("field", count)
