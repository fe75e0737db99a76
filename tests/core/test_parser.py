from __future__ import annotations

import logging

import pytest

from semparse.core import parse
from semparse.core.components import NumericComponent, StringComponent
from semparse.core.errors import (
    GrammarError,
    InvalidCharacter,
    InvalidPrecedingZero,
    VersionParseError,
)
from semparse.core.grammar import Dialect, PartType
from semparse.core.version import Version


def test_parse_full_version() -> None:
    v = parse("12.19.1-alpha.12+build1234", Dialect.STANDARD)

    assert (v.major, v.minor, v.patch) == (12, 19, 1)
    assert v.prerelease == (StringComponent("alpha"), NumericComponent(12))
    assert v.build_metadata == "build1234"
    assert v.dialect is Dialect.STANDARD


def test_parse_hyphens_inside_prerelease_and_build() -> None:
    v = parse("10.2.1-alpha.1+build-1")
    assert v.prerelease == (StringComponent("alpha"), NumericComponent(1))
    assert v.build_metadata == "build-1"

    v = parse("1.0.0-alpha-1.2")
    assert v.prerelease == (StringComponent("alpha-1"), NumericComponent(2))


def test_parse_build_without_prerelease() -> None:
    v = parse("1.0.0+exp.sha.5114f85")
    assert v.prerelease is None
    assert v.build_metadata == "exp.sha.5114f85"


@pytest.mark.parametrize(
    "text,core",
    [
        ("1", (1, 0, 0)),
        ("1.2", (1, 2, 0)),
        ("0", (0, 0, 0)),
        ("0.0.0", (0, 0, 0)),
        ("10.20.30", (10, 20, 30)),
    ],
)
def test_unreached_numeric_parts_default_to_zero(text: str, core: tuple[int, int, int]) -> None:
    v = parse(text)
    assert v.core == core
    assert v.prerelease is None
    assert v.build_metadata is None


@pytest.mark.parametrize(
    "text,error",
    [
        ("abc.1.0", InvalidCharacter(PartType.MAJOR)),
        ("12.019.1", InvalidPrecedingZero(PartType.MINOR)),
        ("01.0.0", InvalidPrecedingZero(PartType.MAJOR)),
        ("0-alpha", InvalidPrecedingZero(PartType.MAJOR)),
        ("1.0.01-x", InvalidPrecedingZero(PartType.PATCH)),
        ("1.0.0.1", InvalidPrecedingZero(PartType.PATCH)),
        ("1.0.1.1", InvalidCharacter(PartType.PATCH)),
        ("1.2-3", InvalidCharacter(PartType.MINOR)),
        ("1-alpha", InvalidCharacter(PartType.MAJOR)),
        ("1.0.0-alpha_beta", InvalidCharacter(PartType.PRERELEASE)),
        ("1.0.0-é", InvalidCharacter(PartType.PRERELEASE)),
        ("1.0.0+bu+ild", InvalidCharacter(PartType.BUILD_METADATA)),
        ("v1.0.0", InvalidCharacter(PartType.MAJOR)),
        (" 1.0.0", InvalidCharacter(PartType.MAJOR)),
    ],
)
def test_parse_rejects_first_violation(text: str, error: VersionParseError) -> None:
    with pytest.raises(VersionParseError) as info:
        parse(text)
    assert info.value == error
    assert type(info.value) is type(error)


@pytest.mark.parametrize(
    "text,part",
    [
        ("", PartType.MAJOR),
        ("1.", PartType.MINOR),
        ("1..2", PartType.MINOR),
        ("1.0.", PartType.PATCH),
        ("1.0.0-", PartType.PRERELEASE),
        ("1.0.0-a..b", PartType.PRERELEASE),
        ("1.0.0-+b", PartType.PRERELEASE),
        ("1.0.0+", PartType.BUILD_METADATA),
    ],
)
def test_parse_rejects_empty_parts(text: str, part: PartType) -> None:
    with pytest.raises(InvalidCharacter) as info:
        parse(text)
    assert info.value.part is part


def test_numeric_prerelease_components_keep_leading_zeros_lenient() -> None:
    v = parse("1.0.0-01")

    assert v.prerelease == (NumericComponent(1),)
    assert str(v) == "1.0.0-1"
    assert v == parse("1.0.0-1")


def test_parse_accepts_bytes_and_dialect_names() -> None:
    assert parse(b"1.2.3-rc.1") == parse("1.2.3-rc.1")
    assert parse(bytearray(b"1.2.3")) == parse("1.2.3")
    assert parse(memoryview(b"1.0.0-x.7")) == parse("1.0.0-x.7")
    assert parse("1.2.3", "STANDARD").dialect is Dialect.STANDARD


def test_parse_rejects_unknown_dialect_and_non_text() -> None:
    with pytest.raises(GrammarError):
        parse("1.2.3", "npm")
    with pytest.raises(TypeError):
        parse(123)  # type: ignore[arg-type]


def test_version_parse_classmethod_delegates() -> None:
    assert Version.parse("2.0.0-beta") == parse("2.0.0-beta")


@pytest.mark.parametrize(
    "text",
    [
        "0.0.4",
        "1.2.3",
        "10.20.30",
        "1.1.2-prerelease+meta",
        "1.0.0-alpha.beta.1",
        "1.0.0-alpha0.valid",
        "1.0.0-rc.1+build.1",
        "2.0.0-rc.1+build.123",
        "1.0.0-0A.is.legal",
        "1.2.3----RC-SNAPSHOT.12.9.1--.12+788",
        "99999999999999999999999.999999999999999999.99999999999999999",
    ],
)
def test_canonical_strings_round_trip(text: str) -> None:
    assert str(parse(text)) == text


def test_parse_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="semparse.core.parser")

    parse("1.2.3")
    with pytest.raises(InvalidPrecedingZero):
        parse("1.02.3")

    messages = [r.getMessage() for r in caplog.records if r.name == "semparse.core.parser"]
    assert any("Parsed '1.2.3'" in m for m in messages)
    assert any("Rejected '1.02.3'" in m for m in messages)
