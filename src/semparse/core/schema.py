"""
Pydantic v2 record model for exchanging parsed versions as JSON.

VersionRecord is the serialized face of a Version: the canonical text plus its structured
fields and dialect name. Validators normalize the dialect through grammar helpers and
enforce field ranges; ``to_version`` re-parses the text and cross-checks the structured
fields so a hand-edited record cannot silently disagree with itself.

Style
- Zero-IO (stdlib + pydantic only).
- Google-style docstrings with Attributes, Raises and Examples sections.

References
- grammar: src/semparse/core/grammar.py (Dialect, dialect_from_value)
- errors: src/semparse/core/errors.py (SchemaError, GrammarError)
- tests: tests/core/test_schema_record.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .components import component_value
from .constants import DEFAULT_DIALECT
from .errors import SchemaError
from .grammar import dialect_from_value
from .parser import parse
from .version import Version

__all__ = [
    "VersionRecord",
]


class VersionRecord(BaseModel):
    """
    JSON-friendly snapshot of a parsed Version.

    Attributes:
        text (str): Canonical version text (``str(version)``).
        major (int): Major number, >= 0.
        minor (int): Minor number, >= 0.
        patch (int): Patch number, >= 0.
        prerelease (list[int | str] | None): Component values in order, or None.
        build_metadata (str | None): Opaque build text, or None.
        dialect (str): Lower_snake dialect name (normalized, e.g. "STANDARD" -> "standard").

    Raises:
        pydantic.ValidationError: If a number is negative, prerelease is an empty list,
            or dialect is unknown.

    Examples:
        >>> from semparse.core import parse
        >>> from semparse.core.schema import VersionRecord
        >>> rec = VersionRecord.from_version(parse("1.0.0-rc.1+b7"))
        >>> rec.prerelease
        ['rc', 1]
        >>> rec.to_version() == parse("1.0.0-rc.1")
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    major: int = Field(..., ge=0)
    minor: int = Field(..., ge=0)
    patch: int = Field(..., ge=0)
    prerelease: list[int | str] | None = None
    build_metadata: str | None = None
    dialect: str = DEFAULT_DIALECT

    @field_validator("dialect", mode="before")
    @classmethod
    def _normalize_dialect(cls, v: object) -> str:
        if not isinstance(v, str):
            raise ValueError(f"dialect must be a string (got {type(v).__name__})")
        return dialect_from_value(v).value

    @model_validator(mode="after")
    def _check_optional_parts(self) -> VersionRecord:
        if self.prerelease is not None and not self.prerelease:
            raise ValueError("prerelease must be null or a non-empty list")
        if self.build_metadata == "":
            raise ValueError("build_metadata must be null or non-empty")
        return self

    @classmethod
    def from_version(cls, version: Version) -> VersionRecord:
        """Snapshot a Version into a record."""
        prerelease = (
            [component_value(c) for c in version.prerelease]
            if version.prerelease is not None
            else None
        )
        return cls(
            text=str(version),
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=prerelease,
            build_metadata=version.build_metadata,
            dialect=version.dialect.value,
        )

    def to_version(self) -> Version:
        """
        Rebuild the Version by parsing ``text`` under ``dialect``.

        Raises:
            VersionParseError: If ``text`` is not a valid version.
            SchemaError: If the structured fields disagree with the parsed text.
        """
        version = parse(self.text, self.dialect)
        expected = VersionRecord.from_version(version)
        fields = set(type(self).model_fields) - {"text"}
        if expected.model_dump(include=fields) != self.model_dump(include=fields):
            raise SchemaError(
                f"VersionRecord fields do not match text {self.text!r}: "
                f"expected {expected.model_dump(include=fields)}"
            )
        return version
