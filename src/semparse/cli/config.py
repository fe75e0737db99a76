"""
Configuration for the semparse command line.

Defines CliSettings, a frozen dataclass carrying runtime configuration for the CLI.
Defaults are sourced from semparse.core.constants (the single source of truth).

Source of truth
- semparse.core.constants.DEFAULT_DIALECT, ENV_PREFIX, CONFIG_FILE_NAME, CONFIG_TABLE,
  PYPROJECT_TOOL_KEY
- Dialect names are validated with semparse.core.grammar.dialect_from_value

Import DAG discipline
- Depends only on stdlib and semparse.core.
- semparse.core never imports this module.

Notes
- Precedence: environment > TOML > defaults.
- Unknown values for choice settings keep the previous value; an unknown dialect is an
  error because silently parsing under another grammar would be wrong.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from semparse.core.constants import (
    CONFIG_FILE_NAME,
    CONFIG_TABLE,
    DEFAULT_DIALECT,
    ENV_PREFIX,
    PYPROJECT_TOOL_KEY,
)
from semparse.core.errors import GrammarError
from semparse.core.grammar import Dialect, dialect_from_value

from .errors import CliConfigError

OutputFormat = Literal["text", "json"]

_OUTPUT_FORMATS = ("text", "json")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliSettings:
    """
    Runtime settings for the semparse command line.

    Attributes:
        dialect (str): Dialect name used to parse every input (default "standard").
        output_format (Literal["text","json"]): Rendering of parse results.
        log_level (str): Root logging level name configured by the CLI.
        reverse (bool): Sort descending in the ``sort`` command.

    Examples:
        >>> from semparse.cli.config import CliSettings
        >>> CliSettings(output_format="json")  # doctest: +ELLIPSIS
        CliSettings(...)
    """

    dialect: str = DEFAULT_DIALECT
    output_format: OutputFormat = "text"
    log_level: str = "WARNING"
    reverse: bool = False

    @property
    def dialect_member(self) -> Dialect:
        return dialect_from_value(self.dialect)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: CliSettings, cfg: dict[str, Any] | None) -> CliSettings:
        """Apply a loose config mapping onto CliSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        # dialect
        if "dialect" in cfg:
            try:
                s = replace(s, dialect=dialect_from_value(str(cfg["dialect"])).value)
            except GrammarError as exc:
                raise CliConfigError(str(exc)) from exc

        # output_format
        if "output_format" in cfg and isinstance(cfg["output_format"], str):
            fmt = cfg["output_format"].strip().lower()
            if fmt in _OUTPUT_FORMATS:
                s = replace(s, output_format=fmt)  # type: ignore[arg-type]
            else:
                logger.warning("Ignoring unknown output_format %r", cfg["output_format"])

        # log_level
        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)
            else:
                logger.warning("Ignoring unknown log_level %r", cfg["log_level"])

        # reverse
        if "reverse" in cfg:
            s = replace(s, reverse=_bool(cfg["reverse"]))

        return s

    @classmethod
    def from_env(cls, base: CliSettings | None = None, prefix: str = ENV_PREFIX) -> CliSettings:
        """
        Build CliSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - SEMPARSE_DIALECT
            - SEMPARSE_OUTPUT_FORMAT ("text" | "json")
            - SEMPARSE_LOG_LEVEL (DEBUG/INFO/WARNING/ERROR/CRITICAL)
            - SEMPARSE_REVERSE (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("dialect", "output_format", "log_level", "reverse"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CliSettings:
        """
        Build CliSettings from a TOML file.

        Search order when `path` is None:
            1) ./semparse.toml (with either a top-level [cli] table or direct keys)
            2) ./pyproject.toml under [tool.semparse]

        Returns defaults if no file is present.

        Raises:
            CliConfigError: If an explicit `path` cannot be read or is not valid TOML.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                if path is not None:
                    raise CliConfigError(f"Cannot read config {p}: {exc}") from exc
                logger.warning("Skipping unreadable config %s: %s", p, exc)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / CONFIG_FILE_NAME)
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                if path is not None:
                    raise CliConfigError(f"Config file not found: {p}")
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                # Expect [tool.semparse]
                tool = data.get("tool", {})
                cfg = tool.get(PYPROJECT_TOOL_KEY) if isinstance(tool, dict) else None
            else:
                # semparse.toml - accept either [cli] table or top-level keys
                top = data
                if CONFIG_TABLE in top and isinstance(top[CONFIG_TABLE], dict):
                    cfg = top[CONFIG_TABLE]
                else:
                    cfg = top
            if cfg:
                logger.debug("Loaded CLI settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CliSettings:
        """
        Load CliSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (semparse.toml,
                pyproject.toml).

        Returns:
            CliSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
