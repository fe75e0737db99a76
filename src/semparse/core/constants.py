"""
semparse defaults shared by the core and the command line.

Defines the default dialect name and the configuration lookup names consumed by
semparse.cli.config. This module is zero-IO and uses only the Python standard library.

Notes:
    - semparse.cli.config reads ``SEMPARSE_*`` environment variables first, then
      ``./semparse.toml``, then ``[tool.semparse]`` in ``./pyproject.toml``.
    - DEFAULT_DIALECT must name a member of semparse.core.grammar.Dialect.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DIALECT",
    "ENV_PREFIX",
    "CONFIG_FILE_NAME",
    "CONFIG_TABLE",
    "PYPROJECT_TOOL_KEY",
]

# Dialect used when neither the caller nor configuration selects one.
DEFAULT_DIALECT: str = "standard"

# Prefix for environment overrides (e.g., SEMPARSE_DIALECT).
ENV_PREFIX: str = "SEMPARSE_"

# Project-local config file and the table read from it (top-level keys also accepted).
CONFIG_FILE_NAME: str = "semparse.toml"
CONFIG_TABLE: str = "cli"

# pyproject.toml location: [tool.semparse]
PYPROJECT_TOOL_KEY: str = "semparse"
