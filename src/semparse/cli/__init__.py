"""
semparse.cli: command line and configuration for semparse.

## Public API
- CliSettings: runtime settings loaded with precedence env > TOML > defaults.
- main: console entrypoint (``semparse`` script, ``python -m semparse``).

## Import DAG discipline
- Depends on stdlib, pydantic (through semparse.core.schema) and semparse.core.
- semparse.core MUST NOT import this package.
"""

from __future__ import annotations

from .config import CliSettings
from .errors import CliConfigError, CliError
from .main import main

__all__ = [
    "CliSettings",
    "CliConfigError",
    "CliError",
    "main",
]
