"""
Custom exceptions for the semparse.cli module.

Purpose
- Provide CLI-layer error types distinct from core parse errors.
- Keep semparse.core as the source of truth for grammar/parse errors (see
  semparse.core.errors).

Source of truth and boundaries
- semparse.core.errors.VersionParseError is raised by the parser for invalid versions;
  the CLI reports it per input and exits with status 1.
- semparse.cli raises Cli* errors for configuration concerns:
  - CliConfigError: invalid or unsupported configuration value.
"""

from __future__ import annotations


class CliError(Exception):
    """
    Base class for command-line errors in semparse.cli.

    Notes:
        Use this as a catch-all for CLI-layer failures, distinct from core errors.
    """


class CliConfigError(CliError):
    """
    Raised when configuration is invalid or unsupported.

    Examples:
        - Unknown dialect name in SEMPARSE_DIALECT or semparse.toml
        - Unreadable explicit --config path
    """
