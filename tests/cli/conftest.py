from __future__ import annotations

import logging
from pathlib import Path

import pytest

ENV_KEYS = [
    "SEMPARSE_DIALECT",
    "SEMPARSE_OUTPUT_FORMAT",
    "SEMPARSE_LOG_LEVEL",
    "SEMPARSE_REVERSE",
]


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every CLI test in an empty directory with no SEMPARSE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield tmp_path
    # main() configures the root logger; undo it so handlers never outlive capsys.
    root.setLevel(level)
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in handlers:
            root.removeHandler(handler)
