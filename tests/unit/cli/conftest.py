"""Shared fixtures for CLI command tests.

Fixtures from parent conftest files (cli_runner, temp_dir, clean_env,
todo_project) cover most needs; this module only isolates the user config.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: temp_dir / "home")
