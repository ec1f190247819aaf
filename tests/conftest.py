from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def secrets_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the server at an empty secrets file under tmp_path."""
    path = tmp_path / ".secrets"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("TOTP_MCP_SECRETS_FILE", str(path))
    return path
