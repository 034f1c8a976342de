from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from create_godotrs.config import ProjectConfig  # noqa: E402


@pytest.fixture()
def config(tmp_path: Path) -> ProjectConfig:
    """Basic project config rooted in a fresh temporary directory."""

    return ProjectConfig.new("testproject").with_base_path(tmp_path)
