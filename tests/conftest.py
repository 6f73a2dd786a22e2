"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from core.config import PlasticListConfig


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def sample_config(monkeypatch: pytest.MonkeyPatch) -> PlasticListConfig:
    """Runtime config pointing at the bundled sample dataset."""
    from core.config import PlasticListConfig
    from tests.fixture_paths import sample_dataset_path

    monkeypatch.delenv("PLASTICLIST_MAX_SAFEST_RESULTS", raising=False)
    return replace(PlasticListConfig.from_env(), data_path=str(sample_dataset_path()))
