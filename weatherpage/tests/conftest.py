"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
import yaml

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def taipei_forecast() -> dict:
    return load_fixture("cwa_forecast_taipei.json")


@pytest.fixture
def empty_forecast() -> dict:
    return load_fixture("cwa_forecast_empty.json")


@pytest.fixture
def missing_pop_forecast() -> dict:
    return load_fixture("cwa_forecast_missing_pop.json")


@pytest.fixture
def fixed_now() -> datetime:
    """A Monday afternoon in Taipei."""
    return datetime(2026, 10, 19, 14, 30, tzinfo=ZoneInfo("Asia/Taipei"))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 3.0},
        "cache": {"ttl_seconds": 60},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path
