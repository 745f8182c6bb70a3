"""Shared fixtures for regions tests"""

import logging

import pytest

from geo_regions import Region


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from REGIONS_* variables and any local .env file."""
    for var in ("REGIONS_LOG_LEVEL", "REGIONS_FEATURE_NAME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo the level a CLI run sets on the package logger."""
    yield
    logging.getLogger("geo_regions").setLevel(logging.NOTSET)


@pytest.fixture
def box():
    return Region(west=-10.0, east=10.0, south=-5.0, north=5.0)
