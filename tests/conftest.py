"""Shared fixtures for the convertor tests."""

import json

import pytest

from ConversionConfig import CONFIG_ENV_VAR, ConversionConfig
from MeasurementComparator import MeasurementComparator
from MeasurementConvertor import MeasurementConvertor


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test from an empty directory with no config override set."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def convertor():
    """Provide a convertor with the built-in defaults (precision 2, C -> F)."""
    return MeasurementConvertor(ConversionConfig())


@pytest.fixture
def comparator():
    return MeasurementComparator(ConversionConfig())


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file and return its path."""
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
