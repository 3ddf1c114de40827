"""Shared fixtures for the combat gauge test suite."""

import json

import pytest

from src.gauge_app.settings import GaugeSettings, GaugeUser
from src.gauge_core.aggregator import ForceMetricsAggregator


@pytest.fixture
def write_snapshot(tmp_path):
    """Write a payload to a temp file and return its path."""
    def _write(payload, name="snapshot.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write


@pytest.fixture(scope="module")
def aggregator():
    return ForceMetricsAggregator()


@pytest.fixture
def gm_user():
    return GaugeUser(name="Dana", is_gm=True)


@pytest.fixture
def player_user():
    return GaugeUser(name="Sam", is_gm=False)


@pytest.fixture
def default_settings():
    return GaugeSettings()
