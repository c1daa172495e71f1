"""Shared pytest fixtures."""

import json

import matplotlib
import pytest

matplotlib.use("Agg")

from sunpath.models import GeoLocation  # noqa: E402


@pytest.fixture
def chemnitz() -> GeoLocation:
    return GeoLocation(lat_deg=50.836, lon_deg=12.923)


@pytest.fixture
def munich() -> GeoLocation:
    return GeoLocation(lat_deg=48.1, lon_deg=11.6)


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON document to a temporary config file and return its path."""

    def _write(data, name: str = "config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
