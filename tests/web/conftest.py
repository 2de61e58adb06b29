"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wind_instrument.display.engine import WindDisplayEngine
from wind_instrument.web.app import app


@pytest.fixture
def client():
    """FastAPI test client on a fresh display session."""
    app.state.engine = WindDisplayEngine()
    with TestClient(app) as c:
        yield c
