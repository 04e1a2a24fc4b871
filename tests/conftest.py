from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from msgboard.main import app
from msgboard.services.message_service import message_service


@pytest.fixture
def client():
    """A TestClient bound to the application."""
    return TestClient(app)


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin the message service clock to a known instant."""
    instant = datetime(2024, 3, 5, 7, 8, 9)
    monkeypatch.setattr(message_service, "clock", lambda: instant)
    return instant
