"""pytest configuration and shared fixtures."""
from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure the project root is available on sys.path so tests can import the bookyz package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep the module-level app in bookyz.main off the real database file.
os.environ.setdefault("BOOKYZ_DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient  # noqa: E402

from bookyz.appointments import AppointmentStore  # noqa: E402
from bookyz.booking import BookingFlow  # noqa: E402
from bookyz.catalog import load_catalog  # noqa: E402
from bookyz.db import init_db, make_engine  # noqa: E402
from bookyz.main import create_app  # noqa: E402
from bookyz.storage import KeyValueStore  # noqa: E402

# Monday morning
FIXED_NOW = datetime(2026, 10, 19, 9, 45)


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return Clock(FIXED_NOW)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    return engine


@pytest.fixture
def storage(engine):
    return KeyValueStore(engine)


@pytest.fixture
def catalog(clock):
    return load_catalog(clock())


@pytest.fixture
def store(storage):
    return AppointmentStore(storage)


@pytest.fixture
def flow(catalog, store, clock):
    return BookingFlow(catalog, store, clock)


@pytest.fixture
def app(engine, clock):
    return create_app(engine=engine, clock=clock)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def state(app):
    return app.state.bookyz
