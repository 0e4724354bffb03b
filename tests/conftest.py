from __future__ import annotations

import pytest

from src.roster_system.roster_system.main import create_app
from src.roster_system.roster_system.roster.service import RosterService
from src.roster_system.roster_system.roster.store import RosterStore


@pytest.fixture
def store():
    return RosterStore()


@pytest.fixture
def service(store):
    return RosterService(store)


@pytest.fixture
def changes(store):
    """Record every change notification emitted by `store`."""
    seen = []
    store.subscribe(seen.append)
    return seen


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()
