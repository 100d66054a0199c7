from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "testing")

import pytest

from labor_tracker.main import create_app
from labor_tracker.container import assemble

from tests.fakes import FakeAuthProvider, InMemoryCategories, InMemoryEntries, mason


@pytest.fixture
def categories_repo():
    return InMemoryCategories([mason(), mason(category_id="cat-helper", name="Helper", short_code="H", hourly_rate=60.0)])


@pytest.fixture
def entries_repo():
    return InMemoryEntries()


@pytest.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest.fixture
def container(entries_repo, categories_repo, auth_provider):
    return assemble(entries_repo=entries_repo, categories_repo=categories_repo, auth_provider=auth_provider)


@pytest.fixture
def app(container):
    app = create_app(container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    client.post("/login", data={"email": "sup@example.com", "password": "secret"})
    return client
