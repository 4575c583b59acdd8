"""
Root conftest.py for certificate-maker tests.

Fixtures wire the real app, store and repository to the in-memory fakes in
``tests/fakes.py``; no MongoDB server is needed.
"""

from __future__ import annotations

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from certificate_maker.api.fastapi import create_app
from certificate_maker.app.settings import AppSettings
from certificate_maker.db.settings import MongoSettings
from certificate_maker.db.store import MongoStore
from tests.fakes import FakeCollection, FakeDatabase, FakeMongoClient, at


@pytest.fixture
def mongo_settings() -> MongoSettings:
    return MongoSettings(
        url="mongodb://localhost:27017",
        database="certificateMaker_test",
        collection="certificates",
        operation_timeout_seconds=1,
        connect_timeout_seconds=1,
        disconnect_timeout_seconds=1,
    )


@pytest.fixture
def fake_mongo_client() -> FakeMongoClient:
    return FakeMongoClient()


@pytest.fixture
def store(mongo_settings, fake_mongo_client) -> MongoStore:
    return MongoStore(mongo_settings, client=fake_mongo_client)


@pytest.fixture
def collection(store) -> FakeCollection:
    return store.collection


@pytest.fixture
def fake_database(store) -> FakeDatabase:
    return store.database


@pytest.fixture
def repo(store):
    return store.certificates()


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(allowed_origin="*")


@pytest.fixture
def app(store, app_settings) -> FastAPI:
    return create_app(store=store, app_settings=app_settings)


@pytest.fixture
def client(app) -> TestClient:
    """Client without lifespan: no ping, no seeding."""
    return TestClient(app)


@pytest.fixture
def stored_certificate(collection) -> ObjectId:
    return collection.seed(
        name="Workshop Completion",
        bgImage="https://cdn.example.com/bg.png",
        elements=[
            {"id": "title", "type": "text", "content": "Workshop", "x": 10, "y": 20, "zIndex": 1},
        ],
        createdAt=at(0),
        updatedAt=at(5),
    )
