"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
fake_db        : in-memory stand-in for the motor client, installed on
                 ``models.database.db`` for the duration of a test
client         : FastAPI TestClient bound to the app (lifespan not run)
auth_headers   : factory returning Authorization headers for a user id
goals / schedules
               : the fake collections, with a synchronous ``seed`` helper
"""

from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.auth import create_access_token
from api.main import app
from models.database import db, get_goal_collection, get_schedule_collection

# ── In-memory motor stand-in ─────────────────────────────────────────────────


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._documents[:length] if length else self._documents)


class FakeCollection:
    """Implements the subset of AsyncIOMotorCollection the app uses."""

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def seed(self, document: Dict[str, Any]) -> str:
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return str(document["_id"])

    def _first(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return next((d for d in self.documents if _matches(d, query)), None)

    async def create_index(self, *args, **kwargs) -> str:
        return "fake_index"

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        found = self._first(query)
        return copy.deepcopy(found) if found else None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        return FakeCursor([d for d in self.documents if _matches(d, query)])

    async def insert_one(self, document: Dict[str, Any]):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def replace_one(self, query: Dict[str, Any], replacement: Dict[str, Any]):
        found = self._first(query)
        if found is None:
            return SimpleNamespace(matched_count=0)
        doc_id = found["_id"]
        found.clear()
        found.update(copy.deepcopy(replacement), _id=doc_id)
        return SimpleNamespace(matched_count=1)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]):
        found = self._first(query)
        if found is None:
            return SimpleNamespace(matched_count=0)
        found.update(copy.deepcopy(update.get("$set", {})))
        return SimpleNamespace(matched_count=1)

    async def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False,
        return_document: Any = None,
    ):
        found = self._first(query)
        if found is None:
            if not upsert:
                return None
            found = {"_id": ObjectId(), **copy.deepcopy(query)}
            found.update(copy.deepcopy(update.get("$setOnInsert", {})))
            self.documents.append(found)
        found.update(copy.deepcopy(update.get("$set", {})))
        return copy.deepcopy(found)

    async def delete_one(self, query: Dict[str, Any]):
        found = self._first(query)
        if found is None:
            return SimpleNamespace(deleted_count=0)
        self.documents.remove(found)
        return SimpleNamespace(deleted_count=1)


class FakeDatabase:
    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection(name))

    def __getattr__(self, name: str) -> FakeCollection:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]


class FakeMongoClient:
    def __init__(self):
        self._databases: Dict[str, FakeDatabase] = {}

    def __getitem__(self, name: str) -> FakeDatabase:
        return self._databases.setdefault(name, FakeDatabase())

    def close(self) -> None:
        pass


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def fake_db():
    """Install an empty in-memory database on the shared connection manager."""
    previous = db.client
    db.client = FakeMongoClient()
    yield db.client
    db.client = previous


@pytest.fixture
def goals(fake_db) -> FakeCollection:
    return get_goal_collection()


@pytest.fixture
def schedules(fake_db) -> FakeCollection:
    return get_schedule_collection()


@pytest.fixture
def client(fake_db) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def _headers(user_id: str = "user-1") -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers

