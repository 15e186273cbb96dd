"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

os.environ.setdefault("DATABASE_URL", "sqlite://")

# Ensure the api/sentencelab package is importable when tests run from the repo root.
API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.insert(0, str(API_ROOT))

from sentencelab import models  # noqa: E402,F401
from sentencelab.core.database import enable_sqlite_foreign_keys, get_session  # noqa: E402
from sentencelab.api.v1.endpoints.utils import get_random  # noqa: E402


class FirstChoice:
    """Random source stub that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class LastChoice:
    """Random source stub that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        SQLModel.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine) -> Session:
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def first_choice():
    return FirstChoice()


@pytest.fixture()
def last_choice():
    return LastChoice()


@pytest.fixture()
def client(engine):
    from fastapi.testclient import TestClient
    from sentencelab.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_random] = lambda: random.Random(1234)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
