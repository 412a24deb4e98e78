from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from schemaless_attributes.config.database import make_engine
from schemaless_attributes.config.settings import settings
from schemaless_attributes.Models import Base
from schemaless_attributes.Storage import MemoryFilesystemAdapter, storage_manager

import dummy_models  # noqa: F401  (registers the test tables)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine with every model table created."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine: Engine) -> Iterator[Session]:
    """Database session bound to the in-memory engine."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def memory_disk(monkeypatch: pytest.MonkeyPatch) -> Iterator[MemoryFilesystemAdapter]:
    """Route attachments to a fresh in-memory disk."""
    disk = MemoryFilesystemAdapter()
    storage_manager.extend('memory', disk)
    monkeypatch.setattr(settings, 'SCHEMALESS_ATTACHMENT_DISK', 'memory')
    yield disk
    storage_manager.forget_disk('memory')


@pytest.fixture
def lorem_ipsum() -> str:
    return (
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor\n"
        "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis\n"
        "nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.\n"
        "Çà et là, naïve façade: ünïcödé survives the blob round trip. ✓\n"
    )
