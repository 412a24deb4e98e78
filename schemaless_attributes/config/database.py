from __future__ import annotations

import os
from typing import Generator, Dict, Any
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from schemaless_attributes.Support.Serialization import json_serializer

__all__ = [
    "engine", "SessionLocal", "get_database", "create_tables",
    "make_engine", "get_engine_config", "DATABASE_URL"
]


DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./storage/database.db")


def get_engine_config(url: str = DATABASE_URL) -> Dict[str, Any]:
    """Get engine configuration based on database type."""
    config: Dict[str, Any] = {
        # Map sources hold Decimal and date values
        "json_serializer": json_serializer,
    }
    
    if "sqlite" in url:
        config["connect_args"] = {"check_same_thread": False}
    elif "postgresql" in url or "mysql" in url:
        config.update({
            "pool_size": int(os.getenv('DB_POOL_SIZE', '5')),
            "max_overflow": int(os.getenv('DB_MAX_OVERFLOW', '10')),
            "pool_pre_ping": True,
        })
    
    # Add echo setting for debugging
    config["echo"] = os.getenv('DB_ECHO', '').lower() == 'true'
    
    return config


def make_engine(url: str = DATABASE_URL) -> Engine:
    """Create an engine configured for schemaless models."""
    return create_engine(url, **get_engine_config(url))


engine: Engine = make_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_database() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine = engine) -> None:
    """Create all model tables."""
    from schemaless_attributes.Models.BaseModel import Base
    
    Base.metadata.create_all(bind=bind)
