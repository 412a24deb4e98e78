from __future__ import annotations

from typing import Any, Dict, ClassVar, List
from datetime import datetime
from sqlalchemy import func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class BaseModel(Base):
    __abstract__ = True

    # Columns left out of to_dict()
    __hidden__: ClassVar[List[str]] = []

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> Dict[str, Any]:
        """Convert model columns to a dictionary, without hidden columns."""
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
            if column.name not in self.__hidden__
        }
