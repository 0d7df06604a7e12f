"""
Domain entities for festplanner.

Durable state is a set of string-keyed slots, each holding one serialized
collection (the ranked favorites, the selected screenings).
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ..infra.db import Base


class StorageSlot(Base):
    """One key/value slot of local, single-device storage."""

    __tablename__ = "storage_slots"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<StorageSlot(key={self.key}, bytes={len(self.value)})>"
