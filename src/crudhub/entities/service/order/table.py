"""Order database table model."""

from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.crudhub.entities.core._base import EntityTable


class OrderTable(EntityTable, table=True):
    """Orders keep their line items as one JSON document."""

    __tablename__ = "orders"

    items: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    session_id: str = Field(index=True)
    status: str = "pending"
