"""
Unit Entity
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Unit(SQLModel, table=True):
    """
    Unit entity - an apartment or space inside a building.

    Business Rules:
    - (building_id, unit_number) must be unique
    """

    __tablename__ = "units"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    building_id: UUID = Field(foreign_key="buildings.id", nullable=False, index=True)
    unit_number: str = Field(max_length=50)
    floor: int

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_unit_building_number", "building_id", "unit_number", unique=True),
    )
