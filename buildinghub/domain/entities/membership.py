"""
Membership Entity

Links a User to a Unit of a Building, with a lifecycle status.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MembershipRole, MembershipStatus


class Membership(SQLModel, table=True):
    """
    Membership entity - a user's access request or grant for a unit.

    Business Rules:
    - Created only in pending status
    - pending -> active | rejected, nothing leaves active or rejected
    - At most one pending or active membership per (user, building)
    - Several active memberships may share a unit
    - Never deleted
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    building_id: UUID = Field(foreign_key="buildings.id", nullable=False, index=True)
    unit_id: UUID = Field(foreign_key="units.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: MembershipRole = Field(default=MembershipRole.resident)
    status: MembershipStatus = Field(default=MembershipStatus.pending)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_membership_building_status", "building_id", "status"),
        Index("idx_membership_user_building", "user_id", "building_id"),
        # At most one pending or active membership per (user, building)
        Index(
            "uq_membership_open_per_building",
            "user_id",
            "building_id",
            unique=True,
            sqlite_where=text("status IN ('pending', 'active')"),
            postgresql_where=text("status IN ('pending', 'active')"),
        ),
    )
