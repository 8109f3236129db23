"""
SQLAlchemy models for EtherStake persistence.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    DECIMAL,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""


class UserModel(Base):
    """User database model."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin')", name="valid_user_role"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    wallet_address: Mapped[str | None] = mapped_column(
        String(42), unique=True, index=True
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now
    )

    # Relationships
    stakes: Mapped[list["StakeModel"]] = relationship(
        "StakeModel",
        back_populates="user",
        lazy="select",
        order_by="[StakeModel.created_at, StakeModel.id]",
        cascade="all, delete-orphan",
    )


class StakeModel(Base):
    """Stake database model with optimistic version counter."""

    __tablename__ = "stakes"
    __table_args__ = (
        CheckConstraint("amount > 0", name="positive_stake_amount"),
        CheckConstraint("duration_days >= 1", name="positive_stake_duration"),
        CheckConstraint(
            "status IN ('active', 'completed', 'cancelled')",
            name="valid_stake_status",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    wallet_address: Mapped[str] = mapped_column(String(42), nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        DECIMAL(precision=18, scale=6), nullable=False
    )
    duration_days: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    apy: Mapped[Decimal] = mapped_column(
        DECIMAL(precision=10, scale=6), nullable=False
    )
    estimated_rewards: Mapped[Decimal] = mapped_column(
        DECIMAL(precision=18, scale=6), nullable=False
    )
    actual_rewards: Mapped[Decimal] = mapped_column(
        DECIMAL(precision=18, scale=6), nullable=False, default=Decimal("0")
    )
    penalties: Mapped[Decimal] = mapped_column(
        DECIMAL(precision=18, scale=6), nullable=False, default=Decimal("0")
    )
    status: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    transaction_hash: Mapped[str | None] = mapped_column(String(66))
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now
    )

    # UPDATE ... WHERE version = :expected, then version + 1
    __mapper_args__ = {"version_id_col": version}

    # Relationships
    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="stakes", lazy="select"
    )
