"""Employee ORM model."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class EmployeeORM(Base, UUIDMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Unique across all admins, not only within one admin's roster
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    # Free-form string as entered by the client, not a calendar date
    joining_date: Mapped[str] = mapped_column(String(50), nullable=False)

    admin_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    admin: Mapped["AccountORM"] = relationship("AccountORM", back_populates="employees")

    __table_args__ = (
        Index("idx_employees_admin_id", "admin_id"),
    )


from roster_api.models.orm.account import AccountORM  # noqa: E402, F401
