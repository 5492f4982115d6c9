"""Account ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roster_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class AccountORM(Base, UUIDMixin, TimestampMixin):
    """Admin account database model."""

    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Unique constraint is the final arbiter for concurrent registrations
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)

    employees: Mapped[list["EmployeeORM"]] = relationship(
        "EmployeeORM",
        back_populates="admin",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


# Import here to avoid circular import
from roster_api.models.orm.employee import EmployeeORM  # noqa: E402, F401
