"""Donor ORM — one row per registration submitted through the form.

Invariants:
    - id is an auto-increment integer assigned by the database
    - email is unique (named constraint uq_donors_email, used to classify duplicates)
    - blood_group is NULL when not provided, never an empty string
    - organs_to_donate holds a JSON array as text

Design Decisions:
    - Text column for organs over JSON type: matches the existing MySQL table
      and keeps the stored value identical across dialects
    - Named unique constraint: the violated key name is how the repository
      tells an email clash from other integrity errors
"""

from sqlalchemy import String, Text, Boolean, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Donor(Base):
    """A registered blood and/or organ donor."""
    __tablename__ = "donors"
    __table_args__ = (
        UniqueConstraint("email", name="uq_donors_email"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    blood_group: Mapped[str | None] = mapped_column(
        String(10), nullable=True,
    )
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    is_blood_donor: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_organ_donor: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    organs_to_donate: Mapped[str] = mapped_column(
        Text, nullable=False, default="[]",
    )
