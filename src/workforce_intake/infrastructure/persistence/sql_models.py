"""SQLAlchemy tables for custom entries, one per catalog domain.

Both tables enforce one row per user and name, ignoring case, through a
unique functional index. The repository relies on the database raising an
IntegrityError for that index to detect duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import DateTime, Index, String, func
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


class CustomCompanyRow(Base):
    __tablename__ = "custom_companies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    business_pillar: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class CustomLocationRow(Base):
    __tablename__ = "user_custom_locations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    country_name: Mapped[str] = mapped_column(String(255), nullable=False)
    region: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


Index(
    "uq_custom_companies_user_name",
    CustomCompanyRow.__table__.c.user_id,
    func.lower(CustomCompanyRow.__table__.c.company_name),
    unique=True,
)
Index(
    "uq_user_custom_locations_user_name",
    CustomLocationRow.__table__.c.user_id,
    func.lower(CustomLocationRow.__table__.c.country_name),
    unique=True,
)


@dataclass(frozen=True)
class TableBinding:
    """Which ORM class and columns back one catalog domain."""

    model: type
    name_column: str
    group_column: str


TABLE_BINDINGS: dict[str, TableBinding] = {
    "companies": TableBinding(CustomCompanyRow, "company_name", "business_pillar"),
    "locations": TableBinding(CustomLocationRow, "country_name", "region"),
}
