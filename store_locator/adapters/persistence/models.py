"""SQLAlchemy ORM models — maps to PostgreSQL/PostGIS tables."""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    Computed,
    DateTime,
    Float,
    Index,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import UserDefinedType

from store_locator.adapters.persistence.database import Base

LOCATION_EXPRESSION = "geography(ST_SetSRID(ST_MakePoint(longitude, latitude), 4326))"


class GeographyPoint(UserDefinedType):
    """PostGIS ``geography(Point, 4326)`` column type."""

    cache_ok = True

    def get_col_spec(self, **kw) -> str:
        return "geography(Point, 4326)"


class StoreModel(Base):
    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    street: Mapped[str] = mapped_column(String(200), nullable=False)
    street2: Mapped[str | None] = mapped_column(String(200), nullable=True)
    street3: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    today_open: Mapped[str] = mapped_column(String(20), nullable=False)
    today_close: Mapped[str] = mapped_column(String(20), nullable=False)
    location_type: Mapped[str] = mapped_column(String(50), nullable=False)
    collection_point: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Derived by the database; only ever read inside spatial SQL expressions.
    location: Mapped[str] = mapped_column(
        GeographyPoint(),
        Computed(LOCATION_EXPRESSION, persisted=True),
        deferred=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    __table_args__ = (
        Index("idx_stores_location", "location", postgresql_using="gist"),
    )
