"""Car ORM - one row per car document in the cars collection.

Invariants:
    - id is a string primary key, the sole addressing key
    - attributes holds every document field except id
    - attributes is replaced wholesale on save, never patched in place

Design Decisions:
    - Generic JSON column: works on PostgreSQL and SQLite alike
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from car_api.core.domain_types import CarDocument, CarId, build_document
from car_api.db.base import Base


class Car(Base):
    """A schema-less car document."""
    __tablename__ = "cars"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    attributes: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )

    def to_document(self) -> CarDocument:
        return build_document(CarId(self.id), self.attributes or {})
