"""Car Repository - document collection over the cars table.

Invariants:
    - save() is an atomic upsert keyed by id: insert if new, full replace if present
    - Concurrent saves of one id never conflict; the last write wins
    - save() assigns a fresh id when the document has none
    - delete_by_id() on a missing id is a no-op
    - Each write commits before returning
    - Reads always reflect the database, never a stale identity-map copy

Design Decisions:
    - Native INSERT ... ON CONFLICT DO UPDATE, one statement per save
    - SQLAlchemy errors are left to DatabaseSessionManager for mapping
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from car_api.core.domain_types import (
    CarDocument, CarId, build_document, new_car_id, split_document,
)
from car_api.core.errors import DatabaseError
from car_api.models.car import Car

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT support
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyCarRepository:
    """CarRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[CarDocument]:
        result = await self.db.execute(
            select(Car).execution_options(populate_existing=True),
        )
        return [car.to_document() for car in result.scalars().all()]

    async def find_by_id(self, car_id: CarId) -> CarDocument | None:
        result = await self.db.execute(
            select(Car)
            .where(Car.id == car_id)
            .execution_options(populate_existing=True),
        )
        car = result.scalar_one_or_none()
        return car.to_document() if car else None

    async def save(self, document: CarDocument) -> CarDocument:
        """Insert or replace the document, returning what was stored."""
        car_id, attributes = split_document(document)
        if car_id is None:
            car_id = new_car_id()
        await self.db.execute(self._upsert(car_id, attributes))
        await self.db.commit()
        logger.debug("Car document saved", extra={"car_id": car_id})
        return build_document(car_id, attributes)

    async def delete_by_id(self, car_id: CarId) -> None:
        await self.db.execute(delete(Car).where(Car.id == car_id))
        await self.db.commit()

    def _upsert(self, car_id: CarId, attributes: dict):
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise DatabaseError(f"upsert not supported on {dialect}", "save")
        stmt = insert(Car).values(id=car_id, attributes=attributes)
        return stmt.on_conflict_do_update(
            index_elements=[Car.id],
            set_={"attributes": stmt.excluded.attributes},
        )
