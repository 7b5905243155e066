"""Car Service - domain operations for car documents.

Invariants:
    - Every call is forwarded unchanged to the repository, except update
    - update_car() forces the path id onto the document before saving
    - get_car_by_id() returns None on a miss, never an empty document

Design Decisions:
    - Depends on the CarRepository Protocol, wired by car_api.dependencies
"""

import logging

from car_api.core.domain_types import ID_FIELD, CarDocument, CarId
from car_api.core.repository_protocols import CarRepository

logger = logging.getLogger(__name__)


class CarService:
    """List, read, create, replace and delete cars."""

    def __init__(self, repository: CarRepository):
        self._repository = repository

    async def get_all_cars(self) -> list[CarDocument]:
        return await self._repository.find_all()

    async def get_car_by_id(self, car_id: CarId) -> CarDocument | None:
        return await self._repository.find_by_id(car_id)

    async def create_car(self, document: CarDocument) -> CarDocument:
        car = await self._repository.save(document)
        logger.info("Car created", extra={"car_id": car[ID_FIELD]})
        return car

    async def update_car(self, car_id: CarId, document: CarDocument) -> CarDocument:
        """Replace the car stored under car_id, whatever id the body carries."""
        document = {**document, ID_FIELD: car_id}
        car = await self._repository.save(document)
        logger.info("Car updated", extra={"car_id": car_id})
        return car

    async def delete_car(self, car_id: CarId) -> None:
        await self._repository.delete_by_id(car_id)
        logger.info("Car deleted", extra={"car_id": car_id})
