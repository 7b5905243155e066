"""Composition Root - wires storage into services for FastAPI routes.

Invariants:
    - The only module that names both a service and a repository implementation
    - One repository and one service per request, sharing the request's DB session
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from car_api.infrastructure.database import get_db
from car_api.repositories.car_repository import SqlAlchemyCarRepository
from car_api.services.car_service import CarService


async def get_car_service(db: AsyncSession = Depends(get_db)) -> CarService:
    """FastAPI dependency for the car service."""
    return CarService(SqlAlchemyCarRepository(db))
