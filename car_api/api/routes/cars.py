"""Cars Routes - REST surface for the car document collection.

Invariants:
    - GET by id answers a miss with 404 and an empty body
    - POST and PUT answer 200 with the persisted document
    - PUT forces the path id onto the stored document
    - DELETE answers 204 whether or not the car existed
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from car_api.core.domain_types import CarId
from car_api.dependencies import get_car_service
from car_api.schemas.car import CarPayload, CarResponse
from car_api.services.car_service import CarService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cars", tags=["cars"])


@router.get("", response_model=list[CarResponse])
async def get_all_cars(service: CarService = Depends(get_car_service)):
    """List every car."""
    return await service.get_all_cars()


@router.get(
    "/{car_id}",
    response_model=CarResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Car not found"}},
)
async def get_car_by_id(
    car_id: str, service: CarService = Depends(get_car_service),
):
    """Fetch one car; a miss answers 404 with no body."""
    car = await service.get_car_by_id(CarId(car_id))
    if car is None:
        logger.info("Car not found", extra={"car_id": car_id})
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return car


@router.post("", response_model=CarResponse)
async def create_car(
    body: CarPayload, service: CarService = Depends(get_car_service),
):
    """Create a car; the id is generated unless the body carries one."""
    return await service.create_car(body.to_document())


@router.put("/{car_id}", response_model=CarResponse)
async def update_car(
    car_id: str,
    body: CarPayload,
    service: CarService = Depends(get_car_service),
):
    """Replace the car stored under car_id."""
    return await service.update_car(CarId(car_id), body.to_document())


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(
    car_id: str, service: CarService = Depends(get_car_service),
):
    await service.delete_car(CarId(car_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
