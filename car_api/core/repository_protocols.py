"""Boundary Protocols - contracts between the domain layer and storage.

Invariants:
    - Services depend on these Protocols, never on a storage implementation
    - All IO operations accessed through Protocol types
    - Implementations provided by the composition root (car_api.dependencies)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async methods: implementations do IO
"""

from typing import Protocol

from car_api.core.domain_types import CarDocument, CarId


class CarRepository(Protocol):
    """Contract for car document persistence."""
    async def find_all(self) -> list[CarDocument]: ...
    async def find_by_id(self, car_id: CarId) -> CarDocument | None: ...
    async def save(self, document: CarDocument) -> CarDocument: ...
    async def delete_by_id(self, car_id: CarId) -> None: ...
