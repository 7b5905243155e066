"""Domain Types - names for the primitives that flow between layers.

Invariants:
    - CarId is the sole addressing key of a car document
    - A CarDocument always carries its CarId under the "id" key once persisted
    - Generated ids are 32 lowercase hex characters (UUID4)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Documents stay plain dicts: car attributes are schema-less
"""

import uuid
from typing import Any, NewType

CarId = NewType("CarId", str)

CarDocument = dict[str, Any]

ID_FIELD = "id"


def new_car_id() -> CarId:
    """Generate an identifier for a document saved without one."""
    return CarId(uuid.uuid4().hex)


def split_document(document: CarDocument) -> tuple[CarId | None, dict[str, Any]]:
    """Separate the id from the remaining attributes. Does not mutate input."""
    attributes = {k: v for k, v in document.items() if k != ID_FIELD}
    car_id = document.get(ID_FIELD)
    return (CarId(car_id) if car_id is not None else None), attributes


def build_document(car_id: CarId, attributes: dict[str, Any]) -> CarDocument:
    """Render a stored record back into its document shape, id first."""
    return {ID_FIELD: car_id, **{k: v for k, v in attributes.items() if k != ID_FIELD}}
