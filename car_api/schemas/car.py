"""Car Schemas - open-ended document shapes for the cars endpoints.

Invariants:
    - Any attribute key is accepted and echoed back (extra="allow")
    - CarPayload.id is optional; when present it must be a string or null
    - CarResponse.id is always set
"""

from pydantic import BaseModel, ConfigDict

from car_api.core.domain_types import ID_FIELD, CarDocument


class CarPayload(BaseModel):
    """Request body for create and replace."""
    model_config = ConfigDict(extra="allow")

    id: str | None = None

    def to_document(self) -> CarDocument:
        """Plain document for the service layer; a null id is dropped."""
        document = self.model_dump()
        if document.get(ID_FIELD) is None:
            document.pop(ID_FIELD, None)
        return document


class CarResponse(BaseModel):
    """A persisted car document."""
    model_config = ConfigDict(extra="allow")

    id: str
