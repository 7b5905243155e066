"""Car schemas - open attribute set, optional string id."""

import pytest
from pydantic import ValidationError

from car_api.schemas.car import CarPayload, CarResponse


def test_payload_accepts_arbitrary_attributes():
    payload = CarPayload.model_validate(
        {"model": "Civic", "year": 2019, "specs": {"hp": 158}},
    )
    assert payload.to_document() == {
        "model": "Civic", "year": 2019, "specs": {"hp": 158},
    }


def test_payload_keeps_string_id():
    payload = CarPayload.model_validate({"id": "abc", "model": "Civic"})
    assert payload.to_document() == {"id": "abc", "model": "Civic"}


def test_payload_drops_null_id():
    payload = CarPayload.model_validate({"id": None, "model": "Civic"})
    assert "id" not in payload.to_document()


def test_payload_keeps_null_attributes():
    payload = CarPayload.model_validate({"model": None})
    assert payload.to_document() == {"model": None}


def test_payload_rejects_non_string_id():
    with pytest.raises(ValidationError):
        CarPayload.model_validate({"id": 42})


def test_empty_payload_is_valid():
    assert CarPayload.model_validate({}).to_document() == {}


def test_response_requires_id():
    with pytest.raises(ValidationError):
        CarResponse.model_validate({"model": "Civic"})


def test_response_echoes_extra_fields():
    resp = CarResponse.model_validate({"id": "abc", "model": "Civic"})
    assert resp.model_dump() == {"id": "abc", "model": "Civic"}
