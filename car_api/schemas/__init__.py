"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Separate from models: schemas are API contracts, models are persistence
"""
