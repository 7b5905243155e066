"""ORM Models - SQLAlchemy declarative models for persisted documents.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from car_api.models.car import Car  # noqa: F401
