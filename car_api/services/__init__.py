"""Services Layer - domain logic between the HTTP layer and storage.

Invariants:
    - Services receive their repositories through the constructor
    - No HTTP, ORM or SQL types cross this layer
"""
