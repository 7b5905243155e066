"""Infrastructure Layer - database engine, sessions and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions are mapped to core/errors.py types here
"""
