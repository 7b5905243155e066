"""Repositories Layer - storage implementations of the core Protocols.

Invariants:
    - Repositories depend only on core/, models/ and SQLAlchemy
    - Never import services/ or api/
"""
