"""Core Layer - domain types, error hierarchy and storage contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, repositories/, models/ or infrastructure/
"""
