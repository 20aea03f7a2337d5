"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe what leaves the system; input parsing lives in core/parse_input.py
    - Identifiers serialized as strings

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
