"""Services Layer — request operations orchestrating core parsing and store calls.

Invariants:
    - Services depend on core protocols, never on SQLAlchemy directly
"""
