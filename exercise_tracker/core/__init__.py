"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Parsing and formatting functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the service awaits the
      store, core decides what the input means
"""
