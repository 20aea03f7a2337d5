"""API Layer — FastAPI routes, request reading, dependency wiring, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All API endpoints return JSON; errors use the {"error": message} envelope

Design Decisions:
    - Thin routes delegate to ExerciseLogService
"""
