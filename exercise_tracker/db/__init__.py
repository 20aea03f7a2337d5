"""Database Schema — SQLAlchemy Base shared by all ORM models.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - Tables created from Base.metadata on startup; no migrations
"""
