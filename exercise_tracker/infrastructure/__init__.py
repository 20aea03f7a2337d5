"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports infrastructure
    - SQLAlchemy exceptions never cross into API responses unclassified

Design Decisions:
    - Repositories wrap AsyncSession; the session manager owns the engine lifecycle
"""
