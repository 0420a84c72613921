"""Infrastructure Layer — database access, store repositories, and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with error mapping (SQLAlchemyError -> DatabaseError)
"""
