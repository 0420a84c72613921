"""Database Metadata — the SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - One metadata object per process (db/base.py)
"""
