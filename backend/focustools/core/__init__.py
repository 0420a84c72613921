"""Core Layer — pure code shared by every layer: errors, identifiers, store contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - No IO, no async bodies (Protocols only declare async signatures)
"""
