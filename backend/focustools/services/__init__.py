"""Services Layer — per-resource handlers between routes and repositories.

Invariants:
    - Handlers depend only on core/ (errors, identifiers, repository Protocols) and schemas/
    - One handler class per resource, one file each
"""
