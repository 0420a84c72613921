"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary, before any store call
    - JSON keys are camelCase (taskId, startTime, createdAt)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
