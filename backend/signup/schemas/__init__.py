"""Pydantic Schemas - request/response models for API endpoints.

Invariants:
    - SignUpParams is validated inside the pipeline (validate step), not by FastAPI,
      so rule violations become Failure outcomes rendered as 422
    - Response schemas never expose password_hash

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
