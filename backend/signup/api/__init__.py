"""API Layer - FastAPI routes, responder and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to interactions; the responder renders their outcomes
"""
