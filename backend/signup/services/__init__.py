"""Services Layer - pipeline steps and interactions composed from core + collaborators.

Invariants:
    - Services depend on core protocols, never on concrete infrastructure classes
    - Every anticipated domain fault leaves a service as a Failure outcome

Design Decisions:
    - One interaction per use case; collaborators injected by api/dependencies.py
"""
