"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Outcome, pipeline and matcher never swallow exceptions

Design Decisions:
    - Functional core separated from imperative shell: the pipeline is the only
      async piece because collaborator steps (repository) do IO
"""
