"""Infrastructure Layer - database, persistence, hashing and logging adapters.

Invariants:
    - Implements core protocols; core never imports from here
    - Anticipated storage faults (uniqueness) become Failure outcomes here

Design Decisions:
    - One module per external concern for locality
"""
