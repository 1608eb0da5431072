"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - Failure tags and locales are Enums, no raw string matching in handlers

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal
      to their plain string values ("invalid" == FailureTag.INVALID)
"""

from enum import Enum


# --- Value Types -------------------------------------------------------------

FieldErrors = dict[str, list[str]]      # field name -> human-readable messages


# --- Enums -------------------------------------------------------------------

class FailureTag(str, Enum):
    """Failure categories routed by the outcome matcher."""
    INVALID = "invalid"


class Locale(str, Enum):
    """Supported message locales - values are BCP 47 tags."""
    EN = "en"
    PT_BR = "pt-BR"
    ES = "es"
