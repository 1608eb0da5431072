"""Messages - centralized locale-specific text for field-level errors.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every MessageKey has an entry for every Locale
    - resolve_locale never raises: unknown or malformed headers fall back to default

Design Decisions:
    - Plain dict tables over gettext catalogs: a handful of strings, reviewed in code
    - Messages are sentence fragments ("must be filled") rendered after the field
      name by clients, matching the field -> [messages] error body
"""

from enum import Enum

from signup.core.domain_types import Locale


class MessageKey(str, Enum):
    """Identifiers for every user-facing validation message."""
    MISSING = "missing"
    NOT_FILLED = "not_filled"
    NOT_STRING = "not_string"
    TOO_LONG = "too_long"
    INVALID_EMAIL = "invalid_email"
    CONFIRMATION_MISMATCH = "confirmation_mismatch"
    NOT_UNIQUE = "not_unique"
    INVALID = "invalid"


_MESSAGES: dict[MessageKey, dict[Locale, str]] = {
    MessageKey.MISSING: {
        Locale.EN: "is missing",
        Locale.PT_BR: "esta ausente",
        Locale.ES: "falta",
    },
    MessageKey.NOT_FILLED: {
        Locale.EN: "must be filled",
        Locale.PT_BR: "deve ser preenchido",
        Locale.ES: "debe estar completo",
    },
    MessageKey.NOT_STRING: {
        Locale.EN: "must be a string",
        Locale.PT_BR: "deve ser um texto",
        Locale.ES: "debe ser un texto",
    },
    MessageKey.TOO_LONG: {
        Locale.EN: "size cannot be greater than {max}",
        Locale.PT_BR: "tamanho nao pode ser maior que {max}",
        Locale.ES: "el tamano no puede ser mayor que {max}",
    },
    MessageKey.INVALID_EMAIL: {
        Locale.EN: "is in invalid format",
        Locale.PT_BR: "esta em formato invalido",
        Locale.ES: "tiene un formato invalido",
    },
    MessageKey.CONFIRMATION_MISMATCH: {
        Locale.EN: "must be equal to {other}",
        Locale.PT_BR: "deve ser igual a {other}",
        Locale.ES: "debe ser igual a {other}",
    },
    MessageKey.NOT_UNIQUE: {
        Locale.EN: "has already been taken",
        Locale.PT_BR: "ja esta em uso",
        Locale.ES: "ya esta en uso",
    },
    MessageKey.INVALID: {
        Locale.EN: "is invalid",
        Locale.PT_BR: "e invalido",
        Locale.ES: "no es valido",
    },
}


def translate(key: MessageKey, locale: Locale = Locale.EN, **fmt: object) -> str:
    """Look up the message for key in locale and apply format arguments."""
    template = _MESSAGES[key][locale]
    return template.format(**fmt) if fmt else template


def resolve_locale(accept_language: str | None, default: Locale = Locale.EN) -> Locale:
    """Pick the first supported locale from an Accept-Language header.

    Exact tags win ("pt-BR"); otherwise the primary subtag is matched against
    supported locales ("pt-PT" -> pt-BR, "es-MX" -> es). Quality weights are
    honoured in descending order.
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        if not tag or tag == "*":
            continue
        quality = 1.0
        if params.strip().startswith("q="):
            try:
                quality = float(params.strip()[2:])
            except ValueError:
                quality = 0.0
        if quality <= 0:
            continue
        candidates.append((-quality, position, tag.strip()))

    by_tag = {locale.value.lower(): locale for locale in Locale}
    by_primary = {locale.value.split("-")[0].lower(): locale for locale in Locale}
    for _, _, tag in sorted(candidates):
        lowered = tag.lower()
        if lowered in by_tag:
            return by_tag[lowered]
        primary = lowered.split("-")[0]
        if primary in by_primary:
            return by_primary[primary]
    return default
