"""Domain Types - verifies rich type definitions and enum values."""

from signup.core.domain_types import FailureTag, Locale


def test_failure_tag_compares_equal_to_plain_string():
    assert FailureTag.INVALID == "invalid"
    assert FailureTag.INVALID.value == "invalid"


def test_locales_are_bcp47_tags():
    assert {locale.value for locale in Locale} == {"en", "pt-BR", "es"}
