"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    SAMPLE_MESSAGES,
    make_locale_config,
    make_registry,
    make_settings,
    make_translation_catalog,
    make_translation_key,
)

__all__ = [
    "SAMPLE_MESSAGES",
    "make_locale_config",
    "make_registry",
    "make_settings",
    "make_translation_catalog",
    "make_translation_key",
]
