"""Locale utilities for d2-platform.

The vendor localizes definitions, OAuth pages and content by a short
language code. Keeping the list in the domain layer lets the CLI, the
settings model and the OAuth helpers share it without importing adapters.
"""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """Language codes accepted by bungie.net."""

    ENGLISH = "en"
    FRENCH = "fr"
    SPANISH = "es"
    SPANISH_MEXICO = "es-mx"
    GERMAN = "de"
    ITALIAN = "it"
    JAPANESE = "ja"
    PORTUGUESE_BRAZIL = "pt-br"
    RUSSIAN = "ru"
    POLISH = "pl"
    KOREAN = "ko"
    CHINESE_TRADITIONAL = "zh-cht"
    CHINESE_SIMPLIFIED = "zh-chs"

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return self.name.replace("_", " ").title()
