"""Translation adapter - DeepL REST client built on httpx.

Contents:
    * :mod:`.deepl` - DeepLTranslator and its factory
"""

from __future__ import annotations

from .deepl import DeepLTranslator, create_translator, extract_translation

__all__ = [
    "DeepLTranslator",
    "create_translator",
    "extract_translation",
]
