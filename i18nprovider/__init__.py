"""Locale provider: ambient translation accessors for component trees."""

from i18nprovider.context import ContextValue, provide, use_i18n
from i18nprovider.provider import LocaleProvider
from i18nprovider.source import DEFAULT_SOURCE, TranslationSource

__all__ = [
    "DEFAULT_SOURCE",
    "ContextValue",
    "LocaleProvider",
    "TranslationSource",
    "provide",
    "use_i18n",
]
