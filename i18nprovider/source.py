"""Translation sources: the ``get``/``match`` pair for one locale."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from i18nprovider.errors import SourceFormatError

TranslationMap = dict[str, str]


def default_get(key: str) -> str | None:
    return None if key else ""


def default_match(search: str) -> TranslationMap | None:
    return {} if search else None


@dataclass(frozen=True)
class TranslationSource:
    get: Callable[[str], str | None]
    match: Callable[[str], TranslationMap | None]


DEFAULT_SOURCE = TranslationSource(get=default_get, match=default_match)


def source_from_translations(translations: Mapping[str, str]) -> TranslationSource:
    """Build a source over a flat ``key -> value`` catalog.

    ``match`` is a case-insensitive substring search over keys and values.
    It returns ``None`` for an empty search or when nothing matches.
    """
    catalog = dict(translations)

    def get(key: str) -> str | None:
        return catalog.get(key)

    def match(search: str) -> TranslationMap | None:
        if not search:
            return None
        needle = search.lower()
        hits = {k: v for k, v in catalog.items() if needle in k.lower() or needle in v.lower()}
        return hits or None

    return TranslationSource(get=get, match=match)


def as_source(result: Any) -> TranslationSource:
    """Normalize whatever a loader resolved with into a ``TranslationSource``."""
    if isinstance(result, TranslationSource):
        return result
    # A mapping's own .get would shadow the entry, so check mappings first.
    if isinstance(result, Mapping):
        get, match = result.get("get"), result.get("match")
    else:
        get, match = getattr(result, "get", None), getattr(result, "match", None)
    if not callable(get) or not callable(match):
        raise SourceFormatError(
            f"Loader result must provide callable get and match, got {type(result).__name__}"
        )
    return TranslationSource(get=get, match=match)
