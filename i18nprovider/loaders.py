"""Ready-made async source loaders for JSON translation catalogs.

Each catalog is a flat JSON object of ``key -> string``. The target locale is
merged over the default locale's catalog, so missing keys fall back to it.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

import httpx

from i18nprovider.config import settings
from i18nprovider.errors import SourceFormatError, SourceNotFoundError
from i18nprovider.source import TranslationSource, source_from_translations

_log = logging.getLogger(__name__)

SourceLoader = Callable[[str], Awaitable[TranslationSource]]


def _validate_catalog(data, origin: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise SourceFormatError(f"{origin}: catalog must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise SourceFormatError(f"{origin}: value for {key!r} is not a string")
    return data


def _merge(base: dict[str, str], target: dict[str, str]) -> dict[str, str]:
    merged = dict(base)
    merged.update(target)
    return merged


def json_file_loader(
    directory: str | Path | None = None,
    default_locale: str | None = None,
) -> SourceLoader:
    """Return a loader reading ``<directory>/<locale>.json``."""
    root = Path(directory or settings.locales_dir)
    fallback = default_locale or settings.default_locale

    def read(locale: str) -> dict[str, str] | None:
        path = root / f"{locale}.json"
        if not path.is_file():
            return None
        with open(path, encoding="utf-8") as f:
            return _validate_catalog(json.load(f), str(path))

    def read_merged(locale: str) -> dict[str, str]:
        target = read(locale)
        if target is None:
            raise SourceNotFoundError(locale)
        if locale == fallback:
            return target
        base = read(fallback) or {}
        return _merge(base, target)

    async def load(locale: str) -> TranslationSource:
        _log.debug("Reading catalog for %s from %s", locale, root)
        catalog = await asyncio.to_thread(read_merged, locale)
        return source_from_translations(catalog)

    return load


def http_loader(
    base_url: str,
    client: httpx.AsyncClient | None = None,
    default_locale: str | None = None,
) -> SourceLoader:
    """Return a loader fetching ``<base_url>/<locale>.json`` over HTTP."""
    fallback = default_locale or settings.default_locale
    base = base_url.rstrip("/")

    async def fetch(http: httpx.AsyncClient, locale: str) -> dict[str, str]:
        resp = await http.get(f"{base}/{locale}.json")
        if resp.status_code == 404:
            raise SourceNotFoundError(locale)
        resp.raise_for_status()
        return _validate_catalog(resp.json(), str(resp.url))

    async def fetch_merged(http: httpx.AsyncClient, locale: str) -> dict[str, str]:
        target = await fetch(http, locale)
        if locale == fallback:
            return target
        try:
            base_catalog = await fetch(http, fallback)
        except SourceNotFoundError:
            base_catalog = {}
        return _merge(base_catalog, target)

    async def load(locale: str) -> TranslationSource:
        _log.debug("Fetching catalog for %s from %s", locale, base)
        if client is not None:
            catalog = await fetch_merged(client, locale)
        else:
            async with httpx.AsyncClient(timeout=10) as http:
                catalog = await fetch_merged(http, locale)
        return source_from_translations(catalog)

    return load
