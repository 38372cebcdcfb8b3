"""Tests for the JSON file and HTTP catalog loaders."""

import json

import httpx
import pytest

from i18nprovider.errors import SourceFormatError, SourceNotFoundError
from i18nprovider.loaders import http_loader, json_file_loader
from i18nprovider.provider import LocaleProvider

EN = {"app.name": "Datebook", "nav.home": "Home", "nav.settings": "Settings"}
FR = {"nav.home": "Accueil"}


@pytest.fixture
def locales_dir(tmp_path):
    for locale, data in (("en", EN), ("fr", FR)):
        (tmp_path / f"{locale}.json").write_text(json.dumps(data), encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# json_file_loader
# ---------------------------------------------------------------------------
class TestJsonFileLoader:
    @pytest.mark.asyncio
    async def test_loads_default_locale(self, locales_dir):
        source = await json_file_loader(locales_dir, default_locale="en")("en")
        assert source.get("nav.home") == "Home"

    @pytest.mark.asyncio
    async def test_target_merged_over_default(self, locales_dir):
        source = await json_file_loader(locales_dir, default_locale="en")("fr")
        assert source.get("nav.home") == "Accueil"
        assert source.get("nav.settings") == "Settings"
        assert source.get("missing") is None

    @pytest.mark.asyncio
    async def test_match_searches_merged_catalog(self, locales_dir):
        source = await json_file_loader(locales_dir, default_locale="en")("fr")
        assert source.match("accueil") == {"nav.home": "Accueil"}
        assert source.match("") is None

    @pytest.mark.asyncio
    async def test_missing_locale_raises(self, locales_dir):
        with pytest.raises(SourceNotFoundError):
            await json_file_loader(locales_dir, default_locale="en")("xx")

    @pytest.mark.asyncio
    async def test_missing_default_catalog_means_empty_base(self, tmp_path):
        (tmp_path / "fr.json").write_text(json.dumps(FR), encoding="utf-8")
        source = await json_file_loader(tmp_path, default_locale="en")("fr")
        assert source.get("nav.home") == "Accueil"
        assert source.get("nav.settings") is None

    @pytest.mark.asyncio
    async def test_non_object_catalog_rejected(self, tmp_path):
        (tmp_path / "en.json").write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(SourceFormatError):
            await json_file_loader(tmp_path, default_locale="en")("en")

    @pytest.mark.asyncio
    async def test_non_string_value_rejected(self, tmp_path):
        (tmp_path / "en.json").write_text('{"count": 3}', encoding="utf-8")
        with pytest.raises(SourceFormatError, match="count"):
            await json_file_loader(tmp_path, default_locale="en")("en")

    @pytest.mark.asyncio
    async def test_provider_with_file_loader(self, locales_dir):
        provider = LocaleProvider(json_file_loader(locales_dir, default_locale="en"), locale="en")
        await provider.did_mount()
        await provider.did_update("fr")
        assert provider.context_value.locale == "fr"
        assert provider.context_value.get("nav.home") == "Accueil"


# ---------------------------------------------------------------------------
# http_loader
# ---------------------------------------------------------------------------
def _client(catalogs, status=None):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if status is not None:
            return httpx.Response(status)
        locale = request.url.path.rsplit("/", 1)[-1].removesuffix(".json")
        if locale not in catalogs:
            return httpx.Response(404)
        return httpx.Response(200, json=catalogs[locale])

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return client, requested


class TestHttpLoader:
    @pytest.mark.asyncio
    async def test_fetches_and_merges(self):
        client, requested = _client({"en": EN, "fr": FR})
        async with client:
            load = http_loader("https://cdn.example.com/i18n/", client=client, default_locale="en")
            source = await load("fr")
        assert source.get("nav.home") == "Accueil"
        assert source.get("app.name") == "Datebook"
        assert requested == ["/i18n/fr.json", "/i18n/en.json"]

    @pytest.mark.asyncio
    async def test_default_locale_fetched_once(self):
        client, requested = _client({"en": EN})
        async with client:
            source = await http_loader("https://cdn.example.com", client=client, default_locale="en")("en")
        assert source.get("nav.home") == "Home"
        assert requested == ["/en.json"]

    @pytest.mark.asyncio
    async def test_missing_default_catalog_means_empty_base(self):
        client, _ = _client({"fr": FR})
        async with client:
            source = await http_loader("https://cdn.example.com", client=client, default_locale="en")("fr")
        assert source.get("nav.home") == "Accueil"
        assert source.get("app.name") is None

    @pytest.mark.asyncio
    async def test_missing_locale_raises(self):
        client, _ = _client({"en": EN})
        async with client:
            with pytest.raises(SourceNotFoundError):
                await http_loader("https://cdn.example.com", client=client, default_locale="en")("xx")

    @pytest.mark.asyncio
    async def test_server_error_propagates(self):
        client, _ = _client({}, status=500)
        async with client:
            with pytest.raises(httpx.HTTPStatusError):
                await http_loader("https://cdn.example.com", client=client, default_locale="en")("en")

    @pytest.mark.asyncio
    async def test_provider_reports_http_failure(self):
        reported = []
        client, _ = _client({}, status=503)
        async with client:
            provider = LocaleProvider(
                http_loader("https://cdn.example.com", client=client, default_locale="en"),
                locale="en",
                notify=reported.append,
            )
            await provider.did_mount()
        assert len(reported) == 1
        assert isinstance(reported[0].__cause__, httpx.HTTPStatusError)
        assert provider.context_value.get("nav.home") is None
