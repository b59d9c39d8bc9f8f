"""Tests for load bookkeeping: ResourceLoadResult and LoadSummary."""

import pytest

from i18nstore import ParseError, ResourceStore, TransportError
from i18nstore.enums import LoadStatus
from i18nstore.store.loading import LoadSummary, ResourceLoadResult, status_for
from tests.helpers.fetchers import StaticFetcher


class TestStatusFor:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (None, LoadStatus.SUCCESS),
            (TransportError("x", url="u"), LoadStatus.TRANSPORT_ERROR),
            (ParseError("x", url="u"), LoadStatus.PARSE_ERROR),
            (KeyError("x"), LoadStatus.ERROR),
        ],
    )
    def test_classification(self, error: Exception | None, expected: LoadStatus) -> None:
        assert status_for(error) is expected


class TestLoadSummary:
    def test_empty(self) -> None:
        summary = LoadSummary(results=())
        assert summary.total_attempted == 0
        assert summary.all_successful
        assert not summary.has_errors
        assert repr(summary) == "LoadSummary(total=0, ok=0, errors=0)"

    def test_aggregates(self) -> None:
        ok = ResourceLoadResult("/a.json", "fr", LoadStatus.SUCCESS, namespaces=("ui",))
        bad = ResourceLoadResult(
            "/b.json", "de", LoadStatus.TRANSPORT_ERROR, error=TransportError("x", url="/b.json")
        )
        summary = LoadSummary(results=(ok, bad))

        assert summary.total_attempted == 2
        assert summary.successful == 1
        assert summary.errors == 1
        assert summary.get_successful() == (ok,)
        assert summary.get_errors() == (bad,)
        assert summary.get_by_locale("DE") == (bad,)
        assert not summary.all_successful

    def test_get_by_locale_empty_matches_fallback(self) -> None:
        ok = ResourceLoadResult("/en.json", "en-us", LoadStatus.SUCCESS, namespaces=("ui",))
        other = ResourceLoadResult("/fr.json", "fr", LoadStatus.SUCCESS, namespaces=("ui",))
        summary = LoadSummary(results=(ok, other))

        assert summary.get_by_locale("") == (ok,)
        assert summary.get_by_locale("EN-US") == (ok,)


class TestStoreRecordsLoads:
    @pytest.mark.asyncio
    async def test_records_success_and_failures(
        self, store: ResourceStore, fetcher: StaticFetcher
    ) -> None:
        fetcher.documents["/fr.json"] = {"ui": {"t": "x"}, "menu": {}}
        fetcher.documents["/bad.json"] = ["not", "an", "object"]

        await store.load("/fr.json", "FR")
        with pytest.raises(TransportError):
            await store.load("/missing.json", "de")
        with pytest.raises(ParseError):
            await store.load("/bad.json")

        summary = store.get_load_summary()
        assert [r.status for r in summary.results] == [
            LoadStatus.SUCCESS,
            LoadStatus.TRANSPORT_ERROR,
            LoadStatus.PARSE_ERROR,
        ]
        first = summary.results[0]
        assert first.locale == "fr"
        assert first.namespaces == ("ui", "menu")
        assert first.error is None
        assert isinstance(summary.results[1].error, TransportError)
        assert summary.results[1].namespaces == ()
        assert summary.get_by_locale("") == (summary.results[2],)

    @pytest.mark.asyncio
    async def test_on_load_error_recorded_as_error(
        self, store: ResourceStore, fetcher: StaticFetcher
    ) -> None:
        fetcher.documents["/a.json"] = {}

        def explode(data: object) -> object:
            raise RuntimeError("bad transform")

        with pytest.raises(RuntimeError):
            await store.load("/a.json", on_load=explode)

        (result,) = store.get_load_summary().results
        assert result.status is LoadStatus.ERROR
        assert result.is_error

    def test_store_calls_not_recorded(self, store: ResourceStore) -> None:
        store.store("ui", {"t": "x"})
        assert store.get_load_summary().total_attempted == 0
