"""Tests for linksaver.ingest module."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch, Mock

import pytest
import requests

from common.fetcher_utils import FetchError
from enricher.enrich_llm import TAXONOMY
from linksaver.ingest import ingest, prepare_link
from linksaver.store import LinkStore, PersistenceError

PAGE = '<title>Hello</title><meta name="description" content="World">'


def _document(raw_html: str = PAGE, url: str = "https://example.com/a") -> dict:
    return {"raw_html": raw_html, "source_url": url}


def fake_model(tags="News", summary="Two sentences. Really."):
    def generate(prompt: str) -> str:
        answer = tags if "comma-separated" in prompt else summary
        if isinstance(answer, Exception):
            raise answer
        return answer
    return generate


@pytest.fixture
def store(tmp_path):
    return LinkStore(tmp_path / "links.json")


class TestIngest:
    @patch("enricher.content_enricher.fetch_page")
    def test_stores_enriched_link(self, mock_fetch, store) -> None:
        mock_fetch.return_value = _document()
        link = ingest("https://example.com/a", "alice", store=store, generate=fake_model())

        assert link["title"] == "Hello"
        assert link["description"] == "World"
        assert link["image_url"] == ""
        assert link["domain"] == "example.com"
        assert link["url"] == "https://example.com/a"
        assert link["owner_id"] == "alice"
        assert link["tags"] == ["News"]
        assert link["summary"] == "Two sentences. Really."
        assert link["id"] and link["created_at"]
        assert store.get_by_id_and_owner(link["id"], "alice") == link

    @patch("enricher.content_enricher.fetch_page")
    def test_unknown_tags_never_stored(self, mock_fetch, store) -> None:
        mock_fetch.return_value = _document()
        link = ingest("https://example.com/a", "alice", store=store, generate=fake_model(tags="Image, Foo, Video"))
        assert link["tags"] == ["Image", "Video"]
        stored = store.list_by_owner("alice")[0]
        assert all(tag in TAXONOMY for tag in stored["tags"])

    @patch("enricher.content_enricher.fetch_page")
    def test_model_failures_still_succeed(self, mock_fetch, store) -> None:
        mock_fetch.return_value = _document()
        generate = fake_model(tags=RuntimeError("quota"), summary=RuntimeError("quota"))
        link = ingest("https://example.com/a", "alice", store=store, generate=generate)
        assert link["tags"] == []
        assert link["summary"] == ""
        assert link["title"] == "Hello"
        assert len(store.list_by_owner("alice")) == 1

    @patch("enricher.content_enricher.fetch_page")
    def test_fetch_error_stores_nothing(self, mock_fetch, store) -> None:
        mock_fetch.side_effect = FetchError("https://down.example.com", "connection refused")
        generate = Mock()
        with pytest.raises(FetchError):
            ingest("https://down.example.com", "alice", store=store, generate=generate)
        generate.assert_not_called()
        assert store.list_by_owner("alice") == []
        assert not store.path.exists()

    @patch("enricher.page_fetcher.requests.get")
    def test_unreachable_url_end_to_end(self, mock_get, store) -> None:
        mock_get.side_effect = requests.ConnectionError("Failed to resolve host")
        with pytest.raises(FetchError):
            ingest("https://unreachable.invalid/page", "alice", store=store, generate=fake_model())
        assert store.list_by_owner("alice") == []

    @patch("enricher.page_fetcher.requests.get")
    def test_real_fetch_and_extract_path(self, mock_get, store) -> None:
        response = Mock(ok=True, status_code=200, text=PAGE, headers={"content-type": "text/html"})
        mock_get.return_value = response
        link = ingest("https://example.com/a", "alice", store=store, generate=fake_model(tags="Blog"), timeout=5)
        assert mock_get.call_args.kwargs["timeout"] == 5
        assert (link["title"], link["description"], link["domain"], link["tags"]) == (
            "Hello", "World", "example.com", ["Blog"],
        )

    @patch("enricher.content_enricher.fetch_page")
    def test_domain_from_request_url_not_page(self, mock_fetch, store) -> None:
        html = '<title>x</title><meta property="og:url" content="https://evil.example.net/">'
        mock_fetch.return_value = _document(html)
        link = ingest("https://good.example.com/post", "alice", store=store, generate=fake_model())
        assert link["domain"] == "good.example.com"

    @patch("enricher.content_enricher.fetch_page")
    def test_persistence_error_propagates(self, mock_fetch) -> None:
        mock_fetch.return_value = _document()
        failing_store = Mock()
        failing_store.insert.side_effect = PersistenceError("disk full")
        with pytest.raises(PersistenceError, match="disk full"):
            ingest("https://example.com/a", "alice", store=failing_store, generate=fake_model())

    @patch("enricher.content_enricher.fetch_page")
    def test_default_store_uses_configured_path(self, mock_fetch, tmp_path, monkeypatch) -> None:
        path = tmp_path / "configured.json"
        monkeypatch.setenv("LINKSAVER_STORE", str(path))
        mock_fetch.return_value = _document()
        link = ingest("https://example.com/a", "alice", generate=fake_model())
        assert LinkStore(path).get_by_id_and_owner(link["id"], "alice") is not None

    @patch("enricher.content_enricher.fetch_page")
    def test_concurrent_ingests_produce_independent_records(self, mock_fetch, tmp_path, monkeypatch) -> None:
        path = tmp_path / "links.json"
        monkeypatch.setenv("LINKSAVER_STORE", str(path))
        mock_fetch.return_value = _document()

        def submit(i: int) -> dict:
            return ingest("https://example.com/a", f"user-{i % 2}", generate=fake_model())

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(submit, range(20)))

        store = LinkStore(path)
        for link in results:
            assert store.get_by_id_and_owner(link["id"], link["owner_id"]) == link
        assert len(store.list_by_owner("user-0")) == 10
        assert len(store.list_by_owner("user-1")) == 10


class TestPrepareLink:
    @patch("enricher.content_enricher.fetch_page")
    def test_returns_unsaved_link(self, mock_fetch) -> None:
        mock_fetch.return_value = _document()
        link = prepare_link("https://example.com/a", "alice", generate=fake_model())
        assert "id" not in link
        assert "created_at" not in link
        assert set(link) == {
            "owner_id", "url", "title", "description", "image_url", "domain", "tags", "summary",
        }

    @patch("enricher.content_enricher.fetch_page")
    def test_status_updates(self, mock_fetch) -> None:
        mock_fetch.return_value = _document()
        status = Mock()
        prepare_link("https://example.com/a", "alice", generate=fake_model(), status=status)
        phases = [c.args[0].strip() for c in status.update.call_args_list]
        assert phases == ["Fetching page...", "Calling LLM..."]
