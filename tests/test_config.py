"""Tests for configuration and URL helpers."""

import pytest

from common.fetcher_utils import is_fetchable_url
from common.url_utils import get_domain, strip_www
from linksaver.config import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_STORE_PATH,
    get_fetch_timeout,
    get_owner_id,
    get_store_path,
)


class TestConfig:
    def test_store_path_default(self, monkeypatch) -> None:
        monkeypatch.delenv("LINKSAVER_STORE", raising=False)
        assert get_store_path() == DEFAULT_STORE_PATH

    def test_store_path_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("LINKSAVER_STORE", "/tmp/other.json")
        assert get_store_path() == "/tmp/other.json"

    def test_owner_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("LINKSAVER_OWNER", "alice")
        assert get_owner_id() == "alice"
        assert get_owner_id("bob") == "bob"

    def test_owner_missing(self, monkeypatch) -> None:
        monkeypatch.delenv("LINKSAVER_OWNER", raising=False)
        with pytest.raises(ValueError):
            get_owner_id()

    def test_timeout_default(self, monkeypatch) -> None:
        monkeypatch.delenv("LINKSAVER_FETCH_TIMEOUT", raising=False)
        assert get_fetch_timeout() == DEFAULT_FETCH_TIMEOUT

    def test_timeout_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("LINKSAVER_FETCH_TIMEOUT", "2.5")
        assert get_fetch_timeout() == 2.5

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_timeout_invalid(self, monkeypatch, value) -> None:
        monkeypatch.setenv("LINKSAVER_FETCH_TIMEOUT", value)
        with pytest.raises(ValueError, match="LINKSAVER_FETCH_TIMEOUT"):
            get_fetch_timeout()


class TestUrlHelpers:
    def test_get_domain(self) -> None:
        assert get_domain("https://www.Example.com/path") == "www.example.com"
        assert get_domain("http://localhost:3001/api") == "localhost"
        assert get_domain("not a url") == ""
        assert get_domain("") == ""

    def test_strip_www(self) -> None:
        assert strip_www("www.example.com") == "example.com"
        assert strip_www("news.example.com") == "news.example.com"

    def test_is_fetchable_url(self) -> None:
        assert is_fetchable_url("https://example.com")
        assert is_fetchable_url("http://example.com/a?b=1")
        assert not is_fetchable_url("mailto:someone@example.com")
        assert not is_fetchable_url("example.com/path")
        assert not is_fetchable_url("")
