"""Tests for remote.fetch — download URL handling and error mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

from remote import fetch
from remote.fetch import fetch_document, relay_url, to_direct_download_url
from vn3_model import AccessDenied, NetworkFailure


@dataclass
class FakeResponse:
    status_code: int = 200
    content: bytes = b"%PDF-1.7"
    text: str = ""
    headers: dict[str, str] = field(default_factory=lambda: {"Content-Type": "application/pdf"})

    @property
    def ok(self) -> bool:
        return self.status_code < 400


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    recorded: list[dict[str, Any]] = []

    def _get(url: str, **kwargs: Any) -> FakeResponse:
        recorded.append({"url": url, **kwargs})
        return FakeResponse()

    monkeypatch.setattr(fetch.requests, "get", _get)
    return recorded


def _patch_get(monkeypatch: pytest.MonkeyPatch, result: Any) -> None:
    def _get(url: str, **kwargs: Any) -> FakeResponse:
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(fetch.requests, "get", _get)


class TestUrls:
    def test_drive_share_link(self) -> None:
        url = "https://drive.google.com/file/d/1AbC_d-9/view?usp=sharing"
        assert to_direct_download_url(url) == (
            "https://drive.google.com/uc?export=download&id=1AbC_d-9"
        )

    def test_other_url_unchanged(self) -> None:
        assert to_direct_download_url("https://example.com/a.pdf") == "https://example.com/a.pdf"

    def test_relay_template(self) -> None:
        assert relay_url("https://x.test/a b.pdf", "https://relay.test/raw?url={url}") == (
            "https://relay.test/raw?url=https%3A%2F%2Fx.test%2Fa%20b.pdf"
        )

    def test_relay_prefix(self) -> None:
        assert relay_url("https://x.test/", "https://relay.test/?") == (
            "https://relay.test/?https%3A%2F%2Fx.test%2F"
        )

    def test_no_relay(self) -> None:
        assert relay_url("https://x.test/", None) == "https://x.test/"


class TestFetchDocument:
    def test_returns_content(self, calls: list[dict[str, Any]]) -> None:
        data = fetch_document("https://drive.google.com/file/d/abc/view", timeout=5.0)
        assert data == b"%PDF-1.7"
        request = calls[0]
        assert request["url"] == "https://drive.google.com/uc?export=download&id=abc"
        assert request["timeout"] == 5.0
        assert "User-Agent" in request["headers"]

    def test_relay_applied_after_rewrite(self, calls: list[dict[str, Any]]) -> None:
        fetch_document("https://drive.google.com/file/d/abc/view", relay="https://r.test/?u={url}")
        assert calls[0]["url"].startswith("https://r.test/?u=https%3A%2F%2Fdrive.google.com%2Fuc")

    def test_html_means_access_denied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        page = "<html><head><title> Google ドライブ - ログイン </title></head></html>"
        _patch_get(monkeypatch, FakeResponse(
            text=page, headers={"Content-Type": "text/html; charset=utf-8"},
        ))
        with pytest.raises(AccessDenied) as exc_info:
            fetch_document("https://example.com/a.pdf")
        assert exc_info.value.page_title == "Google ドライブ - ログイン"
        assert "Google Drive" in exc_info.value.message

    def test_html_without_title(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_get(monkeypatch, FakeResponse(text="<p>x</p>", headers={"Content-Type": "TEXT/HTML"}))
        with pytest.raises(AccessDenied) as exc_info:
            fetch_document("https://example.com/a.pdf")
        assert exc_info.value.page_title is None

    def test_http_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_get(monkeypatch, FakeResponse(status_code=404))
        with pytest.raises(NetworkFailure) as exc_info:
            fetch_document("https://example.com/missing.pdf")
        assert not isinstance(exc_info.value, AccessDenied)

    def test_connection_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_get(monkeypatch, requests.ConnectionError("refused"))
        with pytest.raises(NetworkFailure):
            fetch_document("https://example.com/a.pdf")
