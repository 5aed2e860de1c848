from __future__ import annotations

import pytest

from promptpage import share
from promptpage.core.models import Page
from promptpage.errors import ExportFailure


class FakeClipboard:
    def __init__(self) -> None:
        self.text = ""

    def setText(self, text: str) -> None:  # noqa: N802
        self.text = text


def test_display_detection_on_linux(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(share.sys, "platform", "linux")
    for key in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY"):
        monkeypatch.delenv(key, raising=False)
    assert share.display_available() is False
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    assert share.display_available() is True
    monkeypatch.delenv("WAYLAND_DISPLAY")
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    assert share.display_available() is True


def test_headless_clipboard_is_an_export_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(share, "display_available", lambda: False)
    with pytest.raises(ExportFailure):
        share.system_clipboard()


def test_copy_html_falls_back_to_system_clipboard(monkeypatch: pytest.MonkeyPatch, page: Page) -> None:
    clipboard = FakeClipboard()
    monkeypatch.setattr(share, "system_clipboard", lambda: clipboard)
    html = share.copy_html(page)
    assert clipboard.text == html
    assert "Zen Flow Yoga" in html


def test_share_payload_fields(page: Page) -> None:
    assert share.share_payload(page, "https://example.com") == {
        "title": "Zen Flow Yoga",
        "text": "Online yoga classes for busy people.",
        "url": "https://example.com",
    }
