"""Clipboard and share helpers backed by the Qt clipboard."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from .core.exporter import export_html
from .core.models import Page
from .errors import ExportFailure

logger = logging.getLogger(__name__)


_qt_app: Any = None


def display_available() -> bool:
    """Whether Qt can reach a display; it aborts the process when it cannot."""
    if os.environ.get("QT_QPA_PLATFORM"):
        return True
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def system_clipboard() -> Any:
    """Return the Qt clipboard, starting a Qt application if none is running."""
    global _qt_app
    try:
        from PyQt6.QtGui import QGuiApplication
    except ImportError as exc:
        raise ExportFailure("Clipboard access needs the PyQt6 package.") from exc
    if QGuiApplication.instance() is None:
        if not display_available():
            raise ExportFailure("Clipboard is unavailable without a display.")
        _qt_app = QGuiApplication(sys.argv[:1])
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        raise ExportFailure("Clipboard is unavailable on this platform.")
    return clipboard


def _copy(text: str, clipboard: Optional[Any]) -> None:
    target = clipboard if clipboard is not None else system_clipboard()
    try:
        target.setText(text)
    except RuntimeError as exc:
        raise ExportFailure(f"Could not write to the clipboard: {exc}") from exc


def copy_html(page: Page, clipboard: Optional[Any] = None) -> str:
    """Copy the standalone HTML export of ``page`` and return it."""
    html = export_html(page)
    _copy(html, clipboard)
    logger.info("Copied %d characters of HTML to the clipboard", len(html))
    return html


def share_payload(page: Page, location: str) -> Dict[str, str]:
    return {"title": page.title, "text": page.description, "url": location}


def share_page(page: Page, location: str, clipboard: Optional[Any] = None) -> Dict[str, str]:
    """Share a page link; desktop has no share sheet, so the link is copied."""
    payload = share_payload(page, location)
    _copy(payload["url"], clipboard)
    return payload
