"""Application controller owning the page being edited."""

from __future__ import annotations

import logging
import random
import threading
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from .config import Settings
from .core import editor, exporter
from .core.models import ColorScheme, Page
from .core.outcome import Outcome
from .errors import ExportFailure, GenerationFailure
from .generation import PageGenerator, page_from_response
from .share import copy_html, share_page

logger = logging.getLogger(__name__)

NO_PAGE = "Generate a landing page first."


class Session:
    """Single-writer owner of the current page.

    Every public method returns an :class:`Outcome` whose message is meant for
    the user; failures never leave the page half-edited.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        generator: Optional[PageGenerator] = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.generator = generator if generator is not None else PageGenerator(self.settings)
        self.page: Optional[Page] = None
        self._pending = threading.Lock()

    @property
    def is_generating(self) -> bool:
        return self._pending.locked()

    # ------------------------------------------------------------ generate --
    def generate(self, prompt: str) -> Outcome:
        if not self._pending.acquire(blocking=False):
            return Outcome.error("A page is already being generated.")
        try:
            page = self.generator.generate(prompt)
        except GenerationFailure as exc:
            logger.error("Generation failed: %s", exc)
            return Outcome.error(str(exc) or "Failed to generate landing page")
        finally:
            self._pending.release()
        self.page = page
        return Outcome.success("Landing page generated successfully!", page)

    def load_response(self, data: Mapping[str, Any]) -> Outcome:
        """Compile a previously obtained generator payload."""
        try:
            page = page_from_response(dict(data), trusted=self.settings.trusted_markup)
        except GenerationFailure as exc:
            return Outcome.error(str(exc))
        self.page = page
        return Outcome.success("Landing page loaded", page)

    # --------------------------------------------------------------- edits --
    def _edit(self, action: Callable[[Page], Outcome]) -> Outcome:
        if self.page is None:
            return Outcome.error(NO_PAGE)
        return action(self.page)

    def toggle_section(self, section_id: str) -> Outcome:
        return self._edit(lambda page: editor.toggle_section(
            page, section_id, strict=self.settings.strict))

    def update_section_content(self, section_id: str, content: Mapping[str, Any]) -> Outcome:
        return self._edit(lambda page: editor.update_section_content(
            page, section_id, content,
            strict=self.settings.strict, trusted=self.settings.trusted_markup))

    def rename_section(self, section_id: str, name: str) -> Outcome:
        return self._edit(lambda page: editor.rename_section(
            page, section_id, name, strict=self.settings.strict))

    def delete_section(self, section_id: str) -> Outcome:
        return self._edit(lambda page: editor.delete_section(
            page, section_id, strict=self.settings.strict))

    def duplicate_section(self, section_id: str) -> Outcome:
        return self._edit(lambda page: editor.duplicate_section(
            page, section_id, strict=self.settings.strict))

    def add_section(self, kind: str) -> Outcome:
        return self._edit(lambda page: editor.add_section(
            page, kind, trusted=self.settings.trusted_markup))

    def move_section(self, from_index: int, to_index: int) -> Outcome:
        return self._edit(lambda page: editor.move_section(
            page, from_index, to_index, strict=self.settings.strict))

    def set_color_scheme(self, scheme: ColorScheme) -> Outcome:
        return self._edit(lambda page: editor.update_color_scheme(
            page, scheme, trusted=self.settings.trusted_markup))

    def reset_color_scheme(self) -> Outcome:
        return self._edit(lambda page: editor.reset_color_scheme(
            page, trusted=self.settings.trusted_markup))

    def randomize_color_scheme(self, rng: Optional[random.Random] = None) -> Outcome:
        """Recolor the page with a randomly picked preset."""
        return self._edit(lambda page: editor.update_color_scheme(
            page, ColorScheme.random_preset(rng), trusted=self.settings.trusted_markup))

    # -------------------------------------------------------------- output --
    def preview(self) -> str:
        return exporter.render_preview(self.page) if self.page is not None else ""

    def export(self, fmt: str, output_dir: str | Path) -> Outcome:
        if self.page is None:
            return Outcome.error(NO_PAGE)
        try:
            path = exporter.write_export(self.page, fmt, output_dir)
        except ExportFailure as exc:
            logger.error("Export failed: %s", exc)
            return Outcome.error(f"Failed to export page: {exc}")
        return Outcome.success(f"Exported as {fmt.upper()}!", path)

    def copy_html(self, clipboard: Optional[Any] = None) -> Outcome:
        if self.page is None:
            return Outcome.error(NO_PAGE)
        try:
            html = copy_html(self.page, clipboard)
        except ExportFailure as exc:
            logger.error("Copy failed: %s", exc)
            return Outcome.error("Failed to copy HTML")
        return Outcome.success("HTML copied to clipboard!", html)

    def share(self, location: str, clipboard: Optional[Any] = None) -> Outcome:
        if self.page is None:
            return Outcome.error(NO_PAGE)
        try:
            payload = share_page(self.page, location, clipboard)
        except ExportFailure as exc:
            logger.error("Share failed: %s", exc)
            return Outcome.error("Failed to share page")
        return Outcome.success("Link copied to clipboard!", payload)
