from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Dict, List

import pytest

from promptpage.config import Settings
from promptpage.core.editor import check_invariants
from promptpage.core.models import COLOR_PRESETS, ColorScheme, Page
from promptpage.errors import GenerationFailure, StructuralViolation
from promptpage.generation import page_from_response
from promptpage.session import NO_PAGE, Session
from promptpage.share import share_payload


class FakeGenerator:
    def __init__(self, response: Dict[str, Any]) -> None:
        self.response = response
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> Page:
        self.prompts.append(prompt)
        if prompt == "fail":
            raise GenerationFailure("Generator returned an empty response.")
        return page_from_response(self.response)


class FakeClipboard:
    def __init__(self) -> None:
        self.text = ""

    def setText(self, text: str) -> None:  # noqa: N802
        self.text = text


class BrokenClipboard:
    def setText(self, text: str) -> None:  # noqa: N802
        raise RuntimeError("wrapped C/C++ object has been deleted")


def _session(sample_response: Dict[str, Any], **settings: Any) -> Session:
    return Session(Settings(**settings), generator=FakeGenerator(sample_response))  # type: ignore[arg-type]


def test_generate_sets_page(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    outcome = session.generate("A yoga studio")
    assert outcome.ok
    assert outcome.message == "Landing page generated successfully!"
    assert session.page is outcome.value
    assert not session.is_generating


def test_failed_generation_keeps_previous_page(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.generate("first")
    previous = session.page
    outcome = session.generate("fail")
    assert not outcome.ok
    assert outcome.message == "Generator returned an empty response."
    assert session.page is previous
    assert not session.is_generating


def test_second_generation_is_refused_while_one_is_pending(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session._pending.acquire()
    try:
        outcome = session.generate("A yoga studio")
    finally:
        session._pending.release()
    assert not outcome.ok
    assert "already being generated" in outcome.message
    assert session.generator.prompts == []


def test_edits_require_a_page(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    for outcome in (
        session.toggle_section("hero-1"),
        session.add_section("faq"),
        session.move_section(0, 1),
        session.set_color_scheme(ColorScheme()),
        session.export("html", "."),
        session.copy_html(FakeClipboard()),
        session.share("https://example.com", FakeClipboard()),
    ):
        assert not outcome.ok
        assert outcome.message == NO_PAGE
    assert session.preview() == ""


def test_edit_round_trip_keeps_page_consistent(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    assert session.update_section_content("cta-1", {"headline": "Go"}).ok
    assert session.duplicate_section("cta-1").ok
    assert session.add_section("testimonials").ok
    assert session.move_section(5, 0).ok
    assert session.rename_section("hero-1", "Top").ok
    assert session.toggle_section("faq-1").ok
    assert session.delete_section("features-1").ok
    assert session.set_color_scheme(ColorScheme.preset("purple")).ok
    assert session.reset_color_scheme().ok
    assert check_invariants(session.page) == []
    assert 'data-section-id="faq-1"' not in session.preview()


def test_strict_settings_raise_on_bad_edits(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response, strict=True)
    session.load_response(sample_response)
    with pytest.raises(StructuralViolation):
        session.delete_section("missing")
    relaxed = _session(sample_response)
    relaxed.load_response(sample_response)
    assert not relaxed.delete_section("missing").ok


def test_load_response_reports_invalid_payload(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    outcome = session.load_response({"title": "No sections"})
    assert not outcome.ok
    assert session.page is None


def test_export_writes_file(sample_response: Dict[str, Any], tmp_path: Path) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    outcome = session.export("html", tmp_path)
    assert outcome.ok
    assert outcome.message == "Exported as HTML!"
    assert outcome.value == tmp_path / "zen-flow-yoga.html"


def test_export_failure_is_reported(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    outcome = session.export("pdf", ".")
    assert not outcome.ok
    assert outcome.message.startswith("Failed to export page")


def test_copy_html_uses_clipboard(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    clipboard = FakeClipboard()
    outcome = session.copy_html(clipboard)
    assert outcome.message == "HTML copied to clipboard!"
    assert clipboard.text.startswith("<!DOCTYPE html>")


def test_clipboard_errors_become_outcomes(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    assert session.copy_html(BrokenClipboard()).message == "Failed to copy HTML"
    assert session.share("https://example.com", BrokenClipboard()).message == "Failed to share page"


def test_share_copies_link(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    session.load_response(sample_response)
    clipboard = FakeClipboard()
    outcome = session.share("https://example.com/zen", clipboard)
    assert outcome.message == "Link copied to clipboard!"
    assert clipboard.text == "https://example.com/zen"
    assert outcome.value == share_payload(session.page, "https://example.com/zen")
    assert outcome.value["title"] == "Zen Flow Yoga"


def test_randomize_color_scheme_picks_a_preset(sample_response: Dict[str, Any]) -> None:
    session = _session(sample_response)
    assert session.randomize_color_scheme(random.Random(7)).message == NO_PAGE
    session.load_response(sample_response)
    outcome = session.randomize_color_scheme(random.Random(7))
    assert outcome.ok
    assert outcome.value == ColorScheme.random_preset(random.Random(7))
    assert session.page.color_scheme.to_dict() in COLOR_PRESETS.values()
    assert check_invariants(session.page) == []
