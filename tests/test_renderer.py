from __future__ import annotations

import html
import json

from promptpage.core.models import ColorScheme
from promptpage.core.renderer import render


def test_hero_with_only_headline_uses_default_labels() -> None:
    markup = render("hero", {"headline": "Ship Faster"}, ColorScheme())
    assert "Ship Faster" in markup
    assert "Get Started" in markup
    assert "Learn More" in markup
    assert "Trusted by 10,000+ customers worldwide" in markup


def test_empty_strings_fall_back_to_placeholders() -> None:
    markup = render("cta", {"headline": "", "primaryCTA": None})
    assert "Ready to Get Started?" in markup
    assert "Start Free Trial" in markup
    assert "Contact Sales" in markup


def test_field_text_is_escaped_by_default() -> None:
    markup = render("hero", {"headline": "<script>alert(1)</script>"})
    assert "<script>alert(1)</script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup


def test_trusted_rendering_interpolates_raw_markup() -> None:
    markup = render("hero", {"headline": "<em>Bold</em> move"}, trusted=True)
    assert "<em>Bold</em> move" in markup


def test_features_render_one_card_per_item_in_order() -> None:
    content = {
        "features": [
            {"title": "Alpha", "description": "first"},
            {"title": "Beta", "description": "second"},
            "not a record",
        ]
    }
    markup = render("features", content)
    assert markup.count("<h3") == 2
    assert markup.index("Alpha") < markup.index("Beta")
    assert "Powerful Features" in markup


def test_absent_or_empty_lists_render_no_items() -> None:
    for content in ({}, {"testimonials": []}, {"testimonials": None}, {"testimonials": "oops"}):
        markup = render("testimonials", content)
        assert "What Our Customers Say" in markup
        assert "font-semibold text-slate-900" not in markup


def test_faq_items_render_question_and_answer() -> None:
    markup = render("faq", {"faqs": [{"question": "Refunds?", "answer": "Within 30 days."}]})
    assert markup.count("<details") == 1
    assert "Refunds?" in markup
    assert "Within 30 days." in markup


def test_testimonial_item_defaults() -> None:
    markup = render("testimonials", {"testimonials": [{"text": "Great"}]})
    assert "Anonymous" in markup
    assert markup.count("text-yellow-400") == 5


def test_unknown_kind_falls_back_to_generic_with_content_dump() -> None:
    content = {"title": "Pricing", "plans": ["Basic", "Pro"]}
    markup = render("pricing", content)
    assert 'data-section="generic"' in markup
    assert "Pricing" in markup
    assert json.dumps(content) in html.unescape(markup)


def test_generic_tolerates_non_mapping_content() -> None:
    markup = render("generic", ["loose", "items"])
    assert "Custom Section" in markup
    assert '["loose", "items"]' in html.unescape(markup)


def test_render_never_raises_on_odd_kinds() -> None:
    assert 'data-section="generic"' in render(None, None)  # type: ignore[arg-type]
    assert 'data-section="generic"' in render(["hero"], {})  # type: ignore[arg-type]


def test_color_scheme_is_declared_on_the_section_root() -> None:
    scheme = ColorScheme("#112233", "#445566", "#778899")
    markup = render("cta", {}, scheme)
    assert "--primary: #112233;" in markup
    assert "--accent: #778899;" in markup


def test_invalid_colors_are_replaced_before_interpolation() -> None:
    scheme = ColorScheme(primary='red"><script>', secondary="#abc", accent="")
    markup = render("faq", {}, scheme)
    assert "<script>" not in markup
    assert "--primary: #6366f1;" in markup
    assert "--secondary: #abc;" in markup


def test_render_is_deterministic() -> None:
    content = {"headline": "Same", "badge": "Beta"}
    assert render("hero", content, ColorScheme()) == render("hero", content, ColorScheme())
