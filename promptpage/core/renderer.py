"""Render section content into markup.

Every function here is pure: the same kind, content and color scheme always
produce the same string, and missing or malformed fields are replaced by
placeholders instead of raising.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from jinja2 import DictLoader, Environment, select_autoescape

from .models import ColorScheme
from .schema import CTA, FAQ, FEATURES, GENERIC, HERO, SCHEMAS, TESTIMONIALS
from .templates import BOLT_PATH, QUOTE_PATH, SECTION_TEMPLATES, STAR_PATH

logger = logging.getLogger(__name__)

FIELD_DEFAULTS: Dict[str, Dict[str, str]] = {
    HERO: {
        "headline": "Your Headline Here",
        "subheadline": "Built for You",
        "description": "Tell visitors what makes your offer worth their time.",
        "primaryCTA": "Get Started",
        "secondaryCTA": "Learn More",
        "badge": "New & Improved",
        "socialProofNumber": "10,000+",
    },
    FEATURES: {
        "title": "Powerful Features",
        "subtitle": "Everything you need to succeed, all in one place",
    },
    TESTIMONIALS: {
        "title": "What Our Customers Say",
        "subtitle": "Join thousands of satisfied customers who trust our solution",
    },
    FAQ: {
        "title": "Frequently Asked Questions",
        "subtitle": "Everything you need to know about our service",
    },
    CTA: {
        "headline": "Ready to Get Started?",
        "description": "Join thousands of satisfied customers and transform your business today",
        "primaryCTA": "Start Free Trial",
        "secondaryCTA": "Contact Sales",
    },
    GENERIC: {
        "title": "Custom Section",
    },
}

ITEM_DEFAULTS: Dict[str, Dict[str, str]] = {
    "features": {"title": "Feature", "description": ""},
    "testimonials": {"text": "", "author": "Anonymous", "role": ""},
    "faqs": {"question": "Question", "answer": ""},
}


@lru_cache(maxsize=2)
def _jinja_env(trusted: bool) -> Environment:
    return Environment(
        loader=DictLoader(SECTION_TEMPLATES),
        autoescape=False if trusted else select_autoescape(["html"]),
    )


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = value if isinstance(value, str) else str(value)
    return text if text else default


def _scalars(kind: str, content: Mapping[str, Any]) -> Dict[str, str]:
    defaults = FIELD_DEFAULTS[kind]
    return {name: _text(content.get(name), default) for name, default in defaults.items()}


def _list_items(content: Mapping[str, Any], list_field: str) -> List[Dict[str, str]]:
    raw = content.get(list_field)
    if not isinstance(raw, list):
        return []
    defaults = ITEM_DEFAULTS[list_field]
    items: List[Dict[str, str]] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        items.append({key: _text(item.get(key), default) for key, default in defaults.items()})
    return items


def _dump(content: Any) -> str:
    try:
        return json.dumps(content, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(content)


def _context(kind: str, content: Mapping[str, Any]) -> Dict[str, Any]:
    values = _scalars(kind, content)
    if kind == HERO:
        return {
            "badge": values["badge"],
            "headline": values["headline"],
            "subheadline": values["subheadline"],
            "description": values["description"],
            "primary_cta": values["primaryCTA"],
            "secondary_cta": values["secondaryCTA"],
            "social_proof": values["socialProofNumber"],
        }
    if kind == CTA:
        return {
            "headline": values["headline"],
            "description": values["description"],
            "primary_cta": values["primaryCTA"],
            "secondary_cta": values["secondaryCTA"],
        }
    list_def = SCHEMAS[kind].list_field
    if list_def is not None:
        values["items"] = _list_items(content, list_def.name)
    return values


def render(
    kind: str,
    content: Any,
    color_scheme: Optional[ColorScheme] = None,
    *,
    trusted: bool = False,
) -> str:
    """Render ``content`` with the template for ``kind``.

    Unknown kinds use the generic template. With ``trusted`` set, field text
    is interpolated without HTML escaping.
    """
    if not isinstance(kind, str) or kind not in SCHEMAS:
        logger.debug("No template for kind %r, using generic", kind)
        kind = GENERIC
    fields: Mapping[str, Any] = content if isinstance(content, Mapping) else {}
    scheme = (color_scheme or ColorScheme()).normalized()

    context = _context(kind, fields)
    if kind == GENERIC:
        context["dump"] = _dump(content)
    context.update(
        colors=scheme.css_variables(),
        bolt_path=BOLT_PATH,
        quote_path=QUOTE_PATH,
        star_path=STAR_PATH,
    )
    template = _jinja_env(trusted).get_template(f"{kind}.html")
    return template.render(**context).strip()

