"""Content shapes for each section kind and helpers to edit them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..errors import StructuralViolation

HERO = "hero"
FEATURES = "features"
TESTIMONIALS = "testimonials"
FAQ = "faq"
CTA = "cta"
GENERIC = "generic"

SECTION_KINDS: Tuple[str, ...] = (HERO, FEATURES, TESTIMONIALS, FAQ, CTA, GENERIC)

# Checked in order against the lowercased section name.
_KIND_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("hero", HERO),
    ("feature", FEATURES),
    ("testimonial", TESTIMONIALS),
    ("faq", FAQ),
    ("cta", CTA),
)

Content = Dict[str, Any]


@dataclass(frozen=True)
class ListFieldSpec:
    name: str
    item_fields: Tuple[str, ...]
    new_item: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class KindSchema:
    kind: str
    label: str
    fields: Tuple[str, ...]
    required: Tuple[str, ...] = ()
    list_field: Optional[ListFieldSpec] = None


SCHEMAS: Dict[str, KindSchema] = {
    HERO: KindSchema(
        kind=HERO,
        label="Hero Section",
        fields=(
            "headline",
            "subheadline",
            "description",
            "primaryCTA",
            "secondaryCTA",
            "badge",
            "socialProofNumber",
        ),
        required=("headline", "subheadline", "description"),
    ),
    FEATURES: KindSchema(
        kind=FEATURES,
        label="Features Section",
        fields=("title", "subtitle"),
        list_field=ListFieldSpec(
            "features",
            ("title", "description"),
            {"title": "New Feature", "description": "Feature description"},
        ),
    ),
    TESTIMONIALS: KindSchema(
        kind=TESTIMONIALS,
        label="Testimonials Section",
        fields=("title", "subtitle"),
        list_field=ListFieldSpec(
            "testimonials",
            ("text", "author", "role"),
            {
                "text": "Great product! Highly recommended.",
                "author": "John Doe",
                "role": "CEO, Company",
            },
        ),
    ),
    FAQ: KindSchema(
        kind=FAQ,
        label="FAQ Section",
        fields=("title", "subtitle"),
        list_field=ListFieldSpec(
            "faqs",
            ("question", "answer"),
            {"question": "New question?", "answer": "Answer to the question."},
        ),
    ),
    CTA: KindSchema(
        kind=CTA,
        label="CTA Section",
        fields=("headline", "description", "primaryCTA", "secondaryCTA"),
    ),
    GENERIC: KindSchema(
        kind=GENERIC,
        label="Custom Section",
        fields=("title", "content"),
    ),
}

LIST_FIELDS: Dict[str, ListFieldSpec] = {
    schema.list_field.name: schema.list_field
    for schema in SCHEMAS.values()
    if schema.list_field is not None
}

STARTER_CONTENT: Dict[str, Content] = {
    HERO: {
        "headline": "Your Big Idea",
        "subheadline": "Made Simple",
        "description": "Describe what you offer and why it matters to your visitors.",
        "primaryCTA": "Get Started",
        "secondaryCTA": "Learn More",
        "badge": "New & Improved",
        "socialProofNumber": "10,000+",
    },
    FEATURES: {
        "title": "Powerful Features",
        "subtitle": "Everything you need to succeed, all in one place",
        "features": [
            {"title": "Fast Setup", "description": "Get up and running in minutes."},
            {"title": "Easy to Use", "description": "A clean interface your team will love."},
            {"title": "Built to Scale", "description": "Grows with you from day one."},
        ],
    },
    TESTIMONIALS: {
        "title": "What Our Customers Say",
        "subtitle": "Join thousands of satisfied customers who trust our solution",
        "testimonials": [
            {
                "text": "Great product! Highly recommended.",
                "author": "John Doe",
                "role": "CEO, Company",
            },
        ],
    },
    FAQ: {
        "title": "Frequently Asked Questions",
        "subtitle": "Everything you need to know about our service",
        "faqs": [
            {"question": "How do I get started?", "answer": "Sign up and follow the guided setup."},
            {"question": "Can I cancel anytime?", "answer": "Yes, there are no long-term contracts."},
        ],
    },
    CTA: {
        "headline": "Ready to Get Started?",
        "description": "Join thousands of satisfied customers and transform your business today",
        "primaryCTA": "Start Free Trial",
        "secondaryCTA": "Contact Sales",
    },
    GENERIC: {
        "title": "New Section",
        "content": "Add your content here.",
    },
}


def infer_kind(name: str) -> str:
    """Match a display name against the known kinds; unknown names are generic."""
    lowered = (name or "").lower()
    for keyword, kind in _KIND_KEYWORDS:
        if keyword in lowered:
            return kind
    return GENERIC


def coerce_kind(value: object) -> Optional[str]:
    """Return ``value`` as a known kind tag, or None if it is not one."""
    if not isinstance(value, str):
        return None
    lowered = value.strip().lower()
    return lowered if lowered in SCHEMAS else None


def schema_for(kind: str) -> KindSchema:
    return SCHEMAS.get(kind, SCHEMAS[GENERIC])


def starter_content(kind: str) -> Content:
    return copy.deepcopy(STARTER_CONTENT.get(kind, STARTER_CONTENT[GENERIC]))


def missing_fields(kind: str, content: Mapping[str, Any]) -> List[str]:
    """List required fields absent from ``content`` (``features[1].title`` style)."""
    schema = schema_for(kind)
    missing = [name for name in schema.required if _is_blank(content.get(name))]
    list_def = schema.list_field
    if list_def is not None:
        items = content.get(list_def.name)
        if isinstance(items, list):
            for index, item in enumerate(items):
                if not isinstance(item, Mapping):
                    missing.append(f"{list_def.name}[{index}]")
                    continue
                for key in list_def.item_fields:
                    if _is_blank(item.get(key)):
                        missing.append(f"{list_def.name}[{index}].{key}")
    return missing


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# ---------------------------------------------------------------------------
# Content editing
# ---------------------------------------------------------------------------


def update_field(content: Mapping[str, Any], name: str, value: Any) -> Content:
    updated = copy.deepcopy(dict(content))
    updated[name] = value
    return updated


def _items(content: Mapping[str, Any], list_field: str) -> List[Any]:
    items = content.get(list_field)
    return copy.deepcopy(items) if isinstance(items, list) else []


def _check_index(items: List[Any], index: int, list_field: str) -> None:
    if not 0 <= index < len(items):
        raise StructuralViolation(
            f"{list_field} has no item at index {index} (size {len(items)})"
        )


def add_item(
    content: Mapping[str, Any],
    list_field: str,
    item: Optional[Mapping[str, Any]] = None,
    index: Optional[int] = None,
) -> Content:
    """Insert a sub-record at ``index`` (append when None)."""
    items = _items(content, list_field)
    if item is None:
        list_def = LIST_FIELDS.get(list_field)
        item = list_def.new_item if list_def is not None else {}
    position = len(items) if index is None else index
    if not 0 <= position <= len(items):
        raise StructuralViolation(
            f"cannot insert into {list_field} at index {position} (size {len(items)})"
        )
    items.insert(position, dict(item))
    return update_field(content, list_field, items)


def update_item(
    content: Mapping[str, Any],
    list_field: str,
    index: int,
    key: str,
    value: Any,
) -> Content:
    items = _items(content, list_field)
    _check_index(items, index, list_field)
    current = items[index] if isinstance(items[index], dict) else {}
    items[index] = {**current, key: value}
    return update_field(content, list_field, items)


def remove_item(content: Mapping[str, Any], list_field: str, index: int) -> Content:
    """Remove a sub-record; later items shift down by one."""
    items = _items(content, list_field)
    _check_index(items, index, list_field)
    del items[index]
    return update_field(content, list_field, items)
