"""Data models for the landing page builder."""

from __future__ import annotations

import copy
import random
import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .schema import Content, coerce_kind, infer_kind

HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

DEFAULT_COLOR_SCHEME = {
    "primary": "#6366f1",
    "secondary": "#8b5cf6",
    "accent": "#06b6d4",
}

COLOR_PRESETS: Dict[str, Dict[str, str]] = {
    "red": {"primary": "#ef4444", "secondary": "#f97316", "accent": "#eab308"},
    "green": {"primary": "#10b981", "secondary": "#059669", "accent": "#06b6d4"},
    "purple": {"primary": "#8b5cf6", "secondary": "#a855f7", "accent": "#ec4899"},
    "blue": {"primary": "#3b82f6", "secondary": "#1d4ed8", "accent": "#06b6d4"},
    "orange": {"primary": "#f59e0b", "secondary": "#d97706", "accent": "#dc2626"},
}


def normalize_hex(color: object, default: str) -> str:
    if not isinstance(color, str):
        return default
    color = color.strip()
    if HEX_COLOR_RE.match(color):
        return color.lower()
    return default


@dataclass(frozen=True)
class ColorScheme:
    primary: str = DEFAULT_COLOR_SCHEME["primary"]
    secondary: str = DEFAULT_COLOR_SCHEME["secondary"]
    accent: str = DEFAULT_COLOR_SCHEME["accent"]

    def normalized(self) -> "ColorScheme":
        """Return a copy whose values are safe to write into markup or scripts."""
        return ColorScheme(
            primary=normalize_hex(self.primary, DEFAULT_COLOR_SCHEME["primary"]),
            secondary=normalize_hex(self.secondary, DEFAULT_COLOR_SCHEME["secondary"]),
            accent=normalize_hex(self.accent, DEFAULT_COLOR_SCHEME["accent"]),
        )

    def css_variables(self) -> str:
        scheme = self.normalized()
        return (
            f"--primary: {scheme.primary}; "
            f"--secondary: {scheme.secondary}; "
            f"--accent: {scheme.accent};"
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
        }

    @classmethod
    def from_dict(cls, data: object) -> "ColorScheme":
        if not isinstance(data, dict):
            return cls()
        return cls(
            primary=str(data.get("primary", DEFAULT_COLOR_SCHEME["primary"])),
            secondary=str(data.get("secondary", DEFAULT_COLOR_SCHEME["secondary"])),
            accent=str(data.get("accent", DEFAULT_COLOR_SCHEME["accent"])),
        )

    @classmethod
    def preset(cls, name: str) -> "ColorScheme":
        return cls(**COLOR_PRESETS[name])

    @classmethod
    def random_preset(cls, rng: Optional[random.Random] = None) -> "ColorScheme":
        rng = rng or random.Random()
        return cls.preset(rng.choice(sorted(COLOR_PRESETS)))


def new_section_id(prefix: str, existing: Iterable[str] = ()) -> str:
    """Return an id of the form ``<prefix>-<hex>`` not present in ``existing``."""
    taken = set(existing)
    while True:
        candidate = f"{prefix}-{uuid.uuid4().hex[:8]}"
        if candidate not in taken:
            return candidate


@dataclass
class Section:
    id: str
    name: str
    kind: str
    content: Content = field(default_factory=dict)
    enabled: bool = True
    markup: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind,
            "enabled": self.enabled,
            "content": copy.deepcopy(self.content),
            "html": self.markup,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], existing: Iterable[str] = ()) -> "Section":
        name = str(data.get("name") or "Section")
        # An explicit tag wins; otherwise the name decides, once.
        kind = coerce_kind(data.get("kind")) or infer_kind(name)
        raw_id = data.get("id")
        section_id = str(raw_id) if raw_id not in (None, "") else new_section_id(kind, existing)
        content = data.get("content")
        enabled = data.get("enabled", True)
        return cls(
            id=section_id,
            name=name,
            kind=kind,
            content=copy.deepcopy(content) if isinstance(content, dict) else {},
            enabled=enabled if isinstance(enabled, bool) else True,
            markup=str(data.get("html", "")),
        )


@dataclass
class Page:
    title: str
    description: str = ""
    sections: List[Section] = field(default_factory=list)
    color_scheme: ColorScheme = field(default_factory=ColorScheme)

    def ids(self) -> List[str]:
        return [section.id for section in self.sections]

    def enabled_sections(self) -> List[Section]:
        return [section for section in self.sections if section.enabled]

    def index_of(self, section_id: str) -> int:
        for index, section in enumerate(self.sections):
            if section.id == section_id:
                return index
        return -1

    def find(self, section_id: str) -> Optional[Section]:
        index = self.index_of(section_id)
        return self.sections[index] if index >= 0 else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "colorScheme": self.color_scheme.to_dict(),
            "sections": [section.to_dict() for section in self.sections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        sections: List[Section] = []
        seen: set[str] = set()
        for raw in data.get("sections", []) or []:
            if not isinstance(raw, dict):
                continue
            section = Section.from_dict(raw, seen)
            if section.id in seen:
                # Generator ids are not trusted to be unique.
                section.id = new_section_id(section.kind, seen)
            seen.add(section.id)
            sections.append(section)
        return cls(
            title=str(data.get("title", "Untitled Page")),
            description=str(data.get("description", "")),
            sections=sections,
            color_scheme=ColorScheme.from_dict(data.get("colorScheme")),
        )
