"""Structural edits on a page that keep every section's markup current."""

from __future__ import annotations

import copy
import itertools
import logging
from typing import Any, List, Mapping, Optional, Union

from ..errors import StructuralViolation
from .models import ColorScheme, Page, Section, new_section_id
from .outcome import Outcome
from .renderer import render
from .schema import GENERIC, coerce_kind, schema_for, starter_content

logger = logging.getLogger(__name__)

_copy_counter = itertools.count(1)


def _violation(message: str, strict: bool) -> Outcome:
    if strict:
        raise StructuralViolation(message)
    logger.warning("Ignored invalid edit: %s", message)
    return Outcome.error(message)


def _rerender(page: Page, section: Section, trusted: bool) -> None:
    section.markup = render(section.kind, section.content, page.color_scheme, trusted=trusted)


def compile_page(page: Page, *, trusted: bool = False) -> Page:
    """Render markup for every section of ``page`` in place."""
    for section in page.sections:
        _rerender(page, section, trusted)
    return page


def check_invariants(page: Page, *, trusted: bool = False) -> List[str]:
    """Describe every duplicate id and stale markup found on ``page``."""
    problems: List[str] = []
    seen: set[str] = set()
    for section in page.sections:
        if section.id in seen:
            problems.append(f"duplicate section id {section.id!r}")
        seen.add(section.id)
        expected = render(section.kind, section.content, page.color_scheme, trusted=trusted)
        if section.markup != expected:
            problems.append(f"stale markup in section {section.id!r}")
    return problems


def toggle_section(page: Page, section_id: str, *, strict: bool = False) -> Outcome:
    section = page.find(section_id)
    if section is None:
        return _violation(f"no section with id {section_id!r}", strict)
    section.enabled = not section.enabled
    state = "shown" if section.enabled else "hidden"
    return Outcome.success(f"{section.name} {state}", section)


def update_section_content(
    page: Page,
    section_id: str,
    content: Mapping[str, Any],
    *,
    strict: bool = False,
    trusted: bool = False,
) -> Outcome:
    """Replace a section's content and regenerate its markup before returning."""
    section = page.find(section_id)
    if section is None:
        return _violation(f"no section with id {section_id!r}", strict)
    section.content = copy.deepcopy(dict(content))
    _rerender(page, section, trusted)
    return Outcome.success("Section updated successfully!", section)


def rename_section(page: Page, section_id: str, name: str, *, strict: bool = False) -> Outcome:
    """Change the display name only; the kind chosen at creation is kept."""
    section = page.find(section_id)
    if section is None:
        return _violation(f"no section with id {section_id!r}", strict)
    section.name = name
    return Outcome.success("Section renamed", section)


def delete_section(page: Page, section_id: str, *, strict: bool = False) -> Outcome:
    index = page.index_of(section_id)
    if index < 0:
        return _violation(f"no section with id {section_id!r}", strict)
    removed = page.sections.pop(index)
    return Outcome.success("Section deleted", removed)


def duplicate_section(
    page: Page,
    section: Union[Section, str],
    *,
    strict: bool = False,
) -> Outcome:
    """Insert a copy right after ``section`` with a fresh id and the same markup."""
    section_id = section if isinstance(section, str) else section.id
    index = page.index_of(section_id)
    if index < 0:
        return _violation(f"no section with id {section_id!r}", strict)
    original = page.sections[index]
    taken = set(page.ids())
    new_id = f"{original.id}-copy-{next(_copy_counter)}"
    while new_id in taken:
        new_id = f"{original.id}-copy-{next(_copy_counter)}"
    clone = Section(
        id=new_id,
        name=f"{original.name} (Copy)",
        kind=original.kind,
        content=copy.deepcopy(original.content),
        enabled=original.enabled,
        markup=original.markup,
    )
    page.sections.insert(index + 1, clone)
    return Outcome.success("Section duplicated", clone)


def add_section(
    page: Page,
    kind: str,
    *,
    name: Optional[str] = None,
    trusted: bool = False,
) -> Outcome:
    """Append a section of ``kind`` filled with starter content."""
    resolved = coerce_kind(kind) or GENERIC
    section = Section(
        id=new_section_id(resolved, page.ids()),
        name=name or schema_for(resolved).label,
        kind=resolved,
        content=starter_content(resolved),
    )
    _rerender(page, section, trusted)
    page.sections.append(section)
    return Outcome.success(f"{section.name} added", section)


def move_section(page: Page, from_index: int, to_index: int, *, strict: bool = False) -> Outcome:
    size = len(page.sections)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return _violation(
            f"cannot move section {from_index} to {to_index} (page has {size})", strict
        )
    if from_index == to_index:
        return Outcome.success("Section order unchanged")
    section = page.sections.pop(from_index)
    page.sections.insert(to_index, section)
    return Outcome.success("Section moved", section)


def update_color_scheme(page: Page, scheme: ColorScheme, *, trusted: bool = False) -> Outcome:
    """Swap the page colors and re-render every section against them."""
    page.color_scheme = scheme
    compile_page(page, trusted=trusted)
    return Outcome.success("Color scheme updated", scheme)


def reset_color_scheme(page: Page, *, trusted: bool = False) -> Outcome:
    return update_color_scheme(page, ColorScheme(), trusted=trusted)
