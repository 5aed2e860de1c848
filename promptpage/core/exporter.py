"""Page export helpers."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from ..errors import ExportFailure
from .models import Page, Section

logger = logging.getLogger(__name__)

HTML = "html"
REACT = "react"
EXPORT_FORMATS = (HTML, REACT)

FILE_EXTENSIONS: Dict[str, str] = {HTML: ".html", REACT: ".tsx"}

TAILWIND_CDN = "https://cdn.tailwindcss.com"
FONT_STYLESHEET = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800;900&display=swap"
)

GRID_SLATE_SVG = (
    "data:image/svg+xml,%3csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 32 32' width='32' "
    "height='32' fill='none' stroke='rgb(148 163 184 / 0.05)'%3e%3cpath d='m0 .5h32m-32 32v-32'/%3e%3c/svg%3e"
)
GRID_WHITE_SVG = (
    "data:image/svg+xml,%3csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 32 32' width='32' "
    "height='32' fill='none' stroke='rgb(255 255 255 / 0.05)'%3e%3cpath d='m0 .5h32m-32 32v-32'/%3e%3c/svg%3e"
)

SCROLL_REVEAL_JS = """\
document.addEventListener('DOMContentLoaded', function() {
  const observer = new IntersectionObserver(function(entries) {
    entries.forEach(entry => {
      if (entry.isIntersecting) {
        entry.target.style.opacity = '1';
        entry.target.style.transform = 'translateY(0)';
        observer.unobserve(entry.target);
      }
    });
  }, { threshold: 0.1, rootMargin: '0px 0px -50px 0px' });

  document.querySelectorAll('body > section').forEach(section => {
    section.style.opacity = '0';
    section.style.transform = 'translateY(20px)';
    section.style.transition = 'opacity 0.6s ease-out, transform 0.6s ease-out';
    observer.observe(section);
  });
});"""

DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ title }}</title>
  <meta name="description" content="{{ description }}">
  <script src="{{ tailwind_cdn }}"></script>
  <script>
    tailwind.config = {
      theme: {
        extend: {
          colors: {
            primary: '{{ colors.primary }}',
            secondary: '{{ colors.secondary }}',
            accent: '{{ colors.accent }}'
          },
          animation: {
            'fade-in': 'fade-in 0.6s ease-out',
            'slide-up': 'slide-up 0.6s ease-out',
          },
          keyframes: {
            'fade-in': {
              '0%': { opacity: '0', transform: 'translateY(10px)' },
              '100%': { opacity: '1', transform: 'translateY(0)' }
            },
            'slide-up': {
              '0%': { opacity: '0', transform: 'translateY(20px)' },
              '100%': { opacity: '1', transform: 'translateY(0)' }
            }
          }
        }
      }
    }
  </script>
  <style>
    :root {
      --primary: {{ colors.primary }};
      --secondary: {{ colors.secondary }};
      --accent: {{ colors.accent }};
    }
    .bg-grid-slate-100 {
      background-image: url("{{ grid_slate }}");
    }
    .bg-grid-white-05 {
      background-image: url("{{ grid_white }}");
    }
    body {
      font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    }
    .smooth-scroll {
      scroll-behavior: smooth;
    }
  </style>
  <link href="{{ font_stylesheet }}" rel="stylesheet">
</head>
<body class="smooth-scroll antialiased">
  {{ content }}
  <script>
{{ scroll_js }}
  </script>
</body>
</html>
"""

COMPONENT_TEMPLATE = """\
import React from 'react'

interface {{ name }}Props {
  className?: string
}

const {{ name }}: React.FC<{{ name }}Props> = ({ className = '' }) => {
  return (
    <div className={`${className}`}>
      {%- for block in blocks %}
      {/* {{ block.label }} Section */}
      <div dangerouslySetInnerHTML={{ '{{' }} __html: `{{ block.markup }}` {{ '}}' }} />
      {%- endfor %}
    </div>
  )
}

export default {{ name }}
"""


def _env() -> Environment:
    return Environment(
        loader=DictLoader(
            {"document.html": DOCUMENT_TEMPLATE, "component.tsx": COMPONENT_TEMPLATE}
        ),
        autoescape=select_autoescape(["html"]),
    )


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


def document_slug(title: str) -> str:
    """Hyphenate every non-alphanumeric character: "My Page!" -> "my-page-"."""
    slug = re.sub(r"[^a-zA-Z0-9]", "-", title).lower()
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug if slug.strip("-") else "landing-page"


def _component_stem(title: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "", title) or "LandingPage"


def component_name(title: str) -> str:
    """Return ``title`` reduced to a valid component identifier."""
    name = _component_stem(title)
    # Identifiers cannot start with a digit; filenames keep the bare title.
    if name[0].isdigit():
        return f"Page{name}"
    return name


def export_filename(page: Page, fmt: str) -> str:
    if fmt == HTML:
        return f"{document_slug(page.title)}{FILE_EXTENSIONS[HTML]}"
    if fmt == REACT:
        return f"{_component_stem(page.title)}{FILE_EXTENSIONS[REACT]}"
    raise ExportFailure(f"Unknown export format: {fmt!r}")


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


def escape_template_literal(markup: str) -> str:
    """Escape markup for embedding inside a JavaScript template literal."""
    return markup.replace("\\", "\\\\").replace("`", "\\`").replace("$", "\\$")


def escape_jsx_comment(text: str) -> str:
    return text.replace("*/", "* /")


# ---------------------------------------------------------------------------
# Exporters
# ---------------------------------------------------------------------------


def _joined_markup(sections: List[Section], separator: str) -> str:
    return separator.join(section.markup for section in sections)


def export_html(page: Page) -> str:
    """Build a standalone HTML document from the enabled sections."""
    template = _env().get_template("document.html")
    return template.render(
        title=page.title,
        description=page.description,
        colors=page.color_scheme.normalized(),
        tailwind_cdn=TAILWIND_CDN,
        font_stylesheet=FONT_STYLESHEET,
        grid_slate=Markup(GRID_SLATE_SVG),
        grid_white=Markup(GRID_WHITE_SVG),
        content=Markup(_joined_markup(page.enabled_sections(), "\n  ")),
        scroll_js=Markup(SCROLL_REVEAL_JS),
    )


def export_react(page: Page) -> str:
    """Build a React component source that embeds the enabled sections."""
    blocks = [
        {
            "label": escape_jsx_comment(section.name),
            "markup": escape_template_literal(section.markup),
        }
        for section in page.enabled_sections()
    ]
    template = _env().get_template("component.tsx")
    return template.render(name=component_name(page.title), blocks=blocks)


def export_page(page: Page, fmt: str) -> str:
    if fmt == HTML:
        return export_html(page)
    if fmt == REACT:
        return export_react(page)
    raise ExportFailure(f"Unknown export format: {fmt!r}")


def write_export(page: Page, fmt: str, output_dir: str | Path) -> Path:
    """Write the ``fmt`` export of ``page`` into ``output_dir`` and return its path."""
    content = export_page(page, fmt)
    output_dir = Path(output_dir)
    target = output_dir / export_filename(page, fmt)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportFailure(f"Could not write {target}: {exc}") from exc
    logger.info("Exported %s to %s", fmt, target)
    return target


def render_preview(page: Page) -> str:
    """Concatenate enabled sections, each carrying the page colors as CSS variables."""
    style = page.color_scheme.css_variables()
    return "\n".join(
        f'<div class="w-full animate-fade-in" data-section-id="{Markup.escape(section.id)}" '
        f'style="{style}">{section.markup}</div>'
        for section in page.enabled_sections()
    )
