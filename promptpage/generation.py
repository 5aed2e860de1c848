"""Client for the external content generator."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from .config import Settings
from .core.editor import compile_page
from .core.models import Page
from .core.schema import GENERIC, missing_fields
from .errors import GenerationFailure

logger = logging.getLogger(__name__)

MAX_PROMPT_LENGTH = 500

PAGE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "colorScheme": {
            "type": "object",
            "properties": {
                "primary": {"type": "string"},
                "secondary": {"type": "string"},
                "accent": {"type": "string"},
            },
            "required": ["primary", "secondary", "accent"],
        },
        "sections": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "name": {"type": "string"},
                    "enabled": {"type": "boolean"},
                    "content": {"type": "object"},
                },
                "required": ["id", "name", "enabled", "content"],
            },
        },
    },
    "required": ["title", "description", "colorScheme", "sections"],
}

PROMPT_TEMPLATE = """\
Create a comprehensive, professional landing page structure for: "{prompt}".

Generate detailed, realistic content for each section with specific, engaging copy \
that would convert visitors into customers.

REQUIRED SECTIONS:
1. Hero - headline, subheadline, description, primaryCTA, secondaryCTA, badge, socialProofNumber
2. Features - title, subtitle, and 6 features with title and description
3. Testimonials - title, subtitle, and 6 testimonials with text, author and role
4. FAQ - title, subtitle, and 8 faqs with question and answer
5. CTA - headline, description, primaryCTA, secondaryCTA

Name each section after its type (for example "Hero Section").
Make the content specific to the business in the prompt, professional, \
conversion-focused, realistic and emotionally engaging.
Choose an elegant color scheme with hex colors that fits the business type.

Respond with a single JSON object matching this schema:
{schema}"""


def build_prompt(prompt: str) -> str:
    return PROMPT_TEMPLATE.format(prompt=prompt, schema=json.dumps(PAGE_SCHEMA, indent=2))


def clean_prompt(prompt: str) -> str:
    text = (prompt or "").strip()
    if not text:
        raise GenerationFailure("Describe your landing page before generating.")
    if len(text) > MAX_PROMPT_LENGTH:
        raise GenerationFailure(
            f"Prompt is too long ({len(text)} characters, limit {MAX_PROMPT_LENGTH})."
        )
    return text


def validate_structure(data: object) -> Dict[str, Any]:
    """Check the generator payload against the page contract."""
    if not isinstance(data, dict):
        raise GenerationFailure("Generator returned something other than a JSON object.")
    missing = [key for key in PAGE_SCHEMA["required"] if key not in data]
    if missing:
        raise GenerationFailure(f"Generator response is missing: {', '.join(missing)}")
    if not isinstance(data["sections"], list):
        raise GenerationFailure("Generator response 'sections' is not a list.")
    if not isinstance(data["colorScheme"], dict):
        raise GenerationFailure("Generator response 'colorScheme' is not an object.")
    for index, section in enumerate(data["sections"]):
        if not isinstance(section, dict):
            raise GenerationFailure(f"Section {index} is not an object.")
        absent = [key for key in ("name", "content") if key not in section]
        if absent:
            raise GenerationFailure(f"Section {index} is missing: {', '.join(absent)}")
        if not isinstance(section["content"], dict):
            raise GenerationFailure(f"Section {index} content is not an object.")
    return data


def page_from_response(data: object, *, trusted: bool = False) -> Page:
    """Compile a generator payload into a page whose markup is fully rendered."""
    page = Page.from_dict(validate_structure(data))
    for section in page.sections:
        if section.kind == GENERIC and not str(section.content.get("title") or "").strip():
            # Untitled custom blocks are labeled with their section name.
            section.content["title"] = section.name
        gaps = missing_fields(section.kind, section.content)
        if gaps:
            logger.info("Section %s lacks %s; placeholders will be used", section.id, gaps)
    return compile_page(page, trusted=trusted)


class PageGenerator:
    """Turns a free-text prompt into a compiled page via a chat completions API."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self._http = session or requests.Session()

    def request_structure(self, prompt: str) -> Dict[str, Any]:
        if not self.settings.api_key:
            raise GenerationFailure("Set OPENAI_API_KEY in your environment.")
        url = f"{self.settings.api_base.rstrip('/')}/chat/completions"
        try:
            response = self._http.post(
                url,
                headers={"Authorization": f"Bearer {self.settings.api_key}"},
                json={
                    "model": self.settings.model,
                    "messages": [
                        {"role": "system", "content": "You design landing pages and answer in JSON."},
                        {"role": "user", "content": build_prompt(prompt)},
                    ],
                    "temperature": self.settings.temperature,
                    "response_format": {"type": "json_object"},
                },
                timeout=self.settings.timeout,
            )
        except requests.Timeout as exc:
            raise GenerationFailure("The generator timed out. Please try again.") from exc
        except requests.RequestException as exc:
            raise GenerationFailure(f"Could not reach the generator: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise GenerationFailure(f"Generator returned HTTP {response.status_code}") from exc
        if not isinstance(payload, dict):
            raise GenerationFailure(f"Generator returned HTTP {response.status_code}")
        if response.status_code >= 400 or "error" in payload:
            error = payload.get("error")
            message = error.get("message", "Request failed") if isinstance(error, dict) else "Request failed"
            raise GenerationFailure(str(message))

        choices = payload.get("choices") or []
        try:
            text = choices[0]["message"]["content"] or ""
        except (IndexError, KeyError, TypeError):
            text = ""
        if not text:
            raise GenerationFailure("Generator returned an empty response.")
        if not isinstance(text, str):
            raise GenerationFailure("Generator response was not valid JSON.")
        try:
            return json.loads(text)
        except ValueError as exc:
            raise GenerationFailure("Generator response was not valid JSON.") from exc

    def generate(self, prompt: str) -> Page:
        text = clean_prompt(prompt)
        logger.info("Generating landing page (%d characters of prompt)", len(text))
        data = self.request_structure(text)
        page = page_from_response(data, trusted=self.settings.trusted_markup)
        logger.info("Generated %r with %d sections", page.title, len(page.sections))
        return page
