from __future__ import annotations

import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from promptpage.core.models import Page
from promptpage.generation import page_from_response

SAMPLE_RESPONSE: Dict[str, Any] = {
    "title": "Zen Flow Yoga",
    "description": "Online yoga classes for busy people.",
    "colorScheme": {"primary": "#10b981", "secondary": "#059669", "accent": "#06b6d4"},
    "sections": [
        {
            "id": "hero-1",
            "name": "Hero Section",
            "enabled": True,
            "content": {
                "headline": "Find Your Calm",
                "subheadline": "Anywhere, Anytime",
                "description": "Live and on-demand yoga classes for every level.",
                "primaryCTA": "Start Free Week",
                "secondaryCTA": "See Classes",
                "badge": "Now Streaming",
                "socialProofNumber": "5,000+",
            },
        },
        {
            "id": "features-1",
            "name": "Features Section",
            "enabled": True,
            "content": {
                "title": "Why Zen Flow",
                "subtitle": "Practice on your terms",
                "features": [
                    {"title": "Live Classes", "description": "Join teachers in real time."},
                    {"title": "On Demand", "description": "Hundreds of recorded sessions."},
                ],
            },
        },
        {
            "id": "testimonials-1",
            "name": "Testimonials Section",
            "enabled": True,
            "content": {
                "title": "Loved by Students",
                "subtitle": "Real stories",
                "testimonials": [
                    {"text": "My back pain is gone.", "author": "Ana Ruiz", "role": "Designer"},
                ],
            },
        },
        {
            "id": "faq-1",
            "name": "FAQ Section",
            "enabled": True,
            "content": {
                "title": "Questions",
                "subtitle": "We have answers",
                "faqs": [
                    {"question": "Do I need a mat?", "answer": "Any soft surface works."},
                ],
            },
        },
        {
            "id": "cta-1",
            "name": "CTA Section",
            "enabled": True,
            "content": {
                "headline": "Roll Out Your Mat",
                "description": "Your first week is on us.",
                "primaryCTA": "Join Now",
                "secondaryCTA": "Ask a Question",
            },
        },
    ],
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("PROMPTPAGE_") or key == "OPENAI_API_KEY":
            monkeypatch.delenv(key)


@pytest.fixture
def sample_response() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def page(sample_response: Dict[str, Any]) -> Page:
    return page_from_response(sample_response)
