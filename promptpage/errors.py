"""Exception types raised across the page builder."""

from __future__ import annotations


class PromptPageError(Exception):
    """Base class for every error the application reports to the user."""


class GenerationFailure(PromptPageError):
    """The content generator did not return a usable page structure."""


class ExportFailure(PromptPageError):
    """An export, clipboard or share operation could not complete."""


class StructuralViolation(PromptPageError):
    """A caller referenced a missing section or an out-of-range index."""
