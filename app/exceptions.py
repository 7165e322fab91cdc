"""Error taxonomy for question generation.

Every failure inside the generation pipeline is raised as one of these and
turned into the ``{error, details?}`` envelope by the router.
"""

from __future__ import annotations

from typing import Optional


class QuestionGenerationError(Exception):
    """Base class for all question-generation failures."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(QuestionGenerationError):
    """The incoming request is missing required input."""


class UpstreamError(QuestionGenerationError):
    """The chat-completion API could not be reached or returned a non-success status."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class ParseError(QuestionGenerationError):
    """The model output is not a JSON array of well-formed questions."""
