"""Response models for the Question Generator API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InterviewQuestion(BaseModel):
    """Open-ended interview question."""

    question: str = Field(..., min_length=1, description="Question text")


class QuizQuestion(BaseModel):
    """Multiple-choice quiz question with exactly four options."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., min_length=1, description="Question text")
    options: list[str] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="The four answer choices, in display order",
    )
    correct_answer: str = Field(
        ...,
        alias="correctAnswer",
        description="Text of the correct option",
    )

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> "QuizQuestion":
        if self.correct_answer not in self.options:
            raise ValueError("correctAnswer must be one of the options")
        return self


class GenerationResponse(BaseModel):
    """Success body returned by POST /api/v1/generate-questions.

    Interview questions are plain strings; quiz questions are objects with
    ``question``, ``options`` and ``correctAnswer``.
    """

    questions: list[Any] = Field(default_factory=list, description="Generated questions")


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    error: str = Field(..., description="Top-level error message")
    details: Optional[str] = Field(default=None, description="Traceback, when exposed")


class HealthResponse(BaseModel):
    """Health-check response."""

    status: str = "ok"
    version: str = "1.0.0"
