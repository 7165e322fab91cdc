"""Request models for the Question Generator API."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    """Job description plus the kind of questions to generate.

    Both fields are optional on the wire: an empty or missing job description
    is reported through the error envelope rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    job_description: Optional[str] = Field(
        default="",
        alias="jobDescription",
        description="Free-text job description used as grounding context",
        examples=["Backend engineer, Go, distributed systems"],
    )
    question_type: Optional[str] = Field(
        default="quiz",
        alias="questionType",
        description='Question type: "interview" or "quiz"',
        examples=["interview"],
    )


class QuestionType(str, Enum):
    """Supported question types."""

    INTERVIEW = "interview"
    QUIZ = "quiz"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "QuestionType":
        """Map a raw selector to a question type; anything but the literal "interview" is a quiz."""
        if value == cls.INTERVIEW.value:
            return cls.INTERVIEW
        return cls.QUIZ
