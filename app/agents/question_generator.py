"""Question Generator: turns a job description into interview or quiz questions.

Pipeline (one linear pass, no retained state):
1. Validate the job description
2. Build the system + user prompt for the requested question type
3. Call the chat-completion endpoint once (timeout / retries from settings)
4. Strip Markdown code fences and parse the text as a JSON array
5. Check every item against the interview or quiz question shape
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

import pydantic
from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage, SystemMessage
from openai import APIStatusError, APITimeoutError, OpenAIError

from app.config import get_settings
from app.exceptions import ParseError, UpstreamError, ValidationError
from app.models.request_models import QuestionType
from app.models.response_models import InterviewQuestion, QuizQuestion
from app.prompts.question_prompt import build_question_prompts

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n?")
_PLAIN_FENCE = re.compile(r"```\n?")


class QuestionGenerator:
    """Stateless proxy that produces a single question list per call."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        question_count: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.ai_api_key
        self._model = model or settings.ai_model
        self._question_count = question_count or settings.question_count
        self._llm: Optional[ChatOpenAI] = None

        if self._api_key:
            self._llm = ChatOpenAI(
                model=self._model,
                api_key=self._api_key,
                base_url=base_url or settings.ai_base_url,
                temperature=temperature if temperature is not None else settings.ai_temperature,
                timeout=timeout if timeout is not None else settings.ai_timeout_seconds,
                max_retries=max_retries if max_retries is not None else settings.ai_max_retries,
            )

    # ── Public API ────────────────────────────────────────────────────────

    async def generate(
        self, job_description: Optional[str], question_type: Optional[str]
    ) -> list[Any]:
        """Generate questions for a job description.

        Raises
        ------
        ValidationError  when the job description is missing or blank
        UpstreamError    when the chat-completion call fails
        ParseError       when the output is not a JSON array of valid questions
        """
        if not job_description or not job_description.strip():
            raise ValidationError("Job description is required")

        qtype = QuestionType.resolve(question_type)
        if question_type and question_type not in {t.value for t in QuestionType}:
            logger.warning("Unrecognised question type %r, generating quiz questions", question_type)

        logger.info("Generating questions for: type=%s", qtype.value)

        system_prompt, user_prompt = build_question_prompts(
            job_description, qtype, count=self._question_count
        )
        content = await self._complete(system_prompt, user_prompt)

        logger.info("Raw AI response: %s", content[:200])

        items = self._parse_output(content)
        questions = self._validate_questions(items, qtype)

        logger.info("Successfully generated %d questions", len(questions))
        return questions

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        """Issue the chat-completion call and return the message text."""
        if self._llm is None:
            logger.error("AI API key is not configured")
            raise UpstreamError("AI API key is not configured")

        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt),
        ]

        try:
            raw = await self._llm.ainvoke(messages)
        except APIStatusError as exc:
            logger.error("AI API error: %s %s", exc.status_code, exc.response.text[:500])
            raise UpstreamError(
                f"AI API error: {exc.status_code}", status_code=exc.status_code
            ) from exc
        except APITimeoutError as exc:
            logger.error("AI API request timed out: %s", exc)
            raise UpstreamError("AI API error: timeout") from exc
        except OpenAIError as exc:
            logger.error("AI API request failed: %s", exc)
            raise UpstreamError("AI API error: connection failed") from exc

        if not isinstance(raw.content, str):
            logger.error("AI response content is not text: %r", raw.content)
            raise ParseError("Failed to parse AI response as JSON")
        return raw.content

    @staticmethod
    def _clean_output(content: str) -> str:
        """Remove Markdown code fences (```json / ```) around the payload."""
        return _PLAIN_FENCE.sub("", _JSON_FENCE.sub("", content)).strip()

    @classmethod
    def _parse_output(cls, content: str) -> list[Any]:
        """Parse the cleaned model output as a JSON array."""
        try:
            data = json.loads(cls._clean_output(content))
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse AI response: %s", exc)
            raise ParseError("Failed to parse AI response as JSON") from exc

        if not isinstance(data, list):
            raise ParseError("AI response is not an array")
        return data

    @staticmethod
    def _validate_questions(items: list[Any], question_type: QuestionType) -> list[Any]:
        """Check each item against the question shape and normalise it."""
        questions: list[Any] = []
        for index, item in enumerate(items):
            try:
                if question_type is QuestionType.INTERVIEW:
                    if isinstance(item, str):
                        item = {"question": item}
                    question = InterviewQuestion.model_validate(item)
                    questions.append(question.question)
                else:
                    question = QuizQuestion.model_validate(item)
                    questions.append(question.model_dump(by_alias=True))
            except pydantic.ValidationError as exc:
                first = exc.errors()[0]
                reason = f"Item {index}: {first['msg']}"
                logger.error("Malformed %s question: %s", question_type.value, reason)
                raise ParseError(
                    "AI response contains malformed questions", details=reason
                ) from exc
        return questions
