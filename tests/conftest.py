"""Shared pytest fixtures for the Question Generator test suite."""

from __future__ import annotations

import os
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient
from openai import APIStatusError, APITimeoutError

# Ensure test environment variables are set BEFORE importing app modules
os.environ.setdefault("AI_API_KEY", "test-key-not-real")
os.environ.setdefault("AI_BASE_URL", "https://ai.gateway.example.test/v1")
os.environ.setdefault("AI_MODEL", "google/gemini-2.5-flash")
os.environ.setdefault("AI_TEMPERATURE", "0.8")
os.environ.setdefault("AI_MAX_RETRIES", "0")
os.environ.setdefault("QUESTION_COUNT", "200")
os.environ.setdefault("EXPOSE_ERROR_DETAILS", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


GENERATE_URL = "/api/v1/generate-questions"

BACKEND_JD = "Backend engineer, Go, distributed systems"

SAMPLE_QUIZ_QUESTIONS = [
    {
        "question": "Which Go construct is used to communicate between goroutines?",
        "options": ["Channels", "Mutexes", "Interfaces", "Slices"],
        "correctAnswer": "Channels",
    },
    {
        "question": "What does the CAP theorem trade off against consistency and availability?",
        "options": ["Latency", "Partition tolerance", "Durability", "Throughput"],
        "correctAnswer": "Partition tolerance",
    },
]


@pytest.fixture
def client() -> TestClient:
    """FastAPI synchronous test client."""
    from app.main import app

    return TestClient(app)


def _make_llm(content: Any = None, side_effect: Any = None) -> AsyncMock:
    """Helper to build a mock ChatOpenAI instance returning ``content``."""
    llm = AsyncMock()
    if side_effect is not None:
        llm.ainvoke.side_effect = side_effect
    else:
        llm.ainvoke.return_value = MagicMock(content=content)
    return llm


def _make_status_error(status_code: int, text: str = "upstream failure") -> APIStatusError:
    """Helper to build the error the OpenAI client raises on a non-2xx response."""
    request = httpx.Request("POST", "https://ai.gateway.example.test/v1/chat/completions")
    response = httpx.Response(status_code, request=request, text=text)
    return APIStatusError(f"Error code: {status_code}", response=response, body=None)


def _make_timeout_error() -> APITimeoutError:
    """Helper to build the error the OpenAI client raises on a timeout."""
    request = httpx.Request("POST", "https://ai.gateway.example.test/v1/chat/completions")
    return APITimeoutError(request=request)


def _fenced(payload: Any) -> str:
    """Wrap a JSON payload in a ```json Markdown fence, as models often do."""
    return "```json\n" + json.dumps(payload) + "\n```"
