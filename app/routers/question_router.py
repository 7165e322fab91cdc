"""Question router: /api/v1 endpoints for the Question Generator."""

from __future__ import annotations

import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.agents.question_generator import QuestionGenerator
from app.exceptions import QuestionGenerationError
from app.models.request_models import GenerationRequest
from app.models.response_models import (
    ErrorResponse,
    GenerationResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["question-generator"])


# ── Endpoints ─────────────────────────────────────────────────────────────────


@router.post(
    "/generate-questions",
    response_model=GenerationResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_questions(req: GenerationRequest):
    """Generate interview or quiz questions for a job description."""
    try:
        generator = QuestionGenerator()
        questions = await generator.generate(
            job_description=req.job_description,
            question_type=req.question_type,
        )
    except QuestionGenerationError as exc:
        logger.error("Error in generate-questions: %s", exc.message)
        return error_response(exc.message, exc.details)
    except Exception as exc:
        logger.exception("Error in generate-questions")
        return error_response(str(exc) or "Unknown error")

    return GenerationResponse(questions=questions)


@router.options("/generate-questions", include_in_schema=False)
async def generate_questions_options() -> Response:
    """Answer non-browser OPTIONS requests with an empty body and the CORS headers."""
    return Response(status_code=200, headers=cors_headers())


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple liveness probe."""
    return HealthResponse()


# ── Helpers ───────────────────────────────────────────────────────────────────


def cors_headers() -> dict[str, str]:
    """Cross-origin headers sent on OPTIONS responses that bypass the middleware."""
    settings = get_settings()
    return {
        "Access-Control-Allow-Origin": ", ".join(settings.cors_allow_origins),
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
    }


def error_response(message: str, details: Optional[str] = None) -> JSONResponse:
    """Build the uniform 500 error envelope.

    When ``details`` is not given and error details are exposed, the current
    traceback is attached instead.
    """
    settings = get_settings()
    if details is None and settings.expose_error_details:
        trace = traceback.format_exc()
        if trace and not trace.startswith("NoneType: None"):
            details = trace

    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))
