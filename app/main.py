"""FastAPI application entry point for the Job-Description Question Generator."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings, setup_logging
from app.models.response_models import ErrorResponse
from app.routers.question_router import router as question_router

# Initialise logging early
setup_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    application = FastAPI(
        title="Job-Description Question Generator",
        description=(
            "Generates interview questions or multiple-choice quiz questions "
            "from a job description using a chat-completion LLM."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Wildcard origin needs credentials off to be sent as "*"
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=settings.cors_allow_headers,
    )

    @application.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.error("Invalid request body on %s: %s", request.url.path, exc.errors())
        body = ErrorResponse(error="Invalid request body")
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    application.include_router(question_router)

    @application.on_event("startup")
    async def _startup() -> None:
        logger.info(
            "Question Generator starting: model=%s temperature=%.2f count=%d retries=%d",
            settings.ai_model,
            settings.ai_temperature,
            settings.question_count,
            settings.ai_max_retries,
        )
        if not settings.ai_api_key:
            logger.warning("AI_API_KEY is not set; generation requests will fail")

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
