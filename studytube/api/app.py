"""
FastAPI application for StudyTube.
"""

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from studytube.api.routes import router
from studytube.config import Config, get_config
from studytube.db.database import init_db
from studytube.utils.logger import logging


class CORSPreflightMiddleware(CORSMiddleware):
    """CORSMiddleware that answers accepted preflight requests with an empty body."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response

        headers = {
            key: value for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application configuration (read from the environment if None)
    """
    config = config or get_config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        description="An API that turns YouTube videos into summaries, flashcards and quizzes",
    )
    app.state.config = config

    # CORS middleware; also answers OPTIONS preflight requests
    app.add_middleware(
        CORSPreflightMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize the database on application startup."""
        config.initialize()
        init_db(config.database_url)
        if not config.llm.enabled:
            logging.warning("No LLM API key configured; content will be generated from templates")
        logging.info(f"{config.app_name} v{config.app_version} started ({config.environment})")

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report invalid request bodies in the same shape as other failures."""
        return JSONResponse(
            status_code=422,
            content={"success": False, "error": "Invalid request", "detail": jsonable_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"An unexpected error occurred: {str(exc)}"},
        )

    # Include API router
    app.include_router(router)

    # Root
    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.app_name,
            "version": config.app_version,
            "description": "YouTube study content API",
        }

    return app


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


app = create_app()
