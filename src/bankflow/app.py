"""
bankflow/app.py

FastAPI application entrypoint for the bankflow banking API.

This module wires together:
- Logging configuration (file-based under logs/)
- CORS and request-logging middleware
- Account and transaction routers under /api/v1
- Structural validation errors as a {field: message} map
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from bankflow import __version__
from bankflow.api.accounts import router as accounts_router
from bankflow.api.responses import request_validation_handler
from bankflow.api.transactions import router as transactions_router
from bankflow.config import Settings, get_settings
from bankflow.logging_config import get_logger, setup_logging
from bankflow.services.store import InMemoryBank

logger = get_logger("bankflow")


def create_app(settings: Optional[Settings] = None, bank: Optional[InMemoryBank] = None) -> FastAPI:
    settings = settings or get_settings()
    bank = bank if bank is not None else InMemoryBank()

    app = FastAPI(title="Bankflow API", version=__version__)
    app.state.settings = settings
    app.state.bank = bank

    # CORS (open for demo)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger to help trace API traffic.
        """
        try:
            body = await request.body()
            logger.info(
                "HTTP %s %s from %s body=%s",
                request.method,
                request.url.path,
                request.client.host if request.client else "?",
                body.decode(errors="ignore")[:200],
            )
        except Exception:
            logger.exception("Failed to read request body for logging")
        return await call_next(request)

    @app.get("/api/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(accounts_router, prefix="/api/v1")
    app.include_router(transactions_router, prefix="/api/v1")

    if settings.seed_demo_data:
        bank.seed_demo()

    logger.info("Bankflow app created (seed_demo_data=%s)", settings.seed_demo_data)
    return app


# Configure logging before the app and its loggers start emitting
setup_logging()

app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
