"""
Chat proxy server entry point.

Run with `python -m ecostay.main` or `uvicorn ecostay.main:app`.
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ecostay import __version__
from ecostay.api.router import router as api_router
from ecostay.config import settings, setup_logging
from ecostay.core.exceptions import BaseAppException
from ecostay.core.logging import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the chat proxy.

    - Configures title, version, debug mode from Settings.
    - Registers CORS and the application exception handler.
    - Includes the API router under /api.
    """
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=__version__,
    )

    # The browser client is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_credentials=settings.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BaseAppException)
    async def handle_app_exception(request: Request, exc: BaseAppException) -> JSONResponse:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            extra={"error_code": exc.error_code.value},
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Chat proxy listening on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
