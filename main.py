"""
Detector de Idiomas — FastAPI Application Entry Point
Run: uvicorn main:app --port 8000
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from config import get_settings
from api.routes.detect import router as detect_router
from nlp.language_detector import LanguageDetector

logger = logging.getLogger("detector_idiomas")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """One detector per app; routes read it from app.state."""
    app.state.language_detector = LanguageDetector()
    logger.info("✅ Language detector ready (env=%s)", get_settings().app_env)
    yield


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "detail": str(exc)},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    api = FastAPI(title="Detector de Idiomas API", version="0.1.0", lifespan=lifespan)
    api.add_exception_handler(Exception, _unhandled_error)
    api.include_router(detect_router)

    @api.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "env": settings.app_env}

    return api


app = create_app()
