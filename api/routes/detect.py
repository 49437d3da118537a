"""
Detector de Idiomas — Detect Routes
POST /detect/text | /detect/file
Both routes use the LanguageDetector the app built at startup (app.state).
"""
import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, UploadFile, File, status

from api.schemas import TextDetectRequest, DetectionResponse
from config import get_settings
from nlp.language_detector import LanguageDetector

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/detect", tags=["Detection"])


def app_detector(request: Request) -> LanguageDetector:
    return request.app.state.language_detector


def _check_length(text: str) -> None:
    limit = get_settings().max_text_length
    if len(text) > limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Text is too long ({len(text)} chars). Maximum is {limit}.",
        )


# ── Text ──────────────────────────────────────────────────────────────────────

@router.post(
    "/text",
    response_model=DetectionResponse,
    summary="Classify raw text",
    description="Accepts plain text and classifies it as Spanish, English, mixed or undetermined.",
)
async def detect_text(
    body: TextDetectRequest,
    detector: LanguageDetector = Depends(app_detector),
) -> DetectionResponse:
    start = time.perf_counter()
    logger.info("detect/text called | chars=%d", len(body.text))
    _check_length(body.text)
    result = detector.detect(body.text)
    response = DetectionResponse.from_result(result, input_type="text")
    response.processing_time_ms = round((time.perf_counter() - start) * 1000, 1)
    return response


# ── File ──────────────────────────────────────────────────────────────────────

@router.post(
    "/file",
    response_model=DetectionResponse,
    summary="Classify an uploaded text file",
    description="Accepts a UTF-8 text file upload and classifies its full content.",
)
async def detect_file(
    file: UploadFile = File(...),
    detector: LanguageDetector = Depends(app_detector),
) -> DetectionResponse:
    start = time.perf_counter()
    logger.info("detect/file called | filename=%s | size=%s", file.filename, file.size)
    raw = await file.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("detect/file rejected %s: not valid UTF-8", file.filename)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Uploaded file is not valid UTF-8 text.",
        ) from exc
    _check_length(text)
    result = detector.detect(text)
    response = DetectionResponse.from_result(result, input_type="file")
    response.processing_time_ms = round((time.perf_counter() - start) * 1000, 1)
    return response
