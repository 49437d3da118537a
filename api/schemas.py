"""
Detector de Idiomas — Pydantic Request / Response Schemas
Mirrors LanguageResult for the HTTP surface.
"""
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from scoring.engine import Language
from nlp.language_detector import LanguageResult


# ── Request Models ─────────────────────────────────────────────────────────────

class TextDetectRequest(BaseModel):
    # No min_length: short text is a normal "undetermined" answer, not a 422
    text: str = Field(..., description="Raw text to classify")


# ── Nested Response Models ────────────────────────────────────────────────────

class StopWordDetails(BaseModel):
    spanish_count: int = Field(..., ge=0)
    english_count: int = Field(..., ge=0)


class BigramDetails(BaseModel):
    spanish_score: int = Field(..., ge=0)
    english_score: int = Field(..., ge=0)


class EndingDetails(BaseModel):
    spanish_ending_count: int = Field(..., ge=0)
    english_ending_count: int = Field(..., ge=0)


class FeatureDetails(BaseModel):
    spanish_chars: int = Field(..., ge=0)
    stop_words: StopWordDetails
    bigrams: BigramDetails
    endings: EndingDetails


# ── Main Response ─────────────────────────────────────────────────────────────

class DetectionResponse(BaseModel):
    language: Language
    confidence: int = Field(..., ge=0, le=100)
    spanish: int = Field(..., ge=0, le=100, description="Spanish share of the weighted score, %")
    english: int = Field(..., ge=0, le=100, description="English share of the weighted score, %")
    reason: Optional[str] = Field(None, description="Why the text is undetermined")
    details: Optional[FeatureDetails] = Field(None, description="Raw feature counts (diagnostic)")
    input_type: str = "text"
    processing_time_ms: Optional[float] = None

    @classmethod
    def from_result(cls, result: LanguageResult, input_type: str = "text") -> DetectionResponse:
        return cls(**result.to_dict(), input_type=input_type)
