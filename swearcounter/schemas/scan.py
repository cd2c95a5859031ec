"""
API Schemas — Request and Response Models

Pydantic models for the SwearCounter API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from swearcounter.config import settings


# ============================================================
# SCAN
# ============================================================

class ScanRequest(BaseModel):
    """POST /scan request body."""
    text: str = Field(..., min_length=1, max_length=settings.MAX_TEXT_LENGTH or None,
                      description="The message text to scan (1 to MAX_TEXT_LENGTH characters).")
    role: str = Field("user", pattern="^(user|assistant|both)$",
                      description="Which analyzers to run: user (swearing), assistant "
                                  "(apologies/sycophancy), or both.")
    fuzzy_threshold: Optional[float] = Field(
        None, description="Minimum edit-distance similarity (default from settings).")
    semantic_threshold: Optional[float] = Field(
        None, description="Indirect-swearing cut-off, strict > (default from settings).")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "This is bullsh*t, why doesn't this work?!?", "role": "user"},
    ]}}


class ScanBatchRequest(BaseModel):
    """POST /scan/batch request body."""
    items: list[ScanRequest] = Field(..., min_length=1, max_length=100)


class FuzzyMatchResponse(BaseModel):
    word: str
    score: float
    label: str


class SemanticMatchResponse(BaseModel):
    phrase: str
    category: str
    score: float


class UserScanResponse(BaseModel):
    swears: dict[str, int]
    total_swears: int
    fuzzy_matches: list[FuzzyMatchResponse]
    indirect_matches: list[SemanticMatchResponse]
    has_indirect_swearing: bool
    frustration_intensity: float


class AssistantScanResponse(BaseModel):
    apologies: dict[str, int]
    total_apologies: int
    sycophancy: dict[str, int]
    total_sycophancy: int


class ScanResponse(BaseModel):
    """POST /scan response body."""
    text: str
    role: str
    user: Optional[UserScanResponse] = None
    assistant: Optional[AssistantScanResponse] = None
    engine_version: str


class ScanBatchResponse(BaseModel):
    """POST /scan/batch response body."""
    results: list[ScanResponse]
    total: int


# ============================================================
# PATTERNS
# ============================================================

class PatternResponse(BaseModel):
    catalog: str
    label: str
    pattern: str


class PatternsResponse(BaseModel):
    catalog: str
    total: int
    patterns: list[PatternResponse]


class VocabularyResponse(BaseModel):
    vocabulary: list[str]
    obfuscation_bases: list[str]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
    swear_patterns: int
    apology_patterns: int
    sycophancy_patterns: int
    vocabulary_size: int
