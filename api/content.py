"""
API Endpoints for Content Analysis

Handles:
1. Prohibited phrase detection and scoring
2. Prohibited phrase elimination
3. Hallucination detection (with optional fact-check results)
4. E-E-A-T optimization
5. Full validation against quality gates (422 on failure)
"""

import logging
import time
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from src.analysis import (
    EeatContext,
    EeatOptimizer,
    FactVerification,
    HallucinationDetectionConfig,
    HallucinationDetector,
    ProhibitedPhraseDetector,
)
from src.auth import require_api_key
from src.quality import ContentQualityEnforcer
from src.utils.config import Settings, get_settings
from src.utils.responses import success_envelope

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/content",
    tags=["Content Analysis"],
    dependencies=[Depends(require_api_key)],
)

# The phrase table is read-only after construction
phrase_detector = ProhibitedPhraseDetector()


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ContentRequest(BaseModel):
    """Base request carrying content to analyze."""
    content: str = Field(..., description="Content to analyze")


class FactInput(BaseModel):
    """Outcome of an external fact check."""
    fact: str = Field(..., min_length=1)
    is_verified: bool
    confidence_score: float = Field(..., ge=0, le=100)


class HallucinationRequest(ContentRequest):
    facts: List[FactInput] = Field(default_factory=list)
    strict_mode: Optional[bool] = None
    confidence_threshold: Optional[float] = Field(default=None, ge=0, le=100)


class EeatRequest(ContentRequest):
    industry: str = Field(..., min_length=1)
    keyword: str = Field(..., min_length=1)
    author_credentials: Optional[str] = None
    company_info: Optional[str] = None
    target_audience: Optional[str] = None
    content_type: Optional[Literal["article", "guide", "review", "news", "opinion"]] = None

    def to_context(self) -> EeatContext:
        return EeatContext(
            industry=self.industry,
            keyword=self.keyword,
            author_credentials=self.author_credentials,
            company_info=self.company_info,
            target_audience=self.target_audience,
            content_type=self.content_type,
        )


class ValidateRequest(HallucinationRequest):
    industry: Optional[str] = None
    keyword: Optional[str] = None
    author_credentials: Optional[str] = None


# =============================================================================
# HELPERS
# =============================================================================

def build_hallucination_detector(request: HallucinationRequest, settings: Settings) -> HallucinationDetector:
    return HallucinationDetector(HallucinationDetectionConfig(
        confidence_threshold=(
            request.confidence_threshold
            if request.confidence_threshold is not None
            else settings.HALLUCINATION_CONFIDENCE_THRESHOLD
        ),
        strict_mode=request.strict_mode if request.strict_mode is not None else settings.HALLUCINATION_STRICT_MODE,
    ))


def check_content_length(content: str, settings: Settings):
    """
    Enforce the configured content length limits.

    Raises:
        RequestValidationError: Reported as a 400 like any other body error
    """
    if len(content.strip()) < settings.MIN_CONTENT_LENGTH:
        message = f"Content must be at least {settings.MIN_CONTENT_LENGTH} characters"
    elif len(content) > settings.MAX_CONTENT_LENGTH:
        message = f"Content must be at most {settings.MAX_CONTENT_LENGTH} characters"
    else:
        return

    raise RequestValidationError([
        {"type": "value_error", "loc": ("body", "content"), "msg": message},
    ])


def to_fact_results(facts: List[FactInput]) -> List[FactVerification]:
    return [FactVerification(f.fact, f.is_verified, f.confidence_score) for f in facts]


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/phrases")
def detect_phrases(request: ContentRequest, settings: Settings = Depends(get_settings)):
    """Detect prohibited phrases and score the content."""
    started = time.perf_counter()
    check_content_length(request.content, settings)

    detected = phrase_detector.detect(request.content)
    score = phrase_detector.calculate_quality_score(request.content)

    return success_envelope(
        {
            "detected": [d.to_dict() for d in detected],
            "quality": score.to_dict(),
        },
        started,
        content_length=len(request.content),
    )


@router.post("/phrases/eliminate")
def eliminate_phrases(request: ContentRequest, settings: Settings = Depends(get_settings)):
    """Replace prohibited phrases and report the before/after scores."""
    started = time.perf_counter()
    check_content_length(request.content, settings)

    cleaned = phrase_detector.eliminate(request.content)
    before = phrase_detector.calculate_quality_score(request.content)
    after = phrase_detector.calculate_quality_score(cleaned)

    logger.info(f"Phrase elimination: score {before.overall_score} -> {after.overall_score}")

    return success_envelope(
        {
            "content": cleaned,
            "score_before": before.overall_score,
            "score_after": after.overall_score,
            "phrases_replaced": before.detected_phrases - after.detected_phrases,
        },
        started,
        content_length=len(request.content),
    )


@router.post("/hallucinations")
def detect_hallucinations(request: HallucinationRequest, settings: Settings = Depends(get_settings)):
    """Flag sentences likely to contain fabricated or unsupported claims."""
    started = time.perf_counter()
    check_content_length(request.content, settings)

    detector = build_hallucination_detector(request, settings)
    result = detector.detect(request.content, to_fact_results(request.facts))

    return success_envelope(result.to_dict(), started, content_length=len(request.content))


@router.post("/eeat")
def optimize_eeat(request: EeatRequest, settings: Settings = Depends(get_settings)):
    """Score E-E-A-T signals and list improvements."""
    started = time.perf_counter()
    check_content_length(request.content, settings)

    result = EeatOptimizer().optimize(request.content, request.to_context())

    return success_envelope(result.to_dict(), started, content_length=len(request.content))


@router.post("/validate")
def validate_content(request: ValidateRequest, settings: Settings = Depends(get_settings)):
    """
    Run every content analyzer and enforce the quality gates.

    Returns 422 with the full gate report if a required gate fails.
    """
    started = time.perf_counter()
    check_content_length(request.content, settings)

    phrases = phrase_detector.calculate_quality_score(request.content)
    hallucination = build_hallucination_detector(request, settings).detect(
        request.content, to_fact_results(request.facts)
    )
    eeat = EeatOptimizer().analyze(request.content, EeatContext(
        industry=request.industry or "",
        keyword=request.keyword or "",
        author_credentials=request.author_credentials,
    ))

    enforcement = ContentQualityEnforcer.from_settings(settings).enforce({
        "phrases": phrases,
        "hallucination": hallucination,
        "eeat": eeat,
    })

    report = {
        "approved": enforcement.passed,
        "quality_gates": enforcement.to_dict(),
        "phrases": phrases.to_dict(),
        "hallucination": hallucination.to_dict(),
        "eeat": eeat.to_dict(),
    }

    if not enforcement.passed:
        logger.warning(f"Content rejected by gates: {enforcement.required_gates_failed}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "Content failed quality gates", "details": report},
        )

    return success_envelope(report, started, content_length=len(request.content))
