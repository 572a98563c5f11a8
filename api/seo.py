"""
API Endpoints for Regional SEO

Handles:
1. Local search pattern lookup for a region and keyword
"""

import logging
import time

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.analysis import LocalSearchAnalyzer
from src.auth import require_api_key
from src.utils.responses import success_envelope

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/seo",
    tags=["SEO"],
    dependencies=[Depends(require_api_key)],
)

local_search_analyzer = LocalSearchAnalyzer()


class LocalSearchRequest(BaseModel):
    """Region and keyword to profile."""
    region: str = Field(default="", max_length=200, description="Region or market name, e.g. 'Dubai', 'UK'")
    keyword: str = Field(default="", max_length=500)


@router.post("/local-search")
async def analyze_local_search(request: LocalSearchRequest):
    """Return regional search behaviour and localisation recommendations."""
    started = time.perf_counter()

    result = local_search_analyzer.analyze(request.region, request.keyword)

    return success_envelope(result.to_dict(), started)
