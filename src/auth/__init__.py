"""
Authentication

API key auth for programmatic access to the analysis endpoints.

Usage:
    @router.post("/phrases", dependencies=[Depends(require_api_key)])
    async def detect_phrases(request: ContentRequest):
        ...
"""

from .dependencies import require_api_key

__all__ = ["require_api_key"]
