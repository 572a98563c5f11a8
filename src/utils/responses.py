"""
JSON response envelopes shared by all API routes.

Success: {"success": true, "data": ..., "metadata": ...}
Error:   {"success": false, "error": ..., "details": ...}
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def success_envelope(data: Any, started: float, content_length: Optional[int] = None) -> Dict[str, Any]:
    """Wrap route output with processing metadata. `started` is a perf_counter() value."""
    metadata: Dict[str, Any] = {
        "processed_at": datetime.now(timezone.utc).isoformat(),
        "processing_time_ms": round((time.perf_counter() - started) * 1000, 3),
    }
    if content_length is not None:
        metadata["content_length"] = content_length

    return {"success": True, "data": data, "metadata": metadata}


def error_envelope(error: str, details: Any = None) -> Dict[str, Any]:
    return {"success": False, "error": error, "details": details}
