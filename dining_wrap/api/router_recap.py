"""
Recap endpoints — stats, full recap with fact lists, per-row classification.

Rows arrive already parsed in the request body; nothing is stored between calls.
"""
from __future__ import annotations

from fastapi import APIRouter

from dining_wrap.analytics.common import sanitize_for_json
from dining_wrap.analytics.recap import build_recap
from dining_wrap.analytics.stats import compute_stats
from dining_wrap.api.response_models import (
    ClassifyResponse,
    RecapResponse,
    RowsRequest,
    StatsResponse,
)
from dining_wrap.data.normalize import classify_row, infer_is_dining, spend_value
from dining_wrap.logging_setup import get_logger

router = APIRouter(prefix="/api", tags=["recap"])
logger = get_logger(__name__)


@router.post("/stats", response_model=StatsResponse)
def stats(body: RowsRequest):
    """Dining stats for the posted rows."""
    return sanitize_for_json(compute_stats(body.raw_rows(), body.allowlist))


@router.post("/recap", response_model=RecapResponse)
def recap(body: RowsRequest):
    """Stats plus personality, achievements, comparisons, predictions, quotes, memories."""
    logger.info("Building recap for %d rows", len(body.rows))
    return sanitize_for_json(build_recap(body.raw_rows(), body.allowlist))


@router.post("/classify", response_model=ClassifyResponse)
def classify(body: RowsRequest):
    """Category, dining flag and spend for each posted row, in order."""
    rows = body.raw_rows()
    return {
        "rows": [
            {
                "category": classify_row(r).value,
                "is_dining": infer_is_dining(r, body.allowlist),
                "spend": spend_value(r),
            }
            for r in rows
        ]
    }
