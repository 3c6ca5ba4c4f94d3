"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter

import dining_wrap
from dining_wrap.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=dining_wrap.__version__)
