"""
Safe math and formatting helpers shared by the stats and recap modules.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np
import pandas as pd

from dining_wrap.config import MISSING_MONEY


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_change(current: float, previous: float) -> float | None:
    """Percentage change from previous to current.

    A zero baseline gives +inf for a positive current value and None otherwise.
    """
    if pd.isna(previous) or pd.isna(current):
        return None
    if previous == 0:
        return math.inf if current > 0 else None
    return (current - previous) / previous * 100


def fmt_money(value) -> str:
    """Format with thousands separators and at most two decimals, e.g. ``1,234.5``.

    Rounds half away from zero on the exact binary value. None and blank
    strings read as 0; other non-numeric and non-finite input gives a dash.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        value = 0
    try:
        v = float(value)
    except (TypeError, ValueError):
        return MISSING_MONEY
    if not math.isfinite(v):
        return MISSING_MONEY
    with localcontext() as ctx:
        ctx.prec = 400
        q = Decimal(v).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        text = f"{q:,.2f}"
    return text.rstrip("0").rstrip(".")


def top_n(series: pd.Series, n: int) -> list[dict]:
    """Largest n values as ``{"key", "value"}`` dicts; ties keep the series order."""
    if series.empty:
        return []
    ranked = series.sort_values(ascending=False, kind="stable").head(n)
    return [{"key": str(k), "value": v.item() if hasattr(v, "item") else v} for k, v in ranked.items()]


def window_total(counts: pd.Series, window: tuple[float, float]) -> int:
    """Sum of bucket counts whose index lies inside the inclusive window."""
    lo, hi = window
    return int(counts[(counts.index >= lo) & (counts.index <= hi)].sum())


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
