"""
Recap statistics — fold classified rows into dining totals and breakdowns.

Every statistic except ``meta.cat_counts`` is computed over dining rows only.
Rows without a parseable timestamp still count toward totals, visits and
spend but are left out of the hour/weekday/month buckets.
"""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from dining_wrap.config import CAT_COUNT_KEYS, NO_FAVORITE, TOP_N, WEEKDAY_LABELS
from dining_wrap.data.normalize import normalize_rows
from dining_wrap.data.schemas import Category
from dining_wrap.analytics.common import top_n
from dining_wrap.logging_setup import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _category_counts(df: pd.DataFrame) -> dict:
    """Counts over the full input, with expense split into dining / non-dining."""
    counts = {k: 0 for k in CAT_COUNT_KEYS}
    if df.empty:
        return counts
    labels = df["category"].replace({Category.EXPENSE.value: "expense_non_dining"})
    labels = labels.mask(df["is_dining"], "dining")
    for label, n in labels.value_counts().items():
        counts[label] = int(n)
    return counts


def _bucket_counts(values: pd.Series, size: int) -> pd.Series:
    return values.value_counts().reindex(range(size), fill_value=0).astype(int)


def _monthly_spend(timed: pd.DataFrame) -> list[dict]:
    if timed.empty:
        return []
    keys = timed["timestamp"].dt.strftime("%Y-%m")
    by_month = timed.groupby(keys)["spend"].sum().sort_index()
    return [{"month": str(m), "spend": float(s)} for m, s in by_month.items()]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def compute_stats(
    rows: Iterable,
    allowlist: Iterable[str] | None = None,
    top: int = TOP_N,
) -> dict:
    """Build the recap stats for one set of transaction rows.

    ``allowlist`` adds service keywords that count as dining alongside the
    floor-stall codes; None uses ``DINING_WRAP_ALLOWLIST``.
    """
    rows = list(rows)
    df = normalize_rows(rows, allowlist)
    cat_counts = _category_counts(df)

    dining = df[df["is_dining"]]
    txns = len(dining)
    total_spend = float(dining["spend"].sum())

    by_service = dining.groupby("service_key", sort=False)
    top_spend = top_n(by_service["spend"].sum(), top)
    top_visits = top_n(by_service.size(), top)

    favorite = top_visits[0]["key"] if top_visits else NO_FAVORITE
    favorite_count = int(top_visits[0]["value"]) if top_visits else 0

    timed = dining.dropna(subset=["timestamp"])
    hour_counts = _bucket_counts(timed["timestamp"].dt.hour, 24)
    # pandas counts Monday as 0; buckets start on Sunday
    weekday_counts = _bucket_counts((timed["timestamp"].dt.dayofweek + 1) % 7, 7)

    hours = [{"hour": int(h), "count": int(c)} for h, c in hour_counts.items()]
    weekdays = [{"day": WEEKDAY_LABELS[d], "count": int(c)} for d, c in weekday_counts.items()]

    # idxmax returns the first maximum, so ties go to the earliest bucket
    peak_hour = hours[int(hour_counts.idxmax())]
    peak_weekday = weekdays[int(weekday_counts.idxmax())]

    logger.debug(
        "Computed stats: %d rows, %d dining, %d with timestamps",
        len(rows), txns, len(timed),
    )

    return {
        "txns": txns,
        "total_spend": total_spend,
        "top_spend": top_spend,
        "top_visits": top_visits,
        "favorite": favorite,
        "favorite_count": favorite_count,
        "peak_hour": dict(peak_hour),
        "peak_weekday": dict(peak_weekday),
        "hours": hours,
        "weekdays": weekdays,
        "months": _monthly_spend(timed),
        "valid_time": len(timed),
        "meta": {
            "total_rows": len(rows),
            "dining_rows": txns,
            "cat_counts": cat_counts,
        },
    }
