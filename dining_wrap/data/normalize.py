"""
Field normalisation, row classification, dining inference.

Rows are read-only: any mapping or object exposing ``type``, ``service``,
``amount`` and ``dateTime`` (``date_time`` is accepted as an alias).

Date parsing goes through ``pandas.to_datetime`` (dateutil underneath) with
its defaults: ambiguous numeric dates are month-first, so ``03/04/2024`` is
March 4. Timezone-aware strings are converted to the host's local zone so
hour/weekday/month buckets always use local wall-clock fields. Dates outside
the nanosecond Timestamp range (1677-2262) count as unparseable, whatever
resolution the installed pandas would otherwise pick.
"""
from __future__ import annotations

import math
import re
import warnings
from collections.abc import Iterable, Mapping

import pandas as pd
from pandas.errors import OutOfBoundsDatetime

from dining_wrap.config import (
    CLASSIFICATION_RULES,
    DINING_ALLOWLIST,
    FALLBACK_CATEGORY,
    FLOOR_STALL_PATTERN,
    UNKNOWN_SERVICE,
)
from dining_wrap.data.schemas import Category, ClassificationRule

_FIELD_ALIASES = {"dateTime": "date_time"}
_AMOUNT_STRIP = re.compile(r"[^0-9.\-+]")
_DATE_DELIMS = re.compile(r"[./]")

# pandas falls back to dateutil per string and says so; expected here
warnings.filterwarnings("ignore", message="Could not infer format", category=UserWarning)
warnings.filterwarnings("ignore", message="Parsing dates in .* format when dayfirst", category=UserWarning)
warnings.filterwarnings("ignore", message="Discarding nonzero nanoseconds", category=UserWarning)

RULES = [
    ClassificationRule(Category(cat), tuple(type_kw), tuple(service_kw))
    for cat, type_kw, service_kw in CLASSIFICATION_RULES
]


# ---------------------------------------------------------------------------
# Field access
# ---------------------------------------------------------------------------

def _field(row, name: str):
    """Read a field from a mapping or an attribute-style row."""
    if isinstance(row, Mapping):
        value = row.get(name)
        if value is None and name in _FIELD_ALIASES:
            value = row.get(_FIELD_ALIASES[name])
        return value
    value = getattr(row, name, None)
    if value is None and name in _FIELD_ALIASES:
        value = getattr(row, _FIELD_ALIASES[name], None)
    return value


def _text(value) -> str:
    if value is None:
        return ""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


# ---------------------------------------------------------------------------
# Field normalisers
# ---------------------------------------------------------------------------

def parse_amount(value) -> float:
    """Keep digits, '.', '-' and '+', then convert. Anything unusable is 0."""
    cleaned = _AMOUNT_STRIP.sub("", _text(value))
    if not cleaned:
        return 0.0
    try:
        amount = float(cleaned)
    except ValueError:
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def _to_timestamp(raw: str) -> pd.Timestamp | None:
    try:
        ts = pd.to_datetime(raw, errors="coerce")
        if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
            return None
        if ts.tzinfo is not None:
            ts = pd.Timestamp(ts.to_pydatetime().astimezone()).tz_localize(None)
        # one unit for every row, so the frame column never mixes resolutions
        return ts.as_unit("ns")
    except (OutOfBoundsDatetime, OverflowError, ValueError):
        return None


def parse_datetime(value) -> pd.Timestamp | None:
    """Parse a freeform date/time, retrying with '.' and '/' replaced by '-'."""
    raw = _text(value).strip()
    if not raw:
        return None
    ts = _to_timestamp(raw)
    if ts is None:
        ts = _to_timestamp(_DATE_DELIMS.sub("-", raw))
    return ts


# ---------------------------------------------------------------------------
# Row classification
# ---------------------------------------------------------------------------

def classify_row(row, rules: Iterable[ClassificationRule] = RULES) -> Category:
    """Return the first matching category from the ordered rule table."""
    type_lower = _text(_field(row, "type")).lower()
    service_lower = _text(_field(row, "service")).lower()
    for rule in rules:
        if rule.matches(type_lower, service_lower):
            return rule.category
    return Category(FALLBACK_CATEGORY)


def _matches_dining_service(service: str, allowlist: Iterable[str]) -> bool:
    if FLOOR_STALL_PATTERN.search(service):
        return True
    service_lower = service.lower()
    return any(k and k.lower() in service_lower for k in allowlist)


def infer_is_dining(row, allowlist: Iterable[str] | None = None) -> bool:
    """True for expense rows at a floor-coded stall (e.g. ``2F-5``) or an allow-listed hall."""
    if classify_row(row) is not Category.EXPENSE:
        return False
    if allowlist is None:
        allowlist = DINING_ALLOWLIST
    return _matches_dining_service(_text(_field(row, "service")), allowlist)


def spend_value(row) -> float:
    """Positive spend for negative expense amounts; refunds and adjustments give 0."""
    amount = parse_amount(_field(row, "amount"))
    if classify_row(row) is Category.EXPENSE and amount < 0:
        return -amount
    return 0.0


def service_key(row) -> str:
    return _text(_field(row, "service")).strip() or UNKNOWN_SERVICE


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def normalize_rows(rows: Iterable, allowlist: Iterable[str] | None = None) -> pd.DataFrame:
    """Build one normalised record per input row, in input order.

    Columns: category, is_dining, service_key, spend, timestamp (NaT when unparseable).
    """
    if allowlist is not None:
        allowlist = list(allowlist)
    records = []
    for row in rows:
        category = classify_row(row)
        records.append({
            "category": category.value,
            "is_dining": infer_is_dining(row, allowlist),
            "service_key": service_key(row),
            "spend": spend_value(row),
            "timestamp": parse_datetime(_field(row, "dateTime")),
        })

    df = pd.DataFrame(records, columns=["category", "is_dining", "service_key", "spend", "timestamp"])
    df["is_dining"] = df["is_dining"].astype(bool)
    df["spend"] = df["spend"].astype(float)
    df["timestamp"] = pd.to_datetime(df["timestamp"]).dt.as_unit("ns")
    return df
