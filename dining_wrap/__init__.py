"""Dining Wrap — campus card transactions in, year-end dining recap out."""
from dining_wrap.data.normalize import (
    parse_amount,
    parse_datetime,
    classify_row,
    infer_is_dining,
    spend_value,
)
from dining_wrap.data.schemas import Category
from dining_wrap.analytics.common import fmt_money
from dining_wrap.analytics.stats import compute_stats
from dining_wrap.analytics.recap import (
    get_dining_personality,
    calculate_achievements,
    generate_fun_comparisons,
    predict_future_habits,
    create_shareable_quotes,
    get_memory_highlights,
    build_recap,
)

__version__ = "1.0.0"

__all__ = [
    "Category",
    "compute_stats",
    "fmt_money",
    "parse_amount",
    "parse_datetime",
    "classify_row",
    "infer_is_dining",
    "spend_value",
    "get_dining_personality",
    "calculate_achievements",
    "generate_fun_comparisons",
    "predict_future_habits",
    "create_shareable_quotes",
    "get_memory_highlights",
    "build_recap",
]
