"""
Recap fact generators — personality, achievements, comparisons, predictions,
quotes and memories, each a pure function of the stats dict.
"""
from __future__ import annotations

import math
from collections.abc import Iterable

import pandas as pd

from dining_wrap.config import (
    CURRENCY_SYMBOL,
    DEFAULT_PERSONALITY,
    FOOD_EQUIVALENTS,
    HOME_BASE_MIN_FAVORITE,
    HOURS_PER_MEAL,
    LOCATION_HOPPER_MIN_SPOTS,
    MEAL_WINDOWS,
    MEALS_PER_LIBRARY_VISIT,
    NAMESAKE_MIN_FAVORITE,
    PEAK_HOUR_ACHIEVEMENTS,
    PERSONALITY_HOUR_RULES,
    PERSONALITY_WEEKDAY_RULES,
    STREAK_MIN_FAVORITE,
    THRESHOLD_ACHIEVEMENTS,
    TREND_THRESHOLD_PCT,
    TREND_WINDOW_MONTHS,
)
from dining_wrap.analytics.common import fmt_money, pct_change, safe_divide, window_total
from dining_wrap.analytics.stats import compute_stats


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _in_window(hour: float, window: tuple[float, float]) -> bool:
    lo, hi = window
    return lo <= hour <= hi


def _meal_counts(stats: dict) -> dict[str, int]:
    """Visits per meal period, from the hour histogram."""
    counts = pd.Series(
        [h["count"] for h in stats["hours"]],
        index=[h["hour"] for h in stats["hours"]],
        dtype=int,
    )
    return {meal: window_total(counts, window) for meal, window in MEAL_WINDOWS.items()}


def _meal_period(hour: float) -> str | None:
    for meal in ("breakfast", "lunch", "dinner"):
        if _in_window(hour, MEAL_WINDOWS[meal]):
            return meal
    return None


# ---------------------------------------------------------------------------
# Personality
# ---------------------------------------------------------------------------

def get_dining_personality(stats: dict) -> dict:
    """Single label for the diner: peak hour first, then loyalty, variety, weekday."""
    hour = stats["peak_hour"]["hour"]
    for window, name, desc in PERSONALITY_HOUR_RULES:
        if _in_window(hour, window):
            return {"name": name, "desc": desc}

    if stats["favorite_count"] > HOME_BASE_MIN_FAVORITE:
        return {"name": "🏠 Home Base Hero", "desc": "Loyalty to your favorite spot!"}
    if len(stats["top_visits"]) >= LOCATION_HOPPER_MIN_SPOTS:
        return {"name": "🎯 Location Hopper", "desc": "You like to explore the menu!"}

    weekday = stats["peak_weekday"]["day"]
    for days, name, desc in PERSONALITY_WEEKDAY_RULES:
        if weekday in days:
            return {"name": name, "desc": desc}

    name, desc = DEFAULT_PERSONALITY
    return {"name": name, "desc": desc}


# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------

def calculate_achievements(stats: dict) -> list[dict]:
    achievements = []

    peak = stats["peak_hour"]["hour"]
    for meal, icon, name, desc in PEAK_HOUR_ACHIEVEMENTS:
        if _in_window(peak, MEAL_WINDOWS[meal]):
            achievements.append({"icon": icon, "name": name, "desc": desc})

    metrics = {
        "favorite_count": stats["favorite_count"],
        "spots": len(stats["top_visits"]),
        "total_spend": stats["total_spend"],
        "monthly_avg": stats["txns"] / max(1, len(stats["months"])),
        **_meal_counts(stats),
    }
    for metric, minimum, icon, name, desc in THRESHOLD_ACHIEVEMENTS:
        if metrics[metric] >= minimum:
            achievements.append({"icon": icon, "name": name, "desc": desc})

    return achievements


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------

def generate_fun_comparisons(stats: dict) -> list[str]:
    comparisons = []
    spend = stats["total_spend"]
    txns = stats["txns"]

    for price, template in FOOD_EQUIVALENTS:
        n = math.floor(spend / price)
        if n > 0:
            comparisons.append(template.format(n=n))

    comparisons.append(f"You've spent about {math.floor(txns * HOURS_PER_MEAL)} hours dining this year!")
    comparisons.append(
        f"If dining spots were libraries, you've visited {math.floor(txns / MEALS_PER_LIBRARY_VISIT)} "
        f"times more than most students study! 📚"
    )

    meals = _meal_counts(stats)
    if meals["breakfast"] > 0:
        comparisons.append(f"You've beaten the breakfast rush {meals['breakfast']} times! 🏃‍♂️")
    if meals["dinner"] > 0:
        comparisons.append(f"You've conquered dinner hour {meals['dinner']} times! 👑")

    return comparisons


# ---------------------------------------------------------------------------
# Predictions
# ---------------------------------------------------------------------------

def _spend_trend(months: list[dict]) -> float | None:
    """Percent change of the latest window's mean monthly spend over the window before it."""
    recent = months[-TREND_WINDOW_MONTHS:]
    older = months[-2 * TREND_WINDOW_MONTHS:-TREND_WINDOW_MONTHS]
    if not recent or not older:
        return None
    recent_avg = sum(m["spend"] for m in recent) / len(recent)
    older_avg = sum(m["spend"] for m in older) / len(older)
    return pct_change(recent_avg, older_avg)


def predict_future_habits(stats: dict) -> list[str]:
    predictions = []
    months = stats["months"]
    if len(months) < 2:
        return predictions

    growth = _spend_trend(months)
    if growth is not None:
        if growth > TREND_THRESHOLD_PCT:
            predictions.append("📈 Your spending is trending upward - watch that wallet!")
        if growth < -TREND_THRESHOLD_PCT:
            predictions.append("📉 Getting more budget-conscious? Keep it up!")

    if stats["favorite_count"] > NAMESAKE_MIN_FAVORITE:
        predictions.append(f"🏆 {stats['favorite']} might name a dish after you soon!")

    period = _meal_period(stats["peak_hour"]["hour"])
    if period == "dinner":
        predictions.append("🍽️ Your dinner timing will remain impeccable!")
    elif period == "lunch":
        predictions.append("🌞 You'll continue to master the lunch rush!")
    elif period == "breakfast":
        predictions.append("🌅 Early bird habits will serve you well!")

    predictions.append("🔮 Next year you'll discover at least 2 new favorite spots!")
    predictions.append("🎯 Your dining game will reach legendary status!")

    return predictions


# ---------------------------------------------------------------------------
# Quotes & memories
# ---------------------------------------------------------------------------

_MEAL_RUSH_LABELS = {"breakfast": "breakfast rush", "lunch": "lunch rush", "dinner": "dinner rush"}


def create_shareable_quotes(stats: dict) -> list[str]:
    quotes = []
    personality = get_dining_personality(stats)

    quotes.append(f'"I am a {personality["name"]} at DKU! {personality["desc"]}"')

    if stats["favorite"]:
        quotes.append(
            f'"My heart belongs to {stats["favorite"]} - {stats["favorite_count"]} visits and counting!"'
        )

    quotes.append(f'"This year I invested {CURRENCY_SYMBOL}{fmt_money(stats["total_spend"])} in campus cuisine! 🍽️"')

    hour = stats["peak_hour"]["hour"]
    meal_period = _MEAL_RUSH_LABELS.get(_meal_period(hour), "off-hours")
    quotes.append(f'"My peak dining hour is {hour}:00 during the {meal_period} - perfect timing!"')

    quotes.append(f'"{stats["peak_weekday"]["day"]} is my dining day - I eat like it\'s going out of style!"')

    return quotes


def get_memory_highlights(stats: dict) -> list[str]:
    memories = []

    if stats["months"]:
        first = stats["months"][0]
        memories.append(
            f"Your dining journey began in {first['month']} with {CURRENCY_SYMBOL}{fmt_money(first['spend'])} spent!"
        )

    meals = _meal_counts(stats)
    if meals["breakfast"] > 0:
        memories.append(f"You've started your day right with {meals['breakfast']} breakfast visits! 🌅")
    if meals["lunch"] > 0:
        memories.append(f"{meals['lunch']} lunches fueled your academic journey! 🌞")
    if meals["dinner"] > 0:
        memories.append(f"{meals['dinner']} dinners capped off your busy days! 🍽️")

    avg_meal = safe_divide(stats["total_spend"], max(1, stats["txns"]))
    memories.append(f"Your average meal costs {CURRENCY_SYMBOL}{fmt_money(avg_meal)} - every bite worth it!")

    if stats["favorite_count"] > STREAK_MIN_FAVORITE:
        memories.append(
            f"You had a {stats['favorite_count'] // 7}-week streak of visiting {stats['favorite']}!"
        )

    return memories


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------

def build_recap(rows: Iterable, allowlist: Iterable[str] | None = None) -> dict:
    """Stats plus every fact list, ready for the presentation layer."""
    stats = compute_stats(rows, allowlist)
    return {
        "stats": stats,
        "personality": get_dining_personality(stats),
        "achievements": calculate_achievements(stats),
        "comparisons": generate_fun_comparisons(stats),
        "predictions": predict_future_habits(stats),
        "quotes": create_shareable_quotes(stats),
        "memories": get_memory_highlights(stats),
    }
