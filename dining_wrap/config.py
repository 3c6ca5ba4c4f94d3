"""
Dining Wrap — Configuration: rule tables, thresholds, env overrides.
"""
import os
import re
import warnings

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("DINING_WRAP_LOG_LEVEL", "INFO")
DEFAULT_PORT = int(os.environ.get("PORT", "8000"))

# Comma-separated service keywords counted as dining even without a floor-stall code
DINING_ALLOWLIST = [
    k.strip().lower()
    for k in os.environ.get("DINING_WRAP_ALLOWLIST", "").split(",")
    if k.strip()
]

_top_n_raw = os.environ.get("DINING_WRAP_TOP_N", "8").strip()
if _top_n_raw.isdigit():
    TOP_N = int(_top_n_raw)
else:
    warnings.warn(f"DINING_WRAP_TOP_N={_top_n_raw!r} is not an integer; using 8")
    TOP_N = 8

# ---------------------------------------------------------------------------
# Row classification (order matters — first match wins)
# (category, keywords matched in type, keywords matched in service)
# ---------------------------------------------------------------------------
CLASSIFICATION_RULES = [
    ("topup", ("wechat top up", "微信充值"), ()),
    ("printing", (), ("pharos", "printing", "打印")),
    ("admin", ("social medical insurance",), ("rms-",)),
    ("expense", ("expense", "消费"), ()),
]
FALLBACK_CATEGORY = "other"

# ---------------------------------------------------------------------------
# Dining inference
# Stall codes look like 2F-5 / 3F-3 / 1F-2
# ---------------------------------------------------------------------------
FLOOR_STALL_PATTERN = re.compile(r"\b[1-9]F-\d+\b", re.IGNORECASE | re.ASCII)

# Halls known to skip the floor-code convention. Not applied unless passed in
# as an allowlist or listed in DINING_WRAP_ALLOWLIST.
SUGGESTED_DINING_ALLOWLIST = [
    "zartar", "late diner", "weigh-and-pay", "taste of the occident",
    "juice bar", "harbour deli", "malatang",
]

# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
UNKNOWN_SERVICE = "Unknown"
NO_FAVORITE = "—"
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
CAT_COUNT_KEYS = ["dining", "topup", "printing", "admin", "expense_non_dining", "other"]

# ---------------------------------------------------------------------------
# Money formatting
# ---------------------------------------------------------------------------
CURRENCY_SYMBOL = "¥"
MISSING_MONEY = "—"

# ---------------------------------------------------------------------------
# Recap fact tables
# Cafeteria hours — Breakfast: 7-9 AM, Lunch: 11 AM-1:30 PM, Dinner: 5-7:30 PM
# Bounds are inclusive and compared against the integer peak hour.
# ---------------------------------------------------------------------------
MEAL_WINDOWS = {
    "breakfast": (7, 9),
    "lunch": (11, 13.5),
    "dinner": (17, 19.5),
    "last_call": (19, 19.5),
}

# Peak-hour personalities, checked before the frequency/weekday ones
PERSONALITY_HOUR_RULES = [
    ((17, 19), "🍽️ Dinner Rush Champion", "Peak dinner hours are your prime time!"),
    ((11, 13), "🌞 Lunch Lover", "You master the midday rush!"),
    ((7, 9), "🌅 Breakfast Boss", "Early riser, early eater!"),
    ((19, 19.5), "⏰ Last Call Hero", "You time it perfectly with closing!"),
]
HOME_BASE_MIN_FAVORITE = 50     # strictly greater than
LOCATION_HOPPER_MIN_SPOTS = 10
PERSONALITY_WEEKDAY_RULES = [
    ({"Fri", "Sat"}, "🎉 Weekend Warrior", "Dining is your weekend ritual!"),
    ({"Mon"}, "📚 Monday Motivator", "Starting the week with good food!"),
]
DEFAULT_PERSONALITY = ("🍜 DKU Foodie", "You're all about that campus life!")

PEAK_HOUR_ACHIEVEMENTS = [
    ("breakfast", "🌅", "Breakfast Club", "Morning meal regular"),
    ("lunch", "🌞", "Lunch Bunch", "Midday dining champion"),
    ("dinner", "🍽️", "Dinner Winner", "Evening meal master"),
    ("last_call", "⏰", "Last Call", "Timing it perfectly with closing!"),
]
# (stat, minimum, icon, name, desc) — stat is a key into the achievement metrics
THRESHOLD_ACHIEVEMENTS = [
    ("favorite_count", 50, "💎", "Loyal Legend", "100+ visits to one spot"),
    ("favorite_count", 100, "👑", "Crown Jewel", "200+ visits - you're basically family!"),
    ("spots", 10, "🗺️", "Campus Explorer", "Visited 10+ dining spots"),
    ("spots", 15, "🧭", "Food Cartographer", "Mapped the entire campus!"),
    ("total_spend", 2000, "💰", "Big Spender", "¥2000+ invested in dining"),
    ("total_spend", 5000, "🏦", "Dining Investor", "¥5000+ - you fund the campus!"),
    ("monthly_avg", 30, "📅", "Regular Customer", "30+ meals per month"),
    ("breakfast", 15, "🌅", "Breakfast Regular", "15+ breakfast visits"),
    ("lunch", 20, "🌞", "Lunch Loyalist", "20+ lunch meals"),
    ("dinner", 25, "🍽️", "Dinner Devotee", "25+ dinner visits"),
]

# Price of one item, in the implicit currency
FOOD_EQUIVALENTS = [
    (25, "You've bought enough ramen for {n} bowls! 🍜"),
    (15, "That's {n} bubble teas worth of spending! 🧋"),
    (45, "You could buy {n} large pizzas with your dining budget! 🍕"),
]
HOURS_PER_MEAL = 0.5
MEALS_PER_LIBRARY_VISIT = 10

TREND_WINDOW_MONTHS = 3
TREND_THRESHOLD_PCT = 20
NAMESAKE_MIN_FAVORITE = 30      # strictly greater than
STREAK_MIN_FAVORITE = 10        # strictly greater than
