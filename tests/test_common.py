import math

import numpy as np
import pandas as pd

from dining_wrap.analytics.common import fmt_money, pct_change, safe_divide, sanitize_for_json, top_n


def test_fmt_money():
    assert fmt_money(1234.5) == "1,234.5"
    assert fmt_money(3) == "3"
    assert fmt_money(0) == "0"
    assert fmt_money(1_000_000) == "1,000,000"
    assert fmt_money(-1234.567) == "-1,234.57"
    assert fmt_money(0.125) == "0.13"
    # 1.005 is stored just below the half
    assert fmt_money(1.005) == "1"
    assert fmt_money("42.10") == "42.1"


def test_fmt_money_non_finite():
    assert fmt_money(math.nan) == "—"
    assert fmt_money(math.inf) == "—"
    assert fmt_money("abc") == "—"


def test_fmt_money_blank_reads_as_zero():
    assert fmt_money(None) == "0"
    assert fmt_money("") == "0"
    assert fmt_money("   ") == "0"


def test_safe_divide_and_pct_change():
    assert safe_divide(10, 0) == 0.0
    assert safe_divide(10, 4) == 2.5
    assert pct_change(150, 100) == 50
    assert pct_change(5, 0) == math.inf
    assert pct_change(0, 0) is None


def test_top_n_keeps_tie_order():
    s = pd.Series([1, 3, 3, 2], index=["a", "b", "c", "d"])
    assert top_n(s, 3) == [{"key": "b", "value": 3}, {"key": "c", "value": 3}, {"key": "d", "value": 2}]
    assert top_n(pd.Series(dtype=float), 3) == []


def test_sanitize_for_json():
    out = sanitize_for_json({"a": np.int64(3), "b": [np.float64(np.nan), 1.5], "c": np.bool_(True)})
    assert out == {"a": 3, "b": [0.0, 1.5], "c": True}
    assert type(out["a"]) is int
