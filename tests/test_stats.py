import pytest

from dining_wrap.analytics.stats import compute_stats

from conftest import dining_row


def test_end_to_end(sample_rows):
    stats = compute_stats(sample_rows, allowlist=[])
    assert stats["txns"] == 2
    assert stats["total_spend"] == 55
    assert stats["favorite"] == "2F-5 Noodle Bar"
    assert stats["favorite_count"] == 2
    assert stats["peak_hour"] == {"hour": 12, "count": 2}
    assert stats["months"] == [{"month": "2024-03", "spend": 55}]
    assert stats["valid_time"] == 2
    assert stats["meta"]["total_rows"] == 3
    assert stats["meta"]["dining_rows"] == 2
    assert stats["meta"]["cat_counts"] == {
        "dining": 2, "topup": 1, "printing": 0, "admin": 0, "expense_non_dining": 0, "other": 0,
    }
    # Thu 14th and Fri 15th tie; the earlier weekday wins
    assert stats["peak_weekday"] == {"day": "Thu", "count": 1}


def test_empty_input():
    stats = compute_stats([], allowlist=[])
    assert stats["txns"] == 0
    assert stats["total_spend"] == 0
    assert stats["top_spend"] == []
    assert stats["top_visits"] == []
    assert stats["favorite"] == "—"
    assert stats["favorite_count"] == 0
    assert stats["peak_hour"] == {"hour": 0, "count": 0}
    assert stats["peak_weekday"] == {"day": "Sun", "count": 0}
    assert [h["count"] for h in stats["hours"]] == [0] * 24
    assert [d["day"] for d in stats["weekdays"]] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert stats["months"] == []
    assert stats["valid_time"] == 0
    assert stats["meta"]["total_rows"] == 0


def test_spend_asymmetry():
    refund = compute_stats([dining_row(amount="+20")], allowlist=[])
    assert refund["total_spend"] == 0
    assert refund["txns"] == 1

    charge = compute_stats([dining_row(amount="-20")], allowlist=[])
    assert charge["total_spend"] == 20
    assert charge["txns"] == 1


def test_totals_match_service_maps():
    rows = [
        dining_row("1F-1 A", "-12.30"),
        dining_row("1F-2 B", "-7.15"),
        dining_row("1F-1 A", "+3"),
        dining_row("2F-3 C", "-0.1"),
        dining_row("1F-2 B", "-4.4"),
    ]
    stats = compute_stats(rows, allowlist=[])
    assert sum(e["value"] for e in stats["top_spend"]) == pytest.approx(stats["total_spend"])
    assert sum(e["value"] for e in stats["top_visits"]) == stats["txns"]


def test_idempotent(sample_rows):
    assert compute_stats(sample_rows, allowlist=[]) == compute_stats(sample_rows, allowlist=[])


def test_peak_hour_tie_goes_to_earliest():
    rows = [dining_row(when=f"2024-03-{d:02d} 12:10:00") for d in range(1, 6)]
    rows += [dining_row(when=f"2024-03-{d:02d} 08:10:00") for d in range(1, 6)]
    stats = compute_stats(rows, allowlist=[])
    assert stats["peak_hour"] == {"hour": 8, "count": 5}


def test_months_sorted():
    rows = [
        dining_row(amount="-3", when="2024-12-01 12:00:00"),
        dining_row(amount="-1", when="2024-01-05 12:00:00"),
        dining_row(amount="-2", when="2024/03/09 12:00:00"),
        dining_row(amount="-4", when="2024-01-20 12:00:00"),
    ]
    months = compute_stats(rows, allowlist=[])["months"]
    assert [m["month"] for m in months] == ["2024-01", "2024-03", "2024-12"]
    assert months[0]["spend"] == 5


def test_top_lists_are_stable_and_capped():
    rows = [dining_row(f"1F-{i} Stall", "-10") for i in range(1, 11)]
    stats = compute_stats(rows, allowlist=[])
    assert len(stats["top_spend"]) == 8
    assert len(stats["top_visits"]) == 8
    # equal values keep first-appearance order
    assert [e["key"] for e in stats["top_visits"]] == [f"1F-{i} Stall" for i in range(1, 9)]
    assert stats["favorite"] == "1F-1 Stall"


def test_top_visits_order_by_count():
    rows = [dining_row("1F-1 A"), dining_row("1F-2 B"), dining_row("1F-2 B")]
    stats = compute_stats(rows, allowlist=[])
    assert stats["top_visits"] == [{"key": "1F-2 B", "value": 2}, {"key": "1F-1 A", "value": 1}]


def test_unparseable_timestamp_still_counts():
    rows = [dining_row(amount="-10", when="garbage"), dining_row(amount="-5", when="")]
    stats = compute_stats(rows, allowlist=[])
    assert stats["txns"] == 2
    assert stats["total_spend"] == 15
    assert stats["valid_time"] == 0
    assert sum(h["count"] for h in stats["hours"]) == 0
    assert stats["months"] == []


def test_histograms_sum_to_valid_time():
    rows = [dining_row(when="2024-03-14 07:30:00"), dining_row(when="2024-03-17 19:00:00"), dining_row(when="")]
    stats = compute_stats(rows, allowlist=[])
    assert stats["valid_time"] == 2
    assert sum(h["count"] for h in stats["hours"]) == 2
    assert sum(d["count"] for d in stats["weekdays"]) == 2
    # 2024-03-17 is a Sunday
    assert stats["weekdays"][0] == {"day": "Sun", "count": 1}


def test_category_counts_cover_all_rows():
    rows = [
        dining_row(),
        {"type": "Expense", "service": "Campus Store", "amount": "-5"},
        {"type": "Expense", "service": "Pharos Printing", "amount": "-1"},
        {"type": "Social Medical Insurance", "service": "", "amount": "-300"},
        {"type": "Transfer", "service": "", "amount": "5"},
    ]
    meta = compute_stats(rows, allowlist=[])["meta"]
    assert meta["total_rows"] == 5
    assert meta["dining_rows"] == 1
    assert meta["cat_counts"] == {
        "dining": 1, "topup": 0, "printing": 1, "admin": 1, "expense_non_dining": 1, "other": 1,
    }


def test_service_key_trimmed_and_allowlist():
    rows = [dining_row("  2F-5 A  "), {"type": "Expense", "service": "Juice Bar", "amount": "-8"}]
    stats = compute_stats(rows, allowlist=["juice bar"])
    assert {e["key"] for e in stats["top_visits"]} == {"2F-5 A", "Juice Bar"}
    assert stats["total_spend"] == 18


def test_accepts_generator(sample_rows):
    stats = compute_stats((r for r in sample_rows), allowlist=[])
    assert stats["meta"]["total_rows"] == 3
    assert stats["txns"] == 2


def test_out_of_range_year_is_untimed():
    rows = [
        dining_row(amount="-4", when="0202-03-14 12:00"),
        dining_row(amount="-6", when="2024-03-14 12:05:00.123456789"),
        dining_row(amount="-1", when="9999-12-31 12:00"),
    ]
    stats = compute_stats(rows, allowlist=[])
    assert stats["txns"] == 3
    assert stats["total_spend"] == 11
    assert stats["valid_time"] == 1
    assert stats["months"] == [{"month": "2024-03", "spend": 6}]
