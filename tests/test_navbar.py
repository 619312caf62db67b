"""
Tests for the review header counters.
"""

from components.navbar import navbar_counters


def test_counters_follow_summary():
    counters = navbar_counters({"total": 120, "ready": 100, "incomplete": 20})

    assert counters == [
        ("Rows", 120, "counter-total"),
        ("Ready", 100, "counter-ready"),
        ("Incomplete", 20, "counter-incomplete"),
    ]


def test_missing_counts_read_as_zero():
    counters = navbar_counters({"total": 5})

    assert [count for _, count, _ in counters] == [5, 0, 0]
