from datetime import date
from types import SimpleNamespace

from careersync.analytics import (
    average_response_days,
    compute_analytics,
    compute_stats,
    monthly_applications,
    range_start,
)


def _app(status, applied, interview=None):
    return SimpleNamespace(status=status, applied_date=applied, interview_date=interview)


def test_rates_ignore_unknown_statuses():
    apps = [_app("offer", date(2024, 5, 1)), _app("ghosted", date(2024, 5, 2)), _app(None, date(2024, 5, 3))]
    data = compute_analytics(apps)
    assert data["totalApplications"] == 3
    assert data["offerRate"] == 33
    assert data["interviewRate"] == 33
    assert data["responseRate"] == 33
    assert [d["value"] for d in data["statusDistribution"]] == [0, 0, 1, 0, 0]


def test_monthly_buckets_keep_years_apart():
    apps = [_app("applied", date(2023, 1, 5)), _app("applied", date(2024, 1, 5)), _app("applied", date(2024, 1, 9))]
    assert monthly_applications(apps) == [
        {"month": "Jan", "applications": 1},
        {"month": "Jan", "applications": 2},
    ]


def test_monthly_buckets_keep_last_six():
    apps = [_app("applied", date(2024, m, 1)) for m in range(1, 10)]
    buckets = monthly_applications(apps)
    assert len(buckets) == 6
    assert buckets[0]["month"] == "Apr"
    assert buckets[-1]["month"] == "Sep"


def test_average_response_days():
    apps = [
        _app("interview", date(2024, 1, 1), date(2024, 1, 11)),
        _app("offer", date(2024, 1, 1), date(2024, 1, 21)),
        _app("applied", date(2024, 1, 1)),
    ]
    assert average_response_days(apps) == 15
    assert average_response_days([]) == 0


def test_range_start():
    today = date(2024, 8, 31)
    assert range_start("3months", today) == date(2024, 5, 31)
    assert range_start("6months", today) == date(2024, 2, 29)
    assert range_start("1year", today) == date(2023, 8, 31)
    assert range_start("all", today) == date(2020, 1, 1)
    assert range_start("bogus", today) == range_start("6months", today)


def test_stats_skip_rows_without_date():
    data = compute_stats([_app("applied", None), _app("rejected", date(2024, 2, 2))])
    assert data["stats"]["total"] == 2
    assert data["stats"]["rejected"] == 1
    assert data["trends"] == [{"month": "2024-02", "count": 1}]
