"""
Job-search analytics computed from a user's full list of applications.

Everything here works on plain rows already fetched from the database; there is
no incremental aggregation. Rows with a status outside JOB_STATUSES still count
toward totals but add nothing to any rate or status bucket.
"""

from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Optional

from careersync.models import JOB_STATUSES

RESPONDED = {"interview", "offer", "rejected"}
INTERVIEWED = {"interview", "offer"}

STATUS_DISPLAY = [
    ("applied", "Applied", "#3B82F6"),
    ("interview", "Interview", "#F59E0B"),
    ("offer", "Offer", "#10B981"),
    ("rejected", "Rejected", "#EF4444"),
    ("withdrawn", "Withdrawn", "#6B7280"),
]

RANGE_MONTHS = {"3months": 3, "6months": 6, "1year": 12}
ALL_TIME_START = date(2020, 1, 1)
DEFAULT_RANGE = "6months"


def _months_back(today: date, months: int) -> date:
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    # clamp to the last day of the target month
    for day in (today.day, 30, 29, 28):
        try:
            return date(year, month, day)
        except ValueError:
            continue
    return date(year, month, 28)


def range_start(range_key: Optional[str], today: Optional[date] = None) -> date:
    today = today or date.today()
    if range_key == "all":
        return ALL_TIME_START
    months = RANGE_MONTHS.get(range_key, RANGE_MONTHS[DEFAULT_RANGE])
    return _months_back(today, months)


def _pct(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(count * 100 / total + 0.5)


def status_counts(apps: Iterable) -> Dict[str, int]:
    counts = {status: 0 for status in JOB_STATUSES}
    for app in apps:
        if app.status in counts:
            counts[app.status] += 1
    return counts


def average_response_days(apps: Iterable) -> int:
    gaps = [
        (app.interview_date - app.applied_date).days
        for app in apps
        if app.applied_date and app.interview_date and app.interview_date >= app.applied_date
    ]
    if not gaps:
        return 0
    return int(sum(gaps) / len(gaps) + 0.5)


def monthly_applications(apps: Iterable, limit: int = 6) -> List[dict]:
    buckets: "OrderedDict[str, dict]" = OrderedDict()
    for app in sorted((a for a in apps if a.applied_date), key=lambda a: a.applied_date):
        key = app.applied_date.strftime("%Y-%m")
        if key not in buckets:
            buckets[key] = {"month": app.applied_date.strftime("%b"), "applications": 0}
        buckets[key]["applications"] += 1
    return list(buckets.values())[-limit:]


def application_trends(apps: Iterable, limit: int = 6) -> List[dict]:
    trend: Dict[str, dict] = {}
    for app in apps:
        if not app.applied_date:
            continue
        key = app.applied_date.strftime("%Y-%m")
        bucket = trend.setdefault(key, {"applications": 0, "interviews": 0, "offers": 0})
        bucket["applications"] += 1
        if app.status in INTERVIEWED:
            bucket["interviews"] += 1
        if app.status == "offer":
            bucket["offers"] += 1
    return [{"date": key, **trend[key]} for key in sorted(trend)][-limit:]


def compute_analytics(apps: List) -> dict:
    total = len(apps)
    counts = status_counts(apps)

    responded = sum(1 for a in apps if a.status in RESPONDED)
    interviewed = sum(1 for a in apps if a.status in INTERVIEWED)

    return {
        "totalApplications": total,
        "responseRate": _pct(responded, total),
        "interviewRate": _pct(interviewed, total),
        "offerRate": _pct(counts["offer"], total),
        "averageResponseTime": average_response_days(apps),
        "monthlyApplications": monthly_applications(apps),
        "statusDistribution": [
            {"name": name, "value": counts[status], "color": color}
            for status, name, color in STATUS_DISPLAY
        ],
        "applicationTrends": application_trends(apps),
    }


def compute_stats(apps: List) -> dict:
    stats = {"total": len(apps)}
    stats.update(status_counts(apps))

    monthly: Dict[str, int] = {}
    for app in apps:
        if app.applied_date:
            key = app.applied_date.strftime("%Y-%m")
            monthly[key] = monthly.get(key, 0) + 1

    trends = [{"month": key, "count": monthly[key]} for key in sorted(monthly)]
    return {"stats": stats, "trends": trends}
