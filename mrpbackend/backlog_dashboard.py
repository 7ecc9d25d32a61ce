"""Backlog dashboard: totals per aging bucket and per status."""

from __future__ import annotations

from typing import Any, Optional

from .backlog_models import (
    BacklogSummary,
    DashboardBackLog,
    SortFilterDashboardBacklog,
    aging_summary_from_counts,
)
from .backlog_repository import _aging_days
from .store import Store

BASE_FILTER = "back_logs.id > 0 AND back_logs.deleted_at IS NULL"

_STATUSES = ("PENDING", "OPEN", "CLOSED", "CANCELLED", "REJECTED")


def build_dashboard_filter(
    dashboard_sort: SortFilterDashboardBacklog,
) -> tuple[str, dict[str, Any]]:
    """SQL condition and parameters selecting live entries, optionally of one inspection year."""
    year = dashboard_sort.year
    if not year:
        return BASE_FILTER, {}
    if not year.strip().isdigit():
        raise ValueError(f"year must be a number, got {year!r}")
    return (
        BASE_FILTER + " AND substr(CAST(back_logs.date_of_inspection AS TEXT), 1, 4) = :year",
        {"year": f"{int(year):04d}"},
    )


def _bucket(row: dict[str, Any]) -> Optional[str]:
    """The aging bucket of an entry; a missing repair plan counts as the first."""
    if row.get("plan_replace_repair") is None:
        return "0_5"
    days = _aging_days(row.get("date_of_inspection"), row.get("plan_replace_repair"))
    if 0 <= days <= 5:
        return "0_5"
    if 6 <= days <= 15:
        return "6_15"
    if 16 <= days <= 30:
        return "16_30"
    if days > 30:
        return "30plus"
    return None


class BackLogDashboard:
    """Summaries of the backlog for the dashboard."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def list_dashboard_backlog(self, dashboard_sort: SortFilterDashboardBacklog) -> DashboardBackLog:
        """Counts of live entries overall, per aging bucket, per status and per both."""
        where, params = build_dashboard_filter(dashboard_sort)
        rows = self._store.find_all("back_logs", where, params)

        totals = {"0_5": 0, "6_15": 0, "16_30": 0, "30plus": 0}
        by_status = {status: 0 for status in _STATUSES}
        aging_counts: dict[str, int] = {}
        for row in rows:
            status = row.get("status")
            bucket = _bucket(row)
            if bucket is not None:
                totals[bucket] += 1
            if status in by_status:
                by_status[status] += 1
                if bucket is not None:
                    key = f"{status.lower()}{bucket}"
                    aging_counts[key] = aging_counts.get(key, 0) + 1

        return DashboardBackLog(
            total_backlog=len(rows),
            total_1=totals["0_5"],
            total_2=totals["6_15"],
            total_3=totals["16_30"],
            total_4=totals["30plus"],
            summary=BacklogSummary(**{s.lower(): n for s, n in by_status.items()}),
            aging_summary=aging_summary_from_counts(aging_counts),
        )