"""Application-facing operations on backlog entries and their dashboard."""

from __future__ import annotations

from .backlog_dashboard import BackLogDashboard
from .backlog_models import (
    BackLog,
    DashboardBackLog,
    RegisterBackLogInput,
    SortFilterBackLog,
    SortFilterDashboardBacklog,
)
from .backlog_repository import BackLogRepository
from .pagination import Pagination


class BackLogService:
    """Front door to the backlog repository and the backlog dashboard.

    Errors raised below (such as ``RecordNotFound``) pass through unchanged.
    """

    def __init__(self, repository: BackLogRepository, dashboard: BackLogDashboard) -> None:
        self._repository = repository
        self._dashboard = dashboard

    def create_backlog(self, backlog_input: RegisterBackLogInput) -> BackLog:
        return self._repository.create_backlog(backlog_input)

    def find_backlog(self) -> list[BackLog]:
        return self._repository.find_backlog()

    def find_backlog_by_id(self, record_id: int) -> BackLog:
        return self._repository.find_backlog_by_id(record_id)

    def get_list_backlog(self, page: int, sort_filter: SortFilterBackLog) -> Pagination:
        return self._repository.list_backlog(page, sort_filter)

    def update_backlog(self, backlog_input: RegisterBackLogInput, record_id: int) -> BackLog:
        return self._repository.update_backlog(backlog_input, record_id)

    def delete_backlog(self, record_id: int) -> bool:
        return self._repository.delete_backlog(record_id)

    def list_dashboard_backlog(self, dashboard_sort: SortFilterDashboardBacklog) -> DashboardBackLog:
        return self._dashboard.list_dashboard_backlog(dashboard_sort)