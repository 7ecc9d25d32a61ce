"""Contract-expiry and periodic medical-check reports over employee side records."""

from __future__ import annotations

import datetime as _dt
from typing import Any, NamedTuple

from .allmaster_models import (
    EmployeeDOHExpired,
    EmployeeMCUBerkala,
    SortFilterDohKontrak,
    from_record,
)
from .pagination import Pagination
from .sql_filters import order_clause, pt_filter, resolve_year
from .store import Store

REPORT_PAGE_SIZE = 10
DEFAULT_SORT = "employee_id"


class ReportQueries(NamedTuple):
    """The paginated row query of a report and its matching count query."""

    select: str
    count: str


_LATEST_PER_EMPLOYEE = """
		WITH {cte} AS (
			SELECT DISTINCT ON ({table}.employee_id)
				{table}.*,
				e.firstname AS firstname,
				e.lastname AS lastname,
				d.department_name,
				p.position_name
			FROM {table}
			JOIN employees e ON {table}.employee_id = e.id
			JOIN departments d ON e.department_id = d.id
			JOIN positions p ON e.position_id = p.id
			WHERE {table}.deleted_at IS NULL AND {condition}
			ORDER BY {table}.employee_id, TO_DATE({table}.{latest_column}, 'YYYY-MM-DD') DESC
		)
		SELECT {columns} FROM {cte}
		WHERE CURRENT_DATE >= TO_DATE({end_column}, 'YYYY-MM-DD') - INTERVAL '1 month'
"""


def _build_queries(
    table: str,
    cte: str,
    end_column: str,
    latest_column: str,
    sort_filter: SortFilterDohKontrak,
    today: _dt.date | None,
) -> ReportQueries:
    year = resolve_year(sort_filter.year, today)
    base_filter = f"{table}.id > 0 AND {pt_filter(sort_filter.pt, sort_filter.code_emp)}"
    condition = f"EXTRACT(YEAR FROM {table}.{end_column}::DATE) = {year} AND {base_filter}"
    sort = order_clause(sort_filter.field, sort_filter.sort, DEFAULT_SORT)

    def render(columns: str) -> str:
        return _LATEST_PER_EMPLOYEE.format(
            cte=cte,
            table=table,
            condition=condition,
            latest_column=latest_column,
            end_column=end_column,
            columns=columns,
        )

    select = render("*") + f"\t\tORDER BY {sort}\n\t\tLIMIT :limit OFFSET :offset\n"
    return ReportQueries(select=select, count=render("count(*)"))


def build_doh_kontrak_queries(
    sort_filter: SortFilterDohKontrak, today: _dt.date | None = None
) -> ReportQueries:
    """Queries for each employee's latest contract ending within a month, in the chosen year."""
    return _build_queries(
        "dohs", "latest_dohs", "tanggal_end_doh", "tanggal_doh", sort_filter, today
    )


def build_mcu_berkala_queries(
    sort_filter: SortFilterDohKontrak, today: _dt.date | None = None
) -> ReportQueries:
    """Queries for each employee's latest medical check due within a month, in the chosen year."""
    return _build_queries(
        "mcus", "latest_mcus", "date_end_mcu", "date_end_mcu", sort_filter, today
    )


class MasterReports:
    """Paginated expiry reports run against the store."""

    def __init__(self, store: Store, today: _dt.date | None = None) -> None:
        self._store = store
        self._today = today

    def _run(self, queries: ReportQueries, page: int, row_type: type) -> Pagination:
        pagination = Pagination(page=max(page, 1), limit=REPORT_PAGE_SIZE)
        rows = self._store.raw(
            queries.select, {"limit": pagination.limit, "offset": pagination.offset()}
        )
        data = [from_record(row_type, row) for row in rows]
        total: Any = self._store.scalar(queries.count)
        pagination.apply_total(int(total or 0))
        pagination.data = data
        return pagination

    def find_doh_kontrak(self, page: int, sort_filter: SortFilterDohKontrak) -> Pagination:
        """One page of employees whose latest contract is about to end."""
        queries = build_doh_kontrak_queries(sort_filter, self._today)
        return self._run(queries, page, EmployeeDOHExpired)

    def find_mcu_berkala(self, page: int, sort_filter: SortFilterDohKontrak) -> Pagination:
        """One page of employees whose latest medical check is about to expire."""
        queries = build_mcu_berkala_queries(sort_filter, self._today)
        return self._run(queries, page, EmployeeMCUBerkala)