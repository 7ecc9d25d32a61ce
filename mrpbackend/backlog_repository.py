"""Data access for backlog entries: creation, lookups, paginated listing and deletion."""

from __future__ import annotations

import dataclasses
import datetime as _dt
from typing import Any, Optional

from .allmaster_models import as_record
from .backlog_models import BackLog, RegisterBackLogInput, SortFilterBackLog
from .pagination import Pagination
from .sql_filters import order_clause
from .store import RecordNotFound, Store

Record = dict[str, Any]

BACKLOG_PAGE_SIZE = 7
DEFAULT_SORT = "bl.id desc"
BASE_FILTER = "bl.id > 0 AND bl.deleted_at IS NULL"

_DATE_FILTERS = (
    ("date_of_inspection", "bl.date_of_inspection"),
    ("plan_replace_repair", "bl.plan_replace_repair"),
)

_TEXT_FILTERS = (
    ("unit_id", "bl.unit_id"),
    ("problem", "bl.problem"),
    ("component", "bl.component"),
    ("part_number", "bl.part_number"),
    ("part_description", "bl.part_description"),
    ("qty_order", "bl.qty_order"),
    ("pp_number", "bl.pp_number"),
    ("po_number", "bl.po_number"),
    ("status", "bl.status"),
)

_JOINS = (
    "FROM back_logs bl "
    "JOIN units u ON bl.unit_id = u.id "
    "JOIN brands b ON b.id = u.brand_id "
    "JOIN series s ON s.id = u.series_id"
)


def null_if_blank(value: Optional[str]) -> Optional[str]:
    """``None`` for a missing or whitespace-only string, otherwise the string itself."""
    if value is None or not value.strip():
        return None
    return value


def _as_date(value: Any) -> _dt.date:
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    return _dt.date.fromisoformat(str(value).strip()[:10])


def _aging_days(date_of_inspection: Any, plan_replace_repair: Any) -> int:
    """Days from inspection to the planned repair; 0 when no repair is planned."""
    if plan_replace_repair is None:
        return 0
    return (_as_date(plan_replace_repair) - _as_date(date_of_inspection)).days


def _stamp(value: Any) -> Any:
    return value.isoformat() if isinstance(value, (_dt.date, _dt.datetime)) else value


def _parsed_date(value: str) -> Optional[str]:
    try:
        return _dt.datetime.strptime(value, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        return None


def build_backlog_filter(sort_filter: SortFilterBackLog) -> tuple[str, dict[str, Any]]:
    """SQL condition and its parameters for the backlog listing.

    Date filters apply only when they parse as ``YYYY-MM-DD``; text filters
    match anywhere in the column, ignoring case.
    """
    clauses = [BASE_FILTER]
    params: dict[str, Any] = {}

    for name, column in _DATE_FILTERS:
        raw = getattr(sort_filter, name)
        if raw:
            day = _parsed_date(raw)
            if day is not None:
                clauses.append(f"{column} = :{name}")
                params[name] = day

    if sort_filter.brand_name:
        clauses.append(
            "LOWER(COALESCE(b.brand_name, '') || ' ' || COALESCE(s.series_name, '')) "
            "LIKE :brand_name"
        )
        params["brand_name"] = f"%{sort_filter.brand_name.lower()}%"

    for name, column in _TEXT_FILTERS:
        raw = getattr(sort_filter, name)
        if raw:
            clauses.append(f"LOWER(CAST({column} AS TEXT)) LIKE :{name}")
            params[name] = f"%{raw.lower()}%"

    return " AND ".join(clauses), params


def _to_backlog(row: Record, unit: Record, aging: int = 0) -> BackLog:
    return BackLog(
        id=row.get("id") or 0,
        created_at=_stamp(row.get("created_at")),
        updated_at=_stamp(row.get("updated_at")),
        deleted_at=_stamp(row.get("deleted_at")),
        unit_id=row.get("unit_id") or 0,
        hm_breakdown=row.get("hm_breakdown") or 0.0,
        problem=row.get("problem") or "",
        component=row.get("component") or "",
        part_number=row.get("part_number") or "",
        part_description=row.get("part_description") or "",
        qty_order=row.get("qty_order") or 0,
        date_of_inspection=_stamp(row.get("date_of_inspection")) or "",
        plan_replace_repair=_stamp(row.get("plan_replace_repair")),
        hm_ready=row.get("hm_ready"),
        pp_number=row.get("pp_number"),
        po_number=row.get("po_number"),
        status=row.get("status") or "",
        aging_backlog_by_date=aging,
        unit=unit,
    )


class BackLogRepository:
    """Stores and retrieves backlog entries with their units."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def _related(self, table: str, record_id: Any) -> Record:
        if not record_id:
            return {}
        try:
            return self._store.first(table, record_id)
        except RecordNotFound:
            return {}

    def _with_brand_and_equipment(self, record: Record) -> Record:
        if not record:
            return {}
        return {
            **record,
            "Brand": self._related("brands", record.get("brand_id")),
            "HeavyEquipment": self._related("heavy_equipments", record.get("heavy_equipment_id")),
        }

    def _unit(self, unit_id: Any) -> Record:
        unit = self._related("units", unit_id)
        if not unit:
            return {}
        return {
            **self._with_brand_and_equipment(unit),
            "Series": self._with_brand_and_equipment(self._related("series", unit.get("series_id"))),
        }

    def create_backlog(self, backlog_input: RegisterBackLogInput) -> BackLog:
        """Store a new entry; a blank planned repair date is stored as null."""
        values = dataclasses.asdict(backlog_input)
        values["plan_replace_repair"] = null_if_blank(backlog_input.plan_replace_repair)
        return _to_backlog(self._store.insert("back_logs", values), {})

    def find_backlog(self) -> list[BackLog]:
        """Every live entry with its unit."""
        return [
            _to_backlog(row, self._unit(row.get("unit_id")))
            for row in self._store.find_all("back_logs")
        ]

    def find_backlog_by_id(self, record_id: int) -> BackLog:
        """The live entry with ``record_id`` and its unit."""
        row = self._store.first("back_logs", record_id)
        return _to_backlog(row, self._unit(row.get("unit_id")))

    def list_backlog(self, page: int, sort_filter: SortFilterBackLog) -> Pagination:
        """One page of filtered, sorted entries, seven to a page."""
        if page < 0:
            raise ValueError(f"page cannot be negative, got {page}")
        pagination = Pagination(page=page, limit=BACKLOG_PAGE_SIZE)
        where, params = build_backlog_filter(sort_filter)
        sort = order_clause(sort_filter.field, sort_filter.sort, DEFAULT_SORT)

        total = self._store.scalar(f"SELECT count(*) {_JOINS} WHERE {where}", params)
        pagination.apply_total(int(total or 0))

        rows = self._store.raw(
            f"SELECT bl.* {_JOINS} WHERE {where} ORDER BY {sort} LIMIT :limit OFFSET :offset",
            {**params, "limit": pagination.limit, "offset": pagination.offset()},
        )
        pagination.data = [
            _to_backlog(
                row,
                self._unit(row.get("unit_id")),
                _aging_days(row.get("date_of_inspection"), row.get("plan_replace_repair")),
            )
            for row in rows
        ]
        return pagination

    def update_backlog(self, backlog_input: RegisterBackLogInput, record_id: int) -> BackLog:
        """Overwrite every field of a live entry with the input's values."""
        updated = self._store.update("back_logs", record_id, as_record(backlog_input))
        return _to_backlog(updated, {})

    def delete_backlog(self, record_id: int) -> bool:
        """Soft-delete a live entry."""
        return self._store.soft_delete("back_logs", record_id)