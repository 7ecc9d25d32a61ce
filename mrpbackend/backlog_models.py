"""Backlog records, their inputs, filters and dashboard summaries."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional


def _uint(json_name: str, *, optional: bool = False) -> Any:
    return dataclasses.field(
        default=None if optional else 0,
        metadata={"json": json_name, "kind": int, "unsigned": True, "required": False},
    )


def _int(json_name: str) -> Any:
    return dataclasses.field(default=0, metadata={"json": json_name, "kind": int})


def _float(json_name: str, *, optional: bool = False) -> Any:
    return dataclasses.field(
        default=None if optional else 0.0, metadata={"json": json_name, "kind": float}
    )


def _str(json_name: str, *, optional: bool = False) -> Any:
    return dataclasses.field(
        default=None if optional else "", metadata={"json": json_name, "kind": str}
    )


def _nested(json_name: str, cls: type) -> Any:
    return dataclasses.field(default_factory=cls, metadata={"json": json_name, "kind": cls})


@dataclass
class BackLog:
    """A stored backlog entry; ``unit`` holds the related unit as a mapping."""

    id: int = _uint("ID")
    created_at: Optional[str] = _str("CreatedAt", optional=True)
    updated_at: Optional[str] = _str("UpdatedAt", optional=True)
    deleted_at: Optional[str] = _str("DeletedAt", optional=True)
    unit_id: int = _uint("unit_id")
    hm_breakdown: float = _float("hm_breakdown")
    problem: str = _str("problem")
    component: str = _str("component")
    part_number: str = _str("part_number")
    part_description: str = _str("part_description")
    qty_order: int = _uint("qty_order")
    date_of_inspection: str = _str("date_of_inspection")
    plan_replace_repair: Optional[str] = _str("plan_replace_repair", optional=True)
    hm_ready: Optional[float] = _float("hm_ready", optional=True)
    pp_number: Optional[str] = _str("pp_number", optional=True)
    po_number: Optional[str] = _str("po_number", optional=True)
    status: str = _str("status")
    aging_backlog_by_date: int = _int("AgingBacklogByDate")
    unit: dict = dataclasses.field(default_factory=dict, metadata={"json": "Unit", "kind": dict})


@dataclass
class RegisterBackLogInput:
    unit_id: int = _uint("unit_id")
    hm_breakdown: float = _float("hm_breakdown")
    problem: str = _str("problem")
    component: str = _str("component")
    part_number: str = _str("part_number")
    part_description: str = _str("part_description")
    qty_order: int = _uint("qty_order")
    date_of_inspection: str = _str("date_of_inspection")
    plan_replace_repair: Optional[str] = _str("plan_replace_repair", optional=True)
    hm_ready: Optional[float] = _float("hm_ready", optional=True)
    pp_number: Optional[str] = _str("pp_number", optional=True)
    po_number: Optional[str] = _str("po_number", optional=True)
    status: str = _str("status")


@dataclass
class SortFilterBackLog:
    field: str = _str("Field")
    sort: str = _str("Sort")
    brand_name: str = _str("BrandName")
    unit_id: str = _str("UnitId")
    hm_breakdown: str = _str("HMBreakdown")
    problem: str = _str("Problem")
    component: str = _str("Component")
    part_number: str = _str("PartNumber")
    part_description: str = _str("PartDescription")
    qty_order: str = _str("QtyOrder")
    date_of_inspection: str = _str("DateOfInspection")
    plan_replace_repair: str = _str("PlanReplaceRepair")
    aging_backlog_by_date: str = _str("AgingBacklogByDate")
    hm_ready: str = _str("HMReady")
    pp_number: str = _str("PPNumber")
    po_number: str = _str("PONumber")
    status: str = _str("Status")


@dataclass
class SortFilterBackLogSummary:
    field: str = _str("Field")
    sort: str = _str("Sort")
    brand_name: str = _str("BrandName")
    unit_id: str = _str("UnitId")
    hm_breakdown: str = _str("HMBreakdown")
    problem: str = _str("Problem")
    component: str = _str("Component")
    part_number: str = _str("PartNumber")
    part_description: str = _str("PartDescription")
    qty_order: str = _str("QtyOrder")
    date_of_inspection: str = _str("DateOfInspection")
    plan_replace_repair: str = _str("PlanReplaceRepair")
    hm_ready: str = _str("HMReady")
    pp_number: str = _str("PPNumber")
    po_number: str = _str("PONumber")
    status: str = _str("Status")


@dataclass
class SortFilterDashboardBacklog:
    year: str = _str("Year")


@dataclass
class BacklogSummary:
    """Backlog counts per status."""

    pending: int = _uint("pending")
    open: int = _uint("open")
    closed: int = _uint("closed")
    cancelled: int = _uint("cancelled")
    rejected: int = _uint("rejected")


@dataclass
class AgingSummary:
    """Status counts per aging bucket: 0-5, 6-15, 16-30 and over 30 days."""

    aging_total_1: BacklogSummary = _nested("aging_total_1", BacklogSummary)
    aging_total_2: BacklogSummary = _nested("aging_total_2", BacklogSummary)
    aging_total_3: BacklogSummary = _nested("aging_total_3", BacklogSummary)
    aging_total_4: BacklogSummary = _nested("aging_total_4", BacklogSummary)


@dataclass
class DashboardBackLog:
    total_backlog: int = _uint("total_backlog")
    total_1: int = _uint("total_1")
    total_2: int = _uint("total_2")
    total_3: int = _uint("total_3")
    total_4: int = _uint("total_4")
    summary: BacklogSummary = _nested("backlog_summary", BacklogSummary)
    aging_summary: AgingSummary = _nested("aging_summary", AgingSummary)


_AGING_BUCKETS = ("0_5", "6_15", "16_30", "30plus")
_STATUSES = ("pending", "open", "closed", "cancelled", "rejected")


def aging_summary_from_counts(counts: Mapping[str, Any]) -> AgingSummary:
    """Fold flat counts keyed like ``pending0_5`` or ``rejected30plus`` into buckets.

    Keys are matched case-insensitively; missing or null counts are zero.
    """
    folded = {str(key).lower(): value for key, value in counts.items()}
    buckets = []
    for bucket in _AGING_BUCKETS:
        values = {}
        for status in _STATUSES:
            raw = folded.get(f"{status}{bucket}")
            value = 0 if raw is None else int(raw)
            if value < 0:
                raise ValueError(f"{status}{bucket}: count cannot be negative, got {value}")
            values[status] = value
        buckets.append(BacklogSummary(**values))
    return AgingSummary(*buckets)