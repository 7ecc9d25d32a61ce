import pytest

from mrpbackend.allmaster_models import ValidationError, as_record, from_record
from mrpbackend.backlog_models import (
    AgingSummary,
    BackLog,
    BacklogSummary,
    DashboardBackLog,
    RegisterBackLogInput,
    SortFilterBackLog,
    SortFilterDashboardBacklog,
    aging_summary_from_counts,
)


def test_register_input_round_trip():
    payload = {
        "unit_id": 4,
        "hm_breakdown": 1200.5,
        "problem": "Leak",
        "qty_order": 2,
        "date_of_inspection": "2024-03-01",
        "plan_replace_repair": "2024-03-10",
        "pp_number": None,
        "status": "OPEN",
    }
    item = from_record(RegisterBackLogInput, payload)
    assert item.pp_number is None
    assert item.plan_replace_repair == "2024-03-10"
    assert from_record(RegisterBackLogInput, as_record(item)) == item


def test_register_input_rejects_negative_quantity():
    with pytest.raises(ValidationError):
        from_record(RegisterBackLogInput, {"qty_order": -1})


def test_backlog_keeps_unit_mapping():
    entry = from_record(BackLog, {"ID": 8, "Unit": {"id": 4}, "AgingBacklogByDate": 9})
    record = as_record(entry)
    assert record["Unit"] == {"id": 4}
    assert record["AgingBacklogByDate"] == 9
    assert record["hm_ready"] is None


def test_sort_filters_read_go_field_names():
    sf = from_record(SortFilterBackLog, {"Field": "bl.id", "Sort": "asc", "BrandName": "CAT"})
    assert (sf.field, sf.sort, sf.brand_name) == ("bl.id", "asc", "CAT")
    assert from_record(SortFilterDashboardBacklog, {"Year": "2024"}).year == "2024"


def test_aging_summary_from_counts_places_each_count():
    counts = {"pending0_5": 1, "open6_15": 2, "closed16_30": 3, "rejected30plus": 4}
    summary = aging_summary_from_counts(counts)
    assert summary.aging_total_1.pending == 1
    assert summary.aging_total_2.open == 2
    assert summary.aging_total_3.closed == 3
    assert summary.aging_total_4.rejected == 4
    assert summary.aging_total_1.open == 0


def test_aging_summary_case_insensitive_and_null():
    summary = aging_summary_from_counts({"Cancelled6_15": 5, "pending0_5": None})
    assert summary.aging_total_2.cancelled == 5
    assert summary.aging_total_1 == BacklogSummary()


def test_aging_summary_empty_is_all_zero():
    assert aging_summary_from_counts({}) == AgingSummary()


def test_aging_summary_rejects_negative():
    with pytest.raises(ValueError):
        aging_summary_from_counts({"open0_5": -1})


def test_dashboard_serialization_keys():
    dash = DashboardBackLog(total_backlog=3)
    dash.summary.open = 3
    record = as_record(dash)
    assert record["total_backlog"] == 3
    assert record["backlog_summary"]["open"] == 3
    assert set(record["aging_summary"]) == {
        "aging_total_1",
        "aging_total_2",
        "aging_total_3",
        "aging_total_4",
    }