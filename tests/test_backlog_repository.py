import pytest

from mrpbackend.backlog_models import RegisterBackLogInput, SortFilterBackLog
from mrpbackend.backlog_repository import (
    BackLogRepository,
    build_backlog_filter,
    null_if_blank,
)
from mrpbackend.store import RecordNotFound, Store

_DDL = (
    "CREATE TABLE brands (id INTEGER PRIMARY KEY, brand_name TEXT, deleted_at DATETIME)",
    "CREATE TABLE heavy_equipments (id INTEGER PRIMARY KEY, brand_id INTEGER, "
    "heavy_equipment_name TEXT, deleted_at DATETIME)",
    "CREATE TABLE series (id INTEGER PRIMARY KEY, brand_id INTEGER, heavy_equipment_id INTEGER, "
    "series_name TEXT, deleted_at DATETIME)",
    "CREATE TABLE units (id INTEGER PRIMARY KEY, brand_id INTEGER, heavy_equipment_id INTEGER, "
    "series_id INTEGER, deleted_at DATETIME)",
    "CREATE TABLE back_logs (id INTEGER PRIMARY KEY, created_at DATETIME, updated_at DATETIME, "
    "deleted_at DATETIME, unit_id INTEGER, hm_breakdown REAL, problem TEXT, component TEXT, "
    "part_number TEXT, part_description TEXT, qty_order INTEGER, date_of_inspection TEXT, "
    "plan_replace_repair TEXT, hm_ready REAL, pp_number TEXT, po_number TEXT, status TEXT)",
)


@pytest.fixture
def store():
    s = Store("sqlite://")
    for statement in _DDL:
        s.raw(statement)
    s.insert("brands", {"brand_name": "Komatsu"})
    s.insert("heavy_equipments", {"brand_id": 1, "heavy_equipment_name": "Excavator"})
    s.insert("series", {"brand_id": 1, "heavy_equipment_id": 1, "series_name": "PC200"})
    s.insert("units", {"brand_id": 1, "heavy_equipment_id": 1, "series_id": 1})
    return s


@pytest.fixture
def repo(store):
    return BackLogRepository(store)


def _input(**kwargs):
    values = dict(
        unit_id=1,
        problem="Leak",
        component="Hydraulic",
        date_of_inspection="2024-01-01",
        status="OPEN",
    )
    values.update(kwargs)
    return RegisterBackLogInput(**values)


def test_null_if_blank():
    assert null_if_blank(None) is None
    assert null_if_blank("   ") is None
    assert null_if_blank("2024-02-01") == "2024-02-01"


def test_empty_filter_is_base_condition():
    where, params = build_backlog_filter(SortFilterBackLog())
    assert where == "bl.id > 0 AND bl.deleted_at IS NULL"
    assert params == {}


def test_invalid_date_filter_is_ignored():
    where, params = build_backlog_filter(SortFilterBackLog(date_of_inspection="2024-13-45"))
    assert "date_of_inspection" not in where
    assert params == {}


def test_valid_date_and_text_filters():
    where, params = build_backlog_filter(
        SortFilterBackLog(date_of_inspection="2024-01-01", problem="LeAk")
    )
    assert params["date_of_inspection"] == "2024-01-01"
    assert params["problem"] == "%leak%"
    assert ":problem" in where


def test_create_blank_plan_stored_as_null(repo):
    created = repo.create_backlog(_input(plan_replace_repair="  "))
    found = repo.find_backlog_by_id(created.id)
    assert found.plan_replace_repair is None
    assert found.problem == "Leak"
    assert found.unit["Brand"]["brand_name"] == "Komatsu"
    assert found.unit["Series"]["series_name"] == "PC200"


def test_find_backlog_returns_all(repo):
    repo.create_backlog(_input(problem="A"))
    repo.create_backlog(_input(problem="B"))
    problems = [b.problem for b in repo.find_backlog()]
    assert problems == ["A", "B"]


def test_list_backlog_pages_of_seven(repo):
    for i in range(8):
        repo.create_backlog(_input(problem=f"P{i}"))
    first = repo.list_backlog(1, SortFilterBackLog())
    second = repo.list_backlog(2, SortFilterBackLog())
    assert first.limit == 7
    assert first.total_rows == 8
    assert len(first.data) == 7
    assert len(second.data) == 1
    assert first.data[0].problem == "P7"
    assert second.data[0].problem == "P0"


def test_list_backlog_filter_and_aging(repo):
    repo.create_backlog(_input(problem="Engine Leak", plan_replace_repair="2024-01-11"))
    repo.create_backlog(_input(problem="Tire"))
    page = repo.list_backlog(1, SortFilterBackLog(problem="leak"))
    assert page.total_rows == 1
    assert [b.problem for b in page.data] == ["Engine Leak"]
    assert page.data[0].aging_backlog_by_date == 10


def test_list_backlog_brand_filter(repo):
    repo.create_backlog(_input())
    assert repo.list_backlog(1, SortFilterBackLog(brand_name="komatsu pc")).total_rows == 1
    assert repo.list_backlog(1, SortFilterBackLog(brand_name="volvo")).total_rows == 0


def test_list_backlog_negative_page(repo):
    with pytest.raises(ValueError):
        repo.list_backlog(-1, SortFilterBackLog())


def test_update_backlog_overwrites(repo):
    created = repo.create_backlog(_input())
    updated = repo.update_backlog(_input(problem="Fixed", status="CLOSED"), created.id)
    assert updated.problem == "Fixed"
    assert repo.find_backlog_by_id(created.id).status == "CLOSED"


def test_update_missing_raises(repo):
    with pytest.raises(RecordNotFound):
        repo.update_backlog(_input(), 99)


def test_delete_backlog(repo):
    created = repo.create_backlog(_input())
    assert repo.delete_backlog(created.id) is True
    with pytest.raises(RecordNotFound):
        repo.find_backlog_by_id(created.id)
    with pytest.raises(RecordNotFound):
        repo.delete_backlog(created.id)
    assert repo.find_backlog() == []