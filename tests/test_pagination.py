from dataclasses import dataclass, field

import pytest

from mrpbackend.pagination import Pagination, page_count


def test_zero_page_and_limit_fall_back_to_defaults():
    pagination = Pagination(page=0, limit=0)
    assert pagination.page == 1
    assert pagination.limit == 10


def test_first_page_starts_at_zero():
    assert Pagination(page=1, limit=7).offset() == 0


@pytest.mark.parametrize("limit", [1, 7, 10, 25])
def test_consecutive_pages_are_one_limit_apart(limit):
    first = Pagination(page=4, limit=limit)
    second = Pagination(page=5, limit=limit)
    assert second.offset() - first.offset() == limit


@pytest.mark.parametrize("total,limit", [(1, 10), (10, 10), (11, 10), (99, 7), (70, 7)])
def test_page_count_covers_all_rows_without_spare_page(total, limit):
    pages = page_count(total, limit)
    assert pages * limit >= total
    assert (pages - 1) * limit < total


def test_page_count_of_no_rows_is_zero():
    assert page_count(0, 10) == 0


def test_page_count_rejects_zero_limit():
    with pytest.raises(ValueError):
        page_count(5, 0)


def test_apply_total_sets_rows_and_pages():
    pagination = Pagination(page=2, limit=7)
    pagination.apply_total(15)
    assert pagination.total_rows == 15
    assert pagination.total_pages == page_count(15, 7)


def test_to_json_uses_wire_names():
    pagination = Pagination(page=1, limit=10, data=[])
    pagination.apply_total(0)
    assert set(pagination.to_json()) == {"limit", "page", "total_rows", "total_pages", "data"}


def test_to_json_serializes_dataclass_rows_by_json_name():
    @dataclass
    class Row:
        employee_id: int = field(default=0, metadata={"json": "EmployeeId"})

    pagination = Pagination(data=[Row(employee_id=3)])
    assert pagination.to_json()["data"] == [{"EmployeeId": 3}]