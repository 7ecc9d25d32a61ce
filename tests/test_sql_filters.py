import datetime as dt

import pytest

from mrpbackend.sql_filters import company_exclusion, order_clause, pt_filter, resolve_year


def test_pt_filter_defaults_to_group_one():
    clause = pt_filter("", "1")
    assert "'%MRP%'" in clause
    assert "'%TRIOP%'" in clause
    assert "'%MJSU%'" not in clause


def test_pt_filter_accepts_numeric_code():
    assert pt_filter("  ", 2) == pt_filter("", "2")


def test_pt_filter_explicit_list_overrides_code():
    clause = pt_filter("PT. MJSU, PT. IBS", "1")
    assert "'%MJSU%'" in clause and "'%IBS%'" in clause
    assert "'%MRP%'" not in clause
    assert " OR " in clause


def test_pt_filter_single_company():
    assert pt_filter("PT. MRP", "") == "(cast(nomor_karyawan AS TEXT) ILIKE '%MRP%')"


@pytest.mark.parametrize("pt,code", [("", "3"), ("PT. OTHER", "1"), ("", "")])
def test_pt_filter_without_valid_company_matches_nothing(pt, code):
    assert pt_filter(pt, code) == "(1=0)"


def test_company_exclusion_group_two():
    clause = company_exclusion("2")
    assert "cast(e.nomor_karyawan AS TEXT) NOT ILIKE '%MRP%'" in clause
    assert "cast(e.nomor_karyawan AS TEXT) NOT ILIKE '%TRIOP%'" in clause
    assert clause.endswith(" AND cast(status AS TEXT) ILIKE 'AKTIF'")


def test_company_exclusion_without_prefix_or_status():
    clause = company_exclusion(1, prefix="", require_active=False)
    assert "e." not in clause
    assert "AKTIF" not in clause
    assert "NOT ILIKE '%IBS%'" in clause


def test_company_exclusion_unknown_code_is_empty():
    assert company_exclusion("9") == ""


def test_resolve_year_keeps_given_year():
    assert resolve_year("2023", dt.date(2030, 1, 1)) == "2023"


def test_resolve_year_blank_uses_today():
    assert resolve_year("   ", dt.date(2024, 5, 1)) == "2024"


def test_order_clause_uses_field_and_sort():
    assert order_clause("firstname", "asc", "employee_id") == "firstname asc"


@pytest.mark.parametrize("field,sort", [("", "asc"), ("firstname", ""), ("", "")])
def test_order_clause_falls_back_to_default(field, sort):
    assert order_clause(field, sort, "employee_id") == "employee_id"