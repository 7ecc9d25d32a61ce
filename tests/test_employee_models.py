import pytest

from mrpbackend.allmaster_models import ValidationError, as_record, from_record, validate
from mrpbackend.employee_models import (
    DashboardEmployee,
    DashboardEmployeeKontrak,
    DashboardEmployeeTurnOver,
    DataStatus,
    DepartmentName,
    Employee,
    RegisterEmployeeInput,
    SortFilterEmployee,
    UpdateEmployeeInput,
)


def _employee_payload():
    return {
        "nomor_karyawan": "MRP-001",
        "department_id": 3,
        "firstname": "Budi",
        "level": "STAFF",
        "status": "AKTIF",
        "role_id": 2,
        "hire_by": "SITE",
        "position_id": 7,
        "KTP": {"nomor_ktp": "KTP-X"},
        "DOH": [{"tanggal_doh": "2024-01-01"}],
    }


def test_register_input_reads_json_names():
    item = from_record(RegisterEmployeeInput, _employee_payload())
    assert item.hired_by == "SITE"
    assert item.ktp == {"nomor_ktp": "KTP-X"}
    assert item.doh == [{"tanggal_doh": "2024-01-01"}]
    assert validate(item) is item


def test_register_input_round_trip():
    item = from_record(RegisterEmployeeInput, _employee_payload())
    again = from_record(RegisterEmployeeInput, as_record(item))
    assert again == item
    assert as_record(item)["hire_by"] == "SITE"


def test_register_input_missing_required_fields():
    payload = _employee_payload()
    del payload["firstname"]
    del payload["role_id"]
    item = from_record(RegisterEmployeeInput, payload)
    with pytest.raises(ValidationError) as info:
        validate(item)
    assert "firstname" in str(info.value)
    assert "role_id" in str(info.value)


def test_update_input_rejects_wrong_type():
    payload = _employee_payload()
    payload["department_id"] = "three"
    with pytest.raises(ValidationError):
        from_record(UpdateEmployeeInput, payload)


def test_update_input_has_no_history_list():
    record = as_record(UpdateEmployeeInput())
    assert "History" not in record
    assert "DOH" not in record
    assert record["APD"] is None


def test_employee_optional_ids_stay_none():
    emp = from_record(Employee, {"ID": 5, "apd_id": None, "npwp_id": 9})
    assert emp.id == 5
    assert emp.apd_id is None
    assert emp.npwp_id == 9
    assert from_record(Employee, as_record(emp)) == emp


def test_sort_filter_uses_go_field_names_for_sorting():
    sf = from_record(SortFilterEmployee, {"Field": "firstname", "Sort": "asc", "code_emp": "1"})
    assert (sf.field, sf.sort, sf.code_emp) == ("firstname", "asc", "1")


def test_dashboard_nested_serialization():
    dash = DashboardEmployee(total_employee=4)
    dash.based_on_age.stage1 = 4
    record = as_record(dash)
    assert record["total_employee"] == 4
    assert record["based_on_age"]["stage_1"] == 4
    assert record["based_on_education"]["education_5"] == 0
    assert set(record["based_on_lokal"]) == {"lokal", "non_lokal"}


def test_turnover_set_month_by_number_and_name():
    dash = DashboardEmployeeTurnOver()
    first = DataStatus(new_hire=2, resign=1)
    last = DataStatus(phk=3)
    dash.set_month(1, first)
    dash.set_month("Desember", last)
    assert dash.januari is first
    assert dash.desember is last
    assert as_record(dash)["desember"]["phk"] == 3


@pytest.mark.parametrize("month", [0, 13, "smarch", True])
def test_turnover_set_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        DashboardEmployeeTurnOver().set_month(month, DataStatus())


def test_turnover_set_month_rejects_wrong_type():
    with pytest.raises(TypeError):
        DashboardEmployeeTurnOver().set_month(2, DepartmentName())


def test_kontrak_set_month():
    dash = DashboardEmployeeKontrak()
    counts = DepartmentName(plant=6, shipping=1)
    dash.set_month(6, counts)
    assert dash.juni is counts
    assert dash.mei == DepartmentName()
    with pytest.raises(TypeError):
        dash.set_month(6, DataStatus())