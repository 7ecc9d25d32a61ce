"""Employee records, their inputs, listing filters and dashboard summaries."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

MONTHS = (
    "januari",
    "februari",
    "maret",
    "april",
    "mei",
    "juni",
    "juli",
    "agustus",
    "september",
    "oktober",
    "november",
    "desember",
)


def _uint(json_name: str, *, required: bool = False, optional: bool = False) -> Any:
    return dataclasses.field(
        default=None if optional else 0,
        metadata={"json": json_name, "kind": int, "unsigned": True, "required": required},
    )


def _str(json_name: str, *, required: bool = False, optional: bool = False) -> Any:
    return dataclasses.field(
        default=None if optional else "",
        metadata={"json": json_name, "kind": str, "required": required},
    )


def _related(json_name: str, *, optional: bool = False) -> Any:
    """A related record, kept as a plain mapping."""
    if optional:
        return dataclasses.field(default=None, metadata={"json": json_name, "kind": dict})
    return dataclasses.field(default_factory=dict, metadata={"json": json_name, "kind": dict})


def _many(json_name: str, *, optional: bool = False) -> Any:
    if optional:
        return dataclasses.field(default=None, metadata={"json": json_name, "kind": list})
    return dataclasses.field(default_factory=list, metadata={"json": json_name, "kind": list})


def _nested(json_name: str, cls: type) -> Any:
    return dataclasses.field(default_factory=cls, metadata={"json": json_name, "kind": cls})


def _count(json_name: str) -> Any:
    return _uint(json_name)


def _month_name(month: int | str) -> str:
    if isinstance(month, bool):
        raise ValueError(f"not a month: {month!r}")
    if isinstance(month, int):
        if 1 <= month <= 12:
            return MONTHS[month - 1]
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if isinstance(month, str) and month.strip().lower() in MONTHS:
        return month.strip().lower()
    raise ValueError(f"not a month: {month!r}")


@dataclass
class Employee:
    """A stored employee with its related records as plain mappings."""

    id: int = _uint("ID")
    created_at: Optional[str] = _str("CreatedAt", optional=True)
    updated_at: Optional[str] = _str("UpdatedAt", optional=True)
    deleted_at: Optional[str] = _str("DeletedAt", optional=True)
    nomor_karyawan: str = _str("nomor_karyawan")
    department_id: int = _uint("department_id")
    firstname: str = _str("firstname")
    lastname: str = _str("lastname")
    phone_number: str = _str("phone_number")
    email: str = _str("email")
    level: str = _str("level")
    status: str = _str("status")
    role_id: int = _uint("role_id")
    kartu_keluarga_id: int = _uint("kartu_keluarga_id")
    ktp_id: int = _uint("ktp_id")
    pendidikan_id: int = _uint("pendidikan_id")
    hired_by: str = _str("hire_by")
    laporan_id: int = _uint("laporan_id")
    apd_id: Optional[int] = _uint("apd_id", optional=True)
    bank_id: int = _uint("bank_id")
    bpjs_kesehatan_id: Optional[int] = _uint("bpjs_kesehatan_id", optional=True)
    bpjs_ketenagakerjaan_id: Optional[int] = _uint("bpjs_ketenagakerjaan_id", optional=True)
    npwp_id: Optional[int] = _uint("npwp_id", optional=True)
    position_id: int = _uint("position_id")
    date_of_hire: str = _str("date_of_hire")

    department: dict = _related("Department")
    role: dict = _related("Role")
    kartu_keluarga: dict = _related("KartuKeluarga")
    ktp: dict = _related("KTP")
    pendidikan: dict = _related("Pendidikan")
    doh: list = _many("DOH")
    jabatan: list = _many("Jabatan")
    sertifikat: list = _many("Sertifikat")
    mcu: list = _many("MCU")
    laporan: dict = _related("Laporan")
    apd: Optional[dict] = _related("APD", optional=True)
    npwp: Optional[dict] = _related("NPWP", optional=True)
    bank: dict = _related("Bank")
    bpjs_kesehatan: Optional[dict] = _related("BPJSKesehatan", optional=True)
    bpjs_ketenagakerjaan: Optional[dict] = _related("BPJSKetenagakerjaan", optional=True)
    history: Optional[list] = _many("History", optional=True)
    position: dict = _related("Position")


@dataclass
class RegisterEmployeeInput:
    """A new employee together with the records created alongside it."""

    nomor_karyawan: str = _str("nomor_karyawan", required=True)
    department_id: int = _uint("department_id", required=True)
    firstname: str = _str("firstname", required=True)
    lastname: str = _str("lastname")
    phone_number: str = _str("phone_number")
    email: str = _str("email")
    level: str = _str("level", required=True)
    status: str = _str("status", required=True)
    role_id: int = _uint("role_id", required=True)
    hired_by: str = _str("hire_by", required=True)
    position_id: int = _uint("position_id", required=True)
    date_of_hire: str = _str("date_of_hire")

    kartu_keluarga: dict = _related("KartuKeluarga")
    ktp: dict = _related("KTP")
    pendidikan: dict = _related("Pendidikan")
    laporan: dict = _related("Laporan")
    apd: Optional[dict] = _related("APD", optional=True)
    npwp: Optional[dict] = _related("NPWP", optional=True)
    bank: dict = _related("Bank")
    bpjs_kesehatan: Optional[dict] = _related("BPJSKesehatan", optional=True)
    bpjs_ketenagakerjaan: Optional[dict] = _related("BPJSKetenagakerjaan", optional=True)
    doh: list = _many("DOH")
    jabatan: list = _many("Jabatan")
    sertifikat: list = _many("Sertifikat")
    mcu: list = _many("MCU")
    history: Optional[list] = _many("History", optional=True)
    position: dict = _related("Position")


@dataclass
class UpdateEmployeeInput:
    """New values for an existing employee and its one-to-one records."""

    nomor_karyawan: str = _str("nomor_karyawan", required=True)
    department_id: int = _uint("department_id", required=True)
    firstname: str = _str("firstname", required=True)
    lastname: str = _str("lastname")
    phone_number: str = _str("phone_number")
    email: str = _str("email")
    level: str = _str("level", required=True)
    status: str = _str("status", required=True)
    role_id: int = _uint("role_id", required=True)
    hired_by: str = _str("hire_by", required=True)
    position_id: int = _uint("position_id", required=True)
    date_of_hire: str = _str("date_of_hire")

    kartu_keluarga: dict = _related("KartuKeluarga")
    ktp: dict = _related("KTP")
    pendidikan: dict = _related("Pendidikan")
    laporan: dict = _related("Laporan")
    apd: Optional[dict] = _related("APD", optional=True)
    npwp: Optional[dict] = _related("NPWP", optional=True)
    bank: dict = _related("Bank")
    bpjs_kesehatan: Optional[dict] = _related("BPJSKesehatan", optional=True)
    bpjs_ketenagakerjaan: Optional[dict] = _related("BPJSKetenagakerjaan", optional=True)
    position: dict = _related("Position")


@dataclass
class SortFilterEmployee:
    field: str = _str("Field")
    sort: str = _str("Sort")
    code_emp: str = _str("code_emp", required=True)
    nomor_karyawan: str = _str("nomor_karyawan", required=True)
    department_id: str = _str("department_id", required=True)
    firstname: str = _str("firstname", required=True)
    hire_by: str = _str("hire_by")
    agama: str = _str("agama")
    level: str = _str("level", required=True)
    gender: str = _str("gender")
    kategori_lokal_non_lokal: str = _str("kategori_lokal_non_lokal")
    kategori_triwulan: str = _str("kategori_triwulan")
    status: str = _str("status")
    kontrak: str = _str("kontrak")
    role_id: str = _str("role_id")
    position_id: str = _str("position_id")


@dataclass
class BasedOnRing:
    ring1: int = _count("ring_1")
    ring2: int = _count("ring_2")
    ring3: int = _count("ring_3")
    luar_ring: int = _count("luar_ring")


@dataclass
class BasedOnDepartment:
    engineering: int = _count("engineering")
    finance: int = _count("finance")
    hrga: int = _count("hrga")
    operation: int = _count("operation")
    plant: int = _count("plant")
    she: int = _count("she")
    coal_loading: int = _count("coal_loading")
    stockpile: int = _count("stockpile")
    shipping: int = _count("shipping")
    plant_logistic: int = _count("plant_logistic")
    keamanan_eksternal: int = _count("keamanan_eksternal")
    oshe: int = _count("oshe")
    management: int = _count("management")


@dataclass
class BasedOnEducation:
    edu1: int = _count("education_1")
    edu2: int = _count("education_2")
    edu3: int = _count("education_3")
    edu4: int = _count("education_4")
    edu5: int = _count("education_5")


@dataclass
class BasedOnYear:
    year1: int = _count("year_1")
    year2: int = _count("year_2")
    year3: int = _count("year_3")
    year4: int = _count("year_4")


@dataclass
class BasedOnAge:
    stage1: int = _count("stage_1")
    stage2: int = _count("stage_2")
    stage3: int = _count("stage_3")
    stage4: int = _count("stage_4")
    stage5: int = _count("stage_5")


@dataclass
class BasedOnLokal:
    lokal: int = _count("lokal")
    non_lokal: int = _count("non_lokal")


@dataclass
class DashboardEmployee:
    total_employee: int = _count("total_employee")
    total_male: int = _count("total_male")
    total_female: int = _count("total_female")
    hire_ho: int = _count("hired_ho")
    hire_site: int = _count("hired_site")
    based_on_age: BasedOnAge = _nested("based_on_age", BasedOnAge)
    based_on_year: BasedOnYear = _nested("based_on_year", BasedOnYear)
    based_on_education: BasedOnEducation = _nested("based_on_education", BasedOnEducation)
    based_on_department: BasedOnDepartment = _nested("based_on_department", BasedOnDepartment)
    based_on_ring: BasedOnRing = _nested("based_on_ring", BasedOnRing)
    based_on_lokal: BasedOnLokal = _nested("based_on_lokal", BasedOnLokal)


@dataclass
class SortFilterDashboardEmployee:
    pt: str = _str("pt")
    department_id: str = _str("department_id")


@dataclass
class DataStatus:
    new_hire: int = _count("new_hire")
    berakhir_pkwt: int = _count("berakhir_pkwt")
    resign: int = _count("resign")
    phk: int = _count("phk")


@dataclass
class SortFilterDashboardEmployeeTurnOver:
    pt: str = _str("pt")
    year: str = _str("year")


@dataclass
class DashboardEmployeeTurnOver:
    total_hire: int = _count("total_hire")
    total_resign: int = _count("total_resign")
    total_berakhir_pkwt: int = _count("total_berakhir_pkwt")
    total_phk: int = _count("total_phk")
    januari: DataStatus = _nested("januari", DataStatus)
    februari: DataStatus = _nested("februari", DataStatus)
    maret: DataStatus = _nested("maret", DataStatus)
    april: DataStatus = _nested("april", DataStatus)
    mei: DataStatus = _nested("mei", DataStatus)
    juni: DataStatus = _nested("juni", DataStatus)
    juli: DataStatus = _nested("juli", DataStatus)
    agustus: DataStatus = _nested("agustus", DataStatus)
    september: DataStatus = _nested("september", DataStatus)
    oktober: DataStatus = _nested("oktober", DataStatus)
    november: DataStatus = _nested("november", DataStatus)
    desember: DataStatus = _nested("desember", DataStatus)

    def set_month(self, month: int | str, status: DataStatus) -> None:
        """Store the figures of one month, given by number (1-12) or name."""
        if not isinstance(status, DataStatus):
            raise TypeError(f"expected DataStatus, got {type(status).__name__}")
        setattr(self, _month_name(month), status)


@dataclass
class DepartmentName:
    operation: int = _count("operation")
    plant: int = _count("plant")
    hrga: int = _count("hrga")
    she: int = _count("she")
    finance: int = _count("finance")
    engineering: int = _count("engineering")
    coal_loading: int = _count("coal_loading")
    stockpile: int = _count("stockpile")
    shipping: int = _count("shipping")
    plant_logistic: int = _count("plant_logistic")
    keamanan_eksternal: int = _count("keamanan_eksternal")
    oshe: int = _count("oshe")
    management: int = _count("management")


@dataclass
class DashboardEmployeeKontrak:
    januari: DepartmentName = _nested("januari", DepartmentName)
    februari: DepartmentName = _nested("februari", DepartmentName)
    maret: DepartmentName = _nested("maret", DepartmentName)
    april: DepartmentName = _nested("april", DepartmentName)
    mei: DepartmentName = _nested("mei", DepartmentName)
    juni: DepartmentName = _nested("juni", DepartmentName)
    juli: DepartmentName = _nested("juli", DepartmentName)
    agustus: DepartmentName = _nested("agustus", DepartmentName)
    september: DepartmentName = _nested("september", DepartmentName)
    oktober: DepartmentName = _nested("oktober", DepartmentName)
    november: DepartmentName = _nested("november", DepartmentName)
    desember: DepartmentName = _nested("desember", DepartmentName)

    def set_month(self, month: int | str, counts: DepartmentName) -> None:
        """Store the per-department counts of one month, by number (1-12) or name."""
        if not isinstance(counts, DepartmentName):
            raise TypeError(f"expected DepartmentName, got {type(counts).__name__}")
        setattr(self, _month_name(month), counts)