"""Inputs, report rows and filters of the master-data endpoints."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


class ValidationError(ValueError):
    """Raised when input data is missing required values or has wrong types."""


def _uint(json_name: str, *, required: bool = False) -> Any:
    return dataclasses.field(
        default=0,
        metadata={"json": json_name, "kind": int, "unsigned": True, "required": required},
    )


def _str(json_name: str, *, required: bool = False) -> Any:
    return dataclasses.field(
        default="", metadata={"json": json_name, "kind": str, "required": required}
    )


def _items(json_name: str) -> Any:
    return dataclasses.field(
        default_factory=list, metadata={"json": json_name, "kind": list, "required": False}
    )


def _json_name(f: dataclasses.Field) -> str:
    return f.metadata.get("json", f.name)


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return as_record(value)
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def as_record(instance: Any) -> dict[str, Any]:
    """The instance as a mapping keyed by its JSON field names."""
    if not dataclasses.is_dataclass(instance) or isinstance(instance, type):
        raise TypeError(f"expected a model instance, got {type(instance).__name__}")
    return {
        _json_name(f): _to_plain(getattr(instance, f.name))
        for f in dataclasses.fields(instance)
    }


def _check_value(f: dataclasses.Field, value: Any) -> Any:
    kind = f.metadata.get("kind")
    name = _json_name(f)
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name}: expected an integer, got {value!r}")
        if f.metadata.get("unsigned") and value < 0:
            raise ValidationError(f"{name}: expected a non-negative integer, got {value}")
    elif kind is str:
        if not isinstance(value, str):
            raise ValidationError(f"{name}: expected a string, got {value!r}")
    elif kind is list:
        if not isinstance(value, list):
            raise ValidationError(f"{name}: expected a list, got {value!r}")
        return list(value)
    return value


def from_record(cls: type[T], record: Mapping[str, Any]) -> T:
    """Build ``cls`` from a mapping keyed by JSON field names.

    Keys match exactly or, failing that, case-insensitively; unknown keys are
    ignored and null or missing values keep the field's default.
    """
    if not isinstance(record, Mapping):
        raise ValidationError(f"expected an object, got {type(record).__name__}")
    folded = {str(key).lower(): key for key in record}
    values: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        name = _json_name(f)
        if name in record:
            raw = record[name]
        elif name.lower() in folded:
            raw = record[folded[name.lower()]]
        else:
            continue
        if raw is None:
            continue
        values[f.name] = _check_value(f, raw)
    return cls(**values)


def validate(instance: T) -> T:
    """Check that every required field holds a non-empty value; return the instance."""
    missing = [
        _json_name(f)
        for f in dataclasses.fields(instance)
        if f.metadata.get("required") and getattr(instance, f.name) in (0, "", None)
    ]
    if missing:
        raise ValidationError("required field(s) missing: " + ", ".join(missing))
    return instance


@dataclass
class RegisterUserRoleInput:
    user_id: int = _uint("user_id", required=True)
    role_id: int = _uint("role_id", required=True)


@dataclass
class RegisterBrandInput:
    brand_name: str = _str("brand_name", required=True)


@dataclass
class RegisterHeavyEquipmentInput:
    brand_id: int = _uint("brand_id", required=True)
    heavy_equipment_name: str = _str("heavy_equipment_name", required=True)


@dataclass
class RegisterSeriesInput:
    brand_id: int = _uint("brand_id", required=True)
    heavy_equipment_id: int = _uint("heavy_equipment_id", required=True)
    series_name: str = _str("series_name", required=True)


@dataclass
class RegisterKartuKeluargaInput:
    nomor_kartu_keluarga: str = _str("nomor_kartu_keluarga")
    nama_ibu_kandung: str = _str("nama_ibu_kandung")
    kontak_darurat: str = _str("kontak_darurat")
    nama_kontak_darurat: str = _str("nama_kontak_darurat")
    hubungan_kontak_darurat: str = _str("hubungan_kontak_darurat")


@dataclass
class RegisterKTPInput:
    nama_sesuai_ktp: str = _str("nama_sesuai_ktp")
    nomor_ktp: str = _str("nomor_ktp")
    tempat_lahir: str = _str("tempat_lahir")
    tanggal_lahir: str = _str("tanggal_lahir")
    gender: str = _str("gender")
    alamat: str = _str("alamat")
    rt: str = _str("rt")
    rw: str = _str("rw")
    kel: str = _str("kel")
    kec: str = _str("kec")
    kota: str = _str("kota")
    prov: str = _str("prov")
    kode_pos: str = _str("kode_pos")
    golongan_darah: str = _str("golongan_darah")
    agama: str = _str("agama")
    ring_ktp: str = _str("ringktp")


@dataclass
class RegisterPendidikanInput:
    pendidikan_label: str = _str("pendidikan_label")
    pendidikan_terakhir: str = _str("pendidikan_terakhir")
    jurusan: str = _str("jurusan")


@dataclass
class RegisterDOHInput:
    employee_id: int = _uint("employee_id")
    tanggal_doh: str = _str("tanggal_doh")
    tanggal_end_doh: str = _str("tanggal_end_doh")
    pt: str = _str("pt")
    penempatan: str = _str("penempatan")
    status_kontrak: str = _str("status_kontrak")


@dataclass
class RegisterJabatanInput:
    employee_id: int = _uint("employee_id")
    date_move: str = _str("date_move")
    position_id: int = _uint("position_id")


@dataclass
class RegisterSertifikatInput:
    employee_id: int = _uint("employee_id")
    date_effective: str = _str("date_effective")
    sertifikat: str = _str("sertifikat")
    remark: str = _str("remark")


@dataclass
class RegisterMCUInput:
    employee_id: int = _uint("employee_id")
    date_mcu: str = _str("date_mcu")
    date_end_mcu: str = _str("date_end_mcu")
    hasil_mcu: str = _str("hasil_mcu")
    mcu: str = _str("mcu")


@dataclass
class RegisterHistoryInput:
    employee_id: int = _uint("employee_id")
    status_terakhir: str = _str("status_terakhir")
    tanggal: str = _str("tanggal")
    keterangan: str = _str("keterangan")


@dataclass
class EmployeeDOHExpired:
    id: int = _uint("id")
    employee_id: int = _uint("employee_id")
    tanggal_doh: str = _str("tanggal_doh")
    tanggal_end_doh: str = _str("tanggal_end_doh")
    firstname: str = _str("firstname")
    lastname: str = _str("lastname")
    department_name: str = _str("department_name")
    position_name: str = _str("position_name")


@dataclass
class EmployeeMCUBerkala:
    id: int = _uint("id")
    employee_id: int = _uint("employee_id")
    date_mcu: str = _str("date_mcu")
    date_end_mcu: str = _str("date_end_mcu")
    firstname: str = _str("firstname")
    lastname: str = _str("lastname")
    department_name: str = _str("department_name")
    position_name: str = _str("position_name")


@dataclass
class SortFilterDohKontrak:
    code_emp: str = _str("code_emp")
    pt: str = _str("pt")
    year: str = _str("year")
    field: str = _str("Field")
    sort: str = _str("Sort")


@dataclass
class MasterData:
    """Every master table at once; rows are plain mappings."""

    brand: list = _items("brand")
    heavy_equipment: list = _items("heavy_equipment")
    series: list = _items("series")
    department: list = _items("department")
    department_form: list = _items("department_form")
    form: list = _items("form")
    role: list = _items("role")
    role_form: list = _items("role_form")
    user_role: list = _items("user_role")