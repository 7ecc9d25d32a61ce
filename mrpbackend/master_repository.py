"""Data access for the master tables and the employee side records."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any

from .allmaster_models import (
    RegisterBrandInput,
    RegisterDOHInput,
    RegisterHeavyEquipmentInput,
    RegisterHistoryInput,
    RegisterJabatanInput,
    RegisterKartuKeluargaInput,
    RegisterKTPInput,
    RegisterMCUInput,
    RegisterPendidikanInput,
    RegisterSertifikatInput,
    RegisterSeriesInput,
    RegisterUserRoleInput,
    as_record,
)
from .store import RecordNotFound, Store

Record = dict[str, Any]


def distinct_by(records: Iterable[Record], key: str) -> list[Record]:
    """One record per value of ``key``: the one with the lowest id, sorted by key."""

    def order(record: Record) -> tuple:
        value = record.get(key)
        return (value is None, value if value is not None else 0, record.get("id") or 0)

    seen: set[Any] = set()
    result = []
    for record in sorted(records, key=order):
        value = record.get(key)
        if value in seen:
            continue
        seen.add(value)
        result.append(record)
    return result


class MasterRepository:
    """Creates, finds, updates and soft-deletes master and side records."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def _related(self, table: str, record_id: Any) -> Record:
        if not record_id:
            return {}
        try:
            return self._store.first(table, record_id)
        except RecordNotFound:
            return {}

    def _with_role(self, record: Record) -> Record:
        return {**record, "Role": self._related("roles", record.get("role_id"))}

    def _with_brand(self, record: Record) -> Record:
        return {**record, "Brand": self._related("brands", record.get("brand_id"))}

    def _with_brand_and_equipment(self, record: Record) -> Record:
        return {
            **record,
            "Brand": self._related("brands", record.get("brand_id")),
            "HeavyEquipment": self._related("heavy_equipments", record.get("heavy_equipment_id")),
        }

    def _with_position(self, record: Record) -> Record:
        return {**record, "Position": self._related("positions", record.get("position_id"))}

    def _create(self, table: str, data: Any) -> Record:
        return self._store.insert(table, dataclasses.asdict(data))

    def _update(self, table: str, data: Any, record_id: int) -> Record:
        self._store.first(table, record_id)
        return self._store.update(table, record_id, as_record(data))

    def _distinct_raw(self, table: str, key: str) -> list[Record]:
        return distinct_by(self._store.raw(f"SELECT * FROM {table}"), key)

    # Creation

    def create_user_role(self, user_role_input: RegisterUserRoleInput) -> Record:
        return self._store.insert(
            "user_roles",
            {"user_id": user_role_input.user_id, "role_id": user_role_input.role_id},
        )

    def create_brand(self, brand_input: RegisterBrandInput) -> Record:
        return self._create("brands", brand_input)

    def create_heavy_equipment(self, heavy_equipment_input: RegisterHeavyEquipmentInput) -> Record:
        return self._create("heavy_equipments", heavy_equipment_input)

    def create_series(self, series_input: RegisterSeriesInput) -> Record:
        return self._create("series", series_input)

    def create_kartu_keluarga(self, kartu_keluarga_input: RegisterKartuKeluargaInput) -> Record:
        return self._create("kartu_keluargas", kartu_keluarga_input)

    def create_ktp(self, ktp_input: RegisterKTPInput) -> Record:
        return self._create("ktps", ktp_input)

    def create_pendidikan(self, pendidikan_input: RegisterPendidikanInput) -> Record:
        return self._create("pendidikans", pendidikan_input)

    def create_doh(self, doh_input: RegisterDOHInput) -> Record:
        return self._create("dohs", doh_input)

    def create_jabatan(self, jabatan_input: RegisterJabatanInput) -> Record:
        created = self._create("jabatans", jabatan_input)
        return self._with_position(self._store.first("jabatans", created["id"]))

    def create_sertifikat(self, sertifikat_input: RegisterSertifikatInput) -> Record:
        return self._create("sertifikats", sertifikat_input)

    def create_mcu(self, mcu_input: RegisterMCUInput) -> Record:
        return self._create("mcus", mcu_input)

    def create_history(self, history_input: RegisterHistoryInput) -> Record:
        return self._create("histories", history_input)

    # Lookups

    def find_user_role(self) -> list[Record]:
        return [self._with_role(r) for r in self._store.find_all("user_roles")]

    def find_user_role_by_id(self, record_id: int) -> Record:
        return self._with_role(self._store.first("user_roles", record_id))

    def find_brand(self) -> list[Record]:
        return self._store.find_all("brands")

    def find_brand_by_id(self, record_id: int) -> Record:
        return self._store.first("brands", record_id)

    def find_heavy_equipment(self) -> list[Record]:
        return self._distinct_raw("heavy_equipments", "heavy_equipment_name")

    def find_heavy_equipment_by_id(self, record_id: int) -> Record:
        return self._with_brand(self._store.first("heavy_equipments", record_id))

    def find_heavy_equipment_by_brand_id(self, brand_id: int) -> list[Record]:
        rows = self._store.find_all("heavy_equipments", "brand_id = :brand_id", {"brand_id": brand_id})
        return [self._with_brand(r) for r in rows]

    def find_series(self) -> list[Record]:
        return self._distinct_raw("series", "series_name")

    def find_series_by_id(self, record_id: int) -> Record:
        return self._with_brand_and_equipment(self._store.first("series", record_id))

    def find_series_by_brand_and_equipment_id(
        self, brand_id: int, heavy_equipment_id: int
    ) -> list[Record]:
        rows = self._store.find_all(
            "series",
            "brand_id = :brand_id AND heavy_equipment_id = :heavy_equipment_id",
            {"brand_id": brand_id, "heavy_equipment_id": heavy_equipment_id},
        )
        return [self._with_brand_and_equipment(r) for r in rows]

    def find_department(self) -> list[Record]:
        return self._store.find_all("departments")

    def find_role(self) -> list[Record]:
        return self._distinct_raw("roles", "name")

    def find_position(self) -> list[Record]:
        return self._distinct_raw("positions", "position_name")

    # Employee side records

    def find_doh_by_id(self, record_id: int) -> Record:
        return self._store.first("dohs", record_id)

    def update_doh(self, doh_input: RegisterDOHInput, record_id: int) -> Record:
        return self._update("dohs", doh_input, record_id)

    def delete_doh(self, record_id: int) -> bool:
        return self._store.soft_delete("dohs", record_id)

    def find_jabatan_by_id(self, record_id: int) -> Record:
        return self._store.first("jabatans", record_id)

    def update_jabatan(self, jabatan_input: RegisterJabatanInput, record_id: int) -> Record:
        updated = self._update("jabatans", jabatan_input, record_id)
        return self._with_position(updated)

    def delete_jabatan(self, record_id: int) -> bool:
        return self._store.soft_delete("jabatans", record_id)

    def find_sertifikat_by_id(self, record_id: int) -> Record:
        return self._store.first("sertifikats", record_id)

    def update_sertifikat(self, sertifikat_input: RegisterSertifikatInput, record_id: int) -> Record:
        return self._update("sertifikats", sertifikat_input, record_id)

    def delete_sertifikat(self, record_id: int) -> bool:
        return self._store.soft_delete("sertifikats", record_id)

    def find_mcu_by_id(self, record_id: int) -> Record:
        return self._store.first("mcus", record_id)

    def update_mcu(self, mcu_input: RegisterMCUInput, record_id: int) -> Record:
        return self._update("mcus", mcu_input, record_id)

    def delete_mcu(self, record_id: int) -> bool:
        return self._store.soft_delete("mcus", record_id)

    def find_history_by_id(self, record_id: int) -> Record:
        return self._store.first("histories", record_id)

    def update_history(self, history_input: RegisterHistoryInput, record_id: int) -> Record:
        return self._update("histories", history_input, record_id)

    def delete_history(self, record_id: int) -> bool:
        return self._store.soft_delete("histories", record_id)


__all__ = ["MasterRepository", "distinct_by"]

_: Callable[..., Any] = distinct_by