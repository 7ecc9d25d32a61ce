"""Application-facing operations on master data, side records, reports and the sidebar."""

from __future__ import annotations

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
    SortFilterDohKontrak,
)
from .master_reports import MasterReports
from .master_repository import MasterRepository
from .master_sidebar import MasterSidebar
from .pagination import Pagination

Record = dict[str, Any]


class MasterService:
    """Front door to the master repository, the expiry reports and the sidebar builder.

    Errors raised below (such as ``RecordNotFound``) pass through unchanged.
    """

    def __init__(
        self,
        repository: MasterRepository,
        reports: MasterReports,
        sidebar: MasterSidebar,
    ) -> None:
        self._repository = repository
        self._reports = reports
        self._sidebar = sidebar

    # Creation

    def create_user_role(self, user_role_input: RegisterUserRoleInput) -> Record:
        return self._repository.create_user_role(user_role_input)

    def create_brand(self, brand_input: RegisterBrandInput) -> Record:
        return self._repository.create_brand(brand_input)

    def create_heavy_equipment(self, heavy_equipment_input: RegisterHeavyEquipmentInput) -> Record:
        return self._repository.create_heavy_equipment(heavy_equipment_input)

    def create_series(self, series_input: RegisterSeriesInput) -> Record:
        return self._repository.create_series(series_input)

    def create_kartu_keluarga(self, kartu_keluarga_input: RegisterKartuKeluargaInput) -> Record:
        return self._repository.create_kartu_keluarga(kartu_keluarga_input)

    def create_ktp(self, ktp_input: RegisterKTPInput) -> Record:
        return self._repository.create_ktp(ktp_input)

    def create_pendidikan(self, pendidikan_input: RegisterPendidikanInput) -> Record:
        return self._repository.create_pendidikan(pendidikan_input)

    def create_doh(self, doh_input: RegisterDOHInput) -> Record:
        return self._repository.create_doh(doh_input)

    def create_jabatan(self, jabatan_input: RegisterJabatanInput) -> Record:
        return self._repository.create_jabatan(jabatan_input)

    def create_sertifikat(self, sertifikat_input: RegisterSertifikatInput) -> Record:
        return self._repository.create_sertifikat(sertifikat_input)

    def create_mcu(self, mcu_input: RegisterMCUInput) -> Record:
        return self._repository.create_mcu(mcu_input)

    def create_history(self, history_input: RegisterHistoryInput) -> Record:
        return self._repository.create_history(history_input)

    # Lookups

    def find_user_role(self) -> list[Record]:
        return self._repository.find_user_role()

    def find_user_role_by_id(self, record_id: int) -> Record:
        return self._repository.find_user_role_by_id(record_id)

    def find_brand(self) -> list[Record]:
        return self._repository.find_brand()

    def find_brand_by_id(self, record_id: int) -> Record:
        return self._repository.find_brand_by_id(record_id)

    def find_heavy_equipment(self) -> list[Record]:
        return self._repository.find_heavy_equipment()

    def find_heavy_equipment_by_id(self, record_id: int) -> Record:
        return self._repository.find_heavy_equipment_by_id(record_id)

    def find_heavy_equipment_by_brand_id(self, brand_id: int) -> list[Record]:
        return self._repository.find_heavy_equipment_by_brand_id(brand_id)

    def find_series(self) -> list[Record]:
        return self._repository.find_series()

    def find_series_by_id(self, record_id: int) -> Record:
        return self._repository.find_series_by_id(record_id)

    def find_series_by_brand_and_equipment_id(
        self, brand_id: int, heavy_equipment_id: int
    ) -> list[Record]:
        return self._repository.find_series_by_brand_and_equipment_id(brand_id, heavy_equipment_id)

    def find_department(self) -> list[Record]:
        return self._repository.find_department()

    def find_role(self) -> list[Record]:
        return self._repository.find_role()

    def find_position(self) -> list[Record]:
        return self._repository.find_position()

    # Contracts (DOH)

    def find_doh_by_id(self, record_id: int) -> Record:
        return self._repository.find_doh_by_id(record_id)

    def update_doh(self, doh_input: RegisterDOHInput, record_id: int) -> Record:
        return self._repository.update_doh(doh_input, record_id)

    def delete_doh(self, record_id: int) -> bool:
        return self._repository.delete_doh(record_id)

    def find_doh_kontrak(self, page: int, sort_filter: SortFilterDohKontrak) -> Pagination:
        return self._reports.find_doh_kontrak(page, sort_filter)

    # Positions held

    def find_jabatan_by_id(self, record_id: int) -> Record:
        return self._repository.find_jabatan_by_id(record_id)

    def update_jabatan(self, jabatan_input: RegisterJabatanInput, record_id: int) -> Record:
        return self._repository.update_jabatan(jabatan_input, record_id)

    def delete_jabatan(self, record_id: int) -> bool:
        return self._repository.delete_jabatan(record_id)

    # Certificates

    def find_sertifikat_by_id(self, record_id: int) -> Record:
        return self._repository.find_sertifikat_by_id(record_id)

    def update_sertifikat(self, sertifikat_input: RegisterSertifikatInput, record_id: int) -> Record:
        return self._repository.update_sertifikat(sertifikat_input, record_id)

    def delete_sertifikat(self, record_id: int) -> bool:
        return self._repository.delete_sertifikat(record_id)

    # Medical checks

    def find_mcu_by_id(self, record_id: int) -> Record:
        return self._repository.find_mcu_by_id(record_id)

    def update_mcu(self, mcu_input: RegisterMCUInput, record_id: int) -> Record:
        return self._repository.update_mcu(mcu_input, record_id)

    def delete_mcu(self, record_id: int) -> bool:
        return self._repository.delete_mcu(record_id)

    def find_mcu_berkala(self, page: int, sort_filter: SortFilterDohKontrak) -> Pagination:
        return self._reports.find_mcu_berkala(page, sort_filter)

    # Employment history

    def find_history_by_id(self, record_id: int) -> Record:
        return self._repository.find_history_by_id(record_id)

    def update_history(self, history_input: RegisterHistoryInput, record_id: int) -> Record:
        return self._repository.update_history(history_input, record_id)

    def delete_history(self, record_id: int) -> bool:
        return self._repository.delete_history(record_id)

    # Navigation

    def generate_sidebar(self, user_id: int) -> list[Record]:
        return self._sidebar.generate_sidebar(user_id)