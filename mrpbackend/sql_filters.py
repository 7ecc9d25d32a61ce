"""Building blocks for the SQL filters of the company-scoped reports."""

from __future__ import annotations

import datetime as _dt

_PT_CONDITIONS = {
    "PT. MRP": "cast(nomor_karyawan AS TEXT) ILIKE '%MRP%'",
    "PT. TRIOP": "cast(nomor_karyawan AS TEXT) ILIKE '%TRIOP%'",
    "PT. MJSU": "cast(nomor_karyawan AS TEXT) ILIKE '%MJSU%'",
    "PT. IBS": "cast(nomor_karyawan AS TEXT) ILIKE '%IBS%'",
}

_DEFAULT_PTS = {
    "1": ("PT. MRP", "PT. TRIOP"),
    "2": ("PT. MJSU", "PT. IBS"),
}

# Employee-code groups: the companies included and the ones excluded.
_CODE_GROUPS = {
    "1": (("MRP", "TRIOP"), ("MJSU", "IBS")),
    "2": (("MJSU", "IBS"), ("MRP", "TRIOP")),
}


def pt_filter(pt: str, emp_code: str | int) -> str:
    """Parenthesised condition selecting the companies named in ``pt``.

    ``pt`` is a comma-separated list; when blank, the companies of the
    employee-code group are used. Unknown names are skipped, and when none
    remain the condition matches nothing.
    """
    if pt.strip():
        names = [name.strip() for name in pt.split(",")]
    else:
        names = list(_DEFAULT_PTS.get(str(emp_code), ()))
    conditions = [_PT_CONDITIONS[name] for name in names if name in _PT_CONDITIONS]
    if not conditions:
        return "(1=0)"
    return "(" + " OR ".join(conditions) + ")"


def company_exclusion(emp_code: str | int, prefix: str = "e.", require_active: bool = True) -> str:
    """Clauses, each led by `` AND``, restricting rows to one employee-code group.

    Returns an empty string for codes outside the two known groups.
    """
    group = _CODE_GROUPS.get(str(emp_code))
    if group is None:
        return ""
    included, excluded = group
    column = f"cast({prefix}nomor_karyawan AS TEXT)"
    parts = [" AND (" + " OR ".join(f"{column} ILIKE '%{name}%'" for name in included) + ")"]
    parts.extend(f" AND {column} NOT ILIKE '%{name}%'" for name in excluded)
    if require_active:
        parts.append(" AND cast(status AS TEXT) ILIKE 'AKTIF'")
    return "".join(parts)


def resolve_year(year: str, today: _dt.date | None = None) -> str:
    """The requested year, or the current year when none is given."""
    if year.strip():
        return year
    return str((today or _dt.date.today()).year)


def order_clause(field: str, sort: str, default: str) -> str:
    """``"<field> <sort>"`` when both are given, otherwise ``default``."""
    if field and sort:
        return f"{field} {sort}"
    return default