"""The navigation sidebar a user may see, built from role and department grants."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .store import Store

Record = dict[str, Any]

_FLAGS = ("create_flag", "update_flag", "read_flag", "delete_flag")


def find_form_id_by_title(forms: Iterable[Mapping[str, Any]], title: str) -> int:
    """Id of the first form named ``title``, or 0 when there is none."""
    return next((form["id"] for form in forms if form.get("form_name") == title), 0)


def build_form_tree(
    forms: Iterable[Mapping[str, Any]], role_forms: Iterable[Mapping[str, Any]]
) -> list[Record]:
    """Nest forms under their parents, each carrying the flags granted for it.

    Forms keep the order they are given in; forms without a parent form the
    top level, and forms whose parent is missing are left out.
    """
    flags = {grant.get("form_id"): grant for grant in role_forms}
    by_parent: dict[Any, list[Record]] = {}
    for form in forms:
        grant = flags.get(form.get("id"), {})
        item: Record = {
            "id": form.get("id"),
            "form_name": form.get("form_name"),
            "path": form.get("path"),
            "sequence": form.get("sequence"),
        }
        item.update({flag: bool(grant.get(flag, False)) for flag in _FLAGS})
        by_parent.setdefault(form.get("parent_id") or 0, []).append(item)

    def children_of(parent_id: Any, ancestors: frozenset) -> list[Record]:
        items = by_parent.get(parent_id, [])
        for item in items:
            if item["id"] in ancestors:
                raise ValueError(f"form {item['id']} is its own ancestor")
            item["children"] = children_of(item["id"], ancestors | {item["id"]})
        return items

    return children_of(0, frozenset())


def _in_clause(column: str, values: Sequence[Any], prefix: str) -> tuple[str, dict[str, Any]]:
    params = {f"{prefix}{i}": value for i, value in enumerate(values)}
    placeholders = ", ".join(f":{name}" for name in params)
    return f"{column} IN ({placeholders})", params


class MasterSidebar:
    """Works out which forms a user may reach and with which permissions."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def generate_sidebar(self, user_id: int) -> list[Record]:
        """The form tree granted to ``user_id`` through its roles and departments."""
        user_roles = self._store.find_all("user_roles", "user_id = :user_id", {"user_id": user_id})
        if not user_roles:
            return []
        dept_sql, dept_params = _in_clause(
            "department_id", [ur.get("department_id") for ur in user_roles], "dept"
        )
        role_sql, role_params = _in_clause(
            "role_id", [ur.get("role_id") for ur in user_roles], "role"
        )
        dept_forms = self._store.find_all(
            "department_forms", f"{dept_sql} AND {role_sql}", {**dept_params, **role_params}
        )
        if not dept_forms:
            return []

        grant_sql, grant_params = _in_clause(
            "department_form_id", [df["id"] for df in dept_forms], "df"
        )
        role_forms = self._store.find_all("role_forms", grant_sql, grant_params)
        if not role_forms:
            return []

        form_sql, form_params = _in_clause("id", [rf.get("form_id") for rf in role_forms], "form")
        forms = self._store.find_all("forms", form_sql, form_params, order="sequence ASC")
        return build_form_tree(forms, role_forms)