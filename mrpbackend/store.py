"""Thin row store over SQLAlchemy with soft-delete aware lookups."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping
from typing import Any

from sqlalchemy import MetaData, Table, create_engine, select, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool


class RecordNotFound(LookupError):
    """Raised when no live record has the requested id."""

    def __init__(self, table: str, record_id: Any) -> None:
        super().__init__(f"record not found: {table} id={record_id}")
        self.table = table
        self.record_id = record_id


def _now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc).replace(tzinfo=None)


def _as_dict(row: Any) -> dict[str, Any]:
    return dict(row._mapping)


class Store:
    """Rows of reflected tables as plain mappings.

    Tables with a ``deleted_at`` column are soft-deleted: such rows are hidden
    from ``first`` and ``find_all`` but still seen by ``raw`` queries.
    """

    def __init__(self, bind: Engine | str) -> None:
        if isinstance(bind, str):
            url = make_url(bind)
            options: dict[str, Any] = {}
            if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
                options = {
                    "poolclass": StaticPool,
                    "connect_args": {"check_same_thread": False},
                }
            bind = create_engine(url, **options)
        self.engine = bind
        self._metadata = MetaData()
        self._tables: dict[str, Table] = {}

    def _table(self, name: str) -> Table:
        table = self._tables.get(name)
        if table is None:
            table = Table(name, self._metadata, autoload_with=self.engine)
            self._tables[name] = table
        return table

    @staticmethod
    def _live(table: Table, stmt: Any) -> Any:
        if "deleted_at" in table.c:
            stmt = stmt.where(table.c.deleted_at.is_(None))
        return stmt

    @staticmethod
    def _check_columns(table: Table, values: Mapping[str, Any]) -> None:
        unknown = sorted(set(values) - set(table.c.keys()))
        if unknown:
            raise ValueError(f"{table.name}: unknown column(s): {', '.join(unknown)}")

    def insert(self, table: str, values: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a row, stamping creation times; return the stored row."""
        tbl = self._table(table)
        self._check_columns(tbl, values)
        row = dict(values)
        now = _now()
        for column in ("created_at", "updated_at"):
            if column in tbl.c and row.get(column) is None:
                row[column] = now
        with self.engine.begin() as conn:
            result = conn.execute(tbl.insert().values(**row))
            new_id = result.inserted_primary_key[0]
        return self.first(table, new_id)

    def first(self, table: str, record_id: Any) -> dict[str, Any]:
        """The live row with ``record_id``; raises RecordNotFound otherwise."""
        tbl = self._table(table)
        stmt = self._live(tbl, select(tbl).where(tbl.c.id == record_id)).limit(1)
        with self.engine.connect() as conn:
            row = conn.execute(stmt).first()
        if row is None:
            raise RecordNotFound(table, record_id)
        return _as_dict(row)

    def find_all(
        self,
        table: str,
        where: str | None = None,
        params: Mapping[str, Any] | None = None,
        order: str | None = None,
    ) -> list[dict[str, Any]]:
        """Live rows matching the SQL condition ``where`` with ``:name`` parameters."""
        tbl = self._table(table)
        stmt = self._live(tbl, select(tbl))
        if where:
            stmt = stmt.where(text(where))
        if order:
            stmt = stmt.order_by(text(order))
        elif "id" in tbl.c:
            stmt = stmt.order_by(tbl.c.id)
        with self.engine.connect() as conn:
            return [_as_dict(row) for row in conn.execute(stmt, dict(params or {}))]

    def update(self, table: str, record_id: Any, values: Mapping[str, Any]) -> dict[str, Any]:
        """Overwrite the given columns of a live row; return the updated row."""
        tbl = self._table(table)
        self._check_columns(tbl, values)
        changes = dict(values)
        if "updated_at" in tbl.c:
            changes["updated_at"] = _now()
        with self.engine.begin() as conn:
            found = conn.execute(
                self._live(tbl, select(tbl.c.id).where(tbl.c.id == record_id))
            ).first()
            if found is None:
                raise RecordNotFound(table, record_id)
            conn.execute(tbl.update().where(tbl.c.id == record_id).values(**changes))
        return self.first(table, record_id)

    def soft_delete(self, table: str, record_id: Any) -> bool:
        """Mark a live row deleted (or remove it if the table keeps no mark)."""
        tbl = self._table(table)
        with self.engine.begin() as conn:
            found = conn.execute(
                self._live(tbl, select(tbl.c.id).where(tbl.c.id == record_id))
            ).first()
            if found is None:
                raise RecordNotFound(table, record_id)
            if "deleted_at" in tbl.c:
                conn.execute(
                    tbl.update().where(tbl.c.id == record_id).values(deleted_at=_now())
                )
            else:
                conn.execute(tbl.delete().where(tbl.c.id == record_id))
        return True

    def raw(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """Run a SQL statement; return its rows, or an empty list if it has none."""
        with self.engine.begin() as conn:
            result = conn.execute(text(query), dict(params or {}))
            if not result.returns_rows:
                return []
            return [_as_dict(row) for row in result]

    def scalar(self, query: str, params: Mapping[str, Any] | None = None) -> Any:
        """First column of the first row of a query, or None when it returns none."""
        with self.engine.connect() as conn:
            return conn.execute(text(query), dict(params or {})).scalar()