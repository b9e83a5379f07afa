"""Simple CRUD statements derived from a table model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from cqlx.qb import delete as _delete
from cqlx.qb import insert as _insert
from cqlx.qb import select as _select
from cqlx.qb import update as _update
from cqlx.qb.cmp import Cmp, eq


@dataclass
class Metadata:
    """Table schema: name, columns and primary key parts."""

    name: str
    columns: list[str] = field(default_factory=list)
    part_key: list[str] = field(default_factory=list)
    sort_key: list[str] = field(default_factory=list)


class Table:
    """Builds CRUD statements for a table described by Metadata."""

    def __init__(self, metadata: Metadata) -> None:
        self._metadata = self._copy(metadata)
        m = self._metadata
        self._primary_key_cmp: tuple[Cmp, ...] = tuple(eq(k) for k in (*m.part_key, *m.sort_key))
        self._part_key_cmp = self._primary_key_cmp[: len(m.part_key)]

        self._get = _select.select(m.name).where(*self._primary_key_cmp).to_cql()
        self._sel = _select.select(m.name).where(*self._part_key_cmp).to_cql()
        self._insert = _insert.insert(m.name).columns(*m.columns).to_cql()

    @staticmethod
    def _copy(m: Metadata) -> Metadata:
        return replace(
            m,
            columns=list(m.columns),
            part_key=list(m.part_key),
            sort_key=list(m.sort_key),
        )

    @staticmethod
    def _cached(cql: tuple[str, Sequence[str]]) -> tuple[str, list[str]]:
        stmt, names = cql
        return stmt, list(names)

    def metadata(self) -> Metadata:
        """Return a copy of the table metadata."""
        return self._copy(self._metadata)

    def name(self) -> str:
        """Return the table name."""
        return self._metadata.name

    def get(self, *args: str) -> tuple[str, list[str]]:
        """Return a select-by-primary-key statement."""
        if not args:
            return self._cached(self._get)
        return (
            _select.select(self._metadata.name)
            .columns(*args)
            .where(*self._primary_key_cmp)
            .to_cql()
        )

    def select(self, *args: str) -> tuple[str, list[str]]:
        """Return a select-by-partition-key statement."""
        if not args:
            return self._cached(self._sel)
        return self.select_builder(*args).to_cql()

    def select_builder(self, *args: str) -> _select.SelectBuilder:
        """Return a builder initialised to select by partition key."""
        return _select.select(self._metadata.name).columns(*args).where(*self._part_key_cmp)

    def insert(self) -> tuple[str, list[str]]:
        """Return an insert-all-columns statement."""
        return self._cached(self._insert)

    def update(self, *args: str) -> tuple[str, list[str]]:
        """Return an update-by-primary-key statement."""
        return (
            _update.update(self._metadata.name)
            .set(*args)
            .where(*self._primary_key_cmp)
            .to_cql()
        )

    def delete(self, *args: str) -> tuple[str, list[str]]:
        """Return a delete-by-primary-key statement."""
        return (
            _delete.delete(self._metadata.name)
            .columns(*args)
            .where(*self._primary_key_cmp)
            .to_cql()
        )