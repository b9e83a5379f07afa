"""DELETE statement builder."""

from __future__ import annotations

from datetime import datetime

from cqlx.qb.cmp import Cmp, render_if, render_where
from cqlx.qb.using import Using
from cqlx.qb.value import join_columns


class DeleteBuilder:
    """Builds CQL DELETE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._using = Using()
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._exists = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the query into a CQL string and named args."""
        parts = ["DELETE "]
        if self._columns:
            parts.append(join_columns(self._columns) + " ")
        parts.append(f"FROM {self._table} ")

        names: list[str] = []
        for text, clause_names in (
            self._using.render(),
            render_where(self._where),
            render_if(self._if),
        ):
            parts.append(text)
            names.extend(clause_names)

        if self._exists:
            parts.append("IF EXISTS ")
        return "".join(parts), names

    def from_(self, table: str) -> DeleteBuilder:
        """Set the table to delete from."""
        self._table = table
        return self

    def columns(self, *args: str) -> DeleteBuilder:
        """Add columns to delete."""
        self._columns.extend(args)
        return self

    def timestamp(self, moment: datetime) -> DeleteBuilder:
        """Add a USING TIMESTAMP clause."""
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> DeleteBuilder:
        """Add a USING TIMESTAMP clause with a custom parameter name."""
        self._using.timestamp_named(name)
        return self

    def where(self, *args: Cmp) -> DeleteBuilder:
        """Add expressions to the WHERE clause, ANDed together."""
        self._where.extend(args)
        return self

    def if_(self, *args: Cmp) -> DeleteBuilder:
        """Add expressions to the IF clause, ANDed together."""
        self._if.extend(args)
        return self

    def existing(self) -> DeleteBuilder:
        """Set an IF EXISTS clause."""
        self._exists = True
        return self


def delete(table: str) -> DeleteBuilder:
    """Return a new DeleteBuilder for the given table."""
    return DeleteBuilder(table)