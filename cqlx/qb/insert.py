"""INSERT statement builder."""

from __future__ import annotations

from datetime import datetime, timedelta

from cqlx.qb.func import Func
from cqlx.qb.using import Using
from cqlx.qb.value import Lit, Param, TupleParam, Value


class InsertBuilder:
    """Builds CQL INSERT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[tuple[str, Value]] = []
        self._unique = False
        self._using = Using()
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the query into a CQL string and named args."""
        head = f"INSERT INTO {self._table} "
        if self._json:
            # Everything else goes into the JSON document.
            return head + "JSON ?", []

        names: list[str] = []
        values: list[str] = []
        for _, value in self._columns:
            text, value_names = value.render()
            values.append(text)
            names.extend(value_names)

        parts = [
            head,
            "(" + ",".join(column for column, _ in self._columns) + ") ",
            "VALUES (" + ",".join(values) + ") ",
        ]
        if self._unique:
            parts.append("IF NOT EXISTS ")
        using_text, using_names = self._using.render()
        parts.append(using_text)
        names.extend(using_names)
        return "".join(parts), names

    def into(self, table: str) -> InsertBuilder:
        """Set the INTO table."""
        self._table = table
        return self

    def json(self) -> InsertBuilder:
        """Insert a whole row from a single JSON parameter."""
        self._json = True
        return self

    def columns(self, *args: str) -> InsertBuilder:
        """Add columns bound to parameters of the same name."""
        self._columns.extend((c, Param(c)) for c in args)
        return self

    def named_column(self, column: str, name: str) -> InsertBuilder:
        """Add a column with a custom parameter name."""
        self._columns.append((column, Param(name)))
        return self

    def lit_column(self, column: str, literal: str) -> InsertBuilder:
        """Add a column with a literal value."""
        self._columns.append((column, Lit(literal)))
        return self

    def func_column(self, column: str, fn: Func) -> InsertBuilder:
        """Add a column initialised by a CQL function."""
        self._columns.append((column, fn))
        return self

    def tuple_column(self, column: str, count: int) -> InsertBuilder:
        """Add a tuple column with ``count`` placeholders."""
        self._columns.append((column, TupleParam(column, count)))
        return self

    def unique(self) -> InsertBuilder:
        """Set an IF NOT EXISTS clause."""
        self._unique = True
        return self

    def ttl(self, duration: timedelta | float) -> InsertBuilder:
        """Add a USING TTL clause."""
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> InsertBuilder:
        """Add a USING TTL clause with a custom parameter name."""
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> InsertBuilder:
        """Add a USING TIMESTAMP clause."""
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> InsertBuilder:
        """Add a USING TIMESTAMP clause with a custom parameter name."""
        self._using.timestamp_named(name)
        return self


def insert(table: str) -> InsertBuilder:
    """Return a new InsertBuilder for the given table."""
    return InsertBuilder(table)