"""UPDATE statement builder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from cqlx.qb.cmp import Cmp, render_if, render_where
from cqlx.qb.func import Func
from cqlx.qb.using import Using
from cqlx.qb.value import Lit, Param, TupleParam, Value


@dataclass(frozen=True)
class _Assignment:
    column: str
    value: Value
    value_prefix: str = ""

    def render(self) -> tuple[str, list[str]]:
        text, names = self.value.render()
        return f"{self.column}={self.value_prefix}{text}", names


class UpdateBuilder:
    """Builds CQL UPDATE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._using = Using()
        self._assignments: list[_Assignment] = []
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._exists = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the query into a CQL string and named args."""
        parts = [f"UPDATE {self._table} "]
        using_text, names = self._using.render()
        parts.append(using_text)

        texts: list[str] = []
        for a in self._assignments:
            text, a_names = a.render()
            texts.append(text)
            names.extend(a_names)
        parts.append("SET " + ",".join(texts) + " ")

        for text, clause_names in (render_where(self._where), render_if(self._if)):
            parts.append(text)
            names.extend(clause_names)

        if self._exists:
            parts.append("IF EXISTS ")
        return "".join(parts), names

    def table(self, table: str) -> UpdateBuilder:
        """Set the table to update."""
        self._table = table
        return self

    def ttl(self, duration: timedelta | float) -> UpdateBuilder:
        """Add a USING TTL clause."""
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> UpdateBuilder:
        """Add a USING TTL clause with a custom parameter name."""
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> UpdateBuilder:
        """Add a USING TIMESTAMP clause."""
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> UpdateBuilder:
        """Add a USING TIMESTAMP clause with a custom parameter name."""
        self._using.timestamp_named(name)
        return self

    def set(self, *args: str) -> UpdateBuilder:
        """Add SET column=? clauses; use set_tuple for tuple columns."""
        self._assignments.extend(_Assignment(c, Param(c)) for c in args)
        return self

    def set_named(self, column: str, name: str) -> UpdateBuilder:
        """Add SET column=? with a custom parameter name."""
        self._assignments.append(_Assignment(column, Param(name)))
        return self

    def set_lit(self, column: str, literal: str) -> UpdateBuilder:
        """Add SET column=literal."""
        self._assignments.append(_Assignment(column, Lit(literal)))
        return self

    def set_func(self, column: str, fn: Func) -> UpdateBuilder:
        """Add SET column=fn(?...)."""
        self._assignments.append(_Assignment(column, fn))
        return self

    def set_tuple(self, column: str, count: int) -> UpdateBuilder:
        """Add SET column=(?,?,...)."""
        self._assignments.append(_Assignment(column, TupleParam(column, count)))
        return self

    def _add_value(self, column: str, value: Value) -> UpdateBuilder:
        self._assignments.append(_Assignment(column, value, f"{column}+"))
        return self

    def _remove_value(self, column: str, value: Value) -> UpdateBuilder:
        self._assignments.append(_Assignment(column, value, f"{column}-"))
        return self

    def add(self, column: str) -> UpdateBuilder:
        """Add SET column=column+?."""
        return self._add_value(column, Param(column))

    def add_named(self, column: str, name: str) -> UpdateBuilder:
        """Add SET column=column+? with a custom parameter name."""
        return self._add_value(column, Param(name))

    def add_lit(self, column: str, literal: str) -> UpdateBuilder:
        """Add SET column=column+literal."""
        return self._add_value(column, Lit(literal))

    def add_func(self, column: str, fn: Func) -> UpdateBuilder:
        """Add SET column=column+fn(?...)."""
        return self._add_value(column, fn)

    def remove(self, column: str) -> UpdateBuilder:
        """Add SET column=column-?."""
        return self._remove_value(column, Param(column))

    def remove_named(self, column: str, name: str) -> UpdateBuilder:
        """Add SET column=column-? with a custom parameter name."""
        return self._remove_value(column, Param(name))

    def remove_lit(self, column: str, literal: str) -> UpdateBuilder:
        """Add SET column=column-literal."""
        return self._remove_value(column, Lit(literal))

    def remove_func(self, column: str, fn: Func) -> UpdateBuilder:
        """Add SET column=column-fn(?...)."""
        return self._remove_value(column, fn)

    def where(self, *args: Cmp) -> UpdateBuilder:
        """Add expressions to the WHERE clause, ANDed together."""
        self._where.extend(args)
        return self

    def if_(self, *args: Cmp) -> UpdateBuilder:
        """Add expressions to the IF clause, ANDed together."""
        self._if.extend(args)
        return self

    def existing(self) -> UpdateBuilder:
        """Set an IF EXISTS clause."""
        self._exists = True
        return self


def update(table: str) -> UpdateBuilder:
    """Return a new UpdateBuilder for the given table."""
    return UpdateBuilder(table)