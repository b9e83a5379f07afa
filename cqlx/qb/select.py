"""SELECT statement builder."""

from __future__ import annotations

from enum import Enum

from cqlx.qb.cmp import Cmp, render_where
from cqlx.qb.value import join_columns


class Order(Enum):
    """Sorting order of an ORDER BY column."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


def as_(column: str, name: str) -> str:
    """Return a 'column AS name' result column."""
    return f"{column} AS {name}"


def _check_limit(limit: int) -> int:
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    return limit


class SelectBuilder:
    """Builds CQL SELECT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._distinct: list[str] = []
        self._where: list[Cmp] = []
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._limit = 0
        self._limit_per_partition = 0
        self._allow_filtering = False
        self._bypass_cache = False
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the query into a CQL string and named args."""
        parts = ["SELECT "]
        if self._json:
            parts.append("JSON ")

        if self._distinct:
            parts.append("DISTINCT " + join_columns(self._distinct))
        elif self._group_by:
            parts.append(join_columns(self._group_by))
            if self._columns:
                parts.append("," + join_columns(self._columns))
        elif not self._columns:
            parts.append("*")
        else:
            parts.append(join_columns(self._columns))

        parts.append(f" FROM {self._table} ")

        where_text, names = render_where(self._where)
        parts.append(where_text)

        if self._group_by:
            parts.append(f"GROUP BY {join_columns(self._group_by)} ")
        if self._order_by:
            parts.append(f"ORDER BY {join_columns(self._order_by)} ")
        if self._limit:
            parts.append(f"LIMIT {self._limit} ")
        if self._limit_per_partition:
            parts.append(f"PER PARTITION LIMIT {self._limit_per_partition} ")
        if self._allow_filtering:
            parts.append("ALLOW FILTERING ")
        if self._bypass_cache:
            parts.append("BYPASS CACHE ")

        return "".join(parts), names

    def from_(self, table: str) -> SelectBuilder:
        """Set the table to select from."""
        self._table = table
        return self

    def json(self) -> SelectBuilder:
        """Return rows as JSON."""
        self._json = True
        return self

    def columns(self, *args: str) -> SelectBuilder:
        """Add result columns."""
        self._columns.extend(args)
        return self

    def distinct(self, *args: str) -> SelectBuilder:
        """Set a DISTINCT clause on the given columns."""
        self._distinct.extend(args)
        return self

    def where(self, *args: Cmp) -> SelectBuilder:
        """Add expressions to the WHERE clause, ANDed together."""
        self._where.extend(args)
        return self

    def group_by(self, *args: str) -> SelectBuilder:
        """Set a GROUP BY clause; the columns also become the first selectors."""
        self._group_by.extend(args)
        return self

    def order_by(self, column: str, order: Order) -> SelectBuilder:
        """Add a column to the ORDER BY clause."""
        self._order_by.append(f"{column} {order}")
        return self

    def limit(self, limit: int) -> SelectBuilder:
        """Set a LIMIT clause; zero removes it."""
        self._limit = _check_limit(limit)
        return self

    def limit_per_partition(self, limit: int) -> SelectBuilder:
        """Set a PER PARTITION LIMIT clause; zero removes it."""
        self._limit_per_partition = _check_limit(limit)
        return self

    def allow_filtering(self) -> SelectBuilder:
        """Set an ALLOW FILTERING clause."""
        self._allow_filtering = True
        return self

    def bypass_cache(self) -> SelectBuilder:
        """Set a BYPASS CACHE clause."""
        self._bypass_cache = True
        return self

    def _fn(self, name: str, column: str) -> SelectBuilder:
        return self.columns(f"{name}({column})")

    def count(self, column: str) -> SelectBuilder:
        """Add count(column)."""
        return self._fn("count", column)

    def count_all(self) -> SelectBuilder:
        """Add count(*)."""
        return self.count("*")

    def min(self, column: str) -> SelectBuilder:
        """Add min(column)."""
        return self._fn("min", column)

    def max(self, column: str) -> SelectBuilder:
        """Add max(column)."""
        return self._fn("max", column)

    def avg(self, column: str) -> SelectBuilder:
        """Add avg(column)."""
        return self._fn("avg", column)

    def sum(self, column: str) -> SelectBuilder:
        """Add sum(column)."""
        return self._fn("sum", column)


def select(table: str) -> SelectBuilder:
    """Return a new SelectBuilder for the given table."""
    return SelectBuilder(table)