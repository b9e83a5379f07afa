"""BATCH statement builder and the common builder protocol."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any, Protocol, runtime_checkable

from cqlx.qb.using import Using

M = dict[str, Any]
"""A map of parameter names to values."""


@runtime_checkable
class Builder(Protocol):
    """Anything that builds into a CQL statement and its parameter names."""

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the query into a CQL string and named args."""


class BatchBuilder:
    """Builds CQL BATCH statements."""

    def __init__(self) -> None:
        self._unlogged = False
        self._counter = False
        self._using = Using()
        self._stmts: list[str] = []
        self._names: list[str] = []

    def to_cql(self) -> tuple[str, list[str]]:
        """Build the batch into a CQL string and named args."""
        parts = ["BEGIN "]
        if self._unlogged:
            parts.append("UNLOGGED ")
        if self._counter:
            parts.append("COUNTER ")
        parts.append("BATCH ")

        using_text, names = self._using.render()
        parts.append(using_text)
        parts.extend(f"{stmt}; " for stmt in self._stmts)
        names.extend(self._names)
        parts.append("APPLY BATCH ")
        return "".join(parts), names

    def add(self, builder: Builder) -> BatchBuilder:
        """Build the builder and add its statement to the batch."""
        return self.add_stmt(*builder.to_cql())

    def add_stmt(self, stmt: str, names: Iterable[str]) -> BatchBuilder:
        """Add a statement to the batch."""
        self._stmts.append(stmt)
        self._names.extend(names)
        return self

    def add_with_prefix(self, prefix: str, builder: Builder) -> BatchBuilder:
        """Build the builder and add it; names are prefixed with prefix + '.'."""
        stmt, names = builder.to_cql()
        return self.add_stmt_with_prefix(prefix, stmt, names)

    def add_stmt_with_prefix(self, prefix: str, stmt: str, names: Iterable[str]) -> BatchBuilder:
        """Add a statement; names are prefixed with prefix + '.'."""
        self._stmts.append(stmt)
        self._names.extend(f"{prefix}.{name}" if prefix else name for name in names)
        return self

    def unlogged(self) -> BatchBuilder:
        """Set an UNLOGGED BATCH clause."""
        self._unlogged = True
        return self

    def counter(self) -> BatchBuilder:
        """Set a COUNTER BATCH clause."""
        self._counter = True
        return self

    def ttl(self, duration: timedelta | float) -> BatchBuilder:
        """Add a USING TTL clause."""
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> BatchBuilder:
        """Add a USING TTL clause with a custom parameter name."""
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> BatchBuilder:
        """Add a USING TIMESTAMP clause."""
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> BatchBuilder:
        """Add a USING TIMESTAMP clause with a custom parameter name."""
        self._using.timestamp_named(name)
        return self


def batch() -> BatchBuilder:
    """Return a new BatchBuilder."""
    return BatchBuilder()