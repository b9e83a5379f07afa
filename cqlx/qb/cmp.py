"""Filtering comparators used in WHERE and IF clauses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from cqlx.qb.func import Func
from cqlx.qb.value import Lit, Param, TupleParam, Value


class Op(Enum):
    """Comparison operator; the value is its CQL text."""

    EQ = "="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="
    IN = " IN "
    CONTAINS = " CONTAINS "
    CONTAINS_KEY = " CONTAINS KEY "
    LIKE = " LIKE "
    NE = "!="


@dataclass(frozen=True)
class Cmp:
    """A single comparison of a column against a value."""

    op: Op
    column: str
    value: Value

    def render(self) -> tuple[str, list[str]]:
        text, names = self.value.render()
        return f"{self.column}{self.op.value}{text}", names


def _param(op: Op, column: str) -> Cmp:
    return Cmp(op, column, Param(column))


def _tuple(op: Op, column: str, count: int) -> Cmp:
    return Cmp(op, column, TupleParam(column, count))


def _named(op: Op, column: str, name: str) -> Cmp:
    return Cmp(op, column, Param(name))


def _lit(op: Op, column: str, literal: str) -> Cmp:
    return Cmp(op, column, Lit(literal))


def _func(op: Op, column: str, fn: Func) -> Cmp:
    return Cmp(op, column, fn)


def eq(column: str) -> Cmp:
    """column=?"""
    return _param(Op.EQ, column)


def eq_tuple(column: str, count: int) -> Cmp:
    """column=(?,?,...)"""
    return _tuple(Op.EQ, column, count)


def eq_named(column: str, name: str) -> Cmp:
    """column=? with a custom parameter name."""
    return _named(Op.EQ, column, name)


def eq_lit(column: str, literal: str) -> Cmp:
    """column=literal"""
    return _lit(Op.EQ, column, literal)


def eq_func(column: str, fn: Func) -> Cmp:
    """column=fn(?...)"""
    return _func(Op.EQ, column, fn)


def ne(column: str) -> Cmp:
    """column!=?"""
    return _param(Op.NE, column)


def ne_tuple(column: str, count: int) -> Cmp:
    """column!=(?,?,...)"""
    return _tuple(Op.NE, column, count)


def ne_named(column: str, name: str) -> Cmp:
    """column!=? with a custom parameter name."""
    return _named(Op.NE, column, name)


def ne_lit(column: str, literal: str) -> Cmp:
    """column!=literal"""
    return _lit(Op.NE, column, literal)


def ne_func(column: str, fn: Func) -> Cmp:
    """column!=fn(?...)"""
    return _func(Op.NE, column, fn)


def lt(column: str) -> Cmp:
    """column<?"""
    return _param(Op.LT, column)


def lt_tuple(column: str, count: int) -> Cmp:
    """column<(?,?,...)"""
    return _tuple(Op.LT, column, count)


def lt_named(column: str, name: str) -> Cmp:
    """column<? with a custom parameter name."""
    return _named(Op.LT, column, name)


def lt_lit(column: str, literal: str) -> Cmp:
    """column<literal"""
    return _lit(Op.LT, column, literal)


def lt_func(column: str, fn: Func) -> Cmp:
    """column<fn(?...)"""
    return _func(Op.LT, column, fn)


def lt_or_eq(column: str) -> Cmp:
    """column<=?"""
    return _param(Op.LEQ, column)


def lt_or_eq_tuple(column: str, count: int) -> Cmp:
    """column<=(?,?,...)"""
    return _tuple(Op.LEQ, column, count)


def lt_or_eq_named(column: str, name: str) -> Cmp:
    """column<=? with a custom parameter name."""
    return _named(Op.LEQ, column, name)


def lt_or_eq_lit(column: str, literal: str) -> Cmp:
    """column<=literal"""
    return _lit(Op.LEQ, column, literal)


def lt_or_eq_func(column: str, fn: Func) -> Cmp:
    """column<=fn(?...)"""
    return _func(Op.LEQ, column, fn)


def gt(column: str) -> Cmp:
    """column>?"""
    return _param(Op.GT, column)


def gt_tuple(column: str, count: int) -> Cmp:
    """column>(?,?,...)"""
    return _tuple(Op.GT, column, count)


def gt_named(column: str, name: str) -> Cmp:
    """column>? with a custom parameter name."""
    return _named(Op.GT, column, name)


def gt_lit(column: str, literal: str) -> Cmp:
    """column>literal"""
    return _lit(Op.GT, column, literal)


def gt_func(column: str, fn: Func) -> Cmp:
    """column>fn(?...)"""
    return _func(Op.GT, column, fn)


def gt_or_eq(column: str) -> Cmp:
    """column>=?"""
    return _param(Op.GEQ, column)


def gt_or_eq_tuple(column: str, count: int) -> Cmp:
    """column>=(?,?,...)"""
    return _tuple(Op.GEQ, column, count)


def gt_or_eq_named(column: str, name: str) -> Cmp:
    """column>=? with a custom parameter name."""
    return _named(Op.GEQ, column, name)


def gt_or_eq_lit(column: str, literal: str) -> Cmp:
    """column>=literal"""
    return _lit(Op.GEQ, column, literal)


def gt_or_eq_func(column: str, fn: Func) -> Cmp:
    """column>=fn(?...)"""
    return _func(Op.GEQ, column, fn)


def in_(column: str) -> Cmp:
    """column IN ?"""
    return _param(Op.IN, column)


def in_tuple(column: str, count: int) -> Cmp:
    """column IN (?,?,...)"""
    return _tuple(Op.IN, column, count)


def in_named(column: str, name: str) -> Cmp:
    """column IN ? with a custom parameter name."""
    return _named(Op.IN, column, name)


def in_lit(column: str, literal: str) -> Cmp:
    """column IN literal"""
    return _lit(Op.IN, column, literal)


def contains(column: str) -> Cmp:
    """column CONTAINS ?"""
    return _param(Op.CONTAINS, column)


def contains_tuple(column: str, count: int) -> Cmp:
    """column CONTAINS (?,?,...)"""
    return _tuple(Op.CONTAINS, column, count)


def contains_key(column: str) -> Cmp:
    """column CONTAINS KEY ?"""
    return _param(Op.CONTAINS_KEY, column)


def contains_key_tuple(column: str, count: int) -> Cmp:
    """column CONTAINS KEY (?,?,...)"""
    return _tuple(Op.CONTAINS_KEY, column, count)


def contains_named(column: str, name: str) -> Cmp:
    """column CONTAINS ? with a custom parameter name."""
    return _named(Op.CONTAINS, column, name)


def contains_key_named(column: str, name: str) -> Cmp:
    """column CONTAINS KEY ? with a custom parameter name."""
    return _named(Op.CONTAINS_KEY, column, name)


def contains_lit(column: str, literal: str) -> Cmp:
    """column CONTAINS literal"""
    return _lit(Op.CONTAINS, column, literal)


def like(column: str) -> Cmp:
    """column LIKE ?"""
    return _param(Op.LIKE, column)


def like_tuple(column: str, count: int) -> Cmp:
    """column LIKE (?,?,...)"""
    return _tuple(Op.LIKE, column, count)


def render_cmps(cmps: Sequence[Cmp]) -> tuple[str, list[str]]:
    """Render comparators joined with AND, followed by a space."""
    texts: list[str] = []
    names: list[str] = []
    for c in cmps:
        text, cnames = c.render()
        texts.append(text)
        names.extend(cnames)
    return " AND ".join(texts) + " ", names


def render_where(cmps: Sequence[Cmp]) -> tuple[str, list[str]]:
    """Render a WHERE clause, or nothing when there are no comparators."""
    if not cmps:
        return "", []
    text, names = render_cmps(cmps)
    return "WHERE " + text, names


def render_if(cmps: Sequence[Cmp]) -> tuple[str, list[str]]:
    """Render an IF clause, or nothing when there are no comparators."""
    if not cmps:
        return "", []
    text, names = render_cmps(cmps)
    return "IF " + text, names