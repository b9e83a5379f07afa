"""Comparators on the token() function, for token based pagination."""

from __future__ import annotations

from collections.abc import Sequence

from cqlx.qb.cmp import Cmp, Op
from cqlx.qb.func import fn
from cqlx.qb.value import Param


class TokenBuilder:
    """Builds comparators of the form token(columns) <op> value."""

    def __init__(self, columns: Sequence[str]) -> None:
        self.columns: tuple[str, ...] = tuple(columns)

    def __repr__(self) -> str:
        return f"TokenBuilder({list(self.columns)!r})"

    @property
    def _column(self) -> str:
        return f"token({','.join(self.columns)})"

    def _cmp(self, op: Op, names: Sequence[str]) -> Cmp:
        params = tuple(names) if names else self.columns
        return Cmp(op, self._column, fn("token", *params))

    def _value_cmp(self, op: Op, name: str) -> Cmp:
        return Cmp(op, self._column, Param(name or "token"))

    def eq(self) -> Cmp:
        """token(columns)=token(?...)"""
        return self._cmp(Op.EQ, ())

    def eq_value(self) -> Cmp:
        """token(columns)=?"""
        return self._value_cmp(Op.EQ, "")

    def eq_named(self, *args: str) -> Cmp:
        """token(columns)=token(?...) with custom parameter names."""
        return self._cmp(Op.EQ, args)

    def eq_value_named(self, name: str) -> Cmp:
        """token(columns)=? with a custom parameter name."""
        return self._value_cmp(Op.EQ, name)

    def lt(self) -> Cmp:
        """token(columns)<token(?...)"""
        return self._cmp(Op.LT, ())

    def lt_value(self) -> Cmp:
        """token(columns)<?"""
        return self._value_cmp(Op.LT, "")

    def lt_named(self, *args: str) -> Cmp:
        """token(columns)<token(?...) with custom parameter names."""
        return self._cmp(Op.LT, args)

    def lt_value_named(self, name: str) -> Cmp:
        """token(columns)<? with a custom parameter name."""
        return self._value_cmp(Op.LT, name)

    def lt_or_eq(self) -> Cmp:
        """token(columns)<=token(?...)"""
        return self._cmp(Op.LEQ, ())

    def lt_or_eq_value(self) -> Cmp:
        """token(columns)<=?"""
        return self._value_cmp(Op.LEQ, "")

    def lt_or_eq_named(self, *args: str) -> Cmp:
        """token(columns)<=token(?...) with custom parameter names."""
        return self._cmp(Op.LEQ, args)

    def lt_or_eq_value_named(self, name: str) -> Cmp:
        """token(columns)<=? with a custom parameter name."""
        return self._value_cmp(Op.LEQ, name)

    def gt(self) -> Cmp:
        """token(columns)>token(?...)"""
        return self._cmp(Op.GT, ())

    def gt_value(self) -> Cmp:
        """token(columns)>?"""
        return self._value_cmp(Op.GT, "")

    def gt_named(self, *args: str) -> Cmp:
        """token(columns)>token(?...) with custom parameter names."""
        return self._cmp(Op.GT, args)

    def gt_value_named(self, name: str) -> Cmp:
        """token(columns)>? with a custom parameter name."""
        return self._value_cmp(Op.GT, name)

    def gt_or_eq(self) -> Cmp:
        """token(columns)>=token(?...)"""
        return self._cmp(Op.GEQ, ())

    def gt_or_eq_value(self) -> Cmp:
        """token(columns)>=?"""
        return self._value_cmp(Op.GEQ, "")

    def gt_or_eq_named(self, *args: str) -> Cmp:
        """token(columns)>=token(?...) with custom parameter names."""
        return self._cmp(Op.GEQ, args)

    def gt_or_eq_value_named(self, name: str) -> Cmp:
        """token(columns)>=? with a custom parameter name."""
        return self._value_cmp(Op.GEQ, name)


def token(*args: str) -> TokenBuilder:
    """Create a TokenBuilder over the given columns."""
    return TokenBuilder(args)