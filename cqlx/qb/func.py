"""Database function invocations usable in comparators and assignments."""

from __future__ import annotations

from dataclasses import dataclass, field

from cqlx.qb.value import placeholders


@dataclass(frozen=True)
class Func:
    """A CQL function call whose arguments are bound parameters."""

    name: str
    param_names: tuple[str, ...] = field(default_factory=tuple)

    def render(self) -> tuple[str, list[str]]:
        return f"{self.name}({placeholders(len(self.param_names))})", list(self.param_names)


def fn(name: str, *args: str) -> Func:
    """Create a function call with the given parameter names."""
    return Func(name, tuple(args))


def min_timeuuid(name: str) -> Func:
    """Produce minTimeuuid(?)."""
    return fn("minTimeuuid", name)


def max_timeuuid(name: str) -> Func:
    """Produce maxTimeuuid(?)."""
    return fn("maxTimeuuid", name)


def now() -> Func:
    """Produce now()."""
    return fn("now")