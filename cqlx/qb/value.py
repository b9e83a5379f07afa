"""Value expressions used in initializers, assignments and comparisons."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


class Value(Protocol):
    """Anything that renders to a CQL fragment and a list of parameter names."""

    def render(self) -> tuple[str, list[str]]: ...


def placeholders(count: int) -> str:
    """Return ``count`` '?' placeholders joined with commas."""
    if count < 1:
        return ""
    return ",".join("?" * count)


def join_columns(columns: Iterable[str]) -> str:
    """Join column names with commas."""
    return ",".join(columns)


@dataclass(frozen=True)
class Param:
    """A named CQL '?' parameter."""

    name: str

    def render(self) -> tuple[str, list[str]]:
        return "?", [self.name]


@dataclass(frozen=True)
class TupleParam:
    """A named CQL tuple parameter rendered as '(?,?,...)'."""

    name: str
    count: int

    def render(self) -> tuple[str, list[str]]:
        base = f"{self.name}_"
        leading = max(self.count - 1, 0)
        text = "(" + "?," * leading + "?)"
        names = [f"{base}{i}" for i in range(leading)]
        names.append(f"{base}{self.count - 1}")
        return text, names


@dataclass(frozen=True)
class Lit:
    """A literal CQL value; adds no parameters."""

    literal: str

    def render(self) -> tuple[str, list[str]]:
        return self.literal, []