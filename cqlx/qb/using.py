"""USING TTL and USING TIMESTAMP clauses."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_UNSET_ZERO = -1


def ttl(duration: timedelta | float) -> int:
    """Convert a duration to whole seconds as expected by USING TTL."""
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    return int(seconds)


def timestamp(moment: datetime) -> int:
    """Convert a time to microseconds since the epoch for USING TIMESTAMP.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(microseconds=1)


@dataclass
class Using:
    """Accumulates TTL and TIMESTAMP settings of a statement."""

    ttl_value: int = 0
    ttl_name: str = ""
    timestamp_value: int = 0
    timestamp_name: str = ""

    def ttl(self, duration: timedelta | float) -> Using:
        value = ttl(duration)
        # A zero TTL is remembered as -1 so that it is still written out.
        self.ttl_value = _UNSET_ZERO if value == 0 else value
        self.timestamp_name = ""
        return self

    def ttl_named(self, name: str) -> Using:
        self.ttl_value = 0
        self.ttl_name = name
        return self

    def timestamp(self, moment: datetime) -> Using:
        self.timestamp_value = timestamp(moment)
        self.timestamp_name = ""
        return self

    def timestamp_named(self, name: str) -> Using:
        self.timestamp_value = 0
        self.timestamp_name = name
        return self

    def render(self) -> tuple[str, list[str]]:
        parts: list[str] = []
        names: list[str] = []
        has_ttl = False

        if self.ttl_value != 0:
            has_ttl = True
            value = 0 if self.ttl_value == _UNSET_ZERO else self.ttl_value
            parts.append(f"USING TTL {value} ")
        elif self.ttl_name:
            has_ttl = True
            parts.append("USING TTL ? ")
            names.append(self.ttl_name)

        keyword = "AND TIMESTAMP" if has_ttl else "USING TIMESTAMP"
        if self.timestamp_value != 0:
            parts.append(f"{keyword} {self.timestamp_value} ")
        elif self.timestamp_name:
            parts.append(f"{keyword} ? ")
            names.append(self.timestamp_name)

        return "".join(parts), names