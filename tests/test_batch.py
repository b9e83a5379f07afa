from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import pytest

from cqlx.qb.batch import batch


@dataclass
class MockBuilder:
    stmt: str
    names: list = field(default_factory=list)

    def to_cql(self):
        return self.stmt, list(self.names)


STMT = "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
M = MockBuilder(STMT, ["id", "user_uuid", "firstname"])
TS = datetime(2005, 5, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "builder, stmt, names",
    [
        (
            batch().add(M),
            "BEGIN BATCH " + STMT + "; APPLY BATCH ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            batch().add_with_prefix("a", M).add_with_prefix("b", M),
            "BEGIN BATCH " + STMT + "; " + STMT + "; APPLY BATCH ",
            ["a.id", "a.user_uuid", "a.firstname", "b.id", "b.user_uuid", "b.firstname"],
        ),
        (batch().unlogged(), "BEGIN UNLOGGED BATCH APPLY BATCH ", []),
        (batch().counter(), "BEGIN COUNTER BATCH APPLY BATCH ", []),
        (batch().ttl(timedelta(seconds=1)), "BEGIN BATCH USING TTL 1 APPLY BATCH ", []),
        (batch().ttl_named("ttl"), "BEGIN BATCH USING TTL ? APPLY BATCH ", ["ttl"]),
        (
            batch().timestamp(TS),
            "BEGIN BATCH USING TIMESTAMP 1115251200000000 APPLY BATCH ",
            [],
        ),
        (batch().timestamp_named("ts"), "BEGIN BATCH USING TIMESTAMP ? APPLY BATCH ", ["ts"]),
    ],
)
def test_batch_builder(builder, stmt, names):
    assert builder.to_cql() == (stmt, names)


def test_add_stmt_with_empty_prefix_keeps_names():
    stmt, names = batch().add_stmt_with_prefix("", "X", ["a", "b"]).to_cql()
    assert stmt == "BEGIN BATCH X; APPLY BATCH "
    assert names == ["a", "b"]


def test_add_stmt_keeps_names_unprefixed():
    assert batch().add_stmt("X", ["a"]).add_stmt("Y", ["b"]).to_cql() == (
        "BEGIN BATCH X; Y; APPLY BATCH ",
        ["a", "b"],
    )