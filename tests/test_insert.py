from datetime import datetime, timedelta, timezone

import pytest

from cqlx.qb.func import now
from cqlx.qb.insert import insert

T = "cycling.cyclist_name"
TS = datetime(2005, 5, 5, tzinfo=timezone.utc)
COLS = ("id", "user_uuid", "firstname")


def base():
    return insert(T).columns(*COLS)


@pytest.mark.parametrize(
    "builder, stmt, names",
    [
        (
            base(),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) ",
            ["id", "user_uuid", "firstname"],
        ),
        (base().json(), "INSERT INTO cycling.cyclist_name JSON ?", []),
        (
            base().into("Foobar"),
            "INSERT INTO Foobar (id,user_uuid,firstname) VALUES (?,?,?) ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            base().columns("stars"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) VALUES (?,?,?,?) ",
            ["id", "user_uuid", "firstname", "stars"],
        ),
        (
            base().named_column("stars", "stars_name"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) VALUES (?,?,?,?) ",
            ["id", "user_uuid", "firstname", "stars_name"],
        ),
        (
            base().lit_column("stars", "stars_lit"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) "
            "VALUES (?,?,?,stars_lit) ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            base().ttl(timedelta(seconds=1)),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
            "USING TTL 1 ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            base().ttl_named("ttl"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
            "USING TTL ? ",
            ["id", "user_uuid", "firstname", "ttl"],
        ),
        (
            base().timestamp(TS),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
            "USING TIMESTAMP 1115251200000000 ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            base().timestamp_named("ts"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
            "USING TIMESTAMP ? ",
            ["id", "user_uuid", "firstname", "ts"],
        ),
        (
            insert(T).tuple_column("id", 2),
            "INSERT INTO cycling.cyclist_name (id) VALUES ((?,?)) ",
            ["id_0", "id_1"],
        ),
        (
            insert(T).tuple_column("id", 2).columns("user_uuid"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid) VALUES ((?,?),?) ",
            ["id_0", "id_1", "user_uuid"],
        ),
        (
            base().unique(),
            "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
            "IF NOT EXISTS ",
            ["id", "user_uuid", "firstname"],
        ),
        (
            insert(T).func_column("id", now()),
            "INSERT INTO cycling.cyclist_name (id) VALUES (now()) ",
            [],
        ),
        (
            insert(T).func_column("id", now()).columns("user_uuid"),
            "INSERT INTO cycling.cyclist_name (id,user_uuid) VALUES (now(),?) ",
            ["user_uuid"],
        ),
    ],
)
def test_insert_builder(builder, stmt, names):
    assert builder.to_cql() == (stmt, names)


def test_unique_precedes_using():
    stmt, names = insert(T).columns("a").unique().ttl_named("ttl").to_cql()
    assert stmt == "INSERT INTO cycling.cyclist_name (a) VALUES (?) IF NOT EXISTS USING TTL ? "
    assert names == ["a", "ttl"]