from datetime import datetime, timezone

import pytest

from cqlx.qb.cmp import eq_named, eq_tuple, gt, gt_tuple
from cqlx.qb.delete import delete

W = eq_named("id", "expr")
TS = datetime(2005, 5, 5, tzinfo=timezone.utc)
T = "cycling.cyclist_name"


@pytest.mark.parametrize(
    "builder, stmt, names",
    [
        (delete(T).where(W), "DELETE FROM cycling.cyclist_name WHERE id=? ", ["expr"]),
        (delete(T).where(W).from_("Foobar"), "DELETE FROM Foobar WHERE id=? ", ["expr"]),
        (
            delete(T).where(W).columns("stars"),
            "DELETE stars FROM cycling.cyclist_name WHERE id=? ",
            ["expr"],
        ),
        (
            delete(T).where(W, gt("firstname")),
            "DELETE FROM cycling.cyclist_name WHERE id=? AND firstname>? ",
            ["expr", "firstname"],
        ),
        (
            delete(T).where(eq_tuple("id", 2)).columns("stars"),
            "DELETE stars FROM cycling.cyclist_name WHERE id=(?,?) ",
            ["id_0", "id_1"],
        ),
        (
            delete(T).where(W, gt_tuple("firstname", 2)),
            "DELETE FROM cycling.cyclist_name WHERE id=? AND firstname>(?,?) ",
            ["expr", "firstname_0", "firstname_1"],
        ),
        (
            delete(T).where(eq_tuple("id", 2), gt_tuple("firstname", 2)),
            "DELETE FROM cycling.cyclist_name WHERE id=(?,?) AND firstname>(?,?) ",
            ["id_0", "id_1", "firstname_0", "firstname_1"],
        ),
        (
            delete(T).where(W).if_(gt("firstname")),
            "DELETE FROM cycling.cyclist_name WHERE id=? IF firstname>? ",
            ["expr", "firstname"],
        ),
        (
            delete(T).where(W).timestamp(TS),
            "DELETE FROM cycling.cyclist_name USING TIMESTAMP 1115251200000000 WHERE id=? ",
            ["expr"],
        ),
        (
            delete(T).where(W).timestamp_named("ts"),
            "DELETE FROM cycling.cyclist_name USING TIMESTAMP ? WHERE id=? ",
            ["ts", "expr"],
        ),
        (
            delete(T).where(W).existing(),
            "DELETE FROM cycling.cyclist_name WHERE id=? IF EXISTS ",
            ["expr"],
        ),
    ],
)
def test_delete_builder(builder, stmt, names):
    assert builder.to_cql() == (stmt, names)


def test_to_cql_is_repeatable():
    b = delete(T).where(W)
    expected = ("DELETE FROM cycling.cyclist_name WHERE id=? ", ["expr"])
    first = b.to_cql()
    second = b.to_cql()
    assert first == expected
    assert second == expected