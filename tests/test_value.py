import pytest

from cqlx.qb.value import Lit, Param, TupleParam, join_columns, placeholders


def test_param_renders_single_placeholder():
    assert Param("id").render() == ("?", ["id"])


def test_tuple_param_two():
    assert TupleParam("lt", 2).render() == ("(?,?)", ["lt_0", "lt_1"])


def test_tuple_param_three():
    assert TupleParam("ne", 3).render() == ("(?,?,?)", ["ne_0", "ne_1", "ne_2"])


@pytest.mark.parametrize("count", [1, 2, 5, 10])
def test_tuple_param_invariants(count):
    text, names = TupleParam("col", count).render()
    assert text.count("?") == count
    assert text.startswith("(") and text.endswith(")")
    assert len(names) == count
    assert all(name.startswith("col_") for name in names)


def test_lit_has_no_names():
    assert Lit("litval").render() == ("litval", [])


@pytest.mark.parametrize("count", [0, -1])
def test_placeholders_empty_for_non_positive(count):
    assert placeholders(count) == ""


@pytest.mark.parametrize("count", [1, 2, 7])
def test_placeholders_count(count):
    result = placeholders(count)
    assert result.split(",") == ["?"] * count


def test_join_columns():
    assert join_columns(["id", "user_uuid", "firstname"]) == "id,user_uuid,firstname"
    assert join_columns([]) == ""