# cqlx

Fluent builders for CQL (Cassandra / ScyllaDB) statements. Every builder
produces a statement with `?` placeholders together with the ordered list of
parameter names those placeholders stand for, so values can later be bound
by name.

The package has no third-party dependencies.

## Installation

```
pip install cqlx
```

## Building statements

Each builder has a `to_cql()` method returning `(statement, names)`.

```python
from cqlx.qb.select import select, as_, Order
from cqlx.qb.cmp import eq_named, gt

select("cycling.cyclist_name").where(eq_named("id", "expr"), gt("firstname")).to_cql()
# ("SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? ", ["expr", "firstname"])

select("cycling.cyclist_name").where(eq_named("id", "expr")).order_by("firstname", Order.ASC).limit(10).to_cql()
# ("SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname ASC LIMIT 10 ", ["expr"])

select("cycling.cyclist_name").columns("id", as_("firstname", "name")).to_cql()
# ("SELECT id,firstname AS name FROM cycling.cyclist_name ", [])
```

`SelectBuilder` also offers `from_`, `json`, `distinct`, `group_by`,
`limit_per_partition`, `allow_filtering`, `bypass_cache` and the aggregates
`count`, `count_all`, `min`, `max`, `avg` and `sum`. A negative limit raises
`ValueError`; a limit of zero leaves the clause out.

Inserts, updates and deletes work the same way:

```python
from datetime import datetime, timedelta, timezone
from cqlx.qb.insert import insert
from cqlx.qb.update import update
from cqlx.qb.delete import delete
from cqlx.qb.cmp import eq, eq_named
from cqlx.qb.func import now

insert("cycling.cyclist_name").columns("id", "user_uuid", "firstname").ttl(timedelta(seconds=1)).to_cql()
# ("INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) USING TTL 1 ",
#  ["id", "user_uuid", "firstname"])

insert("cycling.cyclist_name").func_column("id", now()).to_cql()
# ("INSERT INTO cycling.cyclist_name (id) VALUES (now()) ", [])

update("cycling.cyclist_name").add_named("total", "inc").where(eq_named("id", "expr")).to_cql()
# ("UPDATE cycling.cyclist_name SET total=total+? WHERE id=? ", ["inc", "expr"])

delete("cycling.cyclist_name").where(eq("id")).timestamp(datetime(2005, 5, 5, tzinfo=timezone.utc)).to_cql()
# ("DELETE FROM cycling.cyclist_name USING TIMESTAMP 1115251200000000 WHERE id=? ", ["id"])
```

TTLs accept a `timedelta` or a number of seconds; timestamps accept a
`datetime` (naive values are taken as UTC). `cqlx.qb.using` exposes the
conversions as `ttl()` and `timestamp()`.

### Comparators

`cqlx.qb.cmp` provides `eq`, `ne`, `lt`, `lt_or_eq`, `gt`, `gt_or_eq`,
`in_`, `contains`, `contains_key` and `like`, with `_tuple`, `_named`,
`_lit` and `_func` variants where CQL allows them:

```python
from cqlx.qb.cmp import lt_tuple, eq_func
from cqlx.qb.func import fn

lt_tuple("lt", 2).render()                          # ("lt<(?,?)", ["lt_0", "lt_1"])
eq_func("eq", fn("fn", "arg0", "arg1")).render()    # ("eq=fn(?,?)", ["arg0", "arg1"])
```

`cqlx.qb.func` also has `min_timeuuid`, `max_timeuuid` and `now`.

### Token pagination

```python
from cqlx.qb.token import token

select("person").columns("first_name").where(token("first_name").gt()).limit(10).to_cql()
# ("SELECT first_name FROM person WHERE token(first_name)>token(?) LIMIT 10 ", ["first_name"])
```

`TokenBuilder` has `eq`, `lt`, `lt_or_eq`, `gt`, `gt_or_eq`, each with
`_named`, `_value` and `_value_named` variants.

### Batches

```python
from cqlx.qb.batch import batch

person = insert("person").columns("first_name", "last_name")
batch().add_with_prefix("a", person).add_with_prefix("b", person).to_cql()
# ("BEGIN BATCH INSERT INTO person (first_name,last_name) VALUES (?,?) ; "
#  "INSERT INTO person (first_name,last_name) VALUES (?,?) ; APPLY BATCH ",
#  ["a.first_name", "a.last_name", "b.first_name", "b.last_name"])
```

`BatchBuilder` also has `add`, `add_stmt`, `add_stmt_with_prefix`,
`unlogged`, `counter`, `ttl`, `ttl_named`, `timestamp` and
`timestamp_named`. Anything with a `to_cql()` method satisfies the
`Builder` protocol and can be added.

## Table helpers

`cqlx.table.Table` derives common statements from a `Metadata` describing a
table's name, columns, partition key and clustering key:

```python
from cqlx.table import Metadata, Table

t = Table(Metadata("table", columns=["a", "b", "c", "d"], part_key=["a"], sort_key=["b"]))
t.get()         # ("SELECT * FROM table WHERE a=? AND b=? ", ["a", "b"])
t.select("d")   # ("SELECT d FROM table WHERE a=? ", ["a"])
t.insert()      # ("INSERT INTO table (a,b,c,d) VALUES (?,?,?,?) ", ["a", "b", "c", "d"])
t.update("d")   # ("UPDATE table SET d=? WHERE a=? AND b=? ", ["d", "a", "b"])
t.delete()      # ("DELETE FROM table WHERE a=? AND b=? ", ["a", "b"])
```

`select_builder(...)` returns a `SelectBuilder` already filtered by partition
key, for adding further clauses.

## What this package does not do

It only produces statement text and parameter names. It does not connect to
a database or execute statements, does not compile `:name` style queries,
does not bind values from objects or mappings, does not scan result rows,
and does not apply schema migrations. Pair it with a CQL driver for those.

## Running the tests

```
pip install -e ".[test]"
pytest
```