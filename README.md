# firefluent

Chainable builders and immutable value types for describing Firestore
operations. Each builder step returns a new builder. The last step passes a
fully assembled request to a backend object that you supply.

The package does not talk to Firestore itself. The backend can wrap a real
client, or it can stand in for one in tests. It needs only the methods that the
builders you use call. They are listed below.

## Installation

```
pip install firefluent
```

To run the tests:

```
pip install "firefluent[test]"
pytest
```

## Field paths (`firefluent.paths`)

```python
from dataclasses import dataclass
from firefluent.paths import path, paths, path_camel_case, paths_camel_case

@dataclass
class Inner:
    some_id: str

@dataclass
class MyStruct:
    some_id: str
    some_num: int
    inner: Inner | None = None

path(MyStruct, "inner", "some_id")        # "inner.some_id"
paths(MyStruct, "some_id", "some_num")    # ["some_id", "some_num"]
path_camel_case(MyStruct, "some_num")     # "someNum"
path("anything.goes")                     # no class given, so nothing is checked
```

When a class comes first, each segment is checked against the fields of that
class. The class can be a dataclass or an annotated class. An unknown field
raises `ValueError`. `to_camel_case` converts a single name.

## Inserting (`firefluent.insert`)

```python
from firefluent.insert import InsertInitialBuilder

created = await (
    InsertInitialBuilder(backend)
    .into("test")
    .document_id("test-1")          # or .generate_document_id()
    .object(my_struct)              # or .document(raw_document)
    .execute(MyStruct)
)
```

`parent(path)` inserts into a nested collection, and `return_only_fields(...)`
limits the fields that come back.

## Updating and transforms (`firefluent.update`, `firefluent.transforms`)

```python
from firefluent.update import UpdateInitialBuilder
from firefluent.transforms import ServerValue

updated = await (
    UpdateInitialBuilder(backend)
    .fields(paths(MyStruct, "some_num"))
    .in_col("test")
    .precondition(my_precondition)
    .document_id("test-1")
    .object(changed)
    .execute(MyStruct)
)

(
    UpdateInitialBuilder(backend)
    .in_col("test")
    .document_id("test-1")
    .transforms(lambda t: t.fields([
        t.field("counter").increment(1),
        t.field("updated").server_value(ServerValue.REQUEST_TIME),
    ]))
    .only_transform()
    .add_to_batch(batch)
)
```

An object update can also be added to a transaction or batch with
`add_to_transaction(...)` or `add_to_batch(...)`. Either call returns whatever
the target returns. The transaction or batch object must provide
`update_object`/`update_object_at` and `transform`/`transform_at`.

## Reading by id (`firefluent.select_by_id`)

```python
from firefluent.select_by_id import SelectByIdBuilder

found = await SelectByIdBuilder(backend, "test").obj(MyStruct).one("test-1")
pairs = await SelectByIdBuilder(backend, "test").parent(parent_path).batch(["a", "b"])
```

If the backend raises `DataNotFoundError`, `one` returns `None`.

## Queries, filters and aggregations

```python
from firefluent.query import QueryParams, QueryDirection, AggregatedQueryParams
from firefluent.filters import QueryFilterBuilder
from firefluent.aggregation import AggregationBuilder
from firefluent.query_runners import AggregatedQueryDocBuilder, PartitionQueryDocBuilder

q = QueryFilterBuilder()
params = QueryParams(
    collection_id="test",
    filter=q.for_all([
        q.field("some_num").is_not_null(),
        q.field("some_string").eq("Test"),
        None,                               # None entries are skipped
    ]),
    order_by=[("some_num", QueryDirection.DESCENDING)],
    limit=10,
)

a = AggregationBuilder()
counts = await AggregatedQueryDocBuilder(
    backend, AggregatedQueryParams(params, a.fields([a.field("total").count()]))
).query()

stream = await (
    PartitionQueryDocBuilder(backend, params)
    .parallelism(4).partition_count(20).page_size(500)
    .stream_partitions_with_errors()
)
```

`QueryParams` is a frozen dataclass. It validates `limit`, `offset`,
`partition_count` and `page_size` against the unsigned 32-bit range. If
`for_all` or `for_any` receives only one filter, that filter is returned
unchanged. If it receives no filters, the result is `None`.

## Timestamps and errors

* `firefluent.timestamps`: `to_timestamp(dt)` turns a datetime into a
  `Timestamp(seconds, nanos)`. A naive datetime is taken to be UTC.
  `from_timestamp(ts)` gives back a UTC datetime and raises `DeserializeError`
  when the value is out of range.
* `firefluent.errors`: `FirestoreError` and its subclasses `DataNotFoundError`
  and `DeserializeError`.

## Backend methods called

| Builder | Backend methods |
| --- | --- |
| insert | `create_doc`, `create_doc_at`, `create_obj`, `create_obj_at` |
| update | `update_doc`, `update_obj`, `update_obj_at` |
| select by id | `get_doc`, `get_doc_at`, `get_obj_return_fields`, `get_obj_at_return_fields`, `batch_stream_get_docs[_at][_with_errors]`, `batch_stream_get_objects[_at][_with_errors]` |
| aggregated query | `aggregated_query_doc`, `stream_aggregated_query_doc[_with_errors]`, and the `_obj` forms |
| partition query | `stream_partition_query_doc_with_errors`, `stream_partition_query_obj_with_errors` |

## What the package does not do

* It has no single entry point that chains every operation from one object.
  You construct each builder directly, passing it your backend.
* It has no builders for deleting documents, for listing documents or
  collection ids, or for running a plain query. To do these, call your backend
  directly with a `QueryParams`.
* It has no client, no network code and no serialisation of objects to
  documents. All of that is the backend's job.