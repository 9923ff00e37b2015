import dataclasses

import pytest

from firefluent.query import (
    AggregatedQueryParams,
    PartitionQueryParams,
    QueryCollection,
    QueryCursor,
    QueryDirection,
    QueryOrder,
    QueryParams,
)


def test_collection_from_string_is_single():
    collection = QueryCollection.of("test")
    assert collection == QueryCollection(("test",))
    assert collection.group is False


def test_collection_from_list_is_group():
    collection = QueryCollection.of(["a", "b"])
    assert collection.collection_ids == ("a", "b")
    assert collection.group is True
    assert QueryCollection.of(collection) is collection


def test_single_collection_needs_one_id():
    with pytest.raises(ValueError):
        QueryCollection(("a", "b"))


def test_collection_rejects_other_values():
    with pytest.raises(TypeError):
        QueryCollection.of(42)


def test_order_of_variants():
    assert QueryOrder.of("some_num") == QueryOrder("some_num", QueryDirection.ASCENDING)
    assert QueryOrder.of(("some_num", QueryDirection.DESCENDING)).direction is QueryDirection.DESCENDING
    assert QueryOrder.of(("x", "DESCENDING")) == QueryOrder("x", QueryDirection.DESCENDING)
    order = QueryOrder("f")
    assert QueryOrder.of(order) is order
    with pytest.raises(TypeError):
        QueryOrder.of(3)


def test_params_normalise_inputs():
    params = QueryParams(
        "test",
        order_by=[("some_num", QueryDirection.DESCENDING)],
        return_only_fields=["a", "b"],
    )
    assert params.collection_id == QueryCollection.of("test")
    assert params.order_by == (QueryOrder("some_num", QueryDirection.DESCENDING),)
    assert params.return_only_fields == ("a", "b")
    assert params.all_descendants is False


def test_params_replace_keeps_other_fields():
    params = QueryParams("test", limit=5)
    changed = dataclasses.replace(params, offset=3)
    assert (changed.limit, changed.offset) == (5, 3)
    assert params.offset is None


@pytest.mark.parametrize("field", ["limit", "offset"])
def test_params_reject_out_of_range(field):
    with pytest.raises(ValueError):
        QueryParams("test", **{field: -1})
    with pytest.raises(ValueError):
        QueryParams("test", **{field: 2**32})


def test_cursor_values_become_tuple():
    cursor = QueryCursor([1, "a"], before=False)
    assert cursor.values == (1, "a")
    assert cursor.before is False


def test_partition_defaults_and_validation():
    params = PartitionQueryParams(QueryParams("test"))
    assert (params.partition_count, params.page_size) == (10, 1000)
    with pytest.raises(ValueError):
        PartitionQueryParams(QueryParams("test"), partition_count=-1)


def test_aggregated_params_hold_aggregations():
    params = AggregatedQueryParams(QueryParams("test"), ["x"])
    assert params.aggregations == ("x",)
    assert params.query_params.collection_id == QueryCollection.of("test")