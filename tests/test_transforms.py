import pytest

from firefluent.transforms import (
    FieldTransform,
    ServerValue,
    TransformBuilder,
    TransformFieldExpr,
    TransformKind,
)


def test_field_returns_expr_with_name():
    expr = TransformBuilder().field("counter")
    assert isinstance(expr, TransformFieldExpr)
    assert expr.field_name == "counter"


@pytest.mark.parametrize(
    "method, kind",
    [
        ("increment", TransformKind.INCREMENT),
        ("maximum", TransformKind.MAXIMUM),
        ("minimum", TransformKind.MINIMUM),
    ],
)
def test_numeric_transforms(method, kind):
    result = getattr(TransformBuilder().field("some_num"), method)(5)
    assert result == FieldTransform("some_num", kind, 5)


def test_server_value():
    result = TransformBuilder().field("updated").server_value(ServerValue.REQUEST_TIME)
    assert result.kind is TransformKind.SET_TO_SERVER_VALUE
    assert result.value is ServerValue.REQUEST_TIME


def test_server_value_from_wire_name():
    result = TransformBuilder().field("updated").server_value("REQUEST_TIME")
    assert result.value is ServerValue.REQUEST_TIME


def test_server_value_rejects_unknown():
    with pytest.raises(ValueError):
        TransformBuilder().field("updated").server_value("NOT_A_VALUE")


def test_array_transforms_accept_any_iterable():
    b = TransformBuilder()
    appended = b.field("tags").append_missing_elements(x for x in ["a", "b"])
    removed = b.field("tags").remove_all_from_array(["c"])
    assert appended == FieldTransform("tags", TransformKind.APPEND_MISSING_ELEMENTS, ("a", "b"))
    assert removed == FieldTransform("tags", TransformKind.REMOVE_ALL_FROM_ARRAY, ("c",))


def test_fields_skips_none_and_keeps_order():
    b = TransformBuilder()
    first = b.field("x").increment(1)
    second = b.field("y").minimum(2)
    assert b.fields([first, None, second, None]) == [first, second]


def test_fields_all_none_is_empty():
    assert TransformBuilder().fields([None, None]) == []