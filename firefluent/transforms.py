"""Server-side field transforms and the fluent builder that produces them."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class TransformKind(Enum):
    """What a field transform does to its field."""

    INCREMENT = "INCREMENT"
    MAXIMUM = "MAXIMUM"
    MINIMUM = "MINIMUM"
    SET_TO_SERVER_VALUE = "SET_TO_SERVER_VALUE"
    APPEND_MISSING_ELEMENTS = "APPEND_MISSING_ELEMENTS"
    REMOVE_ALL_FROM_ARRAY = "REMOVE_ALL_FROM_ARRAY"


class ServerValue(Enum):
    """A value computed by the server when the write is applied."""

    UNSPECIFIED = "SERVER_VALUE_UNSPECIFIED"
    REQUEST_TIME = "REQUEST_TIME"


@dataclass(frozen=True)
class FieldTransform:
    """A transform applied to one field of a document."""

    field_name: str
    kind: TransformKind
    value: Any = None


class TransformBuilder:
    """Builds field transforms; expressions that are None are left out."""

    def fields(
        self, transform_field_expr: Iterable[Optional[FieldTransform]]
    ) -> list[FieldTransform]:
        """Collect the transforms that are present, in order."""
        return [item for item in transform_field_expr if item is not None]

    def field(self, field_name: str) -> "TransformFieldExpr":
        """Start a transform on the named field."""
        return TransformFieldExpr(str(field_name))


class TransformFieldExpr:
    """A field awaiting the transform to apply to it."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def _make(self, kind: TransformKind, value: Any) -> FieldTransform:
        return FieldTransform(self.field_name, kind, value)

    def increment(self, value: Any) -> FieldTransform:
        """Add value to the field."""
        return self._make(TransformKind.INCREMENT, value)

    def maximum(self, value: Any) -> FieldTransform:
        """Set the field to the larger of its value and value."""
        return self._make(TransformKind.MAXIMUM, value)

    def minimum(self, value: Any) -> FieldTransform:
        """Set the field to the smaller of its value and value."""
        return self._make(TransformKind.MINIMUM, value)

    def server_value(self, value: Any) -> FieldTransform:
        """Set the field to a value computed by the server."""
        return self._make(TransformKind.SET_TO_SERVER_VALUE, ServerValue(value))

    def append_missing_elements(self, values: Iterable[Any]) -> FieldTransform:
        """Append the values not already present in the array field."""
        return self._make(TransformKind.APPEND_MISSING_ELEMENTS, tuple(values))

    def remove_all_from_array(self, values: Iterable[Any]) -> FieldTransform:
        """Remove every occurrence of the values from the array field."""
        return self._make(TransformKind.REMOVE_ALL_FROM_ARRAY, tuple(values))