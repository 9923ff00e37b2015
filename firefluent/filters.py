"""Query filters and the fluent builder that produces them."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class CompositeOperator(Enum):
    """How the filters of a composite filter are combined."""

    AND = "AND"
    OR = "OR"


class CompareOperator(Enum):
    """Comparison between a field and a value."""

    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    IN = "IN"
    NOT_IN = "NOT_IN"
    ARRAY_CONTAINS = "ARRAY_CONTAINS"
    ARRAY_CONTAINS_ANY = "ARRAY_CONTAINS_ANY"


class UnaryOperator(Enum):
    """Test on a single field."""

    IS_NAN = "IS_NAN"
    IS_NOT_NAN = "IS_NOT_NAN"
    IS_NULL = "IS_NULL"
    IS_NOT_NULL = "IS_NOT_NULL"


@dataclass(frozen=True)
class CompareFilter:
    """Compares a field with a value."""

    field_name: str
    op: CompareOperator
    value: Any


@dataclass(frozen=True)
class UnaryFilter:
    """Tests a single field."""

    field_name: str
    op: UnaryOperator


@dataclass(frozen=True)
class CompositeFilter:
    """Several filters combined with AND or OR."""

    filters: tuple
    op: CompositeOperator

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))


QueryFilter = Union[CompareFilter, UnaryFilter, CompositeFilter]


class QueryFilterBuilder:
    """Builds filters; expressions that are None are left out."""

    def _combine(
        self, filter_expressions: Iterable[Optional[QueryFilter]], op: CompositeOperator
    ) -> Optional[QueryFilter]:
        filters = [f for f in filter_expressions if f is not None]
        if not filters:
            return None
        if len(filters) == 1:
            return filters[0]
        return CompositeFilter(tuple(filters), op)

    def for_all(self, filter_expressions: Iterable[Optional[QueryFilter]]) -> Optional[QueryFilter]:
        """Combine the filters so that all of them must hold."""
        return self._combine(filter_expressions, CompositeOperator.AND)

    def for_any(self, filter_expressions: Iterable[Optional[QueryFilter]]) -> Optional[QueryFilter]:
        """Combine the filters so that any of them may hold."""
        return self._combine(filter_expressions, CompositeOperator.OR)

    def field(self, field_name: str) -> "QueryFilterFieldExpr":
        """Start a filter on the named field."""
        return QueryFilterFieldExpr(str(field_name))


class QueryFilterFieldExpr:
    """A field awaiting the condition that makes it a filter."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def _compare(self, op: CompareOperator, value: Any) -> CompareFilter:
        return CompareFilter(self.field_name, op, value)

    def _unary(self, op: UnaryOperator) -> UnaryFilter:
        return UnaryFilter(self.field_name, op)

    def eq(self, value: Any) -> CompareFilter:
        return self.equal(value)

    def neq(self, value: Any) -> CompareFilter:
        return self.not_equal(value)

    def equal(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.EQUAL, value)

    def not_equal(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.NOT_EQUAL, value)

    def less_than(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.LESS_THAN, value)

    def less_than_or_equal(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.LESS_THAN_OR_EQUAL, value)

    def greater_than(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.GREATER_THAN, value)

    def greater_than_or_equal(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.GREATER_THAN_OR_EQUAL, value)

    def is_in(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.IN, value)

    def is_not_in(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.NOT_IN, value)

    def array_contains(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.ARRAY_CONTAINS, value)

    def array_contains_any(self, value: Any) -> CompareFilter:
        return self._compare(CompareOperator.ARRAY_CONTAINS_ANY, value)

    def is_nan(self) -> UnaryFilter:
        return self._unary(UnaryOperator.IS_NAN)

    def is_not_nan(self) -> UnaryFilter:
        return self._unary(UnaryOperator.IS_NOT_NAN)

    def is_null(self) -> UnaryFilter:
        return self._unary(UnaryOperator.IS_NULL)

    def is_not_null(self) -> UnaryFilter:
        return self._unary(UnaryOperator.IS_NOT_NULL)