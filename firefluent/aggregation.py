"""Aggregations over query results and the builder that produces them."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from firefluent.query import _check_range


@dataclass(frozen=True)
class AggregationCount:
    """Counts documents, stopping at up_to when it is given."""

    up_to: Optional[int] = None

    def __post_init__(self) -> None:
        _check_range("up_to", self.up_to)


@dataclass(frozen=True)
class Aggregation:
    """An aggregation stored under an alias."""

    alias: str
    operator: Optional[AggregationCount] = None


class AggregationBuilder:
    """Builds aggregations; expressions that are None are left out."""

    def fields(self, aggregation_field_expr: Iterable[Optional[Aggregation]]) -> list[Aggregation]:
        """Collect the aggregations that are present."""
        return [agg for agg in aggregation_field_expr if agg is not None]

    def field(self, field_name: str) -> "AggregationFieldExpr":
        """Start an aggregation stored under the given alias."""
        return AggregationFieldExpr(str(field_name))


@dataclass(frozen=True)
class AggregationFieldExpr:
    """An alias awaiting the aggregation it names."""

    field_name: str

    def count(self) -> Aggregation:
        """Count all matching documents."""
        return Aggregation(self.field_name, AggregationCount())

    def count_up_to(self, up_to: int) -> Aggregation:
        """Count matching documents, stopping at up_to."""
        return Aggregation(self.field_name, AggregationCount(up_to))