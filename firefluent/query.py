"""Query parameters: collections, ordering, cursors and limits."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

_U32_MAX = 2**32 - 1


def _check_range(name: str, value: Optional[int], maximum: Optional[int] = None) -> None:
    if value is None:
        return
    if maximum is None:
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    elif not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


def _orders(items: Iterable[Any]) -> tuple:
    return tuple(QueryOrder.of(item) for item in items)


def _field_names(items: Iterable[Any]) -> tuple[str, ...]:
    return tuple(str(item) for item in items)


def _normalize(obj: Any, **converters: Callable[[Any], Any]) -> None:
    """Convert the named attributes of a frozen dataclass that are not None."""
    for name, convert in converters.items():
        value = getattr(obj, name)
        if value is not None:
            object.__setattr__(obj, name, convert(value))


def _call_maybe_at(target: Any, name: str, parent: Optional[str], *args: Any) -> Any:
    """Call target.<name>_at(parent, ...) when a parent is given, else target.<name>(...)."""
    if parent is not None:
        return getattr(target, f"{name}_at")(parent, *args)
    return getattr(target, name)(*args)


class QueryDirection(Enum):
    """Sort direction of an ordered field."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


@dataclass(frozen=True)
class QueryOrder:
    """A field to order results by."""

    field_name: str
    direction: QueryDirection = QueryDirection.ASCENDING

    @classmethod
    def of(cls, value: Any) -> "QueryOrder":
        """Build an order from an order, a field name, or a (field, direction) pair."""
        if isinstance(value, QueryOrder):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, tuple) and len(value) == 2:
            field_name, direction = value
            return cls(field_name, QueryDirection(direction))
        raise TypeError(f"cannot build a query order from {value!r}")


@dataclass(frozen=True)
class QueryCollection:
    """A single collection, or a group of collections queried together."""

    collection_ids: tuple[str, ...]
    group: bool = False

    def __post_init__(self) -> None:
        _normalize(self, collection_ids=tuple)
        if not self.group and len(self.collection_ids) != 1:
            raise ValueError("a single collection needs exactly one collection id")

    @classmethod
    def of(cls, value: Any) -> "QueryCollection":
        """Build from a collection, a collection id, or an iterable of ids."""
        if isinstance(value, QueryCollection):
            return value
        if isinstance(value, str):
            return cls((value,))
        if isinstance(value, Iterable):
            return cls(tuple(value), group=True)
        raise TypeError(f"cannot build a query collection from {value!r}")


@dataclass(frozen=True)
class QueryCursor:
    """A position in the ordered results, before or after the given values."""

    values: tuple
    before: bool = True

    def __post_init__(self) -> None:
        _normalize(self, values=tuple)


@dataclass(frozen=True)
class QueryParams:
    """Everything that describes a structured query."""

    collection_id: QueryCollection
    parent: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    order_by: Optional[tuple[QueryOrder, ...]] = None
    filter: Any = None
    all_descendants: bool = False
    return_only_fields: Optional[tuple[str, ...]] = None
    start_at: Optional[QueryCursor] = None
    end_at: Optional[QueryCursor] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "collection_id", QueryCollection.of(self.collection_id))
        for name in ("limit", "offset"):
            _check_range(name, getattr(self, name), _U32_MAX)
        _normalize(self, order_by=_orders, return_only_fields=_field_names)


@dataclass(frozen=True)
class AggregatedQueryParams:
    """A query together with the aggregations to compute over it."""

    query_params: QueryParams
    aggregations: tuple = ()

    def __post_init__(self) -> None:
        _normalize(self, aggregations=tuple)


@dataclass(frozen=True)
class PartitionQueryParams:
    """A query split into partitions that can be read in parallel."""

    query_params: QueryParams
    partition_count: int = 10
    page_size: int = 1000

    def __post_init__(self) -> None:
        for name in ("partition_count", "page_size"):
            _check_range(name, getattr(self, name), _U32_MAX)