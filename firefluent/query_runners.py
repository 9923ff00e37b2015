"""Fluent builders that run partitioned and aggregated queries."""

from dataclasses import dataclass, replace
from typing import Any

from firefluent.query import AggregatedQueryParams, PartitionQueryParams, QueryParams


def _check_parallelism(value: int) -> None:
    if value < 0:
        raise ValueError(f"parallelism must not be negative, got {value}")


@dataclass(frozen=True)
class PartitionQueryDocBuilder:
    """A query split into partitions, read as documents."""

    db: Any
    params: QueryParams
    threads: int = 2
    partitions: int = 10
    page_length: int = 1000

    def __post_init__(self) -> None:
        _check_parallelism(self.threads)

    def parallelism(self, max_threads: int) -> "PartitionQueryDocBuilder":
        """Read at most this many partitions at once."""
        return replace(self, threads=max_threads)

    def partition_count(self, count: int) -> "PartitionQueryDocBuilder":
        """Split the query into this many partitions."""
        return replace(self, partitions=count)

    def page_size(self, length: int) -> "PartitionQueryDocBuilder":
        """Fetch this many documents per page."""
        return replace(self, page_length=length)

    async def stream_partitions_with_errors(self) -> Any:
        """Stream (partition, document) pairs, passing errors along in the stream."""
        return await self.db.stream_partition_query_doc_with_errors(
            self.threads,
            PartitionQueryParams(self.params, self.partitions, self.page_length),
        )


@dataclass(frozen=True)
class PartitionQueryObjBuilder:
    """A query split into partitions, read as objects."""

    db: Any
    params: QueryParams
    cls: Any = None
    threads: int = 2
    partitions: int = 10
    page_length: int = 1000

    def __post_init__(self) -> None:
        _check_parallelism(self.threads)

    def parallelism(self, max_threads: int) -> "PartitionQueryObjBuilder":
        """Read at most this many partitions at once."""
        return replace(self, threads=max_threads)

    def partition_count(self, count: int) -> "PartitionQueryObjBuilder":
        """Split the query into this many partitions."""
        return replace(self, partitions=count)

    def page_size(self, length: int) -> "PartitionQueryObjBuilder":
        """Fetch this many documents per page."""
        return replace(self, page_length=length)

    async def stream_partitions_with_errors(self) -> Any:
        """Stream (partition, object) pairs, passing errors along in the stream."""
        return await self.db.stream_partition_query_obj_with_errors(
            self.threads,
            PartitionQueryParams(self.params, self.partitions, self.page_length),
            self.cls,
        )


@dataclass(frozen=True)
class AggregatedQueryDocBuilder:
    """An aggregated query, read as documents."""

    db: Any
    params: AggregatedQueryParams

    def obj(self, cls: Any = None) -> "AggregatedQueryObjBuilder":
        """Read the results as objects of cls."""
        return AggregatedQueryObjBuilder(self.db, self.params, cls)

    async def query(self) -> Any:
        """Run the query and return all results."""
        return await self.db.aggregated_query_doc(self.params)

    async def stream_query(self) -> Any:
        """Run the query and stream the results."""
        return await self.db.stream_aggregated_query_doc(self.params)

    async def stream_query_with_errors(self) -> Any:
        """Run the query and stream the results, passing errors along in the stream."""
        return await self.db.stream_aggregated_query_doc_with_errors(self.params)


@dataclass(frozen=True)
class AggregatedQueryObjBuilder:
    """An aggregated query, read as objects."""

    db: Any
    params: AggregatedQueryParams
    cls: Any = None

    async def query(self) -> Any:
        """Run the query and return all results."""
        return await self.db.aggregated_query_obj(self.params, self.cls)

    async def stream_query(self) -> Any:
        """Run the query and stream the results."""
        return await self.db.stream_aggregated_query_obj(self.params, self.cls)

    async def stream_query_with_errors(self) -> Any:
        """Run the query and stream the results, passing errors along in the stream."""
        return await self.db.stream_aggregated_query_obj_with_errors(self.params, self.cls)