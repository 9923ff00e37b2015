"""Fluent builders for reading documents by their ids."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Optional

from firefluent.errors import DataNotFoundError


def _as_list(fields: Optional[tuple]) -> Optional[list]:
    return None if fields is None else list(fields)


def _ids(document_ids: Iterable[str]) -> list[str]:
    if isinstance(document_ids, str):
        raise TypeError("document_ids must be an iterable of ids, not a single string")
    return [str(doc_id) for doc_id in document_ids]


@dataclass(frozen=True)
class SelectByIdBuilder:
    """Reads documents of a collection by id."""

    db: Any
    collection: str
    only_fields: Optional[tuple[str, ...]] = None
    parent_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.only_fields is not None:
            object.__setattr__(self, "only_fields", tuple(str(f) for f in self.only_fields))

    def parent(self, parent: str) -> "SelectByIdBuilder":
        """Read from a collection nested under the given document path."""
        return replace(self, parent_path=str(parent))

    def obj(self, cls: Any = None) -> "SelectObjByIdBuilder":
        """Read the documents as objects of cls."""
        return SelectObjByIdBuilder(
            self.db, self.collection, self.parent_path, self.only_fields, cls
        )

    async def one(self, document_id: str) -> Any:
        """Return the document with this id, or None if it does not exist."""
        try:
            if self.parent_path is not None:
                return await self.db.get_doc_at(
                    self.parent_path,
                    self.collection,
                    str(document_id),
                    _as_list(self.only_fields),
                )
            return await self.db.get_doc(
                self.collection, str(document_id), _as_list(self.only_fields)
            )
        except DataNotFoundError:
            return None

    async def batch(self, document_ids: Iterable[str]) -> Any:
        """Stream (id, document or None) pairs for the given ids."""
        ids = _ids(document_ids)
        if self.parent_path is not None:
            return await self.db.batch_stream_get_docs_at(
                self.parent_path, self.collection, ids, _as_list(self.only_fields)
            )
        return await self.db.batch_stream_get_docs(
            self.collection, ids, _as_list(self.only_fields)
        )

    async def batch_with_errors(self, document_ids: Iterable[str]) -> Any:
        """Stream (id, document or None) pairs, passing errors along in the stream."""
        ids = _ids(document_ids)
        if self.parent_path is not None:
            return await self.db.batch_stream_get_docs_at_with_errors(
                self.parent_path, self.collection, ids, _as_list(self.only_fields)
            )
        return await self.db.batch_stream_get_docs_with_errors(
            self.collection, ids, _as_list(self.only_fields)
        )


@dataclass(frozen=True)
class SelectObjByIdBuilder:
    """Reads documents of a collection by id, as objects."""

    db: Any
    collection: str
    parent_path: Optional[str] = None
    only_fields: Optional[tuple[str, ...]] = None
    cls: Any = None

    async def one(self, document_id: str) -> Any:
        """Return the object with this id, or None if it does not exist."""
        try:
            if self.parent_path is not None:
                return await self.db.get_obj_at_return_fields(
                    self.parent_path,
                    self.collection,
                    str(document_id),
                    _as_list(self.only_fields),
                    self.cls,
                )
            return await self.db.get_obj_return_fields(
                self.collection, str(document_id), _as_list(self.only_fields), self.cls
            )
        except DataNotFoundError:
            return None

    async def batch(self, document_ids: Iterable[str]) -> Any:
        """Stream (id, object or None) pairs for the given ids."""
        ids = _ids(document_ids)
        if self.parent_path is not None:
            return await self.db.batch_stream_get_objects_at(
                self.parent_path, self.collection, ids, _as_list(self.only_fields), self.cls
            )
        return await self.db.batch_stream_get_objects(
            self.collection, ids, _as_list(self.only_fields), self.cls
        )

    async def batch_with_errors(self, document_ids: Iterable[str]) -> Any:
        """Stream (id, object or None) pairs, passing errors along in the stream."""
        ids = _ids(document_ids)
        if self.parent_path is not None:
            return await self.db.batch_stream_get_objects_at_with_errors(
                self.parent_path, self.collection, ids, _as_list(self.only_fields), self.cls
            )
        return await self.db.batch_stream_get_objects_with_errors(
            self.collection, ids, _as_list(self.only_fields), self.cls
        )