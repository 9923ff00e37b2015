"""Fluent builders for creating documents."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Optional

from firefluent.query import _call_maybe_at, _field_names


def _as_list(fields: Optional[tuple]) -> Optional[list]:
    return None if fields is None else list(fields)


@dataclass(frozen=True)
class InsertInitialBuilder:
    """Starting point of an insert: choose the collection."""

    db: Any

    def into(self, collection_id: str) -> "InsertDocIdBuilder":
        """Insert into the named collection."""
        return InsertDocIdBuilder(self.db, str(collection_id))


@dataclass(frozen=True)
class InsertDocIdBuilder:
    """An insert that still needs a document id, or leave to generate one."""

    db: Any
    collection_id: str

    def document_id(self, document_id: str) -> "InsertDocObjBuilder":
        """Create the document under this id."""
        return InsertDocObjBuilder(self.db, self.collection_id, str(document_id))

    def generate_document_id(self) -> "InsertDocObjBuilder":
        """Let the database choose the document id."""
        return InsertDocObjBuilder(self.db, self.collection_id, None)


@dataclass(frozen=True)
class InsertDocObjBuilder:
    """An insert that still needs the content to store."""

    db: Any
    collection_id: str
    document_id: Optional[str]
    parent_path: Optional[str] = None
    only_fields: Optional[tuple[str, ...]] = None

    def parent(self, parent: str) -> "InsertDocObjBuilder":
        """Insert into a collection nested under the given document path."""
        return replace(self, parent_path=str(parent))

    def return_only_fields(self, return_only_fields: Iterable[str]) -> "InsertDocObjBuilder":
        """Return only these fields of the created document."""
        return replace(self, only_fields=_field_names(return_only_fields))

    def document(self, document: Any) -> "InsertDocExecuteBuilder":
        """Store a raw document."""
        return InsertDocExecuteBuilder(
            self.db,
            self.collection_id,
            self.document_id,
            self.parent_path,
            document,
            self.only_fields,
        )

    def object(self, obj: Any) -> "InsertObjExecuteBuilder":
        """Store an object, serialised by the database."""
        return InsertObjExecuteBuilder(
            self.db,
            self.collection_id,
            self.parent_path,
            self.document_id,
            obj,
            self.only_fields,
        )


@dataclass(frozen=True)
class InsertDocExecuteBuilder:
    """A complete insert of a raw document."""

    db: Any
    collection_id: str
    document_id: Optional[str]
    parent_path: Optional[str]
    document: Any
    only_fields: Optional[tuple[str, ...]] = None

    async def execute(self) -> Any:
        """Create the document and return the stored document."""
        return await _call_maybe_at(
            self.db,
            "create_doc",
            self.parent_path,
            self.collection_id,
            self.document_id,
            self.document,
            _as_list(self.only_fields),
        )


@dataclass(frozen=True)
class InsertObjExecuteBuilder:
    """A complete insert of an object."""

    db: Any
    collection_id: str
    parent_path: Optional[str]
    document_id: Optional[str]
    obj: Any
    only_fields: Optional[tuple[str, ...]] = None

    async def execute(self, cls: Any = None) -> Any:
        """Create the document and return it read back as cls."""
        return await _call_maybe_at(
            self.db,
            "create_obj",
            self.parent_path,
            self.collection_id,
            self.document_id,
            self.obj,
            _as_list(self.only_fields),
            cls,
        )