"""Fluent builders for updating documents."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, Optional

from firefluent.transforms import FieldTransform, TransformBuilder


def _as_list(fields: Optional[tuple]) -> Optional[list]:
    return None if fields is None else list(fields)


def _build_transforms(
    fn: Callable[[TransformBuilder], Iterable[FieldTransform]]
) -> tuple[FieldTransform, ...]:
    return tuple(fn(TransformBuilder()))


@dataclass(frozen=True)
class UpdateInitialBuilder:
    """Starting point of an update: optionally limit the fields, then choose the collection."""

    db: Any
    update_only_fields: Optional[tuple[str, ...]] = None

    def fields(self, update_only_fields: Iterable[str]) -> "UpdateInitialBuilder":
        """Update only these fields."""
        return replace(self, update_only_fields=tuple(str(f) for f in update_only_fields))

    def in_col(self, collection_id: str) -> "UpdateDocObjBuilder":
        """Update a document in the named collection."""
        return UpdateDocObjBuilder(self.db, str(collection_id), self.update_only_fields)


@dataclass(frozen=True)
class UpdateDocObjBuilder:
    """An update that still needs a document, or the id of one."""

    db: Any
    collection_id: str
    update_only_fields: Optional[tuple[str, ...]] = None
    parent_path: Optional[str] = None
    only_fields: Optional[tuple[str, ...]] = None
    write_precondition: Any = None
    field_transforms: tuple[FieldTransform, ...] = ()

    def return_only_fields(self, return_only_fields: Iterable[str]) -> "UpdateDocObjBuilder":
        """Return only these fields of the updated document."""
        return replace(self, only_fields=tuple(str(f) for f in return_only_fields))

    def precondition(self, precondition: Any) -> "UpdateDocObjBuilder":
        """Update only when the precondition holds."""
        return replace(self, write_precondition=precondition)

    def transforms(
        self, doc_transform: Callable[[TransformBuilder], Iterable[FieldTransform]]
    ) -> "UpdateDocObjBuilder":
        """Set the field transforms, built by doc_transform."""
        return replace(self, field_transforms=_build_transforms(doc_transform))

    def document(self, document: Any) -> "UpdateDocExecuteBuilder":
        """Write a raw document."""
        return UpdateDocExecuteBuilder(
            self.db,
            self.collection_id,
            self.update_only_fields,
            document,
            self.only_fields,
            self.write_precondition,
        )

    def document_id(self, document_id: str) -> "UpdateObjInitExecuteBuilder":
        """Update the document with this id."""
        return UpdateObjInitExecuteBuilder(
            self.db,
            self.collection_id,
            self.update_only_fields,
            self.parent_path,
            str(document_id),
            self.only_fields,
            self.write_precondition,
            self.field_transforms,
        )


@dataclass(frozen=True)
class UpdateDocExecuteBuilder:
    """A complete update of a raw document."""

    db: Any
    collection_id: str
    update_only_fields: Optional[tuple[str, ...]]
    document: Any
    only_fields: Optional[tuple[str, ...]] = None
    write_precondition: Any = None

    async def execute(self) -> Any:
        """Write the document and return the stored document."""
        return await self.db.update_doc(
            self.collection_id,
            self.document,
            _as_list(self.update_only_fields),
            _as_list(self.only_fields),
            self.write_precondition,
        )


@dataclass(frozen=True)
class UpdateObjInitExecuteBuilder:
    """An update by id that still needs an object, or only transforms."""

    db: Any
    collection_id: str
    update_only_fields: Optional[tuple[str, ...]]
    parent_path: Optional[str]
    document_id: str
    only_fields: Optional[tuple[str, ...]] = None
    write_precondition: Any = None
    field_transforms: tuple[FieldTransform, ...] = ()

    def parent(self, parent: str) -> "UpdateObjInitExecuteBuilder":
        """Update in a collection nested under the given document path."""
        return replace(self, parent_path=str(parent))

    def object(self, obj: Any) -> "UpdateObjExecuteBuilder":
        """Write an object, serialised by the database."""
        return UpdateObjExecuteBuilder(
            self.db,
            self.collection_id,
            self.update_only_fields,
            self.parent_path,
            self.document_id,
            obj,
            self.only_fields,
            self.write_precondition,
            self.field_transforms,
        )

    def transforms(
        self, doc_transform: Callable[[TransformBuilder], Iterable[FieldTransform]]
    ) -> "UpdateObjInitExecuteBuilder":
        """Set the field transforms, built by doc_transform."""
        return replace(self, field_transforms=_build_transforms(doc_transform))

    def only_transform(self) -> "UpdateOnlyTransformBuilder":
        """Apply the transforms without writing any object."""
        return UpdateOnlyTransformBuilder(
            self.db,
            self.collection_id,
            self.parent_path,
            self.document_id,
            self.write_precondition,
            self.field_transforms,
        )


@dataclass(frozen=True)
class UpdateObjExecuteBuilder:
    """A complete update of an object, ready to run or to add to a transaction or batch."""

    db: Any
    collection_id: str
    update_only_fields: Optional[tuple[str, ...]]
    parent_path: Optional[str]
    document_id: str
    obj: Any
    only_fields: Optional[tuple[str, ...]] = None
    write_precondition: Any = None
    field_transforms: tuple[FieldTransform, ...] = ()

    async def execute(self, cls: Any = None) -> Any:
        """Write the object and return it read back as cls."""
        if self.parent_path is not None:
            return await self.db.update_obj_at(
                self.parent_path,
                self.collection_id,
                self.document_id,
                self.obj,
                _as_list(self.update_only_fields),
                _as_list(self.only_fields),
                self.write_precondition,
                cls,
            )
        return await self.db.update_obj(
            self.collection_id,
            self.document_id,
            self.obj,
            _as_list(self.update_only_fields),
            _as_list(self.only_fields),
            self.write_precondition,
            cls,
        )

    def transforms(
        self, transforms_builder: Callable[[TransformBuilder], Iterable[FieldTransform]]
    ) -> "UpdateObjExecuteBuilder":
        """Set the field transforms, built by transforms_builder."""
        return replace(self, field_transforms=_build_transforms(transforms_builder))

    def _add_to(self, target: Any) -> Any:
        if self.parent_path is not None:
            return target.update_object_at(
                self.parent_path,
                self.collection_id,
                self.document_id,
                self.obj,
                _as_list(self.update_only_fields),
                self.write_precondition,
                list(self.field_transforms),
            )
        return target.update_object(
            self.collection_id,
            self.document_id,
            self.obj,
            _as_list(self.update_only_fields),
            self.write_precondition,
            list(self.field_transforms),
        )

    def add_to_transaction(self, transaction: Any) -> Any:
        """Add the update to a transaction and return what the transaction returns."""
        return self._add_to(transaction)

    def add_to_batch(self, batch: Any) -> Any:
        """Add the update to a batch and return what the batch returns."""
        return self._add_to(batch)


@dataclass(frozen=True)
class UpdateOnlyTransformBuilder:
    """Field transforms on a document, to add to a transaction or batch."""

    db: Any
    collection_id: str
    parent_path: Optional[str]
    document_id: str
    write_precondition: Any = None
    field_transforms: tuple[FieldTransform, ...] = ()

    def _add_to(self, target: Any) -> Any:
        if self.parent_path is not None:
            return target.transform_at(
                self.parent_path,
                self.collection_id,
                self.document_id,
                self.write_precondition,
                list(self.field_transforms),
            )
        return target.transform(
            self.collection_id,
            self.document_id,
            self.write_precondition,
            list(self.field_transforms),
        )

    def add_to_transaction(self, transaction: Any) -> Any:
        """Add the transforms to a transaction and return what the transaction returns."""
        return self._add_to(transaction)

    def add_to_batch(self, batch: Any) -> Any:
        """Add the transforms to a batch and return what the batch returns."""
        return self._add_to(batch)