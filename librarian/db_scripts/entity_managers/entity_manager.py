##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module defines the base class `EntityManager`, which provides a generic framework
for managing the lifecycle of catalogue records in the Librarian system.

`EntityManager` is subclassed once per record kind (books, authors, students). Every
kind gets the same operations with the same semantics:

- `create`: insert a new record; the store assigns the id.
- `get` / `exists` / `get_all`: read records back.
- `delete`: remove a record by id, failing loudly if it doesn't exist.
- `patch`: merge a partial record onto the persisted one, field by field.
- `upsert`: patch when the id exists, insert otherwise.
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from librarian.backends.library_backend import LibraryBackend
from librarian.backends.utils import get_not_found_error_class
from librarian.db_scripts.data_models import BaseDataModel
from librarian.db_scripts.partial_update import merge_partial
from librarian.exceptions import RecordValidationError, UnsupportedDataModelError


M = TypeVar("M", bound=BaseDataModel)

LOG = logging.getLogger("librarian")


class EntityManager(Generic[M]):
    """
    Base class for managing the lifecycle of one kind of record.

    Subclasses set `_entity_type` (the store type, e.g. "book") and `_model_class`
    (the data model class) and may override any operation that needs cross-entity work.

    Generic Parameters:
        M (BaseDataModel): The data model class managed by this manager.

    Attributes:
        backend: The backend interface used to persist and retrieve records.
        db: The owning [`LibraryDatabase`][db_scripts.library_db.LibraryDatabase], for
            managers that need to reach other kinds. Set by `set_db_reference`.
        _filter_accessor_map: A dictionary mapping supported filter keys to accessor
            functions. Used by `get_all` to narrow results in memory.

    Methods:
        create: Insert a new record and return it with its id assigned.
        get: Retrieve a single record by id.
        exists: Check whether a record with the given id exists.
        get_all: Retrieve all records of this kind, optionally filtered.
        delete: Delete a record by id.
        patch: Merge a partial record onto the persisted record.
        upsert: Patch an existing record or insert a new one.
        set_db_reference: Set reference to the LibraryDatabase for cross-entity access.
    """

    _entity_type: str = None
    _model_class: Type[M] = None
    _filter_accessor_map: Dict[str, Callable[[M], Any]] = {}

    def __init__(self, backend: LibraryBackend):
        """
        Initialize the EntityManager with a backend.

        Args:
            backend: The backend interface used to persist and retrieve records.
        """
        self.backend = backend
        self.db = None

    def _check_model(self, entity: BaseDataModel):
        """
        Ensure an entity is of the kind this manager handles.

        Args:
            entity: The entity to check.

        Raises:
            UnsupportedDataModelError: If the entity is of another kind.
        """
        if not isinstance(entity, self._model_class):
            raise UnsupportedDataModelError(
                f"{type(self).__name__} manages {self._model_class.__name__} records, not {type(entity).__name__}."
            )

    def create(self, entity: M) -> M:
        """
        Insert a new record.

        Args:
            entity: The record to insert. Its `id` must be `None`.

        Returns:
            The same record with its `id` assigned by the store.

        Raises:
            RecordValidationError: If the record already has an id or references a
                record that doesn't exist.
        """
        self._check_model(entity)
        self.backend.insert(entity)
        LOG.info(f"Created {self._entity_type} with id '{entity.id}'.")
        return entity

    def get(self, identifier: int) -> M:
        """
        Retrieve a single record by its id.

        Args:
            identifier: The id of the record.

        Returns:
            The record.

        Raises:
            RecordNotFoundError: If no record has this id. The concrete subclass
                depends on the kind (e.g. `BookNotFoundError`).
        """
        entity = self.backend.retrieve(identifier, self._entity_type)
        if entity is None:
            error_class = get_not_found_error_class(self._model_class)
            raise error_class(
                f"{self._entity_type.capitalize()} with id '{identifier}' does not exist in the database."
            )
        return entity

    def exists(self, identifier: int) -> bool:
        """
        Check whether a record with the given id exists.

        Args:
            identifier: The id to look up.

        Returns:
            True if the record exists, False otherwise.
        """
        return self.backend.retrieve(identifier, self._entity_type) is not None

    def _matches_filters(self, entity: M, filters: Dict) -> bool:
        """
        Determine whether a record matches all provided filter criteria.

        Args:
            entity: The record to check against the filters.
            filters: A dictionary of filter keys and expected values. Keys must appear
                in `_filter_accessor_map`.

        Returns:
            True if the record matches all filter conditions, False otherwise.
        """
        for key, expected in filters.items():
            accessor = self._filter_accessor_map.get(key, None)
            if not accessor:
                LOG.warning(f"Could not obtain accessor for filter '{key}'. Skipping this filter.")
                continue

            if accessor(entity) != expected:
                return False
        return True

    def get_all(self, filters: Dict = None) -> List[M]:
        """
        Retrieve all records of this kind, ordered by id.

        Args:
            filters: An optional dictionary of filter keys and values used to narrow
                down the results (e.g. `{"author_id": 3}`).

        Returns:
            A list of records.
        """
        entities = self.backend.retrieve_all(self._entity_type)
        if filters:
            entities = [entity for entity in entities if self._matches_filters(entity, filters)]
            LOG.debug(f"Filtered down to {len(entities)} {self._entity_type} records using filters: {filters}")
        return entities

    def delete(self, identifier: int, **kwargs: Any):
        """
        Delete a record by its id.

        Args:
            identifier: The id of the record to delete.
            **kwargs: Accepted for interface compatibility with managers that take
                deletion options.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        if kwargs:
            LOG.warning(f"Ignoring unsupported delete options for {self._entity_type}: {', '.join(kwargs)}")
        self.backend.delete(identifier, self._entity_type)
        LOG.info(f"Deleted {self._entity_type} with id '{identifier}'.")

    def patch(self, partial: M, fields: Optional[Iterable[str]] = None) -> M:
        """
        Merge a partial record onto the persisted record with the same id.

        Without `fields`, every field of `partial` that is not `None` overwrites the
        persisted value and the rest are retained. With `fields`, exactly the named
        fields overwrite the persisted values, so `None` can be written explicitly.

        Args:
            partial: A record carrying the id to patch and the new values.
            fields: An optional field mask naming the fields to write.

        Returns:
            The merged record as now stored.

        Raises:
            RecordValidationError: If `partial` has no id, the mask names an unknown
                field, or a new value violates a constraint.
            RecordNotFoundError: If no record has the id of `partial`.
        """
        self._check_model(partial)
        if partial.id is None:
            raise RecordValidationError(f"Cannot patch a {self._entity_type} without an id.")

        persisted = self.get(partial.id)
        changed = merge_partial(persisted, partial, fields)

        if changed:
            self.backend.update(persisted)
            LOG.info(f"Patched {self._entity_type} '{persisted.id}': {', '.join(changed)}.")
        else:
            LOG.debug(f"Patch of {self._entity_type} '{persisted.id}' changed nothing.")

        return persisted

    def upsert(self, entity: M, fields: Optional[Iterable[str]] = None) -> M:
        """
        Patch the record if its id exists, otherwise insert it.

        When the record is inserted any id it carries is discarded and the store
        assigns a fresh one, so callers can't rely on the id surviving an upsert
        that inserts.

        Args:
            entity: The record to patch or insert.
            fields: An optional field mask, used only when patching.

        Returns:
            The persisted record.
        """
        self._check_model(entity)
        if entity.id is not None and self.exists(entity.id):
            return self.patch(entity, fields)

        if entity.id is not None:
            LOG.warning(
                f"No {self._entity_type} with id '{entity.id}' exists. "
                "Inserting it as a new record; the id will be reassigned."
            )
            entity = replace(entity, id=None)

        return self.create(entity)

    def set_db_reference(self, db: "LibraryDatabase"):  # noqa: F821
        """
        Set a reference to the main library database object for cross-entity operations.

        Args:
            db (db_scripts.library_db.LibraryDatabase): The database object that provides
                access to related entity managers.
        """
        self.db = db
