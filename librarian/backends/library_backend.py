##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Abstract base class for library backends in the Librarian application.

This module defines `LibraryBackend`, an abstract base class that specifies
the required interface for backend implementations responsible for persisting
and retrieving catalogue records.

The `LibraryBackend` class encapsulates:
- A unified interface for inserting, retrieving, updating, and deleting records
- Store type routing for each record kind (book, author, student)
- Support for backend-specific operations such as version reporting and schema rebuilds

Usage:
    This base class is not meant to be instantiated directly. Instead, it should be subclassed
    by backend-specific implementations such as `SQLiteBackend`.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from librarian.backends.store_base import StoreBase
from librarian.db_scripts.data_models import AuthorModel, BaseDataModel, BookModel, StudentModel
from librarian.exceptions import UnsupportedDataModelError


LOG = logging.getLogger(__name__)


class LibraryBackend(ABC):
    """
    Abstract base class for a library backend, which provides methods to save and retrieve
    catalogue records from a backend database.

    Attributes:
        backend_name (str): The name of the backend (e.g., "sqlite").
        stores (Dict[str, backends.store_base.StoreBase]): A dictionary of stores keyed by
            record kind. Concrete implementations list parent kinds before the kinds that
            reference them.

    Methods:
        get_name:
            Retrieve the name of the backend.

        get_version:
            Query the backend for the current version.

        get_connection_string:
            Retrieve the connection string used to connect to the backend.

        rebuild_schema:
            Drop and recreate the whole schema, discarding every record.

        insert:
            Insert a new record and assign its ID.

        retrieve:
            Retrieve a record using its ID and store type.

        retrieve_all:
            Retrieve all records of a specific kind.

        update:
            Overwrite the stored values of an existing record.

        delete:
            Delete a record using its ID and store type.
    """

    def __init__(self, backend_name: str, stores: Dict[str, StoreBase]):
        """
        Initialize the `LibraryBackend` instance.

        Args:
            backend_name: The name of the backend (e.g., "sqlite").
            stores: The stores for each record kind.
        """
        self.backend_name: str = backend_name
        self.stores: Dict[str, StoreBase] = stores

    def get_name(self) -> str:
        """
        Get the name of the backend.

        Returns:
            The name of the backend (e.g. sqlite).
        """
        return self.backend_name

    @abstractmethod
    def get_version(self) -> str:
        """
        Query the backend for the current version.

        Returns:
            A string representing the current version of the backend.
        """
        raise NotImplementedError("Subclasses of `LibraryBackend` must implement a `get_version` method.")

    @abstractmethod
    def get_connection_string(self) -> str:
        """
        Query the backend for the connection string.

        Returns:
            A string representing the connection to the backend.
        """
        raise NotImplementedError("Subclasses of `LibraryBackend` must implement a `get_connection_string` method.")

    @abstractmethod
    def rebuild_schema(self):
        """
        Drop every table and recreate the schema from the model definitions.
        """
        raise NotImplementedError("Subclasses of `LibraryBackend` must implement a `rebuild_schema` method.")

    def _get_store_by_type(self, store_type: str) -> StoreBase:
        """
        Get the appropriate store based on the store type.

        Args:
            store_type: The type of store.

        Returns:
            The corresponding store.

        Raises:
            ValueError: If the `store_type` is invalid.
        """
        if store_type not in self.stores:
            raise ValueError(f"Invalid store type '{store_type}'.")
        return self.stores[store_type]

    def _get_store_by_entity(self, entity: BaseDataModel) -> StoreBase:
        """
        Get the appropriate store based on the entity type.

        Args:
            entity: The entity to store.

        Returns:
            The corresponding store.

        Raises:
            UnsupportedDataModelError: If the entity type is unsupported.
        """
        if isinstance(entity, BookModel):
            return self.stores["book"]
        if isinstance(entity, AuthorModel):
            return self.stores["author"]
        if isinstance(entity, StudentModel):
            return self.stores["student"]
        raise UnsupportedDataModelError(f"Unsupported data model of type {type(entity)}.")

    def insert(self, entity: BaseDataModel) -> BaseDataModel:
        """
        Insert a `BaseDataModel` object as a new record.

        Args:
            entity: An instance of one of `BaseDataModel`'s inherited classes with no ID.

        Returns:
            The same entity with its ID assigned.

        Raises:
            UnsupportedDataModelError: If the entity type is unsupported.
        """
        store = self._get_store_by_entity(entity)
        return store.insert(entity)

    def retrieve(self, identifier: int, store_type: str) -> Optional[BaseDataModel]:
        """
        Retrieve a record from the appropriate store based on the given ID and store type.

        Args:
            identifier: The ID of the record.
            store_type: The type of store to query. Valid options are:
                - `book`
                - `author`
                - `student`

        Returns:
            The record if found, None otherwise.
        """
        LOG.debug(f"Retrieving '{identifier}' from store '{store_type}'.")
        store = self._get_store_by_type(store_type)
        return store.retrieve(identifier)

    def retrieve_all(self, store_type: str) -> List[BaseDataModel]:
        """
        Retrieve all records from the specified store.

        Args:
            store_type: The type of store to query. Valid options are:
                - `book`
                - `author`
                - `student`

        Returns:
            A list of records ordered by ID.
        """
        store = self._get_store_by_type(store_type)
        return store.retrieve_all()

    def update(self, entity: BaseDataModel):
        """
        Overwrite the stored values of an existing record.

        Args:
            entity: An instance of one of `BaseDataModel`'s inherited classes with an ID.

        Raises:
            UnsupportedDataModelError: If the entity type is unsupported.
        """
        store = self._get_store_by_entity(entity)
        store.update(entity)

    def delete(self, identifier: int, store_type: str):
        """
        Delete a record from the specified store.

        Args:
            identifier: The ID of the record to delete.
            store_type: The type of store to query. Valid options are:
                - `book`
                - `author`
                - `student`
        """
        store = self._get_store_by_type(store_type)
        store.delete(identifier)

    def count(self, store_type: str) -> int:
        """
        Count the records in the specified store.

        Args:
            store_type: The type of store to query. Valid options are:
                - `book`
                - `author`
                - `student`

        Returns:
            The number of records in the store.
        """
        store = self._get_store_by_type(store_type)
        return store.count()
