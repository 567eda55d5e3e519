##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module defines the abstract base class for all data store implementations in Librarian.

This module provides the `StoreBase` class, which outlines the required interface for inserting,
retrieving, listing, updating, and deleting records of one entity kind. All concrete store
classes (e.g., SQLite-based stores) must inherit from this class and implement its abstract methods.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from librarian.db_scripts.data_models import BaseDataModel


T = TypeVar("T", bound=BaseDataModel)


class StoreBase(ABC, Generic[T]):
    """
    Base class for all stores supported in Librarian.

    This class defines the methods that are needed for each store in Librarian.

    Methods:
        insert: Insert a new record and assign its ID.
        retrieve: Retrieve a record from the database by ID.
        retrieve_all: Query the database for all records of this type.
        update: Overwrite the stored columns of an existing record.
        delete: Delete a record from the database by ID.
    """

    @abstractmethod
    def insert(self, entity: T) -> T:
        """
        Insert a new record in the database. The store assigns the ID.

        Args:
            entity: The record to insert.

        Returns:
            The same record with its `id` populated.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `insert` method.")

    @abstractmethod
    def retrieve(self, identifier: int) -> Optional[T]:
        """
        Retrieve a record from the database by its ID.

        Args:
            identifier: The ID of the record to retrieve.

        Returns:
            The record if found, None otherwise.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve` method.")

    @abstractmethod
    def retrieve_all(self) -> List[T]:
        """
        Query the database for all records of this type.

        Returns:
            A list of records.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve_all` method.")

    @abstractmethod
    def update(self, entity: T):
        """
        Overwrite the stored columns of an existing record.

        Args:
            entity: The record holding the values to store.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `update` method.")

    @abstractmethod
    def delete(self, identifier: int):
        """
        Delete a record from the database by its ID.

        Args:
            identifier: The ID of the record to delete.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `delete` method.")

    @abstractmethod
    def count(self) -> int:
        """
        Count the records of this type without loading them.

        Returns:
            The number of stored records.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `count` method.")
