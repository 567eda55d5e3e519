##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module contains the functionality necessary to interact with everything
stored in the library catalogue.
"""

import logging
from typing import Any, Dict, List

from librarian.backends.backend_factory import backend_factory
from librarian.backends.library_backend import LibraryBackend
from librarian.config import Config
from librarian.db_scripts.entity_managers.author_manager import AuthorManager
from librarian.db_scripts.entity_managers.book_manager import BookManager
from librarian.db_scripts.entity_managers.entity_manager import EntityManager
from librarian.db_scripts.entity_managers.student_manager import StudentManager
from librarian.exceptions import EntityManagerNotSupportedError


LOG = logging.getLogger("librarian")


class LibraryDatabase:
    """
    High-level interface for accessing the library catalogue.

    This class provides a unified interface to all entity managers in Librarian.

    Attributes:
        config (config.Config): The configuration this database was opened with.
        backend (backends.library_backend.LibraryBackend): A `LibraryBackend` instance.
        authors (db_scripts.entity_managers.author_manager.AuthorManager): An `AuthorManager` instance.
        books (db_scripts.entity_managers.book_manager.BookManager): A `BookManager` instance.
        students (db_scripts.entity_managers.student_manager.StudentManager): A `StudentManager` instance.

    Methods:
        get_db_type: Retrieve the type of the backend being used (e.g., sqlite).
        get_db_version: Retrieve the version of the backend.
        get_connection_string: Retrieve the backend connection string.
        create: Insert a new record of the specified type.
        get: Get a record by type and id.
        get_all: Get all records of a specific type.
        delete: Delete a record by type and id.
        patch: Merge a partial record onto the stored record of the specified type.
        upsert: Patch or insert a record of the specified type.
        rebuild_schema: Drop and recreate every table, after confirmation.
    """

    def __init__(self, config: Config):
        """
        Initialize a new LibraryDatabase instance.

        Args:
            config: The loaded configuration. Its `database` section selects and
                configures the backend.
        """
        self.config: Config = config
        self.backend: LibraryBackend = backend_factory.create(config.database.name.lower(), config.database)
        self._entity_managers: Dict[str, EntityManager] = {
            "book": BookManager(self.backend),
            "author": AuthorManager(self.backend),
            "student": StudentManager(self.backend),
        }

        # Set up cross-references for managers that need them
        for manager in self._entity_managers.values():
            manager.set_db_reference(self)

    # Provide direct access to entity managers for convenience
    @property
    def books(self) -> BookManager:
        """
        Get the book manager.

        Returns:
            A [`BookManager`][db_scripts.entity_managers.book_manager.BookManager]
                instance.
        """
        return self._entity_managers["book"]

    @property
    def authors(self) -> AuthorManager:
        """
        Get the author manager.

        Returns:
            An [`AuthorManager`][db_scripts.entity_managers.author_manager.AuthorManager]
                instance.
        """
        return self._entity_managers["author"]

    @property
    def students(self) -> StudentManager:
        """
        Get the student manager.

        Returns:
            A [`StudentManager`][db_scripts.entity_managers.student_manager.StudentManager]
                instance.
        """
        return self._entity_managers["student"]

    def get_db_type(self) -> str:
        """
        Retrieve the type of backend.

        Returns:
            The type of backend (e.g. sqlite).
        """
        return self.backend.get_name()

    def get_db_version(self) -> str:
        """
        Get the version of the backend.

        Returns:
            The version number of the backend.
        """
        return self.backend.get_version()

    def get_connection_string(self) -> str:
        """
        Get the connection string to the backend.

        Returns:
            The connection string to the backend.
        """
        return self.backend.get_connection_string()

    def _validate_entity_type(self, entity_type: str):
        """
        Check to make sure the entity type passed in is supported.

        Args:
            entity_type: The type of entity to validate (book, author, student).

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        if entity_type not in self._entity_managers:
            raise EntityManagerNotSupportedError(f"Entity type not supported: {entity_type}")

    def create(self, entity_type: str, *args, **kwargs) -> Any:
        """
        Insert a new record of the specified type.

        Args:
            entity_type: The type of record to create (book, author, student).

        Returns:
            The created record with its id assigned.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].create(*args, **kwargs)

    def get(self, entity_type: str, *args, **kwargs) -> Any:
        """
        Get a record by type and id.

        Args:
            entity_type: The type of record to get (book, author, student).

        Returns:
            The requested record.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].get(*args, **kwargs)

    def exists(self, entity_type: str, identifier: int) -> bool:
        """
        Check whether a record of the specified type exists.

        Args:
            entity_type: The type of record to look for (book, author, student).
            identifier: The id of the record.

        Returns:
            True if the record exists, False otherwise.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].exists(identifier)

    def get_all(self, entity_type: str, filters: Dict = None) -> List[Any]:
        """
        Get all records of a specific type.

        Args:
            entity_type: The type of records to get (book, author, student).
            filters: Optional filters used to narrow down the results.

        Returns:
            A list of all records of the specified type, ordered by id.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].get_all(filters=filters)

    def delete(self, entity_type: str, *args, **kwargs):
        """
        Delete a record by type and id.

        Args:
            entity_type: The type of record to delete (book, author, student).

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        self._entity_managers[entity_type].delete(*args, **kwargs)

    def patch(self, entity_type: str, *args, **kwargs) -> Any:
        """
        Merge a partial record onto the stored record of the specified type.

        Args:
            entity_type: The type of record to patch (book, author, student).

        Returns:
            The merged record.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].patch(*args, **kwargs)

    def upsert(self, entity_type: str, *args, **kwargs) -> Any:
        """
        Patch the record if its id exists, otherwise insert it.

        Args:
            entity_type: The type of record to upsert (book, author, student).

        Returns:
            The persisted record.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].upsert(*args, **kwargs)

    def count(self) -> Dict[str, int]:
        """
        Count the records of every type.

        Returns:
            A dictionary mapping entity types to record counts.
        """
        return {entity_type: self.backend.count(entity_type) for entity_type in self._entity_managers}

    def rebuild_schema(self, force: bool = False) -> bool:
        """
        Drop every table and recreate the schema, discarding all records.

        Args:
            force: If True, skip the confirmation prompt.

        Returns:
            True if the schema was rebuilt, False if the user cancelled.
        """
        rebuild = False
        if force:
            rebuild = True
        else:
            # Ask the user for confirmation
            valid_inputs = ["y", "n"]
            user_input = (
                input("Are you sure you want to rebuild the database? Every record will be lost. (y/n): ")
                .strip()
                .lower()
            )
            while user_input not in valid_inputs:
                user_input = input("Invalid input. Use 'y' for 'yes' or 'n' for 'no': ").strip().lower()

            if user_input == "y":
                rebuild = True

        if rebuild:
            LOG.info("Rebuilding the database...")
            self.backend.rebuild_schema()
            LOG.info("Database successfully rebuilt.")
        else:
            LOG.info("Database rebuild cancelled.")

        return rebuild
