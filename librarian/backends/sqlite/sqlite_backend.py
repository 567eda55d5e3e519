##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
SQLite backend implementation for the Librarian application.

This module defines the `SQLiteBackend` class, which provides a concrete
implementation of the `LibraryBackend` interface using SQLite as the underlying
storage system. It coordinates interactions with the entity-specific SQLite store
classes for books, authors, and students.

The backend supports standard CRUD operations, schema initialization, and
schema rebuilds.
"""

import logging
from types import SimpleNamespace
from typing import List

from librarian.backends.library_backend import LibraryBackend
from librarian.backends.sqlite.sqlite_connection import SQLiteConnection
from librarian.backends.sqlite.sqlite_stores import SQLiteAuthorStore, SQLiteBookStore, SQLiteStudentStore


LOG = logging.getLogger(__name__)


class SQLiteBackend(LibraryBackend):
    """
    A SQLite-based implementation of the `LibraryBackend` interface for managing
    catalogue records in a local SQLite database file.

    This backend delegates entity-specific operations to corresponding SQLite store
    classes. Opening the backend creates any missing tables and leaves existing data
    alone; `rebuild_schema` is the only operation that discards data.

    Attributes:
        backend_name (str): The name of the backend ("sqlite").
        db_path (str): The path to the SQLite database file.
        timeout (float): How many seconds each connection waits for a lock.

    Methods:
        get_version:
            Query SQLite for the current version.

        get_connection_string:
            Retrieve the connection string (file path) used to connect to SQLite.

        rebuild_schema:
            Drop every table and recreate the schema.
    """

    def __init__(self, db_config: SimpleNamespace):
        """
        Initialize the `SQLiteBackend` instance, setting up the store mappings and tables.

        Args:
            db_config: The `database` section of the configuration (`path` and `timeout`).
        """
        self.db_path: str = db_config.path
        self.timeout: float = getattr(db_config, "timeout", 5.0)

        # Parents come before the tables that reference them
        stores = {
            "author": SQLiteAuthorStore(db_config),
            "book": SQLiteBookStore(db_config),
            "student": SQLiteStudentStore(db_config),
        }

        super().__init__("sqlite", stores)

        # Initialize database schema
        self._initialize_schema()

    def _initialize_schema(self):
        """Initialize the database schema by creating all necessary tables."""
        for store in self.stores.values():
            store.create_table_if_not_exists()

    def get_version(self) -> str:
        """
        Query SQLite for the current version.

        Returns:
            The SQLite version string.
        """
        with SQLiteConnection(self.db_path, timeout=self.timeout) as conn:
            cursor = conn.execute("SELECT sqlite_version()")
            return cursor.fetchone()[0]

    def get_connection_string(self) -> str:
        """
        Get the path of the SQLite database file.

        Returns:
            The database file path.
        """
        return self.db_path

    def rebuild_schema(self):
        """
        Remove every record by dropping all tables and recreating the schema.

        Known tables are dropped children first so foreign keys never block the drop.
        Any other user table in the file is dropped too. Running this twice in a row
        leaves the database in the same state as running it once.
        """
        LOG.info(f"Rebuilding the schema of the SQLite database at '{self.db_path}'...")

        for store in reversed(list(self.stores.values())):
            store.drop_table()

        leftover_tables = self.table_names()
        if leftover_tables:
            with SQLiteConnection(self.db_path, timeout=self.timeout) as conn:
                # Tables we don't manage may reference each other, so don't enforce FKs while dropping them
                conn.execute("PRAGMA foreign_keys=OFF")
                for table in leftover_tables:
                    LOG.debug(f"Dropping unmanaged table '{table}'...")
                    conn.execute(f'DROP TABLE IF EXISTS "{table}"')

        self._initialize_schema()
        LOG.info("Schema rebuilt.")

    def table_names(self) -> List[str]:
        """
        List the user tables currently present in the database file.

        Returns:
            A sorted list of table names.
        """
        with SQLiteConnection(self.db_path, timeout=self.timeout) as conn:
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
            )
            return [row[0] for row in cursor.fetchall()]
