##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
SQLite-based generic store implementation for Librarian entities.

This module defines `SQLiteStoreBase`, a generic base class for managing
record persistence using SQLite as the underlying storage. It provides
core CRUD operations (insert, retrieve, update, delete) and dynamic table
creation based on model class field definitions.

This module is intended to be subclassed by entity-specific store classes
in the Librarian backend architecture.

See also:
    - librarian.backends.store_base: Base class
    - librarian.backends.sqlite.sqlite_stores: Concrete store implementations
    - librarian.db_scripts.data_models: Data model definitions
"""

import logging
import sqlite3
from dataclasses import Field
from types import SimpleNamespace
from typing import Any, Generic, List, Optional, Type, Union

from librarian.backends.sqlite.sqlite_connection import SQLiteConnection
from librarian.backends.store_base import StoreBase, T
from librarian.backends.utils import deserialize_entity, get_not_found_error_class, serialize_entity
from librarian.exceptions import RecordValidationError
from librarian.utils import get_plural_of_entity


LOG = logging.getLogger(__name__)


class SQLiteStoreBase(StoreBase[T], Generic[T]):
    """
    Base class for SQLite-based stores.

    This class provides common functionality for inserting, retrieving, updating, and
    deleting records in a SQLite database. Each operation opens its own
    [`SQLiteConnection`][backends.sqlite.sqlite_connection.SQLiteConnection].

    Attributes:
        table_name (str): The table name used for SQLite entries.
        model_class (Type[T]): The model class used for deserialization.
        db_path (str): The path to the SQLite database file.
        timeout (float): How many seconds each connection waits for a lock.

    Methods:
        create_table_if_not_exists: Create this store's table if it's missing.
        drop_table: Drop this store's table if it exists.
        insert: Insert a new record and assign its ID.
        retrieve: Retrieve a record from the database by ID.
        retrieve_all: Query the database for all records of this type.
        update: Overwrite the stored columns of an existing record.
        delete: Delete a record from the database by ID.
        count: Count the records of this type.
    """

    def __init__(self, table_name: str, model_class: Type[T], db_config: SimpleNamespace):
        """
        Initialize the SQLite store and make sure its table exists.

        Args:
            table_name: The table name used for SQLite entries.
            model_class: The model class used for deserialization.
            db_config: The `database` section of the configuration (`path` and `timeout`).
        """
        self.table_name: str = table_name
        self.model_class: Type[T] = model_class
        self.db_path: str = db_config.path
        self.timeout: float = getattr(db_config, "timeout", 5.0)
        self.create_table_if_not_exists()

    def _connect(self) -> SQLiteConnection:
        """
        Create a new connection context manager for a single operation.

        Returns:
            An unopened `SQLiteConnection`.
        """
        return SQLiteConnection(self.db_path, timeout=self.timeout)

    def _get_sqlite_type(self, py_type: Any) -> str:
        """
        Map Python types to SQLite types.

        Args:
            py_type: A Python type hint (e.g., str, int, Optional[int], etc.)

        Returns:
            A string representing the corresponding SQLite column type.
        """
        # Unwrap Optional[X] into X
        if getattr(py_type, "__origin__", None) is Union:
            non_none_args = [arg for arg in py_type.__args__ if arg is not type(None)]
            if len(non_none_args) == 1:
                py_type = non_none_args[0]

        result = "TEXT"  # Default fallback

        if py_type == bool:
            result = "INTEGER"  # SQLite uses 0 and 1 for booleans
        elif py_type == int:
            result = "INTEGER"
        elif py_type == float:
            result = "REAL"

        return result

    def _get_column_definition(self, field_obj: Field) -> str:
        """
        Build the column definition for a single model field.

        Args:
            field_obj: The dataclass field to convert.

        Returns:
            The column definition to use in a `CREATE TABLE` statement.
        """
        if field_obj.name == "id":
            return "id INTEGER PRIMARY KEY AUTOINCREMENT"

        definition = f"{field_obj.name} {self._get_sqlite_type(field_obj.type)}"
        references = field_obj.metadata.get("references")
        if references:
            definition += f" REFERENCES {references}"
        return definition

    def get_table_schema(self) -> str:
        """
        Build the `CREATE TABLE` statement for this store from the model's column fields.

        Returns:
            The SQL statement.
        """
        field_defs_str = ", ".join(
            self._get_column_definition(field_obj) for field_obj in self.model_class.get_column_fields()
        )
        return f"CREATE TABLE IF NOT EXISTS {self.table_name} ({field_defs_str});"

    def create_table_if_not_exists(self):
        """
        Create the table if it doesn't exist.
        """
        with self._connect() as conn:
            conn.execute(self.get_table_schema())

    def drop_table(self):
        """
        Drop the table if it exists, discarding every row in it.
        """
        LOG.debug(f"Dropping table '{self.table_name}'...")
        with self._connect() as conn:
            conn.execute(f"DROP TABLE IF EXISTS {self.table_name}")

    def _integrity_error(self, action: str, exc: sqlite3.IntegrityError) -> RecordValidationError:
        """
        Convert an integrity error raised by SQLite into a validation error.

        Args:
            action: What was being attempted, for the error message.
            exc: The integrity error raised by SQLite.

        Returns:
            The error to raise.
        """
        references = [
            f"{field_obj.name} -> {field_obj.metadata['references']}"
            for field_obj in self.model_class.get_column_fields()
            if field_obj.metadata.get("references")
        ]
        hint = f" Check that referenced records exist ({', '.join(references)})." if references else ""
        return RecordValidationError(f"Could not {action} {self.table_name}: {exc}.{hint}")

    def insert(self, entity: T) -> T:
        """
        Insert a new record in the SQLite database and assign its ID.

        Args:
            entity: The record to insert. Its `id` must be `None`.

        Returns:
            The same record with its `id` populated.

        Raises:
            RecordValidationError: If the record already has an ID or violates a constraint.
        """
        if entity.id is not None:
            raise RecordValidationError(
                f"Cannot insert {self.table_name} with id '{entity.id}'; ids are assigned by the database."
            )

        LOG.debug(f"Creating a {self.table_name} entry in SQLite...")
        serialized_data = serialize_entity(entity, include_id=False)
        columns_str = ", ".join(serialized_data)
        placeholders_str = ", ".join(f":{name}" for name in serialized_data)

        with self._connect() as conn:
            try:
                cursor = conn.execute(
                    f"""
                    INSERT INTO {self.table_name} ({columns_str})
                    VALUES ({placeholders_str})
                """,
                    serialized_data,
                )
            except sqlite3.IntegrityError as exc:
                raise self._integrity_error("insert", exc) from exc
            entity.id = cursor.lastrowid

        LOG.debug(f"Successfully created a {self.table_name} with id '{entity.id}' in SQLite.")
        return entity

    def retrieve(self, identifier: int) -> Optional[T]:
        """
        Retrieve a record from the SQLite database by ID.

        Args:
            identifier: The ID of the record to retrieve.

        Returns:
            The record if found, None otherwise.
        """
        LOG.debug(f"Retrieving identifier {identifier} in SQLiteStoreBase.")

        with self._connect() as conn:
            cursor = conn.execute(f"SELECT * FROM {self.table_name} WHERE id = :identifier", {"identifier": identifier})
            row = cursor.fetchone()

            if row is None:
                return None

            return deserialize_entity(dict(row), self.model_class)

    def retrieve_all(self) -> List[T]:
        """
        Query the SQLite database for all records of this type, ordered by ID.

        Returns:
            A list of records.
        """
        entity_type = get_plural_of_entity(self.table_name)
        LOG.debug(f"Fetching all {entity_type} from SQLite...")

        with self._connect() as conn:
            cursor = conn.execute(f"SELECT * FROM {self.table_name} ORDER BY id")
            entities = [deserialize_entity(dict(row), self.model_class) for row in cursor.fetchall()]

        LOG.debug(f"Successfully retrieved {len(entities)} {entity_type} from SQLite.")
        return entities

    def update(self, entity: T):
        """
        Overwrite the stored columns of an existing record in the SQLite database.

        Args:
            entity: The record holding the values to store.

        Raises:
            RecordNotFoundError: If no record has the entity's ID. The concrete subclass
                depends on the model type.
            RecordValidationError: If the new values violate a constraint.
        """
        LOG.debug(f"Attempting to update {self.table_name} with id '{entity.id}'...")
        serialized_data = serialize_entity(entity)
        set_str = ", ".join(f"{name} = :{name}" for name in serialized_data if name != "id")

        with self._connect() as conn:
            try:
                cursor = conn.execute(
                    f"""
                    UPDATE {self.table_name}
                    SET {set_str}
                    WHERE id = :id
                """,
                    serialized_data,
                )
            except sqlite3.IntegrityError as exc:
                raise self._integrity_error("update", exc) from exc

            if cursor.rowcount == 0:
                error_class = get_not_found_error_class(self.model_class)
                raise error_class(
                    f"{self.table_name.capitalize()} with id '{entity.id}' does not exist in the database."
                )

        LOG.debug(f"Successfully updated {self.table_name} with id '{entity.id}'.")

    def delete(self, identifier: int):
        """
        Delete a record from the SQLite database by ID.

        Args:
            identifier: The ID of the record to delete.

        Raises:
            RecordNotFoundError: If no record has this ID. The concrete subclass depends
                on the model type.
            RecordValidationError: If other records still reference this one.
        """
        LOG.info(f"Attempting to delete {self.table_name} with id '{identifier}' from SQLite...")

        with self._connect() as conn:
            try:
                cursor = conn.execute(
                    f"DELETE FROM {self.table_name} WHERE id = :identifier", {"identifier": identifier}
                )
            except sqlite3.IntegrityError as exc:
                raise self._integrity_error("delete", exc) from exc

            if cursor.rowcount == 0:
                error_class = get_not_found_error_class(self.model_class)
                raise error_class(
                    f"{self.table_name.capitalize()} with id '{identifier}' does not exist in the database."
                )

        LOG.info(f"Successfully deleted {self.table_name} '{identifier}' from SQLite.")

    def count(self) -> int:
        """
        Count the records of this type.

        Returns:
            The number of rows in this store's table.
        """
        with self._connect() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {self.table_name}").fetchone()[0]
