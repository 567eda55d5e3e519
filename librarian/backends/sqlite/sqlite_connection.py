##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
SQLite connection context manager for the Librarian application.

This module defines the `SQLiteConnection` class, which opens one SQLite connection per
operation and treats it as a unit of work: the connection is configured on entry (foreign
key enforcement, WAL mode, name-based row access), committed when the block succeeds,
rolled back when it raises, and closed on every exit path.
"""

import logging
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Type

from librarian.exceptions import StoreUnavailableError


LOG = logging.getLogger(__name__)


class SQLiteConnection:
    """
    Context manager for establishing and safely closing a SQLite database connection.

    This class ensures SQLite connections are created with proper configuration, including:
    - Foreign key constraint enforcement
    - WAL mode for better concurrency
    - Dictionary-style row access via `sqlite3.Row`
    - A busy timeout so a locked database fails the operation instead of hanging

    Any `sqlite3` error other than an integrity error that escapes the block is re-raised
    as a [`StoreUnavailableError`][exceptions.StoreUnavailableError].

    Attributes:
        db_path (str): The path to the SQLite database file.
        timeout (float): How many seconds to wait for a lock before failing.
        conn (sqlite3.Connection): The active SQLite connection used within the context.

    Methods:
        __enter__:
            Opens and configures the SQLite connection when entering the context.

        __exit__:
            Commits or rolls back, then closes the SQLite connection when exiting the context.
    """

    def __init__(self, db_path: str, timeout: float = 5.0):
        """
        Initialize the SQLiteConnection context manager.

        Args:
            db_path: The path to the SQLite database file.
            timeout: How many seconds to wait for a lock before failing.
        """
        self.db_path: str = db_path
        self.timeout: float = timeout
        self.conn: sqlite3.Connection = None

    def __enter__(self) -> sqlite3.Connection:
        """
        Enters the runtime context related to this object and creates a sqlite connection.

        Returns:
            A sqlite connection.

        Raises:
            StoreUnavailableError: If the database file can't be created or opened.
        """
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(self.db_path, timeout=self.timeout, check_same_thread=False)

            # Must be set outside of a transaction, so do it before anything else
            self.conn.execute("PRAGMA foreign_keys=ON")
            self.conn.execute("PRAGMA journal_mode=WAL")
        except (OSError, sqlite3.Error) as exc:
            if self.conn is not None:
                self.conn.close()
                self.conn = None
            raise StoreUnavailableError(f"Unable to open the database at '{self.db_path}': {exc}") from exc

        # This enables name-based access to columns
        self.conn.row_factory = sqlite3.Row

        return self.conn

    def __exit__(self, exc_type: Type[Exception], exc_value: Exception, traceback: TracebackType):
        """
        Exits the runtime context and performs cleanup.

        The transaction is committed if the block finished without an exception and
        rolled back otherwise. The connection is always closed.

        Args:
            exc_type: The exception type raised, if any.
            exc_value: The exception instance raised, if any.
            traceback: The traceback object, if an exception was raised.

        Raises:
            StoreUnavailableError: If the block raised a non-integrity `sqlite3` error or the
                commit failed.
        """
        if self.conn is None:
            return

        try:
            if exc_type is None:
                self.conn.commit()
            else:
                LOG.debug(f"Rolling back transaction on '{self.db_path}' after {exc_type.__name__}.")
                self.conn.rollback()
        except sqlite3.Error as exc:
            if exc_type is None:
                raise StoreUnavailableError(f"Could not commit to the database at '{self.db_path}': {exc}") from exc
            # The error from the block is the one worth reporting
            LOG.warning(f"Rollback on '{self.db_path}' failed: {exc}")
        finally:
            self.conn.close()
            self.conn = None

        if (
            exc_type is not None
            and issubclass(exc_type, sqlite3.Error)
            and not issubclass(exc_type, sqlite3.IntegrityError)
        ):
            raise StoreUnavailableError(f"Database operation on '{self.db_path}' failed: {exc_value}") from exc_value
