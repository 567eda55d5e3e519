##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
SQLite store implementations for Librarian entity models.

This module defines concrete `SQLiteStoreBase` subclasses for managing the
persistence of the catalogue's entity models. Each store is bound to a specific
model and SQLite table, providing CRUD operations and automated table creation.

Authors are read together with the books that reference them, so the author store
overrides the read operations to join against the `book` table.

See also:
    - librarian.backends.sqlite.sqlite_store_base: Base class
    - librarian.db_scripts.data_models: Data model definitions
"""

import logging
from types import SimpleNamespace
from typing import Dict, List, Optional

from librarian.backends.sqlite.sqlite_store_base import SQLiteStoreBase
from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel


LOG = logging.getLogger(__name__)


class SQLiteBookStore(SQLiteStoreBase[BookModel]):
    """
    A SQLite-based store for managing [`BookModel`][db_scripts.data_models.BookModel]
    objects.
    """

    def __init__(self, db_config: SimpleNamespace):
        """Initialize the `SQLiteBookStore`."""
        super().__init__("book", BookModel, db_config)


class SQLiteAuthorStore(SQLiteStoreBase[AuthorModel]):
    """
    A SQLite-based store for managing [`AuthorModel`][db_scripts.data_models.AuthorModel]
    objects.

    Reads populate `AuthorModel.books` with every book whose `author_id` references
    the author, ordered by book id. The `book` table must exist before reading.
    """

    BOOK_TABLE = "book"

    def __init__(self, db_config: SimpleNamespace):
        """Initialize the `SQLiteAuthorStore`."""
        super().__init__("author", AuthorModel, db_config)

    def _select_with_books(self, where_clause: str = "") -> str:
        """
        Build the query that reads authors joined with their books.

        Args:
            where_clause: An optional `WHERE` clause restricting the authors read.

        Returns:
            The SQL statement.
        """
        return f"""
            SELECT a.id AS id, a.name AS name,
                   b.id AS book_id, b.title AS book_title, b.author_id AS book_author_id
            FROM {self.table_name} AS a
            LEFT JOIN {self.BOOK_TABLE} AS b ON b.author_id = a.id
            {where_clause}
            ORDER BY a.id, b.id
        """

    def _group_rows(self, rows: List) -> List[AuthorModel]:
        """
        Fold joined rows into authors, one per distinct author id.

        Args:
            rows: Rows produced by the query from `_select_with_books`.

        Returns:
            A list of authors with their books attached, in author id order.
        """
        authors: Dict[int, AuthorModel] = {}
        for row in rows:
            author = authors.get(row["id"])
            if author is None:
                author = AuthorModel(id=row["id"], name=row["name"])
                authors[author.id] = author
            if row["book_id"] is not None:
                author.books.append(
                    BookModel(id=row["book_id"], title=row["book_title"], author_id=row["book_author_id"])
                )
        return list(authors.values())

    def retrieve(self, identifier: int) -> Optional[AuthorModel]:
        """
        Retrieve an author and its books by ID.

        Args:
            identifier: The ID of the author to retrieve.

        Returns:
            The author if found, None otherwise.
        """
        LOG.debug(f"Retrieving author {identifier} with its books.")
        with self._connect() as conn:
            cursor = conn.execute(self._select_with_books("WHERE a.id = :identifier"), {"identifier": identifier})
            authors = self._group_rows(cursor.fetchall())

        return authors[0] if authors else None

    def retrieve_all(self) -> List[AuthorModel]:
        """
        Retrieve every author with its books, ordered by ID.

        Returns:
            A list of authors.
        """
        with self._connect() as conn:
            cursor = conn.execute(self._select_with_books())
            authors = self._group_rows(cursor.fetchall())

        LOG.debug(f"Successfully retrieved {len(authors)} authors from SQLite.")
        return authors


class SQLiteStudentStore(SQLiteStoreBase[StudentModel]):
    """
    A SQLite-based store for managing [`StudentModel`][db_scripts.data_models.StudentModel]
    objects.
    """

    def __init__(self, db_config: SimpleNamespace):
        """Initialize the `SQLiteStudentStore`."""
        super().__init__("student", StudentModel, db_config)
