##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Tests for the `sqlite_backend.py` module.
"""

from types import SimpleNamespace

import pytest
from pytest_mock import MockerFixture

from librarian.backends.sqlite.sqlite_backend import SQLiteBackend
from librarian.backends.sqlite.sqlite_connection import SQLiteConnection
from librarian.backends.sqlite.sqlite_stores import SQLiteAuthorStore, SQLiteBookStore, SQLiteStudentStore
from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel


# pylint: disable=redefined-outer-name


@pytest.fixture
def backend(db_config: SimpleNamespace) -> SQLiteBackend:
    """
    A SQLite backend on a fresh database file.

    Args:
        db_config: The `database` section of a configuration pointing at a fresh file.

    Returns:
        A `SQLiteBackend` instance.
    """
    return SQLiteBackend(db_config)


def _fill(backend: SQLiteBackend):
    """Insert one record of each kind."""
    author = backend.insert(AuthorModel(name="Frank Herbert"))
    backend.insert(BookModel(title="Dune", author_id=author.id))
    backend.insert(StudentModel(student_name="Paul"))


def test_initialization(backend: SQLiteBackend, db_config: SimpleNamespace):
    """
    Test that the backend wires up a store per kind, parents first, and creates every table.

    Args:
        backend: A SQLite backend on a fresh database file.
        db_config: The `database` section of a configuration pointing at a fresh file.
    """
    assert backend.get_name() == "sqlite"
    assert list(backend.stores) == ["author", "book", "student"]
    assert isinstance(backend.stores["author"], SQLiteAuthorStore)
    assert isinstance(backend.stores["book"], SQLiteBookStore)
    assert isinstance(backend.stores["student"], SQLiteStudentStore)
    assert backend.get_connection_string() == db_config.path
    assert backend.table_names() == ["author", "book", "student"]


def test_opening_existing_database_keeps_data(backend: SQLiteBackend, db_config: SimpleNamespace):
    """
    Test that opening a backend on a file that already has data doesn't discard it.

    Args:
        backend: A SQLite backend on a fresh database file.
        db_config: The `database` section of a configuration pointing at the same file.
    """
    _fill(backend)

    reopened = SQLiteBackend(db_config)

    assert len(reopened.retrieve_all("book")) == 1
    assert len(reopened.retrieve_all("author")) == 1


def test_get_version(backend: SQLiteBackend):
    """
    Test that the SQLite library version is reported.

    Args:
        backend: A SQLite backend on a fresh database file.
    """
    import sqlite3  # pylint: disable=import-outside-toplevel

    assert backend.get_version() == sqlite3.sqlite_version


def test_rebuild_schema_empties_every_table(backend: SQLiteBackend):
    """
    Test that a rebuild leaves all three tables present and empty, with ids restarting at 1.

    Args:
        backend: A SQLite backend on a fresh database file.
    """
    _fill(backend)

    backend.rebuild_schema()

    assert backend.table_names() == ["author", "book", "student"]
    for store_type in ("author", "book", "student"):
        assert backend.retrieve_all(store_type) == []
    assert backend.insert(StudentModel(student_name="Chani")).id == 1


def test_rebuild_schema_is_idempotent(backend: SQLiteBackend):
    """
    Test that rebuilding twice leaves the same state as rebuilding once.

    Args:
        backend: A SQLite backend on a fresh database file.
    """
    _fill(backend)

    backend.rebuild_schema()
    once = backend.table_names()
    backend.rebuild_schema()

    assert backend.table_names() == once
    assert all(store.count() == 0 for store in backend.stores.values())


def test_rebuild_schema_drops_unmanaged_tables(backend: SQLiteBackend, db_config: SimpleNamespace):
    """
    Test that tables Librarian doesn't manage are dropped by a rebuild too.

    Args:
        backend: A SQLite backend on a fresh database file.
        db_config: The `database` section of a configuration pointing at the same file.
    """
    with SQLiteConnection(db_config.path) as conn:
        conn.execute("CREATE TABLE legacy_loans (id INTEGER PRIMARY KEY, book_id INTEGER)")

    backend.rebuild_schema()

    assert backend.table_names() == ["author", "book", "student"]


def test_rebuild_schema_drops_children_first(backend: SQLiteBackend, mocker: MockerFixture):
    """
    Test that known tables are dropped in reverse order so books go before authors.

    Args:
        backend: A SQLite backend on a fresh database file.
        mocker: PyTest mocker fixture.
    """
    dropped = []
    for store_type, store in backend.stores.items():
        mocker.patch.object(store, "drop_table", side_effect=lambda name=store_type: dropped.append(name))

    backend.rebuild_schema()

    assert dropped == ["student", "book", "author"]


def test_rebuild_schema_skips_cleanup_connection_without_leftovers(backend: SQLiteBackend, mocker: MockerFixture):
    """
    Test that the leftover check uses the table listing and opens no extra connection when nothing is left.

    Args:
        backend: A SQLite backend on a fresh database file.
        mocker: PyTest mocker fixture.
    """
    mock_table_names = mocker.patch.object(backend, "table_names", return_value=[])
    mock_connection = mocker.patch("librarian.backends.sqlite.sqlite_backend.SQLiteConnection")
    mock_init = mocker.patch.object(backend, "_initialize_schema")

    backend.rebuild_schema()

    mock_table_names.assert_called_once_with()
    mock_connection.assert_not_called()
    mock_init.assert_called_once_with()
