##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Tests for the `library_db.py` module.
"""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from librarian.config import Config
from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel
from librarian.db_scripts.entity_managers.author_manager import AuthorManager
from librarian.db_scripts.entity_managers.book_manager import BookManager
from librarian.db_scripts.entity_managers.student_manager import StudentManager
from librarian.db_scripts.library_db import LibraryDatabase
from librarian.exceptions import BackendNotSupportedError, EntityManagerNotSupportedError


# pylint: disable=redefined-outer-name


@pytest.fixture
def mock_backend(mocker: MockerFixture) -> MagicMock:
    """
    Patch the backend factory so a `LibraryDatabase` gets a mocked backend.

    Args:
        mocker: PyTest mocker fixture.

    Returns:
        The mocked backend.
    """
    backend = mocker.MagicMock()
    backend.get_name.return_value = "sqlite"
    backend.get_version.return_value = "3.45.0"
    backend.get_connection_string.return_value = "/tmp/library.db"
    mocker.patch("librarian.db_scripts.library_db.backend_factory.create", return_value=backend)
    return backend


@pytest.fixture
def mocked_library_db(mock_backend: MagicMock, library_config: Config) -> LibraryDatabase:
    """
    A `LibraryDatabase` over a mocked backend.

    Args:
        mock_backend: The mocked backend.
        library_config: A configuration pointing at a fresh database file.

    Returns:
        A `LibraryDatabase` instance.
    """
    return LibraryDatabase(library_config)


class TestLibraryDatabase:
    """
    Tests for the `LibraryDatabase` class.
    """

    def test_init_wires_managers(self, mocked_library_db: LibraryDatabase, mock_backend: MagicMock):
        """
        Test that one manager per kind is created, sharing the backend and the database.

        Args:
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            mock_backend: The mocked backend.
        """
        assert isinstance(mocked_library_db.books, BookManager)
        assert isinstance(mocked_library_db.authors, AuthorManager)
        assert isinstance(mocked_library_db.students, StudentManager)
        for manager in (mocked_library_db.books, mocked_library_db.authors, mocked_library_db.students):
            assert manager.backend is mock_backend
            assert manager.db is mocked_library_db

    def test_count_does_not_load_records(self, mocked_library_db: LibraryDatabase, mock_backend: MagicMock):
        """
        Test that counting asks the backend for a count per kind instead of loading every record.

        Args:
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            mock_backend: The mocked backend.
        """
        mock_backend.count.side_effect = {"book": 4, "author": 2, "student": 1}.get

        assert mocked_library_db.count() == {"book": 4, "author": 2, "student": 1}

        mock_backend.retrieve_all.assert_not_called()

    def test_backend_comes_from_config(self, mocker: MockerFixture, library_config: Config):
        """
        Test that the backend is created from the `database` section of the configuration.

        Args:
            mocker: PyTest mocker fixture.
            library_config: A configuration pointing at a fresh database file.
        """
        mock_create = mocker.patch("librarian.db_scripts.library_db.backend_factory.create")

        LibraryDatabase(library_config)

        mock_create.assert_called_once_with("sqlite", library_config.database)

    def test_unsupported_backend(self, library_config: Config):
        """
        Test that a configuration naming an unknown backend can't be opened.

        Args:
            library_config: A configuration pointing at a fresh database file.
        """
        library_config.database.name = "Oracle"

        with pytest.raises(BackendNotSupportedError):
            LibraryDatabase(library_config)

    def test_backend_details(self, mocked_library_db: LibraryDatabase):
        """
        Test that backend details are passed through.

        Args:
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
        """
        assert mocked_library_db.get_db_type() == "sqlite"
        assert mocked_library_db.get_db_version() == "3.45.0"
        assert mocked_library_db.get_connection_string() == "/tmp/library.db"

    @pytest.mark.parametrize("method", ["create", "get", "get_all", "delete", "patch", "upsert"])
    def test_unsupported_entity_type(self, mocked_library_db: LibraryDatabase, method: str):
        """
        Test that every generic operation rejects an unknown kind.

        Args:
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            method: The operation under test.
        """
        with pytest.raises(EntityManagerNotSupportedError, match="loan"):
            getattr(mocked_library_db, method)("loan")

    @pytest.mark.parametrize(
        "method, args, kwargs",
        [
            ("create", (BookModel(title="Dune"),), {}),
            ("get", (1,), {}),
            ("get_all", (), {"filters": {"title": "Dune"}}),
            ("delete", (1,), {}),
            ("patch", (BookModel(id=1, title="Emma"),), {"fields": ["title"]}),
            ("upsert", (BookModel(id=1, title="Emma"),), {"fields": None}),
        ],
    )
    def test_operations_are_dispatched(
        self, mocker: MockerFixture, mocked_library_db: LibraryDatabase, method: str, args: tuple, kwargs: dict
    ):
        """
        Test that each generic operation is forwarded to the manager for the kind.

        Args:
            mocker: PyTest mocker fixture.
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            method: The operation under test.
            args: Positional arguments for the operation.
            kwargs: Keyword arguments for the operation.
        """
        mock_method = mocker.patch.object(mocked_library_db.books, method, return_value="result")

        result = getattr(mocked_library_db, method)("book", *args, **kwargs)

        mock_method.assert_called_once_with(*args, **kwargs)
        if method != "delete":
            assert result == "result"

    def test_rebuild_schema_forced(self, mocker: MockerFixture, mocked_library_db: LibraryDatabase, mock_backend):
        """
        Test that a forced rebuild never prompts.

        Args:
            mocker: PyTest mocker fixture.
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            mock_backend: The mocked backend.
        """
        mock_input = mocker.patch("builtins.input")

        assert mocked_library_db.rebuild_schema(force=True) is True

        mock_input.assert_not_called()
        mock_backend.rebuild_schema.assert_called_once()

    @pytest.mark.parametrize("answers, expected", [(["y"], True), (["n"], False), (["maybe", "Y"], True)])
    def test_rebuild_schema_prompt(
        self,
        mocker: MockerFixture,
        mocked_library_db: LibraryDatabase,
        mock_backend: MagicMock,
        answers: list,
        expected: bool,
    ):
        """
        Test that the rebuild only happens once the user confirms, re-asking on invalid input.

        Args:
            mocker: PyTest mocker fixture.
            mocked_library_db: A `LibraryDatabase` over a mocked backend.
            mock_backend: The mocked backend.
            answers: What the user types at each prompt.
            expected: Whether the rebuild should happen.
        """
        mock_input = mocker.patch("builtins.input", side_effect=answers)

        assert mocked_library_db.rebuild_schema() is expected

        assert mock_input.call_count == len(answers)
        assert mock_backend.rebuild_schema.called is expected


class TestLibraryDatabaseWithSQLite:
    """
    Tests for `LibraryDatabase` against a real SQLite file.
    """

    def test_count(self, library_db: LibraryDatabase):
        """
        Test that records of each kind are counted.

        Args:
            library_db: A library database backed by a fresh SQLite file.
        """
        author = library_db.create("author", AuthorModel(name="Frank Herbert"))
        library_db.create("book", BookModel(title="Dune", author_id=author.id))
        library_db.create("book", BookModel(title="Dune Messiah", author_id=author.id))

        assert library_db.count() == {"book": 2, "author": 1, "student": 0}

    def test_get_all_with_filters(self, library_db: LibraryDatabase):
        """
        Test that filters narrow down the listed records.

        Args:
            library_db: A library database backed by a fresh SQLite file.
        """
        library_db.create("student", StudentModel(student_name="Paul"))
        library_db.create("student", StudentModel(student_name="Chani"))

        result = library_db.get_all("student", filters={"student_name": "Chani"})

        assert [student.student_name for student in result] == ["Chani"]

    def test_rebuild_schema_empties_database(self, library_db: LibraryDatabase):
        """
        Test that a confirmed rebuild removes every record.

        Args:
            library_db: A library database backed by a fresh SQLite file.
        """
        library_db.create("student", StudentModel(student_name="Paul"))

        library_db.rebuild_schema(force=True)

        assert library_db.count() == {"book": 0, "author": 0, "student": 0}
