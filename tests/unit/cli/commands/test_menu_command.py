##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Tests for the `menu.py` file of the `cli/commands` folder.
"""

import sqlite3
from argparse import Namespace
from typing import List

import pytest
from pytest_mock import MockerFixture

from librarian.cli.commands.menu import InteractiveMenu, MenuCommand
from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel
from librarian.db_scripts.library_db import LibraryDatabase
from tests.fixture_types import FixtureCallable


def _scripted(answers: List[str]):
    """Build an input function that replays `answers` and then signals end of input."""
    replies = iter(answers)

    def _input(_prompt: str) -> str:
        try:
            return next(replies)
        except StopIteration as exc:
            raise EOFError from exc

    return _input


def _run(library_db: LibraryDatabase, answers: List[str]):
    """Run the menu over `library_db` with scripted input."""
    InteractiveMenu(library_db, input_fn=_scripted(answers)).run()


class LockedOnCommit(sqlite3.Connection):
    """A connection whose commits always fail as if another writer held the lock."""

    def commit(self):
        raise sqlite3.OperationalError("database is locked")


def test_present_options(library_db: LibraryDatabase, capsys: pytest.CaptureFixture):
    """
    Test that every numbered option and the quit option are shown.

    Args:
        library_db: A library database backed by a fresh SQLite file.
        capsys: PyTest capsys fixture.
    """
    InteractiveMenu(library_db).present_options()

    out = capsys.readouterr().out
    assert "1: List all books" in out
    assert "7: Rebuild DB (useful in case of schema changes)" in out
    assert "9: List all students" in out
    assert "q: Quit" in out


def test_create_author_then_book(library_db: LibraryDatabase):
    """
    Test creating an author and a book through the menu.

    Args:
        library_db: A library database backed by a fresh SQLite file.
    """
    _run(library_db, ["5", "Frank Herbert", "2", "Dune", "1", "q"])

    assert library_db.books.get_all() == [BookModel(id=1, title="Dune", author_id=1)]
    assert [book.title for book in library_db.authors.get(1).books] == ["Dune"]


def test_create_book_without_author(library_db: LibraryDatabase):
    """
    Test that a blank author id creates a book with no author.

    Args:
        library_db: A library database backed by a fresh SQLite file.
    """
    _run(library_db, ["2", "Dune", ""])

    assert library_db.books.get(1).author_id is None


def test_failures_keep_the_menu_running(
    library_db: LibraryDatabase, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture
):
    """
    Test that bad input and failed operations are reported and the menu carries on.

    Args:
        library_db: A library database backed by a fresh SQLite file.
        caplog: PyTest caplog fixture.
        capsys: PyTest capsys fixture.
    """
    answers = [
        "2", "Dune", "42",  # author doesn't exist
        "3", "abc",  # not an id
        "3", "7",  # book doesn't exist
        "x",  # unknown option
        "8", "Paul",
        "quit",
    ]  # fmt: skip

    _run(library_db, answers)

    assert library_db.books.get_all() == []
    assert [student.student_name for student in library_db.students.get_all()] == ["Paul"]
    assert "Create a new book failed" in caplog.text
    assert "'abc' is not a valid id." in caplog.text
    assert "Book with id '7' does not exist" in caplog.text
    assert "Unknown option 'x'" in capsys.readouterr().out


def test_commit_failure_keeps_the_menu_running(
    library_db: LibraryDatabase, mocker: MockerFixture, caplog: pytest.LogCaptureFixture
):
    """
    Test that a write whose commit fails is reported and the menu carries on.

    Args:
        library_db: A library database backed by a fresh SQLite file.
        mocker: PyTest mocker fixture.
        caplog: PyTest caplog fixture.
    """
    real_connect = sqlite3.connect
    mocker.patch(
        "sqlite3.connect",
        side_effect=lambda *args, **kwargs: real_connect(*args, factory=LockedOnCommit, **kwargs),
    )

    _run(library_db, ["5", "Frank Herbert", "q"])

    assert "Create a new author failed" in caplog.text
    assert "database is locked" in caplog.text

    mocker.stopall()
    assert library_db.authors.get_all() == []


def test_remove_book(library_db: LibraryDatabase):
    """
    Test removing a book through the menu.

    Args:
        library_db: A library database backed by a fresh SQLite file.
    """
    book = library_db.books.create(BookModel(title="Dune"))

    _run(library_db, ["3", str(book.id)])

    assert library_db.books.get_all() == []


def test_delete_author_and_books(library_db: LibraryDatabase):
    """
    Test that the menu deletes an author together with their books.

    Args:
        library_db: A library database backed by a fresh SQLite file.
    """
    author = library_db.authors.create(AuthorModel(name="Frank Herbert"))
    library_db.books.create(BookModel(title="Dune", author_id=author.id))

    _run(library_db, ["6", str(author.id)])

    assert library_db.authors.get_all() == []
    assert library_db.books.get_all() == []


@pytest.mark.parametrize("answer, expected_students", [("y", 0), ("n", 1)])
def test_rebuild_db(library_db: LibraryDatabase, answer: str, expected_students: int):
    """
    Test that the rebuild option only runs once the user confirms.

    Args:
        library_db: A library database backed by a fresh SQLite file.
        answer: The confirmation answer.
        expected_students: How many students remain afterwards.
    """
    library_db.students.create(StudentModel(student_name="Paul"))

    _run(library_db, ["7", answer])

    assert len(library_db.students.get_all()) == expected_students


def test_listings(library_db: LibraryDatabase, capsys: pytest.CaptureFixture):
    """
    Test the list options.

    Args:
        library_db: A library database backed by a fresh SQLite file.
        capsys: PyTest capsys fixture.
    """
    author = library_db.authors.create(AuthorModel(name="Frank Herbert"))
    library_db.books.create(BookModel(title="Dune", author_id=author.id))

    _run(library_db, ["1", "4", "9"])

    out = capsys.readouterr().out
    assert "Dune" in out
    assert "Frank Herbert" in out
    assert "No students found." in out


def test_menu_command(create_parser: FixtureCallable, mocker: MockerFixture):
    """
    Test that the `menu` command opens the database and runs the loop.

    Args:
        create_parser: A fixture to help create a parser for any command.
        mocker: PyTest mocker fixture.
    """
    command = MenuCommand()
    args = create_parser(command).parse_args(["menu"])
    assert args.func.__name__ == command.process_command.__name__

    mock_db = mocker.MagicMock()
    mock_db.config.display.tablefmt = "grid"
    mocker.patch.object(MenuCommand, "open_library_db", return_value=mock_db)
    mock_menu = mocker.patch("librarian.cli.commands.menu.InteractiveMenu")

    command.process_command(Namespace())

    mock_menu.assert_called_once_with(mock_db, tablefmt="grid")
    mock_menu.return_value.run.assert_called_once()
