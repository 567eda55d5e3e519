##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
CLI module for the interactive catalogue menu.

This module defines the `MenuCommand` class, which handles the `menu` subcommand of
the Librarian CLI, and the `InteractiveMenu` loop it runs. The menu presents numbered
options, reads a choice, runs it, and returns to the menu. A failed operation is
reported and the loop carries on; only `q` (or end of input) leaves the menu.
"""

import logging
from argparse import ArgumentParser, Namespace
from typing import Callable, Dict, Optional, Tuple

from librarian.cli.commands.command_entry_point import CommandEntryPoint
from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel
from librarian.db_scripts.library_db import LibraryDatabase
from librarian.display import display_records, get_tablefmt
from librarian.exceptions import RecordNotFoundError, RecordValidationError, StoreUnavailableError


LOG = logging.getLogger("librarian")

QUIT_CHOICES = ("q", "quit", "exit")


class InteractiveMenu:
    """
    A numbered menu for working with the catalogue interactively.

    Attributes:
        library_db: The open library database.
        tablefmt: The `tabulate` table format used for listings.
        input_fn: The function used to read a line of input.
        options: Maps each choice to its label and handler.

    Methods:
        present_options: Print the menu.
        pick_option: Run the handler for a choice.
        run: Loop over presenting the menu and running choices until the user quits.
    """

    def __init__(self, library_db: LibraryDatabase, tablefmt: str = "presto", input_fn: Callable[[str], str] = input):
        """
        Initialize the menu.

        Args:
            library_db: The open library database.
            tablefmt: The `tabulate` table format used for listings.
            input_fn: The function used to read a line of input, `input` by default.
        """
        self.library_db = library_db
        self.tablefmt = tablefmt
        self.input_fn = input_fn
        self.options: Dict[str, Tuple[str, Callable[[], None]]] = {
            "1": ("List all books", self.list_books),
            "2": ("Create a new book", self.create_book),
            "3": ("Remove a book", self.remove_book),
            "4": ("List all authors", self.list_authors),
            "5": ("Create a new author", self.create_author),
            "6": ("Delete an author and their books", self.delete_author_and_books),
            "7": ("Rebuild DB (useful in case of schema changes)", self.rebuild_db),
            "8": ("Create a new student", self.create_student),
            "9": ("List all students", self.list_students),
        }

    def _ask(self, prompt: str) -> str:
        """Read one stripped line of input."""
        return self.input_fn(prompt).strip()

    def _ask_id(self, prompt: str, allow_blank: bool = False) -> Optional[int]:
        """
        Read an id.

        Args:
            prompt: The prompt to show.
            allow_blank: Whether an empty answer is accepted, meaning no id.

        Returns:
            The id, or None for an accepted empty answer.

        Raises:
            ValueError: If the answer isn't an integer.
        """
        answer = self._ask(prompt)
        if allow_blank and not answer:
            return None
        try:
            return int(answer)
        except ValueError as exc:
            raise ValueError(f"'{answer}' is not a valid id.") from exc

    def present_options(self):
        """Print the menu."""
        for choice, (label, _) in self.options.items():
            print(f"{choice}: {label}")
        print("q: Quit")

    def list_books(self):
        display_records(self.library_db.books.get_all(), "book", tablefmt=self.tablefmt)

    def list_authors(self):
        display_records(self.library_db.authors.get_all(), "author", tablefmt=self.tablefmt)

    def list_students(self):
        display_records(self.library_db.students.get_all(), "student", tablefmt=self.tablefmt)

    def create_book(self):
        """Ask for a title and an author, then insert the book."""
        title = self._ask("Book title: ")
        print("ID of book author?")
        self.list_authors()
        author_id = self._ask_id("Author ID (leave blank for none): ", allow_blank=True)
        book = self.library_db.books.create(BookModel(title=title, author_id=author_id))
        print(f"Insertion complete: book {book.id}")

    def remove_book(self):
        """Ask for a book id and delete that book."""
        print("Write book ID to remove:")
        self.list_books()
        identifier = self._ask_id("Book ID: ")
        self.library_db.books.delete(identifier)
        print("Book removed")

    def create_author(self):
        """Ask for a name and insert the author."""
        name = self._ask("Name of author? ")
        author = self.library_db.authors.create(AuthorModel(name=name))
        print(f"Insertion complete: author {author.id}")

    def delete_author_and_books(self):
        """Ask for an author id and delete that author along with their books."""
        print("ID of author to delete?")
        self.list_authors()
        identifier = self._ask_id("Author ID: ")
        self.library_db.authors.delete(identifier, remove_books=True)
        print("Deletion complete")

    def rebuild_db(self):
        """Drop and recreate the schema after the user confirms."""
        answer = self._ask("Every record will be lost. Rebuild the database? (y/n): ").lower()
        if answer != "y":
            print("Rebuild cancelled")
            return
        self.library_db.rebuild_schema(force=True)
        print("DB rebuilt")

    def create_student(self):
        """Ask for a name and insert the student."""
        student_name = self._ask("Student name: ")
        student = self.library_db.students.create(StudentModel(student_name=student_name))
        print(f"Insertion complete: student {student.id}")

    def pick_option(self, choice: str):
        """
        Run the handler for a choice.

        Failures of the operation are logged and swallowed so the menu can continue.

        Args:
            choice: The option the user picked.
        """
        option = self.options.get(choice)
        if option is None:
            print(f"Unknown option '{choice}'")
            return

        label, handler = option
        LOG.debug(f"Running menu option {choice}: {label}")
        try:
            handler()
        except (RecordNotFoundError, RecordValidationError, StoreUnavailableError, ValueError) as exc:
            LOG.error(f"{label} failed: {exc}")

    def run(self):
        """
        Present the menu and run choices until the user quits or input ends.
        """
        while True:
            self.present_options()
            print()
            try:
                choice = self._ask("> ").lower()
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if choice in QUIT_CHOICES:
                break
            self.pick_option(choice)
            print()


class MenuCommand(CommandEntryPoint):
    """
    Handles the `menu` CLI command, which runs the interactive menu.

    Methods:
        add_parser: Adds the `menu` command to the CLI parser.
        process_command: Opens the database and runs the menu loop.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `menu` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `menu` command parser will be added.
        """
        menu: ArgumentParser = subparsers.add_parser(
            "menu",
            help="Work with the catalogue through an interactive numbered menu.",
        )
        menu.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to run the interactive menu.

        Args:
            args: Parsed CLI arguments.
        """
        library_db = self.open_library_db(args)
        InteractiveMenu(library_db, tablefmt=get_tablefmt(library_db.config)).run()
