##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Fixtures for files in this `cli/` test directory.
"""

from argparse import ArgumentParser, Namespace

import pytest

from librarian.cli.commands.command_entry_point import CommandEntryPoint
from tests.fixture_types import FixtureCallable, FixtureStr


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command and its subcommands.

        Returns:
            Parser with the `cmd` command and its subcommands registered.
        """
        parser = ArgumentParser()
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def parse_for_db(create_parser: FixtureCallable, db_file: FixtureStr) -> FixtureCallable:
    """
    A fixture to parse a command line and point it at a fresh database file, the way
    the global `--database` option would.

    Args:
        create_parser: A fixture to help create a parser for any command.
        db_file: The path to a database file that doesn't exist yet.

    Returns:
        A function taking a command and its arguments and returning the parsed namespace.
    """

    def _parse_for_db(cmd: CommandEntryPoint, argv: list) -> Namespace:
        args = create_parser(cmd).parse_args(argv)
        args.database = db_file
        args.config = None
        return args

    return _parse_for_db
