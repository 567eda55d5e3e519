##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Main CLI parser setup for the Librarian command-line interface.

This module defines the primary argument parser for the `librarian` CLI tool,
including custom error handling, the global options every command shares, and
integration of all available subcommands.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from librarian import VERSION
from librarian.cli.commands import ALL_COMMANDS


DEFAULT_LOG_LEVEL = "INFO"

DESCRIPTION = """Librarian: manage a library catalogue of books, authors, and students.

Records are stored in a single SQLite file. Use `librarian menu` for the
interactive menu or the per-kind commands for scripting."""


class HelpParser(ArgumentParser):
    """
    This class overrides the error message of the argument parser to
    print the help message when an error happens.

    Methods:
        error: Override the error message of the `ArgumentParser` class.
    """

    def error(self, message: str):
        """
        Override the error message of the `ArgumentParser` class.

        Args:
            message: The error message to log.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def build_main_parser() -> ArgumentParser:
    """
    Set up the command-line argument parser for the Librarian package.

    Returns:
        An `ArgumentParser` object with every parser defined in Librarian's codebase.
    """
    parser = HelpParser(
        prog="librarian",
        description=DESCRIPTION,
        formatter_class=RawDescriptionHelpFormatter,
        epilog="See librarian <command> --help for more info",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="Set log level: DEBUG, INFO, WARNING, ERROR [Default: %(default)s]",
    )
    parser.add_argument(
        "-db",
        "--database",
        type=str,
        default=None,
        help="Path to the database file. Overrides the LIBRARIAN_DB environment variable and app.yaml.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Directory holding the app.yaml to use instead of the default search locations.",
    )
    subparsers = parser.add_subparsers(dest="subparsers", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
