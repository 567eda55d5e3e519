##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
CLI module for rebuilding the library database.

This module defines the `RebuildCommand` class, which handles the `rebuild`
subcommand of the Librarian CLI. Rebuilding drops every table and recreates the
schema from the current data models, so every record is lost. The user is asked
for confirmation unless `--force` is given.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from librarian.cli.commands.command_entry_point import CommandEntryPoint


LOG = logging.getLogger("librarian")


class RebuildCommand(CommandEntryPoint):
    """
    Handles the `rebuild` CLI command for resetting the database schema.

    Methods:
        add_parser: Adds the `rebuild` command to the CLI parser.
        process_command: Processes the CLI input and rebuilds the schema.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `rebuild` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `rebuild` command parser will be added.
        """
        rebuild: ArgumentParser = subparsers.add_parser(
            "rebuild",
            help="Drop and recreate every table. All records are lost.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        rebuild.set_defaults(func=self.process_command)
        rebuild.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Rebuild the database without confirmation.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to rebuild the database schema.

        Args:
            args: Parsed CLI arguments.
        """
        library_db = self.open_library_db(args)
        library_db.rebuild_schema(force=args.force)
