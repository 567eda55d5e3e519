##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
CLI module for displaying configuration and database information.

This module defines the `InfoCommand` class, which handles the `info` subcommand
of the Librarian CLI. The `info` command displays the configuration in use, where
the database file lives, the backend version, and how many records of each kind
are stored. Useful for debugging or verifying setup.
"""

import logging
from argparse import ArgumentParser, Namespace

from librarian.cli.commands.command_entry_point import CommandEntryPoint
from librarian.display import display_config_info


LOG = logging.getLogger("librarian")


class InfoCommand(CommandEntryPoint):
    """
    Handles `info` CLI command for viewing information about the configuration and database.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Processes the CLI input and prints the information.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `info` command parser will be added.
        """
        info: ArgumentParser = subparsers.add_parser(
            "info",
            help="Display info about the librarian configuration and database. Useful for debugging.",
        )
        info.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to print librarian configuration info.

        Args:
            args: Parsed CLI arguments.
        """
        library_db = self.open_library_db(args)
        LOG.debug(str(library_db.config))
        display_config_info(library_db, library_db.config)
