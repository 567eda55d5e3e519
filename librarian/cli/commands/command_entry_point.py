##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Defines the abstract base class for Librarian CLI commands.

This module provides the `CommandEntryPoint` abstract base class that all
Librarian command implementations must inherit from. It standardizes the interface
for adding command-specific argument parsers and processing CLI command logic, and
gives every command the same way of opening the library database from the global
`--config` and `--database` options.
"""

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace

from librarian.config import Config
from librarian.config.configfile import initialize_config
from librarian.db_scripts.library_db import LibraryDatabase


class CommandEntryPoint(ABC):
    """
    Abstract base class for a Librarian CLI command entry point.

    Methods:
        add_parser: Adds the parser for a specific command to the main `ArgumentParser`.
        process_command: Executes the logic for this CLI command.
        load_config: Builds the configuration selected by the global options.
        open_library_db: Opens the library database selected by the global options.
    """

    @abstractmethod
    def add_parser(self, subparsers: ArgumentParser):
        """Add the parser for this command to the main `ArgumentParser`."""
        raise NotImplementedError("Subclasses of `CommandEntryPoint` must implement an `add_parser` method.")

    @abstractmethod
    def process_command(self, args: Namespace):
        """Execute the logic for this CLI command."""
        raise NotImplementedError("Subclasses of `CommandEntryPoint` must implement a `process_command` method.")

    def load_config(self, args: Namespace) -> Config:
        """
        Build the configuration selected by the global `--config` and `--database` options.

        Args:
            args: Parsed CLI arguments.

        Returns:
            The loaded configuration.
        """
        return initialize_config(path=getattr(args, "config", None), db_path=getattr(args, "database", None))

    def open_library_db(self, args: Namespace) -> LibraryDatabase:
        """
        Open the library database selected by the global options.

        Args:
            args: Parsed CLI arguments.

        Returns:
            The opened library database. Its configuration is available as `config`.
        """
        return LibraryDatabase(self.load_config(args))
