##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Librarian CLI Commands Package.

This package defines all top-level command implementations for the Librarian
command-line interface. Each module encapsulates the logic and argument parsing
for a distinct command, following a consistent structure built around the
`CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    entity: Implements the `book`, `author`, and `student` commands (list, get, add, patch, upsert, delete).
    entity_registry: Describes the fields and filters of each record kind for the CLI.
    info: Implements the `info` command for displaying configuration and database diagnostics.
    menu: Implements the `menu` command, an interactive numbered menu.
    rebuild: Implements the `rebuild` command to drop and recreate the schema.
"""

from librarian.cli.commands.entity import EntityCommand
from librarian.cli.commands.info import InfoCommand
from librarian.cli.commands.menu import MenuCommand
from librarian.cli.commands.rebuild import RebuildCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    EntityCommand("author"),
    EntityCommand("book"),
    InfoCommand(),
    MenuCommand(),
    RebuildCommand(),
    EntityCommand("student"),
]
