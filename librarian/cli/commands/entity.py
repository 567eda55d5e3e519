##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Implements the `book`, `author`, and `student` commands for the Librarian CLI.

This module defines the `EntityCommand` class. One instance is registered per record
kind and each provides the same actions:

- `<kind> list`: List every record, optionally filtered.
- `<kind> get ID [ID ...]`: Show specific records.
- `<kind> add --<field> VALUE ...`: Insert a new record.
- `<kind> patch ID --<field> VALUE ...`: Overwrite only the given fields of a record.
- `<kind> upsert [--id ID] --<field> VALUE ...`: Patch the record if it exists, insert it otherwise.
- `<kind> delete ID [ID ...]`: Delete specific records.

The arguments for each kind come from the `ENTITY_REGISTRY`, so kind-specific
options (e.g. `--clear-author-id` for books) are integrated automatically.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace
from typing import Dict

from librarian.cli.commands.command_entry_point import CommandEntryPoint
from librarian.cli.commands.entity_registry import ENTITY_REGISTRY
from librarian.cli.utils import add_field_arguments, get_field_values, get_filters_for_entity
from librarian.db_scripts.library_db import LibraryDatabase
from librarian.db_scripts.partial_update import partial_from_changes
from librarian.display import display_records, get_tablefmt
from librarian.utils import get_plural_of_entity


LOG = logging.getLogger("librarian")


class EntityCommand(CommandEntryPoint):
    """
    Handles the CLI command for one record kind.

    Attributes:
        entity_type (str): The record kind this command manages (book, author, student).

    Methods:
        add_parser: Register the `<kind>` command and its actions with the CLI parser.
        process_command: Dispatch the requested action.
    """

    def __init__(self, entity_type: str):
        """
        Initialize the command for a record kind.

        Args:
            entity_type: A key of the `ENTITY_REGISTRY`.
        """
        self.entity_type: str = entity_type
        self.model_class = ENTITY_REGISTRY[entity_type]["model"]

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `<kind>` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the command parser will be added.
        """
        plural = get_plural_of_entity(self.entity_type)
        ident_help = ENTITY_REGISTRY[self.entity_type]["ident_help"]

        entity_parser = subparsers.add_parser(
            self.entity_type,
            help=f"List, add, patch, upsert, or delete {plural}.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        entity_parser.set_defaults(func=self.process_command)
        actions = entity_parser.add_subparsers(dest="action", required=True)

        # <kind> list
        list_parser = actions.add_parser("list", help=f"List all {plural} (supports filters).")
        for filt in ENTITY_REGISTRY[self.entity_type]["filters"]:
            list_parser.add_argument(
                f"--{filt['name'].replace('_', '-')}",
                dest=filt["name"],
                type=filt["type"],
                help=f"Filter by {filt['name'].replace('_', ' ')}.",
            )

        # <kind> get
        get_parser = actions.add_parser("get", help=f"Show one or more {plural} by ID.")
        get_parser.add_argument("ids", type=int, nargs="+", help=ident_help.format(verb="show"))

        # <kind> add
        add_parser = actions.add_parser("add", help=f"Add a new {self.entity_type}.")
        add_field_arguments(add_parser, self.entity_type, enforce_required=True)

        # <kind> patch
        patch_parser = actions.add_parser(
            "patch", help=f"Change the given fields of a {self.entity_type} and keep the rest."
        )
        patch_parser.add_argument("id", type=int, help=f"ID of the {self.entity_type} to patch.")
        add_field_arguments(patch_parser, self.entity_type, clearable=True)

        # <kind> upsert
        upsert_parser = actions.add_parser(
            "upsert",
            help=f"Patch a {self.entity_type} if the ID exists, otherwise add it with a new ID.",
        )
        upsert_parser.add_argument("--id", dest="id", type=int, default=None, help=f"ID of the {self.entity_type}.")
        add_field_arguments(upsert_parser, self.entity_type, clearable=True)

        # <kind> delete
        delete_parser = actions.add_parser("delete", help=f"Delete one or more {plural} by ID.")
        delete_parser.add_argument("ids", type=int, nargs="+", help=ident_help.format(verb="delete"))
        if self.entity_type == "author":
            delete_parser.add_argument(
                "--with-books",
                action="store_true",
                help="Delete the books of the authors too. Without this, authors with books can't be deleted.",
            )

    def _extract_delete_kwargs(self, args: Namespace) -> Dict:
        """
        Extracts kind-specific keyword arguments for deletion.

        Parameters:
            args (Namespace): Parsed CLI arguments.

        Returns:
            Keyword arguments to pass to `delete`.
        """
        kwargs = {}
        if self.entity_type == "author":
            kwargs["remove_books"] = args.with_books
        return kwargs

    def process_command(self, args: Namespace):
        """
        Process the `<kind>` command using the provided CLI arguments.

        Args:
            args (Namespace): Parsed CLI arguments from the user.
        """
        library_db = self.open_library_db(args)
        tablefmt = get_tablefmt(library_db.config)
        action = args.action

        if action == "list":
            filters = get_filters_for_entity(args, self.entity_type)
            records = library_db.get_all(self.entity_type, filters=filters)
            display_records(records, self.entity_type, tablefmt=tablefmt)
        elif action == "get":
            records = [library_db.get(self.entity_type, identifier) for identifier in args.ids]
            display_records(records, self.entity_type, tablefmt=tablefmt)
        elif action == "add":
            record = self.model_class(**get_field_values(args, self.entity_type))
            library_db.create(self.entity_type, record)
            display_records([record], self.entity_type, tablefmt=tablefmt)
        elif action in ("patch", "upsert"):
            self._write(library_db, args, tablefmt)
        elif action == "delete":
            kwargs = self._extract_delete_kwargs(args)
            for identifier in args.ids:
                library_db.delete(self.entity_type, identifier, **kwargs)
        else:
            LOG.error(f"Unrecognized action: {action}")

    def _write(self, library_db: LibraryDatabase, args: Namespace, tablefmt: str):
        """
        Run a `patch` or `upsert` action.

        Only the fields given on the command line are written; every other field of an
        existing record keeps its stored value. An upsert that inserts needs the same
        fields as `add`.

        Args:
            library_db: The open library database.
            args: Parsed CLI arguments.
            tablefmt: The table format used to print the result.

        Raises:
            ValueError: If an inserting upsert is missing a required field.
        """
        changes = get_field_values(args, self.entity_type)
        if args.action == "patch" and not changes:
            LOG.warning(f"No fields given; {self.entity_type} '{args.id}' was left unchanged.")
            return
        if args.action == "upsert" and (args.id is None or not library_db.exists(self.entity_type, args.id)):
            # Will insert
            missing = [
                field_def["name"]
                for field_def in ENTITY_REGISTRY[self.entity_type]["fields"]
                if field_def.get("required", False) and changes.get(field_def["name"]) is None
            ]
            if missing:
                options = ", ".join(f"--{name.replace('_', '-')}" for name in missing)
                raise ValueError(f"Cannot insert a new {self.entity_type} without {options}.")

        partial, fields = partial_from_changes(self.model_class, args.id, changes)
        if args.action == "patch":
            record = library_db.patch(self.entity_type, partial, fields=fields)
        else:
            record = library_db.upsert(self.entity_type, partial, fields=fields)
        display_records([record], self.entity_type, tablefmt=tablefmt)
