##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Utility functions shared by the Librarian CLI commands.

These helpers add the per-field arguments described by the
[`ENTITY_REGISTRY`][cli.commands.entity_registry.ENTITY_REGISTRY] to a parser, read
them back out of the parsed arguments.
"""

import logging
from argparse import ArgumentParser, Namespace
from typing import Any, Dict

from librarian.cli.commands.entity_registry import ENTITY_REGISTRY


LOG = logging.getLogger("librarian")


def _option_name(field_name: str) -> str:
    """Convert a field name to its command-line option, e.g. `author_id` -> `--author-id`."""
    return f"--{field_name.replace('_', '-')}"


def add_field_arguments(
    parser: ArgumentParser, entity_type: str, enforce_required: bool = False, clearable: bool = False
):
    """
    Add one option per writable field of a record kind.

    Args:
        parser: The parser to add the options to.
        entity_type: The record kind (book, author, student).
        enforce_required: Whether fields flagged `required` in the registry must be given.
        clearable: Whether to add a `--clear-<field>` flag for each nullable field.
    """
    nullable_fields = ENTITY_REGISTRY[entity_type]["model"].get_nullable_fields()
    for field_def in ENTITY_REGISTRY[entity_type]["fields"]:
        name = field_def["name"]
        required = enforce_required and field_def.get("required", False)
        parser.add_argument(
            _option_name(name),
            dest=name,
            type=field_def["type"],
            required=required,
            default=None,
            help=f"The {name.replace('_', ' ')} of the {entity_type}.",
        )
        if clearable and name in nullable_fields:
            parser.add_argument(
                f"--clear-{name.replace('_', '-')}",
                dest=f"clear_{name}",
                action="store_true",
                help=f"Set the {name.replace('_', ' ')} of the {entity_type} to nothing.",
            )


def get_field_values(args: Namespace, entity_type: str) -> Dict[str, Any]:
    """
    Extract the field values given on the command line for a record kind.

    A field is included when its option was given, or when its `--clear-<field>`
    flag was set, in which case its value is `None`.

    Args:
        args: Parsed CLI arguments.
        entity_type: The record kind (book, author, student).

    Returns:
        A dictionary mapping field names to the values to write.

    Raises:
        ValueError: If a field is both given a value and cleared.
    """
    values = {}
    for field_def in ENTITY_REGISTRY[entity_type]["fields"]:
        name = field_def["name"]
        value = getattr(args, name, None)
        cleared = getattr(args, f"clear_{name}", False)
        if value is not None and cleared:
            raise ValueError(f"Cannot both set and clear '{name}'.")
        if cleared:
            values[name] = None
        elif value is not None:
            values[name] = value
    return values


def get_filters_for_entity(args: Namespace, entity_type: str) -> Dict:
    """
    Extracts filter arguments from parsed CLI input for a specific record kind.

    Args:
        args: Parsed CLI arguments.
        entity_type: The record kind (book, author, student).

    Returns:
        A dictionary of the filters that were given.
    """
    filters = {}
    for filt in ENTITY_REGISTRY[entity_type]["filters"]:
        value = getattr(args, filt["name"], None)
        if value is not None:
            filters[filt["name"]] = value
    return filters

