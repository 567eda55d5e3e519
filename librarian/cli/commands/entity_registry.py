##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Defines the entity registry used for dynamic CLI command generation.

This registry maps record kinds (book, author, student) to their data model and the
CLI argument metadata for their fields and supported filters. It is used by
[`EntityCommand`][cli.commands.entity.EntityCommand] to construct argument parsers
and handle kind-specific logic in a generic way.

Each entry in the registry includes:
- `model`: The data model class for the kind.
- `fields`: The writable fields, each with a name, a type, and optionally `required`
  (must be given to `add`). Fields the model marks nullable can be cleared with
  `--clear-<field>`.
- `filters`: The supported `list` filters, each with a name and a type.
- `ident_help`: The help string template for identifier arguments, parameterized with `{verb}`.
"""

from librarian.db_scripts.data_models import AuthorModel, BookModel, StudentModel


ENTITY_REGISTRY = {
    "author": {
        "model": AuthorModel,
        "fields": [
            {"name": "name", "type": str, "required": True},
        ],
        "filters": [
            {"name": "name", "type": str},
        ],
        "ident_help": "IDs of the authors to {verb}.",
    },
    "book": {
        "model": BookModel,
        "fields": [
            {"name": "title", "type": str, "required": True},
            {"name": "author_id", "type": int},
        ],
        "filters": [
            {"name": "title", "type": str},
            {"name": "author_id", "type": int},
        ],
        "ident_help": "IDs of the books to {verb}.",
    },
    "student": {
        "model": StudentModel,
        "fields": [
            {"name": "student_name", "type": str, "required": True},
        ],
        "filters": [
            {"name": "student_name", "type": str},
        ],
        "ident_help": "IDs of the students to {verb}.",
    },
}
