##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Manages formatting for displaying information to the console.
"""
import logging
from typing import Dict, List, Sequence

from tabulate import tabulate

from librarian.config import Config
from librarian.db_scripts.data_models import AuthorModel, BaseDataModel
from librarian.utils import get_plural_of_entity


LOG = logging.getLogger("librarian")

DEFAULT_TABLEFMT = "presto"


def get_tablefmt(config: Config) -> str:
    """
    Get the table format to use for output.

    Args:
        config: The loaded configuration.

    Returns:
        The `tabulate` table format from the `display` section, or the default.
    """
    display = getattr(config, "display", None)
    return getattr(display, "tablefmt", DEFAULT_TABLEFMT) or DEFAULT_TABLEFMT


def _record_row(record: BaseDataModel) -> Dict:
    """
    Build the table row for a record: its columns, plus book titles for an author.

    Args:
        record: The record to convert.

    Returns:
        A dictionary mapping column headers to cell values.
    """
    row = {field_obj.name: getattr(record, field_obj.name) for field_obj in record.get_column_fields()}
    if isinstance(record, AuthorModel):
        row["books"] = ", ".join(book.title or "" for book in record.books)
    return row


def format_records(records: Sequence[BaseDataModel], tablefmt: str = DEFAULT_TABLEFMT) -> str:
    """
    Render records of one kind as a table.

    Args:
        records: The records to render. They must all be of the same kind.
        tablefmt: The `tabulate` table format.

    Returns:
        The rendered table, or an empty string when there are no records.
    """
    if not records:
        return ""
    rows: List[Dict] = [_record_row(record) for record in records]
    return tabulate(rows, headers="keys", tablefmt=tablefmt, missingval="-")


def display_records(records: Sequence[BaseDataModel], entity_type: str, tablefmt: str = DEFAULT_TABLEFMT):
    """
    Print records of one kind as a table.

    Args:
        records: The records to print.
        entity_type: The kind of record (book, author, student), used when there are none.
        tablefmt: The `tabulate` table format.
    """
    if not records:
        print(f"No {get_plural_of_entity(entity_type)} found.")
        return
    print(format_records(records, tablefmt=tablefmt))


def display_config_info(library_db: "LibraryDatabase", config: Config):  # noqa: F821
    """
    Prints useful configuration information for the Librarian application to the console.

    Args:
        library_db (db_scripts.library_db.LibraryDatabase): The open library database.
        config: The configuration the database was opened with.
    """
    from librarian.config.configfile import default_config_info  # pylint: disable=C0415

    print("Librarian Configuration")
    print("-" * 25)
    print("")

    conf = default_config_info()
    conf["backend"] = library_db.get_db_type()
    conf["database file"] = library_db.get_connection_string()
    conf["timeout (s)"] = config.database.timeout
    conf[f"{library_db.get_db_type()} version"] = library_db.get_db_version()
    for entity_type, count in library_db.count().items():
        conf[get_plural_of_entity(entity_type)] = count

    print(tabulate(conf.items(), tablefmt=get_tablefmt(config)))
