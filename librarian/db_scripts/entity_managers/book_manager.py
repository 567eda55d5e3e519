##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
`BookManager` module for managing book records in the library database.
"""

from librarian.db_scripts.data_models import BookModel
from librarian.db_scripts.entity_managers.entity_manager import EntityManager


class BookManager(EntityManager[BookModel]):
    """
    Manager class for handling book records.

    Books can be filtered by `title` or `author_id` in
    [`get_all`][db_scripts.entity_managers.entity_manager.EntityManager.get_all].
    """

    _entity_type = "book"
    _model_class = BookModel
    _filter_accessor_map = {
        "title": lambda book: book.title,
        "author_id": lambda book: book.author_id,
    }
