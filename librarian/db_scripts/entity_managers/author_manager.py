##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
`AuthorManager` module for managing author records in the library database.

This module defines a manager class responsible for the creation, retrieval,
and deletion of authors. Books reference authors, so deleting an author that
still has books is refused unless the caller asks for the books to go too.
"""

import logging

from librarian.db_scripts.data_models import AuthorModel
from librarian.db_scripts.entity_managers.entity_manager import EntityManager
from librarian.exceptions import RecordInUseError


LOG = logging.getLogger("librarian")

# Each manager takes the delete options that make sense for its kind
# pylint: disable=arguments-differ


class AuthorManager(EntityManager[AuthorModel]):
    """
    Manager class for handling author records.

    Authors read through this manager carry their `books`, ordered by book id.

    Attributes:
        backend (backends.library_backend.LibraryBackend): Backend interface used to persist
            and query author data.
        db (db_scripts.library_db.LibraryDatabase): Reference to the full `LibraryDatabase`,
            used to delete an author's books.

    Methods:
        delete: Delete an author, with optional removal of its books.
    """

    _entity_type = "author"
    _model_class = AuthorModel
    _filter_accessor_map = {
        "name": lambda author: author.name,
    }

    def delete(self, identifier: int, remove_books: bool = False):
        """
        Delete an author and optionally its books.

        Args:
            identifier: The id of the author to delete.
            remove_books: Whether to delete the author's books first. When False,
                an author that still has books can't be deleted.

        Raises:
            AuthorNotFoundError: If no author has this id.
            RecordInUseError: If the author still has books and `remove_books` is False.
        """
        author = self.get(identifier)

        if author.books:
            if not remove_books:
                titles = ", ".join(f"'{book.title}'" for book in author.books)
                raise RecordInUseError(
                    f"Author '{identifier}' still has {len(author.books)} book(s): {titles}. "
                    "Delete the books first or ask for them to be removed with the author."
                )
            for book in author.books:
                self.db.books.delete(book.id)
            LOG.info(f"Removed {len(author.books)} book(s) of author '{identifier}'.")

        super().delete(identifier)
