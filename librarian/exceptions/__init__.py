##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Module of all Librarian-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "RecordNotFoundError",
    "BookNotFoundError",
    "AuthorNotFoundError",
    "StudentNotFoundError",
    "RecordValidationError",
    "RecordInUseError",
    "StoreUnavailableError",
    "UnsupportedDataModelError",
    "EntityManagerNotSupportedError",
    "BackendNotSupportedError",
)


class RecordNotFoundError(Exception):
    """
    Exception to signal that a record with the requested identity
    does not exist in the database.
    """

    def __init__(self, message):
        super().__init__(message)


class BookNotFoundError(RecordNotFoundError):
    """
    Exception to signal that the book you were looking
    for cannot be found in the database.
    """


class AuthorNotFoundError(RecordNotFoundError):
    """
    Exception to signal that the author you were looking
    for cannot be found in the database.
    """


class StudentNotFoundError(RecordNotFoundError):
    """
    Exception to signal that the student you were looking
    for cannot be found in the database.
    """


class RecordValidationError(Exception):
    """
    Exception to signal that a record was rejected before or while
    being written, e.g. an insert carrying an id, a patch without one,
    or a reference to a record that does not exist.
    """

    def __init__(self, message):
        super().__init__(message)


class RecordInUseError(RecordValidationError):
    """
    Exception to signal that a record cannot be deleted because
    other records still reference it.
    """


class StoreUnavailableError(Exception):
    """
    Exception to signal that the backing store could not be opened
    or failed while executing an operation.
    """

    def __init__(self, message):
        super().__init__(message)


class UnsupportedDataModelError(Exception):
    """
    Exception to signal that the data model you're trying to use
    is not supported.
    """

    def __init__(self, message):
        super().__init__(message)


class EntityManagerNotSupportedError(Exception):
    """
    Exception to signal that the provided entity manager is not supported.
    """

    def __init__(self, message):
        super().__init__(message)


class BackendNotSupportedError(Exception):
    """
    Exception to signal that the provided backend is not supported.
    """

    def __init__(self, message):
        super().__init__(message)
