##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Backend infrastructure for the Librarian application.

The `backends` package provides a unified interface and implementations for persisting
and retrieving the catalogue's records (books, authors, and students). It defines an
abstract backend interface (`LibraryBackend`) along with a concrete implementation using
SQLite, as well as utility functions, store abstractions, and a backend factory.

Subpackages:
    sqlite: SQLite-based backend implementation, with persistent local storage of Librarian data models.

Modules:
    backend_factory: Contains `LibraryBackendFactory`, used to select and instantiate a backend.
    library_backend: Defines the abstract `LibraryBackend` base class for backend implementations.
    store_base: Provides the abstract `StoreBase` class, the foundation for all store implementations.
    utils: Utility functions for serialization, deserialization, and error handling across backends.
"""
