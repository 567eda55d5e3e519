##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
SQLite-based backend infrastructure for the Librarian application.

This package provides all components necessary to persist and manage the catalogue's
records using SQLite as the storage backend. It includes a generic store base,
specialized store classes for each record kind, connection handling logic, and a
complete backend implementation conforming to Librarian's backend interface.

Modules:
    sqlite_backend: Implements the `LibraryBackend` interface using SQLite.
    sqlite_connection: Provides a context-managed SQLite connection with safe configuration.
    sqlite_store_base: Defines a generic base class for entity stores.
    sqlite_stores: Contains concrete SQLite store classes for Librarian models.
"""
