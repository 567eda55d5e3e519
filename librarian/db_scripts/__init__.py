##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
The `db_scripts` package contains everything above the storage backends: the data
models for the catalogue's records, the partial-update engine, the per-kind entity
managers, and the `LibraryDatabase` facade that ties them together.

Subpackages:
    entity_managers: One manager per record kind, implementing the record lifecycle.

Modules:
    data_models.py: Dataclasses for books, authors, and students.
    library_db.py: Defines `LibraryDatabase`, the single entry point to the catalogue.
    partial_update.py: Builds change sets and merges partial records onto persisted ones.
"""
