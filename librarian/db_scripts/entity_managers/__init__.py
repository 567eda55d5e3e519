##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
The `entity_managers` package contains classes responsible for managing the lifecycle
of every record kind in the Librarian system.

Each manager provides the same operations (create, get, exists, get_all, delete, patch,
upsert) for a specific kind of record. The managers act as intermediaries between the
data models and the backend, and may reference each other through the central
`LibraryDatabase` class to perform operations that span kinds.

Modules:
    entity_manager.py: Defines the base class
        [`EntityManager`][db_scripts.entity_managers.entity_manager.EntityManager],
        which implements the shared record lifecycle.
    author_manager.py: Manages authors and the removal of their books on deletion.
    book_manager.py: Manages books.
    student_manager.py: Manages students.
"""
