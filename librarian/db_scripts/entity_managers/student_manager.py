##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
`StudentManager` module for managing student records in the library database.
"""

from librarian.db_scripts.data_models import StudentModel
from librarian.db_scripts.entity_managers.entity_manager import EntityManager


class StudentManager(EntityManager[StudentModel]):
    """Manager class for handling student records."""

    _entity_type = "student"
    _model_class = StudentModel
    _filter_accessor_map = {
        "student_name": lambda student: student.student_name,
    }
