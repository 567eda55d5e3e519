##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
Librarian's configuration.
"""

import os


APP_FILENAME: str = "app.yaml"
USER_HOME: str = os.path.expanduser("~")
LIBRARIAN_HOME: str = os.path.join(USER_HOME, ".librarian")
DEFAULT_DB_FILE: str = os.path.join(LIBRARIAN_HOME, "library.db")
