##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Librarian: a console library-catalogue manager.

This module contains the source code for Librarian.
"""

import os


__version__ = "1.0.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")
