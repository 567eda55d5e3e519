##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
The `cli` package contains the command-line interface for Librarian.

Subpackages:
    commands: One module per top-level command.

Modules:
    argparse_main.py: Builds the main argument parser from every registered command.
    utils.py: Helpers for turning registry metadata into arguments and back.
"""
