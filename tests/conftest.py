##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob

import pytest

from tests.fixture_types import FixtureStr


# pylint: disable=redefined-outer-name


#######################################
# Loading in Module Specific Fixtures #
#######################################

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
fixture_glob = os.path.join(TESTS_DIR, "fixtures", "**", "*.py")
pytest_plugins = [
    os.path.relpath(fixture_file, os.path.dirname(TESTS_DIR)).replace(os.sep, ".")[: -len(".py")]
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """
    Keep every test away from the real user configuration and database.

    The `LIBRARIAN_DB` environment variable is removed, the current directory is moved
    to an empty temporary directory, and `LIBRARIAN_HOME` is pointed at a temporary
    directory so no `app.yaml` from the user's machine can be picked up.

    Args:
        monkeypatch: Built-in fixture for patching the environment.
        tmp_path_factory: Built-in fixture for creating temporary directories.
    """
    monkeypatch.delenv("LIBRARIAN_DB", raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    monkeypatch.setattr(
        "librarian.config.configfile.LIBRARIAN_HOME", str(tmp_path_factory.mktemp("librarian_home"))
    )


@pytest.fixture
def db_file(tmp_path) -> FixtureStr:
    """
    The path to a database file that doesn't exist yet.

    Args:
        tmp_path: Built-in fixture giving a per-test temporary directory.

    Returns:
        A path inside a per-test temporary directory.
    """
    return os.path.join(str(tmp_path), "data", "library.db")
