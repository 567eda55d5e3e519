##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Tests for the `Config` object.
"""

from copy import copy
from types import SimpleNamespace

from librarian.config import Config


def test_sections_become_namespaces():
    """
    Test that each known section is available through attribute access.
    """
    config = Config({"database": {"path": "/tmp/library.db", "timeout": 2.0}, "display": {"tablefmt": "grid"}})

    assert config.database == SimpleNamespace(path="/tmp/library.db", timeout=2.0)
    assert config.display.tablefmt == "grid"


def test_missing_sections_are_none():
    """
    Test that sections that weren't given stay None and unknown sections are ignored.
    """
    config = Config({"celery": {"broker": "redis"}})

    assert config.database is None
    assert config.display is None
    assert not hasattr(config, "celery")


def test_copy_is_independent():
    """
    Test that changing a copy's section doesn't change the original.
    """
    config = Config({"database": {"path": "/tmp/library.db"}, "display": {"tablefmt": "grid"}})

    copied = copy(config)
    copied.database.path = "/tmp/other.db"

    assert config.database.path == "/tmp/library.db"
    assert copied.display == config.display


def test_str():
    """
    Test the printable form of the configuration.
    """
    config = Config({"database": {"path": "/tmp/library.db"}})

    assert str(config) == "config:\n  database:\n    path: '/tmp/library.db'\n  display:\n    None"
