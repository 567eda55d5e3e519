##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
It's hard to type hint pytest fixtures in a way that makes it clear
that the variable being used is a fixture. This module will create
aliases for these fixtures in order to make it easier to track what's
happening.

The types here will be defined as such:
- `FixtureCallable`: A fixture that returns a function
- `FixtureDict`: A fixture that returns a dictionary
- `FixtureInt`: A fixture that returns an integer
- `FixtureList`: A fixture that returns a list
- `FixtureModification`: A fixture that modifies something but never actually
                         returns/yields a value to be used in the test.
- `FixtureNamespace`: A fixture that returns an argparse Namespace
- `FixtureStr`: A fixture that returns a string
- `FixtureTuple`: A fixture that returns a tuple
"""

from argparse import Namespace
from collections.abc import Callable
from typing import Annotated, Any, Dict, List, Tuple, TypeVar

import pytest


K = TypeVar("K")
V = TypeVar("V")

FixtureCallable = Annotated[Callable, pytest.fixture]
FixtureDict = Annotated[Dict[K, V], pytest.fixture]
FixtureInt = Annotated[int, pytest.fixture]
FixtureList = Annotated[List[K], pytest.fixture]
FixtureModification = Annotated[Any, pytest.fixture]
FixtureNamespace = Annotated[Namespace, pytest.fixture]
FixtureStr = Annotated[str, pytest.fixture]
FixtureTuple = Annotated[Tuple[K, V], pytest.fixture]
