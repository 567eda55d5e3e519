##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Module for project-wide utility functions.
"""
import logging
import os
from copy import deepcopy
from types import SimpleNamespace
from typing import Dict

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def expand_path(path: str) -> str:
    """
    Expand environment variables and the user's home directory in a path
    and make it absolute.

    Args:
        path: The path to expand.

    Returns:
        The absolute, expanded path.
    """
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path)))


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    This function recursively transforms a dictionary (which may contain other
    dictionaries) into a structure of SimpleNamespace objects. Each key in the
    dictionary becomes an attribute of a SimpleNamespace, allowing for attribute-style
    access to the data.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    new_dic = deepcopy(dic)
    return recurse(new_dic)


def get_plural_of_entity(entity_type: str, split_delimiter: str = "_", join_delimiter: str = " ") -> str:
    """
    Get the plural form of an entity type, e.g. "book" -> "books".

    Args:
        entity_type: The singular entity type.
        split_delimiter: The delimiter separating the words of `entity_type`.
        join_delimiter: The delimiter used to join the words of the result.

    Returns:
        The plural form of `entity_type`.
    """
    words = entity_type.split(split_delimiter)
    words[-1] = f"{words[-1][:-1]}ies" if words[-1].endswith("y") else f"{words[-1]}s"
    return join_delimiter.join(words)
