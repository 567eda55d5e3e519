##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Used to store the application configuration.

The `config` package provides functionality for loading the `app.yaml` file that
describes where Librarian's database lives and how its output is rendered.

Modules:
    config_filepaths.py: Constants for the configuration file name and default locations.
    configfile.py: Handles locating, loading, and defaulting the application configuration.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from librarian.utils import nested_dict_to_namespaces


# Pylint complains that there's too few methods here but this class might
# be useful if we ever need to do extra stuff with the configuration so we'll
# ignore it for now
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Librarian config settings in one place.
    An instance is built once per command and handed explicitly to the database
    layer so that nothing reads connection settings from global state.

    Attributes:
        database (Optional[SimpleNamespace]): A namespace containing database settings
            (`name`, `path`, `timeout`).
        display (Optional[SimpleNamespace]): A namespace containing output settings (`tablefmt`).

    Methods:
        __copy__: Creates a shallow copy of the Config instance.
        __str__: Returns a formatted string representation of the Config instance.
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    SECTIONS: List[str] = ["database", "display"]

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
                The dictionary may include the keys "database" and "display", each of
                which is converted into a `SimpleNamespace` and assigned to the corresponding
                attribute of the Config instance.
        """
        self.database: Optional[SimpleNamespace] = None
        self.display: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        """
        Creates a shallow copy of the Config instance.

        Returns:
            A new Config instance with copied `database` and `display` attributes.
        """
        cls = self.__class__
        result = cls.__new__(cls)
        result.__dict__.update({section: copy(self.__dict__[section]) for section in self.SECTIONS})
        return result

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance.

        Returns:
            A string containing the values of every configuration section.
        """
        formatted_str = "config:"
        for name in self.SECTIONS:
            attr = getattr(self, name)
            if attr is not None:
                items = (f"    {k}: {v!r}" for k, v in attr.__dict__.items())
                joined_items = "\n".join(items)
                formatted_str += f"\n  {name}:\n{joined_items}"
            else:
                formatted_str += f"\n  {name}:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for section in self.SECTIONS:
            try:
                setattr(self, section, nested_dict_to_namespaces(app_dict[section]))
            except KeyError:
                # The sections are optional
                pass
