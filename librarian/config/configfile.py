##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module provides functionality for locating and loading the application
configuration file (`app.yaml`) and filling in default settings.

The result of loading is a [`Config`][config.Config] object that callers pass
explicitly to [`LibraryDatabase`][db_scripts.library_db.LibraryDatabase].
"""
import logging
import os
from typing import Dict, Optional

from librarian.config import Config
from librarian.config.config_filepaths import APP_FILENAME, DEFAULT_DB_FILE, LIBRARIAN_HOME
from librarian.utils import expand_path, load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

DB_ENV_VAR: str = "LIBRARIAN_DB"


def load_config(filepath: str) -> Dict:
    """
    Reads a Librarian YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath (str): The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    return load_yaml(filepath)


def find_config_file(path: str = None) -> str:
    """
    Locate the Librarian application configuration file (`app.yaml`).

    This function searches for the configuration file based on a given directory or,
    if no directory is provided, uses a fallback sequence:
      1. Check for `app.yaml` in the current working directory.
      2. Check for `app.yaml` in the `LIBRARIAN_HOME` directory.

    If a `path` is explicitly provided, the function checks only that directory
    for `app.yaml`.

    Args:
        path (str, optional): A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(LIBRARIAN_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def get_default_config() -> Dict:
    """
    Creates the default configuration used when no `app.yaml` can be found.

    Returns:
        A configuration dictionary with every default value set.
    """
    return {
        "database": {
            "name": "sqlite",
            "path": DEFAULT_DB_FILE,
            "timeout": 5.0,
        },
        "display": {
            "tablefmt": "presto",
        },
    }


def load_defaults(config: Dict):
    """
    Loads default configuration values into the provided configuration dictionary
    for every section and key that the user didn't set.

    Args:
        config (Dict): The configuration dictionary to be updated with default values.
    """
    for section, defaults in get_default_config().items():
        if not isinstance(config.get(section), dict):
            config[section] = {}
        for key, value in defaults.items():
            config[section].setdefault(key, value)


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads a Librarian configuration file and returns a dictionary containing the configuration data.

    This function locates the configuration file using the provided `path` or default search locations,
    loads the configuration data, and applies default values where necessary. If no file can be
    found the default configuration is returned.

    Args:
        path (str, optional): The directory path to search for the configuration file.
            If `None`, default search paths are used.

    Returns:
        A dictionary containing all the configuration data.

    Raises:
        ValueError: If a directory was given explicitly but holds no `app.yaml`.
    """
    filepath: Optional[str] = find_config_file(path)
    if filepath is None:
        if path is not None:
            raise ValueError(f"Cannot find a librarian config file at '{os.path.join(path, APP_FILENAME)}'")
        LOG.debug("No app config file found, using the default configuration.")
        config = get_default_config()
    else:
        config = load_config(filepath) or {}

    load_defaults(config)
    return config


def initialize_config(path: Optional[str] = None, db_path: Optional[str] = None) -> Config:
    """
    Build the [`Config`][config.Config] object for a command.

    The database path is resolved in order of precedence: the `db_path` argument,
    the `LIBRARIAN_DB` environment variable, then the `database.path` setting.

    Args:
        path: The directory holding `app.yaml`, if not using the default search locations.
        db_path: An explicit database file that overrides every other setting.

    Returns:
        The loaded configuration.
    """
    config = get_config(path)

    if db_path is not None:
        config["database"]["path"] = db_path
    elif os.environ.get(DB_ENV_VAR):
        config["database"]["path"] = os.environ[DB_ENV_VAR]

    config["database"]["path"] = expand_path(str(config["database"]["path"]))
    config["database"]["timeout"] = float(config["database"]["timeout"])
    LOG.debug(f"Using database file {config['database']['path']}")

    return Config(config)


def default_config_info() -> Dict:
    """
    Returns information about Librarian's default configurations.

    Returns:
        A dictionary containing the following keys:\n
            - `config_file` (str): Path to the Librarian configuration file.
            - `librarian_home` (str): Path to the Librarian home directory.
            - `librarian_home_exists` (bool): True if the Librarian home directory exists, otherwise False.
    """
    return {
        "config_file": find_config_file(),
        "librarian_home": LIBRARIAN_HOME,
        "librarian_home_exists": os.path.exists(LIBRARIAN_HOME),
    }
