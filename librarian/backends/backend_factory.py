##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Backend factory for selecting and instantiating library backends in Librarian.

This module defines the `LibraryBackendFactory` class, which serves as an abstraction
layer for managing available backend implementations. It supports selection and
instantiation of backends such as SQLite based on the `database.name` setting of the
configuration.

The factory maintains mappings of backend names and aliases, and raises a clear error
if an unsupported backend is requested.
"""

import logging
from types import SimpleNamespace
from typing import Dict, List, Type

from librarian.backends.library_backend import LibraryBackend
from librarian.backends.sqlite.sqlite_backend import SQLiteBackend
from librarian.exceptions import BackendNotSupportedError


LOG = logging.getLogger(__name__)


class LibraryBackendFactory:
    """
    Factory class for managing and instantiating supported Librarian backends.

    Attributes:
        _registry (Dict[str, Type[LibraryBackend]]): Maps canonical backend names to backend classes.
        _aliases (Dict[str, str]): Maps alternate names to canonical backend names.

    Methods:
        register: Register a new backend class and optional aliases.
        list_available: Return a list of supported backend names.
        create: Instantiate a backend class by name or alias.
    """

    def __init__(self):
        """Initialize the factory and register the built-in backends."""
        self._registry: Dict[str, Type[LibraryBackend]] = {}
        self._aliases: Dict[str, str] = {}
        self._register_builtins()

    def _register_builtins(self):
        """
        Register built-in backend implementations.
        """
        self.register("sqlite", SQLiteBackend, aliases=["sqlite3"])

    def register(self, name: str, backend_class: Type[LibraryBackend], aliases: List[str] = None):
        """
        Register a new backend implementation.

        Args:
            name: Canonical name for the backend.
            backend_class: The class to register.
            aliases: Optional alternative names for this backend.

        Raises:
            TypeError: If `backend_class` does not subclass `LibraryBackend`.
        """
        if not issubclass(backend_class, LibraryBackend):
            raise TypeError(f"{backend_class} must inherit from LibraryBackend")

        self._registry[name] = backend_class
        LOG.debug(f"Registered backend: {name}")

        for alias in aliases or []:
            self._aliases[alias] = name
            LOG.debug(f"Registered alias '{alias}' for backend '{name}'")

    def list_available(self) -> List[str]:
        """
        Return a list of supported backend names.

        Returns:
            A list of canonical names for all registered backends.
        """
        return list(self._registry.keys())

    def create(self, backend_type: str, db_config: SimpleNamespace) -> LibraryBackend:
        """
        Instantiate and return a backend of the specified type.

        Args:
            backend_type: The name or alias of the backend to create.
            db_config: The `database` section of the configuration.

        Returns:
            An instance of the requested backend.

        Raises:
            BackendNotSupportedError: If the backend is not registered.
        """
        canonical_name = self._aliases.get(backend_type, backend_type)
        backend_class = self._registry.get(canonical_name)
        if backend_class is None:
            available = ", ".join(self.list_available())
            raise BackendNotSupportedError(
                f"Backend '{backend_type}' is not supported. Available backends: {available}"
            )

        LOG.debug(f"Creating backend '{canonical_name}'")
        return backend_class(db_config)


backend_factory = LibraryBackendFactory()
