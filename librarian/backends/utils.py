##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Utility functions for backends in the Librarian application.

These utilities convert in-memory data models into the column values a backend stores,
convert stored rows back into data models, and pick the right error class when a
record lookup fails.
"""

import logging
from typing import Any, Dict, Type, TypeVar

from librarian.db_scripts.data_models import AuthorModel, BaseDataModel, BookModel, StudentModel
from librarian.exceptions import AuthorNotFoundError, BookNotFoundError, RecordNotFoundError, StudentNotFoundError


T = TypeVar("T", bound=BaseDataModel)

LOG = logging.getLogger(__name__)


def get_not_found_error_class(model_class: Type[T]) -> Type[RecordNotFoundError]:
    """
    Get the appropriate not found error class based on the model type.

    Args:
        model_class: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass.

    Returns:
        The error class to use.
    """
    error_map = {
        BookModel: BookNotFoundError,
        AuthorModel: AuthorNotFoundError,
        StudentModel: StudentNotFoundError,
    }
    return error_map.get(model_class, RecordNotFoundError)


def serialize_entity(entity: T, include_id: bool = True) -> Dict[str, Any]:
    """
    Given a [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance,
    extract the values of the fields that are stored as columns.

    Args:
        entity: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance.
        include_id: Whether to include the identity column.

    Returns:
        A dictionary mapping column names to values.
    """
    LOG.debug(f"Serializing {type(entity).__name__} data...")
    return {
        field_obj.name: getattr(entity, field_obj.name)
        for field_obj in entity.get_column_fields()
        if include_id or field_obj.name != "id"
    }


def deserialize_entity(data: Dict[str, Any], model_class: Type[T]) -> T:
    """
    Given a row that was retrieved, convert it into a data_class instance.

    Args:
        data: The row retrieved, as a dictionary of column names to values.
        model_class: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass.

    Returns:
        A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance.
    """
    LOG.debug(f"Deserializing {model_class.__name__} data...")
    return model_class.from_dict(data)
