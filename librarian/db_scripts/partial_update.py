##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
Field-by-field merging of a partial record onto a persisted record.

A patch is described by a partial record (a data model instance carrying the id of
the record to change) and, optionally, a field mask naming the fields that are present:

- Without a mask, a field is present when its value is not `None`. This means `None`
  can't be used to clear a field since it's indistinguishable from "not supplied".
- With a mask, exactly the named fields are present whatever their value, so a
  nullable field such as `BookModel.author_id` can be cleared explicitly.

Present fields overwrite the persisted values, absent fields are retained. The identity
field and derived fields are never part of a change set.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from librarian.db_scripts.data_models import BaseDataModel
from librarian.exceptions import RecordValidationError


LOG = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseDataModel)


def get_patchable_fields(model_class: Type[BaseDataModel]) -> List[str]:
    """
    Get the names of the fields that can appear in a change set for a model class.

    Args:
        model_class: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass.

    Returns:
        Every column field except the identity field.
    """
    return [field_obj.name for field_obj in model_class.get_column_fields() if field_obj.name != "id"]


def extract_changes(partial: BaseDataModel, fields: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Build the change set described by a partial record.

    Args:
        partial: The partial record.
        fields: An optional field mask. When given, these fields are treated as present
            regardless of their value; when `None`, fields set to `None` are treated as absent.

    Returns:
        A dictionary mapping the present field names to their new values.

    Raises:
        RecordValidationError: If the mask names a field that can't be patched.
    """
    patchable = get_patchable_fields(type(partial))

    if fields is None:
        return {name: getattr(partial, name) for name in patchable if getattr(partial, name) is not None}

    fields = list(fields)
    unknown = [name for name in fields if name not in patchable]
    if unknown:
        raise RecordValidationError(
            f"Cannot patch field(s) {', '.join(unknown)} of {type(partial).__name__}. "
            f"Patchable fields are: {', '.join(patchable)}."
        )

    return {name: getattr(partial, name) for name in fields}


def merge_partial(persisted: T, partial: BaseDataModel, fields: Optional[Iterable[str]] = None) -> List[str]:
    """
    Merge a partial record onto the persisted record with the same id, in place.

    Args:
        persisted: The record as it currently exists in the store.
        partial: The partial record holding the new values.
        fields: An optional field mask; see [`extract_changes`][db_scripts.partial_update.extract_changes].

    Returns:
        The names of the fields whose value changed.

    Raises:
        RecordValidationError: If the two records aren't of the same type or don't share an id.
    """
    if type(persisted) is not type(partial):  # pylint: disable=unidiomatic-typecheck
        raise RecordValidationError(
            f"Cannot merge a {type(partial).__name__} onto a {type(persisted).__name__}."
        )
    if persisted.id != partial.id:
        raise RecordValidationError(f"Cannot merge record with id '{partial.id}' onto record with id '{persisted.id}'.")

    changes = extract_changes(partial, fields)
    LOG.debug(f"Change set for {type(persisted).__name__} '{persisted.id}': {changes}")
    return persisted.update_fields(changes)


def partial_from_changes(
    model_class: Type[T], identifier: Optional[int], changes: Dict[str, Any]
) -> Tuple[T, List[str]]:
    """
    Build a partial record and its field mask from a dictionary of changes.

    Every key of `changes` is treated as present, so a value of `None` clears the field.

    Args:
        model_class: The [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass to build.
        identifier: The id of the record the changes apply to.
        changes: A dictionary mapping field names to new values.

    Returns:
        A tuple of the partial record and the field mask.

    Raises:
        RecordValidationError: If `changes` names a field that can't be patched.
    """
    patchable = get_patchable_fields(model_class)
    unknown = [name for name in changes if name not in patchable]
    if unknown:
        raise RecordValidationError(
            f"Cannot patch field(s) {', '.join(unknown)} of {model_class.__name__}. "
            f"Patchable fields are: {', '.join(patchable)}."
        )

    partial = model_class(id=identifier, **changes)
    return partial, list(changes)
