##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Librarian
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Librarian.
##############################################################################

"""
This module houses dataclasses that define the format of the data
that's stored in Librarian's database.

Every model carries an integer `id` that is assigned by the store on insert.
Fields flagged with `derived` metadata are computed when a record is read and
never become table columns; fields flagged with `references` metadata become
foreign keys.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import Field, asdict, dataclass, field
from dataclasses import fields as dataclass_fields
from typing import Dict, List, Optional, Tuple, Type, TypeVar


LOG = logging.getLogger("librarian")
T = TypeVar("T", bound="BaseDataModel")


@dataclass
class BaseDataModel(ABC):
    """
    A base class for dataclasses that provides common serialization, deserialization, and
    update functionality.

    This class is designed to be extended by other dataclasses and includes methods for
    converting instances to and from dictionaries or JSON, inspecting fields, and updating
    field values with validation.

    Attributes:
        id: The store-assigned identity of the record. `None` until the record is inserted.
        fields_allowed_to_be_updated: A list of field names that are allowed to be updated.
            Must be defined in subclasses.

    Methods:
        to_dict:
            Convert the dataclass instance to a dictionary.

        to_json:
            Serialize the dataclass instance to a JSON string.

        from_dict (classmethod):
            Create an instance of the dataclass from a dictionary.

        from_json (classmethod):
            Create an instance of the dataclass from a JSON string.

        get_instance_fields:
            Retrieve the fields associated with this dataclass instance.

        get_class_fields (classmethod):
            Retrieve the fields associated with the dataclass class itself.

        get_column_fields (classmethod):
            Retrieve the fields that are persisted as table columns.

        update_fields:
            Update the fields of the dataclass based on a given dictionary of updates.
    """

    id: Optional[int] = None  # pylint: disable=invalid-name

    def to_dict(self) -> Dict:
        """
        Convert the dataclass to a dictionary.

        Returns:
            The dataclass as a dictionary.
        """
        return asdict(self)

    def to_json(self) -> str:
        """
        Serialize the dataclass to a JSON string.

        Returns:
            The dataclass as a JSON string.
        """
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create an instance of the dataclass from a dictionary.

        Keys that don't correspond to a field of the dataclass are dropped.

        Args:
            data: A dictionary to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        field_names = {field_obj.name for field_obj in cls.get_class_fields()}
        return cls(**{key: val for key, val in data.items() if key in field_names})

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create an instance of the dataclass from a JSON string.

        Args:
            json_str: A JSON string to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        data = json.loads(json_str)
        return cls.from_dict(data)

    def get_instance_fields(self) -> Tuple[Field]:
        """
        Get the fields associated with this instance. Added this method so that the dataclass.fields
        doesn't have to be imported each time you want this info.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(self)

    @classmethod
    def get_class_fields(cls) -> Tuple[Field]:
        """
        Get the fields associated with this object. Added this method so that the dataclass.fields
        doesn't have to be imported each time you want this info.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(cls)

    @classmethod
    def get_column_fields(cls) -> Tuple[Field]:
        """
        Get the fields of this object that are stored as table columns, i.e. every
        field that isn't flagged as `derived`.

        Returns:
            A tuple of dataclass.Field objects, identity field first.
        """
        return tuple(field_obj for field_obj in cls.get_class_fields() if not field_obj.metadata.get("derived", False))

    @classmethod
    def get_nullable_fields(cls) -> List[str]:
        """
        Get the names of the column fields that may be explicitly cleared to `None`.

        Returns:
            A list of field names.
        """
        return [field_obj.name for field_obj in cls.get_column_fields() if field_obj.metadata.get("nullable", False)]

    @property
    @abstractmethod
    def fields_allowed_to_be_updated(self) -> List[str]:
        """
        A property to be overridden in subclasses to define which fields are allowed to be updated.

        Returns:
            A list of fields that are allowed to be updated in this class.
        """

    def update_fields(self, updates: Dict) -> List[str]:
        """
        Given a dictionary of updates to be made to this data class, loop through the updates
        applying them when valid.

        Args:
            updates: A dictionary of updates to be made to this data class.

        Returns:
            The names of the fields whose value actually changed.
        """
        changed = []
        for field_name, new_value in updates.items():
            if field_name == "id":
                continue

            if not hasattr(self, field_name):
                LOG.warning(f"Field '{field_name}' does not exist on {type(self).__name__}. Ignoring the change.")
                continue

            if getattr(self, field_name) == new_value:  # Not an update so skip
                continue

            if field_name in self.fields_allowed_to_be_updated:
                setattr(self, field_name, new_value)
                changed.append(field_name)
            else:
                LOG.warning(f"Field '{field_name}' is not allowed to be updated. Ignoring the change.")

        return changed


@dataclass
class BookModel(BaseDataModel):
    """
    A dataclass to store all of the information for a book.

    Attributes:
        id (int): The unique ID for the book.
        title (str): The title of the book.
        author_id (int): The ID of the author who wrote this book. Corresponds with an
            [`AuthorModel`][db_scripts.data_models.AuthorModel] entry. `None` means the
            book has no author yet.
    """

    title: str = None
    author_id: Optional[int] = field(default=None, metadata={"references": "author(id)", "nullable": True})

    @property
    def fields_allowed_to_be_updated(self) -> List[str]:
        """
        Define the fields that are allowed to be updated for a `BookModel` object.

        Returns:
            A list of fields that are allowed to be updated in this class.
        """
        return ["title", "author_id"]


@dataclass
class AuthorModel(BaseDataModel):
    """
    A dataclass to store all of the information for an author.

    Attributes:
        id (int): The unique ID for the author.
        name (str): The name of the author.
        books (List[BookModel]): The books whose `author_id` matches this author. This
            is read-only and populated by the store when the author is retrieved.
    """

    name: str = None
    books: List[BookModel] = field(default_factory=list, metadata={"derived": True})

    @classmethod
    def from_dict(cls, data: Dict) -> "AuthorModel":
        """
        Create an `AuthorModel` from a dictionary, converting nested book dictionaries
        into [`BookModel`][db_scripts.data_models.BookModel] instances.

        Args:
            data: A dictionary to turn into an `AuthorModel`.

        Returns:
            An `AuthorModel` instance.
        """
        author = super().from_dict(data)
        author.books = [book if isinstance(book, BookModel) else BookModel.from_dict(book) for book in author.books]
        return author

    @property
    def fields_allowed_to_be_updated(self) -> List[str]:
        """
        Define the fields that are allowed to be updated for an `AuthorModel` object.

        Returns:
            A list of fields that are allowed to be updated in this class.
        """
        return ["name"]


@dataclass
class StudentModel(BaseDataModel):
    """
    A dataclass to store all of the information for a student.

    Attributes:
        id (int): The unique ID for the student.
        student_name (str): The name of the student.
    """

    student_name: str = None

    @property
    def fields_allowed_to_be_updated(self) -> List[str]:
        """
        Define the fields that are allowed to be updated for a `StudentModel` object.

        Returns:
            A list of fields that are allowed to be updated in this class.
        """
        return ["student_name"]
