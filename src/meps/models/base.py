"""Shared pydantic base classes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model that reads and writes camelCase keys.

    Python code uses snake_case attributes; persisted and exported JSON keeps
    the camelCase record shape (``genericName``, ``medicalConditions``, ...).
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReferenceModel(CamelModel):
    """Immutable reference-table row."""

    model_config = ConfigDict(frozen=True)
