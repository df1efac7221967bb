from abc import abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from personnel.errors import InvalidArgument


class MutableModel(BaseModel):
    """
    Base for the personnel models.

    Fields are re-validated on every assignment; a rejected value raises
    InvalidArgument and leaves the field unchanged.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise InvalidArgument.from_validation_error(e) from e

    def __str__(self) -> str:
        return self.describe()

    @abstractmethod
    def describe(self) -> str: ...
