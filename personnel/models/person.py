from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import Field, ValidationError, field_validator

from personnel.errors import InvalidArgument
from personnel.models.base import MutableModel


class Person(MutableModel):
    """
    A person with a name and an age.

    Construction and assignment raise InvalidArgument when the age is
    negative or the name is empty/blank. The age must be a real int.
    """

    name: str
    age: int = Field(strict=True)

    def __init__(self, name: str, age: int, **data: Any) -> None:
        try:
            super().__init__(name=name, age=age, **data)
        except ValidationError as e:
            raise InvalidArgument.from_validation_error(e) from e
        logger.debug("Created {} name={} age={}", type(self).__name__, self.name, self.age)

    @field_validator("age")
    @classmethod
    def age_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("La edad no puede ser negativa")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El nombre no puede estar vacío")
        return v

    def describe(self) -> str:
        return f"Nombre: {self.name}, Edad: {self.age}"

    def celebrate_birthday(self) -> str:
        self.age += 1
        return f"Feliz cumpleaños {self.name}!, Ahora tienes {self.age} años."
