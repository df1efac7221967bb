from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import field_validator

from personnel.models.person import Person
from personnel.payroll import amounts
from personnel.payroll.amounts import DEFAULT_TAX_PERCENTAGE, truncate_to_integer_precision


class Employee(Person):
    """
    A person with a base salary and a tax percentage.

    Both amounts are truncated to integer precision on every assignment
    (constructor, attribute assignment, setters and calculate_salary).
    """

    base_salary: float
    tax_percentage: float = DEFAULT_TAX_PERCENTAGE

    def __init__(
        self,
        name: str,
        age: int,
        base_salary: float,
        tax_percentage: float = DEFAULT_TAX_PERCENTAGE,
        **data: Any,
    ) -> None:
        super().__init__(name, age, base_salary=base_salary, tax_percentage=tax_percentage, **data)

    @field_validator("base_salary")
    @classmethod
    def truncate_base_salary(cls, v: float) -> float:
        return truncate_to_integer_precision(v)

    @field_validator("tax_percentage")
    @classmethod
    def truncate_tax_percentage(cls, v: float) -> float:
        return truncate_to_integer_precision(v)

    def set_base_salary(self, value: float) -> None:
        self.base_salary = value

    def set_tax_percentage(self, value: float) -> None:
        self.tax_percentage = value

    def calculate_salary(self) -> None:
        """Deduct tax from base_salary in place. Each call taxes the current value again."""
        before = self.base_salary
        self.set_base_salary(amounts.apply_tax(self.base_salary, self.tax_percentage))
        logger.debug(
            "Salary updated name={} before={} after={} tax={}",
            self.name,
            before,
            self.base_salary,
            self.tax_percentage,
        )

    def format_amount(self, value: float) -> str:
        return amounts.format_amount(value)

    def describe(self) -> str:
        return f"{super().describe()}, Salario: {self.format_amount(self.base_salary)}"

    def work(self) -> str:
        return f"{self.name} está trabajando en la empresa."
