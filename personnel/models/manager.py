from __future__ import annotations

from typing import Any

from loguru import logger
from pydantic import Field

from personnel.models.employee import Employee
from personnel.payroll.amounts import MANAGER_TAX_PERCENTAGE


class Manager(Employee):
    """
    An employee with a bonus and a tax exemption flag.

    The constructor validates the tax percentage it is given like any
    employee's, then replaces it with MANAGER_TAX_PERCENTAGE. Later
    assignments follow the employee truncation rule.
    """

    bonus: float = Field(frozen=True)
    tax_exempt: bool = Field(default=False, frozen=True)

    def __init__(
        self,
        name: str,
        age: int,
        base_salary: float,
        tax_percentage: float,
        bonus: float,
        tax_exempt: bool,
        **data: Any,
    ) -> None:
        super().__init__(name, age, base_salary, tax_percentage, bonus=bonus, tax_exempt=tax_exempt, **data)
        logger.debug("Manager tax percentage {} replaced by {}", self.tax_percentage, MANAGER_TAX_PERCENTAGE)
        # bypasses validation: the constant keeps its decimals
        object.__setattr__(self, "tax_percentage", MANAGER_TAX_PERCENTAGE)

    def calculate_salary(self) -> None:
        if self.tax_exempt:
            self.set_base_salary(self.base_salary + self.bonus)
        else:
            super().calculate_salary()
        # applied on both branches: exempt managers end up with the bonus twice
        self.set_base_salary(self.base_salary + self.bonus)

    def describe(self) -> str:
        return f"{super().describe()}, Gerente"

    def work(self) -> str:
        return f"{self.name} está administrando la empresa."
