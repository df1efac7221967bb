from __future__ import annotations

from loguru import logger

from personnel.log import configure_logging
from personnel.models import Employee, Manager, Person


def main() -> None:
    configure_logging()

    person = Person("Sebas", 35)
    employee = Employee("Jesús", 30, 1200.0, 19.0)
    manager = Manager("Ana", 27, 1600.0, 25.0, bonus=100.0, tax_exempt=False)

    # Person: description and birthday
    print(person)
    print(person.celebrate_birthday())

    # Employee: salary before and after tax
    print(employee)
    employee.calculate_salary()
    print(employee)

    # Manager: overridden salary calculation
    manager.calculate_salary()
    print(manager)

    logger.debug("Demo finished")


if __name__ == "__main__":
    main()
