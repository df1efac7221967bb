from personnel.models.employee import Employee
from personnel.models.manager import Manager
from personnel.models.person import Person

__all__ = ["Employee", "Manager", "Person"]
