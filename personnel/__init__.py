from personnel.errors import InvalidArgument
from personnel.models import Employee, Manager, Person

__all__ = ["Employee", "InvalidArgument", "Manager", "Person"]
