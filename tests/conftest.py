"""Shared fixtures for personnel tests."""

import pytest
from loguru import logger

from personnel.models import Employee, Manager, Person


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop any sink a test installed so later tests don't write to a closed stream."""
    yield
    logger.remove()


@pytest.fixture
def person() -> Person:
    return Person("Sebas", 35)


@pytest.fixture
def employee() -> Employee:
    return Employee("Jesús", 30, 1200.0, 19.0)


@pytest.fixture
def manager() -> Manager:
    return Manager("Ana", 27, 1600.0, 25.0, bonus=100.0, tax_exempt=False)


@pytest.fixture
def exempt_manager() -> Manager:
    return Manager("Ana", 27, 1600.0, 25.0, bonus=100.0, tax_exempt=True)
