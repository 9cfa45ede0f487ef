import pytest

import inflector as inflector_module
from inflector import Inflector


@pytest.fixture
def inflector():
    """A fresh inflector with the bundled rule tables."""
    return Inflector()


@pytest.fixture
def french(inflector):
    inflector.set_language("fr")
    return inflector


@pytest.fixture
def default_inflector():
    """The process-wide inflector, restored after the test."""
    yield inflector_module
    inflector_module.reset()
