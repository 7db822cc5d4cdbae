import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import simple_record
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from simple_record import Record, derived  # noqa: E402


class Person(Record):
    """Variant used across the suite."""

    @derived("fullName")
    def full_name(self):
        """Derived data method."""
        return self.get("firstName") + " " + self.get("lastName")

    def some_method(self):
        """Regular method, not a field."""
        return "foo"


# Common test fixtures
@pytest.fixture
def person_cls():
    """Return the Person record type."""
    return Person


@pytest.fixture
def bob_data():
    """Return the raw payload for Bob."""
    return {
        "firstName": "Bob",
        "lastName": "Smith",
        "age": 32,
        "married": False,
        "kids": [],
        "house": None,
    }


@pytest.fixture
def bob(bob_data):
    """Create Bob as a Person record."""
    return Person(bob_data)
