from landing_builder.domain.sections import is_known_type
from .exceptions import InvariantViolation

def assert_section(section):
    if not section.id:
        raise InvariantViolation("Section must have an id.")

    if not is_known_type(section.type):
        raise InvariantViolation(f"Unknown section type: {section.type}")

    if not isinstance(section.fields, dict):
        raise InvariantViolation(f"Section {section.id} content must be an object.")
