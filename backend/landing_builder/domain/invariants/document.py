from collections import Counter
from landing_builder.domain.document import ENUMERATED_STYLES
from .section import assert_section
from .exceptions import InvariantViolation

def assert_document(document):
    """
    Structural checks for a document coming from outside the editor
    (persisted rows, request bodies). Zero sections is valid.
    """
    counts = Counter(document.section_ids)
    duplicates = sorted(section_id for section_id, n in counts.items() if n > 1)

    if duplicates:
        raise InvariantViolation(
            f"Section ids must be unique within a document: {duplicates}"
        )

    for section in document.sections:
        assert_section(section)

    for key, allowed in ENUMERATED_STYLES.items():
        value = document.global_styles.get(key)
        if value is not None and value not in allowed:
            raise InvariantViolation(f"{key} must be one of {', '.join(allowed)}.")
