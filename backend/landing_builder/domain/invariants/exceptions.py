class InvariantViolation(Exception):
    """Raised when a landing page document breaks a structural rule."""


class InvalidIndex(InvariantViolation):
    """A move or insert position outside the document's section range."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(
            f"Section index {index} is out of range for {length} section(s)"
        )


class InvalidEmail(InvariantViolation):
    """A waitlist signup address that cannot be an email."""
