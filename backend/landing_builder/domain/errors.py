class PublishError(Exception):
    """
    Base class for errors the publish controller turns into
    displayable messages.
    """

    code = "PublishError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidSlug(PublishError):
    code = "InvalidSlug"


class SlugTaken(PublishError):
    code = "SlugTaken"


class PersistenceError(PublishError):
    code = "PersistenceError"


class GenerationFailure(Exception):
    """Upstream copy generation failed or returned unparseable content."""
