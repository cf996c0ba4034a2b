"""
Contact Form Errors

Raised by validation and storage; the submission view turns them into
HTML responses.
"""


class ContactError(Exception):
    """Base class for contact form failures."""
    pass


class ValidationError(ContactError):
    """Raised when a form field is absent, blank or otherwise invalid."""

    def __init__(self, fields):
        self.fields = fields
        super().__init__(f"Invalid fields: {', '.join(sorted(fields))}")


class StorageError(ContactError):
    """Raised when a message cannot be written to the data store."""
    pass
