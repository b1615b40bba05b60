"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MissingFieldError(DomainException):
    """A required field is absent or empty in the inbound request body"""

    def __init__(self, field: str):
        super().__init__(f"{field} is required")
        self.field = field
