"""User domain exceptions.

Raised by the user service and translated into responses by the HTTP layer.
"""


class UserServiceError(Exception):
    """Base class for user service outcomes that are not a success."""


class ValidationFailed(UserServiceError):
    """A required field was empty or missing on registration."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Required field is empty: {field}")


class DuplicateEmail(UserServiceError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class NotFound(UserServiceError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")
