"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError, ValueError):
    """Raised when a user field has an invalid shape."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field} {message}")


class DuplicateEmail(DomainError, ValueError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User with this email already exists")


class InvalidCredentials(DomainError, ValueError):
    """Raised when an email/password pair does not authenticate."""

    def __init__(self):
        super().__init__("Invalid email or password")


class InvalidSession(DomainError):
    """Missing, unknown or expired session secret."""

    pass


class InvalidContact(DomainError):
    """Contact email does not resolve to a user."""

    pass


class HashingFailure(DomainError, RuntimeError):
    """Raised when the password hashing primitive fails."""

    pass


class DatabaseError(DomainError, RuntimeError):
    """Raised when the persistent store fails."""

    pass
