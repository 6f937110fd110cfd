"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Exception raised when caller input breaks a field or business rule.

    The message is meant to be shown to the user as is.
    """

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"


class DuplicateEntryError(DatabaseError):
    """Exception raised when an insert or update violates a unique key.

    Services re-raise it with an entity specific message that is shown verbatim.
    """

    def __init__(self, message: str = "Entry already exists", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = message


class ForeignKeyViolationError(DatabaseError):
    """Exception raised when a referential constraint blocks a write or a delete."""

    def __init__(
        self, message: str = "Operation blocked by a referential constraint", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message, original_exception)


class RowMappingError(DatabaseError):
    """Exception raised when a result row cannot be mapped to an entity."""

    def __init__(self, message: str = "Could not map database row", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
