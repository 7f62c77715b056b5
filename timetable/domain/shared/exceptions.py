"""
Domain Exceptions

Defines the error taxonomy for the timetable with discriminated error types.
Store errors describe backend failures, validation errors describe rejected
entries, and configuration errors describe an unusable startup environment.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    UNAVAILABLE = "unavailable"
    READ = "read"
    WRITE = "write"
    VALIDATION_REJECTED = "validation_rejected"
    CONFIG_MISSING = "config_missing"


class TimetableError(Exception):
    """Base class for all timetable errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for reporting."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


# Store errors
class StoreError(TimetableError):
    """Base class for failures talking to the durable backend."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        operation: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        store_details = details or {}
        store_details["operation"] = operation
        super().__init__(message, error_type, store_details)
        self.operation = operation


class StoreUnavailableError(StoreError):
    """Raised when a connection to the backend cannot be established."""

    def __init__(
        self, operation: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(
            f"Backend unavailable during {operation}",
            ErrorType.UNAVAILABLE,
            operation,
            details,
        )


class StoreReadError(StoreError):
    """Raised when the select fails or a row cannot be decoded."""

    def __init__(
        self,
        operation: str,
        reason: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(
            f"Read failed during {operation}: {reason}",
            ErrorType.READ,
            operation,
            details,
        )


class StoreWriteError(StoreError):
    """Raised when an insert or delete fails after connecting."""

    def __init__(
        self,
        operation: str,
        reason: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(
            f"Write failed during {operation}: {reason}",
            ErrorType.WRITE,
            operation,
            details,
        )


class EntryValidationError(TimetableError):
    """Raised when a candidate entry is missing required fields."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(
            f"{', '.join(missing_fields)} required",
            ErrorType.VALIDATION_REJECTED,
            {"missing_fields": ",".join(missing_fields)},
        )


class ConfigMissingError(TimetableError):
    """Raised when a required setting is absent at startup."""

    def __init__(self, setting_name: str) -> None:
        self.setting_name = setting_name
        super().__init__(
            f"{setting_name} must be set in the .env file or environment",
            ErrorType.CONFIG_MISSING,
            {"setting": setting_name},
        )
