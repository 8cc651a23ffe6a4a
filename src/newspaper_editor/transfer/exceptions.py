"""Custom exceptions for the newspaper editor."""


class EditorError(Exception):
    """Base exception for all editor errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ImportFormatError(EditorError):
    """Raised when imported text is not a JSON array of articles."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class UnknownFieldError(EditorError):
    """Raised when an update names a field that articles do not have."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown article field: {field}")
