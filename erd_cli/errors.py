"""Error types for erd-cli."""

from typing import Optional, Dict, Any


class ErdError(Exception):
    """Base exception for erd-cli errors."""

    def __init__(self, message: str, code: str = "ERD_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class MissingFieldError(ErdError):
    """A catalog row lacked a field expected by the schema model."""

    def __init__(self, field_name: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"could not find field {field_name}",
            code="MISSING_FIELD",
            details=details or {"field": field_name},
        )
        self.field_name = field_name


class RenderError(ErdError):
    """The output sink rejected a write while drawing a diagram."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="RENDER_ERROR", details=details)


class DatabaseConnectionError(ErdError):
    """Error establishing the database session."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class ConfigurationError(ErdError):
    """Invalid settings or options template."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class UnknownFormatError(ErdError):
    """No drawer is registered under the requested format name."""

    def __init__(self, name: str, available: Optional[list] = None):
        super().__init__(
            f"Unknown diagram format: {name}",
            code="UNKNOWN_FORMAT",
            details={"format": name, "available": available or []},
        )
