"""
patchdiff Exception Hierarchy

Centralized exception classes for the patchdiff project.
Provides specific exception types for different error categories.
"""
from enum import Enum
from typing import Optional, Any


class PatchDiffError(Exception):
    """
    Base exception for all patchdiff errors.

    All custom exceptions in patchdiff should inherit from this class
    to enable consistent error handling across the application.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize PatchDiffError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class MergeErrorKind(Enum):
    """Why two changes could not be combined."""

    VARIANT_MISMATCH = "variant_mismatch"
    UNCOMBINABLE = "uncombinable"
    PROPERTY_MISMATCH = "property_mismatch"


class MergeError(PatchDiffError):
    """
    Change merge errors.

    Raised when two changes cannot be folded into one net change. The merge
    engine treats every kind as the start of a new run; a PROPERTY_MISMATCH
    seen anywhere else means records were grouped out of order.
    """

    def __init__(
        self,
        message: str,
        kind: MergeErrorKind,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize MergeError.

        Args:
            message: Human-readable error message
            kind: The reason the merge failed
            details: Optional dictionary with additional error context
        """
        super().__init__(message, details)
        self.kind = kind

    def __str__(self) -> str:
        """Return string representation including the merge error kind."""
        return f"{super().__str__()} | Kind: {self.kind.value}"


class ParsingError(PatchDiffError):
    """
    Document parsing errors.

    Raised when a patch notes document cannot be read or parsed.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        version: Optional[str] = None,
        parser_type: Optional[str] = None,
    ):
        """
        Initialize ParsingError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            version: The patch version whose document failed to parse
            parser_type: The type of parser (html, text, etc.)
        """
        super().__init__(message, details)
        self.version = version
        self.parser_type = parser_type

    def __str__(self) -> str:
        """Return string representation including version and parser type if present."""
        base = super().__str__()
        parts = [base]
        if self.version:
            parts.append(f"Version: {self.version}")
        if self.parser_type:
            parts.append(f"Parser: {self.parser_type}")
        return " | ".join(parts) if len(parts) > 1 else base


class ValidationError(PatchDiffError):
    """
    Data validation errors.

    Raised when input data validation fails.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ):
        """
        Initialize ValidationError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            field_name: The field that failed validation
            field_value: The value that failed validation
        """
        super().__init__(message, details)
        self.field_name = field_name
        self.field_value = field_value

    def __str__(self) -> str:
        """Return string representation including field and value if present."""
        base = super().__str__()
        parts = [base]
        if self.field_name:
            parts.append(f"Field: {self.field_name}")
        if self.field_value is not None:
            parts.append(f"Value: {self.field_value}")
        return " | ".join(parts) if len(parts) > 1 else base


class ConfigurationError(PatchDiffError):
    """
    Configuration errors.

    Raised when configuration is missing or invalid.
    """

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
        config_key: Optional[str] = None,
        config_file: Optional[str] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
            config_key: The configuration key that is problematic
            config_file: The configuration file or directory being read
        """
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file

    def __str__(self) -> str:
        """Return string representation including config key and file if present."""
        base = super().__str__()
        parts = [base]
        if self.config_key:
            parts.append(f"Key: {self.config_key}")
        if self.config_file:
            parts.append(f"File: {self.config_file}")
        return " | ".join(parts) if len(parts) > 1 else base
