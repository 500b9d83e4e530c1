from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlcraft operations.

    Each category has its own prefix so an error can be identified
    without a dedicated exception class.

    Attributes:
        CONFIG_*: Configuration-related errors
        QUERY_*: Query building and rendering errors
        VALIDATION_*: Syntax validation errors
    """
    # Configuration errors
    CONFIG_INVALID = "CONFIG_001"

    # Query errors
    BUILD_ERROR = "QUERY_001"
    UNSUPPORTED_QUERY_KIND = "QUERY_002"

    # Validation errors
    SYNTAX_ERROR = "VALIDATION_001"


class SqlCraftError(Exception):
    """Base exception for all sqlcraft-related errors.

    Uses error codes for categorization instead of a hierarchy of
    specific exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUILD_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from sqlcraft.logging import get_logger
        get_logger(__name__).debug(
            "sqlcraft.error.raised",
            extra={
                "error_code": error_code.value,
                "error_message": message,
                "details": self.details,
            },
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "SqlCraftError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for SqlCraftError

        Returns:
            SqlCraftError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def configuration_error(message: str, cause: Optional[Exception] = None) -> SqlCraftError:
    """Create an error for an invalid engine configuration."""
    return SqlCraftError(message=message, error_code=ErrorCode.CONFIG_INVALID, cause=cause)


def syntax_error(message: str, dialect: str, cause: Optional[Exception] = None) -> SqlCraftError:
    """Create an error for SQL text a parser rejected."""
    return SqlCraftError(
        message=message,
        error_code=ErrorCode.SYNTAX_ERROR,
        details={"dialect": dialect},
        cause=cause,
    )


def unsupported_query_kind_error(query_kind: Any, builder_name: str) -> SqlCraftError:
    """Create an error for a query kind that has no renderer.

    Args:
        query_kind: The offending kind
        builder_name: Name of the builder class that rejected it

    Returns:
        SqlCraftError with UNSUPPORTED_QUERY_KIND code
    """
    return SqlCraftError(
        message=f"Query kind {query_kind} not supported by {builder_name}",
        error_code=ErrorCode.UNSUPPORTED_QUERY_KIND,
        details={"query_kind": str(query_kind)},
    )


def build_error(message: str, cause: Optional[Exception] = None, **details: Any) -> SqlCraftError:
    """Wrap a failure raised while parsing or rendering a query."""
    return SqlCraftError(
        message=message,
        error_code=ErrorCode.BUILD_ERROR,
        details=details,
        cause=cause,
    )
