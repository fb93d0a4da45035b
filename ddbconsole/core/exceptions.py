"""
core/exceptions.py - Exception hierarchy

Exception classes shared by the backend, the state machine and the CLI.

Hierarchy:
    ConsoleError (base)
    ├── BackendError (DynamoDB API call failed)
    ├── ValidationError (wizard field constraints)
    └── ConfigError (settings / startup configuration)

Usage:
    from ddbconsole.core.exceptions import BackendError

    try:
        client.describe_table(TableName=name)
    except ClientError as e:
        raise BackendError.from_client_error("dynamodb", "describe_table", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# Base exception
# =============================================================================


class ConsoleError(Exception):
    """Base class of every ddbconsole exception

    Attributes:
        message: Error message
        cause: Underlying exception (for chaining)
        details: Extra context
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# Backend errors
# =============================================================================


class BackendError(ConsoleError):
    """DynamoDB API call failure

    Wraps botocore ClientError / BotoCoreError so callers handle one type.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation} failed"
        if error_code:
            message = f"{message} ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # The botocore message is already folded into self.message
        if self.error_message or self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "BackendError":
        """Build from botocore.exceptions.ClientError (or any botocore error)

        Args:
            service: AWS service name
            operation: API operation name
            client_error: Raised exception

        Returns:
            BackendError instance
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# Validation / configuration errors
# =============================================================================


class ValidationError(ConsoleError):
    """Input validation failure

    The message is already localized and fit for the status line.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        message: Optional[str] = None,
    ):
        super().__init__(message or f"invalid {field}: expected {expected}, got {value!r}")
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


class ConfigError(ConsoleError):
    """Settings / startup configuration error"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(f"config error [{key}]: {message}", cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# Helpers
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """Short error text for the status line

    Args:
        error: Raised exception

    Returns:
        User facing message
    """
    if isinstance(error, BackendError):
        friendly_messages = {
            "AccessDeniedException": "access denied, check the IAM policy",
            "ExpiredTokenException": "credentials expired, log in again",
            "UnrecognizedClientException": "invalid credentials",
            "ResourceInUseException": "table is busy (creating, updating or deleting)",
            "ResourceNotFoundException": "table not found",
            "ConditionalCheckFailedException": "condition check failed",
        }
        if error.error_code in friendly_messages:
            return f"{error.error_code}: {friendly_messages[error.error_code]}"
        if error.error_code:
            return f"{error.error_code}: {error.error_message or error.message}"
        return str(error)

    return str(error)
