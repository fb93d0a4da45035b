"""
core/aws/client.py - boto3 session/client helpers

Builds the boto3 session and the DynamoDB client used by the backend.

The console issues exactly one call per operation and lets the operator
re-trigger a failed action, so clients are created with retries disabled
(max_attempts=1).

Example:
    from ddbconsole.core.aws.client import create_session, get_client

    session = create_session(profile="dev", region="ap-northeast-2")
    dynamodb = get_client(session, "dynamodb", region_name="ap-northeast-2")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from ddbconsole.core.exceptions import ConfigError

if TYPE_CHECKING:
    import boto3

# Retry mode type (compatible with the botocore TypedDict)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # seconds
DEFAULT_READ_TIMEOUT = 60  # seconds


def create_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """Create a boto3 Session

    Args:
        profile: Named profile (None = default credential chain)
        region: Default region of the session

    Raises:
        ConfigError: The profile does not exist
    """
    import boto3
    from botocore.exceptions import ProfileNotFound

    try:
        return boto3.Session(profile_name=profile, region_name=region)
    except ProfileNotFound as e:
        raise ConfigError("profile", f"profile '{profile}' not found", cause=e) from e


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Create a boto3 client with the console's retry/timeout settings

    Args:
        session: boto3 Session
        service_name: AWS service name (dynamodb, sts, ...)
        region_name: Region (None = session default)
        max_attempts: Total attempts per call (1 = no retry)
        retry_mode: botocore retry mode
        connect_timeout: Connect timeout (seconds)
        read_timeout: Read timeout (seconds)
        **kwargs: Extra arguments for session.client()

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # Merge a caller supplied config on top
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
