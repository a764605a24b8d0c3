"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    share_base_url() -> str
        Resolve the base URL share links are built on
    build_share_url() -> str
        Get string representation of the share URL for a given token
    utc_now() -> datetime
        Current timezone-aware UTC instant (the default service clock)
    isoformat_utc() -> str | None
        Serialize a datetime as ISO 8601 UTC with a 'Z' suffix
    parse_datetime() -> datetime | None
        Parse an ISO 8601 string into a timezone-aware UTC datetime
    token_fingerprint() -> str
        Non-reversible short identifier of a token, safe for logs
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler exceptions into a generic 500

Example:
    Typical usage inside a Lambda handler:

        >>> from sharelinks.utils.helpers import base_url, build_share_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> build_share_url('https://notes.example.com/', 'Zk3u9QwErTy0pLmN_aB-cD12')
        'https://notes.example.com/s/Zk3u9QwErTy0pLmN_aB-cD12'
"""

import os
import hashlib
import logging
import functools
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from sharelinks.utils.constants import (
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    SHARE_BASE_URL_ENV,
    SHARE_PATH_PREFIX,
    UNKNOWN_INTERNAL_SERVER_ERROR,
)
from sharelinks.utils.responses import response_500
from sharelinks.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    Works seamlessly with both custom and default AWS API Gateway domains.
    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://notes.example.com"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return DEFAULT_BASE_URL


def share_base_url(event: dict[str, Any]) -> str:
    """Resolve the base URL share links are built on

    Share links usually point at the note editor's frontend, not at the API,
    so an explicitly configured base URL wins over the API Gateway domain.

    Resolution order:
        1. SHARE_BASE_URL environment variable
        2. BASE_URL environment variable
        3. Public API Gateway URL of the current invocation (see base_url())

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL without a trailing slash.
    """
    configured = os.environ.get(SHARE_BASE_URL_ENV) or os.environ.get(BASE_URL_ENV)
    return (configured or base_url(event)).rstrip('/')


def build_share_url(base: str, token: str) -> str:
    """Get string representation of a share URL

    Args:
        base (str): base URL (trailing slashes are ignored)
        token (str): share token

    Returns:
        str: share url string representation, <base>/s/<token>
    """
    return f'{base.rstrip("/")}{SHARE_PATH_PREFIX}{token}'


def utc_now() -> datetime:
    return datetime.now(UTC)


def isoformat_utc(value: datetime | None) -> str | None:
    """Serialize a datetime as ISO 8601 UTC with millisecond precision

    Naive datetimes are assumed to already be in UTC.

    Example:
        >>> isoformat_utc(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))
        '2026-01-01T12:00:00.000Z'
        >>> isoformat_utc(None) is None
        True
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    # fmt: off
    return value.astimezone(UTC) \
                .isoformat(timespec='milliseconds') \
                .replace('+00:00', 'Z')
    # fmt: on


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into a timezone-aware UTC datetime

    Empty strings and None parse to None. Naive values are assumed to be UTC.

    Raises:
        ValueError: If the value is not a valid ISO 8601 string.
    """
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def token_fingerprint(token: str) -> str:
    """Return a short, non-reversible identifier of a share token for logs"""
    return hashlib.sha256(token.encode('utf-8')).hexdigest()[:12]


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        KeyError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        KeyError: "Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'"
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise KeyError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with a generic 500 when a lambda handler raises

    In AWS, an unhandled exception would otherwise surface as an API Gateway
    502 with no body. When running locally the exception is re-raised so the
    traceback reaches the developer.

    Args:
        handler (Callable):
            Lambda handler taking (event, context).

    Returns:
        Callable:
            Wrapped handler which never raises outside of local runs.
    """

    @functools.wraps(handler)
    def wrapper(event, context):
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
