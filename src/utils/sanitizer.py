"""Sanitization utilities for structured log events.

Used by the ``redact_credentials`` structlog processor so provider
credentials (server tokens, API keys, auth headers) never reach log output.
"""

from typing import Any


# Sensitive field patterns that should be redacted
SENSITIVE_PATTERNS = {
    # Authentication & Authorization
    "password",
    "secret",
    "secret_key",
    "api_key",
    "apikey",
    "token",
    "server_token",
    "bearer",
    "authorization",
    "credentials",
    # Provider headers
    "x-postmark-server-token",
    "x-api-key",
}


def is_sensitive_key(key: str, patterns: set[str] | None = None) -> bool:
    """Check if a key matches any sensitive pattern.

    Args:
        key: The key to check (case-insensitive, normalized)
        patterns: Optional custom patterns (defaults to SENSITIVE_PATTERNS)

    Returns:
        True if key matches any sensitive pattern, False otherwise

    Example:
        >>> is_sensitive_key("postmark_api_key")
        True
        >>> is_sensitive_key("X-Postmark-Server-Token")
        True
        >>> is_sensitive_key("to")
        False
    """
    if patterns is None:
        patterns = SENSITIVE_PATTERNS

    normalized_key = key.lower().replace("-", "_").replace(".", "_").replace(" ", "_")

    for pattern in patterns:
        normalized_pattern = pattern.replace(".", "_").replace("-", "_")
        if normalized_pattern in normalized_key:
            return True

    return False


def sanitize_value(key: str, value: Any, patterns: set[str] | None = None) -> Any:
    """Sanitize a value if its key is sensitive.

    Args:
        key: The key name
        value: The value to potentially sanitize
        patterns: Optional custom patterns (defaults to SENSITIVE_PATTERNS)

    Returns:
        Sanitized value if key is sensitive, original value otherwise

    Example:
        >>> sanitize_value("api_key", "abc123")
        '***REDACTED***'
        >>> sanitize_value("subject", "Welcome")
        'Welcome'
    """
    if not is_sensitive_key(key, patterns):
        return value
    return "***REDACTED***"


def sanitize_dict(
    data: dict[str, Any],
    patterns: set[str] | None = None,
    recursive: bool = True,
) -> dict[str, Any]:
    """Recursively sanitize a dictionary.

    Args:
        data: Dictionary to sanitize
        patterns: Optional custom patterns (defaults to SENSITIVE_PATTERNS)
        recursive: Whether to recursively sanitize nested dicts/lists

    Returns:
        New dictionary with sensitive values redacted

    Example:
        >>> sanitize_dict({"api_key": "secret", "to": "a@example.com"})
        {'api_key': '***REDACTED***', 'to': 'a@example.com'}
    """
    sanitized = {}

    for key, value in data.items():
        if is_sensitive_key(key, patterns):
            sanitized[key] = sanitize_value(key, value, patterns)
        elif recursive and isinstance(value, dict):
            sanitized[key] = sanitize_dict(value, patterns, recursive)
        elif recursive and isinstance(value, list):
            sanitized[key] = [
                sanitize_dict(item, patterns, recursive)
                if isinstance(item, dict)
                else item
                for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized
