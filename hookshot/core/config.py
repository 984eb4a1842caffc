"""Configuration models - Pure data structures.

These are the models for dispatcher configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field, replace
from urllib.parse import urlparse

from hookshot.core.message import Message


# Default timeout for webhook requests (seconds)
DEFAULT_TIMEOUT = 10


@dataclass
class DispatcherConfig:
    """Dispatcher configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        webhook_url: Target webhook URL
        timeout_seconds: Bound on each HTTP round trip
        username: Default display name for messages that set none
        avatar_url: Default avatar for messages that set none
    """
    webhook_url: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT
    username: str = ""
    avatar_url: str = ""


@dataclass
class ValidationError:
    """A problem found in a dispatcher configuration.

    Attributes:
        field: Config key the problem concerns
        message: What is wrong
        severity: "error" blocks sending, "warning" does not
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Outcome of validate_config().

    Attributes:
        valid: False when any problem has severity "error"
        errors: Every problem found, warnings included
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)


def validate_webhook_url(url: str) -> list[ValidationError]:
    """Validate a webhook URL.

    Pure function.

    Args:
        url: URL to check

    Returns:
        List of validation errors (empty if valid)
    """
    if not url:
        return [ValidationError(field="webhook_url", message="Webhook URL is not set")]

    parsed = urlparse(url)
    errors = []
    if parsed.scheme not in ("http", "https"):
        errors.append(ValidationError(
            field="webhook_url",
            message=f"Unsupported URL scheme: {parsed.scheme or '(none)'}",
        ))
    elif not parsed.netloc:
        errors.append(ValidationError(
            field="webhook_url",
            message="Webhook URL has no host",
        ))
    elif parsed.scheme == "http":
        errors.append(ValidationError(
            field="webhook_url",
            message="Webhook URL is not HTTPS; the token travels in clear text",
            severity="warning",
        ))
    return errors


def validate_config(config: DispatcherConfig) -> ValidationResult:
    """Validate a dispatcher configuration.

    Pure function.

    Args:
        config: Configuration to check

    Returns:
        ValidationResult listing every problem found
    """
    errors = validate_webhook_url(config.webhook_url)

    if config.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout must be positive, got {config.timeout_seconds}",
        ))

    valid = not any(e.severity == "error" for e in errors)
    return ValidationResult(valid=valid, errors=errors)


def apply_defaults(message: Message, config: DispatcherConfig) -> Message:
    """Fill in the configured username and avatar where a message has none.

    Pure function. Returns a new Message; the input is not modified.
    """
    return replace(
        message,
        username=message.username or config.username,
        avatar_url=message.avatar_url or config.avatar_url,
    )
