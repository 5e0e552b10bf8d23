# archloom:domain=model
"""HTTP health checks attached to container instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse

from archloom.model.errors import ErrorCode, Ok, Result, ValidationError, fail, is_blank

DEFAULT_INTERVAL = 60
DEFAULT_TIMEOUT = 0


@dataclass(frozen=True)
class HttpHealthCheck:
    """A periodic liveness probe: GET *url* every *interval* seconds."""

    name: str
    url: str
    interval: int = DEFAULT_INTERVAL
    timeout: int = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict, hash=False)

    def add_header(self, name: str | None, value: str | None) -> None:
        """Add a request header sent with the probe.

        Raises:
            ValidationError: If *name* is blank.
        """
        if name is None or is_blank(name):
            raise ValidationError(
                ErrorCode.BLANK_HEADER_NAME, "The header name must not be null or empty."
            )
        self.headers[name] = value if value is not None else ""


def is_absolute_url(url: str) -> bool:
    """Return True if *url* has both a scheme and a network location.

    Only URLs a probe can reach over the network qualify, so scheme-only
    forms are rejected: ``is_absolute_url("localhost:8080")`` and
    ``is_absolute_url("file:///health")`` are both False, while
    ``is_absolute_url("http://localhost:8080")`` is True.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def create_health_check(
    name: str | None,
    url: str | None,
    interval: int = DEFAULT_INTERVAL,
    timeout: int = DEFAULT_TIMEOUT,
) -> Result[HttpHealthCheck]:
    """Validate the arguments and build a health check.

    Checks run in a fixed order (name, url presence, url validity, interval,
    timeout); the first failure is returned.
    """
    if name is None or is_blank(name):
        return fail(ErrorCode.BLANK_NAME, "The name must not be null or empty.")
    if url is None or is_blank(url):
        return fail(ErrorCode.BLANK_URL, "The URL must not be null or empty.")
    if not is_absolute_url(url):
        return fail(ErrorCode.INVALID_URL, f"{url} is not a valid URL.")
    if interval < 0:
        return fail(
            ErrorCode.NEGATIVE_INTERVAL,
            "The polling interval must be zero or a positive integer.",
        )
    if timeout < 0:
        return fail(ErrorCode.NEGATIVE_TIMEOUT, "The timeout must be zero or a positive integer.")
    return Ok(HttpHealthCheck(name=name, url=url, interval=interval, timeout=timeout))
