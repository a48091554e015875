__all__ = ["resolve_target", "status_url", "check_status"]

import urllib.parse

import httpx
from loguru import logger

from vespa_client.common import ConfigurationError
from vespa_client.model import ServiceClass, Target, StatusResult, ALIAS_URLS, DEFAULT_ALIAS, STATUS_PATH

_DEFAULT_TIMEOUT_SECS = 10


def _known_aliases() -> list[str]:
    return sorted({alias for alias, _ in ALIAS_URLS.keys()})


def _invalid_target(value: str) -> ConfigurationError:
    return ConfigurationError(
        value,
        f"invalid target `{value}`: must be an absolute URL or one of {', '.join(_known_aliases())}"
    )


def _normalize_absolute_url(value: str) -> str:
    """
    Check that a value is a well-formed absolute HTTP(S) URL.

    Args:
        value: URL to check

    Returns:
        URL without a trailing slash

    Raises:
        ConfigurationError: if the URL is malformed
    """
    if any(c.isspace() for c in value):
        raise _invalid_target(value)

    try:
        parts = urllib.parse.urlsplit(value)
        # raises on ports outside of 0-65535
        _ = parts.port
        httpx.URL(value)
    except (ValueError, httpx.InvalidURL) as e:
        raise _invalid_target(value) from e

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise _invalid_target(value)

    return value[:-1] if value.endswith("/") else value


def resolve_target(service: ServiceClass, target: str | None = None) -> Target:
    """
    Resolve a target value into the base URL of a service.

    Args:
        service: class of service to resolve the target for
        target: absolute URL or alias, defaults to the local alias if empty

    Returns:
        resolved target

    Raises:
        ConfigurationError: if the value is neither a well-formed absolute URL nor a known alias
    """
    value = target or DEFAULT_ALIAS

    if "://" in value:
        url = _normalize_absolute_url(value)
    else:
        url = ALIAS_URLS.get((value, service))

        if url is None:
            raise _invalid_target(value)

    logger.debug("Resolved {} target `{}` to {}", service.value, value, url)
    return Target(service=service, url=url)


def status_url(target: Target) -> str:
    return f"{target.url}/{STATUS_PATH}"


def _perform_status_request(client: httpx.Client, target: Target) -> StatusResult:
    url = status_url(target)
    logger.debug("GET {}", url)

    try:
        r = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Request to {} failed: {}", url, e)
        return StatusResult(target=target, error=str(e) or type(e).__name__)

    logger.debug("Received status {} from {}", r.status_code, url)
    return StatusResult(target=target, status_code=r.status_code)


def check_status(
        target: Target,
        client: httpx.Client | None = None,
        timeout_secs: int | None = _DEFAULT_TIMEOUT_SECS
) -> StatusResult:
    """
    Probe a target once and report whether it is ready.
    Transport failures are captured in the result instead of being raised.

    Args:
        target: target to probe
        client: HTTP client to send the request with, a new one is created and closed if absent
        timeout_secs: seconds until the request times out, only used if no client is given

    Returns:
        outcome of the probe
    """
    if client is not None:
        return _perform_status_request(client, target)

    with httpx.Client(timeout=timeout_secs) as c:
        return _perform_status_request(c, target)
