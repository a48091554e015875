from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vespa_client.model import Target


class VespaClientError(Exception):
    pass


class ConfigurationError(VespaClientError):
    """Raised when a target cannot be resolved into a base URL."""

    def __init__(self, value: str, message: str):
        super().__init__(message)
        self.value = value


class TransportError(VespaClientError):
    """Raised when a target could not be reached at all."""

    def __init__(self, target: "Target", reason: str):
        super().__init__(f"{target.service.label} at {target.url} could not be reached: {reason}")
        self.target = target
        self.reason = reason


class UnreadyError(VespaClientError):
    """Raised when a target was reached but did not report itself as ready."""

    def __init__(self, target: "Target", status_code: int | None):
        super().__init__(f"{target.service.label} at {target.url} is not ready: status {status_code}")
        self.target = target
        self.status_code = status_code


def error_detail_of(status_code: int | None, error: str | None) -> str:
    if error is not None:
        return f"Error: {error}"

    return f"Status {status_code}"
