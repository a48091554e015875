from loguru import logger

from .common import VespaClientError, ConfigurationError, TransportError, UnreadyError
from .lib import resolve_target, status_url, check_status
from .model import ServiceClass, Target, StatusResult

logger.disable("vespa_client")

__all__ = [
    "VespaClientError",
    "ConfigurationError",
    "TransportError",
    "UnreadyError",
    "resolve_target",
    "status_url",
    "check_status",
    "ServiceClass",
    "Target",
    "StatusResult",
]
