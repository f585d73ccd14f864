"""Utils package."""

from cleanfeed.utils.http_client import create_http_client
from cleanfeed.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "create_http_client",
]
