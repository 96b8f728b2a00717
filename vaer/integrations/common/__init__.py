"""Common utilities for integrations."""

from .client import BaseAPIClient
from .exceptions import IntegrationAPIError

__all__ = [
    "BaseAPIClient",
    "IntegrationAPIError",
]
