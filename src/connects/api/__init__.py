# src/connects/api/__init__.py
# Created: 2026-03-02 10:12:03
# Author: Connects

"""
Transport, response validation and error plumbing shared by every connect.
"""

from .api_client import (
    APIClient,
    APIConfig,
    ContentType,
    RequestDescriptor,
    RequestMethod,
    ResponseEnvelope,
    Transport
)

from .errors import (
    ConnectError,
    ErrorCatalog,
    ErrorTable,
    UNHANDLED_ERROR,
    UNKNOWN_ERROR
)

from .response_handler import ResponseHandler
from .connect import BaseConnect

__all__ = [
    'APIClient',
    'APIConfig',
    'ContentType',
    'RequestDescriptor',
    'RequestMethod',
    'ResponseEnvelope',
    'Transport',
    'ConnectError',
    'ErrorCatalog',
    'ErrorTable',
    'UNHANDLED_ERROR',
    'UNKNOWN_ERROR',
    'ResponseHandler',
    'BaseConnect'
]
