"""
Shared configuration, logging, exceptions and helpers.
"""

from .config import Config
from .exceptions import (
    ConnectsError,
    ConfigError,
    LoggerError,
    ValidationError,
    TemplateError,
    TransportError
)
from .logger import Logger

__all__ = [
    'Config',
    'ConnectsError',
    'ConfigError',
    'LoggerError',
    'ValidationError',
    'TemplateError',
    'TransportError',
    'Logger'
]
