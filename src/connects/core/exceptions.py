from typing import Any, Dict, Optional

class ConnectsError(Exception):
    """Base exception class for all connects exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(ConnectsError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(ConnectsError):
    """Raised when there is a logging error"""
    pass

class ValidationError(ConnectsError):
    """Raised when caller supplied data fails validation"""
    pass

class TemplateError(ConnectsError):
    """Raised when a message template references a missing variable"""
    pass

class TransportError(ConnectsError):
    """Raised when the HTTP transport cannot complete a request"""
    pass
