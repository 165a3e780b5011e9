import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "connects"

class Logger:
    """
    Configures the ``connects`` logger hierarchy.

    Every module logs through ``logging.getLogger(__name__)``; creating a
    Logger attaches the handlers described by the ``logging`` config section
    to the package root so those records end up in one place.
    """
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())

        self.formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s - vendor:%(vendor)s - endpoint:%(endpoint)s',
            defaults={'vendor': '-', 'endpoint': '-'}
        )

        log_file = self.config.get("logging.file")
        if log_file:
            path = Path(log_file)
            if not path.parent.exists():
                try:
                    path.parent.mkdir(parents=True, exist_ok=True)
                except OSError:
                    raise LoggerError(f"Cannot create log directory: {path.parent}")

            max_size = self.config.get("logging.max_size", 1024 * 1024)
            backup_count = self.config.get("logging.backup_count", 3)

            try:
                handler = RotatingFileHandler(
                    str(path),
                    maxBytes=max_size,
                    backupCount=backup_count
                )
            except OSError as e:
                raise LoggerError(f"Failed to setup log file: {str(e)}")
            handler.setFormatter(self.formatter)
            self.logger.addHandler(handler)

        if self.config.get("logging.console_output", False):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(self.formatter)
            self.logger.addHandler(console_handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level

    def _prepare_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        extra_context = {
            'vendor': '-',
            'endpoint': '-'
        }
        if extra:
            extra_context.update(extra)
        return extra_context

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message"""
        self.logger.debug(message, extra=self._prepare_extra(kwargs.get('extra')))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message"""
        self.logger.info(message, extra=self._prepare_extra(kwargs.get('extra')))

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message"""
        self.logger.warning(message, extra=self._prepare_extra(kwargs.get('extra')))

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message"""
        self.logger.error(message, extra=self._prepare_extra(kwargs.get('extra')))

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log critical message"""
        self.logger.critical(message, extra=self._prepare_extra(kwargs.get('extra')))
