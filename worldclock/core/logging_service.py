"""
Logging Service - Diagnostics on stderr with configurable levels
stdout is reserved for the clock table
"""
import logging
import os
import sys
from typing import Mapping, Optional

LOGGER_NAME = 'worldclock'
DEFAULT_LEVEL = 'WARNING'


def level_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """Read log level from WORLDCLOCK_LOG_LEVEL, then LOG_LEVEL"""
    if environ is None:
        environ = os.environ
    return environ.get('WORLDCLOCK_LOG_LEVEL') or environ.get('LOG_LEVEL') or DEFAULT_LEVEL


class LoggingService:
    """
    Centralized logging service for the world clock.
    """
    
    def __init__(self, name: str = LOGGER_NAME, level: str = DEFAULT_LEVEL):
        """
        Initialize logging service.
        
        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self._logger = logging.getLogger(name)
        self._set_level(level)
        self._setup_handlers()
    
    def _set_level(self, level: str) -> None:
        """Set logging level from string"""
        level_map = {
            'DEBUG': logging.DEBUG,
            'INFO': logging.INFO,
            'WARNING': logging.WARNING,
            'ERROR': logging.ERROR,
            'CRITICAL': logging.CRITICAL
        }
        log_level = level_map.get(level.upper(), logging.WARNING)
        self._logger.setLevel(log_level)
    
    def _setup_handlers(self) -> None:
        """Setup stderr handler with formatting"""
        # Remove existing handlers
        self._logger.handlers.clear()
        
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self._logger.level)
        
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)
        
        self._logger.addHandler(console_handler)
    
    def debug(self, message: str, **kwargs) -> None:
        """Log debug message"""
        self._logger.debug(message, extra=kwargs)
    
    def error(self, message: str, **kwargs) -> None:
        """Log error message"""
        self._logger.error(message, extra=kwargs)
    
    def critical(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """
        Log critical message.
        
        Args:
            message: Critical message
            exc_info: Include exception traceback
            **kwargs: Additional context
        """
        self._logger.critical(message, exc_info=exc_info, extra=kwargs)
    
    def log_startup(self, version: str, config_path: str) -> None:
        """
        Log startup information.
        
        Args:
            version: Application version
            config_path: Config file that will be read
        """
        self.debug(f"worldclock v{version} starting up")
        self.debug(f"Python: {sys.version.split()[0]}")
        self.debug(f"Config: {config_path}")
    
    @property
    def logger(self) -> logging.Logger:
        """Get underlying logger instance"""
        return self._logger


# Global singleton instance
_logging_service: Optional[LoggingService] = None


def get_logger(name: str = LOGGER_NAME, level: Optional[str] = None) -> LoggingService:
    """
    Get or create logging service singleton.
    
    Args:
        name: Logger name
        level: Log level (default: read from environment)
    
    Returns:
        LoggingService instance
    """
    global _logging_service
    if _logging_service is None:
        _logging_service = LoggingService(name, level or level_from_env())
    return _logging_service


def reset_logger() -> None:
    """Drop the singleton and its handlers"""
    global _logging_service
    if _logging_service is not None:
        _logging_service.logger.handlers.clear()
    _logging_service = None
