"""
Logging utilities

Context-carrying logger adapter used by repositories, services and
views. Handler and formatter setup lives in ecostay.config.logging.
"""

import logging
from typing import Any, Dict, Optional


SENSITIVE_KEYS = (
    'password', 'token', 'secret', 'key', 'credentials',
    'authorization', 'cookie', 'session'
)


def sanitize_context(context: Dict[str, Any]) -> Dict[str, Any]:
    """Mask sensitive values before they reach a handler"""
    clean: Dict[str, Any] = {}
    for key, value in context.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            clean[key] = '[REDACTED]'
        elif isinstance(value, dict):
            clean[key] = sanitize_context(value)
        else:
            clean[key] = value
    return clean


class LoggerAdapter:
    """Enhanced logger adapter with context management"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._context: Dict[str, Any] = {}

    def add_context(self, **kwargs):
        """Add context to all log messages"""
        self._context.update(kwargs)
        return self

    def remove_context(self, *keys):
        """Remove context keys"""
        for key in keys:
            self._context.pop(key, None)
        return self

    def clear_context(self):
        """Clear all context"""
        self._context.clear()
        return self

    def _log(self, level: int, message: str, *args, **kwargs):
        """Internal log method with context"""
        extra = dict(self._context)
        extra.update(kwargs.get('extra') or {})
        kwargs['extra'] = sanitize_context(extra)

        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get configured logger instance.

    Args:
        name: Logger name (defaults to the package logger)

    Returns:
        Enhanced logger adapter
    """
    return LoggerAdapter(logging.getLogger(name or 'ecostay'))
