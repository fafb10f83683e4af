"""
Logging configuration with optional structured output and rotating files.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
import traceback
from .exceptions import ConfigurationError


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data)


class LoggerFactory:
    """Factory for creating configured loggers."""

    _loggers: Dict[str, logging.Logger] = {}
    _configured = False
    _handlers = []

    OPTIONS = (
        'log_dir',
        'log_level',
        'enable_console',
        'enable_structured',
        'max_bytes',
        'backup_count'
    )

    @classmethod
    def configure(
        cls,
        log_dir: Optional[str] = None,
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_structured: bool = False,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        force: bool = False
    ):
        """
        Configure global logging settings.

        Args:
            log_dir: Directory for rotating log files (None disables file logging)
            log_level: Root logger level name
            enable_console: Whether to log to stdout
            enable_structured: Whether to emit JSON records
            max_bytes: Size at which a log file is rotated
            backup_count: Number of rotated files to keep
            force: Replace handlers installed by an earlier call
        """
        if cls._configured and not force:
            return

        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []

        root_logger.setLevel(getattr(logging, log_level.upper()))

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            if enable_structured:
                console_handler.setFormatter(StructuredFormatter())
            else:
                console_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                    )
                )
            cls._add_handler(root_logger, console_handler)

        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "patterns.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            if enable_structured:
                file_handler.setFormatter(StructuredFormatter())
            else:
                file_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
                    )
                )
            cls._add_handler(root_logger, file_handler)

            error_handler = logging.handlers.RotatingFileHandler(
                log_path / "errors.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
                )
            )
            cls._add_handler(root_logger, error_handler)

        cls._configured = True

    @classmethod
    def configure_from_dict(cls, settings: Dict[str, Any]):
        """Reconfigure logging from a ``logging:`` configuration section."""
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"Logging settings must be a mapping, got {type(settings).__name__}"
            )

        unknown = sorted(set(settings) - set(cls.OPTIONS))
        if unknown:
            raise ConfigurationError(
                f"Unknown logging settings: {', '.join(unknown)}",
                details={'unknown': unknown, 'allowed': list(cls.OPTIONS)}
            )

        level = str(settings.get('log_level', 'INFO')).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                f"Unknown log level: {settings['log_level']}",
                details={'log_level': settings['log_level']}
            )

        cls.configure(**{**settings, 'log_level': level}, force=True)

    @classmethod
    def _add_handler(cls, root_logger: logging.Logger, handler: logging.Handler):
        root_logger.addHandler(handler)
        cls._handlers.append(handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name."""
        if not cls._configured:
            cls.configure()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]


class LogContext:
    """Context manager for adding extra fields to logs."""

    def __init__(self, logger: logging.Logger, **extra_fields):
        self.logger = logger
        self.extra_fields = extra_fields
        self.old_factory = None

    def __enter__(self):
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            record.extra_fields = self.extra_fields
            return record

        logging.setLogRecordFactory(record_factory)
        self.old_factory = old_factory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.old_factory:
            logging.setLogRecordFactory(self.old_factory)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggerFactory.get_logger(name)
