"""
Logging setup for the customer data service.

``setup_logging()`` is called once by the server on import. It installs a
console handler on the root logger and, when ``ENABLE_FILE_LOGGING`` is set,
a DEBUG-level file handler writing ``customer_data_service.log``.
Modules obtain their logger with ``get_logger(__name__)``.

Environment:
    CUSTOMER_DATA_SERVICE_LOG_LEVEL: console level (read through the settings)
    LOG_FORMAT: ``simple``, ``detailed`` (default) or ``json``
    LOG_FILE_DIR: directory of the log file (default ``logs``)
    ENABLE_FILE_LOGGING: write the log file as well (default false)
"""

import logging
import os
from pathlib import Path
from typing import Optional


def _console_level() -> str:
    # An invalid environment makes the settings fail to load; use the raw variable then
    try:
        from customer_data_service.server.core.config import settings

        return settings.log_level.upper()
    except Exception:
        return os.getenv("CUSTOMER_DATA_SERVICE_LOG_LEVEL", "INFO").upper()


LOG_LEVEL = _console_level()
LOG_FORMAT = os.getenv("LOG_FORMAT", "detailed")
LOG_FILE_DIR = os.getenv("LOG_FILE_DIR", "logs")
LOG_FILE_NAME = "customer_data_service.log"
ENABLE_FILE_LOGGING = os.getenv("ENABLE_FILE_LOGGING", "false").lower() in ("true", "1", "yes")

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

_FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Loggers whose level differs from the root. Child loggers inherit these.
MODULE_LOG_LEVELS = {
    "customer_data_service": "INFO",
    "customer_data_service.core.service": "DEBUG",
    "customer_data_service.server.api": "DEBUG",
    "sqlalchemy": "WARNING",
    "aiosqlite": "WARNING",
    "httpx": "WARNING",
}


def _file_handler(formatter: logging.Formatter) -> logging.Handler:
    log_dir = Path(LOG_FILE_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure the root logger. Calling it again replaces the previous handlers.

    Args:
        log_level: Console level; defaults to ``LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; unknown names fall back to ``detailed``
        enable_file: Allow the file handler. It is only added when ``ENABLE_FILE_LOGGING`` is set too.
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT
    formatter = logging.Formatter(_FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    handlers = [console]

    write_file = enable_file and ENABLE_FILE_LOGGING
    if write_file:
        handlers.append(_file_handler(formatter))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    # Handlers filter by level; the root lets everything through
    root_logger.setLevel(logging.DEBUG)
    for handler in handlers:
        root_logger.addHandler(handler)

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={write_file}")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (normally the module's ``__name__``)."""
    return logging.getLogger(name)
