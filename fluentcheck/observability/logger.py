"""
Structured JSON logging for fluentcheck

All loggers are children of the "fluentcheck" package logger, which owns a
single JSON handler configured on first use. Embedding applications can call
setup_logger() again to switch level or format.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

ROOT_LOGGER_NAME = "fluentcheck"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter adding timestamp, level, logger, module and function fields
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def setup_logger(level: str | None = None, format_type: str = "json") -> logging.Logger:
    """
    Configure the package logger

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL), defaults to env LOG_LEVEL
        format_type: "json" or "text"

    Returns:
        The configured "fluentcheck" logger
    """
    log_level_str = level or os.getenv("LOG_LEVEL", "WARNING")
    log_level = LOG_LEVELS.get(log_level_str.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if format_type == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the package logger, configuring the package logger on first use

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        setup_logger()

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class log_operation:
    """
    Context manager logging the start, end and duration of an operation

    Usage:
        with log_operation("Loading rules", logger=logger, config_path="rules.yaml"):
            ...
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.start_time: float | None = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(
            f"Starting: {self.operation_name}",
            extra={"operation": self.operation_name, **self.extra_fields}
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.debug(
                f"Completed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "success",
                    **self.extra_fields
                }
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "error",
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.extra_fields
                }
            )
        return False  # Don't suppress exceptions
