"""Structured debug logging (timestamp, operation, key, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/trie.log"
_LOG_LEVEL = logging.INFO

_file_handler: Union[logging.handlers.RotatingFileHandler, None] = None


def setup_logging(
    log_file_path: Optional[Path] = None,
    level: int = _LOG_LEVEL,
) -> Path:
    """Attach a rotating file handler to the root logger.

    Calling it again replaces the handler installed by the previous call,
    so the records never end up written twice.

    Args:
        log_file_path (Optional[Path]): Where to write the log records.
            Defaults to `LOG_FILE_PATH`.
        level (int): The level of the root logger.

    Returns:
        Path: The path of the log file in use.

    """
    global _file_handler
    log_file_path = log_file_path or LOG_FILE_PATH
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _file_handler is not None:
        root_logger.removeHandler(_file_handler)
        _file_handler.close()

    _file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
        "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
        "lineno=%(lineno)d | message=%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    _file_handler.setFormatter(formatter)
    root_logger.addHandler(_file_handler)

    return log_file_path


def stop_logging() -> None:
    """Detach and close the handler installed by `setup_logging`."""
    global _file_handler
    if _file_handler is not None:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log(
    operation: str,
    key: str,
    result: bool,
    execution_time_ms: float,
) -> None:
    """Log the details of a trie operation using the configured
    logging system.

    Args:
        operation (str): The name of the operation (add, remove, ...).
        key (str): The key the operation was called with.
        result (bool): The value returned by the operation.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Operation: %s, Key: '%s', Result: %s, Execution Time: %.4f ms",
        operation,
        key,
        result,
        execution_time_ms,
    )
