# File: config/logger_config.py
# Centralized logging setup for the hash table package and its demo driver.
# A logger can write to a rotating log file, to the console, or to both.

import logging  # Provides logging functionality
import os  # For handling file system paths and directories
from logging.handlers import RotatingFileHandler  # For managing rotating log files
from typing import Optional  # For optional type hinting

# Logs are written under <project root>/logs unless another directory is given
DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
VALID_OUTPUTS = {"file", "console", "both"}


def configure_logger(
    name: Optional[str] = None,
    log_dir: Optional[str] = None,
    log_file: str = "hashtable.log",
    level: int = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    output: str = "both",
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        name (Optional[str]): Name of the logger. If None, the root logger is used.
        log_dir (Optional[str]): Directory to store log files. Defaults to the project's logs/ folder.
        log_file (str): Name of the log file.
        level (int): Logging level (e.g., logging.INFO, logging.DEBUG).
        max_bytes (int): Maximum size of the log file before rotation.
        backup_count (int): Number of backup files to keep during rotation.
        output (str): Where to send logs: "file", "console", or "both".

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If `output` is not one of "file", "console" or "both".
        RuntimeError: If the log directory or a handler cannot be set up.
    """
    if output not in VALID_OUTPUTS:
        raise ValueError(f"Invalid log output '{output}'. Expected one of {sorted(VALID_OUTPUTS)}.")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Reuse existing handlers so repeated calls do not duplicate log lines
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if output in {"file", "both"}:
        log_dir = log_dir or DEFAULT_LOG_DIR
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, log_file), maxBytes=max_bytes, backupCount=backup_count
            )
        except OSError as e:
            raise RuntimeError(f"Failed to create or access log directory '{log_dir}': {e}") from e
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if output in {"console", "both"}:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
