"""
Logging configuration for easy-request

Every module logs under "easy_request.<module>". Importing the package adds
no handlers; an application either configures logging itself or calls
setup_logging() to get console and/or file output for request traffic.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "easy_request"


class EasyRequestLogger:
    """Owns the handlers of the "easy_request" logger"""

    def __init__(
        self, name: str = LOGGER_NAME, log_file: Path | None = None, console_output: bool = True
    ):
        """
        Replace the handlers of the named logger

        Args:
            name: Logger to configure
            log_file: File receiving every dispatch and failure line (optional)
            console_output: Whether failures and INFO lines go to stdout
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Repeated setup must not stack handlers
        self.logger.handlers = []

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        # stdout skips the per-request DEBUG lines
        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        return self.logger


def setup_logging(log_file: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Route request logging to stdout and/or a file

    Args:
        log_file: Optional file that also receives the DEBUG line logged for each request
        verbose: Whether to print INFO and above (failures, refused methods) to stdout

    Returns:
        The "easy_request" logger
    """
    return EasyRequestLogger(log_file=log_file, console_output=verbose).get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """Logger for one module of the package, e.g. "request_wrapper"."""
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
