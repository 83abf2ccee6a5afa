"""
Logging configuration module for the simulator.

Provides centralized logging setup with colored output using rich. Log
records always go to standard error, standard output is reserved for the
battle report.
"""

import logging
from typing import Any

from catchery import ErrorHandler, set_default_handler
from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    # Create a rich console bound to standard error.
    console = Console(stderr=True, width=120)

    # Configure the rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )

    # Configure the root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    # Route catchery through our logger tree, so its records only reach the
    # rich handler. Traces are not kept in its error history.
    set_default_handler(
        ErrorHandler(logger=get_logger("battlesim.combat"), error_history_maxlen=0)
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


# Create a default logger for the simulator
logger = get_logger("battlesim")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    """Appends the context, formatted as key=value pairs, to the message."""
    if not context:
        return message
    context_str = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} ({context_str})"


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    Args:
        message (str): The debug message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.debug(_with_context(message, context))
