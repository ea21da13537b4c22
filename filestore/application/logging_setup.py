"""
Logging configuration for the file store.
"""
import logging
from typing import Optional

from ..domain.services.configuration_service import ConfigurationService

HANDLER_NAME = "filestore"


def configure_logging(configuration: Optional[ConfigurationService] = None) -> logging.Logger:
    """
    Configure the root logger with a console handler.

    Calling it again replaces the handler installed by a previous call.

    Args:
        configuration: Source of level and format (default: environment)

    Returns:
        logging.Logger: The configured root logger
    """
    configuration = configuration or ConfigurationService()

    root = logging.getLogger()
    root.setLevel(configuration.get_log_level())

    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        configuration.get_log_format(),
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    console_handler.set_name(HANDLER_NAME)
    root.addHandler(console_handler)

    return root
