"""
Configuration service for the file store.
Centralizes all configuration parameters and default values.
"""
import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerConfiguration:
    """Configuration for the HTTP server."""
    host: str
    port: int


@dataclass(frozen=True)
class LoggingConfiguration:
    """Configuration for logging."""
    level: int
    format: str


@dataclass(frozen=True)
class DocumentConfiguration:
    """Configuration for document handling."""
    text_encoding: str


class ConfigurationService:
    """Service for managing application configuration."""

    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 8000
    DEFAULT_LOG_LEVEL = logging.INFO
    DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    DEFAULT_TEXT_ENCODING = "utf-8"

    def __init__(self):
        """Initialize with default configuration and environment overrides."""
        self._server_config = self._create_server_configuration()
        self._logging_config = self._create_logging_configuration()
        self._document_config = self._create_document_configuration()

    def get_host(self) -> str:
        """Get HTTP bind host."""
        return self._server_config.host

    def get_port(self) -> int:
        """Get HTTP port."""
        return self._server_config.port

    def get_log_level(self) -> int:
        """Get root log level."""
        return self._logging_config.level

    def get_log_format(self) -> str:
        """Get log record format."""
        return self._logging_config.format

    def get_text_encoding(self) -> str:
        """Get encoding used for text views of documents."""
        return self._document_config.text_encoding

    def _create_server_configuration(self) -> ServerConfiguration:
        return ServerConfiguration(
            host=os.getenv("FILESTORE_HOST", self.DEFAULT_HOST),
            port=self._parse_port(os.getenv("FILESTORE_PORT"))
        )

    def _create_logging_configuration(self) -> LoggingConfiguration:
        return LoggingConfiguration(
            level=self._parse_log_level(os.getenv("FILESTORE_LOG_LEVEL")),
            format=self.DEFAULT_LOG_FORMAT
        )

    def _create_document_configuration(self) -> DocumentConfiguration:
        return DocumentConfiguration(
            text_encoding=os.getenv("FILESTORE_TEXT_ENCODING", self.DEFAULT_TEXT_ENCODING)
        )

    def _parse_port(self, value) -> int:
        if value is None:
            return self.DEFAULT_PORT
        try:
            port = int(value)
        except ValueError:
            return self.DEFAULT_PORT
        if not 0 < port < 65536:
            return self.DEFAULT_PORT
        return port

    def _parse_log_level(self, value) -> int:
        if not value:
            return self.DEFAULT_LOG_LEVEL
        level = logging.getLevelName(value.strip().upper())
        # getLevelName returns "Level X" for unknown names
        if isinstance(level, int):
            return level
        return self.DEFAULT_LOG_LEVEL
