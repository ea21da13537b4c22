"""
Dependency container for the file store.
Centralizes the creation of all dependencies to maintain clean architecture.
"""
from typing import Optional

from ..ports.file_system_port import FileSystemPort
from ..domain.services.configuration_service import ConfigurationService


class DependencyContainer:
    """Container for managing application dependencies."""

    def __init__(self, configuration_service: Optional[ConfigurationService] = None):
        self._configuration_service = configuration_service or ConfigurationService()
        self._file_system: Optional[FileSystemPort] = None

    def get_file_system(self) -> FileSystemPort:
        """Get or create the file system adapter."""
        if self._file_system is None:
            from ..adapters.local_file_system_adapter import FileSystem
            self._file_system = FileSystem()
        return self._file_system

    def set_file_system(self, file_system: FileSystemPort) -> None:
        """Replace the file system adapter (useful for testing)."""
        self._file_system = file_system

    def get_configuration_service(self) -> ConfigurationService:
        """Get configuration service."""
        return self._configuration_service

    def reset(self):
        """Reset all dependencies (useful for testing)."""
        self._configuration_service = ConfigurationService()
        self._file_system = None
