"""
Port for file system operations.
This is an interface that defines how callers interact with a file system
without handling platform exceptions themselves.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities import Document, WriteFileResult


class FileSystemPort(ABC):
    """Interface for validated file system operations."""

    @abstractmethod
    async def write(self, directory: Optional[str], document: Document) -> WriteFileResult:
        """
        Write a document into a directory.

        Args:
            directory: Target directory
            document: Document to write, stored under its name

        Returns:
            Result carrying error messages, empty on success
        """
        pass

    @abstractmethod
    def list(self, path: Optional[str]) -> List[str]:
        """
        List the entries directly inside a directory.

        Args:
            path: Directory to list

        Returns:
            Entry names, empty if the path is not a readable directory
        """
        pass

    @abstractmethod
    def exists(self, path: Optional[str]) -> bool:
        """
        Check if a file or directory exists at the given path.

        Args:
            path: The path to check

        Returns:
            True if something exists there, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, path: Optional[str]) -> None:
        """
        Delete a file, or a directory with its contents.

        Args:
            path: The path to delete
        """
        pass

    @abstractmethod
    def get_document(self, path: Optional[str]) -> Document:
        """
        Read a file into a document.

        Args:
            path: The file path to read

        Returns:
            The document, or the null document if nothing could be read
        """
        pass
