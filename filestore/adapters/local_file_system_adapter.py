import asyncio
import logging
import os
import shutil
from typing import List, Optional

from ..domain.entities import Document, NULL_DOCUMENT, WriteFileResult
from ..domain.services.path_validator import (
    is_blank, is_valid_directory, is_valid_document_name
)
from ..ports.file_system_port import FileSystemPort

logger = logging.getLogger(__name__)

INVALID_DIRECTORY_MESSAGE = "Invalid directory provided"
INVALID_DOCUMENT_MESSAGE = "Invalid document provided"


class FileSystem(FileSystemPort):
    """Adapter for the local file system. Never raises for bad input."""

    NULL_DOCUMENT = NULL_DOCUMENT

    async def write(self, directory: Optional[str], document: Document) -> WriteFileResult:
        """
        Write a document to <directory>/<document.name>.

        Args:
            directory: Absolute target directory
            document: Document to write, an existing file is overwritten

        Returns:
            WriteFileResult: Empty on success, otherwise the error messages
        """
        if not is_valid_directory(directory):
            logger.debug("Rejected write to invalid directory %r", directory)
            return WriteFileResult.failure(INVALID_DIRECTORY_MESSAGE)

        if document is None or not is_valid_document_name(document.name):
            logger.debug("Rejected write of invalid document into %s", directory)
            return WriteFileResult.failure(INVALID_DOCUMENT_MESSAGE)

        target = os.path.join(os.fspath(directory), document.name)
        try:
            await asyncio.to_thread(self._write_bytes, target, document.content)
        except (OSError, ValueError) as e:
            logger.warning("Error writing file %s: %s", target, e)
            return WriteFileResult.failure(f"Error writing file {target}: {str(e)}")

        logger.debug("Wrote %d bytes to %s", document.size, target)
        return WriteFileResult.success()

    def list(self, path: Optional[str]) -> List[str]:
        """
        List the entries directly inside a directory.

        Args:
            path: Directory to list

        Returns:
            List[str]: Sorted entry names, empty if path is not a readable directory
        """
        if is_blank(path) or not os.path.isdir(path):
            return []

        try:
            return sorted(os.listdir(path))
        except OSError as e:
            logger.warning("Error listing directory %s: %s", path, e)
            return []

    def exists(self, path: Optional[str]) -> bool:
        """
        Check if a file or directory exists.

        Args:
            path: Path to check

        Returns:
            bool: True if a file or directory exists at path
        """
        if is_blank(path):
            return False
        return os.path.exists(path)

    def delete(self, path: Optional[str]) -> None:
        """
        Delete a file, or a directory and everything under it.

        Args:
            path: Path to delete, missing paths are ignored
        """
        if is_blank(path):
            return

        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            elif os.path.lexists(path):
                os.remove(path)
        except OSError as e:
            logger.warning("Error deleting %s: %s", path, e)

    def get_document(self, path: Optional[str]) -> Document:
        """
        Read a file into a document.

        Args:
            path: File to read

        Returns:
            Document: The file's name and content, or NULL_DOCUMENT
        """
        if is_blank(path) or not os.path.isfile(path):
            return NULL_DOCUMENT

        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            logger.warning("Error reading file %s: %s", path, e)
            return NULL_DOCUMENT

        return Document(name=os.path.basename(os.fspath(path)), content=content)

    @staticmethod
    def _write_bytes(target: str, content: bytes) -> None:
        with open(target, 'wb') as f:
            f.write(content)
