"""
Domain entities for the file store.
Pure business objects with no dependency on the file system.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel

from .exceptions import DocumentValidationError


BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class Document:
    """Named byte content, used both as write input and read output."""
    name: str
    content: bytes = b""

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise DocumentValidationError("Document name must be a string")
        if not isinstance(self.content, bytes):
            raise DocumentValidationError("Document content must be bytes")

    @property
    def size(self) -> int:
        """Number of bytes held by the document."""
        return len(self.content)

    @property
    def is_null(self) -> bool:
        """Whether this document is the "no document" sentinel."""
        return self == NULL_DOCUMENT

    def as_text(self, encoding: str = "utf-8") -> str:
        """
        Decode the document content.

        Args:
            encoding: Text encoding of the content

        Returns:
            str: Decoded content, undecodable bytes replaced
        """
        return self.content.decode(encoding, errors="replace")

    def __str__(self) -> str:
        return self.as_text()


NULL_DOCUMENT = Document(name="", content=b"")


class DocumentBuilder:
    """Builds a Document once both its name and its bytes are known."""

    def __init__(self):
        self._name: Optional[str] = None
        self._content: Optional[bytes] = None

    def with_name(self, name: str) -> "DocumentBuilder":
        self._name = name
        return self

    def with_bytes(self, content: BytesLike) -> "DocumentBuilder":
        try:
            self._content = bytes(content)
        except (TypeError, ValueError) as e:
            raise DocumentValidationError(f"Invalid document bytes: {str(e)}")
        return self

    def create_document(self) -> Document:
        """
        Create the document.

        Returns:
            Document: The built document

        Raises:
            DocumentValidationError: If the name or the bytes were never set
        """
        if self._name is None:
            raise DocumentValidationError("Document name must be set before creation")
        if self._content is None:
            raise DocumentValidationError("Document bytes must be set before creation")
        return Document(name=self._name, content=self._content)


@dataclass(frozen=True)
class WriteFileResult:
    """Outcome of a write. No error messages means success."""
    error_messages: Tuple[str, ...] = ()

    @property
    def had_error(self) -> bool:
        """Whether the write failed."""
        return len(self.error_messages) > 0

    @classmethod
    def success(cls) -> "WriteFileResult":
        return cls()

    @classmethod
    def failure(cls, *messages: str) -> "WriteFileResult":
        return cls(error_messages=tuple(messages))


# API Models for FastAPI
class WriteDocumentRequestAPI(BaseModel):
    """Write request via JSON."""
    directory: Optional[str] = None
    name: str
    content_base64: str = ""


class WriteFileResponse(BaseModel):
    """Write response."""
    had_error: bool
    error_messages: List[str] = []


class DocumentResponse(BaseModel):
    """Document read response."""
    name: str
    size: int
    content_base64: str
    text: str


class EntriesResponse(BaseModel):
    """Directory listing response."""
    path: Optional[str] = None
    entries: List[str] = []
    count: int = 0


class ExistsResponse(BaseModel):
    """Existence check response."""
    path: Optional[str] = None
    exists: bool
