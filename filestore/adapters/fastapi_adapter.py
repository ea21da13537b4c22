"""
FastAPI adapter for the file store.
"""
import base64
import binascii
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from ..domain.entities import (
    Document, DocumentBuilder, WriteFileResult,
    WriteDocumentRequestAPI, WriteFileResponse, DocumentResponse,
    EntriesResponse, ExistsResponse
)
from ..domain.exceptions import DocumentValidationError
from ..application.dependency_container import DependencyContainer

logger = logging.getLogger(__name__)


# FastAPI application configuration
app = FastAPI(
    title="FileStore Service",
    description="Validated local file system operations",
    version="1.0.0"
)

# Global dependency container
container = DependencyContainer()


@app.get("/health")
async def health_check():
    """Service health check."""
    return {"status": "healthy", "service": "filestore"}


@app.post("/documents", response_model=WriteFileResponse)
async def write_document(request: WriteDocumentRequestAPI):
    """
    Write a document into a directory.

    Validation failures are reported in the response body, not as HTTP errors.
    """
    try:
        content = base64.b64decode(request.content_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 content: {str(e)}")

    try:
        document = DocumentBuilder().with_name(request.name).with_bytes(content).create_document()
    except DocumentValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    file_system = container.get_file_system()
    result = await file_system.write(request.directory, document)
    return _convert_write_result_to_response(result)


@app.get("/documents", response_model=DocumentResponse)
def get_document(path: Optional[str] = Query(None)):
    """Read a file as a document."""
    file_system = container.get_file_system()
    document = file_system.get_document(path)
    if document.is_null:
        raise HTTPException(status_code=404, detail=f"No document found at {path}")

    encoding = container.get_configuration_service().get_text_encoding()
    return _convert_document_to_response(document, encoding)


@app.get("/entries", response_model=EntriesResponse)
def list_entries(path: Optional[str] = Query(None)):
    """List the entries of a directory."""
    entries = container.get_file_system().list(path)
    return EntriesResponse(path=path, entries=entries, count=len(entries))


@app.delete("/entries", response_model=ExistsResponse)
def delete_entry(path: Optional[str] = Query(None)):
    """Delete a file or directory, reporting whether anything remains."""
    file_system = container.get_file_system()
    file_system.delete(path)
    return ExistsResponse(path=path, exists=file_system.exists(path))


@app.get("/exists", response_model=ExistsResponse)
def check_exists(path: Optional[str] = Query(None)):
    """Check whether a file or directory exists."""
    return ExistsResponse(path=path, exists=container.get_file_system().exists(path))


def _convert_write_result_to_response(result: WriteFileResult) -> WriteFileResponse:
    """Convert a domain write result to API response."""
    if result.had_error:
        logger.info("Write rejected: %s", "; ".join(result.error_messages))
    return WriteFileResponse(
        had_error=result.had_error,
        error_messages=list(result.error_messages)
    )


def _convert_document_to_response(document: Document, encoding: str = "utf-8") -> DocumentResponse:
    """Convert a domain document to API response."""
    return DocumentResponse(
        name=document.name,
        size=document.size,
        content_base64=base64.b64encode(document.content).decode("ascii"),
        text=document.as_text(encoding)
    )
