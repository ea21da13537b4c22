import pytest
import tempfile
import os
import shutil
import uuid
from filestore.adapters.local_file_system_adapter import FileSystem
from filestore.domain.entities import DocumentBuilder


@pytest.fixture
def file_system():
    """FileSystem adapter for testing."""
    return FileSystem()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()

    yield temp_dir

    # Cleanup
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def make_file(temp_dir):
    """Factory creating a uniquely named text file inside temp_dir."""
    def _make_file(content: str = "") -> str:
        path = os.path.join(temp_dir, str(uuid.uuid4()))
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    return _make_file


@pytest.fixture
def missing_path(temp_dir):
    """A path inside temp_dir that was never created."""
    return os.path.join(temp_dir, str(uuid.uuid4()))


@pytest.fixture
def csv_document():
    """Five-byte csv document with a unique name."""
    return (
        DocumentBuilder()
        .with_name(f"{uuid.uuid4()}.csv")
        .with_bytes(bytes(5))
        .create_document()
    )
