"""
Ports package - interfaces for external systems.
These define the contracts that adapters must implement.
"""

from .file_system_port import FileSystemPort

__all__ = [
    "FileSystemPort",
]
