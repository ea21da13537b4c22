"""
File system adapters module.
"""

from .local_file_system_adapter import FileSystem

__all__ = [
    "FileSystem",
]
