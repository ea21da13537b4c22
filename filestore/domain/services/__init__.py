"""
Services package for domain logic.
"""

from .configuration_service import ConfigurationService
from .path_validator import is_blank, is_valid_directory, is_valid_document_name

__all__ = [
    "ConfigurationService",
    "is_blank",
    "is_valid_directory",
    "is_valid_document_name",
]
