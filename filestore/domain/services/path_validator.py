"""
Path validation for write targets.
"""
import os
from typing import Optional, Union

PathInput = Optional[Union[str, "os.PathLike[str]"]]


def is_blank(path: PathInput) -> bool:
    """Whether a path is missing or holds only whitespace."""
    if path is None:
        return True
    try:
        text = os.fspath(path)
    except TypeError:
        return True
    if not isinstance(text, str):
        return True
    return not text.strip()


def is_valid_directory(path: PathInput) -> bool:
    """
    Check whether a string is a usable directory path for writing.

    The path must be non-blank, free of NUL characters and rooted for the
    host platform. Existence is not checked.

    Args:
        path: Candidate directory path

    Returns:
        True if the path is well formed
    """
    if is_blank(path):
        return False

    text = os.fspath(path)
    if "\x00" in text:
        return False

    return os.path.isabs(text)


def is_valid_document_name(name: Optional[str]) -> bool:
    """
    Check whether a document name is a plain base name.

    Blank names, names holding NUL characters or path separators, and the
    special entries "." and ".." are rejected.

    Args:
        name: Candidate document name

    Returns:
        True if the name can be joined under a directory
    """
    if is_blank(name) or not isinstance(name, str):
        return False
    if "\x00" in name or name in (".", ".."):
        return False
    if os.sep in name or (os.altsep and os.altsep in name):
        return False
    return os.path.basename(name) == name
