"""
Validation utilities for document names.
"""
from typing import Iterable, Tuple

from cms.models import FilenameCheck

ALLOWED_EXTENSIONS = ('.md', '.txt')


def has_valid_extension(filename: str, allowed_extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS) -> bool:
    """
    Check the document extension.

    Args:
        filename: Filename to check
        allowed_extensions: Accepted suffixes, including the dot

    Returns:
        True if the name ends in one of the allowed suffixes
    """
    return filename.endswith(tuple(allowed_extensions))


def validate_filename(filename: str, existing_names: Iterable[str],
                      allowed_extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS) -> FilenameCheck:
    """
    Validate a proposed document name against the naming rules.

    Rules are checked in order and the first failure wins:
    empty name, then extension, then uniqueness within the store.

    Args:
        filename: Proposed name
        existing_names: Names already present in the document store
        allowed_extensions: Accepted suffixes, including the dot

    Returns:
        FilenameCheck member describing the outcome
    """
    if not filename:
        return FilenameCheck.EMPTY_NAME
    if not has_valid_extension(filename, allowed_extensions):
        return FilenameCheck.INVALID_EXTENSION
    if filename in set(existing_names):
        return FilenameCheck.DUPLICATE_NAME
    return FilenameCheck.OK


def duplicate_name(filename: str, suffix: str = 'copy') -> str:
    """
    Derive the name of a document's copy.

    The suffix goes in front of the extension: "report.txt" -> "reportcopy.txt".
    Names without an extension get the suffix appended.
    """
    stem, dot, ext = filename.rpartition('.')
    if not dot or not stem:
        return f"{filename}{suffix}"
    return f"{stem}{suffix}.{ext}"
