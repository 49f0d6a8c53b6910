"""
Flat-file document store backed by a single directory.
"""
import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional, Tuple, Union

from flask import current_app
from werkzeug.security import safe_join

from cms.models import Document, SortMode
from cms.utils.validators import ALLOWED_EXTENSIONS, duplicate_name

logger = logging.getLogger(__name__)


class DocumentPathError(Exception):
    """Raised when a document name would resolve outside the store directory."""
    pass


class DocumentStore:
    """Service for reading and writing documents in the data directory."""

    def __init__(self, data_path: Union[str, Path],
                 allowed_extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS,
                 duplicate_suffix: str = 'copy'):
        """Initialize the store, creating the directory if needed."""
        self.data_path = Path(data_path)
        self.allowed_extensions = tuple(allowed_extensions)
        self.duplicate_suffix = duplicate_suffix
        self.data_path.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        """
        Resolve a document name to its path inside the store.

        Raises:
            DocumentPathError if the name is empty or escapes the directory
        """
        joined = safe_join(str(self.data_path), name) if name else None
        if joined is None or Path(joined) == self.data_path:
            raise DocumentPathError(f"Invalid document name: {name!r}")
        return Path(joined)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _scan(self) -> List[os.DirEntry]:
        with os.scandir(self.data_path) as entries:
            return [
                entry for entry in entries
                if entry.is_file() and not entry.name.startswith('.')
            ]

    def taken_names(self) -> List[str]:
        """
        Every name already present in the store directory.

        Unlike list_names this includes hidden files and subdirectories.
        """
        with os.scandir(self.data_path) as entries:
            return [entry.name for entry in entries]

    def list_documents(self, sort_mode: Optional[SortMode] = None) -> List[Document]:
        """
        List documents for the index view.

        Args:
            sort_mode: SortMode.ABC for case-insensitive name order,
                SortMode.DATE for oldest-modified first, None for
                directory enumeration order

        Returns:
            List of Document records
        """
        documents = []
        for entry in self._scan():
            stat = entry.stat()
            documents.append(Document(
                name=entry.name,
                size_bytes=stat.st_size,
                modified_at=stat.st_mtime
            ))

        if sort_mode is SortMode.ABC:
            documents.sort(key=lambda doc: doc.name.lower())
        elif sort_mode is SortMode.DATE:
            documents.sort(key=lambda doc: doc.modified_at)
        return documents

    def list_names(self, sort_mode: Optional[SortMode] = None) -> List[str]:
        """List document names in the requested order."""
        return [doc.name for doc in self.list_documents(sort_mode)]

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def get_document(self, name: str) -> Document:
        """Get metadata for one document."""
        stat = self.path_for(name).stat()
        return Document(name=name, size_bytes=stat.st_size, modified_at=stat.st_mtime)

    def read(self, name: str) -> bytes:
        """Read a document's raw content."""
        return self.path_for(name).read_bytes()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, name: str) -> Document:
        """Create an empty document."""
        self.path_for(name).write_bytes(b'')
        logger.info(f"Created document {name}")
        return self.get_document(name)

    def write(self, name: str, content: Union[str, bytes]) -> None:
        """
        Overwrite a document's content verbatim.

        Creates the document if it does not exist yet.
        """
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.path_for(name).write_bytes(content)
        logger.info(f"Updated document {name} ({len(content)} bytes)")

    def rename(self, name: str, new_name: str) -> None:
        """Rename a document."""
        os.rename(self.path_for(name), self.path_for(new_name))
        logger.info(f"Renamed document {name} -> {new_name}")

    def duplicate(self, name: str) -> str:
        """
        Copy a document next to itself.

        An existing copy with the derived name is overwritten.

        Returns:
            Name of the copy
        """
        copy_name = duplicate_name(name, self.duplicate_suffix)
        shutil.copyfile(self.path_for(name), self.path_for(copy_name))
        logger.info(f"Duplicated document {name} -> {copy_name}")
        return copy_name

    def delete(self, name: str) -> None:
        """Delete a document. A missing document raises FileNotFoundError."""
        self.path_for(name).unlink()
        logger.info(f"Deleted document {name}")


def init_document_store(app) -> DocumentStore:
    """Initialize the document store with Flask app."""
    store = DocumentStore(
        app.config['DATA_PATH'],
        allowed_extensions=app.config.get('ALLOWED_EXTENSIONS', ALLOWED_EXTENSIONS),
        duplicate_suffix=app.config.get('DUPLICATE_SUFFIX', 'copy')
    )
    app.extensions['document_store'] = store
    return store


def get_document_store() -> DocumentStore:
    """Get the document store of the current app."""
    store = current_app.extensions.get('document_store')
    if store is None:
        raise RuntimeError("Document store not initialized. Call init_document_store() first.")
    return store
