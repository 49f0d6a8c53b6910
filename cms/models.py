"""
Data models for the application.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any


class SortMode(str, Enum):
    """Index ordering stored in the user's session."""
    ABC = 'abc'
    DATE = 'date'

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional['SortMode']:
        """Parse a stored session value; unknown or missing values mean no sorting."""
        try:
            return cls(value)
        except ValueError:
            return None


class FilenameCheck(Enum):
    """Outcome of validating a proposed document name."""
    OK = None
    EMPTY_NAME = 'A name is required.'
    INVALID_EXTENSION = 'File must have a .txt or .md extension.'
    DUPLICATE_NAME = 'Filename already used. Please choose a new filename.'

    @property
    def ok(self) -> bool:
        return self is FilenameCheck.OK

    @property
    def message(self) -> Optional[str]:
        """User-facing message for a failed check."""
        return self.value


@dataclass
class Document:
    """Document model representing one file in the document store."""
    name: str = ''
    size_bytes: int = 0
    modified_at: float = 0.0  # seconds since epoch

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition('.')
        return f".{ext}" if dot else ''


@dataclass
class RequestContext:
    """Per-request view of the session state the controller is allowed to see."""
    username: Optional[str] = None
    sort: Optional[SortMode] = None

    @property
    def signed_in(self) -> bool:
        return self.username is not None

    @classmethod
    def from_session(cls, session) -> 'RequestContext':
        """Build a context from a session-like mapping."""
        return cls(
            username=session.get('username'),
            sort=SortMode.from_value(session.get('sort'))
        )


# Marker used in ActionResult.session_updates to remove a key.
CLEAR = object()


@dataclass
class ActionResult:
    """
    Outcome of a controller operation.

    Exactly one of redirect_to, template or body describes the response.
    The flash message and session updates are applied by the route layer
    before the response is produced.
    """
    status: int = 200
    template: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    body: Optional[bytes] = None
    content_type: Optional[str] = None
    redirect_to: Optional[str] = None
    flash: Optional[str] = None
    session_updates: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def redirect(cls, location: str = '/', flash: Optional[str] = None, **session_updates) -> 'ActionResult':
        return cls(status=302, redirect_to=location, flash=flash, session_updates=session_updates)

    @classmethod
    def render(cls, template: str, status: int = 200, flash: Optional[str] = None, **context) -> 'ActionResult':
        return cls(status=status, template=template, context=context, flash=flash)

    @classmethod
    def raw(cls, body: bytes, content_type: str) -> 'ActionResult':
        return cls(status=200, body=body, content_type=content_type)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None
