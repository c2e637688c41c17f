"""
Result types returned by the content source.

Lookups that can fail report it through these objects instead of
raising, so callers can show the reason to the user.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

NOT_FOUND_TEXT = "No file"
LOAD_FAILED_TEXT = "Failed to load article content"


class EntryStatus(Enum):
    """Outcome of probing a catalog entry."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass
class ArticleEntry:
    """A Markdown article listed in the catalog."""
    filename: str
    status: EntryStatus
    encoded_filename: Optional[str] = None
    title: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    file_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == EntryStatus.SUCCESS


@dataclass
class ResourceEntry:
    """A downloadable resource file that exists on the backend."""
    filename: str
    size: str
    date: str
    description: str
    file_path: str

    @property
    def name(self) -> str:
        return self.filename


@dataclass
class FetchResult:
    """Text read from the backend, or the reason it could not be read."""
    success: bool
    content: str
    message: str

    @classmethod
    def failure(cls, message: str) -> "FetchResult":
        return cls(success=False, content=NOT_FOUND_TEXT, message=message)


@dataclass
class DownloadResult:
    """Outcome of saving a resource file locally."""
    success: bool
    filename: str
    message: str
    path: Optional[Path] = None
