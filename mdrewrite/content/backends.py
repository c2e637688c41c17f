"""
Storage backends for the content source.

Both backends answer the same three questions: does a file exist, what
is its text, and can it be saved locally. HttpBackend talks to a static
web server with requests; LocalBackend reads from a directory.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import quote, urlparse


class ContentSourceError(Exception):
    """Raised when a file cannot be found or fetched."""
    pass


NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def _require_requests():
    try:
        import requests
    except ImportError:
        raise RuntimeError("requests is not installed. Run: pip install requests")
    return requests


def encode_filename(filename: str) -> str:
    """Percent-encode a file name the way browsers encode URI components."""
    return quote(filename, safe="!*'()")


class HttpBackend:
    """Reads files served over HTTP(S) relative to a base URL."""

    DEFAULT_TIMEOUT = 30
    CHUNK_SIZE = 8192

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT, session=None):
        """
        Initialize the backend.

        Args:
            base_url: Site root that relative paths are resolved against.
            timeout: Request timeout in seconds.
            session: A requests.Session (or compatible object). Created
                lazily when not given.
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._session = session

    @staticmethod
    def can_handle(location: str) -> bool:
        """Check if the location looks like a URL."""
        try:
            parsed = urlparse(location)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    @property
    def session(self):
        if self._session is None:
            self._session = _require_requests().Session()
        return self._session

    def join(self, directory: str, filename: str) -> str:
        return f"{directory}{encode_filename(filename)}"

    def url_for(self, path: str) -> str:
        if self.can_handle(path):
            return path
        return self.base_url + path.lstrip("/")

    def exists(self, path: str) -> bool:
        """
        Probe a file with a HEAD request.

        A missing file or a network failure both count as "does not
        exist"; neither raises.
        """
        requests = _require_requests()
        url = self.url_for(path)
        try:
            response = self.session.head(
                url, headers=NO_CACHE_HEADERS, timeout=self.timeout, allow_redirects=True
            )
        except requests.RequestException as e:
            print(f"[WARN] Existence check failed: {url} ({e})", file=sys.stderr)
            return False

        if not response.ok:
            print(
                f"[WARN] File missing or unreachable: {url} (status {response.status_code})",
                file=sys.stderr,
            )
            return False
        return True

    def read_text(self, path: str) -> str:
        """
        Fetch a file and decode it as UTF-8.

        Raises:
            ContentSourceError: On a non-success status or network failure.
        """
        response = self._get(path)
        return response.content.decode("utf-8", errors="replace")

    def save_to(self, path: str, dest: Path) -> Path:
        """
        Stream a file to dest.

        Raises:
            ContentSourceError: On a non-success status or network failure.
        """
        requests = _require_requests()
        response = self._get(path, stream=True)
        try:
            with open(dest, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
        except requests.RequestException as e:
            raise ContentSourceError(f"Download interrupted: {self.url_for(path)} ({e})")
        finally:
            response.close()
        return dest

    def _get(self, path: str, stream: bool = False):
        requests = _require_requests()
        url = self.url_for(path)
        try:
            response = self.session.get(
                url, headers=NO_CACHE_HEADERS, timeout=self.timeout, stream=stream
            )
        except requests.RequestException as e:
            raise ContentSourceError(f"Request failed: {url} ({e})")

        if not response.ok:
            response.close()
            raise ContentSourceError(
                f"File missing or unreachable: {url} (status {response.status_code})"
            )
        return response

    def __repr__(self) -> str:
        return f"HttpBackend({self.base_url!r})"


class LocalBackend:
    """Reads files from a directory on disk."""

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()

    @staticmethod
    def can_handle(location: str) -> bool:
        return os.path.isdir(location)

    def join(self, directory: str, filename: str) -> str:
        return f"{directory}{filename}"

    def resolve(self, path: str) -> Optional[Path]:
        """Resolve path under the root; None if it escapes the root or is not a valid path."""
        try:
            candidate = (self.root / path).resolve()
        except (ValueError, OSError):
            return None
        if not candidate.is_relative_to(self.root):
            return None
        return candidate

    def exists(self, path: str) -> bool:
        target = self.resolve(path)
        if target is None or not target.is_file():
            print(f"[WARN] File missing: {self.root / path}", file=sys.stderr)
            return False
        return True

    def read_text(self, path: str) -> str:
        """
        Read a file as UTF-8 text.

        Raises:
            ContentSourceError: If the file is missing or unreadable.
        """
        target = self._require_file(path)
        try:
            return target.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ContentSourceError(f"Cannot read {target}: {e}")

    def save_to(self, path: str, dest: Path) -> Path:
        """
        Copy a file to dest.

        Raises:
            ContentSourceError: If the file is missing or cannot be copied.
        """
        target = self._require_file(path)
        try:
            shutil.copyfile(target, dest)
        except OSError as e:
            raise ContentSourceError(f"Cannot copy {target}: {e}")
        return dest

    def _require_file(self, path: str) -> Path:
        target = self.resolve(path)
        if target is None or not target.is_file():
            raise ContentSourceError(f"File missing: {self.root / path}")
        return target

    def __repr__(self) -> str:
        return f"LocalBackend({str(self.root)!r})"


def open_backend(location: str, timeout: float = HttpBackend.DEFAULT_TIMEOUT):
    """
    Pick a backend for a URL or directory.

    Raises:
        ValueError: If the location is neither.
    """
    if HttpBackend.can_handle(location):
        return HttpBackend(location, timeout=timeout)
    if LocalBackend.can_handle(location):
        return LocalBackend(location)
    raise ValueError(
        f"Cannot open content location: {location}\n"
        f"Provide a base URL or an existing directory."
    )
