"""
Content source for articles and downloadable resources.

Probes the names listed in a Catalog against a storage backend, reads
article text for the rewrite engine, and saves resource files locally.
Failures are reported through result objects, never raised into the
engine.
"""

import os
import sys
from pathlib import Path

from ..engine import convert
from .backends import ContentSourceError, encode_filename
from .catalog import Catalog, infer_category
from .results import (
    LOAD_FAILED_TEXT,
    NOT_FOUND_TEXT,
    ArticleEntry,
    DownloadResult,
    EntryStatus,
    FetchResult,
    ResourceEntry,
)


class ContentSource:
    """
    Serves catalog articles and resources from a backend.

    Articles live under article_dir and resources under resource_dir,
    both relative to the backend root.
    """

    ARTICLE_DIR = "article/"
    RESOURCE_DIR = "file/"
    ARTICLE_SUFFIX = ".md"

    def __init__(
        self,
        backend,
        catalog: Catalog | None = None,
        article_dir: str = ARTICLE_DIR,
        resource_dir: str = RESOURCE_DIR,
    ):
        """
        Initialize the content source.

        Args:
            backend: An HttpBackend or LocalBackend.
            catalog: Candidate file names and metadata.
            article_dir: Directory holding Markdown articles.
            resource_dir: Directory holding downloadable files.
        """
        self.backend = backend
        self.catalog = catalog or Catalog()
        self.article_dir = article_dir
        self.resource_dir = resource_dir

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------

    def article_path(self, filename: str) -> str:
        return self.backend.join(self.article_dir, filename)

    def check_article(self, filename: str) -> ArticleEntry:
        """Probe a single article and describe it."""
        file_path = self.article_path(filename)
        print(f"[CHECK] {file_path}")
        try:
            exists = self.backend.exists(file_path)
        except (ContentSourceError, OSError) as e:
            print(f"[ERROR] Failed to check {filename}: {e}", file=sys.stderr)
            return ArticleEntry(filename=filename, status=EntryStatus.ERROR, error=str(e))

        if not exists:
            return ArticleEntry(filename=filename, status=EntryStatus.NOT_FOUND)

        title = _strip_suffix(filename, self.ARTICLE_SUFFIX)
        return ArticleEntry(
            filename=filename,
            status=EntryStatus.SUCCESS,
            encoded_filename=encode_filename(filename),
            title=title,
            date=self.catalog.date_for(filename),
            category=infer_category(title),
            file_path=file_path,
        )

    def list_articles(self) -> list[ArticleEntry]:
        """Return the catalog articles that exist on the backend."""
        articles = [
            entry
            for entry in (self.check_article(name) for name in self.catalog.articles)
            if entry.found
        ]
        print(f"[ARTICLES] Loaded {len(articles)} of {len(self.catalog.articles)} articles")
        return articles

    def get_article_content(self, filename: str) -> str:
        """
        Return the raw Markdown of an article.

        Returns NOT_FOUND_TEXT when the article does not exist and
        LOAD_FAILED_TEXT when it exists but could not be read.
        """
        file_path = self.article_path(filename)
        if not self.backend.exists(file_path):
            return NOT_FOUND_TEXT

        try:
            return self.backend.read_text(file_path)
        except (ContentSourceError, OSError) as e:
            print(f"[ERROR] Failed to load article {filename}: {e}", file=sys.stderr)
            return LOAD_FAILED_TEXT

    def render_article(self, filename: str) -> FetchResult:
        """Fetch an article and convert it to HTML."""
        result = self.read(self.article_path(filename))
        if not result.success:
            return result
        return FetchResult(success=True, content=convert(result.content), message=result.message)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def resource_path(self, filename: str) -> str:
        return self.backend.join(self.resource_dir, filename)

    def list_resources(self) -> list[ResourceEntry]:
        """Return the catalog resources that exist on the backend."""
        resources = []
        for filename in self.catalog.resources:
            file_path = self.resource_path(filename)
            if not self.backend.exists(file_path):
                continue
            resources.append(
                ResourceEntry(
                    filename=filename,
                    size=self.catalog.size_for(filename),
                    date=self.catalog.date_for(filename),
                    description=self.catalog.description_for(filename),
                    file_path=file_path,
                )
            )
        return resources

    def download(self, filename: str, dest_dir: Path | str) -> DownloadResult:
        """
        Save a resource file into dest_dir and notify the user.

        Args:
            filename: Resource name from the catalog.
            dest_dir: Directory to save into (created if missing).

        Returns:
            The download outcome.
        """
        file_path = self.resource_path(filename)
        if not self.backend.exists(file_path):
            result = DownloadResult(success=False, filename=filename, message="File does not exist")
            _notify_download(result)
            return result

        dest_dir = Path(dest_dir)
        try:
            os.makedirs(dest_dir, exist_ok=True)
            path = self.backend.save_to(file_path, dest_dir / os.path.basename(filename))
        except (ContentSourceError, OSError) as e:
            print(f"[ERROR] Download failed: {filename} ({e})", file=sys.stderr)
            result = DownloadResult(success=False, filename=filename, message="Download failed")
        else:
            result = DownloadResult(
                success=True,
                filename=filename,
                message=f"Started download: {filename}",
                path=path,
            )
        _notify_download(result)
        return result

    # ------------------------------------------------------------------
    # Generic access
    # ------------------------------------------------------------------

    def read(self, file_path: str) -> FetchResult:
        """Check that a file exists, then read it."""
        try:
            if not self.backend.exists(file_path):
                return FetchResult.failure(f"File does not exist: {file_path}")
            content = self.backend.read_text(file_path)
        except (ContentSourceError, OSError) as e:
            print(f"[ERROR] Failed to read {file_path}: {e}", file=sys.stderr)
            return FetchResult.failure(f"File read failed: {e}")

        return FetchResult(success=True, content=content, message=f"File read: {file_path}")


def _strip_suffix(filename: str, suffix: str) -> str:
    name, ext = os.path.splitext(filename)
    return name if ext.lower() == suffix else filename


def _notify_download(result: DownloadResult) -> None:
    if result.success:
        print(f"[DOWNLOAD] {result.message}")
    else:
        print(f"[ERROR] {result.message}: {result.filename}", file=sys.stderr)
