"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdrewrite.engine import MarkdownConverter
from mdrewrite.content.backends import HttpBackend, LocalBackend
from mdrewrite.content.source import ContentSource
from mdrewrite.core import Publisher
from tests.fixtures import (
    NOTES_ARTICLE,
    SAMPLE_NOTES_MD,
    SAMPLE_WEB_ARTICLE_MD,
    SITE_URL,
    TOOLS_ZIP,
    TOOLS_ZIP_BYTES,
    WEB_ARTICLE,
    FakeSession,
    create_sample_catalog,
    site_url,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def converter():
    """Create a converter with the standard rule table."""
    return MarkdownConverter()


@pytest.fixture
def publisher(tmp_path):
    """Create a publisher writing into a temporary directory."""
    return Publisher(output_dir=str(tmp_path / "html_out"))


# ============================================================================
# Content Site Fixtures
# ============================================================================


@pytest.fixture
def sample_catalog():
    """Catalog naming two existing articles, one missing, and two resources."""
    return create_sample_catalog()


@pytest.fixture
def site_dir(tmp_path):
    """Create a content site on disk with article/ and file/ directories."""
    root = tmp_path / "site"
    (root / "article").mkdir(parents=True)
    (root / "file").mkdir()
    (root / "article" / WEB_ARTICLE).write_text(SAMPLE_WEB_ARTICLE_MD, encoding="utf-8")
    (root / "article" / NOTES_ARTICLE).write_text(SAMPLE_NOTES_MD, encoding="utf-8")
    (root / "file" / TOOLS_ZIP).write_bytes(TOOLS_ZIP_BYTES)
    return root


@pytest.fixture
def local_source(site_dir, sample_catalog):
    """Create a content source over the on-disk site."""
    return ContentSource(LocalBackend(site_dir), sample_catalog)


@pytest.fixture
def fake_session():
    """Create a fake HTTP session serving the sample site."""
    return FakeSession(
        files={
            site_url("article/", WEB_ARTICLE): SAMPLE_WEB_ARTICLE_MD.encode("utf-8"),
            site_url("article/", NOTES_ARTICLE): SAMPLE_NOTES_MD.encode("utf-8"),
            site_url("file/", TOOLS_ZIP): TOOLS_ZIP_BYTES,
        }
    )


@pytest.fixture
def http_backend(fake_session):
    """Create an HTTP backend bound to the fake session."""
    return HttpBackend(SITE_URL, session=fake_session)


@pytest.fixture
def http_source(http_backend, sample_catalog):
    """Create a content source over the fake HTTP site."""
    return ContentSource(http_backend, sample_catalog)
