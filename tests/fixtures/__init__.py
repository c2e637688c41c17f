# Test fixtures
from .fake_http import SITE_URL, FakeResponse, FakeSession, site_url
from .sample_documents import (
    MISSING_ARTICLE,
    MISSING_RESOURCE,
    NOTES_ARTICLE,
    SAMPLE_GUIDE_HTML,
    SAMPLE_GUIDE_MD,
    SAMPLE_NOTES_HTML,
    SAMPLE_NOTES_MD,
    SAMPLE_WEB_ARTICLE_HTML,
    SAMPLE_WEB_ARTICLE_MD,
    TOOLS_ZIP,
    TOOLS_ZIP_BYTES,
    WEB_ARTICLE,
    create_sample_catalog,
    sample_catalog_dict,
)

__all__ = [
    "SITE_URL",
    "FakeResponse",
    "FakeSession",
    "site_url",
    "MISSING_ARTICLE",
    "MISSING_RESOURCE",
    "NOTES_ARTICLE",
    "SAMPLE_GUIDE_HTML",
    "SAMPLE_GUIDE_MD",
    "SAMPLE_NOTES_HTML",
    "SAMPLE_NOTES_MD",
    "SAMPLE_WEB_ARTICLE_HTML",
    "SAMPLE_WEB_ARTICLE_MD",
    "TOOLS_ZIP",
    "TOOLS_ZIP_BYTES",
    "WEB_ARTICLE",
    "create_sample_catalog",
    "sample_catalog_dict",
]
