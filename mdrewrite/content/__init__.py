from .backends import ContentSourceError, HttpBackend, LocalBackend, open_backend
from .catalog import Catalog, CatalogError, infer_category, load_catalog
from .results import ArticleEntry, DownloadResult, EntryStatus, FetchResult, ResourceEntry
from .source import ContentSource

__all__ = [
    "ArticleEntry",
    "Catalog",
    "CatalogError",
    "ContentSource",
    "ContentSourceError",
    "DownloadResult",
    "EntryStatus",
    "FetchResult",
    "HttpBackend",
    "LocalBackend",
    "ResourceEntry",
    "infer_category",
    "load_catalog",
    "open_backend",
]
