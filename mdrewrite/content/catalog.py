"""
Catalog of candidate articles and resource files.

Storage backends cannot list directories, so the names to probe are
supplied up front, either in code or from a JSON file.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Raised when a catalog cannot be loaded."""
    pass


CATEGORY_KEYWORDS = {
    "Technology": ["Web", "开发"],
    "Design": ["设计", "响应式"],
    "Programming": ["JavaScript", "编程"],
}
DEFAULT_CATEGORY = "Other"


def infer_category(title: str) -> str:
    """Infer an article category from keywords in its title (case-sensitive)."""
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in title for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


@dataclass
class Catalog:
    """
    Known article and resource names plus display metadata.

    Metadata maps are keyed by file name; names missing from a map fall
    back to the DEFAULT_* values.
    """
    DEFAULT_DATE = "2025-01-01"
    DEFAULT_SIZE = "1.0MB"
    DEFAULT_DESCRIPTION = "Resource file"

    articles: list[str] = field(default_factory=list)
    resources: list[str] = field(default_factory=list)
    dates: dict[str, str] = field(default_factory=dict)
    sizes: dict[str, str] = field(default_factory=dict)
    descriptions: dict[str, str] = field(default_factory=dict)

    def date_for(self, filename: str) -> str:
        return self.dates.get(filename, self.DEFAULT_DATE)

    def size_for(self, filename: str) -> str:
        return self.sizes.get(filename, self.DEFAULT_SIZE)

    def description_for(self, filename: str) -> str:
        return self.descriptions.get(filename, self.DEFAULT_DESCRIPTION)

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        """
        Build a catalog from a plain dictionary.

        Raises:
            CatalogError: If a field has the wrong shape.
        """
        if not isinstance(data, dict):
            raise CatalogError(f"Catalog must be a JSON object, got {type(data).__name__}")

        kwargs = {}
        for key in ("articles", "resources"):
            value = data.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise CatalogError(f"Catalog field '{key}' must be a list of file names")
            kwargs[key] = list(value)

        for key in ("dates", "sizes", "descriptions"):
            value = data.get(key, {})
            if not isinstance(value, dict):
                raise CatalogError(f"Catalog field '{key}' must be an object")
            kwargs[key] = {str(k): str(v) for k, v in value.items()}

        return cls(**kwargs)

    @classmethod
    def from_json(cls, file_path: Path | str) -> "Catalog":
        """
        Load a catalog from a JSON file.

        Raises:
            CatalogError: If the file is missing, unreadable or not valid JSON.
        """
        path = Path(file_path)
        if not path.exists():
            raise CatalogError(f"Catalog file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid catalog JSON in {path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}")

        return cls.from_dict(data)


def load_catalog(file_path: Optional[Path | str] = None) -> Catalog:
    """Load a catalog file, or return an empty catalog when none is given."""
    if file_path is None:
        return Catalog()
    return Catalog.from_json(file_path)
