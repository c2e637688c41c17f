"""
mdrewrite Publisher

Routes Markdown sources (local files, directories, URLs) through the
rewrite engine and writes the resulting HTML files.
"""

import os
import sys
from datetime import datetime, timezone
from urllib.parse import unquote, urlparse

from .content.backends import HttpBackend
from .engine import convert, render_document


class Publisher:
    """
    Renders Markdown sources to HTML.

    Accepts a file path, URL, or directory and produces HTML output,
    optionally wrapped as a standalone page.
    """

    DEFAULT_OUTPUT_DIR = "mdrewrite_output"
    MARKDOWN_EXTENSIONS = {".md", ".markdown"}

    def __init__(
        self,
        output_dir: str = None,
        standalone: bool = False,
        timeout: float = HttpBackend.DEFAULT_TIMEOUT,
    ):
        self.output_dir = output_dir or os.path.join(os.getcwd(), self.DEFAULT_OUTPUT_DIR)
        self.standalone = standalone
        self.timeout = timeout
        os.makedirs(self.output_dir, exist_ok=True)

    def render(self, source: str, save: bool = True) -> str:
        """
        Render a source to HTML.

        Args:
            source: File path, URL, or directory path
            save: If True, save the output to a .html file

        Returns:
            The HTML text

        Raises:
            ValueError: If the source is not a file, directory or URL.
            ContentSourceError: If a URL cannot be fetched.
        """
        source = source.strip()

        if HttpBackend.can_handle(source):
            print(f"[URL] Rendering: {source}")
            md_text = HttpBackend(source, timeout=self.timeout).read_text(source)
            out_name = _url_to_filename(source)
            title = _title_from_path(urlparse(source).path)

        elif os.path.isdir(source):
            print(f"[DIR] Rendering all Markdown files in: {source}")
            return self.render_directory(source, save=save)

        elif os.path.isfile(source):
            print(f"[MD] Rendering: {source}")
            md_text = _read_as_text(source)
            out_name = _file_to_html_name(source)
            title = _title_from_path(source)

        else:
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file path, directory, or URL."
            )

        html = self._to_html(md_text, title)
        if save:
            self._save(out_name, html)
        return html

    def render_directory(self, dir_path: str, save: bool = True) -> str:
        """Render every Markdown file in a directory."""
        results = []
        rendered_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path):
                continue

            _, ext = os.path.splitext(filename.lower())
            if ext not in self.MARKDOWN_EXTENSIONS:
                continue

            try:
                html = self._to_html(_read_as_text(file_path), _title_from_path(file_path))
            except (OSError, UnicodeError) as e:
                print(f"[ERROR] Failed to render {filename}: {e}", file=sys.stderr)
                continue

            if save:
                self._save(_file_to_html_name(file_path), html)
            results.append(html)
            rendered_count += 1

        print(
            f"[DIR] Rendered {rendered_count} file(s) from {dir_path} "
            f"at {datetime.now(timezone.utc).isoformat()}"
        )
        return "\n".join(results)

    def render_text(self, md_text: str, name: str, save: bool = True) -> str:
        """Render Markdown already in memory; name picks the title and output file."""
        html = self._to_html(md_text, _title_from_path(name))
        if save:
            self._save(_file_to_html_name(name), html)
        return html

    def _to_html(self, md_text: str, title: str) -> str:
        body = convert(md_text)
        if self.standalone:
            return render_document(body, title=title)
        return body

    def _save(self, out_name: str, html: str) -> None:
        out_path = os.path.join(self.output_dir, out_name)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html)
        print(f"[SAVED] {out_path}")

    @staticmethod
    def supported_sources() -> dict:
        """Return a dictionary of all supported source kinds."""
        return {
            "Markdown files": sorted(Publisher.MARKDOWN_EXTENSIONS),
            "Directories": ["every .md / .markdown file inside"],
            "Web URLs": ["http://", "https://"],
        }


def _file_to_html_name(file_path: str) -> str:
    """Generate a .html filename from the source file."""
    name, _ = os.path.splitext(os.path.basename(file_path))
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    return f"{safe_name}.html"


def _url_to_filename(url: str) -> str:
    """Generate a .html filename from a URL."""
    parsed = urlparse(url)
    path = os.path.splitext(parsed.path.strip("/"))[0].replace("/", "_") or "index"
    domain = parsed.netloc.replace(".", "_")
    safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in f"{domain}_{path}")
    return f"{safe}.html"


def _title_from_path(path: str) -> str:
    name, _ = os.path.splitext(os.path.basename(unquote(path)))
    return name


def _read_as_text(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
