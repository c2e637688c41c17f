#!/usr/bin/env python3
"""
mdrewrite CLI

Command-line interface for rendering Markdown to HTML and for browsing
a content site's articles and resource files.

Usage:
    python -m mdrewrite <source> [options]
    python -m mdrewrite notes.md
    python -m mdrewrite https://example.com/article/post.md
    python -m mdrewrite ./articles/                    # render all .md files in directory
    python -m mdrewrite --base https://example.com --catalog catalog.json --articles
    python -m mdrewrite --base ./site --download tools.zip

Options:
    -o, --output DIR     Output directory (default: ./mdrewrite_output)
    --stdout             Print to stdout instead of saving files
    --standalone         Wrap output in a complete HTML page
    --formats            Show all supported sources
"""

import argparse
import sys

from .content import CatalogError, ContentSource, load_catalog, open_backend
from .content.backends import ContentSourceError, HttpBackend
from .core import Publisher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdrewrite",
        description=(
            "Ordered-Rewrite Markdown-to-HTML Converter\n\n"
            "Renders headings, emphasis, inline code, links, lists, blockquotes\n"
            "and horizontal rules to HTML, and lists or downloads the articles\n"
            "and files published on a content site."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mdrewrite notes.md\n"
            "  mdrewrite ./articles/ --standalone                    # whole directory\n"
            "  mdrewrite notes.md --stdout                           # print to terminal\n"
            "  mdrewrite --base https://example.com --catalog catalog.json --articles\n"
            "  mdrewrite --base https://example.com --catalog catalog.json --article post.md --stdout\n"
            "  mdrewrite --base ./site --download tools.zip -o ./downloads\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Markdown files, directories, or URLs to render",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./mdrewrite_output)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print HTML to stdout instead of saving to files",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap each rendered document in a complete HTML page",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=HttpBackend.DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {HttpBackend.DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported sources and exit",
    )

    site = parser.add_argument_group("content site")
    site.add_argument("--base", help="Base URL or directory of the content site")
    site.add_argument("--catalog", help="JSON file listing candidate articles and resources")
    site.add_argument("--articles", action="store_true", help="List available articles")
    site.add_argument("--resources", action="store_true", help="List available resource files")
    site.add_argument("--article", metavar="NAME", help="Render one article from the site")
    site.add_argument("--download", metavar="NAME", help="Download one resource file")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.formats:
        _show_formats()
        return

    site_action = args.articles or args.resources or args.article or args.download
    if site_action:
        if not args.base:
            parser.error("--base is required for --articles, --resources, --article and --download")
        sys.exit(_run_site(args))

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files, directories, or URLs to render.")
        sys.exit(1)

    sys.exit(_run_render(args))


def _run_render(args) -> int:
    engine = Publisher(output_dir=args.output, standalone=args.standalone, timeout=args.timeout)
    save = not args.stdout

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            html = engine.render(source, save=save)
            if args.stdout:
                print(html)
            success_count += 1
        except (ValueError, OSError, ContentSourceError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print("-" * 60, file=sys.stderr)
    print(f"  Done: {success_count} rendered, {error_count} errors", file=sys.stderr)
    if save:
        print(f"  Output: {engine.output_dir}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)

    return 1 if error_count else 0


def _run_site(args) -> int:
    try:
        backend = open_backend(args.base, timeout=args.timeout)
        catalog = load_catalog(args.catalog)
    except (ValueError, CatalogError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    source = ContentSource(backend, catalog)
    status = 0

    if args.articles:
        articles = source.list_articles()
        print(f"\nArticles ({len(articles)}):")
        for entry in articles:
            print(f"  {entry.date}  [{entry.category}]  {entry.title}")

    if args.resources:
        resources = source.list_resources()
        print(f"\nResources ({len(resources)}):")
        for entry in resources:
            print(f"  {entry.filename}  {entry.size}  {entry.date}  {entry.description}")

    if args.article:
        result = source.read(source.article_path(args.article))
        if not result.success:
            print(f"[ERROR] {result.message}", file=sys.stderr)
            status = 1
        else:
            engine = Publisher(output_dir=args.output, standalone=args.standalone, timeout=args.timeout)
            html = engine.render_text(result.content, args.article, save=not args.stdout)
            if args.stdout:
                print(html)

    if args.download:
        result = source.download(args.download, args.output or ".")
        if not result.success:
            status = 1

    return status


def _show_formats():
    """Display all supported sources."""
    formats = Publisher.supported_sources()
    print("\nSupported Sources:")
    print("-" * 40)
    for category, entries in formats.items():
        print(f"\n  {category}:")
        for entry in entries:
            print(f"    {entry}")
    print()


if __name__ == "__main__":
    main()
