"""
mdrewrite - Ordered-Rewrite Markdown-to-HTML Converter

Turns a small Markdown dialect (headings, emphasis, inline code, links,
flat lists, blockquotes, horizontal rules, paragraphs) into HTML with a
fixed table of regex rewrites. No parse tree, no HTML escaping: what the
rules do not match passes through untouched.
"""

from .engine import MarkdownConverter, convert

__version__ = "1.0.0"

__all__ = ["MarkdownConverter", "convert"]
