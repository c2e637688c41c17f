"""
Markdown-to-HTML rewrite engine.

Converts a restricted Markdown dialect to HTML by threading a single
text buffer through an ordered table of regex rewrites, then splitting
the result into paragraphs. There is no parse tree: every rule sees the
buffer exactly as the previous rule left it.
"""

from html import escape
from typing import Optional

from .rules import BLOCK_TAG_PREFIXES, PARAGRAPH_SEPARATOR, RULES, Rule


class MarkdownConverter:
    """
    Applies a fixed sequence of rewrite rules to Markdown text.

    Instances hold only the (immutable) rule table, so one converter can
    be shared freely between callers and threads.
    """

    def __init__(self, rules: Optional[tuple[Rule, ...]] = None):
        """
        Initialize the converter.

        Args:
            rules: Rules to apply, in order. Defaults to the standard table.
        """
        self.rules = tuple(rules) if rules is not None else RULES

    def convert(self, markdown_text: str) -> str:
        """
        Convert Markdown text to HTML.

        Never raises for string input: text no rule matches is passed
        through unchanged, including unmatched delimiters.

        Args:
            markdown_text: The Markdown source.

        Returns:
            The HTML string.
        """
        buffer = markdown_text
        for rule in self.rules:
            buffer = rule.apply(buffer)
        return segment_paragraphs(buffer)


def segment_paragraphs(text: str) -> str:
    """
    Wrap blank-line separated segments in <p> unless they already start
    with a block-level tag. Segments are re-joined with a single newline.
    """
    segments = []
    for segment in text.split(PARAGRAPH_SEPARATOR):
        if segment.strip() and not segment.startswith(BLOCK_TAG_PREFIXES):
            segments.append(f"<p>{segment}</p>")
        else:
            segments.append(segment)
    return "\n".join(segments)


_default_converter = MarkdownConverter()


def convert(markdown_text: str) -> str:
    """Convert Markdown text to HTML with the standard rule table."""
    return _default_converter.convert(markdown_text)


def render_document(body_html: str, title: str = "") -> str:
    """Wrap converted HTML in a minimal standalone page."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{body_html}\n"
        "</body>\n"
        "</html>\n"
    )
