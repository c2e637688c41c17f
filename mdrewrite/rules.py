"""
Rewrite rules for the Markdown-to-HTML engine.

Each rule is a compiled pattern plus a replacement, applied globally to
the whole working buffer. The order of RULES is significant: bold must
run before italic, and list items must exist before they are grouped.
"""

import re
from dataclasses import dataclass
from typing import Callable, Union

Replacement = Union[str, Callable[[re.Match], str]]

# Line-anchored rules end before "\r" so CRLF input keeps its line breaks
# outside the generated tags.
LINE_END = r"(?=\r?$)"


@dataclass(frozen=True)
class Rule:
    """A single pattern/replacement pair."""
    name: str
    pattern: re.Pattern
    replacement: Replacement

    def apply(self, text: str) -> str:
        """Rewrite every match of this rule in text."""
        return self.pattern.sub(self.replacement, text)


def _heading(match: re.Match) -> str:
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


HEADING = Rule("heading", re.compile(r"^(#{1,6})\s+(.+?)" + LINE_END, re.MULTILINE), _heading)
BOLD = Rule("bold", re.compile(r"\*\*(.*?)\*\*"), r"<strong>\g<1></strong>")
ITALIC = Rule("italic", re.compile(r"\*(.*?)\*"), r"<em>\g<1></em>")
CODE = Rule("code", re.compile(r"`(.*?)`"), r"<code>\g<1></code>")
LINK = Rule(
    "link",
    re.compile(r"\[(.*?)\]\((.*?)\)"),
    r'<a href="\g<2>" target="_blank">\g<1></a>',
)
LIST_ITEM = Rule("list_item", re.compile(r"^[-*]\s+(.+?)" + LINE_END, re.MULTILINE), r"<li>\g<1></li>")
# Only byte-adjacent items share a <ul>; a newline between them starts a new list.
LIST_GROUP = Rule("list_group", re.compile(r"(?:<li>.*?</li>)+"), r"<ul>\g<0></ul>")
BLOCKQUOTE = Rule(
    "blockquote",
    re.compile(r"^>\s+(.+?)" + LINE_END, re.MULTILINE),
    r"<blockquote>\g<1></blockquote>",
)
HORIZONTAL_RULE = Rule("horizontal_rule", re.compile(r"^---" + LINE_END, re.MULTILINE), "<hr>")

RULES: tuple[Rule, ...] = (
    HEADING,
    BOLD,
    ITALIC,
    CODE,
    LINK,
    LIST_ITEM,
    LIST_GROUP,
    BLOCKQUOTE,
    HORIZONTAL_RULE,
)

# Segments starting with one of these are not wrapped in <p>.
BLOCK_TAG_PREFIXES = ("<h", "<ul", "<blockquote", "<hr")

PARAGRAPH_SEPARATOR = "\n\n"


def get_rule(name: str) -> Rule:
    """Look up a rule in RULES by name."""
    for rule in RULES:
        if rule.name == name:
            return rule
    raise KeyError(f"Unknown rule: {name}")
