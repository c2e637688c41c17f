"""
Unit tests for the rewrite rule table.
"""

import dataclasses

import pytest

from mdrewrite.rules import (
    BLOCK_TAG_PREFIXES,
    BLOCKQUOTE,
    BOLD,
    CODE,
    HEADING,
    HORIZONTAL_RULE,
    ITALIC,
    LINK,
    LIST_GROUP,
    LIST_ITEM,
    RULES,
    get_rule,
)


class TestRuleTable:
    """Tests for the ordered RULES tuple."""

    def test_rule_order(self):
        """Test that rules run in the documented order."""
        assert [rule.name for rule in RULES] == [
            "heading",
            "bold",
            "italic",
            "code",
            "link",
            "list_item",
            "list_group",
            "blockquote",
            "horizontal_rule",
        ]

    def test_bold_runs_before_italic(self):
        """Test that bold is applied before italic."""
        assert RULES.index(BOLD) < RULES.index(ITALIC)

    def test_rules_are_immutable(self):
        """Test that rules cannot be modified after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            BOLD.replacement = "<b>\\1</b>"

    def test_table_is_a_tuple(self):
        """Test that the rule table itself cannot be mutated."""
        assert isinstance(RULES, tuple)

    def test_get_rule(self):
        """Test looking up a rule by name."""
        assert get_rule("link") is LINK

    def test_get_unknown_rule_raises(self):
        """Test that an unknown rule name raises KeyError."""
        with pytest.raises(KeyError, match="Unknown rule"):
            get_rule("table")

    def test_block_tag_prefixes(self):
        """Test the prefixes that exempt a segment from paragraph wrapping."""
        assert BLOCK_TAG_PREFIXES == ("<h", "<ul", "<blockquote", "<hr")


class TestHeadingRule:
    """Tests for the heading rule."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level):
        """Test that the number of hashes picks the heading level."""
        text = "#" * level + " Title"
        assert HEADING.apply(text) == f"<h{level}>Title</h{level}>"

    def test_seven_hashes_is_not_a_heading(self):
        """Test that more than six hashes is left alone."""
        assert HEADING.apply("####### Title") == "####### Title"

    def test_hash_without_space_is_not_a_heading(self):
        """Test that a hash must be followed by whitespace."""
        assert HEADING.apply("#hashtag") == "#hashtag"

    def test_heading_applies_per_line(self):
        """Test that only lines starting with hashes are rewritten."""
        assert HEADING.apply("intro\n## Sub\ntext # not") == "intro\n<h2>Sub</h2>\ntext # not"

    def test_heading_whitespace_can_span_lines(self):
        """Test that the whitespace after the hashes may include a newline."""
        assert HEADING.apply("#\nfoo") == "<h1>foo</h1>"


class TestInlineRules:
    """Tests for bold, italic, code and link rules applied on their own."""

    def test_bold_is_non_greedy(self):
        """Test that each bold span ends at the nearest closing pair."""
        assert BOLD.apply("**a** and **b**") == "<strong>a</strong> and <strong>b</strong>"

    def test_italic_is_non_greedy(self):
        """Test that each italic span ends at the nearest asterisk."""
        assert ITALIC.apply("*a* *b*") == "<em>a</em> <em>b</em>"

    def test_italic_does_not_cross_lines(self):
        """Test that italic spans are confined to one line."""
        assert ITALIC.apply("*a\nb*") == "*a\nb*"

    def test_code_span(self):
        """Test inline code rewriting."""
        assert CODE.apply("use `ls -la` here") == "use <code>ls -la</code> here"

    def test_link_opens_new_context(self):
        """Test that links always get target=_blank and no rel attribute."""
        result = LINK.apply("[home](https://example.com)")
        assert result == '<a href="https://example.com" target="_blank">home</a>'
        assert "rel=" not in result

    def test_link_keeps_backslashes_literal(self):
        """Test that replacement templates do not reinterpret group text."""
        assert LINK.apply(r"[a\1](c:\dir)") == r'<a href="c:\dir" target="_blank">a\1</a>'


class TestListRules:
    """Tests for list item and list grouping rules."""

    def test_dash_and_star_items(self):
        """Test that both dash and star start a list item."""
        assert LIST_ITEM.apply("- a\n* b") == "<li>a</li>\n<li>b</li>"

    def test_dash_without_space_is_not_an_item(self):
        """Test that a dash must be followed by whitespace."""
        assert LIST_ITEM.apply("-a") == "-a"

    def test_adjacent_items_share_one_list(self):
        """Test that byte-adjacent items are wrapped together."""
        assert LIST_GROUP.apply("<li>a</li><li>b</li>") == "<ul><li>a</li><li>b</li></ul>"

    def test_newline_separates_lists(self):
        """Test that a newline between items starts a new list."""
        assert LIST_GROUP.apply("<li>a</li>\n<li>b</li>") == "<ul><li>a</li></ul>\n<ul><li>b</li></ul>"

    def test_any_character_separates_lists(self):
        """Test that any intervening character splits the run."""
        assert LIST_GROUP.apply("<li>a</li> <li>b</li>") == "<ul><li>a</li></ul> <ul><li>b</li></ul>"


class TestBlockRules:
    """Tests for blockquote and horizontal rule."""

    def test_blockquote_per_line(self):
        """Test that each quoted line becomes its own blockquote."""
        assert BLOCKQUOTE.apply("> a\n> b") == "<blockquote>a</blockquote>\n<blockquote>b</blockquote>"

    def test_blockquote_needs_space(self):
        """Test that a bare > is not a blockquote."""
        assert BLOCKQUOTE.apply(">a") == ">a"

    def test_horizontal_rule_exact(self):
        """Test that only a line of exactly three dashes is a rule."""
        assert HORIZONTAL_RULE.apply("---") == "<hr>"
        assert HORIZONTAL_RULE.apply("----") == "----"
        assert HORIZONTAL_RULE.apply("--- ") == "--- "
        assert HORIZONTAL_RULE.apply("a\n---\nb") == "a\n<hr>\nb"
