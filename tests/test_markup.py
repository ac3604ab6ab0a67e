"""Tests for the line-based markdown renderer."""

from __future__ import annotations

from relay.core.markup import render, render_inline


class TestInline:
    def test_bold_and_italic(self):
        assert render("**bold** and *italic*") == "<strong>bold</strong> and <em>italic</em>"

    def test_bold_is_applied_before_italic(self):
        # Asterisks consumed by bold are not seen again by italic.
        assert render_inline("**a** b*") == "<strong>a</strong> b*"

    def test_non_greedy_pairs(self):
        assert render_inline("*a* b *c*") == "<em>a</em> b <em>c</em>"

    def test_unpaired_asterisk_is_kept(self):
        assert render_inline("2 * 3") == "2 * 3"

    def test_literal_html_is_escaped(self):
        assert render_inline("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;"
        )

    def test_escaped_text_inside_bold(self):
        assert render_inline("**<b>**") == "<strong>&lt;b&gt;</strong>"


class TestLines:
    def test_empty_input(self):
        assert render("") == ""

    def test_plain_lines_get_breaks_except_last(self):
        assert render("one\ntwo\nthree") == "one<br>two<br>three"

    def test_trailing_newline_leaves_one_break(self):
        assert render("one\n") == "one<br>"

    def test_whitespace_only_line_keeps_break(self):
        assert render("a\n   \nb") == "a<br>   <br>b"

    def test_horizontal_rule(self):
        assert render("---") == "<hr>"

    def test_rule_with_surrounding_whitespace(self):
        assert render("a\n  ---  \nb") == "a<br><hr>b"

    def test_longer_dashes_are_text(self):
        assert render("----") == "----"


class TestLists:
    def test_unterminated_list_is_closed(self):
        assert render("* a\n* b") == "<ul><li>a</li><li>b</li></ul>"

    def test_dash_marker(self):
        assert render("- a\n- b") == "<ul><li>a</li><li>b</li></ul>"

    def test_list_closed_by_text(self):
        assert render("Intro\n* a\n* b\nOutro") == "Intro<br><ul><li>a</li><li>b</li></ul>Outro"

    def test_list_closed_by_rule(self):
        assert render("* a\n---") == "<ul><li>a</li></ul><hr>"

    def test_indented_marker(self):
        assert render("   * a") == "<ul><li>a</li></ul>"

    def test_marker_requires_space(self):
        assert render("*not a list") == "*not a list"

    def test_inline_inside_item(self):
        assert render("* **have** an *apple*") == (
            "<ul><li><strong>have</strong> an <em>apple</em></li></ul>"
        )

    def test_structure_uses_source_line(self):
        assert render("* a *b*") == "<ul><li>a <em>b</em></li></ul>"

    def test_item_text_is_escaped(self):
        assert render("- <img src=x>") == "<ul><li>&lt;img src=x&gt;</li></ul>"

    def test_blank_line_splits_lists(self):
        assert render("* a\n\n* b") == "<ul><li>a</li></ul><br><ul><li>b</li></ul>"

    def test_state_is_not_shared_between_calls(self):
        render("* open")
        assert render("text") == "text"
