"""
Unit tests for the help text renderer.
"""
import unittest

from edutainment.constants.about import HELP_MARKDOWN
from edutainment.core.markdown_renderer import MarkdownRenderer, renderer


class TestMarkdownRenderer(unittest.TestCase):
    """Test cases for MarkdownRenderer."""

    def test_help_text_renders_to_html(self):
        html = renderer.render_fragment(HELP_MARKDOWN)
        self.assertIn("<h2>How to play</h2>", html)
        self.assertIn("<strong>Start Game</strong>", html)
        self.assertIn("<ol>", html)
        self.assertIn("<code>4 × 7</code>", html)

    def test_empty_text_renders_placeholder(self):
        self.assertEqual(
            MarkdownRenderer().render_fragment("   "),
            "<p><em>No content provided.</em></p>",
        )

    def test_raw_html_is_escaped_by_default(self):
        html = MarkdownRenderer().render_fragment("<b>bold</b>")
        self.assertNotIn("<b>", html)


if __name__ == "__main__":
    unittest.main()
