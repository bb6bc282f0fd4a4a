"""Tests for cratedocs.html_to_markdown module."""

from cratedocs.html_to_markdown import html_to_markdown


class TestHtmlToMarkdown:

    def test_headings_and_paragraphs(self):
        html = "<body><h1>serde</h1><h3>Design</h3><p>Serde is a framework.</p></body>"
        markdown = html_to_markdown(html)
        assert "# serde" in markdown
        assert "### Design" in markdown
        assert "Serde is a framework." in markdown

    def test_prefers_main_and_drops_chrome(self):
        html = (
            "<html><head><style>body { color: red }</style></head><body>"
            "<nav>Releases Docs.rs</nav>"
            "<main><p>Crate body</p></main>"
            "<footer>Hosted by Rust</footer>"
            "<script>track()</script></body></html>"
        )
        markdown = html_to_markdown(html)
        assert "Crate body" in markdown
        assert "Releases" not in markdown
        assert "Hosted by" not in markdown
        assert "track" not in markdown
        assert "color" not in markdown

    def test_code_blocks(self):
        html = "<main><pre>let x = 1;\nlet y = 2;</pre><p>Use <code>serde_json</code> here.</p></main>"
        markdown = html_to_markdown(html)
        assert "```rust\nlet x = 1;\nlet y = 2;\n```" in markdown
        assert "`serde_json`" in markdown

    def test_lists(self):
        html = "<main><ul><li>derive</li><li>std</li></ul><ol><li>first</li><li>second</li></ol></main>"
        markdown = html_to_markdown(html)
        assert "- derive\n- std" in markdown
        assert "1. first\n2. second" in markdown

    def test_links(self):
        html = '<main><p>See <a href="https://serde.rs/">the guide</a> or <a href="#top">top</a>.</p></main>'
        markdown = html_to_markdown(html)
        assert "[the guide](https://serde.rs/)" in markdown
        assert "(#top)" not in markdown

    def test_no_tags_survive(self):
        html = "<html><body><div class='docblock'><h2>Title</h2><table><tr><td>a</td><td>b</td></tr></table></div></body></html>"
        markdown = html_to_markdown(html)
        assert "<" not in markdown
        assert ">" not in markdown

    def test_empty_document(self):
        assert html_to_markdown("") == ""
