"""
Tests for parsing.html_parser
"""

from models import LinkType, ParsedContent
from parsing.html_parser import parse, strip_html_tags


class TestParseEmpty:
    """Input that cannot be parsed degrades to the empty shape"""

    def test_empty_string(self):
        """Empty input gives zero counts and all six heading levels"""
        parsed = parse("")
        assert parsed.word_count == 0
        assert parsed.text == ""
        assert sorted(parsed.headings) == [1, 2, 3, 4, 5, 6]
        assert all(v == [] for v in parsed.headings.values())

    def test_non_string(self):
        """None is treated like empty input"""
        assert parse(None) == ParsedContent.empty()

    def test_whitespace_only(self):
        """Whitespace is not content"""
        assert parse("   \n\t ").word_count == 0


class TestParsePlainText:
    """Markup-free input is read as plain text"""

    def test_word_count(self):
        """Words are counted on collapsed whitespace"""
        parsed = parse("Just   some plain\nwords here")
        assert parsed.text == "Just some plain words here"
        assert parsed.word_count == 5
        assert parsed.character_count == len("Just some plain words here")

    def test_no_structure(self):
        """Plain text has no paragraphs, images or links"""
        parsed = parse("Just some plain words here")
        assert parsed.paragraphs == []
        assert parsed.images == []
        assert parsed.links == []

    def test_entities_unescaped(self):
        """HTML entities in plain text are decoded"""
        assert parse("Fish &amp; chips").text == "Fish & chips"


class TestParseRichPage:
    """A fully marked-up article"""

    def test_headings(self, rich_page):
        """Headings are grouped by level in document order"""
        parsed = parse(rich_page)
        assert parsed.headings[1] == ["Coffee brewing at home"]
        assert parsed.headings[2] == ["Choosing beans", "Grinding and brewing"]
        assert parsed.headings[3] == []

    def test_images(self, rich_page):
        """Image alt text is captured"""
        parsed = parse(rich_page)
        assert len(parsed.images) == 1
        assert parsed.images[0].src == "/images/fresh-coffee-beans.jpg"
        assert parsed.images[0].has_alt is True

    def test_meta_tags(self, rich_page):
        """Head tags land on MetaTags"""
        meta = parse(rich_page).meta_tags
        assert meta.charset == "utf-8"
        assert meta.viewport == "width=device-width, initial-scale=1.0"
        assert meta.canonical == "https://example.com/guides/coffee-brewing"
        assert meta.robots == "index, follow"
        assert meta.language == "en"

    def test_structural_elements(self, rich_page):
        """All five landmarks are detected"""
        structure = parse(rich_page).structural_elements
        assert structure.has_header and structure.has_nav and structure.has_main
        assert structure.has_article and structure.has_footer
        assert structure.semantic_score == 5

    def test_paragraphs(self, rich_page):
        """Every non-empty <p> is a paragraph"""
        parsed = parse(rich_page)
        assert len(parsed.paragraphs) == 4
        assert parsed.paragraphs[-1] == "Written by the editorial team."

    def test_body_text_only(self, rich_page):
        """Title and script contents are not body text"""
        parsed = parse(rich_page)
        assert "Coffee brewing at home" in parsed.text
        assert "Coffee Brewing Guide" not in parsed.text
        assert "@context" not in parsed.text
        assert parsed.word_count == len(parsed.text.split())

    def test_link_types_with_page_url(self, rich_page):
        """Relative links are internal, other sites external"""
        parsed = parse(rich_page, "https://example.com/guides/coffee-brewing")
        assert [link.type for link in parsed.links] == [
            LinkType.INTERNAL, LinkType.INTERNAL, LinkType.EXTERNAL,
        ]
        assert all(link.has_text for link in parsed.links)


class TestLinkClassification:
    """Link types from the href scheme and the page's registered domain"""

    def test_special_schemes(self):
        """mailto, tel and fragment links get their own types"""
        parsed = parse(
            '<p><a href="mailto:team@example.com">Mail us</a>'
            '<a href="tel:+3021000000">Call us</a>'
            '<a href="#top">Back to top</a></p>'
        )
        assert [link.type for link in parsed.links] == [
            LinkType.EMAIL, LinkType.PHONE, LinkType.ANCHOR,
        ]

    def test_subdomain_is_internal(self):
        """A subdomain of the page's site counts as internal"""
        parsed = parse('<p><a href="https://blog.example.com/post">Blog post</a></p>', "https://example.com/")
        assert parsed.links[0].type == LinkType.INTERNAL

    def test_absolute_without_page_url(self):
        """Absolute links are external when the page URL is unknown"""
        parsed = parse('<p><a href="https://example.com/post">Blog post</a></p>')
        assert parsed.links[0].type == LinkType.EXTERNAL

    def test_empty_link_text(self):
        """Image-only links have no text"""
        parsed = parse('<p><a href="/x"><img src="logo.png"></a></p>')
        assert parsed.links[0].has_text is False


class TestStripHtmlTags:

    def test_strips_scripts_and_tags(self):
        """Script bodies and tags go, entities are decoded"""
        assert strip_html_tags("<p>Fish &amp; chips</p><script>track()</script>") == "Fish & chips"

    def test_empty(self):
        assert strip_html_tags("") == ""
