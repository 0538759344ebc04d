"""
Shared fixtures for the analyzer tests.

- Sample pages: a bare fragment and a fully marked-up article
- Sample prose in English and Greek for the readability engine
- A factory that builds SEOContent the way SEOAnalyzer does
"""

import pytest

from models import SEOContent
from parsing.html_parser import parse

RICH_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://example.com/guides/coffee-brewing">
  <title>Coffee Brewing Guide</title>
  <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Article"}</script>
</head>
<body>
  <header>
    <nav><a href="/">Home page</a> <a href="/guides">All guides</a></nav>
  </header>
  <main>
    <article>
      <h1>Coffee brewing at home</h1>
      <p>Coffee brewing at home is simple once you learn a few habits. Fresh beans, clean water and a steady routine do most of the work.</p>
      <h2>Choosing beans</h2>
      <p>Buy whole beans from a local roaster and use them within a month. Store them in a dark jar away from heat.</p>
      <img src="/images/fresh-coffee-beans.jpg" alt="Fresh coffee beans in a glass jar">
      <h2>Grinding and brewing</h2>
      <ul><li>Grind right before brewing.</li><li>Use water just off the boil.</li></ul>
      <p>Read the <a href="https://sca.coffee/research">coffee research library</a> for brew ratios that suit your taste.</p>
    </article>
  </main>
  <footer><p>Written by the editorial team.</p></footer>
</body>
</html>"""

SIMPLE_PAGE = (
    "<p>This is a short paragraph about search engines.</p>"
    '<img src="a.jpg"><img src="b.jpg">'
)

ENGLISH_TEXT = (
    "Good writing helps readers find answers fast. "
    "Short sentences keep attention on the main idea. "
    "Clear headings guide people through a long page. "
    "Simple words make the text easier to scan on a phone. "
    "Each paragraph should focus on one point only. "
    "Readers leave pages that feel slow or confusing, so keep the pace steady "
    "and the language plain for everyone who visits."
)

GREEK_TEXT = (
    "Η ανάλυση κειμένου είναι χρήσιμη. "
    "Οι σύντομες προτάσεις βοηθούν τον αναγνώστη. "
    "Το κείμενο πρέπει να είναι σαφές."
)


@pytest.fixture
def rich_page():
    return RICH_PAGE


@pytest.fixture
def simple_page():
    return SIMPLE_PAGE


@pytest.fixture
def english_text():
    return ENGLISH_TEXT


@pytest.fixture
def greek_text():
    return GREEK_TEXT


@pytest.fixture
def make_content():
    """Factory for SEOContent built from markup, the way the analyzer builds it."""
    def _make(html: str = "", url: str = "", **fields) -> SEOContent:
        return SEOContent(html=html, url=url, parsed=parse(html, url), **fields)
    return _make
