"""
HTML parser that turns raw markup (or plain text) into a ParsedContent.

parse() never raises: anything it cannot make sense of degrades to
ParsedContent.empty(), which downstream engines treat as "no content".
"""
from __future__ import annotations

import html as html_lib
import logging
import re
from typing import Optional
from urllib.parse import urlparse

import tldextract
from bs4 import BeautifulSoup, Comment

from models import (
    ImageInfo,
    LinkInfo,
    LinkType,
    MetaTags,
    ParsedContent,
    StructuralElements,
)

logger = logging.getLogger(__name__)

_MARKUP_RE = re.compile(r"<[a-zA-Z!/][^>]*>")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

_NON_TEXT_TAGS = ["script", "style", "noscript", "template"]
_LANDMARKS = ("nav", "header", "footer", "main", "article")

# Offline extractor: uses the suffix list snapshot bundled with tldextract
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def parse(html: str, page_url: str = "") -> ParsedContent:
    """
    Parse html into a ParsedContent.
    page_url, when given, lets absolute links on the same site count as internal.
    """
    if not isinstance(html, str) or not html.strip():
        return ParsedContent.empty()

    if not _MARKUP_RE.search(html):
        return _parse_plain_text(html)

    try:
        try:
            soup = BeautifulSoup(html, "lxml")
        except Exception:
            soup = BeautifulSoup(html, "html.parser")

        content = ParsedContent(html=html)
        content.meta_tags = _parse_meta_tags(soup)
        content.structural_elements = _parse_structure(soup)
        content.headings = _parse_headings(soup)
        content.images = _parse_images(soup)
        content.links = _parse_links(soup, page_url)
        content.paragraphs = _parse_paragraphs(soup)
        _parse_text(soup, content)
        return content
    except Exception:
        logger.warning("Could not parse HTML content, using empty result", exc_info=True)
        return ParsedContent.empty(html)


def strip_html_tags(html: str) -> str:
    """Regex tag stripper used when structural parsing yields no text."""
    if not html:
        return ""
    text = _SCRIPT_STYLE_RE.sub(" ", html)
    text = _COMMENT_RE.sub(" ", text)
    text = _TAG_RE.sub(" ", text)
    text = html_lib.unescape(text)
    return _WS_RE.sub(" ", text).strip()


# ── Plain text ────────────────────────────────────────────────────────────────

def _parse_plain_text(raw: str) -> ParsedContent:
    text = _WS_RE.sub(" ", html_lib.unescape(raw)).strip()
    return ParsedContent(
        text=text,
        html=raw,
        word_count=len(text.split()) if text else 0,
        character_count=len(text),
    )


# ── Meta ──────────────────────────────────────────────────────────────────────

def _parse_meta_tags(soup: BeautifulSoup) -> MetaTags:
    tags = MetaTags()

    for meta in soup.find_all("meta"):
        name = (meta.get("name") or "").lower().strip()
        http_equiv = (meta.get("http-equiv") or "").lower().strip()
        content = meta.get("content")

        if meta.get("charset") and tags.charset is None:
            tags.charset = meta["charset"].strip()
        elif http_equiv == "content-type" and content and tags.charset is None:
            match = re.search(r"charset=([\w-]+)", content, re.IGNORECASE)
            if match:
                tags.charset = match.group(1)

        if content is None:
            continue
        if name == "viewport" and tags.viewport is None:
            tags.viewport = content
        elif name == "robots" and tags.robots is None:
            tags.robots = content

    canonical_tag = soup.find("link", rel=lambda r: r and "canonical" in (r if isinstance(r, list) else [r]))
    if canonical_tag and canonical_tag.get("href"):
        tags.canonical = canonical_tag["href"].strip()

    html_tag = soup.find("html")
    if html_tag and html_tag.get("lang"):
        tags.language = html_tag["lang"].strip()

    return tags


def _parse_structure(soup: BeautifulSoup) -> StructuralElements:
    present = {name: soup.find(name) is not None for name in _LANDMARKS}
    return StructuralElements(
        has_nav=present["nav"],
        has_header=present["header"],
        has_footer=present["footer"],
        has_main=present["main"],
        has_article=present["article"],
        semantic_score=sum(present.values()),
    )


# ── Headings ──────────────────────────────────────────────────────────────────

def _parse_headings(soup: BeautifulSoup) -> dict[int, list[str]]:
    headings: dict[int, list[str]] = {}
    for level in range(1, 7):
        headings[level] = [
            text for text in (tag.get_text(" ", strip=True) for tag in soup.find_all(f"h{level}"))
            if text
        ]
    return headings


# ── Images ────────────────────────────────────────────────────────────────────

def _parse_images(soup: BeautifulSoup) -> list[ImageInfo]:
    images: list[ImageInfo] = []
    for img in soup.find_all("img"):
        src = (img.get("src") or "").strip()
        if not src:
            continue
        alt = img.get("alt") or ""
        title = img.get("title") or ""
        images.append(ImageInfo(
            src=src,
            alt=alt,
            title=title,
            has_alt=bool(alt.strip()),
            has_title=bool(title.strip()),
        ))
    return images


# ── Links ─────────────────────────────────────────────────────────────────────

def _parse_links(soup: BeautifulSoup, page_url: str) -> list[LinkInfo]:
    site_domain = _registered_domain(page_url) if page_url else None
    links: list[LinkInfo] = []

    for a_tag in soup.find_all("a", href=True):
        href = a_tag.get("href", "").strip()
        rel = " ".join(a_tag.get("rel", [])) if isinstance(a_tag.get("rel"), list) else str(a_tag.get("rel", ""))
        text = a_tag.get_text(" ", strip=True)

        links.append(LinkInfo(
            href=href,
            text=text,
            rel=rel,
            type=_link_type(href, site_domain),
            has_text=bool(text),
        ))
    return links


def _link_type(href: str, site_domain: Optional[str]) -> str:
    lowered = href.lower()
    if lowered.startswith(("http://", "https://")):
        if site_domain and _registered_domain(href) == site_domain:
            return LinkType.INTERNAL
        return LinkType.EXTERNAL
    if lowered.startswith("mailto:"):
        return LinkType.EMAIL
    if lowered.startswith("tel:"):
        return LinkType.PHONE
    if lowered.startswith("#"):
        return LinkType.ANCHOR
    return LinkType.INTERNAL


def _registered_domain(url: str) -> Optional[str]:
    netloc = urlparse(url).netloc or url
    ext = _EXTRACT(netloc)
    if not ext.domain:
        return None
    return f"{ext.domain}.{ext.suffix}" if ext.suffix else ext.domain


# ── Content ───────────────────────────────────────────────────────────────────

def _parse_paragraphs(soup: BeautifulSoup) -> list[str]:
    paragraphs = []
    for p in soup.find_all("p"):
        text = _WS_RE.sub(" ", p.get_text(" ", strip=True)).strip()
        if text:
            paragraphs.append(text)
    return paragraphs


def _parse_text(soup: BeautifulSoup, content: ParsedContent) -> None:
    for tag in soup(_NON_TEXT_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    # <title> text is metadata, not body copy
    head = soup.find("head")
    if head:
        head.decompose()

    text = _WS_RE.sub(" ", soup.get_text(separator=" ")).strip()
    content.text = text
    content.word_count = len(text.split()) if text else 0
    content.character_count = len(text)
