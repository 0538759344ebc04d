"""
Technical rules: links, images, URL shape, head tags, markup and page size.

URL rules pass with an explanatory message when no URL was supplied.
"""
from __future__ import annotations

import re

from config import (
    BROKEN_HREFS,
    GENERIC_ANCHORS,
    MAX_PAGE_SIZE_KB,
    MAX_URL_DEPTH,
    MAX_URL_PARAMS,
    MAX_URL_PATH_CHARS,
    MIN_ANCHOR_CHARS,
    MIN_SEMANTIC_SCORE,
    WARN_PAGE_SIZE_KB,
    WARN_URL_DEPTH,
    WARN_URL_PATH_CHARS,
)
from models import Category, LinkType, RuleCheckResult, SEOContent, SEORule, Severity
from scoring.scorer import round_half_up

_ORIGIN_RE = re.compile(r"^https?://[^/]+", re.IGNORECASE)
_GENERIC_FILENAME_RE = re.compile(r"^(img|image|photo|pic|picture|dsc|screenshot)\d*$", re.IGNORECASE)
_DIGITS_RE = re.compile(r"^\d+$")
_LONG_NUMBER_RE = re.compile(r"\d{5,}")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_PARAM_RE = re.compile(r"[?&]")


def _no_url() -> RuleCheckResult:
    return RuleCheckResult(passed=True, message="No URL provided for analysis")


def _url_path(url: str) -> str:
    return _ORIGIN_RE.sub("", url)


def _image_file_name(src: str) -> str:
    last = src.split("/")[-1]
    return last.split("?")[0].split(".")[0]


# ── Links ─────────────────────────────────────────────────────────────────────

def check_internal_links(content: SEOContent) -> RuleCheckResult:
    count = sum(1 for link in content.links if link.type == LinkType.INTERNAL)
    if count:
        return RuleCheckResult(passed=True, message=f"Found {count} internal link(s)")
    return RuleCheckResult(passed=False, message="No internal links found")


def check_external_links(content: SEOContent) -> RuleCheckResult:
    count = sum(1 for link in content.links if link.type == LinkType.EXTERNAL)
    if count:
        return RuleCheckResult(passed=True, message=f"Found {count} external link(s)")
    return RuleCheckResult(passed=False, message="No external links found", warning=True)


def check_anchor_text(content: SEOContent) -> RuleCheckResult:
    if not content.links:
        return RuleCheckResult(passed=True, message="No links found")

    poor = 0
    for link in content.links:
        text = (link.text or "").lower().strip()
        if not text or text in GENERIC_ANCHORS or len(text) < MIN_ANCHOR_CHARS:
            poor += 1

    if poor == 0:
        return RuleCheckResult(passed=True, message="All links have descriptive anchor text")
    return RuleCheckResult(passed=False, message=f"{poor} link(s) have poor anchor text")


def check_broken_links(content: SEOContent) -> RuleCheckResult:
    if not content.links:
        return RuleCheckResult(passed=True, message="No links to check")

    suspicious = sum(1 for link in content.links if (link.href or "") in BROKEN_HREFS)
    if suspicious == 0:
        return RuleCheckResult(passed=True, message="All links appear valid")
    return RuleCheckResult(passed=False, message=f"{suspicious} suspicious or empty link(s) found")


# ── Images ────────────────────────────────────────────────────────────────────

def check_image_file_names(content: SEOContent) -> RuleCheckResult:
    if not content.images:
        return RuleCheckResult(passed=True, message="No images found")

    generic = 0
    for img in content.images:
        name = _image_file_name(img.src or "")
        if _GENERIC_FILENAME_RE.match(name) or len(name) < 3 or _DIGITS_RE.match(name):
            generic += 1

    if generic == 0:
        return RuleCheckResult(passed=True, message="All images have descriptive file names")
    return RuleCheckResult(
        passed=False,
        message=f"{generic} image(s) have generic file names",
        warning=True,
    )


# ── Markup ────────────────────────────────────────────────────────────────────

def check_schema_markup(content: SEOContent) -> RuleCheckResult:
    html = content.html or ""
    found = []
    if "application/ld+json" in html:
        found.append("JSON-LD")
    if "itemscope" in html or "itemprop" in html:
        found.append("Microdata")
    if "vocab=" in html or "typeof=" in html:
        found.append("RDFa")

    if found:
        return RuleCheckResult(passed=True, message=f"Schema markup detected: {', '.join(found)}")
    return RuleCheckResult(passed=False, message="No schema markup detected", warning=True)


def check_semantic_html(content: SEOContent) -> RuleCheckResult:
    structure = content.structural_elements
    score = structure.semantic_score

    present = [
        name for name, flag in (
            ("header", structure.has_header),
            ("nav", structure.has_nav),
            ("main", structure.has_main),
            ("article", structure.has_article),
            ("footer", structure.has_footer),
        )
        if flag
    ]
    message = (
        f"Found semantic elements: {', '.join(present)} ({score}/5)"
        if present else "No semantic HTML5 elements found"
    )
    return RuleCheckResult(
        passed=score >= MIN_SEMANTIC_SCORE,
        message=message,
        warning=score < MIN_SEMANTIC_SCORE,
    )


def check_html_structure(content: SEOContent) -> RuleCheckResult:
    html = content.html or ""
    if not html:
        return RuleCheckResult(passed=True, message="No HTML content to validate")

    issues = [
        f"Missing <{tag}> tag"
        for tag in ("html", "head", "body", "title")
        if not re.search(rf"<{tag}[^>]*>", html, re.IGNORECASE)
    ]
    if not issues:
        return RuleCheckResult(passed=True, message="Basic HTML structure is valid")
    return RuleCheckResult(
        passed=False,
        message=f"Structure issues: {', '.join(issues)}",
        warning=True,
    )


def check_accessibility(content: SEOContent) -> RuleCheckResult:
    issues = []

    no_alt = sum(1 for img in content.images if not img.alt.strip())
    if no_alt:
        issues.append(f"{no_alt} image(s) without alt text")

    h1 = len(content.headings.get(1, []))
    if h1 == 0:
        issues.append("No H1 heading (required for screen readers)")
    elif h1 > 1:
        issues.append("Multiple H1 headings (should have only one)")

    empty_links = sum(1 for link in content.links if not (link.text or "").strip())
    if empty_links:
        issues.append(f"{empty_links} link(s) without text")

    if not issues:
        return RuleCheckResult(passed=True, message="Basic accessibility checks passed")
    return RuleCheckResult(
        passed=False,
        message=f"Accessibility issues: {', '.join(issues)}",
        warning=True,
    )


def check_page_size(content: SEOContent) -> RuleCheckResult:
    size_kb = round_half_up(len(content.html or "") / 1024, 1)
    return RuleCheckResult(
        passed=size_kb < MAX_PAGE_SIZE_KB,
        message=f"Estimated HTML size: {size_kb:g} KB",
        warning=size_kb > WARN_PAGE_SIZE_KB,
    )


# ── URL ───────────────────────────────────────────────────────────────────────

def check_url_length(content: SEOContent) -> RuleCheckResult:
    if not content.url:
        return _no_url()

    path = _url_path(content.url)
    message = "URL is root path" if not path else f"URL path length: {len(path)} characters"
    return RuleCheckResult(
        passed=len(path) <= MAX_URL_PATH_CHARS,
        message=message,
        warning=len(path) > WARN_URL_PATH_CHARS,
    )


def check_url_keywords(content: SEOContent) -> RuleCheckResult:
    if not content.url:
        return _no_url()
    if not content.keywords:
        return RuleCheckResult(passed=True, message="No target keywords defined")

    url = content.url.lower()
    found = [kw for kw in content.keywords if re.sub(r"\s+", "-", kw.lower()) in url]
    if found:
        return RuleCheckResult(passed=True, message=f"Found keyword(s) in URL: {', '.join(found)}")
    return RuleCheckResult(passed=False, message="No target keywords found in URL")


def check_url_structure(content: SEOContent) -> RuleCheckResult:
    url = content.url
    if not url:
        return _no_url()

    issues = []
    if "_" in url:
        issues.append("Contains underscores (use hyphens instead)")
    if "%20" in url:
        issues.append("Contains URL-encoded spaces")
    if _UPPERCASE_RE.search(url):
        issues.append("Contains uppercase letters")
    if "?" in url:
        params = len(_PARAM_RE.findall(url))
        if params > MAX_URL_PARAMS:
            issues.append(f"Too many URL parameters ({params})")
    if _LONG_NUMBER_RE.search(url):
        issues.append("Contains long number sequences")

    if not issues:
        return RuleCheckResult(passed=True, message="URL structure is clean and SEO-friendly")
    return RuleCheckResult(passed=False, message=f"URL issues: {', '.join(issues)}")


def check_url_depth(content: SEOContent) -> RuleCheckResult:
    if not content.url:
        return _no_url()

    depth = _url_path(content.url).count("/")
    return RuleCheckResult(
        passed=depth <= MAX_URL_DEPTH,
        message=f"URL depth: {depth} level(s)",
        warning=depth > WARN_URL_DEPTH,
    )


def check_https(content: SEOContent) -> RuleCheckResult:
    if not content.url:
        return RuleCheckResult(passed=True, message="No URL provided for protocol check")

    if content.url.lower().startswith("https://"):
        return RuleCheckResult(passed=True, message="Page uses secure HTTPS protocol")
    return RuleCheckResult(passed=False, message="Page uses insecure HTTP protocol")


# ── Head tags ─────────────────────────────────────────────────────────────────

def check_viewport(content: SEOContent) -> RuleCheckResult:
    viewport = content.meta_tags.viewport
    if viewport:
        return RuleCheckResult(passed=True, message=f"Viewport configured: {viewport}")
    return RuleCheckResult(passed=False, message="Viewport meta tag is missing")


def check_canonical(content: SEOContent) -> RuleCheckResult:
    canonical = content.meta_tags.canonical
    if canonical:
        return RuleCheckResult(passed=True, message=f"Canonical URL defined: {canonical}")
    return RuleCheckResult(passed=False, message="Canonical URL not specified", warning=True)


def check_robots(content: SEOContent) -> RuleCheckResult:
    robots = content.meta_tags.robots
    if not robots:
        return RuleCheckResult(passed=True, message="No robots meta tag (default: index, follow)")

    lowered = robots.lower()
    blocking = [d for d in ("noindex", "nofollow") if d in lowered]
    if blocking:
        return RuleCheckResult(
            passed=False,
            message=f"Robots directives may limit indexing: {', '.join(blocking)}",
            warning=True,
        )
    return RuleCheckResult(passed=True, message=f"Robots meta tag configured: {robots}")


def check_html_lang(content: SEOContent) -> RuleCheckResult:
    language = content.meta_tags.language
    if language:
        return RuleCheckResult(passed=True, message=f"Language declared: {language}")
    return RuleCheckResult(passed=False, message="HTML language attribute not set")


def check_charset(content: SEOContent) -> RuleCheckResult:
    charset = content.meta_tags.charset
    if not charset:
        return RuleCheckResult(passed=False, message="Character encoding not declared")

    if charset.lower() == "utf-8":
        return RuleCheckResult(passed=True, message=f"Charset declared: {charset} (recommended)")
    return RuleCheckResult(passed=True, message=f"Charset declared: {charset}", warning=True)


RULES: tuple[SEORule, ...] = (
    SEORule(
        id="internal-links",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=4,
        title="Internal Links",
        description="Content should include internal links",
        recommendations=(
            "Add internal links to related content on your site",
            "Use descriptive anchor text for links",
            "Link to important pages to distribute page authority",
        ),
        check=check_internal_links,
    ),
    SEORule(
        id="external-links",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=3,
        title="External Links",
        description="Content should include relevant external links",
        recommendations=(
            "Link to authoritative external sources when relevant",
            'Add rel="noopener noreferrer" to external links for security',
        ),
        check=check_external_links,
    ),
    SEORule(
        id="link-anchor-text",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=4,
        title="Descriptive Link Anchor Text",
        description="Links should have descriptive anchor text",
        recommendations=(
            "Use descriptive, keyword-rich anchor text",
            'Avoid generic text like "click here" or "read more"',
            "Anchor text should describe the destination",
        ),
        check=check_anchor_text,
    ),
    SEORule(
        id="image-file-names",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=3,
        title="Descriptive Image File Names",
        description="Image file names should be descriptive",
        recommendations=(
            "Use descriptive, keyword-rich image file names",
            'Avoid generic names like "image1.jpg" or "DSC001.jpg"',
            "Use hyphens to separate words in file names",
        ),
        check=check_image_file_names,
    ),
    SEORule(
        id="broken-links-check",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="Link Validity",
        description="Check for potentially broken links",
        recommendations=(
            "Ensure all links have valid destinations",
            "Avoid empty or placeholder links",
            "Regularly check for broken links",
        ),
        check=check_broken_links,
    ),
    SEORule(
        id="schema-markup",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=4,
        title="Schema Markup Detection",
        description="Check for structured data markup",
        recommendations=(
            "Add structured data markup (Schema.org)",
            "Use JSON-LD format for best compatibility",
            "Implement relevant schema types (Article, Product, etc.)",
            "Test with Google Rich Results Test",
        ),
        check=check_schema_markup,
    ),
    SEORule(
        id="url-length",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=4,
        title="URL Length",
        description="URL should be concise and under 75 characters",
        recommendations=(
            "Keep URLs under 75 characters when possible",
            "Use short, descriptive URLs",
            "Avoid unnecessary parameters and subdirectories",
        ),
        check=check_url_length,
    ),
    SEORule(
        id="url-keywords",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="Keywords in URL",
        description="URL should contain target keywords",
        recommendations=(
            "Include primary keyword in URL",
            "Use hyphens to separate words in URLs",
            "Keep URLs descriptive and relevant to content",
        ),
        check=check_url_keywords,
    ),
    SEORule(
        id="url-structure",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=4,
        title="Clean URL Structure",
        description="URL should be clean and readable",
        recommendations=(
            "Use lowercase letters in URLs",
            "Use hyphens instead of underscores",
            "Avoid special characters and spaces",
            "Minimize URL parameters",
            "Avoid auto-generated IDs in URLs when possible",
        ),
        check=check_url_structure,
    ),
    SEORule(
        id="url-depth",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=3,
        title="URL Depth",
        description="URL should not be too deeply nested",
        recommendations=(
            "Keep URL structure shallow (3 levels or less)",
            "Flat URL structures are easier to crawl and understand",
            "Consider restructuring deep hierarchies",
        ),
        check=check_url_depth,
    ),
    SEORule(
        id="viewport-meta",
        category=Category.TECHNICAL,
        severity=Severity.HIGH,
        weight=7,
        title="Mobile Viewport Meta Tag",
        description="Page must have viewport meta tag for mobile optimization",
        recommendations=(
            'Add viewport meta tag: <meta name="viewport" content="width=device-width, initial-scale=1">',
            "Viewport is essential for mobile-friendliness",
            "Ensure responsive design for all screen sizes",
        ),
        check=check_viewport,
    ),
    SEORule(
        id="canonical-url",
        category=Category.TECHNICAL,
        severity=Severity.HIGH,
        weight=7,
        title="Canonical URL",
        description="Page should specify canonical URL to avoid duplicate content",
        recommendations=(
            'Add canonical link: <link rel="canonical" href="https://example.com/page">',
            "Prevents duplicate content issues",
            "Helps search engines understand preferred URL",
        ),
        check=check_canonical,
    ),
    SEORule(
        id="robots-meta",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="Robots Meta Tag",
        description="Check robots meta tag configuration",
        recommendations=(
            "Ensure robots meta tag allows indexing for public pages",
            'Use "noindex" only for pages you want excluded from search',
            "Check robots.txt file as well",
        ),
        check=check_robots,
    ),
    SEORule(
        id="https-protocol",
        category=Category.TECHNICAL,
        severity=Severity.CRITICAL,
        weight=10,
        title="HTTPS/SSL Security",
        description="Page should use HTTPS protocol for security",
        recommendations=(
            "Install SSL certificate for HTTPS",
            "HTTPS is a ranking factor for Google",
            "Protects user data and improves trust",
            "Redirect all HTTP traffic to HTTPS",
        ),
        check=check_https,
    ),
    SEORule(
        id="semantic-html",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="Semantic HTML5 Structure",
        description="Page should use semantic HTML5 elements",
        recommendations=(
            "Use semantic HTML5 tags: <header>, <nav>, <main>, <article>, <footer>",
            "Improves accessibility and SEO",
            "Helps search engines understand page structure",
        ),
        check=check_semantic_html,
    ),
    SEORule(
        id="html-lang",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="HTML Language Declaration",
        description="HTML tag should declare page language",
        recommendations=(
            'Add lang attribute to <html> tag: <html lang="en">',
            "Use correct language code (en, el, fr, etc.)",
            "Helps screen readers and search engines",
        ),
        check=check_html_lang,
    ),
    SEORule(
        id="charset-declaration",
        category=Category.TECHNICAL,
        severity=Severity.HIGH,
        weight=6,
        title="Character Encoding",
        description="Page should declare character encoding",
        recommendations=(
            'Add charset meta tag: <meta charset="UTF-8">',
            "UTF-8 supports all languages and special characters",
            "Place charset declaration early in <head>",
        ),
        check=check_charset,
    ),
    SEORule(
        id="html-validation",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=3,
        title="Basic HTML Structure",
        description="Check for basic HTML structure elements",
        recommendations=(
            "Ensure proper HTML document structure",
            "Include <!DOCTYPE html> declaration",
            "Validate HTML with W3C validator",
        ),
        check=check_html_structure,
    ),
    SEORule(
        id="accessibility-basics",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        weight=5,
        title="Basic Accessibility",
        description="Check basic accessibility requirements",
        recommendations=(
            "Add alt text to all images",
            "Use single H1 per page",
            "Ensure all links have descriptive text",
            "Test with screen readers",
            "Follow WCAG guidelines",
        ),
        check=check_accessibility,
    ),
    SEORule(
        id="page-size-estimate",
        category=Category.TECHNICAL,
        severity=Severity.LOW,
        weight=3,
        title="Page Size Performance",
        description="Estimate page size for performance",
        recommendations=(
            "Keep HTML under 100KB for better performance",
            "Minify HTML for production",
            "Remove unnecessary whitespace and comments",
            "Consider lazy loading for large content",
        ),
        check=check_page_size,
    ),
)
