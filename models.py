"""
Core data models for the SEO Content Analyzer.
All modules import from here; nothing else is cross-imported at this level.

NOTE: `from __future__ import annotations` is intentionally omitted here.
Python 3.13.0 has a regression (bpo-121814) where that import causes a crash
in the dataclasses decorator when the module is not yet fully registered in
sys.modules. Python 3.9+ supports generic aliases (list[str], dict[str, Any])
natively, so the future import is unnecessary.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional


# ── Enumerations ──────────────────────────────────────────────────────────────
class Severity:
    CRITICAL = "critical"
    HIGH     = "high"
    MEDIUM   = "medium"
    LOW      = "low"

    ALL = [CRITICAL, HIGH, MEDIUM, LOW]


class Category:
    META        = "meta"
    CONTENT     = "content"
    TECHNICAL   = "technical"
    READABILITY = "readability"
    KEYWORDS    = "keywords"

    ALL = [META, CONTENT, TECHNICAL, READABILITY, KEYWORDS]


class LinkType:
    INTERNAL = "internal"
    EXTERNAL = "external"
    EMAIL    = "email"
    PHONE    = "phone"
    ANCHOR   = "anchor"


class Priority:
    CRITICAL = "critical"
    HIGH     = "high"
    MEDIUM   = "medium"
    LOW      = "low"

    ALL = [CRITICAL, HIGH, MEDIUM, LOW]


class Effort:
    QUICK       = "quick"
    MODERATE    = "moderate"
    SIGNIFICANT = "significant"

    ALL = [QUICK, MODERATE, SIGNIFICANT]


class ActionType:
    ADD      = "add"
    REMOVE   = "remove"
    UPDATE   = "update"
    OPTIMIZE = "optimize"
    VERIFY   = "verify"
    GENERAL  = "general"


class RecommendationStatus:
    PENDING     = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED   = "completed"
    DISMISSED   = "dismissed"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ── Parsed content ────────────────────────────────────────────────────────────
@dataclass
class ImageInfo:
    src: str
    alt: str = ""
    title: str = ""
    has_alt: bool = False
    has_title: bool = False


@dataclass
class LinkInfo:
    href: str
    text: str = ""
    rel: str = ""
    type: str = LinkType.INTERNAL
    has_text: bool = False


@dataclass
class MetaTags:
    viewport: Optional[str] = None
    canonical: Optional[str] = None
    robots: Optional[str] = None
    charset: Optional[str] = None
    language: Optional[str] = None


@dataclass
class StructuralElements:
    has_nav: bool = False
    has_header: bool = False
    has_footer: bool = False
    has_main: bool = False
    has_article: bool = False
    semantic_score: int = 0


def _empty_headings() -> dict[int, list[str]]:
    return {level: [] for level in range(1, 7)}


@dataclass
class ParsedContent:
    text: str = ""
    html: str = ""
    word_count: int = 0
    character_count: int = 0
    headings: dict[int, list[str]] = field(default_factory=_empty_headings)
    images: list[ImageInfo] = field(default_factory=list)
    links: list[LinkInfo] = field(default_factory=list)
    paragraphs: list[str] = field(default_factory=list)
    meta_tags: MetaTags = field(default_factory=MetaTags)
    structural_elements: StructuralElements = field(default_factory=StructuralElements)

    @classmethod
    def empty(cls, html: str = "") -> "ParsedContent":
        """The canonical all-empty shape returned whenever parsing yields nothing."""
        return cls(html=html)


# ── Rule input ────────────────────────────────────────────────────────────────
@dataclass
class SEOContent:
    """Everything a rule may inspect: caller metadata plus the parsed page."""
    html: str = ""
    title: str = ""
    description: str = ""
    keywords: list[str] = field(default_factory=list)
    language: str = "en"
    url: str = ""
    parsed: ParsedContent = field(default_factory=ParsedContent)

    # Filled in by the orchestrator from the readability pass
    readability_score: Optional[float] = None
    readability_level: str = ""

    @property
    def text(self) -> str:
        return self.parsed.text

    @property
    def word_count(self) -> int:
        return self.parsed.word_count

    @property
    def headings(self) -> dict[int, list[str]]:
        return self.parsed.headings

    @property
    def images(self) -> list[ImageInfo]:
        return self.parsed.images

    @property
    def links(self) -> list[LinkInfo]:
        return self.parsed.links

    @property
    def paragraphs(self) -> list[str]:
        return self.parsed.paragraphs

    @property
    def meta_tags(self) -> MetaTags:
        return self.parsed.meta_tags

    @property
    def structural_elements(self) -> StructuralElements:
        return self.parsed.structural_elements

    @property
    def primary_keyword(self) -> Optional[str]:
        return self.keywords[0] if self.keywords else None


# ── Rule catalog ──────────────────────────────────────────────────────────────
@dataclass
class RuleCheckResult:
    passed: bool
    message: str = ""
    warning: bool = False


@dataclass(frozen=True)
class SEORule:
    id: str
    category: str
    severity: str
    weight: float
    title: str
    description: str
    recommendations: tuple[str, ...]
    check: Callable[[SEOContent], RuleCheckResult] = field(compare=False, repr=False)


# ── Rule engine output ────────────────────────────────────────────────────────
@dataclass
class AnalysisIssue:
    id: str
    category: str
    severity: str
    title: str
    description: str
    impact: float


@dataclass
class RuleRecommendation:
    rule_id: str
    category: str
    recommendation: str


@dataclass
class CategoryScore:
    score: float = 0.0
    max_score: float = 0.0
    passed: int = 0
    failed: int = 0


@dataclass
class KeywordDensity:
    keyword: str
    count: int = 0
    density: float = 0.0
    word_count: int = 0


@dataclass
class KeywordSuggestion:
    keyword: str
    frequency: int
    relevance: float
    is_phrase: bool = False
    occurrences: int = 0


# ── Readability ───────────────────────────────────────────────────────────────
@dataclass
class ReadabilityTotals:
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    characters: int = 0
    syllables: int = 0
    complex_words: int = 0
    average_sentence_length: float = 0.0
    average_syllables_per_word: float = 0.0
    complex_word_ratio: float = 0.0
    vocabulary_richness: float = 0.0


@dataclass
class FormulaResult:
    id: str
    label: str
    score: float
    normalized: float
    grade_level: str
    grade_value: float
    interpretation: str
    color: str
    type: str              # "ease" or "grade"


@dataclass
class CompositeScore:
    score: float = 0.0
    label: str = "Insufficient Data"
    color: str = "#ef4444"
    grade_level: str = "N/A"
    reading_time_minutes: int = 0


@dataclass
class SentenceSample:
    text: str
    length: int


@dataclass
class DistributionBucket:
    range: str
    count: int


@dataclass
class SentenceStats:
    count: int = 0
    average_length: float = 0.0
    median_length: float = 0.0
    longest_sentence: Optional[SentenceSample] = None
    shortest_sentence: Optional[SentenceSample] = None
    long_sentences: list[SentenceSample] = field(default_factory=list)
    short_sentences: list[SentenceSample] = field(default_factory=list)
    distribution: list[DistributionBucket] = field(default_factory=list)


@dataclass
class ParagraphDetail:
    index: int
    text: str
    words: int
    sentences: int
    average_sentence_length: float
    reading_ease: float
    label: str


@dataclass
class ParagraphStats:
    count: int = 0
    average_words: float = 0.0
    average_sentences: float = 0.0
    long_paragraphs: list[ParagraphDetail] = field(default_factory=list)
    short_paragraphs: list[ParagraphDetail] = field(default_factory=list)
    items: list[ParagraphDetail] = field(default_factory=list)
    distribution: list[DistributionBucket] = field(default_factory=list)


@dataclass
class StructureAnalysis:
    sentences: SentenceStats = field(default_factory=SentenceStats)
    paragraphs: ParagraphStats = field(default_factory=ParagraphStats)


@dataclass
class ReadabilityRecommendation:
    type: str              # critical / warning / success
    title: str
    message: str


@dataclass
class AudienceFit:
    audience: str
    suitable: bool


@dataclass
class ReadingLevels:
    recommended_grade: float = 0.0
    recommended_label: str = "N/A"
    education_stages: list[dict[str, str]] = field(default_factory=list)
    audience_fit: list[AudienceFit] = field(default_factory=list)


@dataclass
class ReadabilitySummary:
    reading_time_minutes: int = 0
    pacing: str = "N/A"
    audience: str = "N/A"
    word_count: int = 0
    language: str = ""


@dataclass
class LanguageGuidance:
    language: str
    notes: str
    rules: list[dict[str, str]] = field(default_factory=list)


@dataclass
class ReadabilityMeta:
    language: str
    language_name: str
    timestamp: str = field(default_factory=_now_iso)
    processing_time_ms: float = 0.0
    is_insufficient: bool = False
    warnings: list[str] = field(default_factory=list)


@dataclass
class ReadabilityResult:
    meta: ReadabilityMeta
    totals: ReadabilityTotals
    composite_score: CompositeScore
    formulas: list[FormulaResult]
    structure: StructureAnalysis
    recommendations: list[ReadabilityRecommendation]
    language_guidance: LanguageGuidance
    reading_levels: ReadingLevels
    summary: ReadabilitySummary

    @property
    def warnings(self) -> list[str]:
        return self.meta.warnings

    @property
    def is_insufficient(self) -> bool:
        return self.meta.is_insufficient

    def formula(self, formula_id: str) -> Optional[FormulaResult]:
        for item in self.formulas:
            if item.id == formula_id:
                return item
        return None


# ── Recommendations ───────────────────────────────────────────────────────────
@dataclass
class RecommendationAction:
    step: int
    action: str
    type: str
    specific: bool = False


@dataclass
class ImpactEstimate:
    score_increase: float
    current_score: float
    projected_score: float
    current_percentage: int
    projected_percentage: int
    percentage_increase: int
    ranking_impact: str


@dataclass
class Example:
    before: str
    after: str


@dataclass
class Resource:
    title: str
    url: str


@dataclass
class Recommendation:
    id: str
    rule_id: str
    title: str
    priority: str
    category: str
    description: str
    actions: list[RecommendationAction]
    effort: str
    estimated_time: str
    impact_estimate: ImpactEstimate
    example: Optional[Example]
    why: str
    resources: list[Resource]
    weight: float
    severity: str
    timestamp: str = field(default_factory=_now_iso)
    status: str = RecommendationStatus.PENDING   # owned by the caller


@dataclass
class RecommendationSummary:
    total_recommendations: int = 0
    priority_counts: dict[str, int] = field(default_factory=dict)
    effort_counts: dict[str, int] = field(default_factory=dict)
    current_score: float = 0.0
    current_percentage: int = 0
    current_grade: str = "F"
    potential_score: float = 0.0
    potential_percentage: int = 0
    potential_grade: str = "F"
    total_potential_increase: int = 0


@dataclass
class RecommendationReport:
    recommendations: list[Recommendation] = field(default_factory=list)
    summary: RecommendationSummary = field(default_factory=RecommendationSummary)
    by_priority: dict[str, list[Recommendation]] = field(default_factory=dict)
    by_category: dict[str, list[Recommendation]] = field(default_factory=dict)
    by_effort: dict[str, list[Recommendation]] = field(default_factory=dict)
    quick_wins: list[Recommendation] = field(default_factory=list)


# ── Top-level analysis result ─────────────────────────────────────────────────
@dataclass
class AnalysisResults:
    score: float = 0.0
    max_score: float = 0.0
    percentage: int = 0
    grade: str = "F"
    passed_rules: int = 0
    failed_rules: int = 0
    warnings: int = 0
    issues: list[AnalysisIssue] = field(default_factory=list)
    recommendations: list[RuleRecommendation] = field(default_factory=list)
    category_scores: dict[str, CategoryScore] = field(default_factory=dict)
    # RuleExecutionError instances for rules excluded from this run
    rule_errors: list[Any] = field(default_factory=list)

    # Attached by the orchestrating analyzer
    metadata: dict[str, Any] = field(default_factory=dict)
    keyword_densities: list[KeywordDensity] = field(default_factory=list)
    readability: Optional[ReadabilityResult] = None
    enhanced_recommendations: Optional[RecommendationReport] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> float:
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    @property
    def issues_by_severity(self) -> dict[str, list[AnalysisIssue]]:
        out: dict[str, list[AnalysisIssue]] = {s: [] for s in Severity.ALL}
        for issue in self.issues:
            out.setdefault(issue.severity, []).append(issue)
        return out

    @property
    def recommendations_by_category(self) -> dict[str, list[RuleRecommendation]]:
        out: dict[str, list[RuleRecommendation]] = {}
        for rec in self.recommendations:
            out.setdefault(rec.category, []).append(rec)
        return out


# ── Keyword density analysis ──────────────────────────────────────────────────
@dataclass
class KeywordPosition:
    index: int
    percentage: float


@dataclass
class DensityResult:
    keyword: str
    count: int
    density: float
    status: str            # optimal / underused / overused
    is_optimal: bool
    positions: list[KeywordPosition] = field(default_factory=list)
    type: str = "word"     # word / phrase


@dataclass
class SectionDistribution:
    section: str
    total_keywords: int
    keyword_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class DensityRecommendation:
    type: str              # success / warning / critical
    keyword: str
    message: str
    action: str            # maintain / increase / decrease


@dataclass
class DensityAnalysis:
    total_words: int
    total_keywords: int
    density_results: list[DensityResult] = field(default_factory=list)
    distribution: list[SectionDistribution] = field(default_factory=list)
    recommendations: list[DensityRecommendation] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)


# ── SEO readability guidance ──────────────────────────────────────────────────
@dataclass
class GuidanceIssue:
    severity: str
    category: str
    finding: str
    impact: str
    examples: list[SentenceSample] = field(default_factory=list)


@dataclass
class GuidanceAdvice:
    priority: str          # critical / high / medium / low / maintenance
    rule: str
    reason: str
    action: str
    seo_impact: str


@dataclass
class GuidanceStrength:
    category: str
    strength: str
    benefit: str


@dataclass
class SEOAssessment:
    score: float
    status: str
    reason: str


@dataclass
class DynamicGuidance:
    content_analysis: dict[str, Any] = field(default_factory=dict)
    seo_impact: dict[str, SEOAssessment] = field(default_factory=dict)
    specific_issues: list[GuidanceIssue] = field(default_factory=list)
    actionable_advice: list[GuidanceAdvice] = field(default_factory=list)
    strengths_identified: list[GuidanceStrength] = field(default_factory=list)
