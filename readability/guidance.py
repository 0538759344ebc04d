"""
Readability advice: threshold-based recommendations, reading levels, warnings
and the SEO-framed guidance layered on top of a finished analysis.
"""
from __future__ import annotations

from config import GREEK_PARAGRAPH_WORDS, LONG_SENTENCE_WORDS, MIN_SENTENCES
from models import (
    AudienceFit,
    CompositeScore,
    DynamicGuidance,
    FormulaResult,
    GuidanceAdvice,
    GuidanceIssue,
    GuidanceStrength,
    ReadabilityRecommendation,
    ReadabilitySummary,
    ReadabilityTotals,
    ReadingLevels,
    SentenceSample,
    SEOAssessment,
    StructureAnalysis,
)
from readability.formulas import EASE_ID, GRADE_IDS, grade_label
from scoring.scorer import round_half_up

_SEVERITY_RANK = {"critical": 0, "high": 1, "medium": 2, "low": 3}
_PRIORITY_RANK = {"critical": 0, "high": 1, "medium": 2, "low": 3, "maintenance": 4}

EDUCATION_STAGES = [
    {"label": "Elementary", "range": "Grades 1-5"},
    {"label": "Middle School", "range": "Grades 6-8"},
    {"label": "High School", "range": "Grades 9-12"},
    {"label": "College", "range": "Grades 13-16"},
    {"label": "Graduate", "range": "17+"},
]


# ── Recommendations ───────────────────────────────────────────────────────────

def generate_recommendations(
    totals: ReadabilityTotals,
    formulas: list[FormulaResult],
    structure: StructureAnalysis,
    language: dict,
) -> list[ReadabilityRecommendation]:
    recs: list[ReadabilityRecommendation] = []
    ease = next((f for f in formulas if f.id == EASE_ID), None)
    sentences = structure.sentences

    if ease is not None and ease.score < 60:
        recs.append(ReadabilityRecommendation(
            type="critical",
            title="Improve overall readability",
            message="Shorten sentences and simplify vocabulary to raise the reading ease score above 60.",
        ))

    if sentences.long_sentences and len(sentences.long_sentences) / sentences.count > 0.2:
        recs.append(ReadabilityRecommendation(
            type="warning",
            title="Break up long sentences",
            message=f"More than 20% of your sentences exceed {LONG_SENTENCE_WORDS} words. "
                    "Split them to keep readers engaged.",
        ))

    if totals.complex_word_ratio > 0.15:
        recs.append(ReadabilityRecommendation(
            type="warning",
            title="Reduce complex vocabulary",
            message="Consider replacing multi-syllable words with simpler alternatives where possible.",
        ))

    if structure.paragraphs.long_paragraphs:
        recs.append(ReadabilityRecommendation(
            type="warning",
            title="Shorten lengthy paragraphs",
            message="Break paragraphs longer than 120 words into smaller sections to improve scanning.",
        ))

    if not recs:
        recs.append(ReadabilityRecommendation(
            type="success",
            title="Strong readability baseline",
            message=f"Your content aligns well with {language['name']} readability best practices. "
                    "Maintain the current structure.",
        ))

    return recs


# ── Reading levels & summary ──────────────────────────────────────────────────

def determine_reading_levels(formulas: list[FormulaResult], language: dict) -> ReadingLevels:
    grades = [f.grade_value for f in formulas if f.id in GRADE_IDS]
    average = sum(grades) / len(grades) if grades else 0.0
    recommended = round_half_up(average, 1)

    return ReadingLevels(
        recommended_grade=recommended,
        recommended_label=grade_label(recommended),
        education_stages=[dict(stage) for stage in EDUCATION_STAGES],
        audience_fit=audience_fit(recommended, language),
    )


def audience_fit(grade: float, language: dict) -> list[AudienceFit]:
    bands = [
        ("General Web Audience", 8),
        ("Educated Consumers", 12),
        ("Academic Readers", 16),
        (f"{language['name']} Specialists", 20),
    ]
    return [AudienceFit(audience=label, suitable=grade <= upper) for label, upper in bands]


def build_summary(
    totals: ReadabilityTotals,
    composite: CompositeScore,
    levels: ReadingLevels,
    language: dict,
) -> ReadabilitySummary:
    return ReadabilitySummary(
        reading_time_minutes=composite.reading_time_minutes,
        pacing=composite.label,
        audience=levels.recommended_label,
        word_count=totals.words,
        language=language["name"],
    )


def collect_warnings(
    totals: ReadabilityTotals,
    structure: StructureAnalysis,
    formulas: list[FormulaResult],
    language: dict,
) -> list[str]:
    warnings = []
    if totals.words < language["min_words"]:
        warnings.append(
            f"Content has fewer than {language['min_words']} words. Results may be unstable."
        )
    if structure.sentences.count < MIN_SENTENCES:
        warnings.append("Add more sentences for reliable readability scoring.")

    ease = next((f for f in formulas if f.id == EASE_ID), None)
    if ease is not None and ease.score < 30:
        warnings.append("Content is considered very difficult to read.")
    return warnings


def language_notes(language: dict) -> str:
    return (
        f"Analysis uses {language['name']} heuristics with a minimum sample of "
        f"{language['min_words']} words for reliable scoring."
    )


# ── SEO-framed guidance ───────────────────────────────────────────────────────

def seo_readability_level(score: float) -> str:
    if score >= 70:
        return "Excellent for SEO - highly scannable"
    if score >= 60:
        return "Good for SEO - accessible to most users"
    if score >= 50:
        return "Fair for SEO - may limit reach"
    return "Poor for SEO - likely to increase bounce rate"


def generate_dynamic_guidance(
    totals: ReadabilityTotals,
    structure: StructureAnalysis,
    composite: CompositeScore,
    language_code: str,
) -> DynamicGuidance:
    guidance = DynamicGuidance(content_analysis={
        "overall_readability": composite.label,
        "score": composite.score,
        "target_audience": composite.grade_level,
        "seo_readability": seo_readability_level(composite.score),
    })
    issues = guidance.specific_issues
    advice = guidance.actionable_advice
    strengths = guidance.strengths_identified

    sentences = structure.sentences
    paragraphs = structure.paragraphs

    long_sentence_ratio = _ratio(len(sentences.long_sentences), sentences.count)
    if long_sentence_ratio > 0.3:
        issues.append(GuidanceIssue(
            severity="high",
            category="Sentence Complexity",
            finding=f"{_pct(long_sentence_ratio)}% of sentences exceed 25 words",
            impact="Users may abandon pages with dense, hard-to-scan content",
            examples=[_excerpt(s.text, s.length) for s in sentences.long_sentences[:2]],
        ))
        advice.append(GuidanceAdvice(
            priority="critical",
            rule="Break Up Long Sentences for SEO",
            reason="Search engines favor content that users can quickly scan and understand",
            action="Split sentences over 25 words. Target 15-20 words per sentence for optimal web readability.",
            seo_impact="Improved dwell time and reduced bounce rate",
        ))
    elif long_sentence_ratio < 0.1:
        strengths.append(GuidanceStrength(
            category="Sentence Length",
            strength="Well-controlled sentence length throughout content",
            benefit="Users can easily scan and extract information",
        ))

    long_paragraph_ratio = _ratio(len(paragraphs.long_paragraphs), paragraphs.count)
    if long_paragraph_ratio > 0.3:
        issues.append(GuidanceIssue(
            severity="high",
            category="Paragraph Structure",
            finding=f"{_pct(long_paragraph_ratio)}% of paragraphs exceed 120 words",
            impact="Large text blocks reduce scannability and mobile readability",
            examples=[_excerpt(p.text, p.words) for p in paragraphs.long_paragraphs[:2]],
        ))
        advice.append(GuidanceAdvice(
            priority="high",
            rule="Optimize Paragraph Length for Web",
            reason="Mobile users and search engine crawlers prefer shorter, focused paragraphs",
            action="Break paragraphs into 40-80 word chunks. Use subheadings to improve content hierarchy.",
            seo_impact="Better featured snippet eligibility and mobile SEO",
        ))
    elif paragraphs.average_words <= 80:
        strengths.append(GuidanceStrength(
            category="Paragraph Structure",
            strength="Paragraphs are well-sized for web consumption",
            benefit="Mobile-friendly and search engine optimized",
        ))

    if totals.complex_word_ratio > 0.2:
        issues.append(GuidanceIssue(
            severity="medium",
            category="Vocabulary Complexity",
            finding=f"{_pct(totals.complex_word_ratio)}% of words are complex (3+ syllables)",
            impact="Technical jargon may limit organic search reach",
        ))
        advice.append(GuidanceAdvice(
            priority="medium",
            rule="Simplify Vocabulary for Broader Reach",
            reason="Search engines prioritize content accessible to wider audiences",
            action="Replace complex terms with simpler alternatives. Use jargon only when targeting specialist searches.",
            seo_impact="Expanded keyword targeting and voice search optimization",
        ))
    elif totals.complex_word_ratio < 0.12:
        strengths.append(GuidanceStrength(
            category="Vocabulary",
            strength="Accessible vocabulary suitable for general audiences",
            benefit="Better voice search compatibility",
        ))

    short_sentence_ratio = _ratio(len(sentences.short_sentences), sentences.count)
    if short_sentence_ratio > 0.4:
        issues.append(GuidanceIssue(
            severity="low",
            category="Sentence Variety",
            finding=f"{_pct(short_sentence_ratio)}% of sentences are very short (≤8 words)",
            impact="Choppy rhythm may reduce engagement time",
        ))
        advice.append(GuidanceAdvice(
            priority="low",
            rule="Balance Sentence Lengths",
            reason="Mix of short and medium sentences creates engaging reading rhythm",
            action="Combine some short sentences or add supporting details to create 12-18 word sentences.",
            seo_impact="Improved user engagement metrics",
        ))

    if composite.score < 50:
        issues.append(GuidanceIssue(
            severity="critical",
            category="Overall Readability",
            finding=f"Readability score of {composite.score} is below recommended threshold",
            impact="Low readability directly correlates with high bounce rates",
        ))
        advice.append(GuidanceAdvice(
            priority="critical",
            rule="Improve Overall Readability for SEO Performance",
            reason="Google considers user engagement signals; poor readability hurts rankings",
            action="Apply sentence and paragraph improvements. Target a score above 60 for optimal SEO.",
            seo_impact="Better rankings, featured snippet opportunities, and user satisfaction",
        ))
    elif composite.score >= 70:
        strengths.append(GuidanceStrength(
            category="Overall Readability",
            strength="Excellent readability score for web content",
            benefit="Strong foundation for SEO success and user engagement",
        ))

    _language_specific(language_code, totals, structure, composite, issues, advice)

    guidance.seo_impact = {
        "crawlability": assess_crawlability(structure, totals),
        "user_engagement": assess_user_engagement(composite.score, structure),
        "mobile_friendliness": assess_mobile_friendliness(structure),
        "voice_search_optimization": assess_voice_search_readiness(composite.score, totals),
        "featured_snippet_potential": assess_snippet_potential(structure, composite.score),
    }

    if not issues:
        advice.append(GuidanceAdvice(
            priority="maintenance",
            rule="Maintain Current Standards",
            reason="Your content meets readability best practices",
            action="Continue using clear language, varied sentence structure, and focused paragraphs.",
            seo_impact="Sustained organic performance",
        ))

    issues.sort(key=lambda i: _SEVERITY_RANK.get(i.severity, len(_SEVERITY_RANK)))
    advice.sort(key=lambda a: _PRIORITY_RANK.get(a.priority, len(_PRIORITY_RANK)))
    return guidance


def _language_specific(
    language_code: str,
    totals: ReadabilityTotals,
    structure: StructureAnalysis,
    composite: CompositeScore,
    issues: list[GuidanceIssue],
    advice: list[GuidanceAdvice],
) -> None:
    if language_code == "en":
        if structure.sentences.average_length > 22:
            issues.append(GuidanceIssue(
                severity="medium",
                category="English Sentence Structure",
                finding=f"Average sentence length of {structure.sentences.average_length} words "
                        "exceeds English web standard",
                impact="English readers expect concise, direct sentences online",
            ))
            advice.append(GuidanceAdvice(
                priority="medium",
                rule="Apply English Web Writing Standards",
                reason="English web content performs best at 15-20 words per sentence",
                action="Target 18-word average sentences. Use active voice and eliminate filler words.",
                seo_impact="Better engagement from English-speaking markets",
            ))
        if totals.vocabulary_richness < 0.4:
            issues.append(GuidanceIssue(
                severity="low",
                category="Keyword Diversity",
                finding=f"Low vocabulary richness ({_pct(totals.vocabulary_richness)}%) suggests repetitive language",
                impact="Limited semantic keyword coverage",
            ))
            advice.append(GuidanceAdvice(
                priority="low",
                rule="Expand Semantic Keyword Coverage",
                reason="Varied vocabulary captures more long-tail search queries",
                action="Use synonyms and related terms to broaden topical relevance without keyword stuffing.",
                seo_impact="Improved semantic SEO and featured snippet potential",
            ))

    elif language_code == "el":
        if structure.paragraphs.average_words > GREEK_PARAGRAPH_WORDS:
            issues.append(GuidanceIssue(
                severity="high",
                category="Greek Paragraph Length",
                finding=f"Greek paragraphs average {structure.paragraphs.average_words} words - "
                        "exceeds web standard",
                impact="Greek readers expect shorter, focused web paragraphs",
            ))
            advice.append(GuidanceAdvice(
                priority="high",
                rule="Adapt to Greek Web Reading Patterns",
                reason="Greek online content performs best with 50-80 word paragraphs",
                action="Break paragraphs at natural thought boundaries. Use bullet points for lists.",
                seo_impact="Better engagement from Greek-speaking audiences",
            ))
        if composite.score < 55:
            advice.append(GuidanceAdvice(
                priority="high",
                rule="Optimize for Greek Search Algorithms",
                reason="Greek search engines prioritize accessible content",
                action="Simplify sentence structure. Use contemporary Greek vocabulary over archaic forms.",
                seo_impact="Improved visibility in Greek search results",
            ))


# ── SEO impact assessments ────────────────────────────────────────────────────

def assess_crawlability(structure: StructureAnalysis, totals: ReadabilityTotals) -> SEOAssessment:
    score = min(
        100,
        (40 if structure.paragraphs.count >= 3 else 20)
        + (30 if structure.sentences.count >= 10 else 15)
        + (30 if totals.words >= 300 else totals.words / 10),
    )
    if score >= 80:
        status, reason = "Excellent", "Well-structured content is easy for search engines to parse"
    elif score >= 60:
        status, reason = "Good", "Adequate structure for search engine indexing"
    elif score >= 40:
        status, reason = "Fair", "Content structure may limit search engine understanding"
    else:
        status, reason = "Poor", "Content structure may limit search engine understanding"
    return SEOAssessment(score=round_half_up(score), status=status, reason=reason)


def assess_user_engagement(readability_score: float, structure: StructureAnalysis) -> SEOAssessment:
    score = min(
        100,
        readability_score * 0.6
        + (20 if structure.paragraphs.count >= 4 else 10)
        + (20 if structure.sentences.average_length <= 20 else 10),
    )
    if score >= 75:
        status, reason = "High", "Content is optimized for sustained user engagement"
    elif score >= 55:
        status, reason = "Moderate", "Content supports average engagement levels"
    else:
        status, reason = "Low", "Readability issues may increase bounce rate"
    return SEOAssessment(score=round_half_up(score), status=status, reason=reason)


def assess_mobile_friendliness(structure: StructureAnalysis) -> SEOAssessment:
    avg_words = structure.paragraphs.average_words
    avg_sentence = structure.sentences.average_length
    score = min(
        100,
        (50 if avg_words <= 80 else 80 / avg_words * 50)
        + (50 if avg_sentence <= 18 else 18 / avg_sentence * 50),
    )
    if score >= 80:
        status, reason = "Excellent", "Short paragraphs and sentences perfect for mobile reading"
    elif score >= 60:
        status, reason = "Good", "Acceptable for mobile but could be more concise"
    else:
        status, reason = "Needs Improvement", "Text blocks may be difficult to read on mobile devices"
    return SEOAssessment(score=round_half_up(score), status=status, reason=reason)


def assess_voice_search_readiness(readability_score: float, totals: ReadabilityTotals) -> SEOAssessment:
    ratio = totals.complex_word_ratio
    score = min(
        100,
        (60 if readability_score >= 70 else readability_score * 0.85)
        + (40 if ratio < 0.15 else (0.15 - ratio) * 200),
    )
    if score >= 75:
        status, reason = "High", "Conversational tone aligns with voice search queries"
    elif score >= 55:
        status, reason = "Moderate", "Partially optimized for voice search"
    else:
        status, reason = "Low", "Complex language limits voice search compatibility"
    return SEOAssessment(score=round_half_up(score), status=status, reason=reason)


def assess_snippet_potential(structure: StructureAnalysis, readability_score: float) -> SEOAssessment:
    avg_words = structure.paragraphs.average_words
    score = min(
        100,
        (40 if readability_score >= 60 else readability_score * 0.65)
        + (30 if 40 <= avg_words <= 100 else 15)
        + (30 if structure.sentences.average_length <= 20 else 15),
    )
    if score >= 75:
        status, reason = "High", "Content structure favors featured snippet selection"
    elif score >= 55:
        status, reason = "Moderate", "Some paragraphs may qualify for featured snippets"
    else:
        status, reason = "Low", "Current structure limits featured snippet eligibility"
    return SEOAssessment(score=round_half_up(score), status=status, reason=reason)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _ratio(part: int, whole: int) -> float:
    return part / whole if whole else 0.0


def _pct(ratio: float) -> int:
    return int(round_half_up(ratio * 100))


def _excerpt(text: str, length: int) -> SentenceSample:
    short = text[:100] + ("..." if len(text) > 100 else "")
    return SentenceSample(text=short, length=length)
