"""
Prohibited Phrase Detection for Generated Content

Scans content against a curated table of phrases that make copy read as
generic, padded, or machine-written:

1. Overused SEO - Buzzwords that saturate ranking content
2. Filler - Words that add length without meaning
3. Cliche - Stock business idioms
4. Redundant - Pleonasms ("end result", "past history")
5. Weak - Vague placeholders for precise terms
6. AI Typical - Phrasings common in model output

Each phrase carries a 1-5 severity and replacement suggestions. An empty
first suggestion means the phrase should simply be removed.
"""

import re
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional, Pattern
from enum import Enum

from .text import extract_context, count_words, round_half_up

logger = logging.getLogger(__name__)


class PhraseCategory(Enum):
    """Category of a prohibited phrase."""
    OVERUSED_SEO = "overused_seo"
    FILLER = "filler"
    CLICHE = "cliche"
    REDUNDANT = "redundant"
    WEAK = "weak"
    AI_TYPICAL = "ai_typical"


HIGH_SEVERITY = 4


@dataclass
class ProhibitedPhrase:
    """A single entry in the phrase table."""
    phrase: str
    replacement_suggestions: List[str]
    category: PhraseCategory
    severity: int  # 1-5
    is_regex: bool = False

    @property
    def source(self) -> str:
        return self.phrase if self.is_regex else re.escape(self.phrase)

    def compile(self) -> Pattern:
        return re.compile(rf"(?<!\w)(?:{self.source})(?!\w)", re.IGNORECASE)

    def compile_sentence_start(self) -> Pattern:
        """Match at the start of a sentence, taking trailing punctuation and spaces with it."""
        return re.compile(rf"(^|[.!?\n]\s*)(?:{self.source})(?!\w)[ \t]*[,;:]?[ \t]*(\w?)", re.IGNORECASE)


@dataclass
class PhraseDetectionResult:
    """All occurrences of one prohibited phrase."""
    phrase: str
    suggestions: List[str]
    category: str
    severity: int
    positions: List[int] = field(default_factory=list)
    context: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PhraseQualityScore:
    """Quality score derived from prohibited phrase usage."""
    overall_score: int
    detected_phrases: int
    high_severity_count: int
    category_breakdown: Dict[str, int]
    recommendations: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_CATEGORY_ADVICE = {
    PhraseCategory.OVERUSED_SEO: "{n} overused SEO terms detected. Replace with more specific, natural language.",
    PhraseCategory.FILLER: "{n} filler words found. Remove these to improve content density.",
    PhraseCategory.CLICHE: "{n} cliches detected. Use more original, specific language.",
    PhraseCategory.REDUNDANT: "{n} redundant phrases found. Simplify for better readability.",
    PhraseCategory.WEAK: "{n} weak or vague terms detected. Use more precise language.",
    PhraseCategory.AI_TYPICAL: "{n} AI-typical phrases found. Replace with more human-like expressions.",
}


def _entries(category: PhraseCategory, rows) -> List[ProhibitedPhrase]:
    return [
        ProhibitedPhrase(phrase=phrase, replacement_suggestions=list(suggestions), category=category, severity=severity)
        for phrase, severity, suggestions in rows
    ]


def default_phrase_table() -> List[ProhibitedPhrase]:
    """Build the default prohibited phrase table."""
    table: List[ProhibitedPhrase] = []

    # =================================================================
    # OVERUSED SEO
    # =================================================================
    table += _entries(PhraseCategory.OVERUSED_SEO, [
        ("meticulous", 4, ["careful", "thorough", "detailed", "precise"]),
        ("navigating", 4, ["managing", "handling", "addressing", "dealing with"]),
        ("complexities", 4, ["challenges", "difficulties", "intricacies", "complications"]),
        ("realm", 5, ["field", "area", "domain", "sector"]),
        ("bespoke", 5, ["custom", "tailored", "personalized", "specialized"]),
        ("tailored", 3, ["customized", "personalized", "adapted", "designed"]),
        ("synergy", 4, ["collaboration", "cooperation", "partnership", "teamwork"]),
        ("paradigm", 4, ["model", "approach", "framework", "system"]),
        ("leverage", 3, ["use", "utilize", "employ", "apply"]),
        ("holistic", 3, ["comprehensive", "complete", "integrated", "unified"]),
        ("cutting-edge", 4, ["advanced", "innovative", "modern", "state-of-the-art"]),
        ("game-changing", 4, ["revolutionary", "transformative", "significant", "important"]),
        ("seamless", 3, ["smooth", "effortless", "integrated", "unified"]),
        ("robust", 3, ["strong", "reliable", "durable", "comprehensive"]),
        ("scalable", 3, ["expandable", "flexible", "adaptable", "growable"]),
        ("innovative", 3, ["creative", "original", "new", "advanced"]),
        ("groundbreaking", 4, ["pioneering", "revolutionary", "innovative", "novel"]),
        ("streamlined", 3, ["simplified", "efficient", "optimized", "improved"]),
        ("next-level", 4, ["advanced", "superior", "enhanced", "improved"]),
        ("world-class", 4, ["excellent", "superior", "high-quality", "outstanding"]),
    ])

    # =================================================================
    # FILLER
    # =================================================================
    table += _entries(PhraseCategory.FILLER, [
        ("very", 2, [""]),
        ("really", 2, [""]),
        ("quite", 2, [""]),
        ("rather", 2, [""]),
        ("actually", 2, [""]),
        ("basically", 3, [""]),
        ("essentially", 2, [""]),
        ("literally", 3, [""]),
        ("obviously", 3, [""]),
        ("clearly", 2, [""]),
        ("of course", 2, [""]),
        ("needless to say", 4, [""]),
        ("it goes without saying", 4, [""]),
        ("to be honest", 3, [""]),
        ("in my opinion", 2, [""]),
        ("I think", 2, [""]),
        ("I believe", 2, [""]),
    ])

    # =================================================================
    # CLICHE
    # =================================================================
    table += _entries(PhraseCategory.CLICHE, [
        ("think outside the box", 4, ["be creative", "innovate", "find new approaches", "explore alternatives"]),
        ("at the end of the day", 4, ["ultimately", "finally", "in conclusion", "most importantly"]),
        ("low-hanging fruit", 4, ["easy opportunities", "simple solutions", "quick wins", "accessible options"]),
        ("move the needle", 4, ["make progress", "create impact", "drive results", "achieve change"]),
        ("circle back", 3, ["follow up", "revisit", "return to", "discuss later"]),
        ("touch base", 3, ["connect", "contact", "communicate", "meet"]),
        ("deep dive", 3, ["thorough analysis", "detailed examination", "comprehensive review", "in-depth study"]),
        ("drill down", 3, ["examine closely", "analyze in detail", "investigate thoroughly", "explore deeply"]),
        ("ballpark figure", 3, ["estimate", "approximation", "rough calculation", "preliminary number"]),
        ("best practices", 2, ["proven methods", "effective approaches", "recommended techniques", "standard procedures"]),
    ])

    # =================================================================
    # REDUNDANT
    # =================================================================
    table += _entries(PhraseCategory.REDUNDANT, [
        ("advance planning", 3, ["planning"]),
        ("future plans", 3, ["plans"]),
        ("end result", 3, ["result"]),
        ("final outcome", 3, ["outcome"]),
        ("past history", 3, ["history"]),
        ("close proximity", 3, ["proximity"]),
        ("added bonus", 3, ["bonus"]),
        ("basic fundamentals", 3, ["fundamentals"]),
        ("completely finished", 3, ["finished"]),
        ("absolutely essential", 3, ["essential"]),
    ])

    # =================================================================
    # WEAK
    # =================================================================
    table += _entries(PhraseCategory.WEAK, [
        ("stuff", 3, ["items", "materials", "components", "elements"]),
        ("things", 3, ["items", "elements", "factors", "aspects"]),
        ("a lot", 2, ["many", "numerous", "substantial", "significant"]),
        ("sort of", 2, ["somewhat", "partially", "to some extent"]),
        ("kind of", 2, ["somewhat", "partially", "to some extent"]),
        ("pretty much", 2, ["mostly", "largely", "essentially"]),
        ("something like", 2, ["approximately", "roughly", "about"]),
        ("more or less", 2, ["approximately", "roughly", "about"]),
    ])

    # =================================================================
    # AI TYPICAL
    # =================================================================
    table += _entries(PhraseCategory.AI_TYPICAL, [
        ("delve into", 4, ["explore", "examine", "investigate", "study"]),
        ("it is worth noting", 3, ["notably", "importantly", "significantly"]),
        ("it is important to note", 3, ["notably", "importantly", "significantly"]),
        ("it should be noted", 3, ["notably", "importantly", "significantly"]),
        ("furthermore", 2, ["additionally", "also", "moreover", "in addition"]),
        ("moreover", 2, ["additionally", "also", "furthermore", "in addition"]),
        ("in conclusion", 2, ["finally", "ultimately", "in summary"]),
        ("in summary", 2, ["finally", "ultimately", "in conclusion"]),
        ("comprehensive guide", 3, ["complete guide", "thorough guide", "detailed guide"]),
        ("ultimate guide", 4, ["complete guide", "thorough guide", "detailed guide"]),
        ("dive deep", 3, ["explore thoroughly", "examine closely", "investigate carefully"]),
    ])

    return table


def _match_case(original: str, replacement: str) -> str:
    if replacement and original[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


class ProhibitedPhraseDetector:
    """
    Detects, scores, and removes prohibited phrases.

    Usage:
        detector = ProhibitedPhraseDetector()
        found = detector.detect(content)
        cleaned = detector.eliminate(content)
        score = detector.calculate_quality_score(content)
    """

    def __init__(self, phrases: Optional[List[ProhibitedPhrase]] = None):
        self._phrases: List[ProhibitedPhrase] = list(phrases) if phrases is not None else default_phrase_table()
        self._compiled: Dict[str, Pattern] = {}
        self._compiled_starts: Dict[str, Pattern] = {}

    @property
    def phrases(self) -> List[ProhibitedPhrase]:
        return list(self._phrases)

    def _pattern(self, item: ProhibitedPhrase) -> Pattern:
        pattern = self._compiled.get(item.phrase)
        if pattern is None:
            pattern = item.compile()
            self._compiled[item.phrase] = pattern
        return pattern

    def _sentence_start_pattern(self, item: ProhibitedPhrase) -> Pattern:
        pattern = self._compiled_starts.get(item.phrase)
        if pattern is None:
            pattern = item.compile_sentence_start()
            self._compiled_starts[item.phrase] = pattern
        return pattern

    def detect(self, content: str) -> List[PhraseDetectionResult]:
        """
        Find every prohibited phrase in content.

        Args:
            content: Text to scan

        Returns:
            One result per phrase found, in table order, with all match
            positions and the surrounding context of each.
        """
        content = content or ""
        detected: List[PhraseDetectionResult] = []

        for item in self._phrases:
            positions: List[int] = []
            context: List[str] = []
            for match in self._pattern(item).finditer(content):
                positions.append(match.start())
                context.append(extract_context(content, match.start(), match.end() - match.start()))

            if positions:
                detected.append(PhraseDetectionResult(
                    phrase=item.phrase,
                    suggestions=list(item.replacement_suggestions),
                    category=item.category.value,
                    severity=item.severity,
                    positions=positions,
                    context=context,
                ))

        logger.debug(f"Detected {len(detected)} prohibited phrases")
        return detected

    def eliminate(self, content: str) -> str:
        """
        Replace prohibited phrases with their first suggestion.

        Highest severity phrases are handled first; the sort is stable so
        table order breaks ties. Phrases whose first suggestion is empty are
        removed outright, and a removal that opens a sentence takes the
        following comma with it and capitalises the next word.
        """
        cleaned = content or ""
        ordered = sorted(self._phrases, key=lambda p: p.severity, reverse=True)

        for item in ordered:
            replacement = item.replacement_suggestions[0] if item.replacement_suggestions else ""
            if not replacement:
                cleaned = self._sentence_start_pattern(item).sub(lambda m: m.group(1) + m.group(2).upper(), cleaned)
            cleaned = self._pattern(item).sub(lambda m: _match_case(m.group(0), replacement), cleaned)

        # Removals leave doubled spaces and stray spaces before punctuation
        cleaned = re.sub(r"[ \t]{2,}", " ", cleaned)
        cleaned = re.sub(r"[ \t]+([,.;:!?])", r"\1", cleaned)
        return cleaned

    def calculate_quality_score(self, content: str) -> PhraseQualityScore:
        """
        Score content 0-100 based on prohibited phrase usage.

        Each detected phrase costs up to 5 points, scaled by the average
        severity of everything detected.
        """
        detected = self.detect(content)
        total_words = max(1, count_words(content))

        category_breakdown: Dict[str, int] = {}
        for item in detected:
            category_breakdown[item.category] = category_breakdown.get(item.category, 0) + 1

        high_severity = sum(1 for item in detected if item.severity >= HIGH_SEVERITY)

        penalty_per_phrase = min(5.0, 100.0 / total_words)
        if detected:
            severity_multiplier = sum(item.severity for item in detected) / len(detected)
        else:
            severity_multiplier = 1.0
        total_penalty = len(detected) * penalty_per_phrase * severity_multiplier
        overall = max(0.0, 100.0 - total_penalty)

        return PhraseQualityScore(
            overall_score=round_half_up(overall),
            detected_phrases=len(detected),
            high_severity_count=high_severity,
            category_breakdown=category_breakdown,
            recommendations=self._generate_recommendations(detected, category_breakdown),
        )

    def _generate_recommendations(
        self,
        detected: List[PhraseDetectionResult],
        category_breakdown: Dict[str, int],
    ) -> List[str]:
        if not detected:
            return ["Excellent! No prohibited phrases detected."]

        recommendations = [f"Found {len(detected)} prohibited phrases that should be replaced."]

        for category, template in _CATEGORY_ADVICE.items():
            count = category_breakdown.get(category.value)
            if count:
                recommendations.append(template.format(n=count))

        high_severity = sum(1 for item in detected if item.severity >= HIGH_SEVERITY)
        if high_severity:
            recommendations.append(f"{high_severity} high-priority phrases need immediate attention.")

        return recommendations

    # =========================================================================
    # Table management
    # =========================================================================

    def add_phrase(self, phrase: ProhibitedPhrase) -> None:
        self._phrases.append(phrase)

    def remove_phrase(self, phrase: str) -> None:
        self._phrases = [p for p in self._phrases if p.phrase != phrase]
        self._compiled.pop(phrase, None)
        self._compiled_starts.pop(phrase, None)

    def get_phrases_by_category(self, category) -> List[ProhibitedPhrase]:
        value = category.value if isinstance(category, PhraseCategory) else category
        return [p for p in self._phrases if p.category.value == value]

    def get_database_stats(self) -> Dict[str, Any]:
        by_category: Dict[str, int] = {}
        by_severity: Dict[int, int] = {}
        for item in self._phrases:
            by_category[item.category.value] = by_category.get(item.category.value, 0) + 1
            by_severity[item.severity] = by_severity.get(item.severity, 0) + 1

        return {
            "total_phrases": len(self._phrases),
            "by_category": by_category,
            "by_severity": by_severity,
        }
