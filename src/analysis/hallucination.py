"""
Hallucination Detection for Generated Content

Flags sentences that are likely to contain fabricated or unsupported claims.
Five independent passes run over the sentences of the content:

1. Cross-Reference Validation - Claims that failed external fact checks
2. Logical Consistency - Sentence pairs that contradict each other
3. Confidence Analysis - Overconfident, absolute language
4. Pattern Recognition - Phrasings typical of invented claims
5. Contextual Analysis - Sentences that drift off the main topic

Flags are aggregated into a 0-100 score (higher means more likely
hallucinated) and a four-level risk bucket.
"""

import re
import time
import logging
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Iterable, List, Optional, Pattern, Set, Tuple

from .text import extract_sentences, extract_topics, round_half_up

logger = logging.getLogger(__name__)


class RiskLevel(Enum):
    """Severity of a flag, and overall risk bucket of a result."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SEVERITY_WEIGHTS = {
    RiskLevel.LOW: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.HIGH: 3,
    RiskLevel.CRITICAL: 4,
}


class DetectionMethod:
    CROSS_REFERENCE = "cross_reference_validation"
    LOGICAL_CONSISTENCY = "logical_consistency"
    CONFIDENCE_ANALYSIS = "confidence_analysis"
    PATTERN_RECOGNITION = "pattern_recognition"
    CONTEXTUAL_ANALYSIS = "contextual_analysis"


@dataclass
class FactVerification:
    """Outcome of verifying a single fact against external sources."""
    fact: str
    is_verified: bool
    confidence_score: float  # 0-100

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FactVerification":
        return cls(
            fact=data["fact"],
            is_verified=bool(data.get("is_verified", data.get("isVerified", False))),
            confidence_score=float(data.get("confidence_score", data.get("confidenceScore", 0))),
        )


@dataclass
class HallucinationFlag:
    """A sentence flagged by one detection pass."""
    sentence: str
    reason: str
    confidence: float  # 0-100
    detection_method: str
    severity: RiskLevel
    suggested_fix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentence": self.sentence,
            "reason": self.reason,
            "confidence": self.confidence,
            "detection_method": self.detection_method,
            "severity": self.severity.value,
            "suggested_fix": self.suggested_fix,
        }


@dataclass
class HallucinationDetectionResult:
    """Aggregated result of all detection passes."""
    hallucinations_detected: bool
    hallucination_score: int  # 0-100
    flagged_sentences: List[HallucinationFlag]
    recommendations: List[str]
    confidence_threshold: float
    detection_methods: List[str]
    processing_time_ms: float
    risk_level: RiskLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hallucinations_detected": self.hallucinations_detected,
            "hallucination_score": self.hallucination_score,
            "flagged_sentences": [f.to_dict() for f in self.flagged_sentences],
            "recommendations": self.recommendations,
            "confidence_threshold": self.confidence_threshold,
            "detection_methods": self.detection_methods,
            "processing_time_ms": round(self.processing_time_ms, 3),
            "risk_level": self.risk_level.value,
        }


@dataclass
class HallucinationDetectionConfig:
    """Which passes to run and how strict to be."""
    enable_cross_reference_validation: bool = True
    enable_logical_consistency_check: bool = True
    enable_confidence_score_analysis: bool = True
    enable_pattern_recognition: bool = True
    enable_contextual_analysis: bool = True
    confidence_threshold: float = 70.0
    strict_mode: bool = False  # flag unverified facts even when no sentence contains them


_CONTRADICTION_PAIRS: List[Tuple[Pattern, Pattern]] = [
    (
        re.compile(r"\b(?:increases?|grows?|rises?|improves?)\b", re.IGNORECASE),
        re.compile(r"\b(?:decreases?|shrinks?|falls?|worsens?)\b", re.IGNORECASE),
    ),
    (
        re.compile(r"\b(?:safe|secure|protected)\b", re.IGNORECASE),
        re.compile(r"\b(?:dangerous|risky|vulnerable)\b", re.IGNORECASE),
    ),
    (
        re.compile(r"\b(?:easy|simple|straightforward)\b", re.IGNORECASE),
        re.compile(r"\b(?:difficult|complex|complicated)\b", re.IGNORECASE),
    ),
]

_OVERCONFIDENT_PATTERNS: List[Tuple[Pattern, int]] = [
    (re.compile(r"\b(?:undoubtedly|without a doubt|certainly|definitely|absolutely|unquestionably)\b", re.IGNORECASE), 15),
    (re.compile(r"\b(?:proven fact|scientific fact|established truth|undeniable)\b", re.IGNORECASE), 20),
    (re.compile(r"\b(?:always|never|all|none|every single|completely|totally)\b", re.IGNORECASE), 10),
]

# Later entries are stronger signals
_SUSPICIOUS_PATTERNS: List[Pattern] = [
    re.compile(r"\b(?:studies show|research indicates|experts say|data reveals)\s+(?:that\s+)?\d+%", re.IGNORECASE),
    re.compile(r"\b(?:proven fact|scientific fact|undeniable truth|absolute certainty)\b", re.IGNORECASE),
    re.compile(r"\b(?:impossible|never fails|100% guaranteed|always works|perfect solution)\b", re.IGNORECASE),
    re.compile(r"\b(?:secret|hidden|they don't want you to know|breakthrough discovery)\b", re.IGNORECASE),
]

OVERCONFIDENCE_FLAG_SCORE = 20
TOPIC_RELEVANCE_FLOOR = 0.3
SUBSTANTIAL_SENTENCE_LENGTH = 50


def determine_risk_level(score: float) -> RiskLevel:
    """Bucket a 0-100 hallucination score."""
    if score >= 80:
        return RiskLevel.CRITICAL
    if score >= 60:
        return RiskLevel.HIGH
    if score >= 30:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class HallucinationDetector:
    """
    Runs the five heuristic passes and aggregates their flags.

    Usage:
        detector = HallucinationDetector()
        result = detector.detect(content, facts)
        if result.risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
            print(result.recommendations)
    """

    def __init__(self, config: Optional[HallucinationDetectionConfig] = None):
        self.config = config or HallucinationDetectionConfig()

    def detect(
        self,
        content: str,
        fact_verification_results: Iterable[FactVerification] = (),
    ) -> HallucinationDetectionResult:
        """
        Detect likely hallucinations in content.

        Args:
            content: Text to analyze
            fact_verification_results: Optional outcomes of external fact checks

        Returns:
            HallucinationDetectionResult with all flags, score and risk level
        """
        start = time.perf_counter()
        content = content or ""
        facts = [
            f if isinstance(f, FactVerification) else FactVerification.from_dict(f)
            for f in fact_verification_results
        ]

        sentences = extract_sentences(content)
        flags: List[HallucinationFlag] = []
        methods: List[str] = []

        if self.config.enable_cross_reference_validation and facts:
            methods.append(DetectionMethod.CROSS_REFERENCE)
            flags.extend(self._detect_unverified_facts(sentences, facts))

        if self.config.enable_logical_consistency_check:
            methods.append(DetectionMethod.LOGICAL_CONSISTENCY)
            flags.extend(self._detect_logical_inconsistencies(sentences))

        if self.config.enable_confidence_score_analysis:
            methods.append(DetectionMethod.CONFIDENCE_ANALYSIS)
            flags.extend(self._analyze_confidence_patterns(sentences))

        if self.config.enable_pattern_recognition:
            methods.append(DetectionMethod.PATTERN_RECOGNITION)
            flags.extend(self._detect_suspicious_patterns(sentences))

        if self.config.enable_contextual_analysis:
            methods.append(DetectionMethod.CONTEXTUAL_ANALYSIS)
            flags.extend(self._analyze_contextual_coherence(content, sentences))

        score = self.calculate_score(flags, len(sentences))
        risk_level = determine_risk_level(score)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            f"Hallucination scan: {len(sentences)} sentences, {len(flags)} flags, "
            f"score={score}, risk={risk_level.value}"
        )

        return HallucinationDetectionResult(
            hallucinations_detected=bool(flags),
            hallucination_score=score,
            flagged_sentences=flags,
            recommendations=self._generate_recommendations(flags),
            confidence_threshold=self.config.confidence_threshold,
            detection_methods=methods,
            processing_time_ms=elapsed_ms,
            risk_level=risk_level,
        )

    # =========================================================================
    # Detection passes
    # =========================================================================

    def _detect_unverified_facts(
        self,
        sentences: List[str],
        facts: List[FactVerification],
    ) -> List[HallucinationFlag]:
        flags = []
        for fact in facts:
            if fact.is_verified and fact.confidence_score >= self.config.confidence_threshold:
                continue

            needle = fact.fact.lower()
            sentence = next((s for s in sentences if needle in s.lower()), None)
            if sentence is None:
                if not self.config.strict_mode:
                    continue
                sentence = fact.fact

            confidence = 100 - fact.confidence_score
            if confidence > 80:
                severity = RiskLevel.CRITICAL
            elif confidence > 60:
                severity = RiskLevel.HIGH
            else:
                severity = RiskLevel.MEDIUM

            flags.append(HallucinationFlag(
                sentence=sentence,
                reason=f'Contains unverified fact: "{fact.fact}"',
                confidence=confidence,
                detection_method=DetectionMethod.CROSS_REFERENCE,
                severity=severity,
                suggested_fix=f'Verify the claim "{fact.fact}" with authoritative sources',
            ))
        return flags

    def _detect_logical_inconsistencies(self, sentences: List[str]) -> List[HallucinationFlag]:
        lowered = [s.lower() for s in sentences]
        subjects = [self._subject_words(s) for s in lowered]

        # Each pattern runs once per sentence; pairs are then built from the hit lists
        hits: List[Tuple[List[int], List[int]]] = [
            (
                [i for i, s in enumerate(lowered) if positive.search(s)],
                [i for i, s in enumerate(lowered) if negative.search(s)],
            )
            for positive, negative in _CONTRADICTION_PAIRS
        ]
        hit_sets = [(set(pos), set(neg)) for pos, neg in hits]

        flags = []
        for i in range(len(sentences)):
            opposed: Dict[int, Set[int]] = {}
            for pair, ((pos_hits, neg_hits), (pos_set, neg_set)) in enumerate(zip(hits, hit_sets)):
                for matched, others in ((pos_set, neg_hits), (neg_set, pos_hits)):
                    if i not in matched:
                        continue
                    for j in others[bisect_right(others, i):]:
                        opposed.setdefault(j, set()).add(pair)

            for j in sorted(opposed):
                if not subjects[i] & subjects[j]:
                    continue
                for _ in opposed[j]:
                    flags.append(HallucinationFlag(
                        sentence=sentences[i],
                        reason=f'Potential logical inconsistency with: "{sentences[j]}"',
                        confidence=60,
                        detection_method=DetectionMethod.LOGICAL_CONSISTENCY,
                        severity=RiskLevel.MEDIUM,
                        suggested_fix="Review for contradictory statements and clarify context",
                    ))
        return flags

    def _analyze_confidence_patterns(self, sentences: List[str]) -> List[HallucinationFlag]:
        flags = []
        for sentence in sentences:
            score = 0
            matched: List[str] = []
            for pattern, weight in _OVERCONFIDENT_PATTERNS:
                found = pattern.findall(sentence)
                score += weight * len(found)
                matched.extend(found)

            if score <= OVERCONFIDENCE_FLAG_SCORE:
                continue

            flags.append(HallucinationFlag(
                sentence=sentence,
                reason=f"Overly confident language detected: {', '.join(matched)}",
                confidence=min(95, score * 2),
                detection_method=DetectionMethod.CONFIDENCE_ANALYSIS,
                severity=RiskLevel.HIGH if score > 40 else RiskLevel.MEDIUM,
                suggested_fix="Consider using more nuanced language with appropriate qualifiers",
            ))
        return flags

    def _detect_suspicious_patterns(self, sentences: List[str]) -> List[HallucinationFlag]:
        flags = []
        for sentence in sentences:
            for index, pattern in enumerate(_SUSPICIOUS_PATTERNS):
                match = pattern.search(sentence)
                if not match:
                    continue

                confidence = 70 + index * 5
                flags.append(HallucinationFlag(
                    sentence=sentence,
                    reason=f"Suspicious pattern detected: {match.group(0)}",
                    confidence=confidence,
                    detection_method=DetectionMethod.PATTERN_RECOGNITION,
                    severity=RiskLevel.HIGH if confidence > 85 else RiskLevel.MEDIUM,
                    suggested_fix="Verify claims and provide specific sources",
                ))
        return flags

    def _analyze_contextual_coherence(self, content: str, sentences: List[str]) -> List[HallucinationFlag]:
        topics = extract_topics(content)
        main_topic = topics[0] if topics else None

        flags = []
        for sentence in sentences:
            relevance = self._topic_relevance(extract_topics(sentence), main_topic)
            if relevance < TOPIC_RELEVANCE_FLOOR and len(sentence) > SUBSTANTIAL_SENTENCE_LENGTH:
                flags.append(HallucinationFlag(
                    sentence=sentence,
                    reason="Content appears unrelated to main topic",
                    confidence=50,
                    detection_method=DetectionMethod.CONTEXTUAL_ANALYSIS,
                    severity=RiskLevel.LOW,
                    suggested_fix="Ensure all content relates to the main topic or provide clear transitions",
                ))
        return flags

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _subject_words(sentence: str) -> Set[str]:
        return {w for w in sentence.split() if len(w) > 3}

    @staticmethod
    def _topic_relevance(sentence_topics: List[str], main_topic: Optional[str]) -> float:
        if not main_topic or not sentence_topics:
            return 0.5
        relevant = [t for t in sentence_topics if main_topic in t or t in main_topic]
        return len(relevant) / len(sentence_topics)

    @staticmethod
    def calculate_score(flags: List[HallucinationFlag], total_sentences: int) -> int:
        """
        Weighted 0-100 score.

        Mean of confidence x severity weight, plus a penalty for the share
        of sentences that were flagged.
        """
        if not flags:
            return 0

        weighted = sum(f.confidence * SEVERITY_WEIGHTS[f.severity] for f in flags)
        average = weighted / len(flags)
        density_penalty = (len(flags) / max(1, total_sentences)) * 20

        return min(100, round_half_up(average + density_penalty))

    @staticmethod
    def _generate_recommendations(flags: List[HallucinationFlag]) -> List[str]:
        counts = {level: 0 for level in RiskLevel}
        for flag in flags:
            counts[flag.severity] += 1

        recommendations = []
        if counts[RiskLevel.CRITICAL]:
            recommendations.append("URGENT: Critical hallucination indicators detected. Immediate expert review required.")
        if counts[RiskLevel.HIGH]:
            recommendations.append("High-risk content detected. Comprehensive fact-checking recommended.")
        if counts[RiskLevel.MEDIUM] > 2:
            recommendations.append("Multiple medium-risk indicators. Consider additional verification steps.")
        if flags:
            recommendations.append("Review flagged sentences and verify claims with authoritative sources.")
            recommendations.append("Consider adding proper citations and qualifying language where appropriate.")
        return recommendations
