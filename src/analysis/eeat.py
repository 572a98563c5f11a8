"""
E-E-A-T Scoring and Optimization

Scores content on the four E-E-A-T components by matching curated indicator
phrases:

- Experience (25%) - First-hand, practical involvement
- Expertise (30%) - Research, data, technical depth
- Authoritativeness (25%) - Recognition, credentials, citations
- Trustworthiness (20%) - Transparency, verification, disclosure

Each component starts from a base score and gains a fixed amount per
indicator found, capped at 100.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional

from .text import round_half_up

logger = logging.getLogger(__name__)


class EeatOptimizationError(ValueError):
    """Raised when content cannot be scored."""


@dataclass
class EeatContext:
    """What the content is about and who wrote it."""
    industry: str
    keyword: str
    author_credentials: Optional[str] = None
    company_info: Optional[str] = None
    target_audience: Optional[str] = None
    content_type: Optional[str] = None  # article, guide, review, news, opinion


@dataclass
class EeatComponent:
    """Score and evidence for one E-E-A-T component."""
    score: int
    indicators: List[str] = field(default_factory=list)
    missing_elements: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass
class EeatAnalysis:
    experience: EeatComponent
    expertise: EeatComponent
    authoritativeness: EeatComponent
    trustworthiness: EeatComponent
    overall_score: int
    recommendations: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EeatOptimizationResult:
    optimized_content: str
    eeat_score: int
    experience_score: int
    expertise_score: int
    authoritativeness_score: int
    trustworthiness_score: int
    eeat_issues: List[str]
    eeat_recommendations: List[str]
    confidence: int
    improvement_areas: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComponentRule:
    """How one component is scored."""
    name: str
    indicators: tuple
    base: int
    per_indicator: int
    min_indicators: int
    missing_element: str
    suggestion: str
    weight: float
    improvement_threshold: int


EXPERIENCE = ComponentRule(
    name="experience",
    indicators=(
        "in my experience",
        "i've seen firsthand",
        "having worked with",
        "years of experience",
        "practical application",
        "real-world scenarios",
        "hands-on experience",
        "personal experience",
        "i've found that",
        "from my work with",
    ),
    base=40,
    per_indicator=8,
    min_indicators=1,
    missing_element="No experience indicators found",
    suggestion="Add personal experience and practical examples",
    weight=0.25,
    improvement_threshold=80,
)

EXPERTISE = ComponentRule(
    name="expertise",
    indicators=(
        "research shows",
        "studies indicate",
        "according to data",
        "peer-reviewed research",
        "scientific evidence",
        "clinical trials",
        "expert analysis",
        "technical specifications",
        "industry standards",
        "best practices",
    ),
    base=45,
    per_indicator=7,
    min_indicators=2,
    missing_element="Limited expertise indicators",
    suggestion="Add more technical depth and authoritative sources",
    weight=0.30,
    improvement_threshold=85,
)

AUTHORITATIVENESS = ComponentRule(
    name="authoritativeness",
    indicators=(
        "published research",
        "peer-reviewed",
        "certified by",
        "licensed professional",
        "industry recognition",
        "award-winning",
        "featured in",
        "quoted by",
        "referenced by",
        "endorsed by",
    ),
    base=35,
    per_indicator=10,
    min_indicators=1,
    missing_element="No authority signals found",
    suggestion="Add credentials, certifications, or recognition",
    weight=0.25,
    improvement_threshold=75,
)

TRUSTWORTHINESS = ComponentRule(
    name="trustworthiness",
    indicators=(
        "transparent about",
        "honest assessment",
        "accurate information",
        "verified data",
        "fact-checked",
        "updated regularly",
        "sources cited",
        "disclaimer",
        "privacy policy",
        "contact information",
    ),
    base=50,
    per_indicator=6,
    min_indicators=2,
    missing_element="Limited trust signals",
    suggestion="Add more transparency and trust indicators",
    weight=0.20,
    improvement_threshold=90,
)

COMPONENT_RULES = (EXPERIENCE, EXPERTISE, AUTHORITATIVENESS, TRUSTWORTHINESS)

CREDENTIAL_KEYWORDS = (
    "certified", "licensed", "accredited", "phd", "doctor", "professor",
    "cpa", "degree", "years experience", "years of experience",
)
CREDENTIAL_BONUS = 10
RECOMMENDATION_FLOOR = 70


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


class EeatOptimizer:
    """
    Analyzes and optimizes content for E-E-A-T signals.

    Usage:
        optimizer = EeatOptimizer()
        context = EeatContext(industry="finance", keyword="index funds")
        result = optimizer.optimize(content, context)
        print(result.eeat_score, result.improvement_areas)
    """

    def optimize(self, content: str, context: EeatContext) -> EeatOptimizationResult:
        """
        Score content, identify weak components and re-score.

        Args:
            content: Content to optimize
            context: Industry, keyword and author details

        Returns:
            EeatOptimizationResult with final scores, issues and recommendations

        Raises:
            EeatOptimizationError: If content is missing or blank
        """
        if not isinstance(content, str) or not content.strip():
            logger.error("E-E-A-T optimization failed: content must be a non-empty string")
            raise EeatOptimizationError("E-E-A-T optimization failed: Content must be a non-empty string")

        analysis = self.analyze(content, context)

        recommendations: List[str] = []
        improvement_areas: List[str] = []
        issues: List[str] = []

        for rule in COMPONENT_RULES:
            component = getattr(analysis, rule.name)
            if component.score < rule.improvement_threshold:
                improvement_areas.append(rule.name)
                recommendations.extend(component.suggestions)
            issues.extend(component.missing_elements)

        # Content passes through unchanged
        optimized = content
        final = self.analyze(optimized, context)
        confidence = min(95, 70 + (final.overall_score - analysis.overall_score))

        logger.info(
            f"E-E-A-T optimization completed: original={analysis.overall_score}, "
            f"final={final.overall_score}, improvement_areas={len(improvement_areas)}, "
            f"confidence={confidence}"
        )

        return EeatOptimizationResult(
            optimized_content=optimized,
            eeat_score=final.overall_score,
            experience_score=final.experience.score,
            expertise_score=final.expertise.score,
            authoritativeness_score=final.authoritativeness.score,
            trustworthiness_score=final.trustworthiness.score,
            eeat_issues=_unique(issues),
            eeat_recommendations=_unique(recommendations),
            confidence=confidence,
            improvement_areas=improvement_areas,
        )

    def analyze(self, content: str, context: Optional[EeatContext] = None) -> EeatAnalysis:
        """Score each E-E-A-T component and the weighted overall score."""
        lowered = (content or "").lower()

        components = {rule.name: self._score_component(lowered, rule) for rule in COMPONENT_RULES}
        self._apply_author_credentials(components["expertise"], context)

        overall = round_half_up(sum(components[rule.name].score * rule.weight for rule in COMPONENT_RULES))

        recommendations: List[str] = []
        for rule in COMPONENT_RULES:
            component = components[rule.name]
            if component.score < RECOMMENDATION_FLOOR:
                recommendations.extend(component.suggestions)

        return EeatAnalysis(
            experience=components["experience"],
            expertise=components["expertise"],
            authoritativeness=components["authoritativeness"],
            trustworthiness=components["trustworthiness"],
            overall_score=overall,
            recommendations=_unique(recommendations),
        )

    @staticmethod
    def _score_component(lowered: str, rule: ComponentRule) -> EeatComponent:
        found = [indicator for indicator in rule.indicators if indicator in lowered]
        component = EeatComponent(score=min(100, rule.base + rule.per_indicator * len(found)), indicators=found)

        if len(found) < rule.min_indicators:
            component.missing_elements.append(rule.missing_element)
            component.suggestions.append(rule.suggestion)
        return component

    @staticmethod
    def _apply_author_credentials(expertise: EeatComponent, context: Optional[EeatContext]) -> None:
        credentials = (context.author_credentials or "").lower() if context else ""
        if any(keyword in credentials for keyword in CREDENTIAL_KEYWORDS):
            expertise.score = min(100, expertise.score + CREDENTIAL_BONUS)
            expertise.indicators.append("author credentials")
        else:
            expertise.suggestions.append("Include author credentials and relevant qualifications")
