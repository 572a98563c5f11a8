"""
Local Search Pattern Analysis

Maps a target region to known regional search behaviour, localisation
patterns and content structure preferences. Regions are matched by alias
(e.g. "Dubai" -> UAE, "United Kingdom" -> UK); anything unrecognised falls
back to a generic profile.
"""

import re
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class LocalSearchPatternAnalysisResult:
    """Regional search profile for a region/keyword pair."""
    region: str
    regional_search_behavior: List[str] = field(default_factory=list)
    local_optimization_patterns: List[str] = field(default_factory=list)
    cultural_search_preferences: List[str] = field(default_factory=list)
    region_specific_content_structure: List[str] = field(default_factory=list)
    local_user_intent_classification: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RegionProfile:
    name: str
    aliases: Tuple[str, ...]
    search_behavior: Tuple[str, ...]
    optimization_patterns: Tuple[str, ...]
    cultural_preferences: Tuple[str, ...]
    content_structure: Tuple[str, ...]
    user_intent: Tuple[str, ...]
    recommendations: Tuple[str, ...]


REGION_PROFILES: Tuple[RegionProfile, ...] = (
    RegionProfile(
        name="UAE",
        aliases=("uae", "dubai", "abu dhabi", "united arab emirates", "emirates"),
        search_behavior=(
            "High mobile search usage.",
            "Emphasis on luxury and high-end products.",
        ),
        optimization_patterns=(
            "Inclusion of Arabic keywords alongside English.",
            "Local business listings with Arabic and English names.",
        ),
        cultural_preferences=("Formal and respectful tone.",),
        content_structure=("Often includes sections on cultural relevance.",),
        user_intent=("Strong transactional intent for services.",),
        recommendations=("Ensure mobile-first design and localized content.",),
    ),
    RegionProfile(
        name="UK",
        aliases=("uk", "united kingdom", "great britain", "britain", "england", "scotland", "wales"),
        search_behavior=(
            "Preference for detailed, factual information.",
            "Lower tolerance for hyperbolic claims.",
        ),
        optimization_patterns=("British English spelling and terminology.",),
        cultural_preferences=("Reserved and factual communication style.",),
        content_structure=("Structured with clear headings and bullet points.",),
        user_intent=("Strong informational intent.",),
        recommendations=("Use British English and avoid overly promotional language.",),
    ),
    RegionProfile(
        name="US",
        aliases=("us", "usa", "united states", "america"),
        search_behavior=(
            "Direct and benefit-focused search queries.",
            "High expectation for immediate value.",
        ),
        optimization_patterns=("American English spelling and terminology.",),
        cultural_preferences=("Direct and action-oriented communication.",),
        content_structure=("Clear value propositions and CTAs.",),
        user_intent=("Mixed transactional and informational intent.",),
        recommendations=("Emphasize clear benefits and strong calls-to-action.",),
    ),
    RegionProfile(
        name="Australia",
        aliases=("australia", "au", "sydney", "melbourne"),
        search_behavior=(
            "Casual and friendly search approach.",
            "Preference for authentic, down-to-earth content.",
        ),
        optimization_patterns=("Australian English spelling and slang.",),
        cultural_preferences=("Informal but professional tone.",),
        content_structure=("Conversational style with practical examples.",),
        user_intent=("Balanced informational and transactional intent.",),
        recommendations=("Use Australian English and maintain a friendly, approachable tone.",),
    ),
)

DEFAULT_PROFILE = RegionProfile(
    name="Default",
    aliases=(),
    search_behavior=("General search behavior patterns.",),
    optimization_patterns=("Standard SEO optimization techniques.",),
    cultural_preferences=("Professional and neutral tone.",),
    content_structure=("Standard content structure with clear headings.",),
    user_intent=("Mixed search intent patterns.",),
    recommendations=("Follow general SEO best practices and maintain professional tone.",),
)


def _alias_pattern(aliases: Tuple[str, ...]) -> "re.Pattern":
    alternatives = "|".join(re.escape(a) for a in sorted(aliases, key=len, reverse=True))
    return re.compile(rf"(?<![a-z0-9])(?:{alternatives})(?![a-z0-9])")


class LocalSearchAnalyzer:
    """
    Looks up regional search patterns for a target region.

    Usage:
        analyzer = LocalSearchAnalyzer()
        result = analyzer.analyze("Dubai", "SEO services")
        print(result.recommendations)
    """

    def __init__(self):
        self._matchers = [(profile, _alias_pattern(profile.aliases)) for profile in REGION_PROFILES]

    def resolve_region(self, region: Optional[str]) -> RegionProfile:
        """Find the profile whose alias appears in region, or the default."""
        normalized = (region or "").strip().lower() if isinstance(region, str) else ""
        if normalized:
            for profile, pattern in self._matchers:
                if pattern.search(normalized):
                    return profile
        return DEFAULT_PROFILE

    def analyze(self, region: Optional[str], keyword: Optional[str]) -> LocalSearchPatternAnalysisResult:
        """
        Build the regional search profile for a region and keyword.

        Never raises; unknown or empty regions get the default profile.
        """
        profile = self.resolve_region(region)
        normalized_keyword = " ".join(keyword.lower().split()) if isinstance(keyword, str) else ""

        recommendations = list(profile.recommendations)
        if normalized_keyword:
            target = "your target market" if profile is DEFAULT_PROFILE else profile.name
            recommendations.append(f'Localize content targeting "{normalized_keyword}" for {target} searchers.')

        logger.debug(f"Local search profile for region={region!r}: {profile.name}")

        return LocalSearchPatternAnalysisResult(
            region=profile.name,
            regional_search_behavior=list(profile.search_behavior),
            local_optimization_patterns=list(profile.optimization_patterns),
            cultural_search_preferences=list(profile.cultural_preferences),
            region_specific_content_structure=list(profile.content_structure),
            local_user_intent_classification=list(profile.user_intent),
            recommendations=recommendations,
        )
