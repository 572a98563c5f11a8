"""
Content Analysis

Text-heuristic analyzers for generated SEO content.

Components:
- ProhibitedPhraseDetector: Overused, filler and AI-typical phrase detection
- HallucinationDetector: Five-pass unsupported claim detection
- EeatOptimizer: Experience / Expertise / Authoritativeness / Trust scoring
- LocalSearchAnalyzer: Regional search pattern lookup
"""

from .phrases import (
    ProhibitedPhraseDetector,
    ProhibitedPhrase,
    PhraseCategory,
    PhraseDetectionResult,
    PhraseQualityScore,
)
from .hallucination import (
    HallucinationDetector,
    HallucinationDetectionConfig,
    HallucinationDetectionResult,
    HallucinationFlag,
    FactVerification,
    RiskLevel,
)
from .eeat import (
    EeatOptimizer,
    EeatContext,
    EeatComponent,
    EeatAnalysis,
    EeatOptimizationResult,
    EeatOptimizationError,
)
from .local_search import LocalSearchAnalyzer, LocalSearchPatternAnalysisResult

__all__ = [
    # Prohibited phrases
    "ProhibitedPhraseDetector",
    "ProhibitedPhrase",
    "PhraseCategory",
    "PhraseDetectionResult",
    "PhraseQualityScore",
    # Hallucination detection
    "HallucinationDetector",
    "HallucinationDetectionConfig",
    "HallucinationDetectionResult",
    "HallucinationFlag",
    "FactVerification",
    "RiskLevel",
    # E-E-A-T
    "EeatOptimizer",
    "EeatContext",
    "EeatComponent",
    "EeatAnalysis",
    "EeatOptimizationResult",
    "EeatOptimizationError",
    # Local search
    "LocalSearchAnalyzer",
    "LocalSearchPatternAnalysisResult",
]
