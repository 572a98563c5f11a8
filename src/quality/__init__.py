"""
Quality Gates

Enforces content quality standards over analyzer results.

Components:
- QualityGate: Base quality gate framework
- ContentQualityEnforcer: Phrase, hallucination and E-E-A-T gates
"""

from .gates import QualityGate, QualityResult, GateStatus, EnforcementResult, ContentQualityEnforcer

__all__ = [
    "QualityGate",
    "QualityResult",
    "GateStatus",
    "EnforcementResult",
    "ContentQualityEnforcer",
]
