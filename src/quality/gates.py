"""
Quality Gates Implementation

Defines and enforces quality thresholds for analyzed content. Each gate
reads one analyzer result and compares a 0-100 score against its threshold.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List, Optional, Callable, Tuple

from src.analysis import EeatAnalysis, EeatOptimizationResult, HallucinationDetectionResult, PhraseQualityScore

logger = logging.getLogger(__name__)

CheckOutcome = Optional[Tuple[float, str, Dict]]


class GateStatus(Enum):
    """Quality gate status."""
    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warning"
    SKIPPED = "skipped"


@dataclass
class QualityResult:
    """Result of a quality gate check."""
    gate_name: str
    status: GateStatus
    score: Optional[float] = None
    threshold: Optional[float] = None
    message: str = ""
    details: Dict = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "gate_name": self.gate_name,
            "status": self.status.value,
            "score": self.score,
            "threshold": self.threshold,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class QualityGate:
    """Definition of a quality gate."""
    name: str
    description: str
    threshold: float
    weight: float = 1.0  # Weight in composite score
    required: bool = True  # If True, failure blocks approval
    check_fn: Optional[Callable[[Dict], CheckOutcome]] = None

    def check(self, data: Dict) -> QualityResult:
        """
        Run the quality gate check.

        Args:
            data: Analyzer results keyed by gate input name

        Returns:
            QualityResult with pass/fail status
        """
        if not self.check_fn:
            return QualityResult(
                gate_name=self.name,
                status=GateStatus.SKIPPED,
                message="No check function defined"
            )

        try:
            outcome = self.check_fn(data)
        except Exception as e:
            logger.error(f"Gate {self.name} check failed: {e}")
            return QualityResult(
                gate_name=self.name,
                status=GateStatus.FAILED,
                threshold=self.threshold,
                message=f"Check error: {str(e)}"
            )

        if outcome is None:
            return QualityResult(
                gate_name=self.name,
                status=GateStatus.SKIPPED,
                threshold=self.threshold,
                message="No analysis result for this gate"
            )

        score, message, details = outcome
        status = GateStatus.PASSED if score >= self.threshold else GateStatus.FAILED
        if not self.required and status == GateStatus.FAILED:
            status = GateStatus.WARNING

        return QualityResult(
            gate_name=self.name,
            status=status,
            score=score,
            threshold=self.threshold,
            message=message,
            details=details
        )


@dataclass
class EnforcementResult:
    """Composite outcome of all gates."""
    passed: bool
    composite_score: float
    required_gates_failed: List[str]
    gate_results: List[QualityResult]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "composite_score": self.composite_score,
            "required_gates_failed": self.required_gates_failed,
            "gate_results": [r.to_dict() for r in self.gate_results],
            "summary": {
                "total_gates": len(self.gate_results),
                "passed": sum(1 for r in self.gate_results if r.status == GateStatus.PASSED),
                "failed": sum(1 for r in self.gate_results if r.status == GateStatus.FAILED),
                "warnings": sum(1 for r in self.gate_results if r.status == GateStatus.WARNING),
                "skipped": sum(1 for r in self.gate_results if r.status == GateStatus.SKIPPED),
            },
        }


class ContentQualityEnforcer:
    """
    Enforces quality gates over content analysis results.

    Expected data keys:
    - "phrases": PhraseQualityScore
    - "hallucination": HallucinationDetectionResult
    - "eeat": EeatAnalysis or EeatOptimizationResult
    """

    def __init__(
        self,
        phrase_threshold: float = 70,
        hallucination_threshold: float = 40,
        eeat_threshold: float = 50,
    ):
        """Initialize with default content gates."""
        self.gates: Dict[str, QualityGate] = {}

        self.register_gate(QualityGate(
            name="phrase_quality",
            description="Content avoids overused, filler and AI-typical phrasing",
            threshold=phrase_threshold,
            weight=1.0,
            required=True,
            check_fn=self._check_phrase_quality
        ))

        self.register_gate(QualityGate(
            name="hallucination_risk",
            description="Content is free of likely fabricated or unsupported claims",
            threshold=hallucination_threshold,
            weight=1.5,
            required=True,
            check_fn=self._check_hallucination_risk
        ))

        self.register_gate(QualityGate(
            name="eeat_strength",
            description="Content carries experience, expertise, authority and trust signals",
            threshold=eeat_threshold,
            weight=1.2,
            required=False,
            check_fn=self._check_eeat_strength
        ))

    @classmethod
    def from_settings(cls, settings) -> "ContentQualityEnforcer":
        return cls(
            phrase_threshold=settings.PHRASE_QUALITY_THRESHOLD,
            hallucination_threshold=settings.HALLUCINATION_RISK_THRESHOLD,
            eeat_threshold=settings.EEAT_THRESHOLD,
        )

    def register_gate(self, gate: QualityGate):
        """Register a quality gate."""
        self.gates[gate.name] = gate
        logger.debug(f"Registered quality gate: {gate.name}")

    def enforce(self, data: Dict[str, Any]) -> EnforcementResult:
        """
        Run all quality gates and return the composite result.

        Skipped gates do not count toward the composite score.
        """
        results = []
        weighted_sum = 0.0
        total_weight = 0.0
        required_failed = []

        for gate_name, gate in self.gates.items():
            result = gate.check(data)
            results.append(result)

            log_fn = logger.info if result.status in (GateStatus.PASSED, GateStatus.SKIPPED) else logger.warning
            log_fn(f"Gate {gate_name}: {result.status.value} (score: {result.score})")

            if result.score is not None:
                weighted_sum += result.score * gate.weight
                total_weight += gate.weight

            if gate.required and result.status == GateStatus.FAILED:
                required_failed.append(gate_name)

        composite = weighted_sum / total_weight if total_weight > 0 else 0.0

        return EnforcementResult(
            passed=not required_failed,
            composite_score=round(composite, 2),
            required_gates_failed=required_failed,
            gate_results=results,
        )

    # =========================================================================
    # Gate Check Functions
    # =========================================================================

    @staticmethod
    def _check_phrase_quality(data: Dict) -> CheckOutcome:
        score: Optional[PhraseQualityScore] = data.get("phrases")
        if score is None:
            return None

        return float(score.overall_score), f"{score.detected_phrases} prohibited phrases detected", {
            "high_severity_count": score.high_severity_count,
            "category_breakdown": score.category_breakdown,
        }

    @staticmethod
    def _check_hallucination_risk(data: Dict) -> CheckOutcome:
        result: Optional[HallucinationDetectionResult] = data.get("hallucination")
        if result is None:
            return None

        # Gate scores are "higher is better"
        score = float(100 - result.hallucination_score)
        return score, f"{len(result.flagged_sentences)} sentences flagged ({result.risk_level.value} risk)", {
            "hallucination_score": result.hallucination_score,
            "risk_level": result.risk_level.value,
        }

    @staticmethod
    def _check_eeat_strength(data: Dict) -> CheckOutcome:
        result = data.get("eeat")
        if result is None:
            return None

        if isinstance(result, EeatOptimizationResult):
            overall = result.eeat_score
            areas = result.improvement_areas
        elif isinstance(result, EeatAnalysis):
            overall = result.overall_score
            areas = [
                name for name in ("experience", "expertise", "authoritativeness", "trustworthiness")
                if getattr(result, name).missing_elements
            ]
        else:
            raise TypeError(f"Unsupported E-E-A-T result: {type(result).__name__}")

        return float(overall), f"E-E-A-T score {overall}", {"improvement_areas": areas}
