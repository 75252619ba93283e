"""Diagnostic models: what the engine returns.

Occurrences are pure data.  The engine never logs or raises them; callers
decide how to render, store, or alert on the result.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from transit_timecheck.domain.enums import RuleId, Severity


class Occurrence(BaseModel):
    """One rule violation, located by free-text *prefix*.

    Example prefix: ``trip_id 1.1 stop_sequence 3 arrival_time 10:01:05
    (1293876065) is less than previous stop departure_time ...``
    """

    rule_id: RuleId
    prefix: str = Field(..., description="Locus text identifying what failed")

    model_config = {"frozen": True}


class Rule(BaseModel):
    """Catalog metadata for a rule.  Owned by the catalog, not the engine."""

    rule_id: RuleId
    severity: Severity
    title: str = Field(..., min_length=1)
    occurrence_suffix: str = Field(
        "", description="Text appended to each occurrence prefix when rendered"
    )

    model_config = {"frozen": True}


class DiagnosticGroup(BaseModel):
    """All occurrences of a single rule for one validation call."""

    rule: Rule
    occurrences: list[Occurrence] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @property
    def rule_id(self) -> RuleId:
        return self.rule.rule_id

    @property
    def count(self) -> int:
        return len(self.occurrences)
