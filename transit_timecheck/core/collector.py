"""Per-call occurrence accumulation and diagnostic assembly."""

from __future__ import annotations

from collections.abc import Iterable

from transit_timecheck.domain.diagnostics import DiagnosticGroup, Occurrence
from transit_timecheck.domain.enums import RuleId
from transit_timecheck.rules.catalog import RuleCatalog


class OccurrenceCollector:
    """Accumulates occurrences per rule for a single validation call.

    A collector is created fresh for every call and discarded afterwards,
    so concurrent calls never share state.
    """

    def __init__(self) -> None:
        self._by_rule: dict[RuleId, list[Occurrence]] = {rule_id: [] for rule_id in RuleId}

    def extend(self, occurrences: Iterable[Occurrence]) -> None:
        for occ in occurrences:
            self._by_rule[occ.rule_id].append(occ)

    def occurrences(self, rule_id: RuleId) -> list[Occurrence]:
        return list(self._by_rule[rule_id])

    @property
    def total(self) -> int:
        return sum(len(occs) for occs in self._by_rule.values())

    def assemble(self, catalog: RuleCatalog) -> list[DiagnosticGroup]:
        """Group occurrences by rule in catalog order, omitting empty rules."""
        return [
            DiagnosticGroup(rule=catalog.lookup(rule_id), occurrences=occs)
            for rule_id, occs in self._by_rule.items()
            if occs
        ]
