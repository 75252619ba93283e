"""Rule catalog: maps rule identifiers to severity and descriptive text.

The engine only ever produces ``RuleId``-tagged occurrences.  Presentation
text lives here so it can be swapped (translated, reworded) without touching
validation logic.
"""

from __future__ import annotations

from collections.abc import Mapping

from transit_timecheck.domain.diagnostics import Rule
from transit_timecheck.domain.enums import RuleId, Severity


class UnknownRuleError(KeyError):
    """Raised when the catalog has no entry for a rule identifier."""


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        rule_id=RuleId.W001,
        severity=Severity.WARNING,
        title="Timestamps should be populated for all elements",
        occurrence_suffix="does not have a timestamp",
    ),
    Rule(
        rule_id=RuleId.W007,
        severity=Severity.WARNING,
        title="Refresh interval is more than 35 seconds",
        occurrence_suffix="which is greater than the recommended refresh interval",
    ),
    Rule(
        rule_id=RuleId.W008,
        severity=Severity.WARNING,
        title="Header timestamp is older than 65 seconds",
        occurrence_suffix="old which is greater than the recommended age",
    ),
    Rule(
        rule_id=RuleId.E001,
        severity=Severity.ERROR,
        title="Not in POSIX time",
        occurrence_suffix="is not POSIX time",
    ),
    Rule(
        rule_id=RuleId.E012,
        severity=Severity.ERROR,
        title="Header timestamp should be greater than or equal to all other timestamps",
        occurrence_suffix="is greater than the header timestamp",
    ),
    Rule(
        rule_id=RuleId.E017,
        severity=Severity.ERROR,
        title="GTFS-rt content changed but has the same header timestamp",
        occurrence_suffix="is the same as the previous feed iteration but the content changed",
    ),
    Rule(
        rule_id=RuleId.E018,
        severity=Severity.ERROR,
        title="GTFS-rt header timestamp decreased between two sequential iterations",
    ),
    Rule(
        rule_id=RuleId.E022,
        severity=Severity.ERROR,
        title="Sequential stop_time_update times are not increasing",
    ),
    Rule(
        rule_id=RuleId.E025,
        severity=Severity.ERROR,
        title="Stop_time_update departure time is before arrival time",
    ),
)


class RuleCatalog:
    """Read-only lookup of rule metadata by identifier.

    Usage:
        catalog = RuleCatalog()
        rule = catalog.lookup(RuleId.E001)
    """

    def __init__(self, rules: Mapping[RuleId, Rule] | None = None) -> None:
        if rules is None:
            rules = {rule.rule_id: rule for rule in DEFAULT_RULES}
        self._rules = dict(rules)

    def lookup(self, rule_id: RuleId) -> Rule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise UnknownRuleError(rule_id.value) from None

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)
