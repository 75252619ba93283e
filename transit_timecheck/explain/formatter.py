"""Deterministic plain-text rendering of diagnostic groups.

Produces consistent, structured output suitable for logs or terminals.
The engine never calls this; rendering is the caller's concern.
"""

from __future__ import annotations

from transit_timecheck.domain.diagnostics import DiagnosticGroup, Occurrence, Rule


def format_occurrence(rule: Rule, occurrence: Occurrence) -> str:
    """Join an occurrence prefix with its rule's suffix."""
    if rule.occurrence_suffix:
        return f"{occurrence.prefix} {rule.occurrence_suffix}"
    return occurrence.prefix


def format_group_heading(group: DiagnosticGroup) -> str:
    rule = group.rule
    return f"{rule.rule_id.value} [{rule.severity.value}] {rule.title} ({group.count})"


def format_plain(groups: list[DiagnosticGroup]) -> str:
    """Render *groups* as a plain-text report."""
    if not groups:
        return "No timestamp diagnostics."

    lines: list[str] = []
    for group in groups:
        lines.append(format_group_heading(group))
        for occ in group.occurrences:
            lines.append(f"  - {format_occurrence(group.rule, occ)}")
        lines.append("")
    return "\n".join(lines).rstrip()
