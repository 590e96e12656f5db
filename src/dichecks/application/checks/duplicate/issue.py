"""Duplicate finding -> diagnostic issue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dichecks.domain.model.issue import DICheckIssue

if TYPE_CHECKING:
    from dichecks.domain.model.finding import DuplicateFinding

MESSAGE_FORMAT = (
    "Duplicate injection found: injected class {type_key} in {descendant} also found in {ancestor}."
)


def format_message(finding: DuplicateFinding) -> str:
    """Build the fixed human-readable message for a finding."""
    return MESSAGE_FORMAT.format(
        type_key=finding.identity.type_key,
        descendant=finding.descendant_class,
        ancestor=finding.ancestor_class,
    )


def render(finding: DuplicateFinding, check_name: str) -> DICheckIssue:
    """Render a finding as an issue anchored at the descendant's field.

    Args:
        finding: Finding to render
        check_name: Identifier of the producing check

    Returns:
        Issue carrying the finding's severity
    """
    return DICheckIssue(
        check_name=check_name,
        severity=finding.severity,
        message=format_message(finding),
        subject=finding.site.qualified_name,
        location=finding.site.location,
    )
