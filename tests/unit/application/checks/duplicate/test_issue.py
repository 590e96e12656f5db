"""Tests for checks/duplicate/issue.py."""

from dichecks.application.checks.duplicate.issue import format_message, render
from dichecks.domain.model.enums import Severity
from dichecks.domain.model.finding import DuplicateFinding
from dichecks.domain.model.injection_identity import InjectionIdentity
from tests.factories import DEFAULT_TEST_FILE, make_site, make_type

CHECK = "duplicate-injection-in-hierarchy"


def make_finding(severity: Severity = Severity.ERROR) -> DuplicateFinding:
    site = make_site("app.B", make_type("dagger.Lazy", "app.X"), name="x", line=7)
    return DuplicateFinding(
        site=site,
        identity=InjectionIdentity("app.X"),
        ancestor_class="app.A",
        descendant_class="app.B",
        severity=severity,
    )


class TestFormatMessage:
    """Tests for the fixed message text."""

    def test_exact_text(self) -> None:
        assert format_message(make_finding()) == (
            "Duplicate injection found: injected class app.X in app.B also found in app.A."
        )

    def test_uses_identity_not_declared_type(self) -> None:
        assert "Lazy" not in format_message(make_finding())


class TestRender:
    """Tests for render()."""

    def test_issue_fields(self) -> None:
        issue = render(make_finding(), CHECK)

        assert issue.check_name == CHECK
        assert issue.severity is Severity.ERROR
        assert issue.subject == "app.B.x"
        assert issue.location is not None
        assert issue.location.file == DEFAULT_TEST_FILE
        assert issue.location.line == 7

    def test_severity_carried_over(self) -> None:
        issue = render(make_finding(Severity.WARNING), CHECK)
        assert issue.severity is Severity.WARNING
        assert str(issue).endswith(f"[{CHECK}]")
        assert ": warning: " in str(issue)
