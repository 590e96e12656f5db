"""Tests for checks/duplicate/detector.py."""

from collections.abc import Mapping

import pytest

from dichecks.application.checks.duplicate.classifier import IdentityClassifier
from dichecks.application.checks.duplicate.detector import DuplicateDetector
from dichecks.application.checks.duplicate.hierarchy_index import HierarchyIndex
from dichecks.application.checks.duplicate.suppression import SuppressionFilter
from dichecks.domain.model.declaration_site import DeclarationSite
from dichecks.domain.model.enums import Severity
from dichecks.domain.model.finding import DuplicateFinding
from tests.factories import ABC_HIERARCHY, make_hierarchy, make_site, make_type

CHECK = "duplicate-injection-in-hierarchy"


def detect(
    sites: list[DeclarationSite],
    parents: Mapping[str, str | None] = ABC_HIERARCHY,
    *,
    fail_on_error: bool = True,
) -> tuple[DuplicateFinding, ...]:
    hierarchy = make_hierarchy(parents)
    index = HierarchyIndex(IdentityClassifier(hierarchy), SuppressionFilter(CHECK))
    index.record_all(sites)
    return DuplicateDetector(hierarchy.superclass_of, fail_on_error=fail_on_error).detect(index)


def pairs(findings: tuple[DuplicateFinding, ...]) -> list[tuple[str, str]]:
    return [(f.descendant_class, f.ancestor_class) for f in findings]


class TestDetectorScenarios:
    """A <- B <- C scenarios."""

    def test_only_base_declares(self) -> None:
        assert detect([make_site("app.A", "app.X")]) == ()

    def test_parent_and_child_declare(self) -> None:
        child = make_site("app.B", "app.X", line=10)
        findings = detect([make_site("app.A", "app.X"), child])

        assert len(findings) == 1
        finding = findings[0]
        assert finding.site == child
        assert finding.ancestor_class == "app.A"
        assert finding.descendant_class == "app.B"
        assert finding.identity.type_key == "app.X"

    def test_lazy_in_parent_direct_in_child(self) -> None:
        child = make_site("app.B", "app.X")
        findings = detect([make_site("app.A", make_type("dagger.Lazy", "app.X")), child])

        assert pairs(findings) == [("app.B", "app.A")]
        assert findings[0].site == child

    def test_different_qualifiers(self) -> None:
        sites = [
            make_site("app.A", "app.X", qualifier="foo"),
            make_site("app.B", "app.X", qualifier="bar"),
        ]
        assert detect(sites) == ()

    def test_qualified_and_unqualified(self) -> None:
        sites = [make_site("app.A", "app.X", qualifier="foo"), make_site("app.B", "app.X")]
        assert detect(sites) == ()

    def test_suppressed_child(self) -> None:
        sites = [make_site("app.A", "app.X"), make_site("app.B", "app.X", suppressed=(CHECK,))]
        assert detect(sites) == ()

    def test_suppressed_ancestor_cannot_be_matched(self) -> None:
        sites = [make_site("app.A", "app.X", suppressed=(CHECK,)), make_site("app.B", "app.X")]
        assert detect(sites) == ()

    def test_grandchild_skips_intermediate(self) -> None:
        findings = detect([make_site("app.A", "app.X"), make_site("app.C", "app.X")])
        assert pairs(findings) == [("app.C", "app.A")]


class TestDetectorWalk:
    """Ancestor walk behaviour."""

    def test_every_level_reported(self) -> None:
        sites = [
            make_site("app.A", "app.X"),
            make_site("app.B", "app.X"),
            make_site("app.C", "app.X"),
        ]
        findings = detect(sites)
        assert pairs(findings) == [
            ("app.B", "app.A"),
            ("app.C", "app.B"),
            ("app.C", "app.A"),
        ]

    def test_siblings_not_duplicates(self) -> None:
        parents = {"app.A": None, "app.B": "app.A", "app.D": "app.A"}
        sites = [make_site("app.B", "app.X"), make_site("app.D", "app.X")]
        assert detect(sites, parents) == ()

    def test_disjoint_hierarchies(self) -> None:
        parents = {**ABC_HIERARCHY, "app.Other": None}
        sites = [make_site("app.A", "app.X"), make_site("app.Other", "app.X")]
        assert detect(sites, parents) == ()

    def test_unknown_superclass_ends_walk(self) -> None:
        # lib.Base is not analyzed: A's chain stops there
        parents = {"app.A": "lib.Base", "app.B": "app.A"}
        sites = [make_site("app.B", "app.X"), make_site("lib.Unrelated", "app.X")]
        assert detect(sites, parents) == ()

    def test_match_through_unanalyzed_base_name(self) -> None:
        parents = {"app.B": "lib.Base"}
        sites = [make_site("lib.Base", "app.X"), make_site("app.B", "app.X")]
        assert pairs(detect(sites, parents)) == [("app.B", "lib.Base")]

    def test_cycle_terminates(self) -> None:
        parents = {"app.A": "app.B", "app.B": "app.A"}
        sites = [make_site("app.A", "app.X"), make_site("app.B", "app.X")]
        findings = detect(sites, parents)
        assert pairs(findings) == [("app.A", "app.B"), ("app.B", "app.A")]

    def test_two_fields_same_class_not_duplicates(self) -> None:
        sites = [make_site("app.A", "app.X", name="one"), make_site("app.A", "app.X", name="two")]
        assert detect(sites) == ()

    def test_resolver_called_until_root(self) -> None:
        calls: list[str] = []

        def superclass_of(cls: str) -> str | None:
            calls.append(cls)
            return {"app.C": "app.B", "app.B": "app.A"}.get(cls)

        hierarchy = make_hierarchy({})
        index = HierarchyIndex(IdentityClassifier(hierarchy), SuppressionFilter(CHECK))
        index.record_all([make_site("app.C", "app.X"), make_site("app.Z", "app.X")])
        DuplicateDetector(superclass_of).detect(index)

        assert calls[:3] == ["app.C", "app.B", "app.A"]


class TestDetectorSeverity:
    """Severity policy."""

    def test_errors_by_default(self) -> None:
        findings = detect([make_site("app.A", "app.X"), make_site("app.B", "app.X")])
        assert findings[0].severity is Severity.ERROR

    def test_warnings_when_not_failing(self) -> None:
        findings = detect(
            [make_site("app.A", "app.X"), make_site("app.B", "app.X")],
            fail_on_error=False,
        )
        assert findings[0].severity is Severity.WARNING

    def test_none_resolver_raises(self) -> None:
        with pytest.raises(TypeError, match="superclass_of must not be None"):
            DuplicateDetector(None)  # type: ignore[arg-type]
