"""Tests for checks/duplicate/hierarchy_index.py."""

from dichecks.application.checks.duplicate.classifier import IdentityClassifier
from dichecks.application.checks.duplicate.hierarchy_index import HierarchyIndex
from dichecks.application.checks.duplicate.suppression import SuppressionFilter
from dichecks.domain.model.injection_identity import InjectionIdentity
from tests.factories import make_hierarchy, make_site, make_type

CHECK = "duplicate-injection-in-hierarchy"


def make_index() -> HierarchyIndex:
    classifier = IdentityClassifier(make_hierarchy({}))
    return HierarchyIndex(classifier, SuppressionFilter(CHECK))


class TestHierarchyIndexRecord:
    """Tests for HierarchyIndex.record."""

    def test_record_returns_identity(self) -> None:
        index = make_index()
        identity = index.record(make_site("app.A", "app.X"))
        assert identity == InjectionIdentity("app.X")
        assert identity in index

    def test_same_identity_shares_bucket(self) -> None:
        index = make_index()
        a = make_site("app.A", "app.X")
        b = make_site("app.B", make_type("dagger.Lazy", "app.X"))
        index.record(a)
        index.record(b)
        assert len(index) == 1
        assert index.sites_for(InjectionIdentity("app.X")) == (a, b)

    def test_rerecording_is_noop(self) -> None:
        index = make_index()
        site = make_site("app.A", "app.X")
        index.record(site)
        index.record(site)
        assert index.site_count == 1

    def test_suppressed_site_skipped(self) -> None:
        index = make_index()
        result = index.record(make_site("app.A", "app.X", suppressed=(CHECK,)))
        assert result is None
        assert len(index) == 0
        assert index.site_count == 0

    def test_qualifiers_split_buckets(self) -> None:
        index = make_index()
        index.record(make_site("app.A", "app.X", qualifier="foo"))
        index.record(make_site("app.B", "app.X", qualifier="bar"))
        index.record(make_site("app.C", "app.X"))
        assert len(index) == 3


class TestHierarchyIndexIteration:
    """Tests for bucket iteration order."""

    def test_buckets_in_insertion_order(self) -> None:
        index = make_index()
        index.record_all(
            [
                make_site("app.A", "app.Y"),
                make_site("app.A", "app.X", name="x"),
                make_site("app.B", "app.Y", name="y"),
            ]
        )
        assert index.identities == (InjectionIdentity("app.Y"), InjectionIdentity("app.X"))
        buckets = list(index.buckets())
        assert [len(sites) for _, sites in buckets] == [2, 1]

    def test_unknown_identity_empty(self) -> None:
        assert make_index().sites_for(InjectionIdentity("app.Missing")) == ()
