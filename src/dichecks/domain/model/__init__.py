"""Domain model value objects."""

from dichecks.domain.model.check_result import CheckResult
from dichecks.domain.model.check_stats import CheckStats
from dichecks.domain.model.configuration import DIChecksConfig
from dichecks.domain.model.declaration_site import DeclarationSite
from dichecks.domain.model.enums import InjectionKind, Severity
from dichecks.domain.model.finding import DuplicateFinding
from dichecks.domain.model.injection_identity import InjectionIdentity
from dichecks.domain.model.issue import DICheckIssue
from dichecks.domain.model.location import Location
from dichecks.domain.model.type_ref import TypeRef

__all__ = [
    "CheckResult",
    "CheckStats",
    "DIChecksConfig",
    "DeclarationSite",
    "DICheckIssue",
    "DuplicateFinding",
    "InjectionIdentity",
    "InjectionKind",
    "Location",
    "Severity",
    "TypeRef",
]
