"""Tests for the pytest plugin (run through pytester)."""

import pytest

DUPLICATED = """
from di import inject

class Repo:
    pass

class Base:
    repo: Repo = inject()

class Child(Base):
    repo: Repo = inject()
"""

CHECK_TEST = """
def test_injections(di_check_result):
    assert di_check_result.passed, "\\n".join(map(str, di_check_result.issues))
"""


class TestPytestPlugin:
    """Fixtures provided by the plugin."""

    def test_fixtures_fail_on_duplicate(self, pytester: pytest.Pytester) -> None:
        pytester.makeini("[pytest]\ndichecks_source_dir = src\n")
        pytester.mkdir("src")
        pytester.path.joinpath("src", "svc.py").write_text(DUPLICATED, encoding="utf-8")
        pytester.makepyfile(test_di=CHECK_TEST)

        result = pytester.runpytest()

        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(["*Duplicate injection found*svc.Child*svc.Base*"])

    def test_options_from_ini(self, pytester: pytest.Pytester) -> None:
        pytester.makeini(
            "[pytest]\n"
            "dichecks_source_dir = src\n"
            "dichecks_options =\n"
            "    dichecks.duplicate_check.fail_on_error=false\n"
        )
        pytester.mkdir("src")
        pytester.path.joinpath("src", "svc.py").write_text(DUPLICATED, encoding="utf-8")
        pytester.makepyfile(test_di=CHECK_TEST)

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_missing_source_dir(self, pytester: pytest.Pytester) -> None:
        pytester.makeini("[pytest]\ndichecks_source_dir = nowhere\n")
        pytester.makepyfile(test_di=CHECK_TEST)

        result = pytester.runpytest()

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*dichecks_source_dir*does not exist*"])

    def test_marker_registered(self, pytester: pytest.Pytester) -> None:
        result = pytester.runpytest("--markers")
        result.stdout.fnmatch_lines(["*dichecks: mark test as dependency injection check*"])
