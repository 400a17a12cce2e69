"""Tests for import_boundaries.engine.relationship."""

import pytest

from import_boundaries.boundary.registry import create_registry
from import_boundaries.core.types import (
    Boundary,
    BoundaryConfig,
    CrossBoundaryStyle,
    ImportSubject,
    Relationship,
    ResolvedImport,
    SpecifierStyle,
)
from import_boundaries.engine.relationship import (
    calculate_expected_path,
    detect_relationship,
    explain_import,
    is_ancestor_barrel_import,
    is_cross_boundary_import,
)
from tests.conftest import CWD, src


ALIAS = CrossBoundaryStyle.ALIAS
ABSOLUTE = CrossBoundaryStyle.ABSOLUTE


@pytest.fixture
def application(boundary_factory) -> Boundary:
    return boundary_factory("application", "@application", allow_imports_from=("@domain",))


@pytest.fixture
def domain(boundary_factory) -> Boundary:
    return boundary_factory("domain", "@domain", allow_imports_from=())


def _resolved(target_abs: str, target_dir: str | None = None) -> ResolvedImport:
    directory = target_dir or target_abs.rsplit("/", 1)[0]
    subject = ImportSubject.DIRECTORY if target_abs.endswith("/index.ts") else ImportSubject.FILE
    return ResolvedImport(target_abs=target_abs, target_dir=directory, subject=subject, style=SpecifierStyle.RELATIVE)


class TestIsCrossBoundaryImport:
    def test_different_boundaries(self, application: Boundary, domain: Boundary) -> None:
        assert is_cross_boundary_import(application, domain)

    def test_same_boundary(self, application: Boundary) -> None:
        assert not is_cross_boundary_import(application, application)

    def test_unknown_on_either_side(self, application: Boundary) -> None:
        assert is_cross_boundary_import(application, None)
        assert is_cross_boundary_import(None, application)
        assert is_cross_boundary_import(None, None)


class TestIsAncestorBarrelImport:
    def test_alias_style_tolerates_trailing_slash(self, application: Boundary) -> None:
        assert is_ancestor_barrel_import("@application", application, "src", ALIAS)
        assert is_ancestor_barrel_import("@application/", application, "src", ALIAS)
        assert not is_ancestor_barrel_import("@application/utils", application, "src", ALIAS)
        assert not is_ancestor_barrel_import("@domain", application, "src", ALIAS)

    def test_absolute_style(self, application: Boundary) -> None:
        assert is_ancestor_barrel_import("src/application", application, "src", ABSOLUTE)
        assert is_ancestor_barrel_import("src/application/", application, "src", ABSOLUTE)
        assert not is_ancestor_barrel_import("src/application/utils", application, "src", ABSOLUTE)

    def test_no_file_boundary(self) -> None:
        assert not is_ancestor_barrel_import("@application", None, "src", ALIAS)


class TestDetectRelationship:
    def test_ancestor_barrel_takes_precedence(self, application: Boundary) -> None:
        relationship = detect_relationship(
            application, application,
            src("application", "use-cases", "a.ts"), src("application", "index.ts"),
            "@application", "src", ALIAS,
        )
        assert relationship == Relationship.ANCESTOR_BARREL

    def test_cross_boundary(self, application: Boundary, domain: Boundary) -> None:
        relationship = detect_relationship(
            application, domain, src("application", "a.ts"), src("domain", "index.ts"), "@domain", "src", ALIAS
        )
        assert relationship == Relationship.CROSS_BOUNDARY

    def test_unknown_target_is_cross_boundary(self, application: Boundary) -> None:
        relationship = detect_relationship(
            application, None, src("application", "a.ts"), f"{CWD}/lib/index.ts", "../../lib", "src", ALIAS
        )
        assert relationship == Relationship.CROSS_BOUNDARY

    def test_same_directory(self, application: Boundary) -> None:
        relationship = detect_relationship(
            application, application,
            src("application", "use-cases", "a.ts"), src("application", "use-cases", "b.ts"),
            "./b.ts", "src", ALIAS,
        )
        assert relationship == Relationship.SAME_DIRECTORY

    def test_same_boundary(self, application: Boundary) -> None:
        relationship = detect_relationship(
            application, application,
            src("application", "use-cases", "a.ts"), src("application", "utils", "index.ts"),
            "../utils", "src", ALIAS,
        )
        assert relationship == Relationship.SAME_BOUNDARY


class TestCalculateExpectedPath:
    def _expected(self, relationship, resolved, file_abs, file_boundary, target_boundary, style=ALIAS):
        return calculate_expected_path(
            relationship, resolved, file_abs, file_boundary, target_boundary,
            root_dir="src", cross_boundary_style=style,
        )

    def test_ancestor_barrel_has_no_expected_path(self, application: Boundary) -> None:
        resolved = _resolved(src("application", "index.ts"))
        assert self._expected(
            Relationship.ANCESTOR_BARREL, resolved, src("application", "a.ts"), application, application
        ) is None

    def test_cross_boundary_alias(self, application: Boundary, domain: Boundary) -> None:
        resolved = _resolved(src("domain", "entities", "user.ts"))
        expected = self._expected(Relationship.CROSS_BOUNDARY, resolved, src("application", "a.ts"), application, domain)
        assert expected == "@domain"

    def test_cross_boundary_absolute(self, application: Boundary, domain: Boundary) -> None:
        resolved = _resolved(src("domain", "index.ts"))
        expected = self._expected(
            Relationship.CROSS_BOUNDARY, resolved, src("application", "a.ts"), application, domain, ABSOLUTE
        )
        assert expected == "src/domain"

    def test_unknown_target_from_boundary_has_no_expected_path(self, application: Boundary) -> None:
        resolved = _resolved(f"{CWD}/lib/index.ts")
        expected = self._expected(Relationship.CROSS_BOUNDARY, resolved, src("application", "a.ts"), application, None)
        assert expected is None

    def test_both_outside_boundaries_uses_relative_path(self) -> None:
        barrel = _resolved(src("util", "index.ts"))
        file = _resolved(src("util", "strings.ts"))

        assert self._expected(Relationship.CROSS_BOUNDARY, barrel, src("main.ts"), None, None) == "./util"
        assert self._expected(Relationship.CROSS_BOUNDARY, file, src("main.ts"), None, None) == "./util/strings"

    def test_same_directory(self, application: Boundary) -> None:
        resolved = _resolved(src("application", "b.ts"))
        expected = self._expected(Relationship.SAME_DIRECTORY, resolved, src("application", "a.ts"), application, application)
        assert expected == "./b"

    def test_same_boundary(self, application: Boundary) -> None:
        resolved = _resolved(src("application", "use-cases", "utils", "index.ts"))
        expected = self._expected(
            Relationship.SAME_BOUNDARY, resolved, src("application", "use-cases", "a.ts"), application, application
        )
        assert expected == "./utils"


class TestExplainImport:
    @pytest.fixture
    def registry(self):
        return create_registry(
            [
                BoundaryConfig(dir="domain/entities", alias="@entities", allow_imports_from=()),
                BoundaryConfig(dir="domain/queries", alias="@queries", allow_imports_from=("@entities",)),
                BoundaryConfig(dir="domain/events", alias="@events", allow_imports_from=("@entities",)),
            ],
            cwd=CWD,
        )

    def test_allowed_cross_boundary(self, registry) -> None:
        explanation = explain_import("@entities", src("domain", "queries", "getLine.ts"), registry,
                                     file_exists=lambda _p: False)

        assert explanation.error is None
        assert explanation.file_boundary.identifier == "@queries"
        assert explanation.target_boundary.identifier == "@entities"
        assert explanation.relationship == Relationship.CROSS_BOUNDARY
        assert explanation.expected_path == "@entities"
        assert explanation.denial_reason is None
        assert explanation.relative_path is None

    def test_denied_cross_boundary(self, registry) -> None:
        explanation = explain_import("@events", src("domain", "queries", "getLine.ts"), registry,
                                     file_exists=lambda _p: False)

        assert explanation.denial_reason is not None
        assert "'@events'" in explanation.denial_reason

    def test_same_boundary_reports_relative_path(self, registry) -> None:
        explanation = explain_import(
            "./army/unit.ts", src("domain", "entities", "a", "file.ts"), registry, file_exists=lambda _p: False
        )

        assert explanation.relationship == Relationship.SAME_BOUNDARY
        assert explanation.relative_path == "army/unit"

    def test_external_specifier(self, registry) -> None:
        explanation = explain_import("@unknown/pkg", src("domain", "queries", "getLine.ts"), registry)

        assert explanation.resolved is None
        assert explanation.relationship is None
        assert explanation.error is not None
        assert "@unknown/pkg" in explanation.error

    def test_nested_boundary_without_rules_explained_as_parent(self) -> None:
        registry = create_registry(
            [
                BoundaryConfig(dir="domain", alias="@domain", allow_imports_from=()),
                BoundaryConfig(dir="domain/utils", alias="@utils"),
            ],
            cwd=CWD,
        )

        explanation = explain_import("../entities", src("domain", "utils", "a.ts"), registry,
                                     file_exists=lambda _p: False)

        assert explanation.file_boundary.identifier == "@domain"
        assert explanation.relationship == Relationship.SAME_BOUNDARY
        assert explanation.expected_path == "@domain/entities"
        assert explanation.relative_path == "../entities/index"
