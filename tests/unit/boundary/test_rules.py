"""Tests for import_boundaries.boundary.rules."""

from import_boundaries.boundary.rules import check_boundary_rules, is_same_boundary


class TestIsSameBoundary:
    def test_compares_by_identifier(self, boundary_factory) -> None:
        a = boundary_factory("domain", "@domain")
        a_again = boundary_factory("domain", "@domain")
        b = boundary_factory("application", "@application")

        assert is_same_boundary(a, a_again)
        assert not is_same_boundary(a, b)

    def test_none_is_never_same(self, boundary_factory) -> None:
        a = boundary_factory("domain", "@domain")
        assert not is_same_boundary(a, None)
        assert not is_same_boundary(None, None)


class TestCheckBoundaryRules:
    def test_same_boundary_allowed(self, boundary_factory) -> None:
        a = boundary_factory("domain", "@domain", allow_imports_from=())
        assert check_boundary_rules(a, a) is None

    def test_allow_list(self, readme_boundaries) -> None:
        queries, entities, events = (readme_boundaries[k] for k in ("queries", "entities", "events"))

        assert check_boundary_rules(queries, entities) is None
        reason = check_boundary_rules(queries, events)
        assert reason is not None
        assert "'@events'" in reason
        assert "allowImportsFrom" in reason

    def test_no_lists_denies_everything(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a")
        b = boundary_factory("b", "@b")
        assert check_boundary_rules(a, b) is not None

    def test_type_only_allowance(self, boundary_factory) -> None:
        queries = boundary_factory(
            "domain/queries", "@queries",
            allow_imports_from=("@entities",),
            allow_type_imports_from=("@events",),
        )
        events = boundary_factory("domain/events", "@events")

        assert check_boundary_rules(queries, events, is_type_only=True) is None
        assert check_boundary_rules(queries, events, is_type_only=False) is not None

    def test_deny_beats_allow(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a", allow_imports_from=("@b",), deny_imports_from=("@b",))
        b = boundary_factory("b", "@b")

        reason = check_boundary_rules(a, b)
        assert reason is not None
        assert "deny takes precedence over allow" in reason

    def test_deny_only_allows_the_rest(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a", deny_imports_from=("@b",))
        b = boundary_factory("b", "@b")
        c = boundary_factory("c", "@c")

        reason = check_boundary_rules(a, b)
        assert reason == "Boundary '@a' explicitly denies imports from '@b'"
        assert check_boundary_rules(a, c) is None

    def test_allow_and_deny_lists_deny_unlisted(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a", allow_imports_from=("@b",), deny_imports_from=("@c",))
        d = boundary_factory("d", "@d")
        assert check_boundary_rules(a, d) is not None

    def test_type_allowance_wins_over_deny(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a", allow_type_imports_from=("@b",), deny_imports_from=("@b",))
        b = boundary_factory("b", "@b")

        assert check_boundary_rules(a, b, is_type_only=True) is None
        assert check_boundary_rules(a, b, is_type_only=False) is not None

    def test_uses_identifier_not_alias(self, boundary_factory) -> None:
        a = boundary_factory("a", "@a", allow_imports_from=("core",))
        b = boundary_factory("b", "@b", identifier="core")
        assert check_boundary_rules(a, b) is None
