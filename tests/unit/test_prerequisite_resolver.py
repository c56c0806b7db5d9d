"""Unit tests for PrerequisiteResolver."""


def _ids(components):
    return [c.uuid for c in components]


class TestPrerequisites:
    def test_prerequisites_in_list_order(self, resolver):
        assert _ids(resolver.get_prerequisites("lc-pv-003")) == ["lc-pv-001", "lc-pv-002"]

    def test_root_component_has_no_prerequisites(self, resolver):
        assert resolver.get_prerequisites("lc-pv-001") == []

    def test_unknown_id_returns_empty(self, resolver):
        assert resolver.get_prerequisites("lc-does-not-exist") == []
        assert resolver.get_dependents("lc-does-not-exist") == []
        assert resolver.get_component("lc-does-not-exist") is None


class TestDependents:
    def test_dependents_follow_load_order(self, resolver):
        assert _ids(resolver.get_dependents("lc-pv-001")) == [
            "lc-pv-002",
            "lc-pv-003",
            "lc-add-002",
            "lc-add-003",
            "lc-sub-002",
            "lc-mult-4-001",
        ]

    def test_leaf_has_no_dependents(self, resolver):
        assert resolver.get_dependents("lc-mult-4-002") == []

    def test_prerequisites_and_dependents_are_inverse(self, resolver):
        for component in resolver.get_all_components():
            for prereq in resolver.get_prerequisites(component.uuid):
                assert component.uuid in _ids(resolver.get_dependents(prereq.uuid))
            for dependent in resolver.get_dependents(component.uuid):
                assert component.uuid in _ids(resolver.get_prerequisites(dependent.uuid))


class TestLookups:
    def test_components_by_grade(self, resolver):
        grade_four = resolver.get_components_by_grade("4")
        assert _ids(grade_four) == ["lc-mult-4-001", "lc-mult-4-002"]

    def test_components_by_cluster(self, resolver):
        assert len(resolver.get_components_by_cluster("Fractions")) == 4
        assert len(resolver.get_components_by_cluster("Multiplication")) == 6

    def test_components_by_domain(self, resolver):
        fractions = resolver.get_components_by_domain("Number and Operations - Fractions")
        assert {c.cluster for c in fractions} == {"Fractions"}

    def test_search_is_case_insensitive(self, resolver):
        results = resolver.search_components("EQUAL GROUPS")
        assert "lc-mult-001" in _ids(results)
        assert "lc-div-002" in _ids(results)

    def test_search_without_match(self, resolver):
        assert resolver.search_components("photosynthesis") == []
