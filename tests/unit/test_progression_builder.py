"""
Unit tests for ProgressionBuilder.

Ordering, depth bounds, and termination on cyclic prerequisite data.
"""
from learning_commons.graph.progression import ProgressionBuilder


class TestBuildProgression:
    def test_unknown_start_returns_none(self, resolver):
        assert ProgressionBuilder(resolver).build_progression("lc-missing") is None

    def test_pathway_is_earliest_learned_first(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-sub-002")

        assert progression.pathway == [
            "lc-pv-001",
            "lc-add-001",
            "lc-sub-001",
            "lc-sub-002",
            "lc-sub-003",
        ]
        assert progression.uuid == "prog-lc-sub-002"
        assert progression.name == "Subtract Within 1000 Without Regrouping Progression"
        assert progression.grade_span == ["3"]

    def test_pathway_matches_components(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-mult-003")

        assert len(progression.pathway) == len(progression.components)
        assert progression.pathway == [c.uuid for c in progression.components]
        assert len(set(progression.pathway)) == len(progression.pathway)

    def test_start_sits_between_prerequisites_and_dependents(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-mult-003")
        start = progression.pathway.index("lc-mult-003")

        for prereq in resolver.get_prerequisites("lc-mult-003"):
            assert progression.pathway.index(prereq.uuid) < start
        for dependent in resolver.get_dependents("lc-mult-003"):
            assert progression.pathway.index(dependent.uuid) > start

    def test_later_prerequisites_are_placed_first(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-frac-004", max_depth=1)
        assert progression.pathway == ["lc-frac-003", "lc-frac-002", "lc-frac-004"]

    def test_depth_one_stops_at_direct_neighbours(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-sub-002", max_depth=1)
        assert progression.pathway == ["lc-pv-001", "lc-sub-001", "lc-sub-002", "lc-sub-003"]

    def test_depth_zero_is_start_only(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-sub-002", max_depth=0)
        assert progression.pathway == ["lc-sub-002"]

    def test_grade_span_unions_grades(self, resolver):
        progression = ProgressionBuilder(resolver).build_progression("lc-mult-4-002")
        assert set(progression.grade_span) == {"3", "4"}
        assert progression.pathway[-1] == "lc-mult-4-002"

    def test_default_depth_is_configurable(self, resolver):
        builder = ProgressionBuilder(resolver, default_depth=1)
        assert builder.build_progression("lc-sub-002").pathway == [
            "lc-pv-001", "lc-sub-001", "lc-sub-002", "lc-sub-003",
        ]


class TestCyclicGraphs:
    def test_two_node_cycle_terminates_without_duplicates(self, cyclic_resolver):
        progression = ProgressionBuilder(cyclic_resolver).build_progression("a", max_depth=50)

        assert progression.pathway == ["b", "a"]
        assert len(progression.pathway) == len(progression.components)

    def test_self_reference_terminates(self, cyclic_resolver):
        progression = ProgressionBuilder(cyclic_resolver).build_progression("c")
        assert progression.pathway == ["c"]
        assert progression.grade_span == ["4"]
