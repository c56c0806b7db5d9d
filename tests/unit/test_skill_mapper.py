"""Unit tests for SkillMapper keyword mapping."""
from learning_commons.graph.skill_mapper import SkillMapper, keyword_score


def _ids(components):
    return [c.uuid for c in components]


class TestKeywordScore:
    def test_counts_tokens_found_in_component_text(self, resolver):
        component = resolver.get_component("lc-frac-001")
        assert keyword_score(["unit", "fractions", "xyzzy"], component) == 2

    def test_matches_substrings(self, resolver):
        component = resolver.get_component("lc-add-003")
        assert keyword_score(["regroup"], component) == 1


class TestMapSkillToComponents:
    def test_no_match_returns_well_formed_empty_mapping(self, resolver):
        mapping = SkillMapper(resolver).map_skill_to_components("xyzzy nonsense query", grade_level="3")

        assert mapping.curriculum_skill == "xyzzy nonsense query"
        assert mapping.learning_components == []
        assert mapping.prerequisites == []
        assert mapping.next_skills == []
        assert mapping.common_errors == []

    def test_top_three_by_score_with_stable_ties(self, resolver):
        mapping = SkillMapper(resolver).map_skill_to_components("unit fractions", grade_level="3")

        assert _ids(mapping.learning_components) == ["lc-frac-001", "lc-frac-002", "lc-frac-003"]

    def test_neighbourhood_is_deduplicated(self, resolver):
        mapping = SkillMapper(resolver).map_skill_to_components("unit fractions", grade_level="3")

        assert _ids(mapping.prerequisites) == ["lc-div-001", "lc-frac-001", "lc-frac-002"]
        assert _ids(mapping.next_skills) == ["lc-frac-002", "lc-frac-003", "lc-frac-004"]

    def test_grade_filter_restricts_candidates(self, resolver):
        mapping = SkillMapper(resolver).map_skill_to_components("multiply", grade_level="4")

        assert _ids(mapping.learning_components) == ["lc-mult-4-001", "lc-mult-4-002"]
        assert all("4" in c.grade_levels for c in mapping.learning_components)

    def test_tokens_are_case_insensitive(self, resolver):
        mapping = SkillMapper(resolver).map_skill_to_components("DIVISION Facts")
        assert mapping.learning_components[0].uuid == "lc-div-003"

    def test_top_k_is_configurable(self, resolver):
        mapping = SkillMapper(resolver, top_k=1).map_skill_to_components("fractions")
        assert len(mapping.learning_components) == 1

    def test_to_dict_uses_camel_case(self, resolver):
        payload = SkillMapper(resolver).map_skill_to_components("arrays").to_dict()
        assert set(payload) == {
            "curriculumSkill", "learningComponents", "prerequisites", "nextSkills", "commonErrors",
        }
