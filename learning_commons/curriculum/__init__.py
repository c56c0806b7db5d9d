"""Curriculum standards and their mapping onto the knowledge graph."""

from learning_commons.curriculum.skill_analysis import SkillAnalysisService, StandardSkillAnalysis
from learning_commons.curriculum.standards import (
    SAMPLE_STANDARDS,
    CRATools,
    MathStandard,
    StandardsCatalog,
)

__all__ = [
    "CRATools",
    "MathStandard",
    "SAMPLE_STANDARDS",
    "SkillAnalysisService",
    "StandardSkillAnalysis",
    "StandardsCatalog",
]
