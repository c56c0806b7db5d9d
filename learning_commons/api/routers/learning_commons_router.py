"""
Learning Commons router.

Endpoints for:
- Component search and filtering
- Learning progressions around a component
- Skill mapping (free-text skill or standard code)
- Content evaluation (complexity, literacy, motivation, full)
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from config import Settings, get_settings
from learning_commons.curriculum.skill_analysis import SkillAnalysisService
from learning_commons.evaluation.orchestrator import EvaluationOrchestrator, EvaluationType
from learning_commons.graph.progression import ProgressionBuilder
from learning_commons.graph.resolver import PrerequisiteResolver
from learning_commons.graph.skill_mapper import SkillMapper
from learning_commons.graph.store import GraphStore, get_default_store


router = APIRouter()


# ========================================
# Request/Response Models
# ========================================


class MapSkillRequest(BaseModel):
    """Request model for skill mapping."""

    model_config = ConfigDict(populate_by_name=True)

    skill: Optional[str] = Field(None, description="Free-text curriculum skill")
    grade_level: Optional[str] = Field(None, alias="gradeLevel", description="Grade filter, e.g. '3'")
    standard_code: Optional[str] = Field(None, alias="standardCode", description="Standard code, e.g. '3.NBT.2'")


class EvaluateRequest(BaseModel):
    """Request model for content evaluation."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(None, description="Instructional text to evaluate")
    target_grade_level: Optional[str] = Field(None, alias="targetGradeLevel")
    evaluation_type: Optional[str] = Field(
        None, alias="evaluationType", description="full, literacy, motivation or complexity"
    )


class ComponentListResponse(BaseModel):
    components: list[dict[str, Any]]
    count: int


# ========================================
# Dependencies
# ========================================


def get_store() -> GraphStore:
    return get_default_store()


def get_resolver(store: GraphStore = Depends(get_store)) -> PrerequisiteResolver:
    return PrerequisiteResolver(store)


def get_orchestrator() -> EvaluationOrchestrator:
    return EvaluationOrchestrator()


# ========================================
# Endpoints
# ========================================


@router.get("/search", response_model=ComponentListResponse)
def search_components(
    q: Optional[str] = Query(None, description="Keyword to search"),
    grade: Optional[str] = Query(None, description="Grade level filter"),
    domain: Optional[str] = Query(None, description="Domain filter"),
    cluster: Optional[str] = Query(None, description="Cluster filter"),
    resolver: PrerequisiteResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
) -> ComponentListResponse:
    """Search learning components. The first supplied filter wins."""
    if q:
        components = resolver.search_components(q)
    elif grade:
        components = resolver.get_components_by_grade(grade)
    elif domain:
        components = resolver.get_components_by_domain(domain)
    elif cluster:
        components = resolver.get_components_by_cluster(cluster)
    else:
        components = resolver.get_all_components()[: settings.component_listing_limit]

    return ComponentListResponse(
        components=[c.to_dict() for c in components],
        count=len(components),
    )


@router.get("/progression")
def get_progression(
    component_id: Optional[str] = Query(None, alias="componentId"),
    depth: Optional[int] = Query(None, description="Levels in each direction (default from settings)"),
    resolver: PrerequisiteResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Progression, prerequisites and dependents for one component."""
    if not component_id:
        raise HTTPException(status_code=400, detail="Missing required parameter: componentId")

    component = resolver.get_component(component_id)
    if component is None:
        raise HTTPException(status_code=404, detail="Learning component not found")

    if depth is None:
        depth = settings.progression_default_depth
    clamped_depth = max(1, min(depth, settings.progression_max_depth))
    progression = ProgressionBuilder(resolver).build_progression(component_id, clamped_depth)

    return {
        "component": component.to_dict(),
        "progression": progression.to_dict() if progression else None,
        "prerequisites": [c.to_dict() for c in resolver.get_prerequisites(component_id)],
        "dependents": [c.to_dict() for c in resolver.get_dependents(component_id)],
    }


@router.post("/map-skill")
def map_skill(
    request: MapSkillRequest,
    resolver: PrerequisiteResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Map a standard code (full analysis) or a free-text skill onto components."""
    mapper = SkillMapper(resolver, top_k=settings.skill_mapping_top_k)

    if request.standard_code:
        service = SkillAnalysisService(
            resolver,
            mapper=mapper,
            progression_depth=settings.progression_default_depth,
        )
        analysis = service.analyze_standard_skills(request.standard_code)
        if analysis is None:
            raise HTTPException(status_code=404, detail="Standard not found")
        return {"analysis": analysis.to_dict(), "source": "standard"}

    if not request.skill:
        raise HTTPException(status_code=400, detail="Missing required field: skill or standardCode")

    mapping = mapper.map_skill_to_components(request.skill, request.grade_level)
    return {"mapping": mapping.to_dict(), "source": "skill-search"}


@router.post("/evaluate")
def evaluate(
    request: EvaluateRequest,
    orchestrator: EvaluationOrchestrator = Depends(get_orchestrator),
) -> dict[str, Any]:
    """Evaluate instructional text. Does not depend on the knowledge graph."""
    if not request.text:
        raise HTTPException(status_code=400, detail="Missing required field: text")

    evaluation_type = request.evaluation_type or EvaluationType.FULL
    logger.debug(f"Evaluating content ({evaluation_type}, {len(request.text)} chars)")
    return orchestrator.evaluate_request(
        request.text,
        target_grade_level=request.target_grade_level,
        evaluation_type=evaluation_type,
    )
