"""
Learning progression builder.

Expands a start component backwards through its prerequisites and forwards
through its dependents, producing an ordered pathway with the earliest-learned
skill first. Both passes share one visited set, so every component appears at
most once and cyclic data cannot cause unbounded expansion.
"""
from __future__ import annotations

from typing import Callable, Iterator, Optional

from loguru import logger

from learning_commons.graph.models import LearningComponent, LearningProgression
from learning_commons.graph.resolver import PrerequisiteResolver

Neighbours = Callable[[str], list[LearningComponent]]


class ProgressionBuilder:
    """Depth-bounded bidirectional traversal over ``precedes`` edges."""

    def __init__(self, resolver: PrerequisiteResolver, default_depth: int = 5):
        self.resolver = resolver
        self.default_depth = default_depth

    def build_progression(
        self,
        start_uuid: str,
        max_depth: Optional[int] = None,
    ) -> Optional[LearningProgression]:
        """
        Build a progression anchored at ``start_uuid``.

        Args:
            start_uuid: Component to anchor on
            max_depth: Levels to expand in each direction

        Returns:
            LearningProgression, or None if the start component is unknown
        """
        max_depth = self.default_depth if max_depth is None else max_depth
        start = self.resolver.get_component(start_uuid)
        if start is None:
            return None

        visited = {start.uuid}
        earlier = self._walk(start.uuid, self.resolver.get_prerequisites, max_depth, visited)
        later = self._walk(start.uuid, self.resolver.get_dependents, max_depth, visited)

        # Prerequisites are discovered nearest-first; each one goes to the front.
        components = list(reversed(earlier)) + [start] + later

        grade_span: list[str] = []
        for component in components:
            for grade in component.grade_levels:
                if grade not in grade_span:
                    grade_span.append(grade)

        logger.debug(
            f"Progression for {start_uuid}: {len(earlier)} prerequisites, "
            f"{len(later)} next skills (depth {max_depth})"
        )

        return LearningProgression(
            uuid=f"prog-{start.uuid}",
            name=f"{start.label} Progression",
            description=f"Learning progression for {start.label}",
            subject=start.subject,
            grade_span=grade_span,
            components=components,
            pathway=[c.uuid for c in components],
        )

    @staticmethod
    def _walk(
        origin: str,
        neighbours: Neighbours,
        max_depth: int,
        visited: set[str],
    ) -> list[LearningComponent]:
        """
        Depth-first pre-order walk from ``origin`` using an explicit stack.

        A node's neighbours are fetched only when its level is below
        ``max_depth``. Newly visited nodes are added to ``visited``.
        """
        found: list[LearningComponent] = []
        if max_depth <= 0:
            return found

        stack: list[tuple[Iterator[LearningComponent], int]] = [
            (iter(neighbours(origin)), 0)
        ]
        while stack:
            frontier, depth = stack[-1]
            node = next(frontier, None)
            if node is None:
                stack.pop()
                continue
            if node.uuid in visited:
                continue
            visited.add(node.uuid)
            found.append(node)
            if depth + 1 < max_depth:
                stack.append((iter(neighbours(node.uuid)), depth + 1))
        return found
