"""Immutable process graph built from task definitions.

Validates the definition list once (Kahn topological sort) and precomputes
adjacency maps so the resolver, projector and timeline never walk raw
definition lists. An invalid list never yields a ProcessGraph instance.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from app.application.dtos.process import TaskNeighbours
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.exceptions import ProcessGraphException, ResourceNotFoundException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

START_TASK_MARKER = "Нет (Стартовая задача)"
FINAL_TASK_MARKER = "Нет (Конечная задача)"


def _validate(
    items: tuple[TaskDefinitionEntity, ...],
) -> tuple[dict[str, tuple[str, ...]], tuple[str, ...]]:
    """Check definitions and return (dependents by code, topological order)."""
    codes: set[str] = set()
    duplicates: list[str] = []
    for definition in items:
        if definition.code in codes:
            duplicates.append(definition.code)
        codes.add(definition.code)
    if duplicates:
        raise ProcessGraphException(
            f"Duplicate task definition codes: {', '.join(duplicates)}",
            "duplicate_code",
            duplicates,
        )

    bad_durations = [d.code for d in items if d.duration_days < 1]
    if bad_durations:
        raise ProcessGraphException(
            f"Task durations must be at least one day: {', '.join(bad_durations)}",
            "invalid_duration",
            bad_durations,
        )

    self_refs = [d.code for d in items if d.code in d.depends_on]
    if self_refs:
        raise ProcessGraphException(
            f"Tasks depend on themselves: {', '.join(self_refs)}",
            "self_reference",
            self_refs,
        )

    dangling = [
        f"{d.code}->{dep}" for d in items for dep in d.depends_on if dep not in codes
    ]
    if dangling:
        raise ProcessGraphException(
            f"Unknown dependsOn references: {', '.join(dangling)}",
            "dangling_reference",
            dangling,
        )

    dependents: dict[str, list[str]] = {d.code: [] for d in items}
    in_degree: dict[str, int] = {}
    for definition in items:
        unique_deps = set(definition.depends_on)
        in_degree[definition.code] = len(unique_deps)
        for dep in unique_deps:
            dependents[dep].append(definition.code)
    # keep dependents in declared order
    position = {d.code: i for i, d in enumerate(items)}
    for code in dependents:
        dependents[code].sort(key=position.__getitem__)

    queue = deque(d.code for d in items if in_degree[d.code] == 0)
    order: list[str] = []
    while queue:
        code = queue.popleft()
        order.append(code)
        for child in dependents[code]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                queue.append(child)

    if len(order) != len(items):
        stuck = [d.code for d in items if in_degree[d.code] > 0]
        raise ProcessGraphException(
            f"Task dependency cycle detected among: {', '.join(stuck)}",
            "cycle",
            stuck,
        )

    return (
        {code: tuple(children) for code, children in dependents.items()},
        tuple(order),
    )


class ProcessGraph:
    """Read-only DAG of task definitions with predecessor/dependent lookups.

    Construction validates the definitions, so every instance is a valid
    graph.
    """

    def __init__(
        self,
        definitions: Iterable[TaskDefinitionEntity],
        version: str | None = None,
    ) -> None:
        """Validate definitions and build the adjacency maps.

        Args:
            definitions: Task definitions in declared order.
            version: Optional process version label.

        Raises:
            ProcessGraphException: On duplicate codes, non-positive durations,
                self-dependencies, dangling references or cycles.
        """
        items = tuple(definitions)
        dependents, order = _validate(items)
        self._definitions = items
        self._by_code = MappingProxyType({d.code: d for d in items})
        self._dependents = MappingProxyType(dependents)
        self._order = order
        self.version = version
        logger.info(
            "Process graph loaded: %d definitions, %d roots (version=%s)",
            len(items),
            sum(1 for d in items if d.is_root),
            version,
        )

    @classmethod
    def from_definitions(
        cls,
        definitions: Iterable[TaskDefinitionEntity],
        version: str | None = None,
    ) -> ProcessGraph:
        """Build the graph from definitions; same as calling the class."""
        return cls(definitions, version)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[TaskDefinitionEntity]:
        return iter(self._definitions)

    def get(self, code: str) -> TaskDefinitionEntity:
        """Return the definition for code.

        Raises:
            ResourceNotFoundException: If the code is not part of the graph.
        """
        definition = self._by_code.get(code)
        if definition is None:
            raise ResourceNotFoundException("task_definition", code)
        return definition

    def find_by_name(self, name: str) -> TaskDefinitionEntity | None:
        """Return the first definition with the given display name, if any."""
        return next((d for d in self._definitions if d.name == name), None)

    def roots(self) -> list[TaskDefinitionEntity]:
        """Definitions with no predecessors, in declared order."""
        return [d for d in self._definitions if d.is_root]

    def predecessors(self, code: str) -> list[TaskDefinitionEntity]:
        return [self.get(dep) for dep in self.get(code).depends_on]

    def dependents(self, code: str) -> list[TaskDefinitionEntity]:
        self.get(code)
        return [self._by_code[child] for child in self._dependents[code]]

    def topological_order(self) -> list[TaskDefinitionEntity]:
        """Definitions ordered so every predecessor precedes its dependents."""
        return [self._by_code[code] for code in self._order]

    def edges(self) -> list[tuple[str, str]]:
        """All (predecessor code, dependent code) pairs in declared order."""
        return [(dep, d.code) for d in self._definitions for dep in d.depends_on]

    def neighbour_names(self, code: str | None) -> TaskNeighbours:
        """Predecessor and successor display names for a task.

        Roots report a start-task marker instead of predecessors and leaves a
        final-task marker instead of successors. Ad-hoc tasks (code None or
        unknown) report neither.
        """
        if code is None or code not in self._by_code:
            return TaskNeighbours(predecessors=(), successors=(), is_ad_hoc=True)
        predecessors = tuple(d.name for d in self.predecessors(code))
        successors = tuple(d.name for d in self.dependents(code))
        return TaskNeighbours(
            predecessors=predecessors or (START_TASK_MARKER,),
            successors=successors or (FINAL_TASK_MARKER,),
            is_ad_hoc=False,
        )
