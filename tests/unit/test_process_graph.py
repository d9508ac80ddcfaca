"""ProcessGraph validation and lookup tests."""

import pytest

from app.application.services.process_graph import (
    FINAL_TASK_MARKER,
    START_TASK_MARKER,
    ProcessGraph,
)
from app.domain.entities.task_definition import TaskDefinitionEntity
from app.domain.enums import TaskKind
from app.domain.exceptions import ProcessGraphException, ResourceNotFoundException


def _d(
    code: str,
    depends_on: tuple[str, ...] = (),
    duration_days: int = 1,
    kind: TaskKind = TaskKind.USER_TASK,
) -> TaskDefinitionEntity:
    return TaskDefinitionEntity(
        code=code,
        name=f"Task {code}",
        role="МП",
        depends_on=depends_on,
        kind=kind,
        stage="Stage",
        duration_days=duration_days,
    )


def test_store_opening_graph_loads(graph: ProcessGraph) -> None:
    assert len(graph) == 13
    assert graph.version == "2024.1"
    assert [d.code for d in graph.roots()] == ["TASK-PREP-AUDIT"]


def test_topological_order_puts_predecessors_first(graph: ProcessGraph) -> None:
    position = {d.code: i for i, d in enumerate(graph.topological_order())}
    assert len(position) == len(graph)
    for definition in graph:
        for dep in definition.depends_on:
            assert position[dep] < position[definition.code]


def test_dependents_in_declared_order(graph: ProcessGraph) -> None:
    assert [d.code for d in graph.dependents("TASK-CONTOUR")] == [
        "TASK-VISUALIZATION",
        "TASK-LOGISTICS",
        "TASK-LAYOUT",
    ]
    assert graph.dependents("TASK-TOTAL-BUDGET") == []


def test_edges_include_fan_in(graph: ProcessGraph) -> None:
    edges = graph.edges()
    assert ("TASK-VISUALIZATION", "TASK-BUDGET-EQUIP") in edges
    assert ("TASK-LAYOUT", "TASK-BUDGET-EQUIP") in edges
    assert len(edges) == sum(len(d.depends_on) for d in graph)


def test_get_unknown_code_raises(graph: ProcessGraph) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        graph.get("TASK-NOPE")
    assert exc_info.value.details == {
        "resource_type": "task_definition",
        "resource_id": "TASK-NOPE",
    }


def test_find_by_name(graph: ProcessGraph) -> None:
    assert graph.find_by_name("Аудит объекта").code == "TASK-AUDIT"
    assert graph.find_by_name("Unknown") is None


def test_neighbour_names_root_and_leaf(graph: ProcessGraph) -> None:
    root = graph.neighbour_names("TASK-PREP-AUDIT")
    assert root.predecessors == (START_TASK_MARKER,)
    assert root.successors == ("Аудит объекта",)
    assert root.is_ad_hoc is False

    leaf = graph.neighbour_names("TASK-TOTAL-BUDGET")
    assert leaf.predecessors == ("Расчет бюджета ПиС",)
    assert leaf.successors == (FINAL_TASK_MARKER,)


def test_neighbour_names_ad_hoc(graph: ProcessGraph) -> None:
    neighbours = graph.neighbour_names(None)
    assert neighbours.is_ad_hoc is True
    assert neighbours.predecessors == ()
    assert neighbours.successors == ()


def test_duplicate_code_rejected() -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph.from_definitions([_d("A"), _d("A")])
    assert exc_info.value.details == {"reason": "duplicate_code", "codes": ["A"]}
    assert exc_info.value.error_code == "PROCESS_GRAPH_INVALID"


def test_dangling_reference_rejected() -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph.from_definitions([_d("A"), _d("B", ("X",))])
    assert exc_info.value.details["reason"] == "dangling_reference"
    assert exc_info.value.details["codes"] == ["B->X"]


def test_self_reference_rejected() -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph.from_definitions([_d("A", ("A",))])
    assert exc_info.value.details["reason"] == "self_reference"


def test_cycle_rejected_with_stuck_codes() -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph.from_definitions(
            [_d("ROOT"), _d("A", ("ROOT", "B")), _d("B", ("A",)), _d("C", ("B",))]
        )
    assert exc_info.value.details["reason"] == "cycle"
    assert exc_info.value.details["codes"] == ["A", "B", "C"]


@pytest.mark.parametrize("duration", [0, -2])
def test_non_positive_duration_rejected(duration: int) -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph.from_definitions([_d("A", duration_days=duration)])
    assert exc_info.value.details == {"reason": "invalid_duration", "codes": ["A"]}


def test_repeated_dependency_counted_once() -> None:
    graph = ProcessGraph.from_definitions([_d("A"), _d("B", ("A", "A"))])
    assert [d.code for d in graph.topological_order()] == ["A", "B"]


def test_constructor_validates_definitions() -> None:
    with pytest.raises(ProcessGraphException) as exc_info:
        ProcessGraph([_d("A", ("B",)), _d("B", ("A",))])
    assert exc_info.value.details["reason"] == "cycle"

    graph = ProcessGraph([_d("A"), _d("B", ("A",))], version="v1")
    assert graph.version == "v1"
    assert [d.code for d in graph.dependents("A")] == ["B"]
