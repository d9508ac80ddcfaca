"""API v1 dependencies: engine services and use cases."""

from app.api.v1.dependencies.engine import (
    get_activate_project_use_case,
    get_build_timeline_use_case,
    get_complete_task_use_case,
    get_completion_gate,
    get_create_ad_hoc_task_use_case,
    get_process_graph,
    get_resolver,
    get_start_task_use_case,
    get_timeline_builder,
)

__all__ = [
    "get_activate_project_use_case",
    "get_build_timeline_use_case",
    "get_complete_task_use_case",
    "get_completion_gate",
    "get_create_ad_hoc_task_use_case",
    "get_process_graph",
    "get_resolver",
    "get_start_task_use_case",
    "get_timeline_builder",
]
