"""Task lifecycle use cases: activation, start, completion, ad-hoc creation."""

from app.application.use_cases.tasks.activate_project import ActivateProjectUseCase
from app.application.use_cases.tasks.complete_task import CompleteTaskUseCase
from app.application.use_cases.tasks.create_ad_hoc_task import CreateAdHocTaskUseCase
from app.application.use_cases.tasks.start_task import StartTaskUseCase

__all__ = [
    "ActivateProjectUseCase",
    "CompleteTaskUseCase",
    "CreateAdHocTaskUseCase",
    "StartTaskUseCase",
]
