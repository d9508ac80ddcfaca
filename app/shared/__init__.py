"""Shared utilities: enums, telemetry, and cross-cutting helpers.

Used by domain, application, and API layers. No business logic.
"""

from app.shared.enums import ActorType, TaskEventKind
from app.shared.utils import ensure_utc, utc_now

__all__ = [
    "ActorType",
    "TaskEventKind",
    "utc_now",
    "ensure_utc",
]
