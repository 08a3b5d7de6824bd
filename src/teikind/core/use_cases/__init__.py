"""Application use cases: output classification and project event handling."""

from teikind.core.use_cases.classify import classify
from teikind.core.use_cases.project_events import (
    HandlerContext,
    HandlerResult,
    dispatch,
    handle_project_detail_event,
    handle_project_event,
    handle_project_script_ceased_event,
    handle_project_script_event,
)

__all__ = [
    "classify",
    "HandlerContext",
    "HandlerResult",
    "dispatch",
    "handle_project_detail_event",
    "handle_project_event",
    "handle_project_script_ceased_event",
    "handle_project_script_event",
]
