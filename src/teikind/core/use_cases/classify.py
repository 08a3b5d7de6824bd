from __future__ import annotations

import logging

from teikind.core.config import ProjectTokenSets
from teikind.core.models import (
    ChainTransaction,
    Event,
    ProjectDetailEvent,
    ProjectEvent,
    ProjectScriptCeasedEvent,
    ProjectScriptEvent,
)

logger = logging.getLogger(__name__)


def _carries(assets: dict[str, int], units: frozenset[str]) -> bool:
    """True if the bundle holds exactly one of any unit in `units`."""
    return any(assets.get(u) == 1 for u in units)


def classify(tx: ChainTransaction, tokens: ProjectTokenSets) -> list[Event]:
    """
    Group the outputs of `tx` into project event batches.

    Outputs are tested in order against the project, project detail and
    project script tokens; the first match wins. A negative mint delta on
    any project script token adds a single `ProjectScriptCeasedEvent`.
    """
    project: list[int] = []
    project_detail: list[int] = []
    project_script: list[int] = []

    for index, output in enumerate(tx.outputs):
        assets = output.assets
        if not assets:
            continue
        # TODO: reject outputs carrying more than one kind of project token
        if _carries(assets, tokens.project):
            project.append(index)
        elif _carries(assets, tokens.project_detail):
            project_detail.append(index)
        elif _carries(assets, tokens.project_script):
            project_script.append(index)

    events: list[Event] = []
    if project:
        events.append(ProjectEvent(indices=tuple(project)))
    if project_detail:
        events.append(ProjectDetailEvent(indices=tuple(project_detail)))
    if project_script:
        events.append(ProjectScriptEvent(indices=tuple(project_script)))

    if any(tx.mint.get(u, 0) < 0 for u in tokens.project_script):
        events.append(ProjectScriptCeasedEvent())

    if events:
        logger.debug("tx %s: %d project event(s)", tx.id, len(events))
    return events
