"""Project event handlers: decode → persist → fire side effects.

Each handler runs once per classified event:

1) Ask the driver to decode and deduplicate the event's outputs.
2) Stop (with a warning) when no output produced a valid record.
3) Insert the surviving rows through the repository.
4) Run the collected effects: view refreshes, IPFS notifications and
   stake credential watches.

The announcement notification follows every decoded detail record, including
ones later replaced in the batch by a newer output for the same project.
Effects only run after the insert returned, so a failed insert fires nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import partial

from teikind.core.config import IndexerConfig
from teikind.core.constants import (
    STAKE_KIND_SCRIPT,
    TOPIC_PROJECT_ANNOUNCEMENT,
    TOPIC_PROJECT_INFO,
    VIEW_PROJECT_SUMMARY,
)
from teikind.core.interfaces import IChainDriver, IProjectRepository, IStakingWatcher
from teikind.core.models import (
    ChainOutput,
    ChainProjectDetail,
    ChainProjectScript,
    Decoded,
    Event,
    ProjectDetailEvent,
    ProjectEvent,
    ProjectScriptCeasedEvent,
    ProjectScriptEvent,
    StoredRow,
)
from teikind.decoding.decoder import decode_project, decode_project_detail, decode_project_script

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Handler context
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class HandlerContext:
    """Collaborators shared by all project handlers for one transaction."""

    driver: IChainDriver
    repository: IProjectRepository
    staking: IStakingWatcher
    config: IndexerConfig


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Refresh:
    view: str


@dataclass(frozen=True)
class Notify:
    topic: str


@dataclass(frozen=True)
class Watch:
    script_hash: str
    kind: str


Effect = Refresh | Notify | Watch


async def run_effects(ctx: HandlerContext, effects: Sequence[Effect]) -> None:
    """Execute pending effects in order."""
    for effect in effects:
        match effect:
            case Refresh(view=view):
                await ctx.driver.refresh(view)
            case Notify(topic=topic):
                await ctx.driver.notify(topic)
            case Watch(script_hash=script_hash, kind=kind):
                await ctx.staking.watch(script_hash, kind)


@dataclass(kw_only=True)
class HandlerResult:
    """What a handler stored and which effects it fired."""

    stored: int = 0
    effects: list[Effect] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Effect planning (pure)
# ---------------------------------------------------------------------------


def project_detail_effects(has_announcement: bool) -> list[Effect]:
    effects: list[Effect] = [Notify(TOPIC_PROJECT_INFO)]
    if has_announcement:
        effects.append(Notify(TOPIC_PROJECT_ANNOUNCEMENT))
    effects.append(Refresh(VIEW_PROJECT_SUMMARY))
    return effects


def project_script_effects(rows: Sequence[StoredRow[ChainProjectScript]]) -> list[Effect]:
    return [Watch(row.record.staking_script_hash, STAKE_KIND_SCRIPT) for row in rows]


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def handle_project_event(ctx: HandlerContext, event: ProjectEvent) -> HandlerResult:
    rows = await ctx.driver.store(
        event.indices, partial(decode_project, network=ctx.config.network)
    )
    if not rows:
        logger.warning("there is no valid project")
        return HandlerResult()
    await ctx.repository.insert_projects(rows)
    effects: list[Effect] = [Refresh(VIEW_PROJECT_SUMMARY)]
    await run_effects(ctx, effects)
    return HandlerResult(stored=len(rows), effects=effects)


async def handle_project_detail_event(
    ctx: HandlerContext, event: ProjectDetailEvent
) -> HandlerResult:
    has_announcement = False

    def decode(output: ChainOutput) -> Decoded[ChainProjectDetail] | None:
        nonlocal has_announcement
        decoded = decode_project_detail(output)
        if decoded is not None and decoded.record.last_announcement_cid is not None:
            has_announcement = True
        return decoded

    rows = await ctx.driver.store(event.indices, decode)
    if not rows:
        logger.warning("there is no valid project detail")
        return HandlerResult()
    await ctx.repository.insert_project_details(rows)
    effects = project_detail_effects(has_announcement)
    await run_effects(ctx, effects)
    return HandlerResult(stored=len(rows), effects=effects)


async def handle_project_script_event(
    ctx: HandlerContext, event: ProjectScriptEvent
) -> HandlerResult:
    rows = await ctx.driver.store_with_script(event.indices, decode_project_script)
    if not rows:
        logger.warning("there is no valid project script")
        return HandlerResult()
    await ctx.repository.insert_project_scripts(rows)
    effects = project_script_effects(rows)
    await run_effects(ctx, effects)
    return HandlerResult(stored=len(rows), effects=effects)


async def handle_project_script_ceased_event(
    ctx: HandlerContext, event: ProjectScriptCeasedEvent
) -> HandlerResult:
    # Stake watch cleanup belongs to the staking registry.
    logger.info("project script token burned")
    return HandlerResult()


async def dispatch(ctx: HandlerContext, event: Event) -> HandlerResult:
    """Route one classified event to its handler."""
    match event:
        case ProjectEvent():
            return await handle_project_event(ctx, event)
        case ProjectDetailEvent():
            return await handle_project_detail_event(ctx, event)
        case ProjectScriptEvent():
            return await handle_project_script_event(ctx, event)
        case ProjectScriptCeasedEvent():
            return await handle_project_script_ceased_event(ctx, event)
    raise TypeError(f"unsupported project event: {event!r}")
