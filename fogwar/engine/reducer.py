from __future__ import annotations

import logging
from typing import Iterable

from fogwar.common.errors import UnhandledEvent, UnknownUnitId
from fogwar.engine.events import (
    AttackUnitEvent,
    CreateUnitEvent,
    EndTurnEvent,
    HideUnitEvent,
    MoveEvent,
    ShowUnitEvent,
)
from fogwar.engine.fow import FogMap
from fogwar.engine.state import Unit, World

logger = logging.getLogger(__name__)

# Every event kind must be listed: True if it can change what a player sees.
EVENT_EFFECTS: dict[type, bool] = {
    MoveEvent: True,
    EndTurnEvent: True,
    CreateUnitEvent: True,
    AttackUnitEvent: False,
    ShowUnitEvent: False,
    HideUnitEvent: False,
}


def affects_visibility(event: object) -> bool:
    try:
        return EVENT_EFFECTS[type(event)]
    except KeyError:
        raise UnhandledEvent(f"No visibility rule for event {type(event).__name__}") from None


def apply_event(fog: FogMap, world: World, event: object) -> None:
    """Update one player's fog map for a single simulation event."""
    if not affects_visibility(event):
        logger.debug("Player %s: %s does not change visibility", fog.player_id, type(event).__name__)
        return
    if isinstance(event, MoveEvent):
        unit = _lookup(world, event.unit_id, "move")
        if unit.player_id == fog.player_id:
            unit_type = world.type_of(unit)
            for waypoint in event.path:
                world.grid.check(waypoint)
            for waypoint in event.path:
                fog.project_unit(world.grid, unit, unit_type, origin=waypoint)
    elif isinstance(event, EndTurnEvent):
        if event.new_id == fog.player_id:
            fog.reset(world)
    elif isinstance(event, CreateUnitEvent):
        unit = _lookup(world, event.unit_id, "create_unit")
        if event.player_id == fog.player_id:
            fog.project_unit(world.grid, unit, world.type_of(unit))


def apply_event_to_all(fogs: dict[str, FogMap], world: World, event: object) -> None:
    for player_id in sorted(fogs):
        apply_event(fogs[player_id], world, event)


def apply_events(fog: FogMap, world: World, events: Iterable[object]) -> None:
    for event in events:
        apply_event(fog, world, event)


def _lookup(world: World, unit_id: str, kind: str) -> Unit:
    try:
        return world.unit(unit_id)
    except UnknownUnitId:
        logger.error("%s event references unknown unit %s", kind, unit_id)
        raise
