from __future__ import annotations

from typing import Annotated, List, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from fogwar.common.errors import InvalidEvent


class MoveEvent(BaseModel):
    kind: Literal["move"] = "move"
    unit_id: str
    path: List[Tuple[int, int]] = Field(min_length=1)


class EndTurnEvent(BaseModel):
    kind: Literal["end_turn"] = "end_turn"
    old_id: str | None = None
    new_id: str


class CreateUnitEvent(BaseModel):
    kind: Literal["create_unit"] = "create_unit"
    unit_id: str
    player_id: str
    type_id: str
    pos: Tuple[int, int]


class AttackUnitEvent(BaseModel):
    kind: Literal["attack_unit"] = "attack_unit"
    attacker_id: str
    defender_id: str
    killed: int = 0


class ShowUnitEvent(BaseModel):
    kind: Literal["show_unit"] = "show_unit"
    unit_id: str
    player_id: str
    type_id: str
    pos: Tuple[int, int]


class HideUnitEvent(BaseModel):
    kind: Literal["hide_unit"] = "hide_unit"
    unit_id: str


CoreEvent = Annotated[
    Union[
        MoveEvent,
        EndTurnEvent,
        CreateUnitEvent,
        AttackUnitEvent,
        ShowUnitEvent,
        HideUnitEvent,
    ],
    Field(discriminator="kind"),
]

_event_adapter: TypeAdapter = TypeAdapter(CoreEvent)


def parse_event(data: Mapping[str, object]) -> CoreEvent:
    """Decode one event from the simulation log."""
    try:
        return _event_adapter.validate_python(data)
    except ValidationError as exc:
        raise InvalidEvent(f"Invalid event payload: {exc}") from exc
