"""Pydantic models for the WebSocket messages exchanged with the renderer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ValidationError

from gomoku.game import Player, Snapshot


# ---------------------------------------------------------------------------
# Client → Server
# ---------------------------------------------------------------------------

class PlaceStoneMsg(BaseModel):
    type: Literal["place_stone"] = "place_stone"
    row: int
    col: int


class ResetMsg(BaseModel):
    type: Literal["reset"] = "reset"


class SyncMsg(BaseModel):
    type: Literal["sync"] = "sync"


ClientMessage = PlaceStoneMsg | ResetMsg | SyncMsg


# ---------------------------------------------------------------------------
# Server → Client
# ---------------------------------------------------------------------------

class StateMsg(BaseModel):
    type: Literal["state"] = "state"
    board: list[list[Player | None]]
    current_player: Player
    is_game_over: bool
    winner: Player | None
    move_count: int
    last_move: tuple[int, int] | None

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> StateMsg:
        return cls(
            board=[list(line) for line in snapshot.board],
            current_player=snapshot.current_player,
            is_game_over=snapshot.is_game_over,
            winner=snapshot.winner,
            move_count=snapshot.move_count,
            last_move=snapshot.last_move,
        )


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    message: str


def parse_client_message(data: object) -> ClientMessage | None:
    """Parse a raw dict into a typed client message, or None if invalid."""
    if not isinstance(data, dict):
        return None
    msg_type = data.get("type")
    mapping: dict[str, type[BaseModel]] = {
        "place_stone": PlaceStoneMsg,
        "reset": ResetMsg,
        "sync": SyncMsg,
    }
    model = mapping.get(msg_type)  # type: ignore[arg-type]
    if model is None:
        return None
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError:
        return None
