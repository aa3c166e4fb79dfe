"""WebSocket endpoint and message routing."""

import json

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from gomoku.models import (
    ErrorMsg,
    PlaceStoneMsg,
    ResetMsg,
    SyncMsg,
    parse_client_message,
)
from gomoku.session import session_manager

router = APIRouter()


async def receive_payload(ws: WebSocket):
    """Return the decoded JSON of the next frame, or None if it is not JSON text."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000))
    text = message.get("text")
    if text is None:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    await session_manager.start_session(ws)
    try:
        while True:
            data = await receive_payload(ws)
            msg = parse_client_message(data)
            if msg is None:
                await ws.send_json(ErrorMsg(message="Unknown or invalid message").model_dump())
                continue

            if isinstance(msg, PlaceStoneMsg):
                await session_manager.place_stone(ws, msg.row, msg.col)

            elif isinstance(msg, ResetMsg):
                await session_manager.reset(ws)

            elif isinstance(msg, SyncMsg):
                await session_manager.sync(ws)
    except WebSocketDisconnect:
        pass
    finally:
        await session_manager.handle_disconnect(ws)
