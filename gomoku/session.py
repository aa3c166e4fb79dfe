"""Session management: one game per renderer connection, plus the paced opponent."""

from __future__ import annotations

import asyncio
import logging
import secrets
from dataclasses import dataclass, field

from fastapi import WebSocket

from gomoku.config import BOARD_SIZE, OPPONENT_DELAY
from gomoku.evaluator import NO_MOVE, best_move
from gomoku.game import GameState, Player
from gomoku.models import StateMsg

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    session_id: str
    ws: WebSocket
    game: GameState = field(default_factory=GameState)
    human: Player = Player.BLACK
    opponent_task: asyncio.Task | None = field(default=None, repr=False)
    connected: bool = True

    @property
    def opponent(self) -> Player:
        return self.human.opposite()

    @property
    def opponent_pending(self) -> bool:
        return self.opponent_task is not None and not self.opponent_task.done()

    async def send_state(self):
        if not self.connected:
            return
        msg = StateMsg.from_snapshot(self.game.snapshot())
        try:
            await self.ws.send_json(msg.model_dump(mode="json"))
        except Exception:
            logger.warning("Session %s: failed to push state", self.session_id, exc_info=True)


class SessionManager:
    def __init__(self, board_size: int = BOARD_SIZE, opponent_delay: float = OPPONENT_DELAY):
        self.board_size = board_size
        self.opponent_delay = opponent_delay
        self.sessions: dict[str, GameSession] = {}
        self._ws_to_session: dict[WebSocket, str] = {}

    def _generate_session_id(self) -> str:
        while True:
            session_id = secrets.token_hex(3)  # 6-char hex
            if session_id not in self.sessions:
                return session_id

    async def start_session(self, ws: WebSocket) -> GameSession:
        session_id = self._generate_session_id()
        session = GameSession(session_id=session_id, ws=ws, game=GameState(self.board_size))

        self.sessions[session_id] = session
        self._ws_to_session[ws] = session_id
        logger.info("Session %s started on a %dx%d board", session_id, self.board_size, self.board_size)

        await session.send_state()
        return session

    async def place_stone(self, ws: WebSocket, row: int, col: int):
        session = self.get_session_for_ws(ws)
        if session is None:
            return

        # Out-of-turn and illegal clicks are no-ops; the renderer just redraws.
        placed = session.game.place(row, col, session.human)
        await session.send_state()
        if placed:
            self._schedule_opponent_move(session)

    async def reset(self, ws: WebSocket):
        session = self.get_session_for_ws(ws)
        if session is None:
            return

        self._cancel_opponent_move(session)
        session.game.reset()
        logger.info("Session %s reset", session.session_id)
        await session.send_state()

    async def sync(self, ws: WebSocket):
        session = self.get_session_for_ws(ws)
        if session is not None:
            await session.send_state()

    async def handle_disconnect(self, ws: WebSocket):
        session_id = self._ws_to_session.pop(ws, None)
        if session_id is None:
            return

        session = self.sessions.pop(session_id, None)
        if session is None:
            return

        session.connected = False
        self._cancel_opponent_move(session)
        logger.info("Session %s closed", session_id)

    def _cancel_opponent_move(self, session: GameSession):
        if session.opponent_task and not session.opponent_task.done():
            session.opponent_task.cancel()
        session.opponent_task = None

    def _schedule_opponent_move(self, session: GameSession):
        """Cancel any pending opponent move and, if it is the opponent's turn, queue a new one."""
        self._cancel_opponent_move(session)
        game = session.game
        if game.is_game_over or game.current_player != session.opponent:
            return

        async def opponent_turn():
            await asyncio.sleep(self.opponent_delay)
            session.opponent_task = None

            move = best_move(game.board, session.opponent)
            if move is NO_MOVE:
                return
            row, col = move
            if game.place(row, col, session.opponent):
                await session.send_state()
            self._schedule_opponent_move(session)

        session.opponent_task = asyncio.create_task(opponent_turn())

    def get_session_for_ws(self, ws: WebSocket) -> GameSession | None:
        session_id = self._ws_to_session.get(ws)
        if session_id is None:
            return None
        return self.sessions.get(session_id)


session_manager = SessionManager()
