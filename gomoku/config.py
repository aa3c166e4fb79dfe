"""Runtime settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

load_dotenv()

BOARD_SIZE = int(os.getenv("GOMOKU_BOARD_SIZE", "15"))
OPPONENT_DELAY = float(os.getenv("GOMOKU_OPPONENT_DELAY", "0.5"))  # seconds
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5174")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

if BOARD_SIZE < 5:
    raise ValueError(f"GOMOKU_BOARD_SIZE must be at least 5, got {BOARD_SIZE}")
