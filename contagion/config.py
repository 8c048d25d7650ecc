from __future__ import annotations

import os

from .models.enums import Owner

BOARD_SIZE = int(os.getenv("CONTAGION_BOARD_SIZE", "6"))
MAX_GAMES = int(os.getenv("CONTAGION_MAX_GAMES", "50"))
AI_MAX_CHAIN = int(os.getenv("CONTAGION_AI_MAX_CHAIN", "6"))
LOG_LEVEL = os.getenv("CONTAGION_LOG_LEVEL", "INFO").upper()


def _ai_player(raw: str) -> Owner | None:
    if raw.strip().lower() in ("", "none", "off"):
        return None
    return Owner(raw.strip().upper())


AI_PLAYER = _ai_player(os.getenv("CONTAGION_AI_PLAYER", "PLAYER2"))

HOST = os.getenv("CONTAGION_HOST", "127.0.0.1")
PORT = int(os.getenv("CONTAGION_PORT", "8000"))
