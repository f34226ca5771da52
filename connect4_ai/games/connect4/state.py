from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board


@dataclass(frozen=True)
class Connect4State:
    board: Board
    to_move: int
    winner: Optional[int]
    done: bool
    last_move: Optional[Tuple[int, int]] = None
