"""
This python file is used for the Knight's Tour game engine. Holds the board
state record, knight move generation, move validation, and the game-status
transitions (playing / complete / lost) driven by the player's clicks.
####################################################################
## Personal Project - Srinivas Sridharan
####################################################################

Author: Srinivas Sridharan
Copyright: 2026
Project: knight_tour

License: Personal Project
Version: 0.0.1
Maintainer: Srinivas Sridharan

Status: Development

Other dependencies:
    numpy
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple, Optional

import numpy as np


_log = logging.getLogger(__name__)

BOARD_SIZES = (5, 6, 7)
DEFAULT_BOARD_SIZE = 5

# All eight L-shaped knight moves (dx, dy)
KNIGHT_MOVES = [
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2),  (1, 2),  (2, -1),  (2, 1),
]

Position = tuple[int, int]


# ---------------------------------------------------------------------------
# 1. State
# ---------------------------------------------------------------------------

class GameStatus(enum.Enum):
    PLAYING = "playing"
    COMPLETE = "complete"
    LOST = "lost"


class MoveResult(enum.Enum):
    """Outcome of a click on a square."""

    ACCEPTED = "accepted"
    REJECTED_NOT_REACHABLE = "rejected_not_reachable"
    REJECTED_VISITED = "rejected_visited"
    REJECTED_GAME_OVER = "rejected_game_over"


class GameState(NamedTuple):
    """Snapshot of one game.

    ``board[y, x]`` is 0 for an unvisited square, otherwise the 1-based order
    in which the knight visited it.  The board array is read-only; every
    transition builds a fresh copy.
    """

    board: np.ndarray
    position: Optional[Position]
    move_counter: int
    status: GameStatus
    board_size: int
    show_hints: bool = False


def _empty_board(size: int) -> np.ndarray:
    board = np.zeros((size, size), dtype=int)
    board.flags.writeable = False
    return board


def new_game(size: int = DEFAULT_BOARD_SIZE, show_hints: bool = False) -> GameState:
    """Return a fresh game on a *size* x *size* board with nothing visited."""
    if size not in BOARD_SIZES:
        raise ValueError(f"Board size must be one of {BOARD_SIZES}, got {size!r}")
    return GameState(
        board=_empty_board(size),
        position=None,
        move_counter=1,
        status=GameStatus.PLAYING,
        board_size=size,
        show_hints=show_hints,
    )


def reset(state: GameState) -> GameState:
    """Start over on the same board size.  The hints flag is kept."""
    return new_game(state.board_size, show_hints=state.show_hints)


# ---------------------------------------------------------------------------
# 2. Move generation and queries
# ---------------------------------------------------------------------------

def in_bounds(state: GameState, pos: Position) -> bool:
    x, y = pos
    return 0 <= x < state.board_size and 0 <= y < state.board_size


def valid_moves(state: GameState, pos: Optional[Position]) -> frozenset[Position]:
    """Return the unvisited squares a knight on *pos* can jump to.

    Recomputed from the board on every call; an empty set when *pos* is None.
    """
    if pos is None:
        return frozenset()
    x, y = pos
    moves = set()
    for dx, dy in KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if in_bounds(state, (nx, ny)) and state.board[ny, nx] == 0:
            moves.add((nx, ny))
    return frozenset(moves)


def is_complete(state: GameState) -> bool:
    return state.move_counter > state.board_size * state.board_size


def is_stuck(state: GameState, pos: Optional[Position]) -> bool:
    """True when a knight on *pos* has no unvisited square to jump to."""
    if pos is None:
        return False
    return not valid_moves(state, pos)


def visited_count(state: GameState) -> int:
    return state.move_counter - 1


def hint_squares(state: GameState) -> frozenset[Position]:
    """Squares to highlight: the current legal moves, only while hints are on."""
    if not state.show_hints or state.status is not GameStatus.PLAYING:
        return frozenset()
    return valid_moves(state, state.position)


def status_message(state: GameState) -> str:
    if state.status is GameStatus.COMPLETE:
        return "Tour Complete!"
    if state.status is GameStatus.LOST:
        return "No More Moves Possible!"
    return f"Move {visited_count(state)} of {state.board_size * state.board_size}"


# ---------------------------------------------------------------------------
# 3. Transitions
# ---------------------------------------------------------------------------

def attempt_move(state: GameState, target: Position) -> tuple[GameState, MoveResult]:
    """Try to move the knight to *target*.

    Returns the new state and how the click was handled.  A rejected click
    returns *state* itself, unchanged.  The first move of a game may land on
    any square; afterwards only legal knight moves are accepted.
    """
    if len(target) != 2:
        raise ValueError(f"Position must be an (x, y) pair, got {target!r}")
    target = (int(target[0]), int(target[1]))

    if state.status is not GameStatus.PLAYING:
        _log.debug("Ignoring click on %s: game is %s", target, state.status.value)
        return state, MoveResult.REJECTED_GAME_OVER
    if not in_bounds(state, target):
        _log.debug("Ignoring click on %s: off the board", target)
        return state, MoveResult.REJECTED_NOT_REACHABLE

    x, y = target
    if state.move_counter > 1:
        if state.board[y, x] != 0:
            _log.debug("Ignoring click on %s: already visited", target)
            return state, MoveResult.REJECTED_VISITED
        if target not in valid_moves(state, state.position):
            _log.debug("Ignoring click on %s: not a knight move from %s",
                       target, state.position)
            return state, MoveResult.REJECTED_NOT_REACHABLE

    board = state.board.copy()
    board[y, x] = state.move_counter
    board.flags.writeable = False

    moved = state._replace(
        board=board,
        position=target,
        move_counter=state.move_counter + 1,
    )

    if is_complete(moved):
        moved = moved._replace(status=GameStatus.COMPLETE)
        _log.info("Tour complete on %dx%d board", state.board_size, state.board_size)
    elif is_stuck(moved, target):
        moved = moved._replace(status=GameStatus.LOST)
        _log.info("Knight stuck at %s after %d squares", target, visited_count(moved))

    return moved, MoveResult.ACCEPTED


# ---------------------------------------------------------------------------
# 4. Requests from the UI
# ---------------------------------------------------------------------------

def select_board_size(state: GameState, size: int) -> GameState:
    """Switch to a *size* board, discarding any tour in progress.

    Unknown sizes are ignored.
    """
    if size not in BOARD_SIZES:
        _log.warning("Ignoring unsupported board size %r", size)
        return state
    return new_game(size, show_hints=state.show_hints)


def click_square(state: GameState, x: int, y: int) -> tuple[GameState, MoveResult]:
    return attempt_move(state, (x, y))


def toggle_hints(state: GameState) -> GameState:
    return state._replace(show_hints=not state.show_hints)
