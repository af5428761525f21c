"""
This python file is used for drawing the Knight's Tour game board. Renders a
game snapshot as a matplotlib chessboard (visit numbers, knight, hint squares)
and as a plain-text visit-order matrix.
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
    matplotlib, tour_engine
"""

from __future__ import annotations

import matplotlib
import matplotlib.pyplot as plt
import matplotlib.patches as patches

from tour_engine import GameState, GameStatus, hint_squares, status_message


matplotlib.use("Agg")  # non-interactive backend for Gradio


ROW_LETTERS = "ABCDEFG"

_LIGHT = "#F0D9B5"
_DARK = "#B58863"
_VISITED = "#16A34A"
_HINT = "#DCFCE7"
_HINT_EDGE = "#86EFAC"
_RED = "#FF4500"
_KNIGHT = "♞"
_HINT_MARK = "·"


# ---------------------------------------------------------------------------
# 1. Chessboard image
# ---------------------------------------------------------------------------

def generate_board_image(state: GameState) -> plt.Figure:
    """Render *state* on a chessboard.

    Visited squares are filled green and numbered in visit order.  The knight
    sits on its current square (red border once the knight is stuck).  When
    hints are on, the squares it can jump to are tinted.
    """
    size = state.board_size
    hints = hint_squares(state)

    fig, ax = plt.subplots(1, 1, figsize=(5, 5))
    ax.set_xlim(0, size)
    ax.set_ylim(0, size)
    ax.set_aspect("equal")
    ax.invert_yaxis()

    for y in range(size):
        for x in range(size):
            if state.board[y, x] > 0:
                colour, edge = _VISITED, "none"
            elif (x, y) in hints:
                colour, edge = _HINT, _HINT_EDGE
            else:
                colour = _LIGHT if (x + y) % 2 == 0 else _DARK
                edge = "none"
            ax.add_patch(patches.Rectangle(
                (x, y), 1, 1, facecolor=colour, edgecolor=edge, linewidth=2,
            ))

    # Number each visited square
    for y in range(size):
        for x in range(size):
            value = int(state.board[y, x])
            if value:
                ax.text(
                    x + 0.5, y + 0.7, str(value),
                    ha="center", va="center", fontsize=max(8, 20 - size),
                    fontweight="bold", color="white",
                )

    if state.position is not None:
        kx, ky = state.position
        if state.status is GameStatus.LOST:
            ax.add_patch(patches.Rectangle(
                (kx, ky), 1, 1, facecolor="none", edgecolor=_RED, linewidth=3,
            ))
        ax.text(
            kx + 0.5, ky + 0.3, _KNIGHT,
            ha="center", va="center", fontsize=max(12, 28 - size),
            color="#222",
        )

    # Axis labels
    ax.set_xticks([i + 0.5 for i in range(size)])
    ax.set_xticklabels([str(i + 1) for i in range(size)], fontsize=12)
    ax.set_yticks([i + 0.5 for i in range(size)])
    ax.set_yticklabels([ROW_LETTERS[i] for i in range(size)], fontsize=12)
    ax.tick_params(length=0)

    ax.set_title(
        f"Knight's Tour  {size}×{size}  ({status_message(state)})",
        fontsize=14, fontweight="bold",
    )
    fig.tight_layout()
    return fig


# ---------------------------------------------------------------------------
# 2. Text helpers
# ---------------------------------------------------------------------------

def board_to_text(state: GameState) -> str:
    """Format the visit-order matrix; unvisited squares show as ``.``."""
    size = state.board_size
    lines = []
    header = "    " + "  ".join(f"{i+1:>3}" for i in range(size))
    lines.append(header)
    lines.append("    " + "-----" * size)
    for y in range(size):
        vals = "  ".join(
            f"{int(state.board[y, x]) or '.':>3}" for x in range(size)
        )
        lines.append(f" {ROW_LETTERS[y]} | {vals}")
    return "\n".join(lines)


def square_label(state: GameState, x: int, y: int, hints=None) -> str:
    """Caption for the button of square (x, y)."""
    value = int(state.board[y, x])
    if value:
        return str(value)
    if hints is None:
        hints = hint_squares(state)
    return _HINT_MARK if (x, y) in hints else ""
