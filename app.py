"""
This python file is used for Gradio web application for the Knight's Tour
game. Provides an interactive board to pick a board size, click squares to
move the knight, toggle move hints, reset, and view the visit-order matrix.
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
    gradio, matplotlib, board_view, tour_engine
"""

from __future__ import annotations

import logging
import os

import gradio as gr
import matplotlib.pyplot as plt

from board_view import board_to_text, generate_board_image, square_label
from tour_engine import (
    BOARD_SIZES,
    DEFAULT_BOARD_SIZE,
    GameState,
    GameStatus,
    MoveResult,
    click_square,
    hint_squares,
    new_game,
    reset,
    select_board_size,
    status_message,
    toggle_hints,
)


_log = logging.getLogger(__name__)

HOST = os.environ.get("KNIGHTS_TOUR_HOST", "127.0.0.1")
PORT = int(os.environ.get("KNIGHTS_TOUR_PORT", "7860"))
LOG_LEVEL = os.environ.get("KNIGHTS_TOUR_LOG_LEVEL", "INFO")

MAX_SIZE = max(BOARD_SIZES)

_REJECTION_NOTES = {
    MoveResult.REJECTED_NOT_REACHABLE: "That square is not a knight's move away.",
    MoveResult.REJECTED_VISITED: "That square has already been visited.",
}


# ── Helpers ───────────────────────────────────────────────────────────────

def _square_updates(state: GameState) -> list[dict]:
    """One update per button in the MAX_SIZE x MAX_SIZE grid (row-major)."""
    hints = hint_squares(state)
    updates = []
    for y in range(MAX_SIZE):
        for x in range(MAX_SIZE):
            if x < state.board_size and y < state.board_size:
                visited = state.board[y, x] > 0
                updates.append(gr.update(
                    value=square_label(state, x, y, hints),
                    visible=True,
                    variant="primary" if visited else "secondary",
                    interactive=state.status is GameStatus.PLAYING,
                ))
            else:
                updates.append(gr.update(value="", visible=False))
    return updates


def _render(state: GameState, note: str = "") -> tuple:
    """Everything the UI shows for *state*, in the order of the wired ``outputs``."""
    plt.close("all")
    status = status_message(state)
    if note:
        status = f"{status}\n{note}"
    hints_label = "Hide Hints" if state.show_hints else "Show Hints"
    return (
        state,
        *_square_updates(state),
        gr.update(value=hints_label),
        status,
        generate_board_image(state),
        board_to_text(state),
    )


# ── Callbacks ─────────────────────────────────────────────────────────────

def on_board_size_change(state: GameState, board_size):
    """Start a fresh game on the newly selected board size."""
    state = select_board_size(state, int(board_size))
    _log.info("Board size set to %dx%d", state.board_size, state.board_size)
    return _render(state)


def on_square_click(state: GameState, x: int, y: int):
    state, result = click_square(state, x, y)
    return _render(state, _REJECTION_NOTES.get(result, ""))


def on_reset(state: GameState):
    return _render(reset(state))


def on_toggle_hints(state: GameState):
    return _render(toggle_hints(state))


def _make_click_handler(x: int, y: int):
    def handler(state: GameState):
        return on_square_click(state, x, y)
    return handler


# ── Gradio UI ─────────────────────────────────────────────────────────────

def build_app() -> gr.Blocks:
    initial = new_game(DEFAULT_BOARD_SIZE)

    with gr.Blocks(
        title="Knight's Tour Game",
    ) as app:
        gr.Markdown(
            "# ♞ Knight's Tour Game\n"
            "Start anywhere on the board, move like a chess knight (L-shape) "
            "and visit each square exactly once.  \n"
            "Complete the tour by visiting all squares."
        )

        game_state = gr.State(initial)

        with gr.Row():
            # ── Left column: controls + clickable board ──
            with gr.Column(scale=1):
                size_radio = gr.Radio(
                    choices=[(f"{n}x{n} Board", n) for n in BOARD_SIZES],
                    value=DEFAULT_BOARD_SIZE,
                    label="Board Size",
                )
                status_box = gr.Textbox(
                    label="Status", value=status_message(initial),
                    lines=2, interactive=False,
                )
                with gr.Row():
                    hints_btn = gr.Button("Show Hints", variant="secondary")
                    reset_btn = gr.Button("Reset Game", variant="stop")

                squares = []
                for y in range(MAX_SIZE):
                    with gr.Row():
                        for x in range(MAX_SIZE):
                            squares.append(gr.Button(
                                "",
                                visible=x < DEFAULT_BOARD_SIZE and y < DEFAULT_BOARD_SIZE,
                                min_width=40,
                                size="sm",
                            ))

            # ── Right column: board visualisation ──
            with gr.Column(scale=2):
                board_plot = gr.Plot(
                    label="Chessboard",
                    value=generate_board_image(initial),
                )

        # ── Visit-order matrix ──
        with gr.Accordion("Visit-Order Matrix", open=False):
            matrix_box = gr.Code(
                label="Visit-Order Matrix", value=board_to_text(initial),
                language=None, lines=10,
            )

        # ── Wiring ──
        outputs = [game_state, *squares, hints_btn, status_box, board_plot, matrix_box]

        size_radio.change(
            on_board_size_change,
            inputs=[game_state, size_radio],
            outputs=outputs,
        )

        for idx, square in enumerate(squares):
            y, x = divmod(idx, MAX_SIZE)
            square.click(
                _make_click_handler(x, y),
                inputs=[game_state],
                outputs=outputs,
            )

        hints_btn.click(on_toggle_hints, inputs=[game_state], outputs=outputs)
        reset_btn.click(on_reset, inputs=[game_state], outputs=outputs)

    return app


# ── Main ──────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    app = build_app()
    app.launch(server_name=HOST, server_port=PORT, theme=gr.themes.Soft())
