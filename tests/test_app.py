"""Tests for the Gradio callbacks (no server is launched)."""

import matplotlib.pyplot as plt
import pytest

import app
from tour_engine import GameStatus, new_game

# state, MAX_SIZE² squares, hints button, status, plot, matrix
N_OUTPUTS = 1 + app.MAX_SIZE * app.MAX_SIZE + 4


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def _squares(outputs):
    return outputs[1:1 + app.MAX_SIZE * app.MAX_SIZE]


class TestCallbacks:

    def test_square_click_moves_knight(self):
        outputs = app.on_square_click(new_game(5), 2, 2)
        assert len(outputs) == N_OUTPUTS
        state = outputs[0]
        assert state.position == (2, 2)
        assert outputs[-3] == "Move 1 of 25"
        assert _squares(outputs)[2 * app.MAX_SIZE + 2]["value"] == "1"

    def test_rejected_click_adds_note(self):
        state = app.on_square_click(new_game(5), 0, 0)[0]
        outputs = app.on_square_click(state, 1, 1)
        assert outputs[0] is state
        assert "not a knight's move" in outputs[-3]

    def test_board_size_change_shows_grid(self):
        outputs = app.on_board_size_change(new_game(5), "6")
        assert outputs[0].board_size == 6
        squares = _squares(outputs)
        visible = [u["visible"] for u in squares]
        assert sum(visible) == 36
        assert squares[5]["visible"]
        assert not squares[6]["visible"]

    def test_reset(self):
        state = app.on_square_click(new_game(7), 0, 0)[0]
        outputs = app.on_reset(state)
        assert outputs[0].move_counter == 1
        assert outputs[0].board_size == 7

    def test_toggle_hints_relabels_button(self):
        outputs = app.on_toggle_hints(new_game(5))
        assert outputs[0].show_hints
        assert outputs[1 + app.MAX_SIZE * app.MAX_SIZE]["value"] == "Hide Hints"

    def test_squares_locked_after_game_over(self):
        state = new_game(5)
        for x, y in [(2, 1), (3, 3), (1, 2), (0, 0)]:
            outputs = app.on_square_click(state, x, y)
            state = outputs[0]
        assert state.status is GameStatus.LOST
        assert not _squares(outputs)[0]["interactive"]

    def test_build_app(self):
        assert app.build_app() is not None
