"""Tests for the board image and text rendering."""

import matplotlib.pyplot as plt
import pytest

from board_view import board_to_text, generate_board_image, square_label
from tour_engine import attempt_move, new_game, toggle_hints


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def _play(state, path):
    for pos in path:
        state, _ = attempt_move(state, pos)
    return state


class TestGenerateBoardImage:

    def test_empty_board(self):
        fig = generate_board_image(new_game(5))
        assert isinstance(fig, plt.Figure)
        ax = fig.axes[0]
        assert ax.get_title() == "Knight's Tour  5×5  (Move 0 of 25)"
        assert len(ax.patches) == 25

    def test_visited_squares_are_numbered(self):
        fig = generate_board_image(_play(new_game(6), [(0, 0), (1, 2)]))
        texts = [t.get_text() for t in fig.axes[0].texts]
        assert "1" in texts
        assert "2" in texts
        assert "♞" in texts

    def test_lost_board_marks_knight(self):
        lost = _play(new_game(5), [(2, 1), (3, 3), (1, 2), (0, 0)])
        fig = generate_board_image(lost)
        ax = fig.axes[0]
        assert "No More Moves Possible!" in ax.get_title()
        assert len(ax.patches) == 26


class TestBoardToText:

    def test_layout(self):
        text = board_to_text(_play(new_game(5), [(0, 0), (1, 2)]))
        lines = text.splitlines()
        assert len(lines) == 2 + 5
        assert lines[0].split() == ["1", "2", "3", "4", "5"]
        assert lines[2].split() == ["A", "|", "1", ".", ".", ".", "."]
        assert lines[4].split() == ["C", "|", ".", "2", ".", ".", "."]


class TestSquareLabel:

    def test_visited_square_shows_number(self):
        state = _play(new_game(5), [(0, 0)])
        assert square_label(state, 0, 0) == "1"

    def test_hint_marker_only_when_hints_on(self):
        state = _play(new_game(5), [(0, 0)])
        assert square_label(state, 1, 2) == ""
        assert square_label(toggle_hints(state), 1, 2) == "·"
        assert square_label(toggle_hints(state), 3, 3) == ""
