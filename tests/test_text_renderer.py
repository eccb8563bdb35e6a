from minesweeper.rendering.text_renderer import cell_glyph, render_board
from tests.helpers import board_from_layout


def test_cell_glyphs_follow_reveal_and_flag_state():
    board = board_from_layout(
        ["*.*", "..."],
        revealed=["x..", ".x."],
        flagged=["..x", "x.."],
    )
    assert cell_glyph(board, 0, 0) == "X"
    assert cell_glyph(board, 1, 1) == "2"
    assert cell_glyph(board, 0, 2) == "F"
    assert cell_glyph(board, 1, 0) == "F"
    assert cell_glyph(board, 0, 1) == " "


def test_render_board_layout():
    board = board_from_layout(["*.", ".."], revealed=[".x", ".."], flagged=["x.", ".."])
    assert render_board(board).splitlines() == [
        "     1   2",
        "   +---+---+",
        " a | F | 1 |",
        "   |---+---|",
        " b |   |   |",
        "   +---+---+",
    ]


def test_render_board_aligns_two_digit_columns():
    board = board_from_layout(["." * 11])
    header = render_board(board).splitlines()[0]
    assert header.endswith("10  11")
    assert header.index("11") == 5 + 10 * 4
