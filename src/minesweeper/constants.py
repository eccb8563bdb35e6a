DEFAULT_ROWS = 6
DEFAULT_COLS = 6
DEFAULT_MINES = 6

# Row labels are single letters, so a board can have at most one row per letter.
MAX_ROWS = 26

# Saves are written as <name><SAVE_EXTENSION> inside the save directory.
SAVE_EXTENSION = ".txt"
SAVE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cell glyphs used by the text renderer.
GLYPH_MINE = "X"
GLYPH_FLAG = "F"
GLYPH_HIDDEN = " "

# Width of the row label gutter ("   ") and of one cell ("+---").
ROW_LABEL_WIDTH = 3
CELL_WIDTH = 4
