# c4backend/app/engine/constants.py

# --- Board Dimensions ---
# Row 0 is the TOP of the board, row 5 the BOTTOM.
ROWS = 6
COLS = 7
WIN_LENGTH = 4
CENTER_COL = COLS // 2

EMPTY = 0

# Horizontal, Vertical, Diagonal \, Diagonal /
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

# --- Scoring System ---
# A realized four dominates every positional term.
WIN_SCORE = 1_000_000
THREE_SCORE = 100
TWO_SCORE = 10
# Blocking an open opponent three outweighs building our own.
OPPONENT_THREE_SCORE = -2 * THREE_SCORE
CENTER_SCORE = 3

# --- Search ---
MIN_DEPTH = 3
MAX_DEPTH = 7
