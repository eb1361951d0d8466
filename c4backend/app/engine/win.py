from c4backend.app.engine.board import BoardState
from c4backend.app.engine.constants import ROWS, COLS, EMPTY, WIN_LENGTH, DIRECTIONS
from c4backend.app.models.enums import Player


def check_win(board: BoardState, r: int, c: int, player: Player) -> bool:
    """
    Checks for 4-in-a-row through the piece just placed at (r, c).
    Only meaningful right after a placement there; this is not a full-board scan.
    """
    grid = board.grid
    for dr, dc in DIRECTIONS:
        count = 1
        # Check positive direction
        for i in range(1, WIN_LENGTH):
            nr, nc = r + dr * i, c + dc * i
            if 0 <= nr < ROWS and 0 <= nc < COLS and grid[nr][nc] == player:
                count += 1
            else:
                break
        # Check negative direction
        for i in range(1, WIN_LENGTH):
            nr, nc = r - dr * i, c - dc * i
            if 0 <= nr < ROWS and 0 <= nc < COLS and grid[nr][nc] == player:
                count += 1
            else:
                break

        if count >= WIN_LENGTH:
            return True
    return False


def is_board_full(board: BoardState) -> bool:
    return all(board.grid[0][c] != EMPTY for c in range(COLS))
