from typing import List, Optional, Sequence

from c4backend.app.engine.constants import ROWS, COLS, EMPTY
from c4backend.app.models.enums import Player, Winner


class BoardState:
    def __init__(self):
        """
        Board uses (row, col) indexing.
        Row 0 is the TOP of the board.
        Row 5 is the BOTTOM of the board.
        Values: 0=Empty, 1=Human, 2=AI

        Only the move functions in engine.moves write to the grid.
        """
        self.grid: List[List[int]] = [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]
        self.move_count = 0
        self.current_player = Player.HUMAN
        # None while the game is ongoing
        self.winner: Optional[Winner] = None

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    def reset(self):
        for row in self.grid:
            for c in range(COLS):
                row[c] = EMPTY
        self.move_count = 0
        self.current_player = Player.HUMAN
        self.winner = None

    def copy(self) -> "BoardState":
        """Scratch copy for simulation. Never aliases the live grid."""
        b = BoardState()
        b.grid = [row[:] for row in self.grid]
        b.move_count = self.move_count
        b.current_player = self.current_player
        b.winner = self.winner
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], current_player: Player = Player.HUMAN) -> "BoardState":
        """
        Builds a position from a 6x7 matrix (Row 0=Top).
        Rejects wrong shapes, unknown cell values and floating pieces.
        Terminal flags are not derived; callers set `winner` if they need it.
        """
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise ValueError(f"Board must be {ROWS}x{COLS}")

        board = cls()
        for c in range(COLS):
            seen_empty = False
            # Scan from Bottom (Row 5) to Top (Row 0)
            for r in range(ROWS - 1, -1, -1):
                val = rows[r][c]
                if val == EMPTY:
                    seen_empty = True
                    continue
                if val not in (Player.HUMAN, Player.AI):
                    raise ValueError(f"Invalid cell value {val!r} at ({r}, {c})")
                if seen_empty:
                    raise ValueError(f"Floating piece at ({r}, {c})")
                board.grid[r][c] = int(val)
                board.move_count += 1

        board.current_player = Player(current_player)
        return board

    def render(self) -> str:
        """Generates an ASCII grid representation."""
        symbols = {EMPTY: ".", Player.HUMAN: "X", Player.AI: "O"}
        header = " " + " ".join([str(i) for i in range(COLS)])
        rows_str = []
        for r in range(ROWS):
            row_cells = [symbols[self.grid[r][c]] for c in range(COLS)]
            rows_str.append("|" + "|".join(row_cells) + "|")
        return header + "\n" + "\n".join(rows_str)

    def __repr__(self):
        return f"BoardState(moves={self.move_count}, turn={self.current_player.name}, winner={self.winner})"
