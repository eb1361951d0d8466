import logging
import sys
import os
import time

# Ensure app module is in path
sys.path.append(os.path.dirname(__file__))

from c4backend.app.models.enums import Player, Winner
from c4backend.app.services.game_session import GameSession


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("=======================================")
    print("   CONNECT FOUR: Human vs Minimax")
    print("=======================================")

    session = GameSession()

    print(session.board_text())

    while not session.game_over:

        # --- Human Turn (X) ---
        if session.current_player == Player.HUMAN:
            valid_moves = list(session.snapshot().legal_columns)
            try:
                user_input = input(f"\nYour Move (Columns {valid_moves}): ")
                col = int(user_input)
            except ValueError:
                print("Please enter a valid number.")
                continue

            if not session.attempt_move(col, Player.HUMAN):
                print("Invalid column. Try again.")
                continue

        # --- AI Turn (O) ---
        else:
            print("\nAI is thinking...")
            start = time.time()
            col = session.request_ai_move()
            if col is None:
                print("AI has no move.")
                break
            print(f"AI plays Column: {col} ({time.time() - start:.2f}s)")

        if not session.game_over:
            session.switch_turn()

        # Show Board
        print("\n" + session.board_text())

    # --- End Game ---
    if session.winner == Winner.DRAW:
        print("\nGame Over! It's a Draw.")
    elif session.winner:
        winner_name = "Human" if session.winner == Winner.HUMAN else "AI"
        print(f"\nGame Over! Winner: {winner_name}")


if __name__ == "__main__":
    main()
