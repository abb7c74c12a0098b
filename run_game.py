#!/usr/bin/env python3
import random

from blocksolver.board import Board
from blocksolver.player import FullEvalPlayer
from blocksolver.progress import ConsoleProgress, NullProgress
from blocksolver.shapes import random_batch

# ─── CONFIGURATION ─────────────────────────────────────────────────────
NUM_GAMES     = 1
SEED          = 1010
MAX_TURNS     = 200      # batches per game before giving up
SHOW_SEARCH   = True     # print search progress/throughput per batch
SHOW_BOARD    = True     # print the board after every batch
# ─────────────────────────────────────────────────────────────────────────

def play_batch(player, board, batch):
    """Place as much of the batch as the player manages. Returns pieces placed."""
    remaining = dict(batch)
    placed = 0
    while remaining:
        move = player.choose_move(board, remaining)
        if move is None:
            break
        shape_id, placement = move
        if not board.try_place(remaining[shape_id], placement):
            # plan was computed on this very board
            raise RuntimeError(f"planned move {shape_id}@{placement} does not fit")
        print(f"[game]   piece {shape_id} {remaining[shape_id]!r} → {placement}")
        del remaining[shape_id]
        placed += 1
    return placed

def play_game(rng, player):
    board = Board()
    player.reset()
    for turn in range(1, MAX_TURNS + 1):
        batch = random_batch(rng)
        print(f"[game] Turn {turn}: {list(batch.values())}")
        placed = play_batch(player, board, batch)
        if SHOW_BOARD:
            print(board)
        if placed < len(batch):
            print(f"[game] Stuck after {placed}/{len(batch)} pieces.")
            return turn, board.score
    return MAX_TURNS, board.score

def main():
    rng = random.Random(SEED)
    progress = ConsoleProgress() if SHOW_SEARCH else NullProgress()
    player = FullEvalPlayer(progress=progress)

    results = []
    try:
        for game in range(1, NUM_GAMES + 1):
            print(f"[game] ===== Game {game} =====")
            turns, score = play_game(rng, player)
            print(f"[game] Game {game}: {turns} turns, score {score}")
            results.append((turns, score))

    except KeyboardInterrupt:
        print("\n[game] Interrupted by user, shutting down…")

    finally:
        if results:
            avg = sum(s for _, s in results) / len(results)
            print(f"[game] {len(results)} game(s), average score {avg:.1f}")

if __name__ == "__main__":
    main()
