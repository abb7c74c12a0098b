# move_simulator.py  (run as: python -m blocksolver.move_simulator [board.json] [blocks.json])

import json
import sys

from .board import Board
from .player import FullEvalPlayer
from .progress import ConsoleProgress
from .shapes import Shape

BOARD_JSON   = "board_matrix.json"
BLOCKS_JSON  = "next_blocks.json"
OUTPUT_JSON  = "recommended_move.json"

def load_board(path=BOARD_JSON):
    with open(path) as f:
        return Board.from_matrix(json.load(f))

def load_blocks(path=BLOCKS_JSON):
    """{block index: Shape} from the detected preview strip."""
    with open(path) as f:
        data = json.load(f)
    return {i: Shape.from_matrix(blk["matrix"]) for i, blk in enumerate(data)}

def recommend(board, blocks, player=None):
    """Best full sequence for this batch, in the recommended_move.json layout."""
    player = player or FullEvalPlayer()
    best = player.best_path(board, blocks)

    result = {
        "initial_with_move": None,
        "sequence": [[m.shape_id, m.placement] for m in best.moves],
        "score_gain": best.score_gain,
        "stats": best.summary(),
    }

    if best.moves:
        first = best.moves[0]
        result["initial_with_move"] = board.overlay(blocks[first.shape_id], first.placement)
    else:
        # nothing fits: report the board as it is
        result["initial_with_move"] = board.to_matrix()
    return result

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    board_path  = argv[0] if len(argv) > 0 else BOARD_JSON
    blocks_path = argv[1] if len(argv) > 1 else BLOCKS_JSON

    board  = load_board(board_path)
    blocks = load_blocks(blocks_path)
    result = recommend(board, blocks, FullEvalPlayer(progress=ConsoleProgress()))

    # save out for downstream tools
    with open(OUTPUT_JSON, "w") as f:
        json.dump(result, f, indent=2)

    # echo the result to stdout
    print(json.dumps(result, indent=2))

if __name__=="__main__":
    main()
