# policy.py

from .board import TOTAL_CELLS
from .heuristics import board_score, fragmentation_score, maximal_rectangle
from .lookahead import NextDrawEvaluator
from .search import PathPolicy

# ─── SWITCH BETWEEN STATIC AND LOOKAHEAD SCORING ─────────────────────
CLUTTER_CELLS = 30     # at or above this many filled cells the board is crowded
OPEN_AREA     = 0.35   # ...unless the largest empty rectangle covers this share
# ─────────────────────────────────────────────────────────────────────

def is_crowded(cell_count, max_area):
    return cell_count >= CLUTTER_CELLS and max_area < OPEN_AREA


class FullEvalPolicy(PathPolicy):
    """
    Positional score while the board is sparse or has a big open area;
    next-draw survivability once it gets crowded.
    """

    def __init__(self, evaluator=None):
        self.evaluator = evaluator or NextDrawEvaluator()

    def start_search(self):
        self.evaluator.reset()

    def gather_step_stats(self, candidate, path, board, new_board):
        count_after = new_board.cell_count()
        cells_gain = count_after - board.cell_count()
        score_gain = new_board.score - board.score
        candidate.cells_gain = cells_gain
        candidate.score_gain = score_gain

        path.cells_gain += cells_gain
        path.score_gain += score_gain
        path.cell_count = count_after

    def gather_path_stats(self, path, board):
        path.max_area = maximal_rectangle(board) / TOTAL_CELLS
        path.frag_score = fragmentation_score(board)

        if is_crowded(path.cell_count, path.max_area):
            path.placement_score = self.evaluator.survivability(board)
        else:
            path.placement_score = board_score(board)

    def select_best_path(self, paths):
        # sorted() is stable: ties keep enumeration order
        by_score = sorted(paths, key=lambda p: (-len(p.moves), -p.score_gain, -p.placement_score))
        by_next_draw = sorted(paths, key=lambda p: (-len(p.moves), -p.placement_score, -p.score_gain))

        top = by_score[0]
        top_next_draw = by_next_draw[0]

        if not is_crowded(top.cell_count, top.max_area):
            return top
        # zero means the lookahead could not tell the boards apart
        if top_next_draw.placement_score == 0:
            return top
        return top_next_draw
