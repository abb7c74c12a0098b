# player.py

import time
from collections import deque

from .policy import FullEvalPolicy
from .progress import NullProgress
from .search import MoveEnumerator


class FullEvalPlayer:
    """
    Searches a batch once, then hands out the winning path one placement
    per call. A new search runs only when the cached plan is used up.
    """

    def __init__(self, policy=None, progress=None):
        self.policy = policy or FullEvalPolicy()
        self.progress = progress or NullProgress()
        self.enumerator = MoveEnumerator(self.policy, self.progress)
        self.plan = deque()
        self.last_path = None

    def best_path(self, board, shapes):
        """Run the full search for this batch and return the selected path."""
        self.progress.start("Calculating possible moves... ")
        started = time.perf_counter()

        paths = self.enumerator.enumerate(board, shapes)
        best = self.policy.select_best_path(paths)

        elapsed = time.perf_counter() - started
        found = self.enumerator.possible_moves
        if found > 0 and elapsed > 0:
            self.progress.finish(f"{len(paths):,} paths, {found:,} placements. "
                                 f"Throughput: {found / elapsed:,.0f}/sec")
        else:
            self.progress.finish(f"{len(paths):,} paths, no placement possible")
        self.last_path = best
        return best

    def choose_move(self, board, shapes):
        """
        Next (shape_id, placement) to play, e.g. (2, 'c4').
        Returns None if not a single piece of the batch fits.
        """
        if not self.plan:
            best = self.best_path(board, shapes)
            self.plan.extend(best.moves)
            if not self.plan:
                return None

        move = self.plan.popleft()
        return move.shape_id, move.placement

    def reset(self):
        """Forget the cached plan (e.g. when a new game starts)."""
        self.plan.clear()
        self.last_path = None
