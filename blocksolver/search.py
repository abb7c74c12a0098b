# search.py

from abc import ABC, abstractmethod

from .paths import Candidate, GamePath
from .progress import NullProgress

UPDATE_EVERY = 10_000   # placements between progress updates


class PathPolicy(ABC):
    """
    Scoring side of the search: fills in statistics while the tree is walked
    and picks the winning path once it is done.
    """

    def start_search(self):
        """Called once before each enumeration; drop per-search state here."""

    @abstractmethod
    def gather_step_stats(self, candidate, path, board, new_board):
        """Called after each successful placement; board is before, new_board after."""

    @abstractmethod
    def gather_path_stats(self, path, board):
        """Called once per leaf with the board the path ends on."""

    @abstractmethod
    def select_best_path(self, paths):
        """Reduce the enumerated leaves to one path."""


class MoveEnumerator:
    """
    Walks every order and every position the batch can be placed in.

    Each branch works on its own copy of the board. A prefix after which no
    remaining piece fits is kept as a leaf, so partial placements compete too.
    """

    def __init__(self, policy, progress=None):
        self.policy = policy
        self.progress = progress or NullProgress()
        self.possible_moves = 0
        self._last_update = 0

    def enumerate(self, board, shapes):
        """All maximal paths for `shapes` ({id: Shape}) starting from `board`."""
        self.possible_moves = 0
        self._last_update = 0
        self.policy.start_search()
        paths = []
        root = GamePath(cell_count=board.cell_count())
        self._search(board, dict(shapes), paths, root)
        return paths

    def _search(self, board, shapes, paths, start_path):
        if not shapes:
            self.policy.gather_path_stats(start_path, board)
            paths.append(start_path)
            return

        placed = False
        for shape_id, shape in shapes.items():
            rest = {k: v for k, v in shapes.items() if k != shape_id}
            # only anchors that fit; each one still gets its own board
            for placement in board.fitting_placements(shape):
                new_board = board.clone()
                if not new_board.try_place(shape, placement):
                    continue
                self.possible_moves += 1
                placed = True

                candidate = Candidate(shape_id=shape_id, placement=placement)
                path = start_path.extend(candidate)
                self.policy.gather_step_stats(candidate, path, board, new_board)
                self._search(new_board, rest, paths, path)

        if self.possible_moves - self._last_update >= UPDATE_EVERY:
            self._last_update = self.possible_moves
            self.progress.update(f"[{self.possible_moves:,}]")

        if not placed:
            # dead end: nothing else fits, keep what was placed so far
            self.policy.gather_path_stats(start_path, board)
            paths.append(start_path)
