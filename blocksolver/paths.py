# paths.py

from dataclasses import dataclass, field
from typing import List

# historical per-batch ranges, used only to rescale for reports
CELLS_GAIN_MIN = -43
CELLS_GAIN_MAX = 27
SCORE_GAIN_MAX = 127


@dataclass
class Candidate:
    """One piece placed at one coordinate, with what that placement changed."""
    shape_id: int
    placement: str      # 'c4': column letter + row digit
    cells_gain: int = 0
    score_gain: int = 0


@dataclass
class GamePath:
    """An ordered way of placing (part of) a batch, plus its statistics."""
    moves: List[Candidate] = field(default_factory=list)
    cells_gain: int = 0
    score_gain: int = 0
    cell_count: int = 0
    placement_score: float = 1.0
    max_area: float = 0.0
    frag_score: float = 0.0

    def extend(self, candidate):
        """
        New path = this path's history + one more move. The move list is copied,
        so sibling branches never share it. Leaf statistics are not inherited.
        """
        return GamePath(
            moves=self.moves + [candidate],
            cells_gain=self.cells_gain,
            score_gain=self.score_gain,
            cell_count=self.cell_count,
            placement_score=self.placement_score,
        )

    @property
    def cell_gain_norm(self):
        return 1 - (self.cells_gain - CELLS_GAIN_MIN) / (CELLS_GAIN_MAX - CELLS_GAIN_MIN)

    @property
    def score_gain_norm(self):
        return self.score_gain / SCORE_GAIN_MAX

    def summary(self):
        """Plain dict for JSON output."""
        return {
            "moves": [[m.shape_id, m.placement] for m in self.moves],
            "cells_gain": self.cells_gain,
            "score_gain": self.score_gain,
            "cell_count": self.cell_count,
            "placement_score": self.placement_score,
            "max_area": self.max_area,
            "frag_score": self.frag_score,
            "cell_gain_norm": self.cell_gain_norm,
            "score_gain_norm": self.score_gain_norm,
        }
