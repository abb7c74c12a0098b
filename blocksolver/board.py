# board.py

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

# ─── GRID & SCORING ──────────────────────────────────────────────────
GRID_SIZE        = 8
TOTAL_CELLS      = GRID_SIZE * GRID_SIZE
FULL_LINE_REWARD = 10   # first cleared line; n lines at once → 10·n(n+1)/2
COLUMN_LETTERS   = "abcdefgh"
# ─────────────────────────────────────────────────────────────────────

def placement_code(col, row):
    """(0, 0) → 'a1', (7, 7) → 'h8'. Letter is the column, digit the row."""
    return COLUMN_LETTERS[col] + str(row + 1)

def parse_placement(code):
    """'c4' → (2, 3). Raises ValueError on anything that is not a grid cell."""
    if len(code) != 2 or code[0] not in COLUMN_LETTERS or not code[1].isdigit():
        raise ValueError(f"bad placement code: {code!r}")
    row = int(code[1]) - 1
    if not 0 <= row < GRID_SIZE:
        raise ValueError(f"bad placement code: {code!r}")
    return COLUMN_LETTERS.index(code[0]), row

# search order: column a first, top to bottom, then column b...
ANCHORS        = [(c, r) for c in range(GRID_SIZE) for r in range(GRID_SIZE)]
ALL_PLACEMENTS = [placement_code(c, r) for c, r in ANCHORS]

def clear_full_lines(cells):
    """
    Clear every full row and column of a bool grid in place.
    Rows and columns are detected on the same grid before anything is cleared,
    so a row and a column completed by the same piece both go.
    Returns the number of lines cleared.
    """
    full_rows = np.flatnonzero(cells.all(axis=1))
    full_cols = np.flatnonzero(cells.all(axis=0))
    cells[full_rows, :] = False
    cells[:, full_cols] = False
    return len(full_rows) + len(full_cols)

def line_clear_reward(lines):
    return FULL_LINE_REWARD * lines * (lines + 1) // 2


class Board:
    """8×8 occupancy grid plus the running score."""

    def __init__(self, cells=None, score=0):
        if cells is None:
            cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
        self.cells = cells
        self.score = score

    @classmethod
    def from_matrix(cls, matrix, score=0):
        """Build from a list of rows of 0/1 (the board_matrix.json format)."""
        cells = np.array(matrix, dtype=bool)
        if cells.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"board must be {GRID_SIZE}x{GRID_SIZE}, got {cells.shape}")
        return cls(cells, score)

    def clone(self):
        return Board(self.cells.copy(), self.score)

    def cell_count(self):
        return int(self.cells.sum())

    def can_place(self, shape, col, row):
        h, w = shape.mask.shape
        if row < 0 or col < 0 or row + h > GRID_SIZE or col + w > GRID_SIZE:
            return False
        return not np.any(self.cells[row:row+h, col:col+w] & shape.mask)

    def fitting_placements(self, shape):
        """Every placement code where the shape fits right now, in ALL_PLACEMENTS order."""
        h, w = shape.mask.shape
        if h > GRID_SIZE or w > GRID_SIZE:
            return []
        windows = sliding_window_view(self.cells, (h, w))
        fits = ~(windows & shape.mask).any(axis=(2, 3))   # [row, col] of the anchor
        n_rows, n_cols = fits.shape
        return [code for (c, r), code in zip(ANCHORS, ALL_PLACEMENTS)
                if r < n_rows and c < n_cols and fits[r, c]]

    def try_place(self, shape, placement):
        """
        Put the shape's top-left corner on `placement` ('c4').
        Leaves the board untouched and returns False if it does not fit;
        otherwise fills the cells, clears full lines, updates the score.
        """
        col, row = parse_placement(placement)
        if not self.can_place(shape, col, row):
            return False
        h, w = shape.mask.shape
        self.cells[row:row+h, col:col+w] |= shape.mask
        lines = clear_full_lines(self.cells)
        self.score += shape.size + line_clear_reward(lines)
        return True

    def overlay(self, shape, placement):
        """
        Board as a list-of-rows matrix with the shape drawn in: occupied
        cells read 1, free cells 0, and the shape's cells at `placement` 2.
        """
        col, row = parse_placement(placement)
        overlay = self.to_matrix()
        for dr, dc in shape.offsets():
            overlay[row+dr][col+dc] = 2
        return overlay

    def to_matrix(self):
        return self.cells.astype(int).tolist()

    def key(self):
        """Hashable occupancy snapshot (score ignored)."""
        return self.cells.tobytes()

    def __str__(self):
        return "\n".join("".join("█" if v else "·" for v in row) for row in self.cells)
