# heuristics.py

import cv2
import numpy as np

from .board import GRID_SIZE

# ─── POSITIONAL WEIGHTS ──────────────────────────────────────────────
# weight per row/column index: borders 1.0 down to 0.25 in the middle
EDGE_WEIGHTS = [1.0, 0.75, 0.5, 0.25, 0.25, 0.5, 0.75, 1.0]
# ─────────────────────────────────────────────────────────────────────

def board_score(board):
    """
    Product over every occupied cell (x, y) of EDGE_WEIGHTS[y] * EDGE_WEIGHTS[x].
    Empty board → 1.0. A single centre cell multiplies by 0.0625, so anything
    away from the border drags the score toward zero fast.
    """
    score = 1.0
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            if not board.cells[y, x]:
                continue
            score *= EDGE_WEIGHTS[y] * EDGE_WEIGHTS[x]
    return score

def largest_histogram_rectangle(heights):
    """Largest rectangle under a histogram, classic increasing-stack pass."""
    best = 0
    stack = []   # indices with increasing heights
    for i, h in enumerate(list(heights) + [0]):
        start = i
        while stack and stack[-1][1] >= h:
            start, top = stack.pop()
            best = max(best, top * (i - start))
        stack.append((start, h))
    return best

def maximal_rectangle(board):
    """Area (in cells) of the largest all-empty axis-aligned rectangle."""
    heights = np.zeros(GRID_SIZE, dtype=int)
    best = 0
    for row in board.cells:
        # running count of empty cells straight above, per column
        heights = np.where(row, 0, heights + 1)
        best = max(best, largest_histogram_rectangle(heights))
    return int(best)

def empty_clusters(board):
    """Sizes of the 4-connected empty regions."""
    empty = (~board.cells).astype(np.uint8)
    n, _, stats, _ = cv2.connectedComponentsWithStats(empty, connectivity=4)
    # label 0 is the occupied background
    return [int(a) for a in stats[1:n, cv2.CC_STAT_AREA]]

def fragmentation_score(board):
    """
    How much of the free space hangs together, in [0, 1]:
    sum(size²) / total_empty², i.e. the chance that two random empty cells
    lie in the same cluster. One open region → 1.0, n isolated cells → 1/n,
    no empty cells → 0.0.
    """
    sizes = empty_clusters(board)
    total = sum(sizes)
    if total == 0:
        return 0.0
    return sum(s * s for s in sizes) / (total * total)
