# lookahead.py

from itertools import combinations

from .shapes import Orientation, Shape, ShapeType

# ─── NEXT-DRAW UNIVERSE ──────────────────────────────────────────────
# shapes that almost always fit somewhere; not worth simulating
EASY_TYPES = {
    ShapeType.SINGLER, ShapeType.THREE_LINER, ShapeType.FOUR_LINER,
    ShapeType.SMALL_L, ShapeType.SMALL_SQUARE, ShapeType.LONG_TAIL,
    ShapeType.LARGE_L,
}
# orientations that duplicate another one by symmetry
SKIPPED_ORIENTATIONS = {
    ShapeType.FIVE_LINER:   {Orientation.E, Orientation.N},
    ShapeType.LARGE_SQUARE: {Orientation.N, Orientation.S, Orientation.W},
}
# extra weight a batch gets for each of these members
HARD_SHAPE_BONUS = {
    ShapeType.LARGE_SQUARE: 3,
    ShapeType.FIVE_LINER:   2,
}
DRAW_SIZE = 3
# ─────────────────────────────────────────────────────────────────────

def risky_shapes():
    """The shapes most likely to cause trouble, one entry per useful orientation."""
    shapes = []
    for shape_type in ShapeType:
        if shape_type in EASY_TYPES:
            continue
        skipped = SKIPPED_ORIENTATIONS.get(shape_type, set())
        for orientation in Orientation:
            if orientation in skipped:
                continue
            shapes.append(Shape(shape_type, orientation))
    return shapes

def next_draws(shapes=None):
    """Every unordered 3-piece batch of distinct risky shapes, as {1: s, 2: s, 3: s}."""
    if shapes is None:
        shapes = risky_shapes()
    return [dict(enumerate(combo, start=1)) for combo in combinations(shapes, DRAW_SIZE)]

def draw_weight(draw):
    return 1 + sum(HARD_SHAPE_BONUS.get(s.shape_type, 0) for s in draw.values())

def can_place_all(board, shapes):
    """
    True if some order and some positions fit every shape on the board.
    Stops at the first full fit; only a failure needs the whole tree.
    """
    if not shapes:
        return True
    for shape_id, shape in shapes.items():
        rest = {k: v for k, v in shapes.items() if k != shape_id}
        for placement in board.fitting_placements(shape):
            new_board = board.clone()
            new_board.try_place(shape, placement)
            if can_place_all(new_board, rest):
                return True
    return False


class SurvivalTable:
    """Survivability already worked out, keyed by board occupancy."""

    def __init__(self):
        self.table = {}
        self.hits = 0

    def get(self, key):
        if key in self.table:
            self.hits += 1
            return self.table[key]
        return None

    def put(self, key, value):
        self.table[key] = value

    def reset(self):
        self.table.clear()
        self.hits = 0


class NextDrawEvaluator:
    """
    Scores a board by how many plausible next batches it could still take whole.
    Batches holding large squares or five-liners weigh more on both sides of the
    ratio, so boards that keep room for those come out ahead.
    """

    def __init__(self):
        self.draws = None
        self.total_weight = 0
        self.cache = SurvivalTable()

    def _ensure_draws(self):
        if self.draws is None:
            self.draws = next_draws()
            self.total_weight = sum(draw_weight(d) for d in self.draws)

    def reset(self):
        """Forget memoised boards; they only pay off within one search."""
        self.cache.reset()

    def survivability(self, board):
        """Weighted share of next draws that fit completely, rounded to 3 places."""
        self._ensure_draws()
        key = board.key()
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        placeable = 0
        for draw in self.draws:
            if can_place_all(board, draw):
                placeable += draw_weight(draw)

        ratio = round(placeable / self.total_weight, 3)
        self.cache.put(key, ratio)
        return ratio
