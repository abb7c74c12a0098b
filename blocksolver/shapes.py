# shapes.py

from enum import Enum

import numpy as np

BATCH_SIZE = 3


class ShapeType(Enum):
    SINGLER      = "singler"
    THREE_LINER  = "three_liner"
    FOUR_LINER   = "four_liner"
    FIVE_LINER   = "five_liner"
    SMALL_L      = "small_l"
    LARGE_L      = "large_l"
    SMALL_SQUARE = "small_square"
    LARGE_SQUARE = "large_square"
    LONG_TAIL    = "long_tail"
    T_SHAPE      = "t_shape"
    RECTANGLE    = "rectangle"


class Orientation(Enum):
    """N is the base mask; each next letter is one more clockwise quarter turn."""
    N = 0
    E = 1
    S = 2
    W = 3


# base (N) matrices, same 0/1 row format as next_blocks.json
BASE_MATRICES = {
    ShapeType.SINGLER:      [[1]],
    ShapeType.THREE_LINER:  [[1], [1], [1]],
    ShapeType.FOUR_LINER:   [[1], [1], [1], [1]],
    ShapeType.FIVE_LINER:   [[1], [1], [1], [1], [1]],
    ShapeType.SMALL_L:      [[1, 0],
                             [1, 1]],
    ShapeType.LARGE_L:      [[1, 0, 0],
                             [1, 0, 0],
                             [1, 1, 1]],
    ShapeType.SMALL_SQUARE: [[1, 1],
                             [1, 1]],
    ShapeType.LARGE_SQUARE: [[1, 1, 1],
                             [1, 1, 1],
                             [1, 1, 1]],
    ShapeType.LONG_TAIL:    [[1, 0],
                             [1, 0],
                             [1, 1]],
    ShapeType.T_SHAPE:      [[1, 1, 1],
                             [0, 1, 0]],
    ShapeType.RECTANGLE:    [[1, 1, 1],
                             [1, 1, 1]],
}


def trim_matrix(mask):
    """Drop empty border rows/columns so the mask starts at its top-left cell."""
    rows = np.flatnonzero(mask.any(axis=1))
    cols = np.flatnonzero(mask.any(axis=0))
    if len(rows) == 0:
        raise ValueError("shape matrix has no filled cells")
    return mask[rows[0]:rows[-1]+1, cols[0]:cols[-1]+1]


class Shape:
    """A piece: a type/orientation pair and the bool mask of the cells it covers."""

    def __init__(self, shape_type, orientation=Orientation.N):
        self.shape_type = shape_type
        self.orientation = orientation
        base = np.array(BASE_MATRICES[shape_type], dtype=bool)
        # np.rot90 with negative k turns clockwise
        self.mask = np.ascontiguousarray(np.rot90(base, k=-orientation.value))
        self.size = int(self.mask.sum())

    @classmethod
    def from_matrix(cls, matrix):
        """Untyped shape from a detected 0/1 matrix (e.g. one entry of next_blocks.json)."""
        shape = cls.__new__(cls)
        shape.shape_type = None
        shape.orientation = None
        shape.mask = np.ascontiguousarray(trim_matrix(np.array(matrix, dtype=bool)))
        shape.size = int(shape.mask.sum())
        return shape

    def offsets(self):
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.mask))]

    def __repr__(self):
        if self.shape_type is None:
            return f"Shape({self.mask.astype(int).tolist()})"
        return f"Shape({self.shape_type.name}, {self.orientation.name})"


def all_shapes():
    """Every (type, orientation) pair, in enum order."""
    return [Shape(t, o) for t in ShapeType for o in Orientation]

def random_batch(rng, size=BATCH_SIZE):
    """Draw a batch {0: Shape, 1: Shape, ...} uniformly over type and orientation."""
    return {i: Shape(rng.choice(list(ShapeType)), rng.choice(list(Orientation)))
            for i in range(size)}
