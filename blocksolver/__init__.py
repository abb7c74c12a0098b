from .board import Board, placement_code, parse_placement
from .shapes import Orientation, Shape, ShapeType
from .paths import Candidate, GamePath
from .search import MoveEnumerator, PathPolicy
from .policy import FullEvalPolicy
from .player import FullEvalPlayer
