"""
Block Blast Piece Definitions.

This module defines the 13 shape templates and 8 colors of the game.
Each shape is an immutable binary matrix; a piece pairs a shape with a color
and a unique id so that identical-looking pieces remain distinguishable.
"""
from dataclasses import dataclass
from itertools import count
from typing import Any, Dict, List, Optional, Sequence, Tuple
import numpy as np


@dataclass(frozen=True)
class Shape:
    """Represents a shape template."""
    name: str
    cells: Tuple[Tuple[int, ...], ...]  # Binary matrix, rows x cols
    blocks: Tuple[Tuple[int, int], ...]  # (row, col) offsets of the 1-cells

    @property
    def num_blocks(self) -> int:
        """Return the number of blocks in this shape."""
        return len(self.blocks)

    @property
    def width(self) -> int:
        """Return the width of the shape matrix."""
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        """Return the height of the shape matrix."""
        return len(self.cells)

    def get_shape_array(self) -> np.ndarray:
        """Get the shape matrix as a numpy array."""
        return np.array(self.cells, dtype=np.int8)

    def __repr__(self) -> str:
        return f"Shape({self.name}, {self.num_blocks} blocks)"


@dataclass(frozen=True)
class Piece:
    """A colored shape waiting in (or taken from) the queue."""
    shape: Shape
    color_id: str
    id: int

    @property
    def name(self) -> str:
        return self.shape.name

    @property
    def blocks(self) -> Tuple[Tuple[int, int], ...]:
        return self.shape.blocks

    @property
    def num_blocks(self) -> int:
        return self.shape.num_blocks

    @property
    def width(self) -> int:
        return self.shape.width

    @property
    def height(self) -> int:
        return self.shape.height

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "shape": self.shape.name, "color": self.color_id}

    def __repr__(self) -> str:
        return f"Piece(#{self.id} {self.shape.name}, {self.color_id})"


def _make_shape(name: str, rows: List[List[int]]) -> Shape:
    """Helper to create a Shape from its binary matrix."""
    cells = tuple(tuple(int(v) for v in row) for row in rows)
    blocks = tuple(
        (r, c)
        for r, row in enumerate(cells)
        for c, value in enumerate(row)
        if value == 1
    )
    return Shape(name, cells, blocks)


# =============================================================================
# SHAPE TEMPLATES
# =============================================================================

SINGLE = _make_shape("SINGLE", [[1]])  # □

# -----------------------------------------------------------------------------
# Lines
# -----------------------------------------------------------------------------
LINE2_H = _make_shape("LINE2_H", [[1, 1]])  # □□
LINE3_H = _make_shape("LINE3_H", [[1, 1, 1]])  # □□□
LINE2_V = _make_shape("LINE2_V", [[1], [1]])
LINE3_V = _make_shape("LINE3_V", [[1], [1], [1]])

# -----------------------------------------------------------------------------
# L corners
# -----------------------------------------------------------------------------
L_TOP_LEFT = _make_shape("L_TOP_LEFT", [
    [1, 1],
    [1, 0],
])
L_BOTTOM_LEFT = _make_shape("L_BOTTOM_LEFT", [
    [1, 0],
    [1, 1],
])
L_TOP_RIGHT = _make_shape("L_TOP_RIGHT", [
    [1, 1],
    [0, 1],
])
L_BOTTOM_RIGHT = _make_shape("L_BOTTOM_RIGHT", [
    [0, 1],
    [1, 1],
])

# -----------------------------------------------------------------------------
# Square, T, S/Z
# -----------------------------------------------------------------------------
SQUARE = _make_shape("SQUARE", [
    [1, 1],
    [1, 1],
])
T_DOWN = _make_shape("T_DOWN", [
    [1, 1, 1],
    [0, 1, 0],
])
Z = _make_shape("Z", [
    [1, 1, 0],
    [0, 1, 1],
])
S = _make_shape("S", [
    [0, 1, 1],
    [1, 1, 0],
])


# =============================================================================
# CATALOGS AND HELPER FUNCTIONS
# =============================================================================

SHAPES: Dict[str, Shape] = {
    shape.name: shape
    for shape in (
        SINGLE,
        LINE2_H, LINE3_H, LINE2_V, LINE3_V,
        L_TOP_LEFT, L_BOTTOM_LEFT, L_TOP_RIGHT, L_BOTTOM_RIGHT,
        SQUARE,
        T_DOWN,
        Z, S,
    )
}

SHAPE_LIST: List[Shape] = list(SHAPES.values())
NUM_SHAPES: int = len(SHAPES)

assert NUM_SHAPES == 13, f"Expected 13 shapes, got {NUM_SHAPES}"

COLORS: Tuple[str, ...] = (
    "red", "blue", "green", "yellow", "purple", "pink", "indigo", "orange",
)
NUM_COLORS: int = len(COLORS)

_piece_ids = count(1)


def get_shape_by_name(name: str) -> Shape:
    """Get a shape by its name."""
    if name not in SHAPES:
        raise ValueError(f"Unknown shape: {name}. Valid shapes: {list(SHAPES.keys())}")
    return SHAPES[name]


def get_all_shapes() -> List[Shape]:
    """Get a list of all shapes."""
    return SHAPE_LIST.copy()


def color_code(color_id: str) -> int:
    """Map a color id to its 1-based grid code (0 means empty)."""
    try:
        return COLORS.index(color_id) + 1
    except ValueError:
        raise ValueError(f"Unknown color: {color_id}. Valid colors: {list(COLORS)}") from None


def color_from_code(code: int) -> Optional[str]:
    """Inverse of color_code; 0 maps to None."""
    if code == 0:
        return None
    return COLORS[code - 1]


def make_piece(shape: Shape, color_id: str) -> Piece:
    """Create a piece with a fresh unique id."""
    color_code(color_id)
    return Piece(shape, color_id, next(_piece_ids))


def generate_pieces(n: int = 3, rng: Optional[np.random.Generator] = None) -> List[Piece]:
    """
    Generate n random pieces (default 3 as per game rules).

    Shape and color are drawn uniformly and independently per piece;
    repeats are allowed.
    """
    if rng is None:
        rng = np.random.default_rng()
    shape_indices = rng.integers(NUM_SHAPES, size=n)
    color_indices = rng.integers(NUM_COLORS, size=n)
    return [
        make_piece(SHAPE_LIST[s], COLORS[c])
        for s, c in zip(shape_indices, color_indices)
    ]


def visualize_shape(shape: Shape, glyph: str = "□") -> str:
    """Create a string visualization of a shape."""
    lines = []
    for row in shape.cells:
        lines.append("".join(glyph if cell else " " for cell in row).rstrip())
    return "\n".join(lines)


def find_piece(pieces: Sequence[Piece], piece_id: int) -> Optional[Piece]:
    """Find a piece by id."""
    for piece in pieces:
        if piece.id == piece_id:
            return piece
    return None


if __name__ == "__main__":
    print(f"Total shapes: {NUM_SHAPES}")
    print("-" * 40)
    for name, shape in SHAPES.items():
        print(f"\n{name} ({shape.num_blocks} blocks, {shape.width}x{shape.height}):")
        print(visualize_shape(shape))
