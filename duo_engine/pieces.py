"""
Blokus Duo block catalog: the 21 polyominoes and their 8 orientation variants.

Block ids follow the record notation, where the letter of block ``i`` is
``chr(117 - i)``: block 0 is ``u`` (the X pentomino) and block 20 is ``a``
(the monomino).

A direction packs a rotation and a reflection as ``2 * r + f``: the base
shape is turned ``r`` quarter turns clockwise (x grows to the right, y grows
downward) and then mirrored horizontally when ``f`` is 1.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

import numpy as np

from .exceptions import CatalogError

logger = logging.getLogger(__name__)

NUM_BLOCKS = 21
NUM_DIRECTIONS = 8

_ROTATE_CW = np.array([[0, -1], [1, 0]])
_MIRROR = np.array([[-1, 0], [0, 1]])


@dataclass(frozen=True, eq=False)
class Piece:
    """A base polyomino shape."""
    block_id: int
    letter: str
    name: str
    shape: np.ndarray  # 2D array, rows are y and columns are x
    size: int

    def __post_init__(self):
        """Validate piece after initialization."""
        if self.shape.ndim != 2:
            raise CatalogError("Piece shape must be 2D")
        if int(np.sum(self.shape)) != self.size:
            raise CatalogError(f"Piece {self.letter} shape sum must equal size")


@dataclass(frozen=True)
class BlockVariant:
    """
    One orientation of a block.

    ``coords`` are relative to the shape's pivot cell, so they can be
    negative. ``offset_x``/``offset_y`` translate a move anchor (the top-left
    corner of the footprint's bounding box) back to the pivot.
    """
    block_id: int
    direction: int
    coords: Tuple[Tuple[int, int], ...]
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    offset_x: int
    offset_y: int

    @property
    def size(self) -> int:
        return len(self.coords)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def cells_at(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Absolute cells covered when anchored at (x, y)."""
        px = x + self.offset_x
        py = y + self.offset_y
        return [(px + cx, py + cy) for cx, cy in self.coords]

    def normalized(self) -> FrozenSet[Tuple[int, int]]:
        """Cells shifted so the bounding box starts at (0, 0)."""
        return frozenset((cx - self.min_x, cy - self.min_y) for cx, cy in self.coords)


def shape_to_coords(shape: np.ndarray) -> np.ndarray:
    """
    Convert a shape array to pivot-relative (x, y) coordinates.

    The pivot is the occupied cell closest to the centre of the bounding box,
    first in row-major order on ties.
    """
    ys, xs = np.nonzero(shape)
    coords = np.stack([xs, ys], axis=1)
    height, width = shape.shape
    centre = np.array([(width - 1) / 2.0, (height - 1) / 2.0])
    distances = np.sum((coords - centre) ** 2, axis=1)
    pivot = coords[int(np.argmin(distances))]
    return coords - pivot


def transform_coords(coords: np.ndarray, direction: int) -> np.ndarray:
    """Rotate ``direction >> 1`` quarter turns clockwise, then mirror if the low bit is set."""
    result = coords
    for _ in range(direction >> 1):
        result = result @ _ROTATE_CW.T
    if direction & 1:
        result = result @ _MIRROR.T
    return result


def build_variant(piece: Piece, direction: int) -> BlockVariant:
    """Build the orientation variant of ``piece`` for ``direction``."""
    transformed = transform_coords(shape_to_coords(piece.shape), direction)
    order = np.lexsort((transformed[:, 0], transformed[:, 1]))
    coords = tuple((int(x), int(y)) for x, y in transformed[order])
    xs = [x for x, _ in coords]
    ys = [y for _, y in coords]
    return BlockVariant(
        block_id=piece.block_id,
        direction=direction,
        coords=coords,
        min_x=min(xs),
        max_x=max(xs),
        min_y=min(ys),
        max_y=max(ys),
        offset_x=-min(xs),
        offset_y=-min(ys),
    )


def flip(direction: int) -> int:
    """Direction after mirroring the piece horizontally."""
    return _check_direction(direction) ^ 1


def rotate_right(direction: int) -> int:
    """Direction after turning the piece a quarter turn clockwise."""
    _check_direction(direction)
    return (direction + (6 if direction & 1 else 2)) & 7


def rotate_left(direction: int) -> int:
    """Direction after turning the piece a quarter turn counter-clockwise."""
    _check_direction(direction)
    return (direction + (2 if direction & 1 else 6)) & 7


def _check_direction(direction: int) -> int:
    if not 0 <= direction < NUM_DIRECTIONS:
        raise CatalogError(f"direction {direction} out of range [0, {NUM_DIRECTIONS})")
    return direction


def _is_connected(cells: Iterable[Tuple[int, int]]) -> bool:
    cells = set(cells)
    if not cells:
        return False
    start = next(iter(cells))
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            neighbour = (x + dx, y + dy)
            if neighbour in cells and neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return seen == cells


class PieceGenerator:
    """Generates the 21 base shapes of the catalog."""

    # (letter, name, shape) in block id order; block i has letter chr(117 - i)
    SHAPES = [
        ("u", "Pentomino X", [[0, 1, 0], [1, 1, 1], [0, 1, 0]]),
        ("t", "Pentomino F", [[0, 1, 1], [1, 1, 0], [0, 1, 0]]),
        ("s", "Pentomino P", [[1, 1], [1, 1], [1, 0]]),
        ("r", "Pentomino W", [[1, 0, 0], [1, 1, 0], [0, 1, 1]]),
        ("q", "Pentomino Z", [[1, 1, 0], [0, 1, 0], [0, 1, 1]]),
        ("p", "Pentomino T", [[1, 1, 1], [0, 1, 0], [0, 1, 0]]),
        ("o", "Pentomino U", [[1, 0, 1], [1, 1, 1]]),
        ("n", "Pentomino V", [[1, 0, 0], [1, 0, 0], [1, 1, 1]]),
        ("m", "Pentomino N", [[1, 0], [1, 1], [0, 1], [0, 1]]),
        ("l", "Pentomino Y", [[1, 0], [1, 1], [1, 0], [1, 0]]),
        ("k", "Pentomino L", [[1, 0], [1, 0], [1, 0], [1, 1]]),
        ("j", "Pentomino I", [[1, 1, 1, 1, 1]]),
        ("i", "Tetromino Z", [[1, 1, 0], [0, 1, 1]]),
        ("h", "Tetromino O", [[1, 1], [1, 1]]),
        ("g", "Tetromino T", [[1, 1, 1], [0, 1, 0]]),
        ("f", "Tetromino L", [[1, 0], [1, 0], [1, 1]]),
        ("e", "Tetromino I", [[1, 1, 1, 1]]),
        ("d", "Tromino V", [[1, 0], [1, 1]]),
        ("c", "Tromino I", [[1, 1, 1]]),
        ("b", "Domino", [[1, 1]]),
        ("a", "Monomino", [[1]]),
    ]

    @staticmethod
    def get_all_pieces() -> List[Piece]:
        """Get all 21 pieces."""
        pieces = []
        for block_id, (letter, name, rows) in enumerate(PieceGenerator.SHAPES):
            shape = np.array(rows, dtype=np.int8)
            pieces.append(Piece(block_id, letter, name, shape, int(np.sum(shape))))
        return pieces


class BlockCatalog:
    """
    Immutable table of blocks and their orientation variants.

    Validated on construction; lookups fail with ``CatalogError`` on ids
    outside the table.
    """

    def __init__(self, pieces: Sequence[Piece]):
        self._pieces = tuple(pieces)
        self._variants = tuple(
            tuple(build_variant(piece, direction) for direction in range(NUM_DIRECTIONS))
            for piece in self._pieces
        )
        self._unique_directions = tuple(
            self._collapse_duplicates(variants) for variants in self._variants
        )
        self._by_letter: Dict[str, int] = {piece.letter: piece.block_id for piece in self._pieces}
        self._validate()
        logger.debug(
            "Block catalog loaded: %d blocks, %d distinct orientations",
            len(self._pieces), sum(len(d) for d in self._unique_directions),
        )

    def __len__(self) -> int:
        return len(self._pieces)

    def piece(self, block_id: int) -> Piece:
        return self._pieces[self._check_block(block_id)]

    def size(self, block_id: int) -> int:
        return self.piece(block_id).size

    def variant(self, block_id: int, direction: int) -> BlockVariant:
        """Orientation variant for (block_id, direction)."""
        return self._variants[self._check_block(block_id)][_check_direction(direction)]

    def variants(self, block_id: int) -> Tuple[BlockVariant, ...]:
        return self._variants[self._check_block(block_id)]

    def unique_directions(self, block_id: int) -> Tuple[int, ...]:
        """Directions whose footprint differs from every lower direction of the block."""
        return self._unique_directions[self._check_block(block_id)]

    def block_id_for_letter(self, letter: str) -> int:
        try:
            return self._by_letter[letter]
        except KeyError:
            raise CatalogError(f"no block with letter {letter!r}") from None

    def placement_count(self, board_size: int) -> int:
        """Number of distinct in-bounds placements on an empty square board."""
        total = 0
        for block_id in range(len(self)):
            for direction in self.unique_directions(block_id):
                variant = self.variant(block_id, direction)
                total += max(0, board_size - variant.width + 1) * max(0, board_size - variant.height + 1)
        return total

    def _check_block(self, block_id: int) -> int:
        if not 0 <= block_id < len(self._pieces):
            raise CatalogError(f"block id {block_id} out of range [0, {len(self._pieces)})")
        return block_id

    @staticmethod
    def _collapse_duplicates(variants: Sequence[BlockVariant]) -> Tuple[int, ...]:
        seen = set()
        unique = []
        for variant in variants:
            key = variant.normalized()
            if key in seen:
                continue
            seen.add(key)
            unique.append(variant.direction)
        return tuple(unique)

    def _validate(self) -> None:
        if len(self._pieces) != NUM_BLOCKS:
            raise CatalogError(f"catalog must hold {NUM_BLOCKS} blocks, got {len(self._pieces)}")
        canonical_forms = set()
        for block_id, piece in enumerate(self._pieces):
            if piece.block_id != block_id:
                raise CatalogError(f"piece {piece.letter} stored at index {block_id} has id {piece.block_id}")
            if piece.letter != chr(117 - block_id):
                raise CatalogError(f"block {block_id} must use letter {chr(117 - block_id)!r}")
            variants = self._variants[block_id]
            if len(variants) != NUM_DIRECTIONS:
                raise CatalogError(f"block {block_id} needs {NUM_DIRECTIONS} variants")
            for variant in variants:
                if variant.size != piece.size or len(set(variant.coords)) != piece.size:
                    raise CatalogError(f"block {block_id} direction {variant.direction} has bad cells")
                if not _is_connected(variant.coords):
                    raise CatalogError(f"block {block_id} direction {variant.direction} is not connected")
                if variant.offset_x != -variant.min_x or variant.offset_y != -variant.min_y:
                    raise CatalogError(f"block {block_id} direction {variant.direction} has a bad anchor")
            canonical = min(tuple(sorted(v.normalized())) for v in variants)
            if canonical in canonical_forms:
                raise CatalogError(f"block {block_id} duplicates another shape")
            canonical_forms.add(canonical)


# Global catalog shared by both players
BLOCK_SET = BlockCatalog(PieceGenerator.get_all_pieces())
