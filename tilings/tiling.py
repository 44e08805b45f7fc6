"""
Mesh records for the eleven uniform tilings of the plane.

A regular tiling uses a single regular polygon with unit edges; a
semi-regular (Archimedean) tiling mixes two or three of them while keeping
every vertex identical up to rotation. Each generator takes a row and column
count and returns a fresh, immutable ``Tiling``:

    >>> t = RegularTiling.square(3, 3)
    >>> t.faces[0]
    (0, 1, 4, 3)
    >>> len(SemiRegularTiling.seven(100, 100).points)
    10000
"""
from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from . import faces as face_tables
from . import lattice
from .analysis import bounds, polygon_census
from .export import save_obj, save_ply, to_obj
from .faces import Face, FacePass, assemble_faces
from .lattice import LatticeTransform, build_points

logger = logging.getLogger(__name__)

VertexKey = np.uint32
MAX_VERTEX_KEY = int(np.iinfo(VertexKey).max)


def check_dimensions(rows: int, cols: int) -> Tuple[int, int]:
    rows = operator.index(rows)
    cols = operator.index(cols)
    if rows < 0 or cols < 0:
        raise ValueError(f"rows and cols must be non-negative, got {rows} x {cols}")
    if rows * cols > MAX_VERTEX_KEY:
        raise OverflowError(
            f"{rows} x {cols} lattice has {rows * cols} vertices, "
            f"more than a {np.dtype(VertexKey).name} vertex key can address ({MAX_VERTEX_KEY})"
        )
    return rows, cols


@dataclass(frozen=True)
class Pattern:
    """A lattice paired with the face rules laid over it."""
    name: str
    lattice: LatticeTransform
    faces: Tuple[FacePass, ...]


# --------------
# Mesh record
# --------------

@dataclass(frozen=True, eq=False)
class Tiling:
    name: str
    points: np.ndarray
    faces: Tuple[Face, ...]

    @classmethod
    def from_pattern(cls, pattern: Pattern, rows: int, cols: int) -> "Tiling":
        rows, cols = check_dimensions(rows, cols)
        points = build_points(pattern.lattice, rows, cols)
        points.setflags(write=False)
        faces = assemble_faces(pattern.faces, rows, cols)
        logger.debug("%s %dx%d: %d points, %d faces",
                     pattern.name, rows, cols, len(points), len(faces))
        return cls(pattern.name, points, faces)

    def polygon_census(self) -> Dict[int, int]:
        return polygon_census(self.faces)

    def bounds(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return bounds(self.points)

    # ---- export ----
    def to_obj(self, reverse_face_winding: bool = False) -> str:
        return to_obj(self, reverse_face_winding)

    def save_obj(self, path: str, reverse_face_winding: bool = False) -> None:
        save_obj(path, self, reverse_face_winding)

    def save_ply(self, path: str, reverse_face_winding: bool = False) -> None:
        save_ply(path, self, reverse_face_winding)


# ------------
# Generators
# ------------

TRIANGLE = Pattern("TRIANGLE", lattice.triangle_lattice, face_tables.TRIANGLE_FACES)
SQUARE = Pattern("SQUARE", lattice.square_lattice, face_tables.SQUARE_FACES)
HEXAGON = Pattern("HEXAGON", lattice.hexagon_lattice, face_tables.HEXAGON_FACES)

SEMI_REGULAR_1 = Pattern("SEMI-REGULAR-1", lattice.snub_hexagonal_lattice,
                         face_tables.SEMI_REGULAR_1_FACES)
SEMI_REGULAR_2 = Pattern("SEMI-REGULAR-2", lattice.truncated_square_lattice,
                         face_tables.SEMI_REGULAR_2_FACES)
SEMI_REGULAR_3 = Pattern("SEMI-REGULAR-3", lattice.elongated_triangular_lattice,
                         face_tables.SEMI_REGULAR_3_FACES)
SEMI_REGULAR_4 = Pattern("SEMI-REGULAR-4", lattice.trihexagonal_lattice,
                         face_tables.SEMI_REGULAR_4_FACES)
SEMI_REGULAR_5 = Pattern("SEMI-REGULAR-5", lattice.snub_square_lattice,
                         face_tables.SEMI_REGULAR_5_FACES)
SEMI_REGULAR_6 = Pattern("SEMI-REGULAR-6", lattice.truncated_hexagonal_lattice,
                         face_tables.SEMI_REGULAR_6_FACES)
SEMI_REGULAR_7 = Pattern("SEMI-REGULAR-7", lattice.rhombitrihexagonal_lattice,
                         face_tables.SEMI_REGULAR_7_FACES)
SEMI_REGULAR_8 = Pattern("SEMI-REGULAR-8", lattice.truncated_trihexagonal_lattice,
                         face_tables.SEMI_REGULAR_8_FACES)


class RegularTiling(Tiling):
    """Tilings by a single regular polygon."""

    @classmethod
    def triangle(cls, rows: int, cols: int) -> "RegularTiling":
        return cls.from_pattern(TRIANGLE, rows, cols)

    @classmethod
    def square(cls, rows: int, cols: int) -> "RegularTiling":
        return cls.from_pattern(SQUARE, rows, cols)

    @classmethod
    def hexagon(cls, rows: int, cols: int) -> "RegularTiling":
        return cls.from_pattern(HEXAGON, rows, cols)


class SemiRegularTiling(Tiling):
    """The eight Archimedean tilings, numbered as on Wikipedia's
    'Euclidean tilings by convex regular polygons' page."""

    @classmethod
    def one(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Snub hexagonal, 3.3.3.3.6."""
        return cls.from_pattern(SEMI_REGULAR_1, rows, cols)

    @classmethod
    def two(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Truncated square, 4.8.8."""
        return cls.from_pattern(SEMI_REGULAR_2, rows, cols)

    @classmethod
    def three(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Elongated triangular, 3.3.3.4.4."""
        return cls.from_pattern(SEMI_REGULAR_3, rows, cols)

    @classmethod
    def four(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Trihexagonal, 3.6.3.6."""
        return cls.from_pattern(SEMI_REGULAR_4, rows, cols)

    @classmethod
    def five(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Snub square, 3.3.4.3.4."""
        return cls.from_pattern(SEMI_REGULAR_5, rows, cols)

    @classmethod
    def six(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Truncated hexagonal, 3.12.12."""
        return cls.from_pattern(SEMI_REGULAR_6, rows, cols)

    @classmethod
    def seven(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Rhombitrihexagonal, 3.4.6.4."""
        return cls.from_pattern(SEMI_REGULAR_7, rows, cols)

    @classmethod
    def eight(cls, rows: int, cols: int) -> "SemiRegularTiling":
        """Truncated trihexagonal, 4.6.12."""
        return cls.from_pattern(SEMI_REGULAR_8, rows, cols)


Generator = Callable[[int, int], Tiling]

TILINGS: Dict[str, Generator] = {
    TRIANGLE.name: RegularTiling.triangle,
    SQUARE.name: RegularTiling.square,
    HEXAGON.name: RegularTiling.hexagon,
    SEMI_REGULAR_1.name: SemiRegularTiling.one,
    SEMI_REGULAR_2.name: SemiRegularTiling.two,
    SEMI_REGULAR_3.name: SemiRegularTiling.three,
    SEMI_REGULAR_4.name: SemiRegularTiling.four,
    SEMI_REGULAR_5.name: SemiRegularTiling.five,
    SEMI_REGULAR_6.name: SemiRegularTiling.six,
    SEMI_REGULAR_7.name: SemiRegularTiling.seven,
    SEMI_REGULAR_8.name: SemiRegularTiling.eight,
}


def generate(name: str, rows: int, cols: int) -> Tiling:
    """Look up a generator by tiling name (case-insensitive) and run it."""
    try:
        generator = TILINGS[name.upper()]
    except KeyError:
        raise KeyError(f"unknown tiling {name!r}; choose from {', '.join(TILINGS)}") from None
    return generator(rows, cols)
