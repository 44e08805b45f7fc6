"""
Lattice builders for the regular and semi-regular tilings.

Every tiling enumerates its vertices on a rows x cols index grid. The vertex
at logical cell (x, y) is stored at flat key ``x + y * cols`` (y slowest), and
its position is a closed-form function of (x, y) alone, so a larger patch
reproduces the exact coordinates of a smaller one.

The semi-regular lattices detect 2x2 or 4x4 super-cells with right shifts of
x and y, then add the fixed offset for the sub-cell they land in. The offsets
are tabulated below as small numpy arrays indexed by ``x % 4`` or ``y % 4``.
"""
from __future__ import annotations

import math
from typing import Callable, Tuple

import numpy as np

SQRT_2 = math.sqrt(2.0)
SQRT_3 = math.sqrt(3.0)

Coords = Tuple[np.ndarray, np.ndarray]
LatticeTransform = Callable[[np.ndarray, np.ndarray], Coords]

# Points are computed in float64 and stored in float32.
POINT_DTYPE = np.float32


def lattice_indices(rows: int, cols: int) -> Tuple[np.ndarray, np.ndarray]:
    """Flat (x, y) index arrays in vertex-key order."""
    y, x = np.indices((rows, cols), dtype=np.int64)
    return x.ravel(), y.ravel()


def build_points(transform: LatticeTransform, rows: int, cols: int) -> np.ndarray:
    x, y = lattice_indices(rows, cols)
    px, py = transform(x, y)
    points = np.empty((rows * cols, 2), dtype=POINT_DTYPE)
    points[:, 0] = px
    points[:, 1] = py
    return points


# -----------------
# Regular lattices
# -----------------

def triangle_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    # 60 degree rhombic cell
    return x + 0.5 * y, y * SQRT_3 * 0.5


def square_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    return x.astype(np.float64), y.astype(np.float64)


def hexagon_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    odd_row = y % 2
    px = ((x + odd_row) // 2) * 3.0 + (x + y) % 2 - odd_row * 1.5
    return px, y * SQRT_3 * 0.5


# ----------------------
# Semi-regular lattices
# ----------------------

# Sub-cell offsets, indexed by y % 4 (rows) or x % 4 (columns).
_TRUNCATED_HEXAGON_ROWS = np.array([
    [0.0, 0.0],
    [0.5, SQRT_3 * 0.5],
    [0.5, 1.0 + SQRT_3 * 0.5],
    [0.0, 1.0 + SQRT_3],
])

_HEXAGONAL_RING_ROWS = np.array([
    [SQRT_3 * 0.5, -0.5],
    [0.0, 0.0],
    [0.0, 1.0],
    [SQRT_3 * 0.5, 1.5],
])

_TRUNCATED_TRIHEXAGON_COLUMNS = np.array([
    0.0,
    SQRT_3,
    1.0 + SQRT_3,
    1.0 + 2.0 * SQRT_3,
])


def snub_hexagonal_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.3.3.3.6 sits on the plain triangle lattice."""
    return triangle_lattice(x, y)


def truncated_square_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """4.8.8: 2x2 super-cells, octagon edges at 45 degrees."""
    step = 1.0 + SQRT_2 * 0.5
    px = (x >> 1) * (2.0 + SQRT_2) + x % 2 + (y >> 1) * step
    py = (y >> 1) * step + y % 2
    return px, py


def elongated_triangular_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.3.3.4.4: square rows alternating with triangle rows."""
    px = x + 0.5 * (y >> 1)
    py = (y >> 1) * (1.0 + SQRT_3 * 0.5) + y % 2
    return px, py


def trihexagonal_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.6.3.6 also sits on the triangle lattice; only the faces differ."""
    return triangle_lattice(x, y)


def snub_square_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.3.4.3.4: 2x2 super-cells sheared by half a unit in each direction."""
    step = 1.0 + SQRT_3 * 0.5
    px = (x >> 1) * step + x % 2 - (y >> 1) * 0.5
    py = (y >> 1) * step + y % 2 + (x >> 1) * 0.5
    return px, py


def truncated_hexagonal_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.12.12: 2 columns x 4 rows per super-cell."""
    shift = _TRUNCATED_HEXAGON_ROWS[y % 4]
    px = (x >> 1) * (2.0 + SQRT_3) + x % 2 + (y >> 2) * (1.0 + SQRT_3 * 0.5)
    py = (y >> 2) * (1.5 + SQRT_3)
    return px + shift[:, 0], py + shift[:, 1]


def rhombitrihexagonal_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """3.4.6.4: 2 columns x 4 rows per super-cell."""
    shift = _HEXAGONAL_RING_ROWS[y % 4]
    px = (x >> 1) * (1.0 + SQRT_3) + (x % 2) * SQRT_3 + (y >> 2) * (0.5 + SQRT_3 * 0.5)
    py = (y >> 2) * (1.5 + SQRT_3 * 0.5)
    return px + shift[:, 0], py + shift[:, 1]


def truncated_trihexagonal_lattice(x: np.ndarray, y: np.ndarray) -> Coords:
    """4.6.12: 4x4 super-cells, rows shifted like 3.4.6.4."""
    shift = _HEXAGONAL_RING_ROWS[y % 4]
    px = (x >> 2) * (3.0 + 3.0 * SQRT_3) + (y >> 2) * (1.5 + 1.5 * SQRT_3)
    py = (y >> 2) * (1.5 + SQRT_3 * 0.5)
    px = px + shift[:, 0] + _TRUNCATED_TRIHEXAGON_COLUMNS[x % 4]
    return px, py + shift[:, 1]
