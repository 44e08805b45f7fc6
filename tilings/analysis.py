"""Read-only measurements over tiling points and faces."""
from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence, Tuple

import numpy as np


def face_coordinates(points: np.ndarray, face: Sequence[int]) -> np.ndarray:
    """Face corners as a float64 (n, 2) array, in face order."""
    return np.asarray(points, dtype=np.float64)[list(face)]


def signed_area(points: np.ndarray, face: Sequence[int]) -> float:
    """Shoelace area. Counter-clockwise => positive."""
    poly = face_coordinates(points, face)
    x, y = poly[:, 0], poly[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def is_ccw(points: np.ndarray, face: Sequence[int]) -> bool:
    return signed_area(points, face) > 0.0


def edge_lengths(points: np.ndarray, face: Sequence[int]) -> np.ndarray:
    poly = face_coordinates(points, face)
    return np.linalg.norm(np.roll(poly, -1, axis=0) - poly, axis=1)


def regular_polygon_area(sides: int, edge: float = 1.0) -> float:
    return sides * edge * edge / (4.0 * np.tan(np.pi / sides))


def polygon_census(faces: Sequence[Sequence[int]]) -> Dict[int, int]:
    """Number of faces per vertex count, e.g. ``{3: 12, 6: 2}``."""
    return dict(sorted(Counter(len(face) for face in faces).items()))


def bounds(points: np.ndarray) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    if len(points) == 0:
        raise ValueError("bounds of an empty point set")
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    return (float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1]))
