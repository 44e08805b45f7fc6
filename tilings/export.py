"""
Text exporters for tiling meshes: Wavefront OBJ and ASCII PLY.

Both formats keep the polygons whole (no triangulation) and put every vertex
on the z = 0 plane. OBJ vertex indices are 1-based, PLY ones 0-based.
Coordinates are written in the shortest form that reads back to the same
float32 value.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List, Sequence

import numpy as np

if TYPE_CHECKING:
    from .tiling import Tiling

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    return np.format_float_positional(np.float32(value), trim="-")


def _ordered(face: Sequence[int], reverse_face_winding: bool) -> Sequence[int]:
    return face[::-1] if reverse_face_winding else face


def obj_lines(tiling: "Tiling", reverse_face_winding: bool = False) -> Iterator[str]:
    yield f"o {tiling.name}-tiling"
    for x, y in tiling.points:
        yield f"v {format_coordinate(x)} {format_coordinate(y)} 0"
    for face in tiling.faces:
        yield "f " + " ".join(str(k + 1) for k in _ordered(face, reverse_face_winding))


def to_obj(tiling: "Tiling", reverse_face_winding: bool = False) -> str:
    return "".join(line + "\n" for line in obj_lines(tiling, reverse_face_winding))


def save_obj(path: str, tiling: "Tiling", reverse_face_winding: bool = False) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in obj_lines(tiling, reverse_face_winding):
            f.write(line + "\n")
    logger.info("Wrote %s: %d vertices, %d faces", path, len(tiling.points), len(tiling.faces))


def ply_header(tiling: "Tiling") -> List[str]:
    return [
        "ply",
        "format ascii 1.0",
        f"comment {tiling.name}-tiling",
        f"element vertex {len(tiling.points)}",
        "property float x",
        "property float y",
        "property float z",
        f"element face {len(tiling.faces)}",
        "property list uchar int vertex_indices",
        "end_header",
    ]


def save_ply(path: str, tiling: "Tiling", reverse_face_winding: bool = False) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in ply_header(tiling):
            f.write(line + "\n")
        for x, y in tiling.points:
            f.write(f"{format_coordinate(x)} {format_coordinate(y)} 0\n")
        for face in tiling.faces:
            keys = " ".join(str(k) for k in _ordered(face, reverse_face_winding))
            f.write(f"{len(face)} {keys}\n")
    logger.info("Wrote %s: %d vertices, %d faces", path, len(tiling.points), len(tiling.faces))
