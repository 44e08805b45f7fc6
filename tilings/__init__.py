"""
tilings: planar meshes of the regular and semi-regular tilings of the plane.

Each generator takes a row and column count and returns a ``Tiling`` with a
``name``, a float32 ``points`` array and a tuple of counter-clockwise
``faces`` indexing into it:

    from tilings import RegularTiling, SemiRegularTiling
    RegularTiling.hexagon(20, 20).save_obj("hexagon.obj")
    SemiRegularTiling.eight(40, 40).to_obj(reverse_face_winding=True)
"""
from .tiling import (
    MAX_VERTEX_KEY,
    TILINGS,
    RegularTiling,
    SemiRegularTiling,
    Tiling,
    generate,
)
from .export import save_obj, save_ply, to_obj

__all__ = [
    "MAX_VERTEX_KEY",
    "TILINGS",
    "RegularTiling",
    "SemiRegularTiling",
    "Tiling",
    "generate",
    "save_obj",
    "save_ply",
    "to_obj",
]

__version__ = "0.1.0"
