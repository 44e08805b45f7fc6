"""
Face assembly for the regular and semi-regular tilings.

A tiling's faces are described by literal rule tables. Each ``FaceRule`` pairs
a discriminator over the lattice cell (x, y), built from ``x % k`` and
``y % m`` (or ``(x + 3y) % 7`` for the snub hexagonal tiling), with the
polygon it emits there, given as (dx, dy) offsets from the cell. Offsets are
listed counter-clockwise.

The tables are the combinatorial structure of each tiling and are not derived
from the geometry. Rule order within a table fixes the order faces are
emitted in; it does not matter for coverage.

Faces are only emitted from an interior range of cells, chosen so that every
offset of every rule in the pass lands inside the rows x cols grid. Cells near
the border of the patch are simply left without faces.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

Offset = Tuple[int, int]
Face = Tuple[int, ...]
Discriminator = Callable[[int, int], bool]


@dataclass(frozen=True)
class FaceRule:
    when: Discriminator
    offsets: Tuple[Offset, ...]

    def face_at(self, x: int, y: int, cols: int) -> Face:
        return tuple((x + dx) + (y + dy) * cols for dx, dy in self.offsets)


FacePass = Tuple[FaceRule, ...]


def always(x: int, y: int) -> bool:
    return True


def cell(x_mod: int, x_rem: int, y_mod: int, y_rem: int) -> Discriminator:
    """Accept cells with ``x % x_mod == x_rem`` and ``y % y_mod == y_rem``."""
    def when(x: int, y: int) -> bool:
        return x % x_mod == x_rem and y % y_mod == y_rem
    return when


def rule(when: Discriminator, *offsets: Offset) -> FaceRule:
    return FaceRule(when, tuple(offsets))


# -----------------
# Interior ranges
# -----------------

def interior_range(rules: Sequence[FaceRule], rows: int, cols: int) -> Tuple[range, range]:
    """Cells of a rows x cols grid whose every rule offset stays on the grid.

    Returns ``(x_range, y_range)``. Either range is empty when the grid is
    narrower than the pass's reach.
    """
    dxs = [dx for r in rules for dx, _ in r.offsets]
    dys = [dy for r in rules for _, dy in r.offsets]
    x_range = range(max(0, -min(dxs)), cols - max(0, max(dxs)))
    y_range = range(max(0, -min(dys)), rows - max(0, max(dys)))
    return x_range, y_range


def assemble_faces(passes: Sequence[FacePass], rows: int, cols: int) -> Tuple[Face, ...]:
    faces: List[Face] = []
    for rules in passes:
        x_range, y_range = interior_range(rules, rows, cols)
        for y in y_range:
            for x in x_range:
                for r in rules:
                    if r.when(x, y):
                        faces.append(r.face_at(x, y, cols))
    return tuple(faces)


# ------------------------
# Regular tiling tables
# ------------------------

TRIANGLE_FACES: Tuple[FacePass, ...] = ((
    rule(always, (0, 0), (1, 0), (0, 1)),
    rule(always, (1, 0), (1, 1), (0, 1)),
),)

SQUARE_FACES: Tuple[FacePass, ...] = ((
    rule(always, (0, 0), (1, 0), (1, 1), (0, 1)),
),)

HEXAGON_FACES: Tuple[FacePass, ...] = ((
    rule(lambda x, y: (x + y) % 2 == 0,
         (0, 0), (1, 0), (1, 1), (1, 2), (0, 2), (0, 1)),
),)


# -----------------------------
# Semi-regular tiling tables
# -----------------------------

def _snub_hexagonal(*residues: int) -> Discriminator:
    # one triangle-lattice cell in seven is the centre of a hexagon
    def when(x: int, y: int) -> bool:
        return (x + 3 * y) % 7 in residues
    return when


# 3.3.3.3.6
SEMI_REGULAR_1_FACES: Tuple[FacePass, ...] = ((
    rule(_snub_hexagonal(0, 2, 5, 6), (0, 0), (1, 0), (0, 1)),
    rule(_snub_hexagonal(2, 4, 5, 6), (1, 0), (1, 1), (0, 1)),
    rule(_snub_hexagonal(4),
         (1, 0), (0, 1), (-1, 1), (-1, 0), (0, -1), (1, -1)),
),)

# 4.8.8; the squares get their own pass since they reach less far
SEMI_REGULAR_2_FACES: Tuple[FacePass, ...] = (
    (
        rule(cell(2, 1, 2, 0),
             (0, 0), (1, -1), (2, -1), (1, 0), (1, 1), (0, 2), (-1, 2), (0, 1)),
    ),
    (
        rule(cell(2, 0, 2, 0), (0, 0), (1, 0), (1, 1), (0, 1)),
    ),
)

# 3.3.3.4.4
SEMI_REGULAR_3_FACES: Tuple[FacePass, ...] = ((
    rule(lambda x, y: y % 2 == 0, (0, 0), (1, 0), (1, 1), (0, 1)),
    rule(lambda x, y: y % 2 == 1, (0, 0), (1, 0), (0, 1)),
    rule(lambda x, y: y % 2 == 1, (1, 0), (1, 1), (0, 1)),
),)

# 3.6.3.6
SEMI_REGULAR_4_FACES: Tuple[FacePass, ...] = ((
    rule(cell(2, 0, 2, 0), (0, 0), (1, 0), (0, 1)),
    rule(cell(2, 0, 2, 1), (0, 0), (0, 1), (-1, 1)),
    rule(cell(2, 1, 2, 0), (0, 0), (1, 0), (1, 1), (0, 2), (-1, 2), (-1, 1)),
),)

# 3.3.4.3.4
SEMI_REGULAR_5_FACES: Tuple[FacePass, ...] = ((
    rule(cell(2, 0, 2, 0), (0, 0), (1, 0), (1, 1), (0, 1)),
    rule(cell(2, 0, 2, 0), (0, 0), (0, 1), (-1, 1)),
    rule(cell(2, 1, 2, 0), (0, 0), (1, 0), (0, 1)),
    rule(cell(2, 0, 2, 1), (0, 0), (1, 0), (1, 1)),
    rule(cell(2, 0, 2, 1), (0, 0), (1, 1), (0, 1)),
    rule(cell(2, 1, 2, 1), (0, 0), (1, 0), (1, 1), (0, 1)),
),)

# 3.12.12
SEMI_REGULAR_6_FACES: Tuple[FacePass, ...] = ((
    rule(cell(2, 0, 4, 0),
         (1, 0), (2, -1), (3, -1), (2, 0), (2, 1), (2, 2),
         (2, 3), (1, 4), (0, 4), (1, 3), (0, 2), (0, 1)),
    rule(cell(2, 0, 4, 0), (0, 0), (1, 0), (0, 1)),
    rule(cell(2, 0, 4, 2), (0, 0), (1, 1), (0, 1)),
),)

# 3.4.6.4
SEMI_REGULAR_7_FACES: Tuple[FacePass, ...] = ((
    rule(cell(2, 0, 4, 0), (0, 0), (1, 1), (1, 2), (0, 3), (0, 2), (0, 1)),
    rule(cell(2, 0, 4, 0), (0, 0), (2, -2), (2, -1), (1, 1)),
    rule(cell(2, 0, 4, 0), (1, 1), (2, -1), (2, 1)),
    rule(cell(2, 1, 4, 1), (0, 0), (1, 0), (1, 1), (0, 1)),
    rule(cell(2, 1, 4, 2), (0, 0), (-1, 2), (-1, 3), (-1, 1)),
    rule(cell(2, 0, 4, 2), (-1, 0), (0, 0), (-2, 2)),
),)

# 4.6.12
SEMI_REGULAR_8_FACES: Tuple[FacePass, ...] = ((
    rule(cell(2, 0, 4, 0), (0, 0), (1, 1), (1, 2), (0, 3), (0, 2), (0, 1)),
    rule(cell(4, 1, 4, 1), (0, 0), (1, 0), (1, 1), (0, 1)),
    rule(cell(4, 3, 4, 2), (0, 0), (-3, 2), (-3, 3), (-1, 1)),
    rule(cell(4, 0, 4, 2), (0, 1), (-1, 3), (-2, 2), (0, 0)),
    rule(cell(4, 3, 4, 1),
         (0, 0), (1, -2), (2, -3), (3, -3), (3, -2), (1, 0),
         (1, 1), (-1, 3), (-1, 4), (-2, 4), (-3, 3), (0, 1)),
),)
