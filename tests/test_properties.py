"""
Properties shared by all eleven tilings:
- point count and flat indexing
- faces stay on the grid and never repeat a vertex
- geometry: counter-clockwise, unit edges, regular polygon areas
- determinism and patch-size independence
- degenerate and oversized dimensions
"""

from collections import Counter

import numpy as np
import pytest

from tilings import MAX_VERTEX_KEY, TILINGS, RegularTiling, SemiRegularTiling, generate
from tilings.analysis import edge_lengths, is_ccw, regular_polygon_area, signed_area
from tilings.tiling import check_dimensions

GENERATORS = list(TILINGS.items())
IDS = list(TILINGS)

SIZES = [(0, 0), (0, 5), (5, 0), (1, 1), (2, 3), (5, 4), (9, 13), (16, 16), (21, 14)]


@pytest.fixture(params=GENERATORS, ids=IDS)
def generator(request):
    return request.param[1]


class TestPointsAndKeys:
    """Point counts and the x + y * cols layout."""

    @pytest.mark.parametrize("rows, cols", SIZES)
    def test_point_count(self, generator, rows, cols):
        tiling = generator(rows, cols)
        assert tiling.points.shape == (rows * cols, 2)

    @pytest.mark.parametrize("rows, cols", SIZES)
    def test_keys_in_bounds(self, generator, rows, cols):
        tiling = generator(rows, cols)
        for face in tiling.faces:
            assert all(0 <= k < rows * cols for k in face)

    @pytest.mark.parametrize("rows, cols", SIZES)
    def test_keys_distinct(self, generator, rows, cols):
        for face in generator(rows, cols).faces:
            assert len(set(face)) == len(face)

    def test_name(self):
        for name, gen in GENERATORS:
            assert gen(3, 3).name == name


class TestGeometry:
    """Every face is a regular polygon with unit edges, wound counter-clockwise."""

    @pytest.mark.parametrize("rows, cols", [(9, 13), (16, 16), (21, 14)])
    def test_counter_clockwise(self, generator, rows, cols):
        tiling = generator(rows, cols)
        assert all(is_ccw(tiling.points, face) for face in tiling.faces)

    @pytest.mark.parametrize("rows, cols", [(9, 13), (16, 16), (21, 14)])
    def test_unit_edges(self, generator, rows, cols):
        tiling = generator(rows, cols)
        for face in tiling.faces:
            assert np.allclose(edge_lengths(tiling.points, face), 1.0, atol=1e-4)

    def test_regular_areas(self, generator):
        tiling = generator(16, 16)
        for face in tiling.faces:
            area = signed_area(tiling.points, face)
            assert area == pytest.approx(regular_polygon_area(len(face)), abs=1e-3)

    def test_no_duplicate_faces(self, generator):
        faces = generator(16, 16).faces
        assert len({frozenset(f) for f in faces}) == len(faces)

    def test_edge_to_edge(self, generator):
        """Each directed edge belongs to at most one face."""
        edges = Counter()
        for face in generator(16, 16).faces:
            for a, b in zip(face, face[1:] + face[:1]):
                edges[(a, b)] += 1
        assert max(edges.values()) == 1

    def test_polygon_sizes(self, generator):
        allowed = {3, 4, 6, 8, 12}
        assert set(generator(16, 16).polygon_census()) <= allowed


class TestDeterminism:
    """Same input, same output; positions independent of patch size."""

    def test_repeat_call(self, generator):
        first = generator(11, 9)
        second = generator(11, 9)
        assert np.array_equal(first.points, second.points)
        assert first.faces == second.faces

    def test_independent_records(self, generator):
        assert generator(4, 4).points is not generator(4, 4).points

    @pytest.mark.parametrize("small, large", [((5, 7), (9, 11)), ((3, 3), (12, 8))])
    def test_patch_size_independent(self, generator, small, large):
        r1, c1 = small
        r2, c2 = large
        a = generator(r1, c1).points
        b = generator(r2, c2).points
        for y in range(r1):
            for x in range(c1):
                assert np.array_equal(a[x + y * c1], b[x + y * c2])


class TestDegenerate:
    """Empty and narrow grids give empty face lists, not errors."""

    @pytest.mark.parametrize("rows, cols", [(0, 0), (0, 10), (10, 0), (1, 10), (10, 1)])
    def test_no_faces(self, generator, rows, cols):
        tiling = generator(rows, cols)
        assert len(tiling.points) == rows * cols
        assert tiling.faces == ()

    def test_below_margin(self):
        """The 4.6.12 rules reach three cells left and four rows up."""
        tiling = SemiRegularTiling.eight(7, 7)
        assert len(tiling.points) == 49
        assert tiling.faces == ()
        assert len(SemiRegularTiling.eight(9, 8).faces) == 1


class TestDimensionGuard:
    """Argument checking before anything is allocated."""

    def test_overflow(self, generator):
        with pytest.raises(OverflowError):
            generator(65536, 65536)

    def test_largest_addressable(self):
        assert MAX_VERTEX_KEY == 2 ** 32 - 1
        assert check_dimensions(65535, 65537) == (65535, 65537)
        with pytest.raises(OverflowError):
            check_dimensions(65536, 65537)

    def test_negative(self):
        with pytest.raises(ValueError):
            RegularTiling.square(-1, 3)
        with pytest.raises(ValueError):
            SemiRegularTiling.one(3, -2)

    def test_not_an_integer(self):
        with pytest.raises(TypeError):
            RegularTiling.triangle(2.5, 3)

    def test_numpy_integers(self):
        tiling = RegularTiling.square(np.int64(3), np.uint8(3))
        assert len(tiling.faces) == 4


class TestRegistry:
    """Lookup of generators by name."""

    def test_eleven_tilings(self):
        assert len(TILINGS) == 11

    def test_case_insensitive(self):
        tiling = generate("semi-regular-7", 8, 8)
        assert tiling.name == "SEMI-REGULAR-7"
        assert isinstance(tiling, SemiRegularTiling)

    def test_unknown(self):
        with pytest.raises(KeyError, match="unknown tiling"):
            generate("pentagon", 3, 3)
