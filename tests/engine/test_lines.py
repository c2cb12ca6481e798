"""
Tests for the winning line generator and LineCache.
"""

import pytest

from tictacboom.engine.base import Coordinate
from tictacboom.engine.lines import (
    LineCache,
    expected_line_count,
    generate_lines,
    position_weights,
)


class TestGenerateLines:
    """Tests for line enumeration."""

    @pytest.mark.parametrize("size,count", [(3, 49), (4, 76), (5, 109)])
    def test_line_count(self, size, count):
        """Test 3N² + 6N + 4 lines are generated."""
        lines = generate_lines(size)
        assert len(lines) == count
        assert expected_line_count(size) == count

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_lines_are_well_formed(self, size):
        """Test every line has N distinct, in-bounds coordinates."""
        for line in generate_lines(size):
            assert len(line) == size
            assert len(set(line)) == size
            assert all(c.in_bounds(size) for c in line)

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_lines_are_unique(self, size):
        """Test no line is listed twice, in either direction."""
        lines = generate_lines(size)
        assert len({frozenset(line) for line in lines}) == len(lines)

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_lines_are_straight(self, size):
        """Test consecutive cells differ by the same unit step."""
        for line in generate_lines(size):
            steps = {
                (b.x - a.x, b.y - a.y, b.z - a.z)
                for a, b in zip(line, line[1:])
            }
            assert len(steps) == 1
            (step,) = steps
            assert all(abs(d) <= 1 for d in step)
            assert step != (0, 0, 0)

    def test_family_counts(self):
        """Test axis, face diagonal and space diagonal counts for size 4."""
        lines = generate_lines(4)

        def changing_axes(line):
            first, second = line[0], line[1]
            return sum(
                getattr(first, axis) != getattr(second, axis)
                for axis in ("x", "y", "z")
            )

        by_axes = [changing_axes(line) for line in lines]
        assert by_axes.count(1) == 3 * 16
        assert by_axes.count(2) == 6 * 4
        assert by_axes.count(3) == 4

    def test_space_diagonals_present(self):
        lines = {frozenset(line) for line in generate_lines(3)}
        main = frozenset(Coordinate(i, i, i) for i in range(3))
        anti = frozenset(Coordinate(i, 2 - i, 2 - i) for i in range(3))
        assert main in lines
        assert anti in lines

    def test_order_is_stable(self):
        """Test generation is deterministic."""
        assert generate_lines(4) == generate_lines(4)


class TestPositionWeights:
    """Tests for per-cell line counts."""

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_weight_sum(self, size):
        """Test weights sum to N × line count."""
        lines = generate_lines(size)
        weights = position_weights(size, lines)
        total = sum(w for layer in weights for row in layer for w in row)
        assert total == size * len(lines)

    def test_center_of_size_three(self):
        """Test the centre of a 3×3×3 board lies on all 13 directions."""
        weights = position_weights(3, generate_lines(3))
        assert weights[1][1][1] == 13

    def test_corner_weight(self):
        """Test a corner lies on 3 axis lines, 3 face diagonals, 1 space diagonal."""
        weights = position_weights(4, generate_lines(4))
        assert weights[0][0][0] == 7
        assert weights[3][3][3] == 7

    def test_edge_weight(self):
        """Test an edge cell of size 4 lies on 3 axis lines and 1 face diagonal."""
        weights = position_weights(4, generate_lines(4))
        # (x=1, y=0, z=0)
        assert weights[0][0][1] == 4


class TestLineCache:
    """Tests for the per-size cache."""

    def test_lines_cached(self):
        cache = LineCache()
        first = cache.lines_for(4)
        assert cache.lines_for(4) is first
        assert cache.cached_sizes() == frozenset({4})

    def test_weights_cached(self):
        cache = LineCache()
        assert cache.weights_for(3) is cache.weights_for(3)
        assert cache.weight_of(Coordinate(1, 1, 1), 3) == 13

    def test_sizes_independent(self):
        cache = LineCache()
        assert len(cache.lines_for(3)) == 49
        assert len(cache.lines_for(5)) == 109
        assert cache.cached_sizes() == frozenset({3, 5})

    def test_clear(self):
        cache = LineCache()
        cache.lines_for(4)
        cache.weights_for(4)
        cache.clear()
        assert cache.cached_sizes() == frozenset()

    def test_separate_caches_do_not_share(self):
        """Test two caches hold equal but separate tables."""
        a, b = LineCache(), LineCache()
        assert a.lines_for(4) == b.lines_for(4)
        a.clear()
        assert b.cached_sizes() == frozenset({4})
