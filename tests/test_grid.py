"""
Tests for grid geometry and the collision oracle.
"""

import math

import pytest

from snake_duel.game.grid import (
    Direction,
    Grid,
    Point,
    euclidean,
    head_to_head_collision,
    manhattan,
    neighbors,
    resolve_head_to_head,
)


class TestPointAndDirection:
    """Tests for cell and direction values."""

    def test_point_equality_is_by_value(self):
        """Test two points with the same coordinates are equal and hash alike."""
        assert Point(3, 4) == Point(3, 4)
        assert len({Point(3, 4), Point(3, 4)}) == 1

    def test_point_moved(self):
        """Test moving a point one step in each direction."""
        origin = Point(5, 5)

        assert origin.moved(Direction.RIGHT) == Point(6, 5)
        assert origin.moved(Direction.LEFT) == Point(4, 5)
        assert origin.moved(Direction.DOWN) == Point(5, 6)
        assert origin.moved(Direction.UP) == Point(5, 4)

    def test_opposites(self):
        """Test every direction's opposite is its negation."""
        for direction in Direction:
            assert direction.opposite.dx == -direction.dx
            assert direction.opposite.dy == -direction.dy
            assert direction.opposite.opposite == direction

    def test_between_adjacent(self):
        """Test direction lookup between adjacent cells."""
        assert Direction.between(Point(2, 2), Point(2, 1)) == Direction.UP
        assert Direction.between(Point(2, 2), Point(3, 2)) == Direction.RIGHT

    def test_between_non_adjacent_raises(self):
        """Test non-adjacent cells are rejected."""
        with pytest.raises(ValueError):
            Direction.between(Point(0, 0), Point(2, 0))

    def test_to_dict(self):
        assert Point(1, 2).to_dict() == {"x": 1, "y": 2}


class TestDistances:
    """Tests for distance metrics."""

    def test_manhattan(self):
        assert manhattan(Point(0, 0), Point(3, 4)) == 7
        assert manhattan(Point(3, 4), Point(0, 0)) == 7

    def test_euclidean(self):
        assert euclidean(Point(0, 0), Point(3, 4)) == 5

    def test_euclidean_to_fractional_center(self):
        """Test Euclidean distance accepts a center between cells."""
        assert math.isclose(euclidean(Point(15, 10), (15.0, 10.0)), 0.0)
        assert math.isclose(euclidean(Point(0, 0), (1.5, 2.0)), 2.5)


class TestCollisionOracle:
    """Tests for wall, occupancy and safety checks."""

    def test_is_wall(self):
        """Test cells outside [0, width) x [0, height) are walls."""
        grid = Grid(5, 4)

        assert grid.is_wall(Point(-1, 0))
        assert grid.is_wall(Point(0, -1))
        assert grid.is_wall(Point(5, 0))
        assert grid.is_wall(Point(0, 4))
        assert not grid.is_wall(Point(0, 0))
        assert not grid.is_wall(Point(4, 3))

    def test_is_occupied_includes_head(self, make_snake):
        """Test occupancy covers every body cell, head included."""
        grid = Grid(10, 10)
        snake = make_snake(grid, [(3, 3), (2, 3), (1, 3)])

        for cell in snake.body:
            assert grid.is_occupied(cell, [snake])
        assert not grid.is_occupied(Point(4, 3), [snake])

    def test_is_safe_exhaustive(self, make_snake):
        """Test is_safe is false exactly on walls and body cells of a small board."""
        grid = Grid(5, 4)
        ai = make_snake(grid, [(2, 1), (1, 1), (0, 1)])
        opponent = make_snake(grid, [(3, 3), (3, 2), (4, 2)], Direction.DOWN, name="player")
        body_cells = set(ai.body) | set(opponent.body)

        for x in range(-1, 6):
            for y in range(-1, 5):
                cell = Point(x, y)
                in_bounds = 0 <= x < 5 and 0 <= y < 4
                expected = in_bounds and cell not in body_cells
                assert grid.is_safe(cell, [ai, opponent]) == expected, cell

    def test_neighbors_order_and_no_filtering(self):
        """Test neighbors come in direction order without bounds filtering."""
        assert neighbors(Point(0, 0)) == [Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1)]

    def test_safe_neighbors(self, make_snake):
        """Test safe neighbors drop walls and bodies."""
        grid = Grid(10, 10)
        snake = make_snake(grid, [(0, 0), (1, 0), (2, 0)], Direction.LEFT)

        assert grid.safe_neighbors(Point(0, 0), [snake]) == [Point(0, 1)]

    def test_no_tail_relaxation(self, make_snake):
        """Test a tail cell counts as occupied even though it would move away."""
        grid = Grid(10, 10)
        snake = make_snake(grid, [(1, 1), (1, 0), (0, 0), (0, 1)], Direction.DOWN)

        assert not grid.is_safe(Point(0, 1), [snake])


class TestFloodFill:
    """Tests for bounded reachable-space counting."""

    def test_enclosed_region_returns_size(self, make_snake):
        """Test a region smaller than the cap returns its exact size."""
        grid = Grid(10, 10)
        wall = make_snake(grid, [(1, y) for y in range(10)], Direction.DOWN)

        # Column x=0 is cut off: 10 cells
        assert grid.flood_fill(Point(0, 0), [wall], cap=15) == 10

    def test_two_column_region(self, make_snake):
        grid = Grid(10, 10)
        wall = make_snake(grid, [(2, y) for y in range(10)], Direction.DOWN)

        assert grid.flood_fill(Point(0, 5), [wall], cap=30) == 20

    def test_open_region_returns_cap(self):
        """Test an open board stops exactly at the cap."""
        grid = Grid(30, 20)

        assert grid.flood_fill(Point(15, 10), [], cap=15) == 15
        assert grid.flood_fill(Point(15, 10), [], cap=20) == 20

    def test_start_cell_is_counted(self, make_snake):
        """Test a dead-end start cell still counts itself."""
        grid = Grid(10, 10)
        snake = make_snake(grid, [(0, 1), (1, 1), (1, 0)], Direction.UP)

        assert grid.flood_fill(Point(0, 0), [snake], cap=20) == 1


class TestHeadToHead:
    """Tests for head-to-head detection and resolution."""

    def test_detects_shared_head(self, make_snake):
        grid = Grid(10, 10)
        a = make_snake(grid, [(5, 5), (4, 5), (3, 5)], name="player")
        b = make_snake(grid, [(5, 5), (6, 5), (7, 5)], Direction.LEFT)
        c = make_snake(grid, [(5, 6), (6, 6), (7, 6)], Direction.LEFT)

        assert head_to_head_collision(a, b)
        assert not head_to_head_collision(a, c)

    def test_shorter_snake_wins(self, make_snake):
        """Test length 3 vs length 5: the shorter snake survives."""
        grid = Grid(20, 20)
        short = make_snake(grid, [(5, 5), (4, 5), (3, 5)], name="player")
        long = make_snake(grid, [(5, 5), (6, 5), (7, 5), (8, 5), (9, 5)], Direction.LEFT)

        outcome = resolve_head_to_head(short, long)

        assert outcome.winner is short
        assert outcome.losers == (long,)
        assert not outcome.is_draw

        reverse = resolve_head_to_head(long, short)
        assert reverse.winner is short

    def test_equal_lengths_is_draw(self, make_snake):
        """Test equal lengths: no winner, both lose."""
        grid = Grid(20, 20)
        a = make_snake(grid, [(5, 5), (4, 5), (3, 5), (2, 5)], name="player")
        b = make_snake(grid, [(5, 5), (6, 5), (7, 5), (8, 5)], Direction.LEFT)

        outcome = resolve_head_to_head(a, b)

        assert outcome.winner is None
        assert outcome.is_draw
        assert set(map(id, outcome.losers)) == {id(a), id(b)}

    def test_resolution_is_pure_until_applied(self, make_snake):
        """Test resolving does not touch alive flags; apply() marks losers dead."""
        grid = Grid(20, 20)
        short = make_snake(grid, [(5, 5), (4, 5), (3, 5)], name="player")
        long = make_snake(grid, [(5, 5), (6, 5), (7, 5), (8, 5), (9, 5)], Direction.LEFT)

        outcome = resolve_head_to_head(short, long)
        assert short.alive and long.alive

        outcome.apply()
        assert short.alive
        assert not long.alive
