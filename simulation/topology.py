"""Toroidal grid topology: moving off one edge re-enters from the opposite one."""

from collections import namedtuple


class Dimensions(namedtuple("Dimensions", "width height")):
    """Grid size. Both sides must be >= 1; the engine checks this on construction."""

    __slots__ = ()

    def __contains__(self, c):
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    @property
    def area(self):
        return self.width * self.height

    def coordinates(self):
        """Every coordinate of the grid, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)


class Coordinate(namedtuple("Coordinate", "x y")):
    __slots__ = ()


def step_up(c, dims):
    return Coordinate(c.x, dims.height - 1 if c.y == 0 else c.y - 1)


def step_down(c, dims):
    return Coordinate(c.x, 0 if c.y == dims.height - 1 else c.y + 1)


def step_left(c, dims):
    return Coordinate(dims.width - 1 if c.x == 0 else c.x - 1, c.y)


def step_right(c, dims):
    return Coordinate(0 if c.x == dims.width - 1 else c.x + 1, c.y)


def neighbors(c, dims):
    """The 8 surrounding coordinates, clockwise from north: N, NE, E, SE, S, SW, W, NW.

    On grids one cell wide or high several entries are the same coordinate,
    possibly ``c`` itself. They are all returned; callers count every entry.
    """
    up = step_up(c, dims)
    down = step_down(c, dims)
    return (
        up,
        step_right(up, dims),
        step_right(c, dims),
        step_right(down, dims),
        down,
        step_left(down, dims),
        step_left(c, dims),
        step_left(up, dims),
    )
