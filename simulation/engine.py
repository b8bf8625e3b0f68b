import random

from core.errors import InvalidDimensionsError, InvalidPatternError
from internal.logging import LogLevel, get_logger
from simulation.state import GenerationSnapshot
from simulation.topology import Coordinate, Dimensions, neighbors

ALIVE_GLYPH = "👾"
DEAD_GLYPH = "⬛️"

# A cell is seeded alive when its uniform draw exceeds this, i.e. p = 0.2.
RANDOM_ALIVE_THRESHOLD = 0.8

# Pattern markers; bools hash like 0 and 1.
_MARKERS = {0: False, 1: True, "0": False, "1": True}

SURVIVE_COUNTS = (2, 3)
BIRTH_COUNT = 3


def _check_dimensions(width, height):
    for side in (width, height):
        if isinstance(side, bool) or not isinstance(side, int) or side < 1:
            raise InvalidDimensionsError(width, height)
    return Dimensions(width, height)


def _parse_marker(marker, x, y):
    try:
        return _MARKERS[marker]
    except (KeyError, TypeError):
        raise InvalidPatternError(
            f"pattern cell ({x}, {y}) has marker {marker!r}, expected 0 or 1",
            context={"row": y, "column": x, "marker": repr(marker)},
        ) from None


class SimulationEngine:
    """Conway's Game of Life (B3/S23) on a torus.

    Only living cells are stored, so memory and the cost of ``advance``
    follow the population rather than the grid area.
    """

    def __init__(self, width, height):
        self._dims = _check_dimensions(width, height)
        self._alive = set()
        self.generation = 0
        self._log = get_logger()

    @classmethod
    def create(cls, width, height):
        """Empty engine of the given size. Raises InvalidDimensionsError on a side < 1."""
        return cls(width, height)

    @classmethod
    def load(cls, pattern):
        """Engine sized and seeded from a rectangular grid of 0/1 rows.

        Row index is y, column index is x, origin top-left. Markers are
        0/1 (ints, bools or the characters "0"/"1"), so rows may also be
        strings such as "0110". Anything else raises InvalidPatternError.
        """
        rows = [list(row) for row in pattern]
        height = len(rows)
        width = len(rows[0]) if rows else 0
        engine = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidPatternError(
                    f"pattern row {y} has {len(row)} cells, expected {width}",
                    row=y, expected=width, actual=len(row),
                )
            for x, marker in enumerate(row):
                if _parse_marker(marker, x, y):
                    engine._alive.add(Coordinate(x, y))
        return engine

    @property
    def dimensions(self):
        return self._dims

    @property
    def width(self):
        return self._dims.width

    @property
    def height(self):
        return self._dims.height

    @property
    def alive_cells(self):
        return frozenset(self._alive)

    @property
    def population(self):
        return len(self._alive)

    def is_alive(self, c):
        return c in self._alive

    def randomize(self, rng=None):
        """Reseed every cell independently with probability 0.2 of being alive.

        ``rng`` needs a ``random()`` method; pass a seeded ``random.Random``
        for reproducible boards. Without one a fresh OS-seeded generator is
        used, never the module-level one.
        """
        rng = rng or random.Random()
        self._alive.clear()
        for c in self._dims.coordinates():
            if rng.random() > RANDOM_ALIVE_THRESHOLD:
                self._alive.add(c)
        self.generation = 0
        self._log.info("board randomized", width=self.width, height=self.height, population=self.population)

    def count_alive_neighbors(self, c):
        return sum(1 for n in neighbors(c, self._dims) if n in self._alive)

    def advance(self):
        """Move the whole board forward one generation.

        Every count is taken against the board as it was before the call;
        deaths and births are applied together at the end.
        """
        dying = set()
        candidates = set()
        for c in self._alive:
            around = neighbors(c, self._dims)
            candidates.update(around)
            if sum(1 for n in around if n in self._alive) not in SURVIVE_COUNTS:
                dying.add(c)

        born = {c for c in candidates - self._alive if self.count_alive_neighbors(c) == BIRTH_COUNT}

        self._alive -= dying
        self._alive |= born
        self.generation += 1
        if self._log.enabled(LogLevel.DEBUG):
            self._log.debug("generation advanced", generation=self.generation, born=len(born),
                            died=len(dying), population=self.population)

    def render(self, alive_glyph=ALIVE_GLYPH, dead_glyph=DEAD_GLYPH):
        lines = []
        for y in range(self.height):
            row = "".join(alive_glyph if Coordinate(x, y) in self._alive else dead_glyph for x in range(self.width))
            lines.append(row + "\n")
        return "".join(lines)

    def snapshot(self):
        return GenerationSnapshot(self.generation, self.width, self.height, self._alive)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"SimulationEngine(width={self.width}, height={self.height}, population={self.population})"

    def __eq__(self, other):
        if not isinstance(other, SimulationEngine):
            return NotImplemented
        return self._dims == other._dims and self._alive == other._alive

    __hash__ = None
