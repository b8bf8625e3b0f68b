from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class GenerationSnapshot:
    """Frozen view of one generation, safe to hand to loggers and crash reports."""

    __slots__ = ("id", "timestamp", "generation", "width", "height", "cells")

    def __init__(self, generation, width, height, cells, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.generation = generation
        self.width = width
        self.height = height
        self.cells = frozenset(cells)

    @property
    def population(self):
        return len(self.cells)

    @property
    def density(self):
        return self.population / (self.width * self.height)

    def summary(self):
        """Everything but the cells; what gets logged each few generations."""
        return {
            "id": self.id,
            "generation": self.generation,
            "width": self.width,
            "height": self.height,
            "population": self.population,
            "density": round(self.density, 4),
        }

    def to_dict(self):
        return {
            **self.summary(),
            "timestamp": self.timestamp,
            "cells": [[c.x, c.y] for c in sorted(self.cells, key=lambda c: (c.y, c.x))],
        }
