"""Terminal front end: print the board, clear the screen, wait, advance."""

import sys
import threading

from config import SimulationConfig
from internal.logging import LogLevel, get_logger
from utils.timestamp import elapsed_ms, now_micros

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class TerminalDriver:
    def __init__(self, engine, config=None, out=None):
        self.engine = engine
        self.config = config or SimulationConfig()
        self._out = out
        self._stop = threading.Event()
        self._log = get_logger()

    @property
    def stopped(self):
        return self._stop.is_set()

    def stop(self):
        """Ask run() to return; safe from signal handlers and other threads."""
        self._stop.set()

    def draw(self):
        out = self._out or sys.stdout
        out.write(self.engine.render(self.config.alive_glyph, self.config.dead_glyph) + "\n")
        if self.config.clear_screen:
            out.write(CLEAR_SCREEN)
        out.flush()

    def run(self, max_generations=None):
        """Loop until stop() or until max_generations have been advanced.

        Returns the number of generations advanced.
        """
        self._stop.clear()
        advanced = 0
        started = now_micros()
        self._log.info("driver start", dt=self.config.tick_interval, width=self.engine.width,
                       height=self.engine.height)

        try:
            while not self._stop.is_set():
                if max_generations is not None and advanced >= max_generations:
                    break
                self.draw()
                if self._stop.wait(self.config.tick_interval):
                    break
                self.engine.advance()
                advanced += 1
                if self.config.log_every and advanced % self.config.log_every == 0:
                    self._log.info("generation", **self.engine.snapshot().summary())
        finally:
            self._log.info("driver stop", generation=self.engine.generation, advanced=advanced,
                           elapsed_ms=elapsed_ms(started))
            if self._log.enabled(LogLevel.DEBUG):
                self._log.debug("final board", **self.engine.snapshot().to_dict())
        return advanced
