"""Game of Life - Entry Point."""

import random
import signal
import sys

from config import load_config
from core.errors import ConfigError, ConstructionError
from internal.logging import StructuredLogger, get_logger, parse_level
from simulation.engine import SimulationEngine
from ui.terminal import TerminalDriver
from utils.crash import configure as configure_crash, install_crash_handler


def build_engine(sim_config):
    """Engine sized from config, randomized (reproducibly when a seed is set)."""
    engine = SimulationEngine.create(sim_config.width, sim_config.height)
    engine.randomize(random.Random(sim_config.seed))
    return engine


def main(config_path=None, max_generations=None, out=None):
    config = load_config(config_path)
    configure_crash(config.logging.crash_file)
    install_crash_handler()

    try:
        level = parse_level(config.logging.level)
    except ConfigError as exc:
        get_logger().error("invalid configuration", error=exc, **exc.context)
        return 1
    StructuredLogger.configure(min_level=level)
    log = get_logger()

    try:
        engine = build_engine(config.simulation)
    except ConstructionError as exc:
        log.error("cannot start simulation", error=exc, **exc.context)
        return 1

    configure_crash(config.logging.crash_file, context_provider=lambda: engine.snapshot().summary())
    driver = TerminalDriver(engine, config.simulation, out=out)
    previous = signal.signal(signal.SIGTERM, lambda signum, frame: driver.stop())
    try:
        driver.run(max_generations)
    except KeyboardInterrupt:
        log.info("interrupted", generation=engine.generation)
    finally:
        signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)
    return 0


if __name__ == "__main__":
    sys.exit(main())
