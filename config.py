import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("width", "height", "tick_interval", "seed", "alive_glyph", "dead_glyph",
                 "clear_screen", "log_every")

    def __init__(self, width=30, height=30, tick_interval=0.1, seed=None, alive_glyph="👾",
                 dead_glyph="⬛️", clear_screen=True, log_every=100):
        self.width = width
        self.height = height
        self.tick_interval = tick_interval
        self.seed = seed
        self.alive_glyph = alive_glyph
        self.dead_glyph = dead_glyph
        self.clear_screen = clear_screen
        self.log_every = log_every


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("simulation", "logging")

    def __init__(self, simulation=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path, encoding="utf-8") as file:
        return Config.from_dict(json.load(file))
