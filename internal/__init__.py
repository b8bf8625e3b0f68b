from internal.logging import LogLevel, StructuredLogger, get_logger, parse_level
from core.errors import ConfigError, ConstructionError, InvalidDimensionsError, InvalidPatternError

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "parse_level",
    "ConfigError",
    "ConstructionError",
    "InvalidDimensionsError",
    "InvalidPatternError",
]
