"""Unit tests for the error taxonomy."""

from core.errors import (
    BaseSimError,
    ConfigError,
    ConstructionError,
    InvalidDimensionsError,
    InvalidPatternError,
)


class TestBaseSimError:
    """Tests for BaseSimError."""

    def test_tracking_fields(self):
        """Errors carry an id, timestamp, context and cause."""
        cause = ValueError("inner")
        err = BaseSimError("outer", context={"k": 1}, cause=cause)
        assert len(err.error_id) == 27
        assert "T" in err.timestamp
        assert err.context == {"k": 1}
        assert err.cause is cause

    def test_str_prefixes_id(self):
        """str() starts with the error id."""
        err = BaseSimError("broken")
        assert str(err) == f"[{err.error_id}] broken"


class TestConstructionErrors:
    """Tests for construction failures."""

    def test_invalid_dimensions(self):
        """InvalidDimensionsError records the rejected size."""
        err = InvalidDimensionsError(0, 5)
        assert isinstance(err, ConstructionError)
        assert (err.width, err.height) == (0, 5)
        assert err.context == {"width": 0, "height": 5}
        assert "0x5" in str(err)

    def test_invalid_dimensions_keeps_extra_context(self):
        """Caller context is merged with the size."""
        err = InvalidDimensionsError(1, 0, context={"source": "config"})
        assert err.context == {"source": "config", "width": 1, "height": 0}

    def test_invalid_pattern(self):
        """InvalidPatternError records the offending row."""
        err = InvalidPatternError("ragged", row=2, expected=4, actual=3)
        assert isinstance(err, ConstructionError)
        assert err.context == {"row": 2, "expected": 4, "actual": 3}


class TestConfigError:
    """Tests for ConfigError."""

    def test_key_and_value(self):
        """ConfigError records the offending key."""
        err = ConfigError("bad", key="logging.level", value="LOUD")
        assert err.context == {"key": "logging.level", "value": "LOUD"}
        assert not isinstance(err, ConstructionError)
