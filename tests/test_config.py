"""Tests for BenchmarkSettings."""

from pydantic import ValidationError
import pytest

from pcbench import LockStrategy
from pcbench import QueueStrategy
from pcbench import RunEvent
from pcbench import no_delay
from pcbench.config import DEFAULT_SEED
from pcbench.config import BenchmarkSettings


class TestBenchmarkSettingsValidation:
  """Test settings validation."""

  def test_defaults(self):
    """Test the defaults match the reference benchmark."""
    settings = BenchmarkSettings()
    assert settings.data_count == 100
    assert settings.execution_count == 10
    assert (settings.min_delay_millis, settings.max_delay_millis) == (100, 1000)
    assert settings.seed == DEFAULT_SEED
    assert settings.strategies == ["lock", "queue"]

  @pytest.mark.parametrize(
    "overrides",
    [
      {"data_count": -1},
      {"execution_count": -1},
      {"min_delay_millis": -5},
      {"min_delay_millis": 10, "max_delay_millis": 5},
      {"max_workers": 0},
      {"strategies": ["lock", "work-stealing"]},
      {"strategies": []},
    ],
  )
  def test_invalid_settings(self, overrides):
    """Test out-of-range values are rejected."""
    with pytest.raises(ValidationError):
      BenchmarkSettings(**overrides)


class TestBenchmarkSettingsWiring:
  """Test building executors and strategies from settings."""

  def test_build_strategies_in_order(self):
    """Test the selected strategies are built in the given order with the pool size."""
    strategies = BenchmarkSettings(strategies=["queue", "lock"], max_workers=3).build_strategies()
    assert [type(s) for s in strategies] == [QueueStrategy, LockStrategy]
    assert all(s.max_workers == 3 for s in strategies)

  def test_build_executor_applies_delay_range_and_observer(self):
    """Test runs use the configured range, delay and observer."""
    ranges = []
    events = []

    def delay(min_millis, max_millis):
      ranges.append((min_millis, max_millis))
      return 0

    settings = BenchmarkSettings(data_count=3, min_delay_millis=1, max_delay_millis=4)
    executor = settings.build_executor(observer=lambda event, item, millis: events.append(event), delay=delay)
    result = executor.execute_once(LockStrategy(max_workers=2), settings.data_count)

    assert result.error is None
    assert set(ranges) == {(1, 4)}
    assert events.count(RunEvent.PRODUCED) == 3
    assert events.count(RunEvent.CONSUMED) == 3

  def test_build_executor_with_seeded_sleep(self):
    """Test the default executor runs with the seeded random delay."""
    settings = BenchmarkSettings(min_delay_millis=0, max_delay_millis=2)
    result = settings.build_executor().execute_many(QueueStrategy(max_workers=4), 5, 2)
    assert result.error is None

  def test_no_delay_override(self):
    """Test a delay override replaces the random sleep."""
    executor = BenchmarkSettings().build_executor(delay=no_delay)
    assert executor.execute_once(QueueStrategy(max_workers=2), 50).error is None
