"""Benchmark settings and the wiring they imply."""

from typing import Self

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from pcbench.context import RunContext
from pcbench.delay import RandomSleep
from pcbench.executor import StrategyExecutor
from pcbench.strategies import STRATEGIES
from pcbench.strategies import SynchronizationStrategy
from pcbench.strategies import create_strategy
from pcbench.types import DelayFunction
from pcbench.types import Observer

DEFAULT_SEED = 666


class BenchmarkSettings(BaseModel):
  """Everything needed to run a benchmark."""

  data_count: int = Field(default=100, ge=0, description="Work items per run")
  execution_count: int = Field(default=10, ge=0, description="Runs per strategy")
  min_delay_millis: int = Field(default=100, ge=0, description="Lower bound of the simulated work")
  max_delay_millis: int = Field(default=1000, ge=0, description="Upper bound (exclusive) of the simulated work")
  max_workers: int | None = Field(default=None, ge=1, description="Producer pool size, None for the CPU count")
  seed: int | None = Field(default=DEFAULT_SEED, description="Seed of the random delays, None for a random seed")
  strategies: list[str] = Field(default_factory=lambda: list(STRATEGIES), min_length=1)

  @field_validator("strategies")
  @classmethod
  def _known_strategies(cls, value: list[str]) -> list[str]:
    unknown = [name for name in value if name not in STRATEGIES]
    if unknown:
      raise ValueError(f"unknown strategies {unknown}, expected any of {list(STRATEGIES)}")
    return value

  @model_validator(mode="after")
  def _ordered_delay_range(self) -> Self:
    if self.max_delay_millis < self.min_delay_millis:
      raise ValueError("max_delay_millis must not be lower than min_delay_millis")
    return self

  def build_delay(self) -> DelayFunction:
    return RandomSleep(seed=self.seed)

  def build_executor(self, observer: Observer | None = None, delay: DelayFunction | None = None) -> StrategyExecutor:
    """Create an executor whose runs use these settings.

    All runs share one delay function, so a seeded benchmark draws the same
    sequence of delays across invocations.

    Args:
        observer: Optional observer attached to every run.
        delay: Overrides the seeded random delay.

    Returns:
        A configured executor.
    """
    shared_delay = delay or self.build_delay()

    def create_context(data_count: int) -> RunContext:
      return RunContext(
        data_count,
        delay=shared_delay,
        min_delay_millis=self.min_delay_millis,
        max_delay_millis=self.max_delay_millis,
        observer=observer,
      )

    return StrategyExecutor(context_factory=create_context)

  def build_strategies(self) -> list[SynchronizationStrategy]:
    return [create_strategy(name, max_workers=self.max_workers) for name in self.strategies]
