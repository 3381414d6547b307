from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

type WorkItemId = int

# (min_millis, max_millis) -> millis actually waited
type DelayFunction = Callable[[int, int], int]


class RunEvent(StrEnum):
  """Lifecycle events reported to an observer during a run."""

  PRODUCED = "Produced"
  CONSUMED = "Consumed"


@dataclass(frozen=True, slots=True)
class DataItem:
  """
  A single produced work item.

  Created exactly once per work item id by a producer and handed over,
  unchanged, to whichever consumer takes it.
  """

  id: WorkItemId
  payload: str

  def __str__(self) -> str:
    return f"Data Id: {self.id} SomeString: {self.payload}"


type Observer = Callable[[RunEvent, DataItem, int], None]


@dataclass(frozen=True, slots=True)
class ExecutionResult:
  """Outcome of a single run: the validation or fault error, and the wall-clock time."""

  error: str | None
  elapsed_millis: int

  @property
  def ok(self) -> bool:
    return not self.error

  def __str__(self) -> str:
    return _render("ExecutionResult", self.elapsed_millis, self.error)


@dataclass(frozen=True, slots=True)
class AggregateResult:
  """
  Outcome of a batch of runs.

  `elapsed_millis` is the truncated mean of every run and `error` is the
  first error any run reported.
  """

  error: str | None
  elapsed_millis: int
  execution_count: int = 0

  @property
  def ok(self) -> bool:
    return not self.error

  def __str__(self) -> str:
    return _render("AggregateResult", self.elapsed_millis, self.error)


def _render(kind: str, elapsed_millis: int, error: str | None) -> str:
  text = f"{kind} ElapsedMillis: {elapsed_millis}"
  if error:
    text += f" Error: {error}"
  return text
