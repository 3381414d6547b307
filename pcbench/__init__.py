"""pcbench - benchmark producer-consumer synchronization strategies.

Runs a lock-based and a queue-based producer-consumer strategy many times
over a known workload, checks that every item was consumed exactly once,
and reports the mean run time and the first error observed.
"""

from pcbench.context import IRunContext
from pcbench.context import RunContext
from pcbench.delay import FixedDelay
from pcbench.delay import RandomSleep
from pcbench.delay import no_delay
from pcbench.errors import ErrorKind
from pcbench.executor import StrategyExecutor
from pcbench.executor import aggregate
from pcbench.helpers import compose_observers
from pcbench.helpers import logging_observer
from pcbench.strategies import LockStrategy
from pcbench.strategies import QueueStrategy
from pcbench.strategies import SynchronizationStrategy
from pcbench.strategies import create_strategy
from pcbench.types import AggregateResult
from pcbench.types import DataItem
from pcbench.types import ExecutionResult
from pcbench.types import RunEvent

__all__ = [
  "AggregateResult",
  "DataItem",
  "ErrorKind",
  "ExecutionResult",
  "FixedDelay",
  "IRunContext",
  "LockStrategy",
  "QueueStrategy",
  "RandomSleep",
  "RunContext",
  "RunEvent",
  "StrategyExecutor",
  "SynchronizationStrategy",
  "aggregate",
  "compose_observers",
  "create_strategy",
  "logging_observer",
  "no_delay",
]
