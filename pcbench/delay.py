"""Injectable delay functions standing in for real producer and consumer work.

Every delay function has the `DelayFunction` shape: it is called with a
`(min_millis, max_millis)` range, blocks the calling thread, and returns the
number of milliseconds it waited.
"""

from collections.abc import Callable
import random
import threading
import time


class RandomSleep:
  """A seedable random delay.

  Draws a whole number of milliseconds from `[min_millis, max_millis)` and
  sleeps for it. A single instance may be shared by every worker thread of a
  run; drawing from the generator is serialized.
  """

  def __init__(self, seed: int | None = None, sleep: Callable[[float], None] = time.sleep) -> None:
    """Initialize the delay.

    Args:
        seed: Seed for the random generator. None seeds from the system.
        sleep: Blocking wait taking seconds. Tests inject a fake.
    """
    self._random = random.Random(seed)
    self._lock = threading.Lock()
    self._sleep = sleep

  def __call__(self, min_millis: int, max_millis: int) -> int:
    with self._lock:
      millis = self._random.randrange(min_millis, max_millis) if max_millis > min_millis else min_millis
    self._sleep(millis / 1000)
    return millis


class FixedDelay:
  """Always waits the same number of milliseconds, ignoring the requested range."""

  def __init__(self, millis: int, sleep: Callable[[float], None] = time.sleep) -> None:
    if millis < 0:
      raise ValueError("millis must not be negative")
    self.millis = millis
    self._sleep = sleep

  def __call__(self, min_millis: int, max_millis: int) -> int:
    self._sleep(self.millis / 1000)
    return self.millis


def no_delay(min_millis: int, max_millis: int) -> int:
  """Never waits."""
  return 0
