"""Tests for the observer helpers."""

import logging

from pcbench import DataItem
from pcbench import RunContext
from pcbench import RunEvent
from pcbench import compose_observers
from pcbench import logging_observer
from pcbench import no_delay


class TestLoggingObserver:
  """Test the per-item trace."""

  def test_logs_produce_and_consume(self, caplog):
    """Test each event is logged with the item it concerns."""
    context = RunContext(1, delay=no_delay, observer=logging_observer())
    with caplog.at_level(logging.DEBUG, logger="pcbench.trace"):
      context.consume(context.produce(1))

    assert caplog.messages == [
      "Produced Data Id: 1 SomeString: I've been sleeping for 0 millis !",
      "Consumed Data Id: 1 SomeString: I've been sleeping for 0 millis !",
    ]

  def test_custom_logger_and_level(self, caplog):
    """Test the target logger and level can be chosen."""
    logger = logging.getLogger("tests.trace")
    observer = logging_observer(logger, level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="tests.trace"):
      observer(RunEvent.CONSUMED, DataItem(4, "x"), 0)

    assert [(r.name, r.levelno) for r in caplog.records] == [("tests.trace", logging.INFO)]


class TestComposeObservers:
  """Test fanning events out."""

  def test_every_observer_sees_each_event_in_order(self):
    """Test observers are called in the given order."""
    calls = []
    observer = compose_observers(
      lambda event, item, millis: calls.append(("first", event, item.id)),
      lambda event, item, millis: calls.append(("second", event, item.id)),
    )
    observer(RunEvent.PRODUCED, DataItem(2, "x"), 1)

    assert calls == [("first", RunEvent.PRODUCED, 2), ("second", RunEvent.PRODUCED, 2)]
