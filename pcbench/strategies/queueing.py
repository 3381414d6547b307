from concurrent.futures import Future
from concurrent.futures import ThreadPoolExecutor
from queue import Queue
import threading

from pcbench.context.types import IRunContext
from pcbench.strategies.types import SynchronizationStrategy
from pcbench.types import DataItem
from pcbench.types import WorkItemId

# Put on the queue to release the consumer when producers failed.
_STOP = object()


class _Consumer:
  """The single consumer of a run, living on its own thread.

  Takes exactly `expected` items off the queue and consumes them in the
  order they arrive. Stops early on the stop sentinel or on the first
  failing consume.
  """

  def __init__(self, context: IRunContext, queue: "Queue[DataItem | object]", expected: int):
    self._context = context
    self._queue = queue
    self._expected = expected
    self.error: BaseException | None = None
    self._thread = threading.Thread(target=self._run, name="queue-consumer", daemon=True)
    self._thread.start()

  def _run(self) -> None:
    """Consume items in arrival order until the expected count is reached."""
    try:
      for _ in range(self._expected):
        item = self._queue.get()
        if item is _STOP:
          break
        self._context.consume(item)  # type: ignore
    except Exception as e:
      self.error = e

  def stop(self) -> None:
    """Releases a consumer that is waiting for items that will never come."""
    self._queue.put(_STOP)

  def join(self) -> None:
    self._thread.join()


class QueueStrategy(SynchronizationStrategy):
  """Produce in parallel, consume on one dedicated thread fed by a queue.

  Producers hand their items to an unbounded queue and never wait on
  consumption. Exactly one consumer takes items off the queue, so consume
  calls are exclusive without any lock.
  """

  name = "queue"

  def execute(self, context: IRunContext) -> None:
    """Run the producers and the consumer, and wait for the consumer to finish.

    Args:
        context: The run to execute.

    Raises:
        Exception: The first producer failure, or else the consumer failure,
                   after the consumer thread has stopped.
    """
    queue: Queue[DataItem | object] = Queue()
    ids = context.get_work_item_ids()
    consumer = _Consumer(context, queue, expected=len(ids))

    def produce(work_item_id: WorkItemId) -> None:
      queue.put(context.produce(work_item_id))

    with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="queue-producer") as executor:
      futures = [executor.submit(produce, i) for i in ids]

    producer_error = next((e for e in map(Future.exception, futures) if e is not None), None)
    if producer_error is not None:
      consumer.stop()
    consumer.join()

    if producer_error is not None:
      raise producer_error
    if consumer.error is not None:
      raise consumer.error
