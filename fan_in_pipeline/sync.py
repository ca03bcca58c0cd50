import logging
import threading

from .errors import CounterError

logger = logging.getLogger(__name__)

# ==================================================================================================
# Completion counter
# ==================================================================================================

class CompletionCounter:
    """Counts finished tasks; wait() returns once all of them have called done()."""

    def __init__(self, total: int):
        if total < 0:
            raise CounterError(f"total must be non-negative, got {total}")
        self.total = total
        self._finished = 0
        self._cond = threading.Condition()

    @property
    def finished(self) -> int:
        with self._cond:
            return self._finished

    def done(self) -> None:
        """Record one finished task."""
        with self._cond:
            if self._finished >= self.total:
                raise CounterError(f"done() called more than {self.total} times")
            self._finished += 1
            if self._finished == self.total:
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until every task has reported done."""
        with self._cond:
            self._cond.wait_for(lambda: self._finished == self.total)

# ==================================================================================================
# Locked counter
# ==================================================================================================

class SharedCounter:
    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> None:
        with self._lock:
            self._value += 1


def increment_task(counter: SharedCounter, done_signal: CompletionCounter) -> None:
    try:
        counter.increment()
    finally:
        done_signal.done()


def run_locked_increments(workers: int) -> int:
    """Start one thread per increment, wait for all of them and return the final count."""
    counter = SharedCounter()
    done_signal = CompletionCounter(workers)
    logger.info(f"Starting {workers} increment threads.")
    thread_list = []
    for i in range(workers):
        thread = threading.Thread(target=increment_task, args=(counter, done_signal),
                                  name=f"increment-{i}", daemon=True)
        thread.start()
        thread_list.append(thread)
    # wait for the threads to finish
    done_signal.wait()
    for thread in thread_list:
        thread.join()
    return counter.value
