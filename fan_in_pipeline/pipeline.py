import logging
import sys
import threading
from typing import Iterator, TextIO

from .channel import Channel
from .config import PipelineConfig
from .errors import ConfigError
from .reporting import Trace
from .sync import CompletionCounter

logger = logging.getLogger(__name__)

# ==================================================================================================
# Thread target functions
# ==================================================================================================

def producer(identifier: int, items_per_producer: int, stride: int, sink: Channel,
             done_signal: CompletionCounter, trace: Trace | None = None) -> None:
    """Send this producer's run of values into the sink, then report done exactly once."""
    logger.debug(f"Producer {identifier}: Running")
    try:
        for j in range(items_per_producer):
            value = identifier * stride + j
            # blocks until the consumer takes the value
            sink.send(value)
            if trace is not None:
                trace.log_produced(identifier, value)
    finally:
        done_signal.done()
    logger.debug(f"Producer {identifier}: Done")

def supervise(n: int, done_signal: CompletionCounter, sink: Channel) -> None:
    """Wait for all n producers to report done, then close the sink."""
    done_signal.wait()
    sink.close()
    logger.debug(f"Producers: Done, channel closed after {n} producers finished")

def consume(sink: Channel, trace: Trace | None = None) -> Iterator[int]:
    """Yield values from the sink as they arrive until it is closed and drained."""
    for value in sink:
        if trace is not None:
            trace.log_consumed(value)
        yield value

# ==================================================================================================
# Thread management functions
# ==================================================================================================

def spawn_producers(n: int, items_per_producer: int, sink: Channel, done_signal: CompletionCounter,
                    stride: int | None = None, trace: Trace | None = None) -> list[threading.Thread]:
    """Create and start one thread per producer."""
    if stride is None:
        stride = items_per_producer
    if stride < items_per_producer:
        raise ConfigError(f"stride must be >= items_per_producer ({items_per_producer}), "
                          f"got {stride}, producer ranges would overlap")
    logger.debug(f"Starting {n} producer threads with {items_per_producer} items each.")

    thread_list = []
    for i in range(n):
        thread = threading.Thread(target=producer,
                                  args=(i, items_per_producer, stride, sink, done_signal, trace),
                                  name=f"producer-{i}", daemon=True)
        thread.start()
        thread_list.append(thread)
    return thread_list

def start_supervisor(n: int, done_signal: CompletionCounter, sink: Channel) -> threading.Thread:
    """Create and start the thread that closes the sink once every producer is done."""
    thread = threading.Thread(target=supervise, args=(n, done_signal, sink),
                              name="supervisor", daemon=True)
    thread.start()
    return thread

def run(producer_count: int, items_per_producer: int, stride: int | None = None,
        trace: Trace | None = None) -> Iterator[int]:
    """
    Fan the output of producer_count producers into one unbuffered channel and yield
    every value in arrival order.

    Nothing starts until the first value is requested. Values from one producer arrive
    in increasing order; the interleaving across producers is not fixed.
    """
    sink = Channel()
    done_signal = CompletionCounter(producer_count)
    # the supervisor and the consumer must overlap with production, sends only drain
    # once the consumer starts reading
    spawn_producers(producer_count, items_per_producer, sink, done_signal, stride, trace)
    start_supervisor(producer_count, done_signal, sink)
    yield from consume(sink, trace)

# ==================================================================================================
# Printing
# ==================================================================================================

def print_pipeline(config: PipelineConfig, out: TextIO | None = None,
                   trace: Trace | None = None) -> list[int]:
    """Print every consumed value on its own line followed by the trailer line."""
    if out is None:
        out = sys.stdout
    config.validate()
    consumed = []
    for value in run(config.producer_count, config.items_per_producer, config.stride, trace):
        print(value, file=out, flush=True)
        consumed.append(value)
    print(config.trailer, file=out, flush=True)
    return consumed
