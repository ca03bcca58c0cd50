import logging
import threading
import time
from dataclasses import dataclass, field

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

# ==================================================================================================
# Trace data structures
# ==================================================================================================

@dataclass
class EventLog:
    producer_id: int | None
    value: int
    timestamp: float

@dataclass
class Trace:
    start_time: float = field(default_factory=time.time)
    producer_logs: list[EventLog] = field(default_factory=list)
    consumer_logs: list[EventLog] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def log_produced(self, producer_id: int, value: int) -> None:
        with self._lock:
            self.producer_logs.append(EventLog(producer_id, value, time.time()))

    def log_consumed(self, value: int) -> None:
        with self._lock:
            self.consumer_logs.append(EventLog(None, value, time.time()))

@dataclass
class TraceSummary:
    bins: np.ndarray
    produced_per_bucket: np.ndarray
    consumed_per_bucket: np.ndarray

    @property
    def cumulative_produced(self) -> np.ndarray:
        return np.cumsum(self.produced_per_bucket)

    @property
    def cumulative_consumed(self) -> np.ndarray:
        return np.cumsum(self.consumed_per_bucket)

# ==================================================================================================
# Summaries
# ==================================================================================================

def summarize_trace(trace: Trace, bucket_size: float = 0.01) -> TraceSummary:
    """Count produced and consumed events per time bucket, relative to the trace start."""
    prod_seconds = [log.timestamp - trace.start_time for log in trace.producer_logs]
    cons_seconds = [log.timestamp - trace.start_time for log in trace.consumer_logs]

    if not prod_seconds and not cons_seconds:
        empty = np.zeros(0, dtype=int)
        return TraceSummary(np.zeros(0), empty, empty.copy())

    max_time = max(prod_seconds + cons_seconds)
    bins = np.arange(0, max_time + 2 * bucket_size, bucket_size)

    prod_hist, _ = np.histogram(prod_seconds, bins)
    cons_hist, _ = np.histogram(cons_seconds, bins)
    return TraceSummary(bins, prod_hist, cons_hist)

def log_results(trace: Trace) -> None:
    """Log a summary of total produced and consumed items."""
    producers = {log.producer_id for log in trace.producer_logs}
    logger.info(f"Logged {len(trace.producer_logs)} produced items from {len(producers)} producers "
                f"and {len(trace.consumer_logs)} consumed items.")

# ==================================================================================================
# Diagram generation
# ==================================================================================================

def plot_trace(ax: plt.Axes, trace: Trace, bucket_size: float = 0.01) -> None:
    summary = summarize_trace(trace, bucket_size)
    t = summary.bins[:-1]

    ax.plot(t, summary.cumulative_produced, label="Cumulative Produced", color="blue")
    ax.plot(t, summary.cumulative_consumed, label="Cumulative Consumed", color="red")
    ax.set(
        xlabel="Time (seconds)",
        ylabel="Total items",
        title="Cumulative Production vs Consumption"
    )
    ax.grid(alpha=0.4, linestyle=":")
    ax.legend()

def show_trace(trace: Trace, bucket_size: float = 0.01) -> None:
    """Create one figure for the trace and display it."""
    fig, ax = plt.subplots(figsize=(8, 4))
    plot_trace(ax, trace, bucket_size)
    plt.tight_layout()
    plt.show()
