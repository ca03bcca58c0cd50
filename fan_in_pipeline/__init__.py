from .channel import Channel
from .config import CFG, PipelineConfig
from .errors import ChannelClosedError, ConfigError, CounterError, PipelineError
from .pipeline import consume, print_pipeline, run, spawn_producers, supervise
from .reporting import Trace, summarize_trace
from .sync import CompletionCounter, SharedCounter, run_locked_increments

__all__ = [
    "CFG",
    "Channel",
    "ChannelClosedError",
    "CompletionCounter",
    "ConfigError",
    "CounterError",
    "PipelineConfig",
    "PipelineError",
    "SharedCounter",
    "Trace",
    "consume",
    "print_pipeline",
    "run",
    "run_locked_increments",
    "spawn_producers",
    "summarize_trace",
    "supervise",
]
