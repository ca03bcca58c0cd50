class PipelineError(Exception):
    """Base class for every error raised by the pipeline."""


class ChannelClosedError(PipelineError):
    """Raised on a send to, or a second close of, a closed channel."""


class CounterError(PipelineError):
    """Raised when a completion counter is signalled more times than expected."""


class ConfigError(PipelineError):
    """Raised when a pipeline configuration is invalid."""
