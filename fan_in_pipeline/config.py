from dataclasses import dataclass

from .errors import ConfigError

# ==================================================================================================
# Pipeline configurations
# ==================================================================================================

@dataclass(frozen=True)
class PipelineConfig:
    producer_count: int = 10
    items_per_producer: int = 10
    # None means producers own back-to-back ranges of items_per_producer values
    value_stride: int | None = None
    trailer: str = "This is the end."

    counter_workers: int = 100

    record_trace: bool = False
    plot_trace: bool = False
    trace_bucket_size: float = 0.01

    log_level: str = "INFO"

    @property
    def stride(self) -> int:
        """Distance between the first values of two neighbouring producers."""
        if self.value_stride is None:
            return self.items_per_producer
        return self.value_stride

    def validate(self) -> "PipelineConfig":
        """Check the configuration and return it, raising ConfigError on bad values."""
        for name in ("producer_count", "items_per_producer", "counter_workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
        if self.value_stride is not None:
            if not isinstance(self.value_stride, int) or self.value_stride < self.items_per_producer:
                raise ConfigError(f"value_stride must be an integer >= items_per_producer "
                                  f"({self.items_per_producer}), got {self.value_stride!r}")
        if self.trace_bucket_size <= 0:
            raise ConfigError(f"trace_bucket_size must be positive, got {self.trace_bucket_size!r}")
        return self

CFG = PipelineConfig()
