import logging
import time

from .config import CFG, PipelineConfig
from .pipeline import print_pipeline
from .reporting import Trace, log_results, show_trace
from .sync import run_locked_increments

# ==================================================================================================
# Logging in terminal
# ==================================================================================================

def log_pipeline_parameters(config: PipelineConfig) -> None:
    """Log the parameters the pipeline is using."""
    logging.info(f"The pipeline will run {config.producer_count} producers with "
                 f"{config.items_per_producer} items each and a value stride of {config.stride}.")

# ==================================================================================================
# Main function
# ==================================================================================================

def main(config: PipelineConfig = CFG) -> None:
    """Main function for running the pipeline and the locked counter demo."""
    config.validate()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s: %(message)s",
                        datefmt="%H:%M:%S")
    log_pipeline_parameters(config)

    trace = Trace() if config.record_trace or config.plot_trace else None
    start_time = time.time()
    consumed = print_pipeline(config, trace=trace)
    logging.info(f"Pipeline: Done, consumed {len(consumed)} values in {time.time() - start_time:.3f}s")

    count = run_locked_increments(config.counter_workers)
    logging.info(f"Locked counter: {count} increments from {config.counter_workers} threads")

    if trace is not None:
        log_results(trace)
    if config.plot_trace:
        show_trace(trace, config.trace_bucket_size)

if __name__ == '__main__':
    main()
