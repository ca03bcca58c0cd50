import matplotlib.pyplot as plt
import numpy as np

from fan_in_pipeline.pipeline import run
from fan_in_pipeline.reporting import EventLog, Trace, log_results, plot_trace, summarize_trace


def test_run_records_every_event():
    trace = Trace()
    values = list(run(4, 5, trace=trace))

    assert sorted(log.value for log in trace.producer_logs) == sorted(values)
    assert [log.value for log in trace.consumer_logs] == values
    assert {log.producer_id for log in trace.producer_logs} == {0, 1, 2, 3}


def test_summary_of_empty_trace():
    summary = summarize_trace(Trace())
    assert summary.produced_per_bucket.size == 0
    assert summary.consumed_per_bucket.size == 0


def test_summary_buckets_events():
    trace = Trace(start_time=100.0)
    trace.producer_logs.extend([EventLog(0, 0, 100.0), EventLog(0, 1, 100.15), EventLog(1, 2, 100.25)])
    trace.consumer_logs.extend([EventLog(None, 0, 100.05), EventLog(None, 1, 100.15),
                                EventLog(None, 2, 100.25)])

    summary = summarize_trace(trace, bucket_size=0.1)

    assert summary.cumulative_produced[-1] == 3
    assert summary.cumulative_consumed[-1] == 3
    assert summary.produced_per_bucket[0] == 1
    assert np.all(np.diff(summary.cumulative_consumed) >= 0)


def test_plot_trace_draws_two_lines():
    trace = Trace()
    list(run(3, 3, trace=trace))
    fig, ax = plt.subplots()
    plot_trace(ax, trace)
    assert len(ax.lines) == 2
    assert ax.get_title() == "Cumulative Production vs Consumption"
    plt.close(fig)


def test_log_results(caplog):
    trace = Trace()
    list(run(2, 2, trace=trace))
    with caplog.at_level("INFO"):
        log_results(trace)
    assert "Logged 4 produced items from 2 producers and 4 consumed items." in caplog.text
