from fan_in_pipeline.__main__ import main
from fan_in_pipeline.config import PipelineConfig


def test_main_prints_values_and_trailer_only(capsys):
    main(PipelineConfig(producer_count=3, items_per_producer=2, counter_workers=10,
                        record_trace=True))
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "This is the end."
    assert sorted(int(line) for line in lines[:-1]) == list(range(6))


def test_main_shows_plot_when_asked(monkeypatch, capsys):
    shown = []
    monkeypatch.setattr("fan_in_pipeline.__main__.show_trace",
                        lambda trace, bucket_size: shown.append(len(trace.consumer_logs)))
    main(PipelineConfig(producer_count=2, items_per_producer=2, counter_workers=1,
                        plot_trace=True))
    assert shown == [4]
    assert capsys.readouterr().out.splitlines()[-1] == "This is the end."
