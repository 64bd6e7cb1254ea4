from __future__ import annotations

import json
import threading

import pytest

from models import CompanyRecord, FounderRecord
from services.result_sink import ResultSink, load_dataset
from services.results_writer import read_results, write_results


def _records():
    return [
        CompanyRecord(
            name="Acme",
            team_size=42,
            job_count=7,
            founders=[FounderRecord(name="Co-Founder & CEO", description="Built three startups")],
        ),
        CompanyRecord(name="Beta"),
    ]


def test_write_creates_directory_and_uses_camel_case(tmp_path):
    target = tmp_path / "out" / "nested" / "scraped.json"
    write_results(_records(), target)
    text = target.read_text(encoding="utf-8")
    data = json.loads(text)
    assert text.startswith("[\n  {")
    assert data[0] == {
        "name": "Acme",
        "teamSize": 42,
        "jobCount": 7,
        "founders": [{"name": "Co-Founder & CEO", "description": "Built three startups"}],
        "launchPostTitle": "",
        "launchPostUrl": "",
    }
    assert data[1]["teamSize"] == 0 and data[1]["founders"] == []


def test_round_trip_is_lossless(tmp_path):
    target = tmp_path / "scraped.json"
    records = _records()
    write_results(records, target)
    assert read_results(target) == records


def test_overwrites_existing_file_without_leftovers(tmp_path):
    target = tmp_path / "scraped.json"
    target.write_text("stale", encoding="utf-8")
    write_results([CompanyRecord(name="Only")], target)
    assert [r.name for r in read_results(target)] == ["Only"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["scraped.json"]


def test_failed_write_keeps_previous_output(tmp_path, monkeypatch):
    target = tmp_path / "scraped.json"
    write_results([CompanyRecord(name="Old")], target)

    import services.results_writer as rw

    def _boom(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(rw.json, "dump", _boom)
    with pytest.raises(OSError):
        write_results([CompanyRecord(name="New")], target)
    assert [r.name for r in read_results(target)] == ["Old"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["scraped.json"]


def test_records_reject_negative_counts():
    with pytest.raises(ValueError):
        CompanyRecord(name="Bad", team_size=-1)


def test_sink_mirrors_appends_to_dataset(tmp_path):
    dataset = tmp_path / "ds" / "default.jsonl"
    sink = ResultSink(dataset)
    sink.reset_dataset()
    for r in _records():
        sink.append(r)
    assert len(sink) == 2
    assert load_dataset(dataset) == _records()


def test_reset_truncates_previous_run(tmp_path):
    dataset = tmp_path / "default.jsonl"
    dataset.write_text(json.dumps({"name": "Old"}) + "\n", encoding="utf-8")
    sink = ResultSink(dataset)
    sink.reset_dataset()
    assert load_dataset(dataset) == []


def test_load_dataset_skips_torn_line(tmp_path):
    dataset = tmp_path / "default.jsonl"
    dataset.write_text(json.dumps({"name": "A", "teamSize": 3}) + "\n{\"name\": \"B\", \"te", encoding="utf-8")
    records = load_dataset(dataset)
    assert [(r.name, r.team_size) for r in records] == [("A", 3)]


def test_concurrent_appends_are_all_kept(tmp_path):
    dataset = tmp_path / "default.jsonl"
    sink = ResultSink(dataset)

    def _append(i):
        for j in range(20):
            sink.append(CompanyRecord(name=f"{i}-{j}"))

    threads = [threading.Thread(target=_append, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(sink) == 160
    assert len(load_dataset(dataset)) == 160
    assert len({r.name for r in sink.snapshot()}) == 160
