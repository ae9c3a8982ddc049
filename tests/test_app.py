"""Тесты конвейера отчёта."""

from __future__ import annotations

import io
import json
from typing import List, Sequence

import pytest

from podsize.app import ReportApp, create_application
from podsize.runtime.client import RuntimeClient
from podsize.runtime.exceptions import DecodeFailure
from podsize.settings.config import OutputFormat, ReportConfig, SortKey

SAMPLE = json.dumps(
    [
        {"Id": "1", "Names": ["small"], "Image": "alpine", "Size": {"RootFsSize": 100, "RwSize": 0}},
        {"Id": "2", "Names": ["large"], "Image": "fedora", "Size": {"RootFsSize": 300, "RwSize": 0}},
        {"Id": "3", "Names": ["medium"], "Image": "debian", "Size": {"RootFsSize": 150, "RwSize": 50}},
    ]
)


class FakeClient:
    """Клиент рантайма с заранее заданным выводом."""

    def __init__(self, output: str) -> None:
        self.output = output
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> str:
        self.calls.append(list(args))
        return self.output


def _run(config: ReportConfig, output: str) -> str:
    stream = io.StringIO()
    app = ReportApp(config=config, client=FakeClient(output), stream=stream)  # type: ignore[arg-type]
    assert app.run() == 0
    return stream.getvalue()


def test_table_sorted_by_total_size() -> None:
    text = _run(ReportConfig(sort_key=SortKey.SIZE), SAMPLE)
    rows = [line.split()[0] for line in text.splitlines()[2:5]]
    assert rows == ["large", "medium", "small"]
    assert "Combined:   600 B" in text


def test_json_sorted_by_name() -> None:
    text = _run(ReportConfig(output_format=OutputFormat.JSON), SAMPLE)
    payload = json.loads(text)
    assert [entry["Names"][0] for entry in payload] == ["large", "medium", "small"]
    assert "TOTAL" not in text


@pytest.mark.parametrize("output_format", list(OutputFormat))
@pytest.mark.parametrize("sort_key", list(SortKey))
def test_empty_list_short_circuits(output_format: OutputFormat, sort_key: SortKey) -> None:
    text = _run(ReportConfig(sort_key=sort_key, output_format=output_format), "[]")
    assert text == "No containers found.\n"


@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_null_snapshot_prints_notice(output_format: OutputFormat) -> None:
    text = _run(ReportConfig(output_format=output_format), "null\n")
    assert text == "No containers found.\n"


def test_show_all_requests_stopped_containers() -> None:
    client = FakeClient("[]")
    ReportApp(config=ReportConfig(show_all=True), client=client).run()  # type: ignore[arg-type]
    assert client.calls == [["ps", "--size", "--format", "json", "-a"]]


def test_decode_failure_propagates_without_output() -> None:
    stream = io.StringIO()
    app = ReportApp(config=ReportConfig(), client=FakeClient("{broken"), stream=stream)  # type: ignore[arg-type]
    with pytest.raises(DecodeFailure):
        app.run()
    assert stream.getvalue() == ""


def test_create_application_builds_client_from_config() -> None:
    app = create_application(ReportConfig(runtime="docker"))
    assert isinstance(app.client, RuntimeClient)
    assert app.client.binary == "docker"
