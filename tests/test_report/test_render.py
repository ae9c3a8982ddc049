"""Тесты вывода отчёта."""

from __future__ import annotations

import io
import json
from typing import List

import pytest

from podsize.report import render
from podsize.runtime.models import ContainerRecord, SizeInfo


@pytest.fixture()
def records() -> List[ContainerRecord]:
    return [
        ContainerRecord(
            identifier="1111",
            names=["web"],
            image="nginx",
            status="Up",
            size=SizeInfo(root_fs_size=1048576, rw_size=1536),
        ),
        ContainerRecord(
            identifier="2222",
            names=[],
            image="postgres:16",
            size=SizeInfo(root_fs_size=2048, rw_size=512),
        ),
    ]


def test_table_layout(records: List[ContainerRecord]) -> None:
    lines = render.format_table(records).splitlines()

    assert lines[0] == f"{'NAME':<20} {'IMAGE':<30} {'RW SIZE':<12} {'ROOT SIZE':<12} TOTAL SIZE"
    assert lines[1] == "-" * 90
    assert lines[2] == f"{'web':<20} {'nginx':<30} {'1.5 KB':<12} {'1.0 MB':<12} 1.0 MB"
    assert lines[3] == f"{'<unnamed>':<20} {'postgres:16':<30} {'512 B':<12} {'2.0 KB':<12} 2.5 KB"
    assert lines[4:] == [
        "",
        "TOTAL:",
        "Read/Write: 2.0 KB",
        "Root FS:    1.0 MB",
        "Combined:   1.0 MB",
    ]


def test_totals_are_independent_of_order(records: List[ContainerRecord]) -> None:
    forward = render.summarize(records)
    backward = render.summarize(list(reversed(records)))
    assert forward == backward
    assert forward.rw_size == 1536 + 512
    assert forward.root_fs_size == 1048576 + 2048
    assert forward.combined == 1536 + 512 + 1048576 + 2048


def test_json_preserves_order_without_totals(records: List[ContainerRecord]) -> None:
    reordered = list(reversed(records))
    payload = json.loads(render.format_json(reordered))

    assert [entry["Id"] for entry in payload] == ["2222", "1111"]
    assert payload[1] == {
        "Id": "1111",
        "Names": ["web"],
        "Image": "nginx",
        "Status": "Up",
        "Size": {"RootFsSize": 1048576, "RwSize": 1536},
    }
    assert isinstance(payload, list)
    assert "TOTAL" not in render.format_json(reordered)


def test_json_is_indented(records: List[ContainerRecord]) -> None:
    text = render.format_json(records)
    assert text.startswith("[\n  {\n    \"Id\"")
    assert text.endswith("]\n")


def test_render_writes_to_given_stream(records: List[ContainerRecord]) -> None:
    stream = io.StringIO()
    render.render_table(records, stream)
    assert stream.getvalue().startswith("NAME")


def test_render_defaults_to_stdout(records: List[ContainerRecord], capsys: pytest.CaptureFixture[str]) -> None:
    render.render_json(records)
    assert json.loads(capsys.readouterr().out)[0]["Id"] == "1111"


def test_render_empty_notice(capsys: pytest.CaptureFixture[str]) -> None:
    render.render_empty()
    assert capsys.readouterr().out == "No containers found.\n"


def test_json_keeps_non_ascii_text_readable() -> None:
    record = ContainerRecord(identifier="3333", names=["сервер"], image="реестр/образ:1")
    text = render.format_json([record])

    assert "сервер" in text
    assert "реестр/образ:1" in text
    assert "\\u0441" not in text
    assert json.loads(text)[0]["Names"] == ["сервер"]
