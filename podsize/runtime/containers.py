"""Сбор снимка контейнеров с размерами через `ps --size --format json`."""

from __future__ import annotations

import json
import logging
from typing import Any, List

from podsize.runtime.client import RuntimeClient
from podsize.runtime.exceptions import DecodeFailure
from podsize.runtime.models import ContainerRecord

LOGGER = logging.getLogger(__name__)


def build_ps_args(include_all: bool) -> List[str]:
    """Аргументы запроса: размеры запрашиваются всегда, `-a` по флагу."""

    args = ["ps", "--size", "--format", "json"]
    if include_all:
        args.append("-a")
    return args


def list_containers(client: RuntimeClient, *, include_all: bool = False) -> List[ContainerRecord]:
    """Возвращает контейнеры в порядке, в котором их выдал рантайм."""

    output = client.run(build_ps_args(include_all))
    records = [ContainerRecord.from_dict(entry) for entry in _parse_json_output(output)]
    LOGGER.info("Collected %d container(s) (all=%s)", len(records), include_all)
    return records


def _parse_json_output(output: str) -> List[Any]:
    """Разбирает JSON-массив либо поток JSON-объектов по одному на строку.

    Пустой вывод и литерал `null` означают отсутствие контейнеров.
    """

    if not output.strip():
        return []
    try:
        data = json.loads(output)
    except json.JSONDecodeError:
        return _parse_json_lines(output)

    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return [data]
    raise DecodeFailure(
        f"expected a JSON array of containers, got {type(data).__name__}",
        snippet=output,
    )


def _parse_json_lines(output: str) -> List[Any]:
    entries: List[Any] = []
    for number, line in enumerate(output.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            parsed = json.loads(line)
        except json.JSONDecodeError as exc:
            raise DecodeFailure(f"line {number}: {exc.msg}", snippet=line) from exc
        if not isinstance(parsed, dict):
            raise DecodeFailure(
                f"line {number}: expected a JSON object, got {type(parsed).__name__}",
                snippet=line,
            )
        entries.append(parsed)
    return entries
