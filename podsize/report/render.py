"""Вывод отчёта: выровненная таблица с итогами или JSON-документ.

Отчёт целиком собирается в строку (format_table, format_json) и только потом
записывается в поток, поэтому частичного вывода не бывает.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TextIO

from podsize.runtime.models import ContainerRecord
from podsize.utils.helpers import format_size

NO_CONTAINERS_MESSAGE = "No containers found."

ROW_FORMAT = "{:<20} {:<30} {:<12} {:<12} {}"
HEADER = ("NAME", "IMAGE", "RW SIZE", "ROOT SIZE", "TOTAL SIZE")
RULE_WIDTH = 90


@dataclass(frozen=True, slots=True)
class SizeTotals:
    """Суммарные размеры по всем контейнерам отчёта."""

    rw_size: int = 0
    root_fs_size: int = 0

    @property
    def combined(self) -> int:
        return self.rw_size + self.root_fs_size


def summarize(records: Iterable[ContainerRecord]) -> SizeTotals:
    rw_total = 0
    root_total = 0
    for record in records:
        rw_total += record.size.rw_size
        root_total += record.size.root_fs_size
    return SizeTotals(rw_size=rw_total, root_fs_size=root_total)


def format_table(records: Sequence[ContainerRecord]) -> str:
    """Строит таблицу: заголовок, разделитель, строки и блок TOTAL."""

    lines: List[str] = [ROW_FORMAT.format(*HEADER), "-" * RULE_WIDTH]
    for record in records:
        lines.append(
            ROW_FORMAT.format(
                record.display_name,
                record.image,
                format_size(record.size.rw_size),
                format_size(record.size.root_fs_size),
                format_size(record.size.total),
            )
        )

    totals = summarize(records)
    lines.extend(
        [
            "",
            "TOTAL:",
            f"Read/Write: {format_size(totals.rw_size)}",
            f"Root FS:    {format_size(totals.root_fs_size)}",
            f"Combined:   {format_size(totals.combined)}",
        ]
    )
    return "\n".join(lines) + "\n"


def format_json(records: Sequence[ContainerRecord]) -> str:
    """Сериализует записи в текущем порядке, без итоговых полей."""

    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False) + "\n"


def render_table(records: Sequence[ContainerRecord], stream: Optional[TextIO] = None) -> None:
    _write(format_table(records), stream)


def render_json(records: Sequence[ContainerRecord], stream: Optional[TextIO] = None) -> None:
    _write(format_json(records), stream)


def render_empty(stream: Optional[TextIO] = None) -> None:
    _write(NO_CONTAINERS_MESSAGE + "\n", stream)


def _write(text: str, stream: Optional[TextIO]) -> None:
    out = stream or sys.stdout
    out.write(text)
    out.flush()
