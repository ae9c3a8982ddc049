"""Упорядочивание списка контейнеров на месте."""

from __future__ import annotations

from typing import List

from podsize.runtime.models import ContainerRecord
from podsize.settings.config import SortKey


def sort_containers(records: List[ContainerRecord], sort_key: SortKey | str | None) -> None:
    """Сортирует список на месте; длина списка не меняется."""

    key = sort_key if isinstance(sort_key, SortKey) else SortKey.parse(sort_key)
    if key is SortKey.SIZE:
        records.sort(key=lambda record: record.size.total, reverse=True)
    elif key is SortKey.RW_SIZE:
        records.sort(key=lambda record: record.size.rw_size, reverse=True)
    else:
        records.sort(key=lambda record: record.display_name)
