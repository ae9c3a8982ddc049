"""Итоговая конфигурация отчёта, передаваемая по конвейеру."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from podsize.settings.groups import LoggingSettings, ReportSettings

LOGGER = logging.getLogger(__name__)


class SortKey(str, Enum):
    """Ключи сортировки контейнеров."""

    NAME = "name"
    SIZE = "size"
    RW_SIZE = "rwsize"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortKey":
        """Неизвестное или пустое значение означает сортировку по имени."""

        if not value:
            return cls.NAME
        try:
            return cls(value)
        except ValueError:
            LOGGER.warning("Unknown sort key %r, sorting by name", value)
            return cls.NAME


class OutputFormat(str, Enum):
    """Форматы вывода отчёта."""

    TABLE = "table"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Разрешённые опции одного запуска."""

    show_all: bool = False
    sort_key: SortKey = SortKey.NAME
    output_format: OutputFormat = OutputFormat.TABLE
    runtime: str = "podman"
    log_level: str = "WARNING"


def resolve_config(report: ReportSettings, logging_settings: LoggingSettings) -> ReportConfig:
    """Собирает неизменяемый ReportConfig из проверенных групп настроек."""

    return ReportConfig(
        show_all=report.get("show_all"),
        sort_key=SortKey.parse(report.get("sort_by")),
        output_format=OutputFormat(report.get("output_format")),
        runtime=report.get("runtime"),
        log_level=logging_settings.get("level"),
    )
