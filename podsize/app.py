"""Конвейер отчёта: сбор -> сортировка -> вывод."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from podsize.report import render
from podsize.report.ordering import sort_containers
from podsize.runtime import containers
from podsize.runtime.client import RuntimeClient
from podsize.settings.config import OutputFormat, ReportConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class ReportApp:
    """Один запуск отчёта с явно переданными конфигурацией и клиентом."""

    config: ReportConfig
    client: RuntimeClient
    stream: Optional[TextIO] = None

    def run(self) -> int:
        """Выполняет конвейер и возвращает код завершения.

        Ошибки сбора (RuntimeQueryError) не перехватываются: их обрабатывает
        точка входа.
        """

        records = containers.list_containers(self.client, include_all=self.config.show_all)
        if not records:
            render.render_empty(self.stream)
            return 0

        sort_containers(records, self.config.sort_key)
        LOGGER.debug("Sorted %d record(s) by %s", len(records), self.config.sort_key.value)

        if self.config.output_format is OutputFormat.JSON:
            render.render_json(records, self.stream)
        else:
            render.render_table(records, self.stream)
        return 0


def create_application(
    config: ReportConfig,
    client: Optional[RuntimeClient] = None,
    stream: Optional[TextIO] = None,
) -> ReportApp:
    """Фабрика приложения; клиент по умолчанию строится из config.runtime."""

    return ReportApp(
        config=config,
        client=client or RuntimeClient(config.runtime),
        stream=stream,
    )
