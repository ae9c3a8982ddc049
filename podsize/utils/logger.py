"""Настройка логирования: только stderr, stdout остаётся под отчёт."""

from __future__ import annotations

import logging
import sys
from typing import Final, Optional, TextIO, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return cast(int, level)


def configure_logging(level_name: str = "WARNING", *, stream: Optional[TextIO] = None) -> None:
    """Настраивает корневой логгер с единственным обработчиком на stderr."""

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=resolve_log_level(level_name),
        handlers=[stream_handler],
        force=True,
    )

