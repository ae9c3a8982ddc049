"""Точка входа podsize."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from podsize import __version__
from podsize.app import create_application
from podsize.cli import parse_config
from podsize.runtime.exceptions import RuntimeQueryError
from podsize.settings.exceptions import SettingsError
from podsize.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает опции, строит отчёт и возвращает код завершения."""

    configure_logging()
    try:
        config = parse_config(argv)
    except SettingsError as exc:
        LOGGER.error("Invalid options: %s", exc)
        return 1

    configure_logging(config.log_level)
    LOGGER.debug("podsize %s starting with %s", __version__, config)

    app = create_application(config)
    try:
        return app.run()
    except RuntimeQueryError as exc:
        LOGGER.error("Error getting containers: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
