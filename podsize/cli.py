"""Разбор аргументов командной строки в ReportConfig."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from podsize import __version__
from podsize.settings.config import ReportConfig, resolve_config
from podsize.settings.groups import LoggingSettings, ReportSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podsize",
        description="Report disk usage of containers reported by the container runtime.",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_all",
        action="store_true",
        help="show all containers (default shows just running)",
    )
    parser.add_argument(
        "--sort",
        dest="sort_by",
        default="name",
        metavar="KEY",
        help="sort by name, size or rwsize (default: name)",
    )
    parser.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="output in JSON format",
    )
    parser.add_argument(
        "--runtime",
        default="podman",
        help="container runtime command to query (default: podman)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        metavar="LEVEL",
        help="DEBUG, INFO, WARNING or ERROR; diagnostics go to stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> ReportConfig:
    """Разбирает argv и прогоняет значения через валидаторы групп настроек."""

    namespace = build_parser().parse_args(argv)

    report = ReportSettings()
    report.from_dict(
        {
            "show_all": namespace.show_all,
            "sort_by": namespace.sort_by,
            "output_format": "json" if namespace.output_json else "table",
            "runtime": namespace.runtime,
        }
    )
    logging_settings = LoggingSettings()
    logging_settings.set("level", namespace.log_level)
    return resolve_config(report, logging_settings)
