"""Исключения подсистемы настроек отчёта."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовое исключение для ошибок настроек с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.debug("%s | context=%s", message, self.context)


class SettingsNotFoundError(SettingsError):
    """Возникает, когда запрошен ключ, которого нет в группе."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Сигнализирует о некорректном значении опции."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )
