"""Исключения, возникающие при опросе контейнерного рантайма."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

LOGGER = logging.getLogger(__name__)


class RuntimeQueryError(Exception):
    """Базовое исключение для ошибок получения снимка контейнеров."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст ошибки."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.debug("%s | context=%s", message, self.context)


class SubprocessFailure(RuntimeQueryError):
    """Команда рантайма не запустилась или завершилась с ненулевым кодом."""

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        *,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"{' '.join(self.command)} failed: {reason}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(
            message,
            context={"command": self.command, "returncode": returncode},
        )


class DecodeFailure(RuntimeQueryError):
    """Вывод команды не соответствует ожидаемой JSON-схеме."""

    def __init__(self, reason: str, *, snippet: str = "") -> None:
        self.reason = reason
        self.snippet = snippet
        super().__init__(
            f"Failed to parse JSON: {reason}",
            context={"reason": reason, "snippet": snippet[:80]},
        )
