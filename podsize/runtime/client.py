"""Обёртка над CLI контейнерного рантайма (podman и совместимые)."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, List, Optional, Sequence

from podsize.runtime.exceptions import SubprocessFailure

LOGGER = logging.getLogger(__name__)

DEFAULT_RUNTIME = "podman"

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class RuntimeClient:
    """Запускает команды рантайма синхронно и возвращает их stdout."""

    def __init__(
        self,
        binary: str = DEFAULT_RUNTIME,
        *,
        runner: Optional[Runner] = None,
    ) -> None:
        self.binary = binary  # имя или путь исполняемого файла
        self._runner: Runner = runner or subprocess.run

    def build_command(self, args: Sequence[str]) -> List[str]:
        return [self.binary, *args]

    def run(self, args: Sequence[str]) -> str:
        """Выполняет `<binary> args...` и возвращает stdout целиком.

        Одна попытка, без таймаута: вызов блокирует процесс до завершения
        команды. Любой сбой запуска или ненулевой код возврата превращается в
        SubprocessFailure.
        """

        command = self.build_command(args)
        LOGGER.debug("Running %s", " ".join(command))
        try:
            completed = self._runner(command, capture_output=True, text=True, check=True)
        except FileNotFoundError as exc:
            raise SubprocessFailure(command, f"executable not found ({exc})") from exc
        except subprocess.CalledProcessError as exc:
            raise SubprocessFailure(
                command,
                f"exit status {exc.returncode}",
                returncode=exc.returncode,
                stderr=exc.stderr or "",
            ) from exc
        except OSError as exc:
            raise SubprocessFailure(command, str(exc)) from exc

        stdout = completed.stdout or ""
        LOGGER.debug("%s returned %d bytes", self.binary, len(stdout))
        return stdout
