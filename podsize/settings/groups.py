"""Группы настроек отчёта с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from podsize.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from podsize.settings.validators import (
    CompositeValidator,
    EnumValidator,
    NonEmptyStringValidator,
    TypeValidator,
    Validator,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("table", "json")


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def get(self, key: str, default: Any = None) -> Any:
        """Возвращает значение настройки."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        """Применяет соответствующий валидатор и возвращает результат."""

        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет группу из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class ReportSettings(SettingsGroup):
    """Параметры выборки, сортировки и формата отчёта."""

    group_name = "report"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "show_all": False,
            "sort_by": "name",
            "output_format": "table",
            "runtime": "podman",
        }

    def _setup_validators(self) -> None:
        # sort_by намеренно не ограничен набором: неизвестный ключ сортирует по имени
        self._validators = {
            "show_all": TypeValidator(bool),
            "sort_by": TypeValidator(str),
            "output_format": EnumValidator(OUTPUT_FORMATS),
            "runtime": CompositeValidator([TypeValidator(str), NonEmptyStringValidator()]),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования (только поток stderr)."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "level": "WARNING",
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "level": EnumValidator(LOG_LEVELS),
        }
