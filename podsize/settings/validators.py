"""Валидаторы значений настроек."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Tuple


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, \"\") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет, что значение принадлежит заданному типу или набору типов."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def _expected_name(self) -> str:
        if isinstance(self.expected_type, tuple):
            return ", ".join(t.__name__ for t in self.expected_type)
        return self.expected_type.__name__

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, self.expected_type):
            return True, ""
        return (
            False,
            f"Expected value of type {self._expected_name()}, got {type(value).__name__}",
        )


class EnumValidator(Validator):
    """Проверяет, что значение принадлежит конечному набору."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> Tuple[bool, str]:
        if value in self.allowed_values:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class NonEmptyStringValidator(Validator):
    """Строка должна содержать хотя бы один непробельный символ."""

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, str) and value.strip():
            return True, ""
        return False, "Value must be a non-empty string"


class CompositeValidator(Validator):
    """Комбинирует несколько валидаторов и возвращает первую ошибку."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> Tuple[bool, str]:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""
