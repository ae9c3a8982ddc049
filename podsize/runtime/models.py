"""Структуры данных для описания контейнеров и их размеров."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from podsize.runtime.exceptions import DecodeFailure

UNNAMED = "<unnamed>"


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Ищет ключ без учёта регистра, как это делает encoding/json рантайма."""

    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None


def _as_size(value: Any, field_name: str) -> int:
    if value is None:
        return 0
    # bool наследуется от int, но размером не является
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeFailure(f"field {field_name!r} must be an integer, got {value!r}")
    if value < 0:
        raise DecodeFailure(f"field {field_name!r} must not be negative, got {value}")
    return value


def _as_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeFailure(f"field {field_name!r} must be a string, got {value!r}")
    return value


@dataclass(slots=True)
class SizeInfo:
    """Размеры корневой файловой системы и слоя записи контейнера в байтах."""

    root_fs_size: int = 0
    rw_size: int = 0

    @property
    def total(self) -> int:
        return self.root_fs_size + self.rw_size

    def to_dict(self) -> Dict[str, Any]:
        return {"RootFsSize": self.root_fs_size, "RwSize": self.rw_size}

    @classmethod
    def from_dict(cls, data: Any) -> "SizeInfo":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise DecodeFailure(f"field 'Size' must be an object, got {data!r}")
        return cls(
            root_fs_size=_as_size(_lookup(data, "RootFsSize"), "RootFsSize"),
            rw_size=_as_size(_lookup(data, "RwSize"), "RwSize"),
        )


@dataclass(slots=True)
class ContainerRecord:
    """Одна запись из `ps --size --format json`."""

    identifier: str
    names: List[str] = field(default_factory=list)
    image: str = ""
    status: str = ""
    size: SizeInfo = field(default_factory=SizeInfo)

    @property
    def display_name(self) -> str:
        """Первое имя контейнера либо заглушка `<unnamed>`."""

        return self.names[0] if self.names else UNNAMED

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует запись в тех же ключах, что выдаёт рантайм."""

        return {
            "Id": self.identifier,
            "Names": list(self.names),
            "Image": self.image,
            "Status": self.status,
            "Size": self.size.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRecord":
        """Строит запись из JSON-объекта, проверяя типы полей."""

        if not isinstance(data, dict):
            raise DecodeFailure(f"expected a container object, got {type(data).__name__}")

        names: Optional[Any] = _lookup(data, "Names")
        if names is None:
            names = []
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            raise DecodeFailure(f"field 'Names' must be a list of strings, got {names!r}")

        return cls(
            identifier=_as_text(_lookup(data, "Id"), "Id"),
            names=list(names),
            image=_as_text(_lookup(data, "Image"), "Image"),
            status=_as_text(_lookup(data, "Status"), "Status"),
            size=SizeInfo.from_dict(_lookup(data, "Size")),
        )
