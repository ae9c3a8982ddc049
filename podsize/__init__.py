"""podsize: отчёт о занимаемом контейнерами месте на диске."""

__version__ = "0.2.0"
