"""Получение списка контейнеров через CLI контейнерного рантайма."""
