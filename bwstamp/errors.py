"""Ошибки конвертации, видимые пользователю.

Каждая ошибка завершает запуск с кодом 1; сообщение для консоли
формирует `bwstamp.ui.console`.
"""
from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Базовая ошибка запуска; хранит путь к проблемному файлу."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(message)
        self.path = str(path)


class ImageNotFoundError(ConversionError, FileNotFoundError):
    """Входной файл не существует или недоступен для чтения."""


class ImageDecodeError(ConversionError, ValueError):
    """Файл существует, но не декодируется как изображение."""


class ImageEncodeError(ConversionError, OSError):
    """Результат не удалось записать: расширение, права доступа, место на диске."""
