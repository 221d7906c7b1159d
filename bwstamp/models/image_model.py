"""Модели данных для изображений и метаданных файла.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

SIZE_UNAVAILABLE = -1.0
TIME_UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения.

    Fields:
        pil_image: Изображение PIL (RGB, 8 бит на канал).
        width: Ширина, px.
        height: Высота, px.
    """
    pil_image: Image.Image
    width: int
    height: int


@dataclass(frozen=True)
class FileMetadata:
    """Сведения о файле, собранные один раз за запуск.

    Fields:
        exists: Файл можно открыть на чтение.
        size_kb: Размер в килобайтах или `SIZE_UNAVAILABLE`.
        modified: Время изменения в формате ctime или `TIME_UNAVAILABLE`.
    """
    exists: bool
    size_kb: float = SIZE_UNAVAILABLE
    modified: str = TIME_UNAVAILABLE
