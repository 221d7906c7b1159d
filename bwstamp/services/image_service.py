"""Загрузка изображений с диска и запись результата.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование.
- Формат записи определяется расширением целевого файла (реестр Pillow).
"""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from bwstamp.errors import ImageDecodeError, ImageEncodeError, ImageNotFoundError
from bwstamp.models.image_model import ImageData

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и приводит его к 8-битному RGB.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGB) и размерами.

        Raises:
            ImageNotFoundError: если путь не существует или не указывает на файл.
            ImageDecodeError: если файл не распознан как изображение или повреждён.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise ImageNotFoundError(file_path, f"Файл не найден: {path}")

        try:
            with Image.open(path) as src:
                source_mode = src.mode
                # convert() forces a full decode, truncated files fail here
                pil_image = self._to_8bit(src).convert("RGB")
        except UnidentifiedImageError as exc:
            raise ImageDecodeError(file_path, f"Файл не является изображением: {path}") from exc
        except (OSError, SyntaxError, ValueError) as exc:
            raise ImageDecodeError(file_path, f"Не удалось декодировать изображение: {path}") from exc

        width, height = pil_image.size
        logger.debug("Loaded %s: %dx%d, mode %s", path, width, height, source_mode)
        return ImageData(pil_image=pil_image, width=width, height=height)

    def save_image(self, image: Image.Image, file_path: str | Path) -> None:
        """Записывает изображение; формат выводится из расширения `file_path`.

        Raises:
            ImageEncodeError: неизвестное расширение, нет прав, нет места и т.п.
        """
        try:
            image.save(file_path)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageEncodeError(file_path, f"Не удалось сохранить изображение: {file_path}") from exc
        logger.debug("Saved %s", file_path)

    # ---------- Вспомогательные функции ----------
    def _to_8bit(self, image: Image.Image) -> Image.Image:
        """
        16-битные одноканальные режимы ("I;16*", "I") сжимаются до 8 бит
        отбрасыванием младшего байта; Pillow при convert() их бы обрезал.
        """
        if image.mode != "I" and not image.mode.startswith("I;16"):
            return image
        arr = np.clip(np.asarray(image).astype(np.int64), 0, 0xFFFF)
        return Image.fromarray((arr >> 8).astype(np.uint8))
