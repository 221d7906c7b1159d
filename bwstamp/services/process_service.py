from __future__ import annotations

import numpy as np
from PIL import Image


class ProcessService:
    def to_grayscale(self, image: Image.Image) -> Image.Image:
        """
        Преобразование изображения в оттенки серого (8-бит, L).
        Веса ITU-R 601-2: L = 0.299 R + 0.587 G + 0.114 B.
        """
        if image.mode == "L":
            return image.copy()
        return image.convert("L")

    def to_displayable(self, image: Image.Image) -> Image.Image:
        """
        Размножает единственный канал в три одинаковых (RGB),
        чтобы на изображении можно было рисовать цветом без смены режима.
        """
        gray = self._image_to_gray_np(image)
        rgb = np.repeat(gray[:, :, np.newaxis], 3, axis=2)
        # (H, W, 3) uint8 maps to mode "RGB"
        return Image.fromarray(rgb)

    # ---------- Вспомогательные функции ----------
    def _image_to_gray_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает numpy-массив uint8 (H, W) в градациях серого.
        """
        gray = self.to_grayscale(image)
        return np.asarray(gray, dtype=np.uint8)
