"""Отрисовка текстового оверлея и водяного знака.

Принципы:
- SRP: только растеризация текста поверх готового RGB-изображения.
- Раскладка задаётся `OverlayStyle`; методы рисования мутируют изображение на месте.
"""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from bwstamp.models.image_model import FileMetadata, ImageData
from bwstamp.models.overlay_model import OverlayStyle

logger = logging.getLogger(__name__)


class OverlayService:
    def __init__(self, style: OverlayStyle | None = None) -> None:
        self.style = style or OverlayStyle()
        self._line_font = ImageFont.load_default(size=self.style.font_size)
        self._watermark_font = ImageFont.load_default(size=self.style.watermark_font_size)

    def compose_lines(self, image_data: ImageData, metadata: FileMetadata, location: str) -> List[str]:
        """Четыре строки оверлея в порядке отрисовки.

        Размер усекается до целых килобайт (не округляется).
        """
        return [
            f"Resolution: {image_data.width}x{image_data.height}",
            f"Size: {int(metadata.size_kb)} KB",
            f"Modified: {metadata.modified}",
            location,
        ]

    def draw_lines(self, image: Image.Image, lines: Sequence[str]) -> None:
        """Рисует строки сверху вниз с фиксированным шагом, выравнивание по левому краю."""
        draw = ImageDraw.Draw(image)
        x, y0 = self.style.origin
        for i, line in enumerate(lines):
            draw.text((x, y0 + i * self.style.line_height), line, font=self._line_font, fill=self.style.color)

    def draw_watermark(self, image: Image.Image, text: str | None = None) -> None:
        """Рисует водяной знак вплотную к правому нижнему углу с отступом.

        Для изображений меньше текста координаты становятся отрицательными,
        и знак обрезается.
        """
        if text is None:
            text = self.style.watermark_text
        draw = ImageDraw.Draw(image)
        x, y = self.watermark_position(image.size, text)
        draw.text((x, y), text, font=self._watermark_font, fill=self.style.watermark_color)

    def watermark_position(self, size: Tuple[int, int], text: str) -> Tuple[int, int]:
        """Точка привязки текста, при которой его рамка прижата к углу."""
        left, top, right, bottom = self.watermark_bbox(text)
        text_width = right - left
        text_height = bottom - top
        width, height = size
        margin = self.style.watermark_margin
        x = width - text_width - margin - left
        y = height - text_height - margin - top
        logger.debug("Watermark %r (%dx%d) at (%d, %d)", text, text_width, text_height, x, y)
        return x, y

    def watermark_bbox(self, text: str) -> Tuple[int, int, int, int]:
        """Рамка текста водяного знака (left, top, right, bottom) при отрисовке в (0, 0)."""
        draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        left, top, right, bottom = draw.textbbox((0, 0), text, font=self._watermark_font)
        return int(left), int(top), int(right), int(bottom)
