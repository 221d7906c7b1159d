"""Параметры оформления текстового оверлея и водяного знака."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

WATERMARK_TEXT = "<azlanio>"


@dataclass(frozen=True)
class OverlayStyle:
    """Фиксированная раскладка оверлея.

    Fields:
        font_size: Размер шрифта строк оверлея, px.
        origin: Левый верхний угол первой строки (x, y).
        line_height: Шаг между строками, px.
        color: Цвет строк оверлея.
        watermark_text: Текст водяного знака.
        watermark_font_size: Размер шрифта водяного знака (меньше строк).
        watermark_margin: Отступ водяного знака от правого нижнего угла, px.
        watermark_color: Цвет водяного знака.
    """
    font_size: int = 14
    origin: Tuple[int, int] = (10, 14)
    line_height: int = 20
    color: RGB = (255, 255, 255)
    watermark_text: str = WATERMARK_TEXT
    watermark_font_size: int = 12
    watermark_margin: int = 10
    watermark_color: RGB = (200, 200, 200)
