"""Имя выходного файла."""
from __future__ import annotations

OUTPUT_SUFFIX = "_bw"


def derive_output_name(file_path: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """Вставляет `suffix` перед последней точкой пути.

    Точка ищется во всей строке, включая каталоги. Без точки суффикс
    дописывается в конец: ``photo.jpg -> photo_bw.jpg``, ``image -> image_bw``.
    """
    dot = file_path.rfind(".")
    if dot == -1:
        return file_path + suffix
    return file_path[:dot] + suffix + file_path[dot:]
