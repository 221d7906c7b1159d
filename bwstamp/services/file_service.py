"""Запросы к файловой системе: существование, размер, время изменения.

Принципы:
- SRP: только метаданные файла, без работы с пикселями.
- Ни один метод не бросает исключений: при ошибке возвращается
  значение-заглушка (`SIZE_UNAVAILABLE`, `TIME_UNAVAILABLE`).
"""
from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from bwstamp.models.image_model import SIZE_UNAVAILABLE, TIME_UNAVAILABLE, FileMetadata

logger = logging.getLogger(__name__)

LOCATION_UNAVAILABLE = "Location: Unavailable"


class FileService:
    def exists(self, file_path: str | Path) -> bool:
        """True, если файл удаётся открыть на чтение."""
        # ValueError: path with an embedded NUL byte
        try:
            with open(file_path, "rb"):
                return True
        except (OSError, ValueError) as exc:
            logger.debug("Cannot open %r for reading: %s", file_path, exc)
            return False

    def size_kb(self, file_path: str | Path) -> float:
        try:
            return os.stat(file_path).st_size / 1024.0
        except (OSError, ValueError) as exc:
            logger.debug("Cannot stat %r: %s", file_path, exc)
            return SIZE_UNAVAILABLE

    def modified_time(self, file_path: str | Path) -> str:
        """Время последнего изменения в формате ctime (локальное время).

        Пример: ``Mon Oct 19 12:00:00 2026``. Завершающий перевод строки
        обрезается.
        """
        try:
            mtime = os.stat(file_path).st_mtime
        except (OSError, ValueError) as exc:
            logger.debug("Cannot stat %r: %s", file_path, exc)
            return TIME_UNAVAILABLE
        return time.ctime(mtime).rstrip("\n")

    def location(self, file_path: str | Path) -> str:
        """Строка местоположения съёмки.

        Заглушка: GPS из EXIF не читается, результат всегда одинаков.
        """
        return LOCATION_UNAVAILABLE

    def probe(self, file_path: str | Path) -> FileMetadata:
        return FileMetadata(
            exists=self.exists(file_path),
            size_kb=self.size_kb(file_path),
            modified=self.modified_time(file_path),
        )
