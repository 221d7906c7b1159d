"""Контроллер конвертации: оркестрация сервисов за один запуск.

SOLID:
- SRP: класс только упорядочивает шаги; обработка изображений вынесена в сервисы.
- DIP: сервисы подставляются полями dataclass, тесты могут передать свои.
Clean Code:
- Линейная последовательность без состояния между запусками.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bwstamp.errors import ImageNotFoundError
from bwstamp.services.file_service import FileService
from bwstamp.services.image_service import ImageService
from bwstamp.services.naming import derive_output_name
from bwstamp.services.overlay_service import OverlayService
from bwstamp.services.process_service import ProcessService

logger = logging.getLogger(__name__)


@dataclass
class ConvertController:
    """Превращает входной файл в чёрно-белую копию с оверлеем.

    Ответственности:
    - Проверка входного файла и загрузка через `ImageService`.
    - Сбор метаданных через `FileService`.
    - Перевод в оттенки серого через `ProcessService`.
    - Оверлей и водяной знак через `OverlayService`, запись результата.
    """
    file_service: FileService = field(default_factory=FileService)
    image_service: ImageService = field(default_factory=ImageService)
    process_service: ProcessService = field(default_factory=ProcessService)
    overlay_service: OverlayService = field(default_factory=OverlayService)

    def run(self, input_path: str) -> str:
        """Выполняет конвертацию и возвращает путь к записанному файлу.

        Raises:
            ImageNotFoundError: входной файл отсутствует или не читается.
            ImageDecodeError: файл не является изображением.
            ImageEncodeError: результат не удалось записать.
        """
        # size and time failures degrade to sentinels, only existence aborts
        metadata = self.file_service.probe(input_path)
        if not metadata.exists:
            raise ImageNotFoundError(input_path, f"Файл не найден: {input_path}")

        image_data = self.image_service.load_image(input_path)
        location = self.file_service.location(input_path)

        gray = self.process_service.to_grayscale(image_data.pil_image)
        canvas = self.process_service.to_displayable(gray)

        output_path = derive_output_name(input_path)

        lines = self.overlay_service.compose_lines(image_data, metadata, location)
        self.overlay_service.draw_lines(canvas, lines)
        self.overlay_service.draw_watermark(canvas)

        self.image_service.save_image(canvas, output_path)
        logger.debug("Converted %s -> %s", input_path, output_path)
        return output_path
