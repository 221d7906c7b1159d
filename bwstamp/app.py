from __future__ import annotations

import logging
import sys
from typing import TextIO

from bwstamp.controllers.convert_controller import ConvertController
from bwstamp.errors import ConversionError
from bwstamp.ui.console import Console

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class BwStampApp:
    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        controller: ConvertController | None = None,
    ) -> None:
        self._console = Console(
            stdin=stdin or sys.stdin,
            stdout=stdout or sys.stdout,
            stderr=stderr or sys.stderr,
        )
        self._controller = controller or ConvertController()

    def run(self) -> int:
        """Один проход: путь со stdin -> файл с суффиксом. Возвращает код выхода."""
        input_path = self._console.read_path()
        try:
            output_path = self._controller.run(input_path)
        except ConversionError as exc:
            logger.debug("Conversion failed: %s", exc)
            self._console.report_error(exc)
            return EXIT_FAILURE

        self._console.report_success(output_path)
        return EXIT_OK
