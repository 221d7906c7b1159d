"""Консольный ввод-вывод: приглашение, сообщения об успехе и ошибках."""
from __future__ import annotations

from typing import TextIO

from bwstamp.errors import ConversionError, ImageDecodeError, ImageEncodeError, ImageNotFoundError

PROMPT = "Enter input image filename (e.g., photo.jpg): "


class Console:
    def __init__(self, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    def read_path(self) -> str:
        """Читает одну строку со stdin; обрезается только перевод строки.

        Приглашение печатается лишь для интерактивного терминала.
        """
        if self._is_interactive():
            self.stdout.write(PROMPT)
            self.stdout.flush()
        return self.stdin.readline().rstrip("\r\n")

    def report_success(self, output_path: str) -> None:
        print(f"✅ Black & White image with overlay saved as: {output_path}", file=self.stdout)

    def report_error(self, error: ConversionError) -> None:
        print(format_error(error), file=self.stderr)

    def _is_interactive(self) -> bool:
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())


def format_error(error: ConversionError) -> str:
    if isinstance(error, ImageNotFoundError):
        return f"Error: File does not exist - {error.path}"
    if isinstance(error, ImageDecodeError):
        return f"Error: Could not load image {error.path}"
    if isinstance(error, ImageEncodeError):
        return f"Error: Could not save image {error.path}"
    return f"Error: {error}"
