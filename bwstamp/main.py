"""Точка входа в приложение."""
import logging
import sys

from bwstamp.app import BwStampApp

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main() -> int:
    """Настраивает логирование, выполняет один запуск и возвращает код выхода."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    app = BwStampApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
