"""Точка входа в приложение."""
import sys

from resizer.app import ResizerApp


def main() -> None:
    """Разбирает аргументы, запускает конвейер и завершает процесс с его кодом."""
    app = ResizerApp()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
